DRIVE_READONLY_SCOPE = "https://www.googleapis.com/auth/drive.readonly"

DRIVE_API_NAME = "drive"
DRIVE_API_VERSION = "v3"

ROOT_FOLDER_ID = "root"
FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
GOOGLE_APPS_MIME_PREFIX = "application/vnd.google-apps."

# Field projections requested from files.list / files.get
LIST_FILES_FIELDS = "nextPageToken, files(id, name, mimeType, size, modifiedTime, createdTime)"
FIND_FOLDER_FIELDS = "files(id, name)"
GET_FILE_FIELDS = "id, name, mimeType, size, modifiedTime, createdTime, parents"
