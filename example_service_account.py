"""
Example: List a Drive folder with a service account

Prerequisites:
1. Create a service account in Google Cloud Console and enable the Drive API
2. Download its JSON key
3. Share the target folder with the service account's email, or grant it
   domain-wide delegation and set GDRIVE_IMPERSONATE_USER

Usage:
    export GDRIVE_SERVICE_ACCOUNT_KEY="$(cat service-account.json)"
    export GDRIVE_TARGET_FOLDER_NAME="Reports"   # or GDRIVE_TARGET_FOLDER_ID
    python example_service_account.py [mime/type]
"""

import logging
import sys

from google_drive_client import DriveFolderClient, GoogleDriveClientError


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    mime_type = sys.argv[1] if len(sys.argv) > 1 else None

    try:
        client = DriveFolderClient.from_env()
        files = client.list_files(mime_type)
    except GoogleDriveClientError as e:
        print(f"ERROR: {e}")
        return 1

    print(f"{len(files)} files:")
    for drive_file in files:
        modified = drive_file.modified_time.strftime("%Y-%m-%d %H:%M") if drive_file.modified_time else "-"
        print(f"  {drive_file.file_id}  {modified}  {drive_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
