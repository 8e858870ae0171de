from typing import Optional, List, Any
import logging

from googleapiclient.errors import HttpError

from ...utils.log_sanitizer import sanitize_for_logging
from ...exceptions import (
    ValidationError, FolderNotFoundError, DriveFileNotFoundError, AmbiguousNameError
)
from .types import DriveFile
from .query_builder import DriveQueryBuilder
from . import utils
from .constants import LIST_FILES_FIELDS, FIND_FOLDER_FIELDS, GET_FILE_FIELDS

logger = logging.getLogger(__name__)


class DriveApiService:
    """
    Service layer for read-only Drive API operations.

    Every method issues exactly one files.list or files.get request. Errors
    from the HTTP and auth layers propagate unchanged, except a 404 on
    files.get which becomes DriveFileNotFoundError.
    """

    def __init__(self, service: Any):
        """
        Initialize Drive service.

        Args:
            service: The Drive v3 API resource
        """
        self._service = service

    def query(self) -> DriveQueryBuilder:
        """
        Create a new DriveQueryBuilder.

        Returns:
            DriveQueryBuilder instance for method chaining
        """
        return DriveQueryBuilder()

    def list_files(self, folder_id: str, mime_type: Optional[str] = None) -> List[DriveFile]:
        """
        Lists the non-trashed direct children of a folder.

        Only the first page of results is returned; the page token in the
        response is not followed.

        Args:
            folder_id: The parent folder id.
            mime_type: Optional MIME type filter.

        Returns:
            DriveFile objects in the order the API returned them.
        """
        builder = self.query().in_parents(folder_id).not_trashed()
        if mime_type:
            builder.mime_type(mime_type)
        query = builder.build()

        sanitized = sanitize_for_logging(folder_id=folder_id, mime_type=mime_type, query=query)
        logger.info(
            "Listing files in folder_id=%s, mime_type=%s",
            sanitized['folder_id'], sanitized['mime_type']
        )
        logger.debug("Drive query: %s", sanitized['query'])

        result = self._service.files().list(q=query, fields=LIST_FILES_FIELDS).execute()
        files_data = result.get('files', [])

        logger.info("Found %d files", len(files_data))
        return [utils.from_google_file(file_data) for file_data in files_data]

    def find_folder_by_name(self, name: str) -> str:
        """
        Finds the id of the single non-trashed folder with the given name.

        Args:
            name: Exact folder name.

        Returns:
            The folder id.

        Raises:
            FolderNotFoundError: If no folder has this name.
            AmbiguousNameError: If more than one folder has this name.
        """
        query = self.query().name_equals(name).folders_only().not_trashed().build()

        sanitized = sanitize_for_logging(folder_name=name)
        logger.info("Looking up folder by name %s", sanitized['folder_name'])

        result = self._service.files().list(q=query, fields=FIND_FOLDER_FIELDS).execute()
        folders = result.get('files', [])

        if not folders:
            raise FolderNotFoundError(f"Folder not found: {name}")
        if len(folders) > 1:
            raise AmbiguousNameError(f"Multiple folders found with name: {name}")

        return folders[0]['id']

    def get_file(self, file_id: str) -> DriveFile:
        """
        Retrieves the metadata of a file, including its parent folder ids.

        Args:
            file_id: The file id.

        Returns:
            A DriveFile for the requested id.

        Raises:
            ValidationError: If file_id is blank.
            DriveFileNotFoundError: If the API reports the id as not found.
        """
        if not file_id or not file_id.strip():
            raise ValidationError("file_id is required")

        sanitized = sanitize_for_logging(file_id=file_id)
        logger.info("Retrieving file %s", sanitized['file_id'])

        try:
            file_data = self._service.files().get(fileId=file_id, fields=GET_FILE_FIELDS).execute()
        except HttpError as e:
            if e.resp.status == 404:
                raise DriveFileNotFoundError(f"File not found: {file_id}") from e
            raise

        return utils.from_google_file(file_data)
