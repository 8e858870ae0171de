"""
Folder-scoped Google Drive client.

A DriveFolderClient authenticates with a service account, optionally
impersonating a user, and answers two questions about one target folder:
which files it contains, and what the metadata of a given file is.
"""

import logging
from typing import Optional, List, Mapping, Any

from .config import DriveClientConfig, is_blank
from .auth.credentials import get_service_account_credentials, get_drive_service
from .services.drive.api_service import DriveApiService
from .services.drive.constants import ROOT_FOLDER_ID
from .services.drive.types import DriveFile

logger = logging.getLogger(__name__)


class DriveFolderClient:
    """
    Read-only client for the files of one Drive folder.

    The target folder is chosen by, in order: target_folder_id, a lookup of
    target_folder_name, or the Drive root. A name lookup is repeated on every
    list_files call, so renaming or duplicating the folder between calls
    changes the result.

    list_files returns only the first page of results.

    Each client owns its own HTTP transport, which is not thread-safe. Use
    one client per thread.

    Usage Examples:
        client = DriveFolderClient.from_mapping({
            "service_account_key": key_json,
            "target_folder_name": "Reports",
        })
        pdfs = client.list_files("application/pdf")
        details = client.get_file(pdfs[0].file_id)
    """

    def __init__(self, config: DriveClientConfig):
        """
        Initialize the client and build its credentials.

        Args:
            config: Client options

        Raises:
            ConfigurationError: If the service account key is missing, blank or malformed
        """
        self._target_folder_id = config.target_folder_id
        self._target_folder_name = config.target_folder_name

        credentials = get_service_account_credentials(
            config.service_account_key, config.impersonate_user
        )
        self._service = get_drive_service(credentials)
        self._drive = DriveApiService(self._service)

    @classmethod
    def from_mapping(cls, params: Mapping[str, str]) -> "DriveFolderClient":
        """
        Create a client from a flat mapping of options.

        Args:
            params: Option mapping, see DriveClientConfig.from_mapping

        Returns:
            DriveFolderClient instance
        """
        return cls(DriveClientConfig.from_mapping(params))

    @classmethod
    def from_env(cls) -> "DriveFolderClient":
        """Create a client from GDRIVE_* environment variables."""
        return cls(DriveClientConfig.from_env())

    @property
    def target_folder_id(self) -> Optional[str]:
        return self._target_folder_id

    @property
    def target_folder_name(self) -> Optional[str]:
        return self._target_folder_name

    @property
    def service(self) -> Any:
        """The underlying Drive v3 API resource."""
        return self._service

    def resolve_folder_id(self) -> str:
        """
        Determine the folder to list.

        Returns:
            target_folder_id as given, the id found for target_folder_name, or "root"

        Raises:
            FolderNotFoundError: If target_folder_name matches no folder
            AmbiguousNameError: If target_folder_name matches several folders
        """
        if not is_blank(self._target_folder_id):
            return self._target_folder_id

        if not is_blank(self._target_folder_name):
            return self.find_folder_by_name(self._target_folder_name)

        return ROOT_FOLDER_ID

    def find_folder_by_name(self, name: str) -> str:
        """Id of the single non-trashed folder called name."""
        return self._drive.find_folder_by_name(name)

    def list_files(self, mime_type: Optional[str] = None) -> List[DriveFile]:
        """
        List the non-trashed files directly inside the target folder.

        Args:
            mime_type: Optional MIME type to filter on

        Returns:
            The first page of files, in the order the API returned them
        """
        folder_id = self.resolve_folder_id()
        return self._drive.list_files(folder_id, mime_type)

    def get_file(self, file_id: str) -> DriveFile:
        """
        Fetch the metadata of a file, including its parent folder ids.

        Args:
            file_id: The file id

        Returns:
            DriveFile for the id

        Raises:
            DriveFileNotFoundError: If the file does not exist or is not visible
        """
        return self._drive.get_file(file_id)

    def __repr__(self):
        return (
            f"DriveFolderClient(target_folder_id={self._target_folder_id!r}, "
            f"target_folder_name={self._target_folder_name!r})"
        )
