"""Read-only, folder-scoped Google Drive client authenticated with a service account."""

from .client import DriveFolderClient
from .config import DriveClientConfig
from .services.drive import DriveFile, DriveQueryBuilder
from .exceptions import (
    GoogleDriveClientError, ConfigurationError, ValidationError, TRANSPORT_FAULTS,
    NotFoundError, FolderNotFoundError, DriveFileNotFoundError, AmbiguousNameError
)

__all__ = [
    "DriveFolderClient",
    "DriveClientConfig",
    "DriveFile",
    "DriveQueryBuilder",
    "GoogleDriveClientError",
    "ConfigurationError",
    "ValidationError",
    "TRANSPORT_FAULTS",
    "NotFoundError",
    "FolderNotFoundError",
    "DriveFileNotFoundError",
    "AmbiguousNameError",
]
