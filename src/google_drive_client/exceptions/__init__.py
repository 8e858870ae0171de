from .base import GoogleDriveClientError, ConfigurationError, ValidationError, TRANSPORT_FAULTS
from .drive import (
    DriveError, NotFoundError, FolderNotFoundError, DriveFileNotFoundError, AmbiguousNameError
)

__all__ = [
    "GoogleDriveClientError",
    "ConfigurationError",
    "ValidationError",
    "TRANSPORT_FAULTS",
    "DriveError",
    "NotFoundError",
    "FolderNotFoundError",
    "DriveFileNotFoundError",
    "AmbiguousNameError",
]
