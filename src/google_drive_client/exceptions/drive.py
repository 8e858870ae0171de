from .base import GoogleDriveClientError


class DriveError(GoogleDriveClientError):
    """Base exception for Drive lookup errors."""
    pass


class NotFoundError(DriveError):
    """Raised when a folder or file cannot be found."""
    pass


class FolderNotFoundError(NotFoundError):
    """Raised when no folder matches the requested name."""
    pass


class DriveFileNotFoundError(NotFoundError):
    """Raised when a file id does not exist or is not visible to the credential."""
    pass


class AmbiguousNameError(DriveError):
    """Raised when more than one folder matches the requested name."""
    pass
