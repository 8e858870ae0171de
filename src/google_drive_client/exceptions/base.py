from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError


class GoogleDriveClientError(Exception):
    """Base exception for all Google Drive client errors."""
    pass


class ConfigurationError(GoogleDriveClientError):
    """Raised when required configuration is missing or malformed."""
    pass


class ValidationError(GoogleDriveClientError):
    """Raised when input validation fails."""
    pass


# Faults from the transport and auth layers are not wrapped; they reach the
# caller exactly as the client libraries raised them.
TRANSPORT_FAULTS = (HttpError, GoogleAuthError, OSError)
