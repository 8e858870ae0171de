from .credentials import SCOPES, get_service_account_credentials, get_drive_service, get_drive_discovery_document

__all__ = [
    "SCOPES",
    "get_service_account_credentials",
    "get_drive_service",
    "get_drive_discovery_document",
]
