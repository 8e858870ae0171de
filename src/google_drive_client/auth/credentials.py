import json
import logging
from functools import cache
from typing import Optional, List

from google.oauth2 import service_account
from googleapiclient.discovery import build, build_from_document
from googleapiclient.discovery_cache import get_static_doc

from ..config import is_blank, SERVICE_ACCOUNT_KEY
from ..exceptions import ConfigurationError
from ..services.drive.constants import DRIVE_READONLY_SCOPE, DRIVE_API_NAME, DRIVE_API_VERSION
from ..utils.log_sanitizer import sanitize_for_logging

logger = logging.getLogger(__name__)

SCOPES = [DRIVE_READONLY_SCOPE]


def get_service_account_credentials(
        service_account_key: Optional[str],
        impersonate_user: Optional[str] = None,
        scopes: Optional[List[str]] = None
) -> service_account.Credentials:
    """
    Build read-only service account credentials from a raw JSON key.

    Delegation to impersonate_user is not checked here; an account that is
    not allowed to be impersonated fails on the first API request.

    Args:
        service_account_key: Contents of the service account JSON key file
        impersonate_user: Optional account to act as
        scopes: OAuth scopes to request (default: Drive read-only)

    Returns:
        Scoped, optionally delegated, service account credentials

    Raises:
        ConfigurationError: If the key is missing, blank or not a JSON object
    """
    if is_blank(service_account_key):
        raise ConfigurationError(f"Service account key is required: {SERVICE_ACCOUNT_KEY}")

    try:
        info = json.loads(service_account_key)
    except ValueError as e:
        raise ConfigurationError(f"Service account key is not valid JSON: {e}") from e
    if not isinstance(info, dict):
        raise ConfigurationError("Service account key must be a JSON object")

    credentials = service_account.Credentials.from_service_account_info(info, scopes=scopes or SCOPES)

    if not is_blank(impersonate_user):
        sanitized = sanitize_for_logging(impersonate_user=impersonate_user)
        logger.info("Delegating service account credentials to %s", sanitized['impersonate_user'])
        credentials = credentials.with_subject(impersonate_user)

    return credentials


@cache
def get_drive_discovery_document() -> Optional[str]:
    """
    Drive v3 discovery document bundled with google-api-python-client.
    Loaded once per process and shared by every client.
    """
    return get_static_doc(DRIVE_API_NAME, DRIVE_API_VERSION)


def get_drive_service(credentials):
    """
    Build a Drive v3 API resource with its own authorized HTTP transport.

    Args:
        credentials: google-auth credentials

    Returns:
        The Drive API resource
    """
    document = get_drive_discovery_document()
    if document is None:
        return build(DRIVE_API_NAME, DRIVE_API_VERSION, credentials=credentials, cache_discovery=False)
    return build_from_document(document, credentials=credentials)
