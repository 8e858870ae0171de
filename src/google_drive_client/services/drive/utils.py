from typing import Optional, Dict, Any
import logging

from .types import DriveFile
from ...utils.datetime import parse_rfc3339

logger = logging.getLogger(__name__)


def parse_datetime_field(field_value: Optional[str]):
    """
    Parse a timestamp field from a Drive API response.

    Args:
        field_value: RFC 3339 string from the API

    Returns:
        Local-timezone datetime, or None if missing or unparseable
    """
    try:
        return parse_rfc3339(field_value)
    except (ValueError, TypeError) as e:
        logger.warning("Failed to parse datetime: %s", e)
        return None


def parse_size_field(field_value: Optional[Any]) -> Optional[int]:
    """Drive reports sizes as decimal strings; folders and Google docs have none."""
    if field_value is None:
        return None
    try:
        return int(field_value)
    except (ValueError, TypeError) as e:
        logger.warning("Failed to parse size: %s", e)
        return None


def from_google_file(google_file: Dict[str, Any]) -> DriveFile:
    """
    Create a DriveFile instance from a Drive API files resource.

    Args:
        google_file: Dictionary containing file data from the Drive API

    Returns:
        DriveFile instance populated with the data from the dictionary
    """
    return DriveFile(
        file_id=google_file.get('id'),
        name=google_file.get('name'),
        mime_type=google_file.get('mimeType'),
        size=parse_size_field(google_file.get('size')),
        created_time=parse_datetime_field(google_file.get('createdTime')),
        modified_time=parse_datetime_field(google_file.get('modifiedTime')),
        parents=tuple(google_file.get('parents') or ()),
    )
