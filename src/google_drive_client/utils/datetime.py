from datetime import datetime, timezone
from typing import Optional

import tzlocal


def convert_datetime_to_local_timezone(date_time: datetime) -> datetime:
    """
    Converts a given datetime object to a local-timezone-aware datetime.
    Args:
        date_time: The datetime object to be converted.

    Returns:
        A datetime object in the local timezone.
    """
    return datetime.astimezone(date_time, tzlocal.get_localzone())


def parse_rfc3339(value: Optional[str]) -> Optional[datetime]:
    """
    Parses an RFC 3339 timestamp as returned by the Drive API
    (e.g. "2025-01-15T10:00:00.000Z") into a local-timezone datetime.

    Args:
        value: The timestamp string.

    Returns:
        The parsed datetime, or None if value is empty.

    Raises:
        ValueError: If the value is not a valid timestamp.
    """
    if not value:
        return None
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    return convert_datetime_to_local_timezone(datetime.fromisoformat(value))


def format_rfc3339(date_time: datetime) -> str:
    """Formats a datetime back into the Drive API's UTC timestamp form."""
    utc = date_time.astimezone(timezone.utc).replace(tzinfo=None)
    return utc.isoformat(timespec='milliseconds') + 'Z'
