"""
Log sanitization utilities to prevent PII and sensitive data leakage.

Folder names, Drive queries and impersonated account addresses can identify
people, so they are reduced to a safe summary before being logged.
"""

import re


def sanitize_email(email: str) -> str:
    """
    Sanitize email address for logging by showing only domain and length.

    Args:
        email: Email address to sanitize

    Returns:
        Sanitized email representation

    Example:
        "user@example.com" -> "***@example.com (16 chars)"
    """
    if not email or '@' not in email:
        return "[invalid-email]"

    domain = email.split('@', 1)[1]
    return f"***@{domain} ({len(email)} chars)"


def sanitize_name(name: str, max_preview_length: int = 3) -> str:
    """
    Sanitize a file or folder name for logging.

    Args:
        name: Name to sanitize
        max_preview_length: Number of leading characters to keep

    Returns:
        Sanitized name representation
    """
    if not name:
        return "[no-name]"

    preview = name[:max_preview_length]
    if len(name) > max_preview_length:
        preview += "..."
    return f"'{preview}' ({len(name)} chars)"


def sanitize_query(query: str, max_length: int = 40) -> str:
    """
    Sanitize a Drive query for logging.

    Quoted literals are masked, leaving only the predicate structure
    (field names and operators) visible.

    Args:
        query: Drive query string
        max_length: Maximum length to show

    Returns:
        Sanitized query representation
    """
    if not query:
        return "[empty-query]"

    sanitized = re.sub(r"'(?:[^'\\]|\\.)*'", "'***'", query)

    if len(sanitized) > max_length:
        sanitized = sanitized[:max_length] + "..."

    return f"{sanitized} ({len(query)} chars)"


def sanitize_file_id(file_id: str) -> str:
    """
    Sanitize a Drive file or folder id for logging.

    Args:
        file_id: Id to sanitize

    Returns:
        Shortened id representation
    """
    if not file_id:
        return "[no-file-id]"

    if len(file_id) <= 12:
        return f"[id: {file_id}]"
    return f"[id: {file_id[:6]}...{file_id[-4:]}]"


def sanitize_for_logging(**kwargs) -> dict:
    """
    Sanitize multiple fields for logging in one call.

    Args:
        **kwargs: Fields to sanitize (subject, folder_name, query, file_id, etc.)

    Returns:
        Dictionary with sanitized values
    """
    sanitized = {}

    for key, value in kwargs.items():
        if key in ('subject', 'impersonate_user'):
            sanitized[key] = sanitize_email(value) if value else None
        elif key in ('name', 'folder_name'):
            sanitized[key] = sanitize_name(value) if value else None
        elif key == 'query':
            sanitized[key] = sanitize_query(value) if value else None
        elif key in ('file_id', 'folder_id'):
            sanitized[key] = sanitize_file_id(value) if value else None
        else:
            # Non-identifying fields (mime types, counts) pass through
            sanitized[key] = value

    return sanitized
