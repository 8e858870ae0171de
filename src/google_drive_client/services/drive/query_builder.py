from typing import List
import logging
import re

from .constants import FOLDER_MIME_TYPE
from ...exceptions import ValidationError

logger = logging.getLogger(__name__)

_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')


def quote_value(value: str) -> str:
    """
    Quote a string literal for the Drive query language.

    Backslashes and single quotes are escaped with a backslash. Control
    characters cannot be represented and are rejected.

    Args:
        value: The literal to quote

    Returns:
        The value wrapped in single quotes

    Raises:
        ValidationError: If the value is not a string or contains control characters
    """
    if not isinstance(value, str):
        raise ValidationError(f"Query value must be a string, got {type(value).__name__}")
    if _CONTROL_CHARS.search(value):
        raise ValidationError("Query value cannot contain control characters")

    escaped = value.replace('\\', '\\\\').replace("'", "\\'")
    return f"'{escaped}'"


class DriveQueryBuilder:
    """
    Builder for Drive files.list query predicates.
    Clauses are joined with "and" in the order they are added.

    Example usage:
        query = (DriveQueryBuilder()
            .in_parents(folder_id)
            .not_trashed()
            .mime_type("text/plain")
            .build())
        # "'<folder_id>' in parents and trashed=false and mimeType='text/plain'"
    """

    def __init__(self):
        self._clauses: List[str] = []

    def in_parents(self, folder_id: str) -> "DriveQueryBuilder":
        """
        Restrict to direct children of a folder.
        Args:
            folder_id: Parent folder id
        Returns:
            Self for method chaining
        """
        self._clauses.append(f"{quote_value(folder_id)} in parents")
        return self

    def name_equals(self, name: str) -> "DriveQueryBuilder":
        """
        Restrict to items with exactly this name.
        Args:
            name: Item name
        Returns:
            Self for method chaining
        """
        self._clauses.append(f"name={quote_value(name)}")
        return self

    def mime_type(self, mime_type: str) -> "DriveQueryBuilder":
        """
        Restrict to items of one MIME type.
        Args:
            mime_type: MIME type, e.g. "application/pdf"
        Returns:
            Self for method chaining
        """
        self._clauses.append(f"mimeType={quote_value(mime_type)}")
        return self

    def folders_only(self) -> "DriveQueryBuilder":
        """Restrict to folders."""
        return self.mime_type(FOLDER_MIME_TYPE)

    def not_trashed(self) -> "DriveQueryBuilder":
        """Exclude items in the trash."""
        self._clauses.append("trashed=false")
        return self

    def build(self) -> str:
        """
        Assemble the query string.
        Returns:
            The clauses joined with " and "
        Raises:
            ValidationError: If no clause has been added
        """
        if not self._clauses:
            raise ValidationError("Query must contain at least one clause")
        query = " and ".join(self._clauses)
        logger.debug("Built Drive query with %d clauses", len(self._clauses))
        return query

    def __str__(self):
        return " and ".join(self._clauses)
