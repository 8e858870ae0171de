"""Drive service module for Google API integration."""

from .api_service import DriveApiService
from .types import DriveFile
from .query_builder import DriveQueryBuilder, quote_value

__all__ = [
    # Service layer
    "DriveApiService",

    # Data types
    "DriveFile",

    # Query builder
    "DriveQueryBuilder",
    "quote_value",
]
