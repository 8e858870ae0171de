"""Google API services wrapped by this client."""

from . import drive

__all__ = [
    "drive",
]
