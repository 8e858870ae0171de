"""
Configuration for the Drive folder client.

Options are plain strings. They can be supplied directly, from a flat mapping
(short keys or the dotted property names used by server configs) or from
environment variables.
"""

import os
from dataclasses import dataclass
from typing import Optional, Mapping

SERVICE_ACCOUNT_KEY = "service_account_key"
TARGET_FOLDER_ID = "target_folder_id"
TARGET_FOLDER_NAME = "target_folder_name"
IMPERSONATE_USER = "impersonate_user"

OPTIONS = (SERVICE_ACCOUNT_KEY, TARGET_FOLDER_ID, TARGET_FOLDER_NAME, IMPERSONATE_USER)

# Dotted property names accepted as aliases of the short keys
PROPERTY_ALIASES = {
    "gdrive.service.account.key": SERVICE_ACCOUNT_KEY,
    "gdrive.target.folder.id": TARGET_FOLDER_ID,
    "gdrive.target.folder.name": TARGET_FOLDER_NAME,
    "gdrive.impersonate.user": IMPERSONATE_USER,
}

ENV_VARS = {
    SERVICE_ACCOUNT_KEY: "GDRIVE_SERVICE_ACCOUNT_KEY",
    TARGET_FOLDER_ID: "GDRIVE_TARGET_FOLDER_ID",
    TARGET_FOLDER_NAME: "GDRIVE_TARGET_FOLDER_NAME",
    IMPERSONATE_USER: "GDRIVE_IMPERSONATE_USER",
}


def is_blank(value: Optional[str]) -> bool:
    """True for None, empty and whitespace-only strings."""
    return value is None or not value.strip()


@dataclass(frozen=True)
class DriveClientConfig:
    """
    Options for DriveFolderClient.
    Args:
        service_account_key: Raw service account JSON key. Required when building a client.
        target_folder_id: Folder to list. Takes priority over target_folder_name.
        target_folder_name: Name of the folder to list, looked up on every call.
        impersonate_user: Account to impersonate through domain-wide delegation.
    """
    service_account_key: Optional[str] = None
    target_folder_id: Optional[str] = None
    target_folder_name: Optional[str] = None
    impersonate_user: Optional[str] = None

    @classmethod
    def from_mapping(cls, params: Mapping[str, str]) -> "DriveClientConfig":
        """
        Create a config from a flat mapping. Unknown keys are ignored; a short
        key wins over its dotted alias when both are present.
        """
        values = {}
        for key, value in params.items():
            option = PROPERTY_ALIASES.get(key)
            if option is not None:
                values.setdefault(option, value)
        for option in OPTIONS:
            if option in params:
                values[option] = params[option]
        return cls(**values)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DriveClientConfig":
        """Create a config from GDRIVE_* environment variables."""
        if environ is None:
            environ = os.environ
        return cls(**{option: environ.get(name) for option, name in ENV_VARS.items()})
