from datetime import datetime
from typing import Optional, Tuple
from dataclasses import dataclass, field

from .constants import FOLDER_MIME_TYPE, GOOGLE_APPS_MIME_PREFIX
from ...utils.datetime import format_rfc3339


@dataclass(frozen=True)
class DriveFile:
    """
    Represents the metadata of a file or folder in Google Drive.
    Args:
        file_id: The unique identifier for the file.
        name: The name of the file.
        mime_type: The MIME type of the file.
        size: The size of the file in bytes (None for folders and Google Workspace documents).
        created_time: When the file was created.
        modified_time: When the file was last modified.
        parents: Parent folder IDs. Only populated when the file is fetched by id.
    """
    file_id: Optional[str] = None
    name: Optional[str] = None
    mime_type: Optional[str] = None
    size: Optional[int] = None
    created_time: Optional[datetime] = None
    modified_time: Optional[datetime] = None
    parents: Tuple[str, ...] = field(default_factory=tuple)

    def is_folder(self) -> bool:
        """
        Check if this entry is a folder.
        Returns:
            True if the MIME type is the Drive folder type.
        """
        return self.mime_type == FOLDER_MIME_TYPE

    def is_google_doc(self) -> bool:
        """
        Check if this file is a Google Workspace document (Docs, Sheets, Slides, ...).
        Returns:
            True for non-folder Google Workspace MIME types.
        """
        return bool(self.mime_type) and self.mime_type.startswith(GOOGLE_APPS_MIME_PREFIX) \
            and not self.is_folder()

    def human_readable_size(self) -> str:
        """
        Get human-readable file size.
        Returns:
            Size in human-readable format (e.g., "1.2 MB").
        """
        if self.size is None:
            return "Unknown"

        if self.size == 0:
            return "0 B"

        size = self.size
        units = ["B", "KB", "MB", "GB", "TB"]
        unit_index = 0

        while size >= 1024 and unit_index < len(units) - 1:
            size /= 1024
            unit_index += 1

        return f"{size:.1f} {units[unit_index]}"

    def get_parent_folder_id(self) -> Optional[str]:
        """
        Get the first parent folder ID.
        Returns:
            The first parent folder ID, or None if no parents were fetched.
        """
        return self.parents[0] if self.parents else None

    def is_in_folder(self, folder_id: str) -> bool:
        """
        Check if this file is in a specific parent folder.
        Args:
            folder_id: ID of the folder to check
        Returns:
            True if the folder is one of the fetched parents.
        """
        return folder_id in self.parents

    def to_dict(self) -> dict:
        """
        Converts the DriveFile instance to the Drive API's dictionary representation.
        Returns:
            A dictionary containing the file metadata.
        """
        result = {}
        if self.file_id:
            result["id"] = self.file_id
        if self.name:
            result["name"] = self.name
        if self.mime_type:
            result["mimeType"] = self.mime_type
        if self.size is not None:
            result["size"] = str(self.size)
        if self.created_time:
            result["createdTime"] = format_rfc3339(self.created_time)
        if self.modified_time:
            result["modifiedTime"] = format_rfc3339(self.modified_time)
        if self.parents:
            result["parents"] = list(self.parents)
        return result

    def __str__(self):
        if self.is_folder():
            return f"[Folder] {self.name}"
        return f"{self.name} ({self.human_readable_size()})"

    def __repr__(self):
        return f"DriveFile(id={self.file_id!r}, name={self.name!r}, mime_type={self.mime_type!r})"
