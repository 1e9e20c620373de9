"""Metadata snapshot models for directory entries."""

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Keys accepted by the lister's sort_by argument
SortKey = Literal["name", "size", "createdAt", "modifiedAt"]
SortOrder = Literal["asc", "desc"]

SORT_KEYS: tuple[str, ...] = ("name", "size", "createdAt", "modifiedAt")


def _to_utc(timestamp: float) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def creation_time(stat_result: os.stat_result) -> datetime:
    """Return the best available creation time for a stat result.

    Uses the platform birth time where the OS reports one (macOS, BSD,
    Windows) and falls back to the inode change time elsewhere.

    Args:
        stat_result: Result of os.stat() for the entry.

    Returns:
        Creation time as a UTC datetime.
    """
    birthtime = getattr(stat_result, "st_birthtime", None)
    if birthtime is None:
        birthtime = stat_result.st_ctime
    return _to_utc(birthtime)


class FileEntry(BaseModel):
    """One directory entry's metadata at listing time.

    FileEntry is a read model: it is rebuilt on every listing and never
    persisted. Field names serialize in camelCase.

    Args:
        name: Base name of the entry (a direct child, no separators).
        size: Size in bytes.
        created_at: Creation time (birth time, or change time as fallback).
        modified_at: Last modification time.
        path: Full path of the entry. Only set for local-directory listings.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(description="Base name of the entry")
    size: int = Field(ge=0, description="Size in bytes")
    created_at: datetime = Field(alias="createdAt", description="Creation time")
    modified_at: datetime = Field(alias="modifiedAt", description="Last modification time")
    path: str | None = Field(default=None, description="Path of the entry (local listings only)")

    @classmethod
    def from_stat(
        cls,
        name: str,
        stat_result: os.stat_result,
        path: Path | None = None,
    ) -> "FileEntry":
        """Build an entry from an os.stat() result.

        Args:
            name: Base name of the entry.
            stat_result: Result of os.stat() for the entry.
            path: Full path to expose in the response, if any.

        Returns:
            A new FileEntry snapshot.
        """
        return cls(
            name=name,
            size=stat_result.st_size,
            created_at=creation_time(stat_result),
            modified_at=_to_utc(stat_result.st_mtime),
            path=str(path) if path is not None else None,
        )

    def sort_value(self, sort_by: str):
        """Return the comparison key for a sort field.

        Names compare case-insensitively; names equal apart from case put
        lowercase first. The other fields compare by value.
        """
        if sort_by == "name":
            return (self.name.casefold(), self.name.swapcase())
        if sort_by == "size":
            return self.size
        if sort_by == "createdAt":
            return self.created_at
        if sort_by == "modifiedAt":
            return self.modified_at
        raise ValueError(f"Unknown sort field: {sort_by}")


class UploadedFile(BaseModel):
    """Description of a file stored by an upload.

    Args:
        name: Generated name the file was stored under.
        size: Number of bytes written.
        path: Path of the stored file.
    """

    name: str
    size: int = Field(ge=0)
    path: str
