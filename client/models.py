"""Client response models for the File Manager API client.

This module re-exports the response models from the API layer and defines
client-specific models that don't exist there.
"""

from pydantic import BaseModel

from api.models import (
    ErrorResponse,
    MessageResponse,
    RenameLocalResponse,
    RenameResponse,
    UploadResponse,
)
from models.file_entry import FileEntry as _FileEntry
from models.file_entry import UploadedFile

__all__ = [
    # Re-exported from api.models
    "ErrorResponse",
    "MessageResponse",
    "RenameLocalResponse",
    "RenameResponse",
    "UploadResponse",
    "UploadedFile",
    # Client-specific models
    "FileEntry",
    "HealthResponse",
    "format_file_size",
]

SIZE_UNITS = ("B", "KB", "MB", "GB")


def format_file_size(size: int) -> str:
    """Format a byte count for display, e.g. 1536 -> "1.5 KB".

    Divides by 1024 until the value drops below 1024 or the largest unit
    (GB) is reached, and always shows one decimal.
    """
    value = float(size)
    unit_index = 0
    while value >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        value /= 1024
        unit_index += 1
    return f"{value:.1f} {SIZE_UNITS[unit_index]}"


class FileEntry(_FileEntry):
    """A listed file, as seen by the client."""

    @property
    def human_size(self) -> str:
        """Size formatted for display."""
        return format_file_size(self.size)


class HealthResponse(BaseModel):
    """Response model for the health check endpoint.

    Attributes:
        status: Health status ("healthy").
    """

    status: str
