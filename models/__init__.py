"""File manager data models package.

This package contains the FileEntry read model, the domain faults, and the
filesystem operations behind the API (listing, mutation, upload storage).
"""

from models.errors import (
    EntryAlreadyExistsError,
    EntryNotFoundError,
    FileManagerError,
    InvalidArgumentError,
    PayloadTooLargeError,
)
from models.file_entry import FileEntry, UploadedFile
from models.file_store import (
    FileStore,
    delete_path,
    filter_entries,
    list_directory,
    rename_path,
    sort_entries,
)

__all__ = [
    "FileEntry",
    "UploadedFile",
    "FileStore",
    "list_directory",
    "filter_entries",
    "sort_entries",
    "delete_path",
    "rename_path",
    "FileManagerError",
    "EntryNotFoundError",
    "EntryAlreadyExistsError",
    "InvalidArgumentError",
    "PayloadTooLargeError",
]
