"""Directory listing, entry mutation and upload storage.

This module contains the filesystem side of the file manager:

- list_directory: enumerate, filter and sort the children of a directory
- delete_path / rename_path: mutate a single entry addressed by path
- FileStore: the same operations bound to the managed uploads directory,
  plus storing uploaded files under collision-free names

Every operation is a direct pass-through to filesystem primitives. Nothing
is cached; each listing is a fresh scan. Failures surface as the faults in
models/errors.py, or as the original OSError for anything unexpected.
"""

import logging
import os
import time
from pathlib import Path
from typing import BinaryIO, Callable, Iterable

from models.errors import (
    EntryAlreadyExistsError,
    EntryNotFoundError,
    InvalidArgumentError,
    PayloadTooLargeError,
)
from models.file_entry import SORT_KEYS, FileEntry, UploadedFile

logger = logging.getLogger(__name__)

# Default upload limit, matching the original server (10 MB)
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024

# Read size used when copying an upload stream to disk
UPLOAD_CHUNK_SIZE = 64 * 1024


# ===== Listing =====


def filter_entries(entries: Iterable[FileEntry], search: str | None = None) -> list[FileEntry]:
    """Keep entries whose name contains the search text (case-insensitive).

    Args:
        entries: Entries to filter.
        search: Substring to look for. Empty or None keeps everything.

    Returns:
        The matching entries in their original order.
    """
    if not search:
        return list(entries)

    search_lower = search.lower()
    return [entry for entry in entries if search_lower in entry.name.lower()]


def sort_entries(
    entries: Iterable[FileEntry],
    sort_by: str | None = None,
    sort_order: str = "asc",
) -> list[FileEntry]:
    """Sort entries by one of the supported fields.

    Unknown or missing sort fields leave the order untouched. The sort is
    stable in both directions, so entries with equal keys keep their
    enumeration order.

    Args:
        entries: Entries to sort.
        sort_by: One of "name", "size", "createdAt", "modifiedAt".
        sort_order: "desc" for descending; any other value sorts ascending.

    Returns:
        A new sorted list.
    """
    if sort_by not in SORT_KEYS:
        return list(entries)

    return sorted(
        entries,
        key=lambda entry: entry.sort_value(sort_by),
        reverse=sort_order == "desc",
    )


def scan_directory(directory: str | os.PathLike, include_path: bool = False) -> list[FileEntry]:
    """Take a metadata snapshot of every immediate child of a directory.

    Entries that disappear between enumeration and stat are skipped.

    Args:
        directory: Directory to scan.
        include_path: Whether to fill in FileEntry.path.

    Returns:
        One FileEntry per child, in enumeration order.

    Raises:
        EntryNotFoundError: If the directory does not exist.
        OSError: For any other failure reading the directory.
    """
    directory = Path(directory)
    entries: list[FileEntry] = []

    try:
        with os.scandir(directory) as iterator:
            for dir_entry in iterator:
                try:
                    stat_result = dir_entry.stat()
                except FileNotFoundError:
                    logger.debug("Skipping %s: removed during listing", dir_entry.path)
                    continue
                entries.append(
                    FileEntry.from_stat(
                        dir_entry.name,
                        stat_result,
                        path=directory / dir_entry.name if include_path else None,
                    )
                )
    except FileNotFoundError as e:
        raise EntryNotFoundError("Directory not found", path=str(directory)) from e

    return entries


def list_directory(
    directory: str | os.PathLike,
    search: str | None = None,
    sort_by: str | None = None,
    sort_order: str = "asc",
    include_path: bool = False,
) -> list[FileEntry]:
    """List a directory with optional filtering and sorting.

    The filter is applied before the sort.

    Args:
        directory: Directory to list.
        search: Case-insensitive substring to match against names.
        sort_by: Field to sort by; unknown values mean no sorting.
        sort_order: "desc" for descending; anything else (default "asc")
            sorts ascending.
        include_path: Whether each entry carries its full path.

    Returns:
        The matching entries, possibly empty.

    Raises:
        EntryNotFoundError: If the directory does not exist.
        OSError: For any other failure reading the directory.
    """
    entries = scan_directory(directory, include_path=include_path)
    entries = filter_entries(entries, search)
    return sort_entries(entries, sort_by, sort_order)


# ===== Mutation =====


def validate_entry_name(name: str | None, message: str) -> str:
    """Check that a name refers to a direct child of a directory.

    Args:
        name: Proposed entry name.
        message: Error message used when the name is missing.

    Returns:
        The validated name.

    Raises:
        InvalidArgumentError: If the name is empty, contains a path
            separator, or is "." or "..".
    """
    if not name:
        raise InvalidArgumentError(message)
    if "/" in name or "\\" in name or os.sep in name:
        raise InvalidArgumentError("File name must not contain path separators")
    if name in (".", ".."):
        raise InvalidArgumentError(f"'{name}' is not a valid file name")
    return name


def delete_path(path: str | os.PathLike) -> None:
    """Delete a single file.

    The unlink call doubles as the existence check, so there is no gap between
    checking for the file and removing it.

    Args:
        path: Path of the file to delete.

    Raises:
        EntryNotFoundError: If the file does not exist.
        OSError: For any other failure (permissions, directories, etc.).
    """
    try:
        os.unlink(path)
    except FileNotFoundError as e:
        raise EntryNotFoundError("File not found", path=str(path)) from e

    logger.info("Deleted %s", path)


def rename_path(old_path: str | os.PathLike, new_name: str | None) -> Path:
    """Rename a file in place, keeping it in the same directory.

    Checks run in order: new name present, old entry exists, new name
    free. If any check fails nothing is changed. A concurrent writer can
    still claim the new name between the last check and the rename.

    Args:
        old_path: Path of the existing file.
        new_name: New base name for the file.

    Returns:
        The path the file was renamed to.

    Raises:
        InvalidArgumentError: If new_name is missing or not a plain name.
        EntryNotFoundError: If the old file does not exist.
        EntryAlreadyExistsError: If the new name is already taken.
        OSError: For any other failure.
    """
    old_path = Path(old_path)
    validate_entry_name(new_name, "New filename is required")
    new_path = old_path.parent / new_name

    # Follows symlinks, so a dangling link counts as missing
    if not os.path.exists(old_path):
        raise EntryNotFoundError("File not found", path=str(old_path))

    # A missing target is the expected outcome here
    if os.path.lexists(new_path):
        raise EntryAlreadyExistsError(path=str(new_path))

    try:
        os.rename(old_path, new_path)
    except FileNotFoundError as e:
        raise EntryNotFoundError("File not found", path=str(old_path)) from e
    except FileExistsError as e:
        raise EntryAlreadyExistsError(path=str(new_path)) from e

    logger.info("Renamed %s to %s", old_path, new_path)
    return new_path


# ===== Managed uploads directory =====


class FileStore:
    """File operations bound to the managed uploads directory.

    The root directory is passed in at construction; there is no global
    instance. Route handlers receive a FileStore through dependency
    injection (see api/dependencies.py).

    Attributes:
        root: The managed uploads directory.
        max_upload_bytes: Largest accepted upload, in bytes.
    """

    def __init__(
        self,
        root: str | os.PathLike,
        max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the store.

        Args:
            root: The managed uploads directory.
            max_upload_bytes: Largest accepted upload, in bytes.
            clock: Returns the current time in seconds; used to stamp
                stored upload names.
        """
        self.root = Path(root)
        self.max_upload_bytes = max_upload_bytes
        self._clock = clock

    def ensure_root(self) -> None:
        """Create the managed directory if it does not exist yet."""
        self.root.mkdir(parents=True, exist_ok=True)

    def _entry_path(self, name: str) -> Path:
        # Names that are not plain children cannot exist in the managed directory
        try:
            validate_entry_name(name, "File not found")
        except InvalidArgumentError as e:
            raise EntryNotFoundError("File not found", path=name) from e
        return self.root / name

    def list_files(
        self,
        search: str | None = None,
        sort_by: str | None = None,
        sort_order: str = "asc",
    ) -> list[FileEntry]:
        """List the managed directory. See list_directory()."""
        return list_directory(self.root, search=search, sort_by=sort_by, sort_order=sort_order)

    def delete_file(self, name: str) -> None:
        """Delete a file from the managed directory.

        Raises:
            EntryNotFoundError: If no such file exists.
        """
        delete_path(self._entry_path(name))

    def rename_file(self, old_name: str, new_name: str | None) -> str:
        """Rename a file within the managed directory.

        Args:
            old_name: Current name of the file.
            new_name: Desired name of the file.

        Returns:
            The new name.

        Raises:
            InvalidArgumentError: If new_name is missing or not a plain name.
            EntryNotFoundError: If old_name does not exist.
            EntryAlreadyExistsError: If new_name is taken.
        """
        return rename_path(self._entry_path(old_name), new_name).name

    def stored_name(self, original_name: str, timestamp_ms: int) -> str:
        """Build the stored name for an upload: <stem>_<timestamp><ext>."""
        stem, ext = os.path.splitext(original_name)
        return f"{stem}_{timestamp_ms}{ext}"

    def _create_exclusive(self, original_name: str) -> tuple[Path, BinaryIO]:
        timestamp_ms = int(self._clock() * 1000)
        while True:
            candidate = self.root / self.stored_name(original_name, timestamp_ms)
            try:
                return candidate, open(candidate, "xb")
            except FileExistsError:
                # Same name generated within one millisecond; try the next one
                timestamp_ms += 1

    def save_upload(self, original_name: str | None, stream: BinaryIO) -> UploadedFile:
        """Store an uploaded file under a collision-free name.

        The file is created exclusively, so two uploads of the same name
        never overwrite each other. A partially written file is removed
        if the upload fails.

        Args:
            original_name: Client-supplied filename; only its base name is used.
            stream: Binary stream with the file contents.

        Returns:
            Description of the stored file.

        Raises:
            InvalidArgumentError: If no filename was supplied.
            PayloadTooLargeError: If the upload exceeds max_upload_bytes.
        """
        base_name = Path((original_name or "").replace("\\", "/")).name
        if not base_name:
            raise InvalidArgumentError("No file uploaded")

        path, handle = self._create_exclusive(base_name)
        size = 0
        try:
            with handle:
                while True:
                    chunk = stream.read(UPLOAD_CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self.max_upload_bytes:
                        raise PayloadTooLargeError(self.max_upload_bytes)
                    handle.write(chunk)
        except BaseException:
            path.unlink(missing_ok=True)
            raise

        logger.info("Stored upload %s as %s (%d bytes)", base_name, path.name, size)
        return UploadedFile(name=path.name, size=size, path=str(path))
