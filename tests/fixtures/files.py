"""Fixtures for directories and FileStore instances."""

import os
from pathlib import Path

import pytest

from models.file_store import FileStore

# Fixed clock value for predictable upload names
FIXED_NOW = 1_700_000_000.0


def create_file(
    directory: Path,
    name: str,
    size: int = 0,
    modified_at: float | None = None,
) -> Path:
    """Create a file of a given size, optionally with a set mtime.

    Args:
        directory: Directory to create the file in.
        name: File name.
        size: Number of bytes to write.
        modified_at: Modification time (seconds since epoch) to set.

    Returns:
        Path of the created file.
    """
    path = directory / name
    path.write_bytes(b"x" * size)
    if modified_at is not None:
        os.utime(path, (modified_at, modified_at))
    return path


@pytest.fixture
def sample_dir(tmp_path):
    """Provide a directory with three files of known size and mtime.

    Contents:
        a.txt     10 bytes, oldest
        b.txt     20 bytes
        Notes.md   5 bytes, newest
    """
    directory = tmp_path / "sample"
    directory.mkdir()
    create_file(directory, "b.txt", size=20, modified_at=1_600_000_100)
    create_file(directory, "a.txt", size=10, modified_at=1_600_000_000)
    create_file(directory, "Notes.md", size=5, modified_at=1_600_000_200)
    return directory


@pytest.fixture
def upload_dir(tmp_path):
    """Provide an empty managed uploads directory."""
    directory = tmp_path / "uploads"
    directory.mkdir()
    return directory


@pytest.fixture
def file_store(upload_dir):
    """Provide a FileStore on an empty directory with a fixed clock."""
    return FileStore(root=upload_dir, clock=lambda: FIXED_NOW)


@pytest.fixture
def small_file_store(upload_dir):
    """Provide a FileStore that only accepts uploads up to 16 bytes."""
    return FileStore(root=upload_dir, max_upload_bytes=16, clock=lambda: FIXED_NOW)
