"""File Manager API Client Library.

This module provides a typed Python client for the File Manager REST API,
covering the same calls the web frontend makes. It supports both
synchronous and asynchronous usage.

Example:
    Synchronous usage::

        from client import FileManagerClient

        with FileManagerClient(base_url="http://localhost:5000") as client:
            client.files.upload("report.pdf", open("report.pdf", "rb").read())
            for entry in client.files.list(sort_by="modifiedAt", sort_order="desc"):
                print(entry.name, entry.human_size)

    Asynchronous usage::

        from client import AsyncFileManagerClient

        async with AsyncFileManagerClient() as client:
            await client.local.delete("/tmp/old.log")
"""

from client._files import AsyncFilesClient, FilesClient
from client._local import AsyncLocalFilesClient, LocalFilesClient
from client.client import AsyncFileManagerClient, FileManagerClient
from client.exceptions import (
    APIError,
    ConnectionError,
    FileManagerClientError,
    NotFoundError,
    PayloadTooLargeError,
    ServerError,
    TimeoutError,
    ValidationError,
)
from client.models import (
    FileEntry,
    HealthResponse,
    MessageResponse,
    RenameLocalResponse,
    RenameResponse,
    UploadedFile,
    UploadResponse,
    format_file_size,
)

__all__ = [
    # Main clients
    "FileManagerClient",
    "AsyncFileManagerClient",
    # Sub-clients
    "FilesClient",
    "AsyncFilesClient",
    "LocalFilesClient",
    "AsyncLocalFilesClient",
    # Exceptions
    "FileManagerClientError",
    "ConnectionError",
    "TimeoutError",
    "APIError",
    "NotFoundError",
    "PayloadTooLargeError",
    "ValidationError",
    "ServerError",
    # Response models
    "FileEntry",
    "HealthResponse",
    "MessageResponse",
    "RenameResponse",
    "RenameLocalResponse",
    "UploadResponse",
    "UploadedFile",
    "format_file_size",
]
