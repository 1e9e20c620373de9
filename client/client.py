"""Main File Manager client classes.

This module provides the main entry points for interacting with the API:
- FileManagerClient: Synchronous client
- AsyncFileManagerClient: Asynchronous client

Both expose the managed uploads directory as `files` and arbitrary local
directories as `local`.

Example:
    Synchronous usage::

        from client import FileManagerClient

        with FileManagerClient(base_url="http://localhost:5000") as client:
            client.files.upload("notes.txt", b"hello")
            entries = client.files.list(search="notes")

    Asynchronous usage::

        from client import AsyncFileManagerClient

        async with AsyncFileManagerClient() as client:
            entries = await client.local.list("/var/log", sort_by="modifiedAt")
"""

from typing import Any

from client._files import AsyncFilesClient, FilesClient
from client._http import AsyncHTTPClient, HTTPClient
from client._local import AsyncLocalFilesClient, LocalFilesClient
from client.models import HealthResponse

DEFAULT_BASE_URL = "http://localhost:5000"


class FileManagerClient:
    """Synchronous client for the File Manager REST API.

    Attributes:
        files: Managed uploads directory operations.
        local: Local directory operations.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: Any = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: The base URL of the server (default: http://localhost:5000).
            timeout: Request timeout in seconds.
            retry_enabled: Whether to retry on connection errors, timeouts
                and HTTP 502/503/504, with exponential backoff.
            max_retries: Maximum number of retry attempts when retry is enabled.
            transport: Custom HTTP transport (e.g., MockTransport for testing).
        """
        self._http = HTTPClient(
            base_url=base_url,
            timeout=timeout,
            retry_enabled=retry_enabled,
            max_retries=max_retries,
            transport=transport,
        )
        self.files = FilesClient(self._http)
        self.local = LocalFilesClient(self._http)

    def __enter__(self) -> "FileManagerClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()

    def health(self) -> HealthResponse:
        """Check that the server is up."""
        return HealthResponse(**self._http.get("/health"))


class AsyncFileManagerClient:
    """Asynchronous client for the File Manager REST API.

    Attributes:
        files: Managed uploads directory operations.
        local: Local directory operations.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: Any = None,
    ) -> None:
        self._http = AsyncHTTPClient(
            base_url=base_url,
            timeout=timeout,
            retry_enabled=retry_enabled,
            max_retries=max_retries,
            transport=transport,
        )
        self.files = AsyncFilesClient(self._http)
        self.local = AsyncLocalFilesClient(self._http)

    async def __aenter__(self) -> "AsyncFileManagerClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()

    async def health(self) -> HealthResponse:
        """Check that the server is up."""
        return HealthResponse(**await self._http.get("/health"))
