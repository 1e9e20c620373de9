"""Local directory sub-client for the File Manager API.

This module provides LocalFilesClient and AsyncLocalFilesClient for the
/local-files endpoints, which operate on any directory the server can
reach.

This is an internal module. Import from `client` instead.
"""

from client._base import AsyncBaseClient, BaseClient
from client.models import FileEntry, MessageResponse, RenameLocalResponse
from models.file_entry import SortKey, SortOrder


_BASE_PATH = "/local-files"


class LocalFilesClient(BaseClient):
    """Synchronous client for local directory endpoints.

    Listing entries carry a `path`, which is what delete() and rename()
    expect.

    Example:
        with FileManagerClient() as client:
            entries = client.local.list("/tmp/exports", search=".csv")
            client.local.rename(entries[0].path, "latest.csv")
    """

    def list(
        self,
        path: str,
        search: str | None = None,
        sort_by: SortKey | None = None,
        sort_order: SortOrder = "asc",
    ) -> list[FileEntry]:
        """List files in a local directory.

        Args:
            path: Directory to list.
            search: Case-insensitive substring to match against names.
            sort_by: Field to sort by.
            sort_order: "asc" or "desc".

        Raises:
            NotFoundError: If the directory does not exist.
        """
        params = {
            "path": path,
            "search": search or None,
            "sortBy": sort_by,
            "sortOrder": sort_order,
        }
        data = self._get(_BASE_PATH, params=params)
        return [FileEntry.model_validate(item) for item in data]

    def delete(self, path: str) -> MessageResponse:
        """Delete the file at path.

        Raises:
            NotFoundError: If the file does not exist.
        """
        data = self._delete(_BASE_PATH, params={"path": path})
        return MessageResponse(**data)

    def rename(self, old_path: str, new_name: str) -> RenameLocalResponse:
        """Rename the file at old_path to new_name in the same directory.

        Raises:
            NotFoundError: If the file does not exist.
            APIError: If new_name is missing or already taken (HTTP 400).
        """
        data = self._put(_BASE_PATH, json={"oldPath": old_path, "newName": new_name})
        return RenameLocalResponse.model_validate(data)


class AsyncLocalFilesClient(AsyncBaseClient):
    """Asynchronous client for local directory endpoints.

    See LocalFilesClient for method documentation.
    """

    async def list(
        self,
        path: str,
        search: str | None = None,
        sort_by: SortKey | None = None,
        sort_order: SortOrder = "asc",
    ) -> list[FileEntry]:
        params = {
            "path": path,
            "search": search or None,
            "sortBy": sort_by,
            "sortOrder": sort_order,
        }
        data = await self._get(_BASE_PATH, params=params)
        return [FileEntry.model_validate(item) for item in data]

    async def delete(self, path: str) -> MessageResponse:
        data = await self._delete(_BASE_PATH, params={"path": path})
        return MessageResponse(**data)

    async def rename(self, old_path: str, new_name: str) -> RenameLocalResponse:
        data = await self._put(_BASE_PATH, json={"oldPath": old_path, "newName": new_name})
        return RenameLocalResponse.model_validate(data)
