"""Managed files sub-client for the File Manager API.

This module provides FilesClient and AsyncFilesClient for the managed
uploads directory endpoints (/files, /upload).

This is an internal module. Import from `client` instead.
"""

from urllib.parse import quote

from client._base import AsyncBaseClient, BaseClient
from client.models import FileEntry, MessageResponse, RenameResponse, UploadResponse
from models.file_entry import SortKey, SortOrder


def _file_path(filename: str) -> str:
    return f"/files/{quote(filename, safe='')}"


def _list_params(
    search: str | None,
    sort_by: SortKey | None,
    sort_order: SortOrder,
) -> dict[str, str | None]:
    return {"search": search or None, "sortBy": sort_by, "sortOrder": sort_order}


class FilesClient(BaseClient):
    """Synchronous client for the managed uploads directory.

    Example:
        with FileManagerClient() as client:
            uploaded = client.files.upload("report.pdf", b"%PDF-1.7 ...")
            for entry in client.files.list(sort_by="size", sort_order="desc"):
                print(entry.name, entry.human_size)
            client.files.rename(uploaded.file.name, "final-report.pdf")
            client.files.delete("final-report.pdf")
    """

    def list(
        self,
        search: str | None = None,
        sort_by: SortKey | None = None,
        sort_order: SortOrder = "asc",
    ) -> list[FileEntry]:
        """List files in the managed directory.

        Args:
            search: Case-insensitive substring to match against names.
            sort_by: Field to sort by.
            sort_order: "asc" or "desc".

        Returns:
            The matching files.
        """
        data = self._get("/files", params=_list_params(search, sort_by, sort_order))
        return [FileEntry.model_validate(item) for item in data]

    def upload(self, filename: str, content: bytes) -> UploadResponse:
        """Upload a file into the managed directory.

        The server stores it as <stem>_<timestamp><ext>; the returned
        response carries the generated name.

        Raises:
            PayloadTooLargeError: If the file exceeds the server's limit.
        """
        data = self._post("/upload", files={"file": (filename, content)})
        return UploadResponse(**data)

    def delete(self, filename: str) -> MessageResponse:
        """Delete a file from the managed directory.

        Raises:
            NotFoundError: If the file does not exist.
        """
        data = self._delete(_file_path(filename))
        return MessageResponse(**data)

    def rename(self, filename: str, new_filename: str) -> RenameResponse:
        """Rename a file in the managed directory.

        Raises:
            NotFoundError: If the file does not exist.
            APIError: If the new name is missing or already taken (HTTP 400).
        """
        data = self._put(f"{_file_path(filename)}/rename", json={"newFilename": new_filename})
        return RenameResponse.model_validate(data)


class AsyncFilesClient(AsyncBaseClient):
    """Asynchronous client for the managed uploads directory.

    See FilesClient for method documentation.
    """

    async def list(
        self,
        search: str | None = None,
        sort_by: SortKey | None = None,
        sort_order: SortOrder = "asc",
    ) -> list[FileEntry]:
        data = await self._get("/files", params=_list_params(search, sort_by, sort_order))
        return [FileEntry.model_validate(item) for item in data]

    async def upload(self, filename: str, content: bytes) -> UploadResponse:
        data = await self._post("/upload", files={"file": (filename, content)})
        return UploadResponse(**data)

    async def delete(self, filename: str) -> MessageResponse:
        data = await self._delete(_file_path(filename))
        return MessageResponse(**data)

    async def rename(self, filename: str, new_filename: str) -> RenameResponse:
        data = await self._put(
            f"{_file_path(filename)}/rename", json={"newFilename": new_filename}
        )
        return RenameResponse.model_validate(data)
