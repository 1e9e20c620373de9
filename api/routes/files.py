"""Managed uploads directory endpoints.

Provides listing, upload, delete and rename for the single directory the
server manages. The directory comes from the injected FileStore.

Handlers are plain functions so FastAPI runs their blocking filesystem
calls in its threadpool.
"""

from fastapi import APIRouter, File, UploadFile

from api.dependencies import FileStoreDep
from api.models import (
    MessageResponse,
    RenameFileRequest,
    RenameResponse,
    UploadResponse,
)
from api.utils import ListFilesQueryDep
from models.errors import InvalidArgumentError
from models.file_entry import FileEntry

router = APIRouter(tags=["files"])


@router.get("/files", response_model=list[FileEntry], response_model_exclude_none=True)
def list_files(query: ListFilesQueryDep, store: FileStoreDep):
    """List files in the managed directory.

    Args:
        query: Optional search text, sort field and sort direction.
        store: The FileStore dependency.

    Returns:
        Matching files, filtered before sorting.
    """
    return store.list_files(
        search=query.search,
        sort_by=query.sort_by,
        sort_order=query.sort_order,
    )


@router.post("/upload", response_model=UploadResponse)
def upload_file(store: FileStoreDep, file: UploadFile | None = File(None)):
    """Upload a single file into the managed directory.

    The file is stored as <stem>_<timestamp><ext> so repeated uploads of
    the same name never overwrite each other.

    Raises:
        InvalidArgumentError: If no file was sent (400).
        PayloadTooLargeError: If the file exceeds the size limit (413).
    """
    if file is None:
        raise InvalidArgumentError("No file uploaded")

    try:
        stored = store.save_upload(file.filename, file.file)
    finally:
        file.file.close()

    return UploadResponse(message="File uploaded successfully", file=stored)


@router.delete("/files/{filename}", response_model=MessageResponse)
def delete_file(filename: str, store: FileStoreDep):
    """Delete a file from the managed directory.

    Raises:
        EntryNotFoundError: If the file does not exist (404).
    """
    store.delete_file(filename)
    return MessageResponse(message="File deleted successfully")


@router.put("/files/{filename}/rename", response_model=RenameResponse)
def rename_file(
    filename: str,
    store: FileStoreDep,
    request: RenameFileRequest | None = None,
):
    """Rename a file in the managed directory.

    Raises:
        InvalidArgumentError: If newFilename is missing (400).
        EntryNotFoundError: If the file does not exist (404).
        EntryAlreadyExistsError: If newFilename is taken (400).
    """
    new_filename = request.new_filename if request else None
    new_name = store.rename_file(filename, new_filename)
    return RenameResponse(
        message="File renamed successfully",
        old_name=filename,
        new_name=new_name,
    )
