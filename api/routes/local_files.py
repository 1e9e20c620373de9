"""Local directory endpoints.

Lists and mutates files in any directory the server process can reach,
addressed by an explicit path supplied by the caller. Listing entries
carry their path so clients can pass it back for delete and rename.
Handlers are plain functions so they run in FastAPI's threadpool.
"""

from typing import Annotated

from fastapi import APIRouter, Query

from api.models import MessageResponse, RenameLocalFileRequest, RenameLocalResponse
from api.utils import ListFilesQueryDep, require
from models.file_entry import FileEntry
from models.file_store import delete_path, list_directory, rename_path

router = APIRouter(
    prefix="/local-files",
    tags=["local-files"],
)


@router.get("", response_model=list[FileEntry])
def list_local_files(
    query: ListFilesQueryDep,
    path: Annotated[str | None, Query(description="Directory to list")] = None,
):
    """List files in a local directory.

    Raises:
        InvalidArgumentError: If path is missing (400).
        EntryNotFoundError: If the directory does not exist (404).
    """
    directory = require(path, "Directory path is required")
    return list_directory(
        directory,
        search=query.search,
        sort_by=query.sort_by,
        sort_order=query.sort_order,
        include_path=True,
    )


@router.delete("", response_model=MessageResponse)
def delete_local_file(
    path: Annotated[str | None, Query(description="File to delete")] = None,
):
    """Delete a file in a local directory.

    Raises:
        InvalidArgumentError: If path is missing (400).
        EntryNotFoundError: If the file does not exist (404).
    """
    delete_path(require(path, "File path is required"))
    return MessageResponse(message="File deleted successfully")


@router.put("", response_model=RenameLocalResponse)
def rename_local_file(request: RenameLocalFileRequest | None = None):
    """Rename a file in a local directory, keeping it in place.

    Raises:
        InvalidArgumentError: If oldPath or newName is missing (400).
        EntryNotFoundError: If the file does not exist (404).
        EntryAlreadyExistsError: If newName is taken (400).
    """
    message = "Old path and new name are required"
    old_path = require(request.old_path if request else None, message)
    new_name = require(request.new_name if request else None, message)

    new_path = rename_path(old_path, new_name)
    return RenameLocalResponse(
        message="File renamed successfully",
        old_path=old_path,
        new_path=str(new_path),
    )
