"""Shared request and response models for API endpoints.

Request models give each endpoint an explicit, typed set of parameters.
Required values that the original API answered with a 400 (rather than a
validation error) are declared optional here and checked in the route.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from models.file_entry import UploadedFile


# Request models


class ListFilesQuery(BaseModel):
    """Query parameters for directory listings.

    Attributes:
        search: Case-insensitive substring to match against names.
        sort_by: Field to sort by (name, size, createdAt, modifiedAt).
            Any other value leaves the listing unsorted.
        sort_order: "desc" for descending; any other value sorts ascending.
    """

    model_config = ConfigDict(populate_by_name=True)

    search: str | None = None
    sort_by: str | None = Field(None, alias="sortBy")
    sort_order: str = Field("asc", alias="sortOrder")


class RenameFileRequest(BaseModel):
    """Body of PUT /files/{filename}/rename.

    Attributes:
        new_filename: New name for the file in the managed directory.
    """

    model_config = ConfigDict(populate_by_name=True)

    new_filename: str | None = Field(None, alias="newFilename")


class RenameLocalFileRequest(BaseModel):
    """Body of PUT /local-files.

    Attributes:
        old_path: Path of the file to rename.
        new_name: New base name; the file stays in the same directory.
    """

    model_config = ConfigDict(populate_by_name=True)

    old_path: str | None = Field(None, alias="oldPath")
    new_name: str | None = Field(None, alias="newName")


# Response models


class MessageResponse(BaseModel):
    """Plain confirmation message.

    Attributes:
        message: Human-readable result description.
    """

    message: str


class UploadResponse(BaseModel):
    """Response for POST /upload.

    Attributes:
        message: Human-readable result description.
        file: The stored file's generated name, size and path.
    """

    message: str
    file: UploadedFile


class RenameResponse(BaseModel):
    """Response for renames in the managed directory.

    Attributes:
        message: Human-readable result description.
        old_name: Previous name of the file.
        new_name: Current name of the file.
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str
    old_name: str = Field(alias="oldName")
    new_name: str = Field(alias="newName")


class RenameLocalResponse(BaseModel):
    """Response for renames in a local directory.

    Attributes:
        message: Human-readable result description.
        old_path: Previous path of the file.
        new_path: Current path of the file.
    """

    model_config = ConfigDict(populate_by_name=True)

    message: str
    old_path: str = Field(alias="oldPath")
    new_path: str = Field(alias="newPath")


class ErrorResponse(BaseModel):
    """Body returned for every fault.

    Attributes:
        error: Human-readable error message.
        type: Fault kind (not_found, already_exists, invalid_argument,
            payload_too_large, internal).
        details: Extra context, such as the failed checks of a rejected
            request.
    """

    error: str
    type: str | None = None
    details: dict[str, Any] | None = None
