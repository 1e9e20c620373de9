"""Utility functions for API route handlers.

This module contains helpers shared by the managed-directory and
local-directory route modules.
"""

from typing import Annotated

from fastapi import Depends, Query

from api.models import ListFilesQuery
from models.errors import InvalidArgumentError


def list_files_query(
    search: Annotated[str | None, Query(description="Substring to match in names")] = None,
    sort_by: Annotated[
        str | None,
        Query(alias="sortBy", description="name, size, createdAt or modifiedAt"),
    ] = None,
    sort_order: Annotated[
        str, Query(alias="sortOrder", description="desc for descending, anything else ascending")
    ] = "asc",
) -> ListFilesQuery:
    """Collect listing query parameters into a ListFilesQuery.

    This function is a FastAPI dependency. Any sortOrder other than
    "desc" sorts ascending.
    """
    return ListFilesQuery(search=search, sort_by=sort_by, sort_order=sort_order)


def require(value: str | None, message: str) -> str:
    """Return value, or raise InvalidArgumentError if it is missing or empty.

    Args:
        value: The parameter value to check.
        message: Error message for the 400 response.

    Returns:
        The non-empty value.

    Raises:
        InvalidArgumentError: If value is None or empty.
    """
    if not value:
        raise InvalidArgumentError(message)
    return value


# Type alias for dependency injection
ListFilesQueryDep = Annotated[ListFilesQuery, Depends(list_files_query)]
