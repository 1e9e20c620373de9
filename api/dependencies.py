"""Dependency injection providers for the FastAPI application.

This module defines the application settings and the dependencies that
route handlers receive, most importantly the FileStore bound to the
managed uploads directory.
"""

import os
from typing import Annotated

from dotenv import load_dotenv
from fastapi import Depends
from pydantic import BaseModel, Field

from models.file_store import DEFAULT_MAX_UPLOAD_BYTES, FileStore


class Settings(BaseModel):
    """Runtime configuration, read from environment variables.

    Attributes:
        upload_dir: The managed uploads directory.
        max_upload_bytes: Largest accepted upload, in bytes.
        cors_origins: Origins allowed to call the API from a browser.
        log_level: Logging level name for the application loggers.
    """

    upload_dir: str = Field(default="uploads", description="Managed uploads directory")
    max_upload_bytes: int = Field(
        default=DEFAULT_MAX_UPLOAD_BYTES, ge=1, description="Maximum upload size in bytes"
    )
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = Field(default="INFO")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment (and a .env file if present).

        Recognized variables:
            FILE_MANAGER_UPLOAD_DIR
            FILE_MANAGER_MAX_UPLOAD_BYTES
            FILE_MANAGER_CORS_ORIGINS (comma-separated)
            FILE_MANAGER_LOG_LEVEL

        Returns:
            A validated Settings instance.
        """
        load_dotenv()

        data: dict = {}
        if upload_dir := os.environ.get("FILE_MANAGER_UPLOAD_DIR"):
            data["upload_dir"] = upload_dir
        if max_bytes := os.environ.get("FILE_MANAGER_MAX_UPLOAD_BYTES"):
            data["max_upload_bytes"] = max_bytes
        if origins := os.environ.get("FILE_MANAGER_CORS_ORIGINS"):
            data["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]
        if log_level := os.environ.get("FILE_MANAGER_LOG_LEVEL"):
            data["log_level"] = log_level.upper()

        return cls(**data)


# Shared state, set up by the application lifespan
_settings: Settings | None = None
_file_store: FileStore | None = None


def get_settings() -> Settings:
    """Get the application settings, loading them on first use."""
    global _settings

    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def get_file_store() -> FileStore:
    """Get the FileStore for the managed uploads directory.

    This function is a FastAPI dependency. Tests replace it through
    app.dependency_overrides to point at a temporary directory.

    Returns:
        The shared FileStore instance.

    Raises:
        RuntimeError: If the store hasn't been initialized yet.
    """
    if _file_store is None:
        raise RuntimeError(
            "FileStore not initialized. Call initialize_file_store() first."
        )
    return _file_store


def initialize_file_store(settings: Settings | None = None) -> FileStore:
    """Create the FileStore and make sure its directory exists.

    This should be called once when the FastAPI app starts up.

    Args:
        settings: Settings to use; defaults to get_settings().

    Returns:
        The newly created FileStore.
    """
    global _file_store

    settings = settings or get_settings()
    _file_store = FileStore(
        root=settings.upload_dir,
        max_upload_bytes=settings.max_upload_bytes,
    )
    _file_store.ensure_root()
    return _file_store


def shutdown_file_store() -> None:
    """Drop the shared FileStore when the app shuts down."""
    global _file_store

    _file_store = None


# Type alias for dependency injection
FileStoreDep = Annotated[FileStore, Depends(get_file_store)]
