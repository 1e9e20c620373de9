"""Main entry point for the File Manager FastAPI application.

This module creates and configures the FastAPI app instance that serves the
REST API for listing, uploading, deleting and renaming files.

To run the development server:
    uv run uvicorn main:app --reload --port 5000

To run in production:
    uv run uvicorn main:app --host 0.0.0.0 --port 5000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies import get_settings, initialize_file_store, shutdown_file_store
from api.exceptions import (
    entry_already_exists_handler,
    entry_not_found_handler,
    generic_exception_handler,
    invalid_argument_handler,
    os_error_handler,
    payload_too_large_handler,
    request_validation_handler,
)
from api.routes import files as files_routes
from api.routes import local_files as local_files_routes
from models.errors import (
    EntryAlreadyExistsError,
    EntryNotFoundError,
    InvalidArgumentError,
    PayloadTooLargeError,
)

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events.

    Creates the FileStore (and the managed uploads directory) at startup and
    releases it at shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to FastAPI to handle requests.
    """
    store = initialize_file_store(settings)
    logger.info("Serving managed uploads from %s", store.root.resolve())

    yield

    shutdown_file_store()
    logger.info("Shutdown complete")


app = FastAPI(
    title="File Manager",
    description="API for listing, uploading, deleting and renaming files",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Specific faults before the general ones
app.add_exception_handler(EntryNotFoundError, entry_not_found_handler)
app.add_exception_handler(EntryAlreadyExistsError, entry_already_exists_handler)
app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(PayloadTooLargeError, payload_too_large_handler)
app.add_exception_handler(OSError, os_error_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(files_routes.router)
app.include_router(local_files_routes.router)


@app.get("/")
async def root():
    """Root endpoint - returns a welcome message."""
    return {
        "message": "Welcome to the File Manager API",
        "version": __version__,
        "docs_url": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}
