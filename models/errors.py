"""Domain faults raised by the file store.

These exceptions describe what went wrong with a directory or entry
operation. They carry no HTTP knowledge; the API layer maps each one to a
status code in api/exceptions.py.

Exception Hierarchy:
    FileManagerError (base)
    ├── EntryNotFoundError - Target entry or directory is absent
    ├── EntryAlreadyExistsError - Rename target name is taken
    ├── InvalidArgumentError - Missing or malformed parameter
    └── PayloadTooLargeError - Upload exceeds the configured size limit

Any other filesystem failure propagates as the original OSError.
"""


class FileManagerError(Exception):
    """Base exception for all file store faults.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class EntryNotFoundError(FileManagerError):
    """Raised when a file or directory does not exist.

    Attributes:
        path: The path that was looked up, if known.
    """

    def __init__(self, message: str = "File not found", path: str | None = None) -> None:
        self.path = path
        super().__init__(message)


class EntryAlreadyExistsError(FileManagerError):
    """Raised when a rename would replace an existing entry.

    Attributes:
        path: The path that is already taken.
    """

    def __init__(
        self,
        message: str = "A file with this name already exists",
        path: str | None = None,
    ) -> None:
        self.path = path
        super().__init__(message)


class InvalidArgumentError(FileManagerError, ValueError):
    """Raised when a required parameter is missing or malformed."""


class PayloadTooLargeError(FileManagerError):
    """Raised when an upload exceeds the size limit.

    Attributes:
        limit: The maximum accepted size in bytes.
    """

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"File exceeds the maximum upload size of {limit} bytes")
