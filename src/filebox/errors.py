"""Error taxonomy for filebox.

Every failure carries the HTTP status it maps to. Handlers convert these into
bare status responses; the message only ever goes to the log.
"""


class FileboxError(Exception):
    """Base class for request failures."""

    status_code = 500


class ConfigurationError(FileboxError):
    """Raised when the trusted root cannot be determined."""

    status_code = 500


class NotFoundError(FileboxError):
    """Raised when a requested file does not exist."""

    status_code = 404


class SecurityError(FileboxError):
    """Raised when a path lies outside the trusted root."""

    status_code = 400


class UnresolvablePathError(FileboxError):
    """Raised when symbolic links in a path cannot be resolved."""

    status_code = 400


class AlreadyExistsError(FileboxError):
    """Raised when a write targets a path that already exists."""

    status_code = 400


class DirectoryCreationError(FileboxError):
    """Raised when parent directories for a write cannot be created."""

    status_code = 400


class StorageError(FileboxError):
    """Raised when reading or writing file content fails after validation."""

    status_code = 500


__all__ = [
    "FileboxError",
    "ConfigurationError",
    "NotFoundError",
    "SecurityError",
    "UnresolvablePathError",
    "AlreadyExistsError",
    "DirectoryCreationError",
    "StorageError",
]
