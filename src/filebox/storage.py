"""File store confined to the trusted root."""

from pathlib import Path

from filebox.errors import AlreadyExistsError, StorageError
from filebox.security.path_validator import resolve_for_read, resolve_for_write


class FileStore:
    """
    Read and create files inside a single trusted root.

    The root is fixed at construction and must already be absolute and free
    of symbolic links, so that it compares equal to resolved read paths.
    Writes are create-only.
    """

    def __init__(self, trusted_root: Path) -> None:
        self.trusted_root = Path(trusted_root)

    def resolve_read(self, raw_path: str) -> Path:
        return resolve_for_read(raw_path, self.trusted_root)

    def resolve_write(self, raw_path: str) -> Path:
        return resolve_for_write(raw_path, self.trusted_root)

    def read(self, path: Path) -> bytes:
        """
        Read the full content of a validated path.

        Raises:
            StorageError: If the file cannot be read
        """
        try:
            return path.read_bytes()
        except OSError as e:
            raise StorageError(str(e)) from e

    def create(self, path: Path, data: bytes) -> int:
        """
        Create a new file with the given content.

        Uses an exclusive create, so if another request created the file
        after validation this fails instead of overwriting it.

        Args:
            path: Validated path returned by resolve_write
            data: Content to store verbatim

        Returns:
            Number of bytes written

        Raises:
            AlreadyExistsError: If the file appeared since validation
            StorageError: If the file cannot be created or written
        """
        try:
            with open(path, "xb") as f:
                return f.write(data)
        except FileExistsError as e:
            raise AlreadyExistsError(f"file already exists: {path}") from e
        except (OSError, ValueError) as e:
            raise StorageError(str(e)) from e
