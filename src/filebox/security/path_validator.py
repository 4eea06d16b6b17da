"""Path validation for security.

Request paths are untrusted. Reads are checked after symlink resolution so a
link cannot point a client outside the trusted root. Writes target paths that
do not exist yet, so they are checked on the lexically cleaned candidate only.
A symlinked parent directory on the write side is therefore not detected.
"""

import os
from pathlib import Path

from filebox.errors import (
    AlreadyExistsError,
    DirectoryCreationError,
    NotFoundError,
    SecurityError,
    UnresolvablePathError,
)


def is_contained(path: Path, trusted_root: Path) -> bool:
    """
    Check whether trusted_root is a strict ancestor of path.

    Walks parent directories up to the filesystem root. Comparison is by
    whole path components, never by string prefix, so ``/srv/files-old`` is
    not inside ``/srv/files``. A path equal to the root is not contained.

    Args:
        path: Absolute, cleaned path to check
        trusted_root: Absolute trusted root directory

    Returns:
        True if path lies below trusted_root, False otherwise
    """
    path = Path(path)
    trusted_root = Path(trusted_root)
    return any(parent == trusted_root for parent in path.parents)


def check_contained(path: Path, trusted_root: Path) -> None:
    """
    Raise if path is not below trusted_root.

    Raises:
        SecurityError: If path is outside the trusted root
    """
    if not is_contained(path, trusted_root):
        raise SecurityError(f"path is outside of trusted root: {path}")


def candidate_path(raw_path: str, trusted_root: Path) -> Path:
    """
    Join a raw request path onto the trusted root and clean it lexically.

    Leading separators are stripped so an absolute request path is still
    interpreted relative to the root. ``.`` and ``..`` segments are
    collapsed without touching the filesystem.

    Args:
        raw_path: Decoded URL path from the request
        trusted_root: Absolute trusted root directory

    Returns:
        Cleaned absolute candidate path
    """
    joined = os.path.join(os.fspath(trusted_root), raw_path.lstrip("/"))
    return Path(os.path.normpath(joined))


def resolve_for_read(raw_path: str, trusted_root: Path) -> Path:
    """
    Validate a request path for reading.

    Existence is checked first, so a missing file is a 404 whether or not it
    would have been inside the root.

    Args:
        raw_path: Decoded URL path from the request
        trusted_root: Absolute, symlink-free trusted root directory

    Returns:
        Real path of the file to read

    Raises:
        NotFoundError: If the candidate cannot be stat'ed
        UnresolvablePathError: If symbolic links cannot be resolved
        SecurityError: If the resolved path escapes the trusted root
    """
    candidate = candidate_path(raw_path, trusted_root)

    try:
        os.stat(candidate)
    except (OSError, ValueError) as e:
        raise NotFoundError(str(e)) from e

    try:
        resolved = candidate.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise UnresolvablePathError(str(e)) from e

    check_contained(resolved, trusted_root)
    return resolved


def resolve_for_write(raw_path: str, trusted_root: Path) -> Path:
    """
    Validate a request path for creating a new file.

    Parent directories are created here, before any content is written, and
    are left in place if the write later fails.

    Args:
        raw_path: Decoded URL path from the request
        trusted_root: Absolute, symlink-free trusted root directory

    Returns:
        Cleaned candidate path to create

    Raises:
        AlreadyExistsError: If anything, including a dangling link, is at the path
        SecurityError: If the candidate escapes the trusted root
        DirectoryCreationError: If parent directories cannot be created
    """
    candidate = candidate_path(raw_path, trusted_root)

    if os.path.lexists(candidate):
        raise AlreadyExistsError(f"file already exists: {candidate}")

    check_contained(candidate, trusted_root)

    try:
        candidate.parent.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as e:
        raise DirectoryCreationError(str(e)) from e

    return candidate

