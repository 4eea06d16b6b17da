"""Trust-boundary checks for request paths."""

from .path_validator import (
    candidate_path,
    check_contained,
    is_contained,
    resolve_for_read,
    resolve_for_write,
)

__all__ = [
    "candidate_path",
    "check_contained",
    "is_contained",
    "resolve_for_read",
    "resolve_for_write",
]
