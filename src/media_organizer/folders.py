"""Folder path validation and normalization."""

import logging
import re
from dataclasses import dataclass

from .exceptions import ValidationError

logger = logging.getLogger(__name__)

SEPARATOR = "/"

_INVALID_CHARS = re.compile(r'[<>:"|?*\x00-\x1f]')
_SEPARATOR_RUNS = re.compile(r"/+")


@dataclass(frozen=True)
class FolderPath:
    """A normalized folder path split into segments."""

    full_path: str
    relative_path: str
    segments: tuple[str, ...]


def validate(path: str) -> None:
    """Validate a caller-supplied folder path.

    Leading or trailing separators are tolerated (normalize() strips them)
    but a warning is logged since the caller's path will be altered.

    Args:
        path: Folder path to check

    Raises:
        ValidationError: If the path is empty, not a string, or contains
            control characters or any of < > : " | ? *
    """
    if not path or not isinstance(path, str):
        raise ValidationError("Folder path must be a non-empty string")

    if _INVALID_CHARS.search(path):
        raise ValidationError(
            'Folder path contains invalid characters. Cannot contain: < > : " | ? * or control characters'
        )

    if path.startswith(SEPARATOR) or path.endswith(SEPARATOR):
        logger.warning(f"Folder path '{path}' should not start or end with '/'. It will be normalized.")


def normalize(path: str) -> str:
    """Strip leading/trailing separators and collapse repeated ones.

    Examples:
        >>> normalize("/a//b/")
        'a/b'
        >>> normalize("")
        ''
    """
    if not path:
        return ""
    return _SEPARATOR_RUNS.sub(SEPARATOR, path.strip(SEPARATOR))


def normalize_validated(path: str) -> str:
    """Validate, then normalize."""
    validate(path)
    return normalize(path)


def parse_path(path: str) -> FolderPath:
    """Normalize a path and split it into segments.

    There is no separate mount root, so full_path and relative_path are
    both the normalized string.
    """
    normalized = normalize(path)
    segments = tuple(segment for segment in normalized.split(SEPARATOR) if segment)
    return FolderPath(full_path=normalized, relative_path=normalized, segments=segments)
