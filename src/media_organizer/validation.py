"""Input validators run before any path or plan computation."""

import re
import time

from .exceptions import ValidationError
from .folders import normalize

IMAGE_MAX_BYTES = 100 * 1024 * 1024
VIDEO_MAX_BYTES = 500 * 1024 * 1024

_PUBLIC_ID = re.compile(r"^[a-zA-Z0-9_\-/]+$")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def validate_file_type(content_type: str, allowed_types: list[str]) -> None:
    """Check a MIME type against allowed types ("image/*" matches any image).

    Raises:
        ValidationError: If the type is not allowed
    """
    content_type = content_type or ""

    def allowed(candidate: str) -> bool:
        if "*" in candidate:
            return content_type.startswith(candidate.split("/")[0] + "/")
        return content_type == candidate

    if not any(allowed(candidate) for candidate in allowed_types):
        raise ValidationError(
            f"File type {content_type or 'unknown'} is not allowed. Allowed types: {', '.join(allowed_types)}"
        )


def validate_file_size(size: int, max_size_bytes: int) -> None:
    """Raise ValidationError if size exceeds max_size_bytes."""
    if size > max_size_bytes:
        max_mb = max_size_bytes / (1024 * 1024)
        size_mb = size / (1024 * 1024)
        raise ValidationError(f"File size {size_mb:.2f}MB exceeds maximum size of {max_mb:.2f}MB")


def validate_public_id(public_id: str) -> None:
    """Public IDs may only contain letters, digits, underscores, hyphens and slashes."""
    if not public_id or not isinstance(public_id, str):
        raise ValidationError("Public ID must be a non-empty string")
    if not _PUBLIC_ID.match(public_id):
        raise ValidationError(
            "Public ID can only contain alphanumeric characters, underscores, hyphens, and forward slashes"
        )


def generate_public_id(file_name: str, folder: str | None = None, use_timestamp: bool = False) -> str:
    """Derive a public ID from a file name.

    The extension is dropped and the name lowercased with every run of
    non-alphanumeric characters replaced by a hyphen.

    Args:
        file_name: Original file name
        folder: Folder to prefix (optional)
        use_timestamp: Append a millisecond timestamp to avoid collisions

    Returns:
        Public ID such as "art/2024/my-photo"

    Examples:
        >>> generate_public_id("My Photo.JPG", folder="art/2024")
        'art/2024/my-photo'
    """
    stem = re.sub(r"\.[^/.]+$", "", file_name)
    public_id = _NON_ALNUM.sub("-", stem.lower()).strip("-")

    if use_timestamp:
        public_id = f"{public_id}-{int(time.time() * 1000)}"

    if folder:
        return f"{normalize(folder)}/{public_id}"
    return public_id
