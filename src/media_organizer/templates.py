"""Folder path templates with {placeholder} substitution."""

import re
from collections.abc import Mapping
from typing import Any

from .folders import SEPARATOR
from .folders import normalize
from .models import FolderOptions

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


def expand(template: str, values: Mapping[str, Any]) -> str:
    """Expand a path template.

    Each ``{key}`` is replaced with the bound value. Placeholders whose key is
    unbound, None or empty are removed rather than left literal, and the
    result is normalized so no empty segments remain.

    Args:
        template: Template such as "{type}/{year}/{category}"
        values: Placeholder values

    Returns:
        Expanded path without leading/trailing separators

    Examples:
        >>> expand("{type}/{year}/{category}", {"type": "art", "year": "2024"})
        'art/2024'
    """

    def substitute(match: re.Match) -> str:
        value = values.get(match.group(1))
        if value is None or value == "":
            return ""
        return str(value)

    return normalize(_PLACEHOLDER.sub(substitute, template))


def join(*segments: str | None) -> str:
    """Join non-empty segments with the separator and normalize."""
    return normalize(SEPARATOR.join(segment for segment in segments if segment))


def build_path(root_folder: str, template: str | None, options: FolderOptions) -> str:
    """Build a destination folder path.

    Without a template, the path is ``type/year/month/category`` followed by
    each custom value in insertion order (month zero-padded, unset parts
    skipped). With a template, the same values (overlaid by ``custom``) are
    substituted into it. Either way the normalized root folder is prefixed.

    Examples:
        >>> build_path("projects/x", None, FolderOptions(type="artworks", year=2024, month=3))
        'projects/x/artworks/2024/03'
    """
    root = normalize(root_folder)

    if not template:
        segments = [
            options.type,
            str(options.year) if options.year else None,
            f"{options.month:02d}" if options.month else None,
            options.category,
        ]
        segments.extend(str(value) for value in options.custom.values() if value)
        return join(root, *segments)

    values: dict[str, Any] = {
        "type": options.type,
        "year": options.year,
        "month": options.month,
        "category": options.category,
    }
    values.update(options.custom)
    return join(root, expand(template, values))
