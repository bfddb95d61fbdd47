"""Utility functions for media-organizer."""

from typing import Any


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries with overlay precedence.

    Recursively merges nested dictionaries. Non-dict values in overlay
    completely replace corresponding values in base.

    Args:
        base: Base dictionary
        overlay: Overlay dictionary (takes precedence)

    Returns:
        New merged dictionary (base and overlay are not modified)

    Examples:
        >>> deep_merge({"user": "a", "meta": {"x": "1"}}, {"meta": {"y": "2"}})
        {'user': 'a', 'meta': {'x': '1', 'y': '2'}}
    """
    result = base.copy()

    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def first_set(*layers: Any, default: Any) -> Any:
    """Return the first layer value that is not None, else the default.

    Layers are given highest precedence first. This is the per-field merge
    rule used when resolving layered configuration.

    Examples:
        >>> first_set(None, False, default=True)
        False
        >>> first_set(None, None, default="webp")
        'webp'
    """
    for value in layers:
        if value is not None:
            return value
    return default


def unique(*groups: list[str] | tuple[str, ...] | None) -> list[str]:
    """Concatenate string groups, keeping the first occurrence of each item."""
    seen: dict[str, None] = {}
    for group in groups:
        for item in group or ():
            seen.setdefault(item, None)
    return list(seen)
