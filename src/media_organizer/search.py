"""Search expression and sort assembly for asset queries."""

from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from typing import Any

from .folders import normalize_validated

DEFAULT_SORT = ("created_at", "desc")


@dataclass(frozen=True)
class SortField:
    """One sort key; direction is "asc" or "desc"."""

    field: str
    direction: str = "desc"


@dataclass
class SearchQuery:
    """Criteria for an asset search.

    ``folder`` takes precedence over ``folder_prefix``. Only one tag group is
    used, checked in the order tags, tags_all, tags_any.
    """

    folder: str | None = None
    folder_prefix: str | None = None
    tags: list[str] = field(default_factory=list)
    tags_all: list[str] = field(default_factory=list)
    tags_any: list[str] = field(default_factory=list)
    resource_type: str | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None
    sort_by: list[SortField] = field(default_factory=list)
    max_results: int | None = None
    next_cursor: str | None = None


def to_epoch_seconds(moment: datetime) -> int:
    """Whole seconds since the epoch, as used by created_at comparisons."""
    return int(moment.timestamp())


def build_search_expression(query: SearchQuery) -> str:
    """Build the search expression for a query.

    Examples:
        >>> build_search_expression(SearchQuery(folder="art", tags_any=["oil", "ink"]))
        'folder:art/* AND * AND (tags:oil OR tags:ink)'
    """
    expression = f"resource_type:{query.resource_type}" if query.resource_type else "*"

    folder = query.folder or query.folder_prefix
    if folder:
        expression = f"folder:{normalize_validated(folder)}/* AND {expression}"

    if query.tags:
        expression = f"{expression} AND {' AND '.join(f'tags:{tag}' for tag in query.tags)}"
    elif query.tags_all:
        expression = f"{expression} AND {' AND '.join(f'tags:{tag}' for tag in query.tags_all)}"
    elif query.tags_any:
        expression = f"{expression} AND ({' OR '.join(f'tags:{tag}' for tag in query.tags_any)})"

    if query.created_from is not None:
        expression = f"{expression} AND created_at>{to_epoch_seconds(query.created_from)}"
    if query.created_to is not None:
        expression = f"{expression} AND created_at<{to_epoch_seconds(query.created_to)}"

    return expression


def build_search_params(query: SearchQuery) -> dict[str, Any]:
    """Expression, sort order and paging for the remote search call.

    Without explicit sort fields the results are sorted by created_at,
    newest first.
    """
    sort_by = [(sort.field, sort.direction) for sort in query.sort_by] or [DEFAULT_SORT]
    params: dict[str, Any] = {
        "expression": build_search_expression(query),
        "sort_by": [{name: direction} for name, direction in sort_by],
    }
    if query.max_results:
        params["max_results"] = query.max_results
    if query.next_cursor:
        params["next_cursor"] = query.next_cursor
    return params
