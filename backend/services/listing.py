"""Sort and paginate store snapshots for the listing endpoint.

Query parameters are never rejected: unparsable values fall back to defaults
and an unknown ``orderBy`` field leaves the snapshot in store order.
"""

import re
from functools import cmp_to_key
from typing import Any

DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1
DEFAULT_ORDER_BY = "id"

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(value: str | None, default: int) -> int:
    """Lenient integer parse: leading digits only, 0 or garbage -> default.

    >>> parse_int("5abc", 10)
    5
    >>> parse_int("abc", 10)
    10
    """
    if value is None:
        return default
    match = _LEADING_INT.match(value)
    if not match:
        return default
    return int(match.group(1)) or default


def _compare(a: Any, b: Any) -> int:
    try:
        if a < b:
            return -1
        if a > b:
            return 1
    except TypeError:
        # Missing or mixed-type values compare as equal.
        pass
    return 0


def sort_records(records: list[dict[str, Any]], order_by: str) -> list[dict[str, Any]]:
    """Stable ascending sort by ``order_by``."""
    return sorted(records, key=cmp_to_key(lambda a, b: _compare(a.get(order_by), b.get(order_by))))


def paginate(records: list[dict[str, Any]], page: int, limit: int) -> list[dict[str, Any]]:
    start = (page - 1) * limit
    return records[start : start + limit]


def build_listing(
    snapshot: list[dict[str, Any]],
    limit: str | None = None,
    page: str | None = None,
    order_by: str | None = None,
) -> dict:
    """Build the listing envelope from a store snapshot and raw query values."""
    limit_n = parse_int(limit, DEFAULT_LIMIT)
    page_n = parse_int(page, DEFAULT_PAGE)
    order_by = order_by or DEFAULT_ORDER_BY

    ordered = sort_records(snapshot, order_by)
    return {
        "total": len(snapshot),
        "page": page_n,
        "limit": limit_n,
        "orderBy": order_by,
        "data": paginate(ordered, page_n, limit_n),
    }
