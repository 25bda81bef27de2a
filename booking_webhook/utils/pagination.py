"""
Pagination helpers for booking listings
"""
import math
import re
from typing import Any, Dict, List, Optional

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: Any) -> Optional[int]:
    """Read the leading integer of a query value ("12abc" -> 12), or None"""
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    match = _LEADING_INT_RE.match(str(value))
    return int(match.group(1)) if match else None


def paginate(
    items: List[Any],
    page: Optional[int] = None,
    limit: Optional[int] = None,
    default_limit: int = 12
) -> Dict[str, Any]:
    """Slice items into a 1-based page and describe its neighbours"""
    page = page if page and page > 0 else 1
    limit = limit if limit and limit > 0 else default_limit

    start_index = (page - 1) * limit
    end_index = start_index + limit
    total = len(items)

    return {
        "total": total,
        "nextPage": page + 1 if end_index < total else None,
        "prevPage": page - 1 if page > 1 else None,
        "page": page,
        "totalPages": math.ceil(total / limit),
        "data": items[start_index:end_index],
    }
