"""Drive a page-by-page fetch function until a record limit or end-of-data."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

FIRST_PAGE = 1

PageFetch = Callable[[int], Tuple[Sequence[T], Optional[int]]]


def _truncate(records: List[T], limit: Optional[int]) -> List[T]:
    if limit is None:
        return records
    return records[:limit]


def fetch_all(page_fetch: PageFetch, limit: Optional[int] = None) -> Tuple[List[T], Optional[Exception]]:
    """Collect up to `limit` records from `page_fetch`, starting at page 1.

    `page_fetch(page)` returns `(records, next_page)` where a falsy `next_page`
    marks the last page, and raises when the page cannot be fetched. The loop
    stops once more than `limit` records are held, on the last page, or on the
    first exception. Whatever was accumulated is returned in fetch order,
    truncated to `limit`, together with the exception (or None). `limit=None`
    fetches everything.
    """
    accumulated: List[T] = []
    page: Optional[int] = FIRST_PAGE
    while limit is None or len(accumulated) <= limit:
        try:
            batch, next_page = page_fetch(page)
        except Exception as exc:
            return _truncate(accumulated, limit), exc
        accumulated = accumulated + list(batch)
        if not next_page or limit == 0:
            break
        page = next_page
    return _truncate(accumulated, limit), None


__all__ = ["FIRST_PAGE", "PageFetch", "fetch_all"]
