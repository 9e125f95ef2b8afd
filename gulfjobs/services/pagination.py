import math
from typing import Any, Sequence

from gulfjobs.services.models import Page


def total_pages(count: int, page_size: int) -> int:
    """ceil(count / page_size), never less than one."""

    if page_size < 1:
        raise ValueError("page_size must be a positive integer")
    return max(1, math.ceil(count / page_size))


def paginate(items: Sequence[Any], page_size: int, page_number: int) -> Page:
    """Slice ``items`` into the requested 1-indexed page.

    ``page_number`` is clamped to ``[1, total_pages]`` first, so a page that
    disappeared after the filter narrowed the results falls back to the last one.
    """

    pages = total_pages(len(items), page_size)
    page = min(max(1, page_number), pages)
    start = (page - 1) * page_size

    return Page(
        items=list(items[start:start + page_size]),
        page=page,
        page_size=page_size,
        total=len(items),
        total_pages=pages,
    )
