"""Display lookups and page slicing for board listings."""

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar


T = TypeVar("T")

DEFAULT_BACKGROUND = "#f1f5f9"

BOARD_BACKGROUNDS = {
    "red": "#fee2e2",
    "blue": "#dbeafe",
    "green": "#dcfce7",
    "yellow": "#fef3c7",
    "purple": "#f3e8ff",
    "pink": "#fbcfe8",
}

STATUS_COLORS = {
    "todo": "#fecaca",
    "in_progress": "#fbbf24",
    "done": "#86efac",
}

PRIORITY_COLORS = {
    "low": "#a7f3d0",
    "medium": "#fcd34d",
    "high": "#fca5a5",
}


def board_background(color: str | None) -> str:
    """Background for a board color tag; unknown tags get the default."""
    if not color:
        return DEFAULT_BACKGROUND
    return BOARD_BACKGROUNDS.get(color.strip().lower(), DEFAULT_BACKGROUND)


def status_color(status) -> str:
    return STATUS_COLORS.get(getattr(status, "value", status), DEFAULT_BACKGROUND)


def priority_color(priority) -> str:
    return PRIORITY_COLORS.get(getattr(priority, "value", priority), DEFAULT_BACKGROUND)


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of an already fetched sequence."""

    items: list[T]
    page: int
    per_page: int
    total: int
    total_pages: int

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def paginate(items: Sequence[T], page: int = 1, per_page: int = 6) -> Page[T]:
    """Slice a page out of a fully retrieved sequence.

    The page number is clamped to the available range, and an empty
    sequence still has one (empty) page.

    Args:
        items: All records, already ordered.
        page: Requested page number, 1-based.
        per_page: Page size, at least 1.

    Returns:
        The requested page.
    """
    if per_page < 1:
        raise ValueError("per_page must be at least 1")
    total = len(items)
    total_pages = max(1, math.ceil(total / per_page))
    page = min(max(page, 1), total_pages)
    start = (page - 1) * per_page
    return Page(
        items=list(items[start : start + per_page]),
        page=page,
        per_page=per_page,
        total=total,
        total_pages=total_pages,
    )
