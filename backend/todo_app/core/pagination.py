import math
from dataclasses import dataclass
from typing import Generic, List, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from todo_app.core.exceptions import ValidationError

T = TypeVar("T")

# Keeps LIMIT/OFFSET inside the 64-bit integer range every backend accepts.
MAX_PAGE_SIZE = 1000


@dataclass
class Page(Generic[T]):
    items: List[T]
    page_number: int
    page_size: int
    total_count: int
    total_pages: int

    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages


def count_pages(total_count: int, page_size: int) -> int:
    return math.ceil(total_count / page_size)


def clamp_page_number(page_number: int, total_pages: int) -> int:
    """Out-of-range pages resolve to the nearest valid one (1 when empty)."""
    return min(max(page_number, 1), max(1, total_pages))


async def paginate(db: AsyncSession, stmt: Select, page_number: int, page_size: int) -> Page:
    """
    Run an ordered ``select`` as a single page.

    Two round trips: a COUNT over the statement, then the clamped
    OFFSET/LIMIT slice. Writes landing between the two are not isolated.
    """
    if page_size <= 0:
        raise ValidationError.single("pageSize", "Page size must be greater than 0")
    if page_size > MAX_PAGE_SIZE:
        raise ValidationError.single("pageSize", f"Page size cannot exceed {MAX_PAGE_SIZE}")

    total_count = (
        await db.execute(select(func.count()).select_from(stmt.order_by(None).subquery()))
    ).scalar_one()
    total_pages = count_pages(total_count, page_size)
    page_number = clamp_page_number(page_number, total_pages)

    result = await db.execute(stmt.offset((page_number - 1) * page_size).limit(page_size))
    items = list(result.scalars().all())

    return Page(
        items=items,
        page_number=page_number,
        page_size=page_size,
        total_count=total_count,
        total_pages=total_pages,
    )
