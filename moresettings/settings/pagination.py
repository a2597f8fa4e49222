"""
DataPage model and pagination helper for in-memory listings.
"""

import math
from typing import Generic, Sequence, TypeVar

from pydantic import BaseModel, Field

from moresettings.utils.validation import validate_page, validate_page_size

T = TypeVar("T")


class DataPage(BaseModel, Generic[T]):
    """
    One page of a sorted listing.

    Attributes:
        items: Items on this page
        page: 1-based page number
        page_size: Maximum number of items per page
        total_count: Number of items across all pages
        page_count: Number of pages (0 when there are no items)
    """

    items: list[T] = Field(default_factory=list)
    page: int = Field(1, ge=1)
    page_size: int = Field(50, ge=1)
    total_count: int = Field(0, ge=0)
    page_count: int = Field(0, ge=0)

    @property
    def has_next(self) -> bool:
        return self.page < self.page_count


def paginate(items: Sequence[T], page: int = 1, page_size: int = 50) -> DataPage[T]:
    """
    Slice a sorted sequence into a page.

    A page beyond the last one is returned empty rather than clamped.

    Raises:
        ValidationError: If page or page_size is not a positive integer
    """
    validate_page(page)
    validate_page_size(page_size)

    total_count = len(items)
    start = (page - 1) * page_size
    return DataPage(
        items=list(items[start:start + page_size]),
        page=page,
        page_size=page_size,
        total_count=total_count,
        page_count=math.ceil(total_count / page_size),
    )
