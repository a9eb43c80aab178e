"""
Pagination schemas for page-based list responses.
"""

from __future__ import annotations

import math
from typing import Generic, List, TypeVar

from pydantic import Field

from hotel_booking.schemas.common.base import BaseSchema

T = TypeVar("T")

__all__ = [
    "PaginationMeta",
    "PaginatedResponse",
]


class PaginationMeta(BaseSchema):
    """Pagination metadata."""

    page: int = Field(..., ge=1, description="Current page number")
    page_size: int = Field(..., ge=1, description="Items per page")
    total_items: int = Field(..., ge=0, description="Total number of items")
    total_pages: int = Field(..., ge=0, description="Total number of pages")
    has_next: bool = Field(..., description="Whether a next page exists")
    has_previous: bool = Field(..., description="Whether a previous page exists")

    @classmethod
    def build(cls, page: int, page_size: int, total_items: int) -> "PaginationMeta":
        total_pages = math.ceil(total_items / page_size) if total_items else 0
        return cls(
            page=page,
            page_size=page_size,
            total_items=total_items,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_previous=page > 1,
        )


class PaginatedResponse(BaseSchema, Generic[T]):
    """Generic paginated response."""

    success: bool = Field(default=True, description="Success flag")
    data: List[T] = Field(default_factory=list, description="Page items")
    pagination: PaginationMeta

    @classmethod
    def create(cls, items: List[T], page: int, page_size: int, total_items: int):
        return cls(
            data=items,
            pagination=PaginationMeta.build(page, page_size, total_items),
        )
