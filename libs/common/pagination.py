"""Page envelope shared by list endpoints."""

import math
from typing import Generic, List, Sequence, TypeVar

from fastapi import Query
from pydantic import BaseModel

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 5
MAX_PAGE_SIZE = 100


class PageParams(BaseModel):
    page: int = 0  # zero-based
    size: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return self.page * self.size


def page_params(
    page: int = Query(0, ge=0),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
) -> PageParams:
    """FastAPI dependency reading ?page=&size= query parameters."""
    return PageParams(page=page, size=size)


class Page(BaseModel, Generic[T]):
    content: List[T]
    page_number: int
    page_size: int
    total_elements: int
    total_pages: int

    @classmethod
    def build(cls, items: Sequence[T], params: PageParams, total: int) -> "Page[T]":
        return cls(
            content=list(items),
            page_number=params.page,
            page_size=params.size,
            total_elements=total,
            total_pages=math.ceil(total / params.size),
        )
