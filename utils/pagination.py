import math
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class PageMetaDTO(BaseModel):
    total: int
    page: int
    limit: int
    total_pages: int


class PageDTO(BaseModel, Generic[T]):
    data: list[T]
    meta: PageMetaDTO


def get_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def build_page(data: list[T], total: int, page: int, limit: int) -> PageDTO[T]:
    return PageDTO(
        data=data,
        meta=PageMetaDTO(total=total, page=page, limit=limit, total_pages=math.ceil(total / limit)),
    )
