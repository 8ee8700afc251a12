"""페이지네이션 유틸리티 모듈.

Pagination utility module. Provides the generic ``Page`` response model
used by every paged endpoint and a helper building it from a repository's
``(items, total)`` result.
"""

import math
from typing import Generic, Sequence, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """페이지네이션 결과 모델.

    Pagination result model for typed responses.

    Attributes:
        items: 현재 페이지 항목 목록 (Items for the current page)
        total: 전체 항목 수 (Total count across all pages)
        page: 현재 페이지 번호 (Current page number, 1-based)
        per_page: 페이지당 항목 수 (Items per page)
        pages: 전체 페이지 수 (Total number of pages)
    """

    items: list[T]
    total: int
    page: int  # 1부터 시작 (1-indexed)
    per_page: int
    pages: int  # ceil(total / per_page)


def build_page(
    item_type: type[T],
    items: Sequence[T],
    total: int,
    page: int,
    per_page: int,
) -> Page[T]:
    """레포지토리 결과로 Page 응답을 만듭니다.

    Build a parametrised ``Page`` from converted items and the total count.

    Args:
        item_type: 항목 타입, Page 파라미터로 사용 (Item type used to parametrise Page)
        items: 변환된 현재 페이지 항목 (Converted items of the current page)
        total: 전체 항목 수 (Total item count)
        page: 현재 페이지 번호 (Current page, 1-based)
        per_page: 페이지당 항목 수 (Items per page)

    Returns:
        Page[T]: 페이지 응답 (Page response)
    """
    pages: int = math.ceil(total / per_page) if per_page > 0 else 0
    return Page[item_type](items=list(items), total=total, page=page, per_page=per_page, pages=pages)
