"""페이지네이션 유틸리티 모듈.

Pagination utility module.
Provides the PageRequest/Page models and get_page, which resolves the
total row count of a page, skipping the count query when the page content
already pins the total down.
"""

import math
from collections.abc import Awaitable, Callable
from typing import Generic, Sequence, TypeVar

from pydantic import BaseModel

from app.utils.exceptions import InvalidPageRequestError

T = TypeVar("T")

# OFFSET + LIMIT 상한 — BIGINT 범위 (Largest offset + per_page a driver can bind)
MAX_ROW_POSITION: int = 2**63 - 1


class PageRequest(BaseModel):
    """페이지 요청 모델.

    Requested slice of a result set.

    Attributes:
        offset: 건너뛸 행 수 (Rows to skip, >= 0)
        per_page: 페이지당 항목 수 (Page size, > 0)
    """

    offset: int = 0
    per_page: int = 20

    @classmethod
    def of(cls, page: int, per_page: int) -> "PageRequest":
        """1부터 시작하는 페이지 번호로 요청을 만듭니다.

        Build a request from a 1-based page number.
        """
        return cls(offset=(page - 1) * per_page, per_page=per_page)


class Page(BaseModel, Generic[T]):
    """페이지네이션 결과 모델.

    Pagination result model for typed responses.

    Attributes:
        items: 현재 페이지 항목 목록 (Items for the current page)
        total: 전체 항목 수 (Total count across all pages)
        offset: 요청 오프셋 (Requested offset)
        per_page: 페이지당 항목 수 (Items per page)
        page: 현재 페이지 번호 (Current page number, 1-based)
        pages: 전체 페이지 수 (Total number of pages)
    """

    items: list[T]  # 현재 페이지 항목 목록 (Paginated items)
    total: int  # 전체 항목 수 (Total item count)
    offset: int  # 요청 오프셋 (Requested offset)
    per_page: int  # 페이지당 항목 수 (Items per page)
    page: int  # 현재 페이지 번호 — 1부터 시작 (Current page, 1-indexed)
    pages: int  # 전체 페이지 수 (Total pages, computed: ceil(total/per_page))


def ensure_valid_page_request(page_request: PageRequest) -> None:
    """페이지 요청을 검증합니다.

    Raises:
        InvalidPageRequestError: per_page <= 0, offset < 0,
            또는 offset + per_page가 BIGINT 범위 초과 (or offset + per_page beyond BIGINT)
    """
    if page_request.per_page <= 0:
        raise InvalidPageRequestError("per_page must be greater than 0")
    if page_request.offset < 0:
        raise InvalidPageRequestError("offset must not be negative")
    if page_request.offset + page_request.per_page > MAX_ROW_POSITION:
        raise InvalidPageRequestError("offset is too large")


async def get_page(
    items: Sequence[T],
    page_request: PageRequest,
    count_supplier: Callable[[], Awaitable[int]],
) -> Page[T]:
    """페이지 내용과 전체 개수로 Page를 구성합니다.

    Build a Page from already-fetched content, calling count_supplier only
    when the content cannot prove the total:

    - first page shorter than per_page: total = len(items)
    - later page, non-empty and shorter than per_page: total = offset + len(items)
    - anything else (a full page, or an empty page past the first): count query

    Args:
        items: 현재 페이지 항목 (Content of the requested page)
        page_request: 페이지 요청 (The request the content was fetched with)
        count_supplier: 전체 개수 조회 함수 (Coroutine factory issuing the count query)

    Returns:
        Page[T]: 페이지 결과 (Page with resolved total)
    """
    offset: int = page_request.offset
    per_page: int = page_request.per_page
    size: int = len(items)

    if offset == 0 and size < per_page:
        total: int = size
    elif offset > 0 and 0 < size < per_page:
        total = offset + size
    else:
        total = await count_supplier()

    return Page(
        items=list(items),
        total=total,
        offset=offset,
        per_page=per_page,
        page=offset // per_page + 1,
        pages=math.ceil(total / per_page),
    )
