"""FastAPI 의존성 주입 모듈 — 검색 조건 및 페이지 요청 파싱.

FastAPI dependency injection module — Search condition and page request parsing.
Turns query parameters into the MemberSearchCondition and PageRequest
objects consumed by the member search service.
"""

from typing import Annotated

from fastapi import Query

from app.config import settings
from app.schemas.member import MemberSearchCondition
from app.utils.pagination import PageRequest


def get_search_condition(
    username: Annotated[str | None, Query()] = None,
    team_name: Annotated[str | None, Query()] = None,
    age_min: Annotated[int | None, Query()] = None,
    age_max: Annotated[int | None, Query()] = None,
) -> MemberSearchCondition:
    """쿼리 파라미터에서 회원 검색 조건을 만듭니다.

    Build a MemberSearchCondition from query parameters; omitted parameters
    stay None and impose no constraint.
    """
    return MemberSearchCondition(
        username=username,
        team_name=team_name,
        age_min=age_min,
        age_max=age_max,
    )


def get_page_request(
    page: Annotated[int, Query()] = 1,
    per_page: Annotated[int, Query()] = settings.DEFAULT_PAGE_SIZE,
) -> PageRequest:
    """쿼리 파라미터에서 페이지 요청을 만듭니다.

    Build a PageRequest from a 1-based page number and a page size.
    per_page above MAX_PAGE_SIZE is clamped; out-of-range values are left
    for the search service to reject with 400.
    """
    return PageRequest.of(page, min(per_page, settings.MAX_PAGE_SIZE))
