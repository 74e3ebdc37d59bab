"""회원 라우터 — 회원 검색 엔드포인트.

Member Router — Member search endpoints.
All filters are optional query parameters: username, team_name, age_min, age_max.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_page_request, get_search_condition
from app.database import get_db
from app.schemas.member import MemberSearchCondition, MemberTeamResponse
from app.services.member_search_service import member_search_service
from app.utils.pagination import Page, PageRequest

router: APIRouter = APIRouter()


@router.get("", response_model=list[MemberTeamResponse])
async def search_members(
    db: Annotated[AsyncSession, Depends(get_db)],
    condition: Annotated[MemberSearchCondition, Depends(get_search_condition)],
) -> list[MemberTeamResponse]:
    """조건에 맞는 모든 회원을 조회합니다.

    Search members with optional filters, without pagination.
    """
    return await member_search_service.search(db, condition)


@router.get("/page", response_model=Page[MemberTeamResponse])
async def search_members_page(
    db: Annotated[AsyncSession, Depends(get_db)],
    condition: Annotated[MemberSearchCondition, Depends(get_search_condition)],
    page_request: Annotated[PageRequest, Depends(get_page_request)],
) -> Page[MemberTeamResponse]:
    """조건에 맞는 회원을 페이지 단위로 조회합니다.

    Search members with optional filters, one page at a time, with the total count.
    """
    return await member_search_service.search_paged(db, condition, page_request)


@router.get("/{member_id}", response_model=MemberTeamResponse)
async def get_member(
    member_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MemberTeamResponse:
    """회원 상세 정보를 팀과 함께 조회합니다.

    Retrieve a single member with its team.
    """
    return await member_search_service.get_member(db, member_id)
