"""회원 검색 서비스 — 동적 조건 검색 및 페이지네이션.

Member Search Service — Dynamic member search and pagination.
Translates a sparse MemberSearchCondition into a predicate list, runs it
through the member search store, and resolves page totals with count
elision. Store errors propagate unchanged.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import ColumnElement, Row
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Member, Team
from app.repositories.member_repository import MemberSearchStore, member_repository
from app.schemas.member import MemberSearchCondition, MemberTeamResponse
from app.utils.exceptions import NotFoundError
from app.utils.pagination import Page, PageRequest, ensure_valid_page_request, get_page


def _has_text(value: str | None) -> bool:
    """None, 빈 문자열, 공백만 있는 문자열이 아니면 True."""
    return value is not None and value.strip() != ""


def build_predicates(condition: MemberSearchCondition) -> list[ColumnElement[bool]]:
    """검색 조건에서 값이 있는 필드만 조건식으로 변환합니다.

    Build one predicate per present field. An empty list means "no filter".

    Args:
        condition: 회원 검색 조건 (Member search condition)

    Returns:
        list[ColumnElement[bool]]: AND로 결합될 조건 목록 (Predicates to AND together)
    """
    predicates: list[ColumnElement[bool]] = []

    if _has_text(condition.username):
        predicates.append(Member.username == condition.username)
    if _has_text(condition.team_name):
        predicates.append(Team.name == condition.team_name)
    if condition.age_min is not None:
        predicates.append(Member.age >= condition.age_min)
    if condition.age_max is not None:
        predicates.append(Member.age <= condition.age_max)

    return predicates


class MemberSearchService:
    """회원 검색 비즈니스 로직을 처리하는 서비스.

    Stateless search service; the only thing it holds is the store it queries.
    """

    # 페이지 정렬 기준 — stable order so OFFSET/LIMIT slices do not overlap
    PAGE_ORDER = (Member.created_at, Member.id)

    def __init__(self, store: MemberSearchStore) -> None:
        self.store: MemberSearchStore = store

    @staticmethod
    def _to_response(row: Row) -> MemberTeamResponse:
        """프로젝션 행을 응답 스키마로 변환합니다."""
        return MemberTeamResponse(
            member_id=str(row.member_id),
            username=row.username,
            age=row.age,
            team_id=str(row.team_id) if row.team_id is not None else None,
            team_name=row.team_name,
        )

    async def search(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> list[MemberTeamResponse]:
        """조건에 맞는 모든 회원을 팀과 함께 조회합니다.

        Return every member row (left-joined with its team) matching the condition.
        No ordering is guaranteed.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 회원 검색 조건 (Member search condition)

        Returns:
            list[MemberTeamResponse]: 검색 결과 (Matching rows)
        """
        rows: Sequence[Row] = await self.store.query(db, build_predicates(condition))
        return [self._to_response(r) for r in rows]

    async def search_paged(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page_request: PageRequest,
    ) -> Page[MemberTeamResponse]:
        """조건에 맞는 회원을 페이지 단위로 조회합니다.

        Fetch one page of matching rows plus the exact total. The count query
        shares the content query's join and predicates, and is skipped when
        the page itself proves the total.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 회원 검색 조건 (Member search condition)
            page_request: 페이지 요청 (Offset and page size)

        Returns:
            Page[MemberTeamResponse]: 페이지 결과 (Page of rows with total)

        Raises:
            InvalidPageRequestError: offset < 0, per_page <= 0, or offset beyond BIGINT (before any query)
        """
        ensure_valid_page_request(page_request)
        predicates: list[ColumnElement[bool]] = build_predicates(condition)

        rows: Sequence[Row] = await self.store.query(
            db,
            predicates,
            offset=page_request.offset,
            limit=page_request.per_page,
            order_by=self.PAGE_ORDER,
        )

        async def count_matching() -> int:
            return await self.store.count(db, predicates)

        return await get_page(
            [self._to_response(r) for r in rows],
            page_request,
            count_matching,
        )

    async def get_member(
        self,
        db: AsyncSession,
        member_id: UUID,
    ) -> MemberTeamResponse:
        """회원 한 명을 팀과 함께 조회합니다.

        Raises:
            NotFoundError: 회원을 찾을 수 없을 때 (Member not found)
        """
        member: Member | None = await self.store.get_with_team(db, member_id)
        if member is None:
            raise NotFoundError("Member not found")

        return MemberTeamResponse(
            member_id=str(member.id),
            username=member.username,
            age=member.age,
            team_id=str(member.team.id) if member.team is not None else None,
            team_name=member.team.name if member.team is not None else None,
        )


# 싱글턴 인스턴스 — Singleton instance
member_search_service: MemberSearchService = MemberSearchService(member_repository)
