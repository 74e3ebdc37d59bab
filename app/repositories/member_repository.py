"""회원 레포지토리 — 회원/팀 조인 검색 쿼리 담당.

Member Repository — Executes member searches over member LEFT OUTER JOIN team.
The content query and the count query are built from the same join and the
same predicate list, so a page and its total always agree on the filter.
"""

from typing import Any, Protocol, Sequence
from uuid import UUID

from sqlalchemy import ColumnElement, Row, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.member import Member, Team
from app.repositories.base import BaseRepository


class MemberSearchStore(Protocol):
    """회원 검색 저장소 인터페이스.

    Store capability consumed by the member search service. query and count
    take the same predicate list and apply it over the same join;
    get_with_team serves single-member lookups.
    """

    async def query(
        self,
        db: AsyncSession,
        predicates: Sequence[ColumnElement[bool]],
        offset: int | None = None,
        limit: int | None = None,
        order_by: Sequence[Any] | None = None,
    ) -> Sequence[Row]: ...

    async def count(
        self,
        db: AsyncSession,
        predicates: Sequence[ColumnElement[bool]],
    ) -> int: ...

    async def get_with_team(
        self,
        db: AsyncSession,
        member_id: UUID,
    ) -> Member | None: ...


class MemberRepository(BaseRepository[Member]):
    """회원 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling member queries, including the member/team search projection.
    """

    def __init__(self) -> None:
        super().__init__(Member)

    @staticmethod
    def _search_from(query: Select) -> Select:
        """회원 → 팀 LEFT OUTER JOIN을 적용합니다.

        Apply the member to team outer join. Teamless members are kept; a
        team_name predicate is what excludes them.
        """
        return query.select_from(Member).outerjoin(Team, Member.team_id == Team.id)

    async def query(
        self,
        db: AsyncSession,
        predicates: Sequence[ColumnElement[bool]],
        offset: int | None = None,
        limit: int | None = None,
        order_by: Sequence[Any] | None = None,
    ) -> Sequence[Row]:
        """회원/팀 프로젝션을 조회합니다.

        Fetch (member_id, username, age, team_id, team_name) rows matching
        all predicates.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            predicates: AND로 결합할 조건 목록, 비어 있으면 전체 조회
                        (Predicates AND-combined; empty means no filter)
            offset: 건너뛸 행 수 (Rows to skip, optional)
            limit: 최대 행 수 (Maximum rows, optional)
            order_by: 정렬 기준 (Order by clauses, optional)

        Returns:
            Sequence[Row]: 프로젝션 행 목록 (Projected rows)
        """
        query: Select = self._search_from(
            select(
                Member.id.label("member_id"),
                Member.username,
                Member.age,
                Team.id.label("team_id"),
                Team.name.label("team_name"),
            )
        ).where(*predicates)

        if order_by:
            query = query.order_by(*order_by)
        if offset is not None:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)

        result = await db.execute(query)
        return result.all()

    async def count(
        self,
        db: AsyncSession,
        predicates: Sequence[ColumnElement[bool]],
    ) -> int:
        """조건에 맞는 회원 수를 조회합니다.

        Count members matching all predicates over the same join as query().
        No offset, limit or order is applied.
        """
        query: Select = self._search_from(select(func.count(Member.id))).where(*predicates)
        return (await db.execute(query)).scalar() or 0

    async def get_with_team(
        self,
        db: AsyncSession,
        member_id: UUID,
    ) -> Member | None:
        """회원을 소속 팀과 함께 조회합니다.

        Retrieve a member with its team eagerly loaded.
        """
        query: Select = (
            select(Member)
            .options(selectinload(Member.team))
            .where(Member.id == member_id)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
member_repository: MemberRepository = MemberRepository()
