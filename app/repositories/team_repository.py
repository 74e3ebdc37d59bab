"""팀 레포지토리 — 팀 조회 쿼리 담당.

Team Repository — Team lookups used by the team listing and the seed script.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Team
from app.repositories.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """팀 테이블 레포지토리.

    Repository for the teams table.
    """

    def __init__(self) -> None:
        super().__init__(Team)

    async def get_by_name(self, db: AsyncSession, name: str) -> Team | None:
        """이름으로 팀을 조회합니다 (Retrieve the first team with the given name)."""
        query: Select = select(Team).where(Team.name == name).order_by(Team.created_at).limit(1)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def any_exists(self, db: AsyncSession) -> bool:
        """팀이 하나라도 있는지 확인합니다 (Whether any team row exists)."""
        result = await db.execute(select(Team.id).limit(1))
        return result.scalar_one_or_none() is not None


# 싱글턴 인스턴스 — Singleton instance
team_repository: TeamRepository = TeamRepository()
