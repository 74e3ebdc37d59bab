"""팀 서비스 — 팀 목록 조회.

Team Service — Team listing.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Team
from app.repositories.team_repository import team_repository
from app.schemas.member import TeamResponse


class TeamService:
    """팀 관련 비즈니스 로직을 처리하는 서비스."""

    def _to_response(self, team: Team) -> TeamResponse:
        return TeamResponse(id=str(team.id), name=team.name, created_at=team.created_at)

    async def list_teams(self, db: AsyncSession) -> list[TeamResponse]:
        """모든 팀을 이름순으로 조회합니다 (List all teams ordered by name)."""
        teams = await team_repository.get_all(db, order_by=Team.name)
        return [self._to_response(t) for t in teams]


# 싱글턴 인스턴스 — Singleton instance
team_service: TeamService = TeamService()
