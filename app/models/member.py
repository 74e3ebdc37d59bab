"""회원 및 팀 관련 SQLAlchemy ORM 모델 정의.

Member and Team SQLAlchemy ORM model definitions.
A member belongs to at most one team; a team has many members.

Tables:
    - teams: 팀 (Teams)
    - members: 회원 (Members, optional team FK)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Integer, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Team(Base):
    """팀 모델.

    Team model — groups members under a display name.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 팀 이름 (Team name)
        created_at: 생성 일시 UTC (Creation timestamp in UTC)

    Relationships:
        members: 소속 회원 목록 (Members of this team)
    """

    __tablename__ = "teams"

    # 팀 고유 식별자 — Team unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 팀 이름 — Team display name
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    members = relationship("Member", back_populates="team")


class Member(Base):
    """회원 모델.

    Member model. The team association is optional: a member without a team
    still shows up in unfiltered searches with null team fields.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        username: 회원 이름 (Member name, nullable)
        age: 나이 (Age)
        team_id: 소속 팀 FK (Team foreign key, nullable)
        created_at: 생성 일시 UTC (Creation timestamp, used as page order)

    Relationships:
        team: 소속 팀 (Owning team, may be None)
    """

    __tablename__ = "members"

    # 회원 고유 식별자 — Member unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 회원 이름 — Member name (nullable)
    username: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # 나이 — Age
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # 소속 팀 FK — Team (SET NULL: 팀 삭제 시 회원은 팀 없음 상태로 남음)
    team_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("teams.id", ondelete="SET NULL"), nullable=True, index=True)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    team = relationship("Team", back_populates="members")
