"""회원 및 팀 관련 Pydantic 요청/응답 스키마 정의.

Member and Team Pydantic request/response schema definitions.
Covers the member search condition and the member/team projection.
"""

from datetime import datetime
from pydantic import BaseModel


# === 검색 조건 (Search condition) 스키마 ===

class MemberSearchCondition(BaseModel):
    """회원 검색 조건 스키마.

    Member search condition. Every field is optional: a missing field means
    "no constraint on this dimension", never "match null".
    Text fields count as missing when they are empty or whitespace only.

    Attributes:
        username: 회원 이름 일치 (Exact member name)
        team_name: 팀 이름 일치 (Exact team name)
        age_min: 최소 나이, 포함 (Inclusive lower age bound)
        age_max: 최대 나이, 포함 (Inclusive upper age bound)
    """

    username: str | None = None  # 회원 이름 (Exact username match, optional)
    team_name: str | None = None  # 팀 이름 (Exact team name match, optional)
    age_min: int | None = None  # 나이 >= age_min (optional)
    age_max: int | None = None  # 나이 <= age_max (optional)


# === 회원 (Member) 스키마 ===

class MemberTeamResponse(BaseModel):
    """회원/팀 프로젝션 응답 스키마.

    Member row joined with its team. Team fields are null for members
    without a team.

    Attributes:
        member_id: 회원 UUID (Member identifier)
        username: 회원 이름 (Member name, nullable)
        age: 나이 (Age)
        team_id: 팀 UUID (Team identifier, nullable)
        team_name: 팀 이름 (Team name, nullable)
    """

    member_id: str  # 회원 UUID 문자열 (Member UUID as string)
    username: str | None  # 회원 이름 (Member name, may be null)
    age: int  # 나이 (Age)
    team_id: str | None  # 팀 UUID 문자열 — 팀 없으면 None (Team UUID, null when teamless)
    team_name: str | None  # 팀 이름 — 팀 없으면 None (Team name, null when teamless)


# === 팀 (Team) 스키마 ===

class TeamResponse(BaseModel):
    """팀 응답 스키마.

    Attributes:
        id: 팀 UUID (Team unique identifier)
        name: 팀 이름 (Team name)
        created_at: 생성 일시 (Creation timestamp)
    """

    id: str  # 팀 UUID 문자열 (Team UUID as string)
    name: str  # 팀 이름 (Team name)
    created_at: datetime  # 생성 일시 UTC (Creation timestamp)
