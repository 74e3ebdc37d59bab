"""테스트 인프라 — 테스트 DB 엔진, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Test database engine, session, and httpx client fixtures.
Each test gets a fresh schema on an in-memory SQLite database by default;
set TEST_DATABASE_URL to run against another async database.
"""

import os
from collections.abc import AsyncGenerator
from typing import Any, Sequence

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 — register all models with metadata
from app.repositories.member_repository import MemberRepository

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite://")


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 스키마를 새로 만듭니다."""
    options: dict[str, Any] = {"echo": False}
    if make_url(TEST_DATABASE_URL).get_backend_name() == "sqlite":
        # 인메모리 DB는 하나의 연결을 공유해야 함 (one shared in-memory connection)
        options["poolclass"] = StaticPool
    eng = create_async_engine(TEST_DATABASE_URL, **options)

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def teams(db: AsyncSession):
    """teamA, teamB를 생성합니다."""
    from app.models.member import Team
    result = {}
    for name in ("teamA", "teamB"):
        team = Team(name=name)
        db.add(team)
        await db.flush()
        await db.refresh(team)
        result[name] = team
    return result


@pytest_asyncio.fixture
async def members(db: AsyncSession, teams):
    """회원 4명을 생성합니다: member1(10, A), member2(20, A), member3(30, B), member4(40, B)."""
    from app.models.member import Member
    result = {}
    for i, team_name in [(1, "teamA"), (2, "teamA"), (3, "teamB"), (4, "teamB")]:
        member = Member(username=f"member{i}", age=i * 10, team_id=teams[team_name].id)
        db.add(member)
        await db.flush()
        await db.refresh(member)
        result[member.username] = member
    return result


@pytest_asyncio.fixture
async def teamless_member(db: AsyncSession, members):
    """팀이 없는 회원 member5(50)를 생성합니다."""
    from app.models.member import Member
    member = Member(username="member5", age=50)
    db.add(member)
    await db.flush()
    await db.refresh(member)
    return member


@pytest_asyncio.fixture
async def nameless_member(db: AsyncSession, teamless_member, teams):
    """이름이 없는 teamA 회원(나이 60)을 생성합니다."""
    from app.models.member import Member
    member = Member(username=None, age=60, team_id=teams["teamA"].id)
    db.add(member)
    await db.flush()
    await db.refresh(member)
    return member


class CountingStore:
    """호출 횟수를 기록하는 회원 검색 저장소 래퍼.

    Member search store wrapper recording how many queries of each kind ran.
    """

    def __init__(self, inner: MemberRepository | None = None) -> None:
        self.inner = inner or MemberRepository()
        self.query_calls = 0
        self.count_calls = 0
        self.detail_calls = 0

    async def query(self, db, predicates, offset=None, limit=None, order_by=None) -> Sequence[Any]:
        self.query_calls += 1
        return await self.inner.query(db, predicates, offset=offset, limit=limit, order_by=order_by)

    async def count(self, db, predicates) -> int:
        self.count_calls += 1
        return await self.inner.count(db, predicates)

    async def get_with_team(self, db, member_id):
        self.detail_calls += 1
        return await self.inner.get_with_team(db, member_id)


@pytest_asyncio.fixture
async def counting_store() -> CountingStore:
    """실제 회원 레포지토리를 감싼 CountingStore를 제공합니다."""
    return CountingStore()
