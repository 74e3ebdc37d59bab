"""샘플 데이터 시드 스크립트 — 팀 2개, 회원 100명 생성.

Seed script — Creates sample teams and members for local runs.
Runs from the command line, or on startup when SEED_SAMPLE_DATA is true.

Usage:
    python -m app.seed

Creates:
    - 2개 팀: teamA, teamB (2 teams)
    - 100명 회원: member0 ~ member99, 나이 = 번호, 짝수는 teamA / 홀수는 teamB
      (100 members, age = index, even index in teamA and odd in teamB)
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import async_session, engine, Base
from app.models import Member
from app.repositories.team_repository import team_repository

SAMPLE_MEMBER_COUNT: int = 100


async def seed_sample_data(db: AsyncSession) -> bool:
    """주어진 세션에 샘플 데이터를 추가합니다.

    Insert the sample teams and members through the given session.
    Idempotent: 팀이 하나라도 있으면 건너뜁니다 (Skips if any team exists).

    Args:
        db: 비동기 데이터베이스 세션 (Async database session)

    Returns:
        bool: 데이터를 추가했으면 True (True when rows were inserted)
    """
    if await team_repository.any_exists(db):
        return False

    team_a = await team_repository.create(db, {"name": "teamA"})
    team_b = await team_repository.create(db, {"name": "teamB"})

    for i in range(SAMPLE_MEMBER_COUNT):
        team = team_a if i % 2 == 0 else team_b
        db.add(Member(username=f"member{i}", age=i, team_id=team.id))

    await db.flush()
    return True


async def seed() -> None:
    """테이블을 만들고 샘플 데이터를 커밋합니다.

    Create all tables from ORM metadata, then seed and commit.
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        if not await seed_sample_data(db):
            print("Already seeded. Skipping.")
            return
        await db.commit()
        print(f"Seeded: 2 teams, {SAMPLE_MEMBER_COUNT} members")


if __name__ == "__main__":
    asyncio.run(seed())
