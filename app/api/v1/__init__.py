"""v1 API 라우터 패키지 — 회원/팀 조회 엔드포인트 통합.

v1 API Router package — Aggregates the member and team endpoints
into a single router for inclusion in the FastAPI application.

Included routers:
    - members: 회원 검색 (Member search, paged search, detail)
    - teams: 팀 목록 (Team listing)
"""

from fastapi import APIRouter

from app.api.v1.members import router as members_router
from app.api.v1.teams import router as teams_router

v1_router: APIRouter = APIRouter()

# 회원: /members 하위 (Member search endpoints)
v1_router.include_router(members_router, prefix="/members", tags=["Members"])
# 팀: /teams 하위 (Team listing)
v1_router.include_router(teams_router, prefix="/teams", tags=["Teams"])
