"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어, 예외 처리 및 라우터 등록.

FastAPI application entry point — Middleware, exception handling and router registration.
Configures request logging, CORS, health check, the store-unavailable
handler and the v1 routers.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import InterfaceError, OperationalError

from app.config import settings
from app.middleware.axiom_logging import AxiomLoggingMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """시작 시 설정에 따라 샘플 데이터를 생성합니다.

    Seed sample data on startup when SEED_SAMPLE_DATA is enabled.
    """
    if settings.SEED_SAMPLE_DATA:
        from app.seed import seed

        await seed()
    yield


app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Axiom API 로깅 미들웨어 — Axiom API request/response logging
# CORS보다 먼저 등록하여 모든 요청을 캡처 (Registered before CORS to capture all requests)
app.add_middleware(AxiomLoggingMiddleware)

# CORS 미들웨어 — Cross-Origin Resource Sharing middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(OperationalError)
@app.exception_handler(InterfaceError)
async def store_unavailable_handler(request: Request, exc: Exception) -> JSONResponse:
    """DB 연결 실패를 503으로 변환합니다.

    Database connectivity errors propagate out of services unchanged;
    only here are they turned into a 503 response.
    """
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Database unavailable"},
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# 라우터 등록 — Router registration
# ---------------------------------------------------------------------------
from app.api.v1 import v1_router  # noqa: E402

app.include_router(v1_router, prefix="/api/v1")
