"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Sends one structured event per request to Axiom: method, path, query
params (the search filters and paging), status code, duration, and the
error reason for failed requests.
"""

import json
import time
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from axiom_py import Client as AxiomClient

from app.config import settings

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

# 에러 사유 최대 길이 — Max length of the logged error reason
_MAX_ERROR_LEN = 500


def _error_reason(body: bytes) -> str:
    """에러 응답 본문에서 사유를 추출합니다.

    Extract the "detail" field of a JSON error body, falling back to raw text.
    """
    try:
        data = json.loads(body)
        reason = data.get("detail", data) if isinstance(data, dict) else data
    except (json.JSONDecodeError, UnicodeDecodeError):
        reason = body.decode("utf-8", errors="replace")
    reason = reason if isinstance(reason, str) else json.dumps(reason, default=str)
    return reason[:_MAX_ERROR_LEN]


async def _read_body(response: Response) -> bytes:
    """스트리밍 응답 본문을 모두 읽습니다 (Drain a streaming response body)."""
    body = b""
    async for chunk in response.body_iterator:  # type: ignore[attr-defined]
        body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
    return body


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs API requests to Axiom. Passes requests through
    untouched when Axiom is not configured.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    def _send(self, event: dict[str, Any]) -> None:
        try:
            self._client.ingest_events(self._dataset, [event])  # type: ignore[union-attr]
        except Exception:
            pass  # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break request on log failure

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SKIP_PATHS or not self._client:
            return await call_next(request)

        start_time = time.time()
        event: dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
            "status_code": 500,
        }
        if request.query_params:
            event["query_params"] = dict(request.query_params)

        try:
            response = await call_next(request)
            event["status_code"] = response.status_code

            # 에러 응답시 body에서 사유 추출 후 다시 감싸서 반환
            # Extract error reason, then re-wrap the consumed body
            if response.status_code >= 400:
                body = await _read_body(response)
                event["error"] = _error_reason(body)
                response = Response(
                    content=body,
                    status_code=response.status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["duration_ms"] = round((time.time() - start_time) * 1000, 2)
            self._send(event)

        return response
