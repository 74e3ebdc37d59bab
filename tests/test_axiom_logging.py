"""Axiom 로깅 미들웨어 테스트.

Axiom logging middleware tests — error reason extraction and the event
sent for a failed request, with the consumed body handed back intact.
"""

import json

from starlette.requests import Request
from starlette.responses import Response, StreamingResponse

from app.middleware.axiom_logging import AxiomLoggingMiddleware, _error_reason


class FakeAxiomClient:
    """전송된 이벤트를 기록하는 Axiom 클라이언트 대역."""

    def __init__(self) -> None:
        self.events: list[tuple[str, list[dict]]] = []

    def ingest_events(self, dataset: str, events: list[dict]) -> None:
        self.events.append((dataset, events))


def make_request(path: str, query_string: bytes = b"") -> Request:
    return Request({
        "type": "http",
        "method": "GET",
        "scheme": "http",
        "server": ("test", 80),
        "path": path,
        "query_string": query_string,
        "headers": [],
    })


class TestErrorReason:
    """에러 사유 추출 테스트."""

    def test_json_detail(self):
        """JSON 본문의 detail 필드를 사용."""
        assert _error_reason(b'{"detail": "Member not found"}') == "Member not found"

    def test_json_without_detail(self):
        """detail이 없으면 JSON 전체를 문자열로."""
        assert json.loads(_error_reason(b'{"error": "x"}')) == {"error": "x"}

    def test_validation_error_list(self):
        """detail이 목록이면 JSON 문자열로 변환."""
        reason = _error_reason(b'{"detail": [{"loc": ["query", "age_min"]}]}')
        assert json.loads(reason) == [{"loc": ["query", "age_min"]}]

    def test_non_json_body(self):
        """JSON이 아니면 원문 텍스트."""
        assert _error_reason(b"Internal Server Error") == "Internal Server Error"

    def test_long_reason_is_truncated(self):
        """500자를 넘으면 잘라냄."""
        reason = _error_reason(json.dumps({"detail": "x" * 800}).encode())
        assert reason == "x" * 500


class TestDispatch:
    """요청 로깅 테스트."""

    def make_middleware(self) -> tuple[AxiomLoggingMiddleware, FakeAxiomClient]:
        middleware = AxiomLoggingMiddleware(app=None)
        client = FakeAxiomClient()
        middleware._client = client
        middleware._dataset = "api-logs"
        return middleware, client

    async def test_error_response_is_logged_and_rewrapped(self):
        """에러 응답은 사유를 기록하고 본문을 그대로 돌려줌."""
        middleware, client = self.make_middleware()
        body = b'{"detail": "Member not found"}'

        async def stream():
            yield body

        async def call_next(request):
            return StreamingResponse(stream(), status_code=404, media_type="application/json")

        response = await middleware.dispatch(
            make_request("/api/v1/members/x", b"team_name=teamA"), call_next,
        )

        assert response.status_code == 404
        assert response.body == body
        dataset, events = client.events[0]
        assert dataset == "api-logs"
        assert events[0]["status_code"] == 404
        assert events[0]["error"] == "Member not found"
        assert events[0]["query_params"] == {"team_name": "teamA"}
        assert "duration_ms" in events[0]

    async def test_success_response_has_no_error(self):
        """성공 응답은 에러 없이 기록."""
        middleware, client = self.make_middleware()

        async def call_next(request):
            return Response(content=b"[]", status_code=200)

        response = await middleware.dispatch(make_request("/api/v1/members"), call_next)

        assert response.status_code == 200
        event = client.events[0][1][0]
        assert event["status_code"] == 200
        assert "error" not in event
        assert "query_params" not in event

    async def test_health_is_not_logged(self):
        """헬스 체크 경로는 기록하지 않음."""
        middleware, client = self.make_middleware()

        async def call_next(request):
            return Response(content=b"{}", status_code=200)

        await middleware.dispatch(make_request("/health"), call_next)
        assert client.events == []
