"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns,
so services raise them without specifying status codes at each call site.

Usage:
    from app.utils.exceptions import NotFoundError, InvalidPageRequestError
    raise NotFoundError("Member not found")
    raise InvalidPageRequestError("per_page must be greater than 0")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested member or team does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request data is invalid beyond what Pydantic validation catches.

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class InvalidPageRequestError(BadRequestError):
    """잘못된 페이지 요청 예외 — offset < 0 또는 per_page <= 0.

    Raised before any query is issued when a page request has a negative
    offset or a non-positive page size.
    """

    def __init__(self, detail: str = "Invalid page request") -> None:
        super().__init__(detail=detail)
