"""공통 Pydantic 타입 및 오류 응답 스키마 정의.

Common Pydantic types and the error response schema shared by all endpoints.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel


def _not_blank(value: str) -> str:
    """공백만 있는 문자열을 거부합니다 (Reject empty or whitespace-only strings)."""
    if not value.strip():
        raise ValueError("must not be blank")
    return value


# 공백 불가 문자열 — Non-blank string (value is kept as sent)
NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


class ErrorType(str, Enum):
    """오류 분류 (Error kind reported in ``ErrorResponse.error``)."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ErrorResponse(BaseModel):
    """오류 응답 스키마.

    Structured error payload returned for every failed request.

    Attributes:
        timestamp: 발생 시각 UTC (When the error was produced)
        status: HTTP 상태 코드 (HTTP status code)
        error: 오류 분류 (Error kind)
        message: 메시지 또는 필드별 오류 맵 (Message, or {field: reason} for validation)
        path: 요청 경로 (Request path)
    """

    timestamp: datetime
    status: int
    error: ErrorType
    message: Any
    path: str

