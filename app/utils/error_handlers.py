"""전역 예외 핸들러 모듈 — 모든 오류를 ErrorResponse 형식으로 변환.

Global exception handlers — Render every failure as an ``ErrorResponse``
payload ``{timestamp, status, error, message, path}``.

    - RequestValidationError → 400, message = {field: reason}
    - HTTPException → its status code, message = detail
    - 그 외 모든 예외 → 500, 로그 기록 후 일반 메시지 (logged, generic message)
"""

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.schemas.common import ErrorResponse, ErrorType

logger = logging.getLogger(__name__)

# 상태 코드 → 오류 분류 매핑 — Status code to error kind
_ERROR_TYPES: dict[int, ErrorType] = {
    status.HTTP_400_BAD_REQUEST: ErrorType.BAD_REQUEST,
    status.HTTP_404_NOT_FOUND: ErrorType.NOT_FOUND,
    status.HTTP_409_CONFLICT: ErrorType.CONFLICT,
    status.HTTP_422_UNPROCESSABLE_ENTITY: ErrorType.VALIDATION_ERROR,
}


def _error_response(request: Request, status_code: int, error: ErrorType, message: Any) -> JSONResponse:
    body = ErrorResponse(
        timestamp=datetime.now(timezone.utc),
        status=status_code,
        error=error,
        message=message,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def _field_name(loc: tuple[Any, ...]) -> str:
    """오류 위치에서 'body' 등 출처 접두어를 제거합니다 (Drop the 'body'/'query' prefix)."""
    parts = [str(part) for part in loc]
    if parts and parts[0] in ("body", "query", "path", "header"):
        parts = parts[1:]
    return ".".join(parts) or "request"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 검증 오류를 400 응답으로 변환합니다.

    Render request validation failures as 400 with a ``{field: reason}`` map.
    """
    errors: dict[str, str] = {}
    for error in exc.errors():
        errors.setdefault(_field_name(tuple(error.get("loc", ()))), error.get("msg", "Invalid value"))
    return _error_response(request, status.HTTP_400_BAD_REQUEST, ErrorType.VALIDATION_ERROR, errors)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """HTTPException을 상태 코드 그대로 변환합니다 (Keep the status, wrap the detail)."""
    error: ErrorType = _ERROR_TYPES.get(
        exc.status_code,
        ErrorType.INTERNAL_ERROR if exc.status_code >= 500 else ErrorType.BAD_REQUEST,
    )
    response = _error_response(request, exc.status_code, error, exc.detail)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """처리되지 않은 예외를 기록하고 500 응답을 반환합니다.

    Log any other exception with its traceback and answer 500 without
    leaking internals.
    """
    logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorType.INTERNAL_ERROR,
        "Something went wrong. Please contact support.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """애플리케이션에 전역 예외 핸들러를 등록합니다 (Install all handlers on ``app``)."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
