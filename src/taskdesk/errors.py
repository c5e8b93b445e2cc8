"""Application-level exception handling helpers."""

from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from http import HTTPStatus
from typing import Any, Mapping

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from .core.middleware import REQUEST_ID_HEADER, request_id_scope
from .schemas.system import ErrorResponse

logger = logging.getLogger(__name__)


class ApplicationError(Exception):
    """Base class for domain-specific errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "application_error",
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details


class ValidationError(ApplicationError):
    """Malformed or missing input."""

    def __init__(
        self,
        message: str = "Validation failed.",
        *,
        code: str = "validation_error",
        details: Any | None = None,
    ) -> None:
        super().__init__(
            message,
            code=code,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
        )


class InvalidCredentialsError(ApplicationError):
    """Login attempt that matched no user."""

    def __init__(self, message: str = "Invalid credentials.") -> None:
        super().__init__(
            message,
            code="invalid_credentials",
            status_code=status.HTTP_401_UNAUTHORIZED,
        )


class NotFoundError(ApplicationError):
    """Error representing missing resources."""

    def __init__(
        self,
        message: str = "Resource not found.",
        *,
        code: str = "not_found",
        details: Any | None = None,
    ) -> None:
        super().__init__(
            message,
            code=code,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
        )


class ConflictError(ApplicationError):
    """Uniqueness or other integrity violation reported by the store."""

    def __init__(
        self,
        message: str = "Resource conflicts with existing data.",
        *,
        code: str = "conflict",
        details: Any | None = None,
    ) -> None:
        super().__init__(
            message,
            code=code,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
        )


class StoreUnavailableError(ApplicationError):
    """The database connection could not be acquired or used."""

    def __init__(
        self,
        message: str = "Data store is unavailable.",
        *,
        code: str = "store_unavailable",
        details: Any | None = None,
    ) -> None:
        super().__init__(
            message,
            code=code,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
        )


_HTTP_STATUS_CODE_MAP: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "bad_request",
    status.HTTP_401_UNAUTHORIZED: "unauthorized",
    status.HTTP_403_FORBIDDEN: "forbidden",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
    status.HTTP_409_CONFLICT: "conflict",
}


def _request_context(request: Request) -> AbstractContextManager[None]:
    return request_id_scope(getattr(request.state, "request_id", None))


def _merge_details_with_request(request: Request, details: Any | None) -> Any | None:
    request_id = getattr(request.state, "request_id", None)
    if not request_id:
        return details
    if details is None:
        return {"request_id": request_id}
    if isinstance(details, dict):
        if "request_id" not in details:
            return {**details, "request_id": request_id}
        return details
    return {"request_id": request_id, "detail": details}


def _error_response(
    request: Request,
    *,
    status_code: int,
    code: str,
    message: str,
    details: Any | None = None,
    path: str | None = None,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    payload = ErrorResponse(
        error=message,
        code=code,
        details=_merge_details_with_request(request, details),
        path=path,
    )
    response = JSONResponse(status_code=status_code, content=payload.model_dump(exclude_none=True))
    if headers:
        response.headers.update(headers)
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
    return response


def _http_exception_details(status_code: int, detail: Any) -> tuple[str, Any | None]:
    if isinstance(detail, str):
        return detail, None
    try:
        status_phrase = HTTPStatus(status_code).phrase
    except ValueError:
        status_phrase = "Error"
    if detail is None:
        return status_phrase, None
    if isinstance(detail, list):
        return status_phrase, {"errors": detail}
    return status_phrase, detail


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the provided FastAPI app."""

    @app.exception_handler(ApplicationError)
    async def _handle_application_error(
        request: Request,
        exc: ApplicationError,
    ) -> JSONResponse:
        with _request_context(request):
            if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
                logger.error(
                    "Application error encountered",
                    extra={"code": exc.code, "status_code": exc.status_code},
                    exc_info=exc.__cause__,
                )
            else:
                logger.warning(
                    "Application error encountered",
                    extra={"code": exc.code, "status_code": exc.status_code},
                )
            return _error_response(
                request,
                status_code=exc.status_code,
                code=exc.code,
                message=exc.message,
                details=exc.details,
            )

    @app.exception_handler(RequestValidationError)
    async def _handle_request_validation_error(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        with _request_context(request):
            errors = jsonable_errors(exc)
            logger.warning("Request validation failed", extra={"errors": errors})
            return _error_response(
                request,
                status_code=status.HTTP_400_BAD_REQUEST,
                code="validation_error",
                message="Request validation failed.",
                details={"errors": errors},
            )

    @app.exception_handler(IntegrityError)
    async def _handle_integrity_error(
        request: Request,
        exc: IntegrityError,
    ) -> JSONResponse:
        with _request_context(request):
            logger.error("Database integrity error encountered.", exc_info=exc)
            return _error_response(
                request,
                status_code=status.HTTP_409_CONFLICT,
                code="conflict",
                message="Database integrity violation.",
            )

    @app.exception_handler(StarletteHTTPException)
    async def _handle_http_exception(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        with _request_context(request):
            code = _HTTP_STATUS_CODE_MAP.get(exc.status_code, "http_error")
            message, extra_details = _http_exception_details(exc.status_code, exc.detail)
            path = str(request.url.path)
            log = logger.error if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR else logger.warning
            log(
                "HTTP exception raised",
                extra={"code": code, "status_code": exc.status_code, "path": path},
            )
            return _error_response(
                request,
                status_code=exc.status_code,
                code=code,
                message=message,
                details=extra_details,
                path=path if exc.status_code == status.HTTP_404_NOT_FOUND else None,
                headers=exc.headers or None,
            )

    @app.exception_handler(Exception)
    async def _handle_unhandled_exception(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        with _request_context(request):
            logger.exception("Unhandled application error.", exc_info=exc)
            return _error_response(
                request,
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                code="server_error",
                message="Internal server error.",
            )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Return validation errors stripped of non-serialisable context."""

    cleaned: list[dict[str, Any]] = []
    for error in exc.errors():
        item = {key: value for key, value in error.items() if key not in {"ctx", "input", "url"}}
        cleaned.append(item)
    return cleaned


__all__ = [
    "ApplicationError",
    "ConflictError",
    "InvalidCredentialsError",
    "NotFoundError",
    "StoreUnavailableError",
    "ValidationError",
    "register_exception_handlers",
]
