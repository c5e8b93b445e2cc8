"""Request correlation: the ``X-Request-ID`` header and its context variable."""

from __future__ import annotations

import re
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Client supplied ids are echoed into logs and headers, so only short tokens are trusted.
_ACCEPTED_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,128}$")

_current_request_id: ContextVar[str | None] = ContextVar("taskdesk_request_id", default=None)


def current_request_id() -> str | None:
    """Return the id of the request being served, if any."""

    return _current_request_id.get()


@contextmanager
def request_id_scope(request_id: str | None) -> Iterator[None]:
    """Expose ``request_id`` to log records emitted inside the block."""

    if not request_id:
        yield
        return
    token = _current_request_id.set(request_id)
    try:
        yield
    finally:
        _current_request_id.reset(token)


def resolve_request_id(incoming: str | None) -> str:
    """Reuse a well-formed incoming id or mint a new one."""

    if incoming and _ACCEPTED_REQUEST_ID.match(incoming):
        return incoming
    return uuid.uuid4().hex


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Tag every request and response with a request id."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id
        with request_id_scope(request_id):
            response = await call_next(request)
        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
        return response


__all__ = [
    "REQUEST_ID_HEADER",
    "CorrelationIdMiddleware",
    "current_request_id",
    "request_id_scope",
    "resolve_request_id",
]
