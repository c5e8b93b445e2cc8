from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI, status
from httpx import AsyncClient
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError

from taskdesk.core.logging import RequestContextFilter
from taskdesk.errors import ApplicationError, StoreUnavailableError

pytestmark = pytest.mark.asyncio


async def test_application_error_response_schema(app: FastAPI, client: AsyncClient) -> None:
    @app.get("/error/application")
    async def trigger_application_error() -> None:  # pragma: no cover - defined in test
        raise ApplicationError(
            "Example failure",
            code="example_error",
            status_code=status.HTTP_418_IM_A_TEAPOT,
            details={"foo": "bar"},
        )

    response = await client.get("/error/application")

    assert response.status_code == status.HTTP_418_IM_A_TEAPOT
    request_id = response.headers["X-Request-ID"]
    assert response.json() == {
        "error": "Example failure",
        "code": "example_error",
        "details": {"foo": "bar", "request_id": request_id},
    }


async def test_validation_error_maps_to_bad_request(app: FastAPI, client: AsyncClient) -> None:
    class ExamplePayload(BaseModel):
        name: str

    @app.post("/error/validation")
    async def create_item(_: ExamplePayload) -> None:  # pragma: no cover - defined in test
        return None

    response = await client.post("/error/validation", json={})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    payload = response.json()
    assert payload["code"] == "validation_error"
    assert payload["error"] == "Request validation failed."
    assert payload["details"]["errors"]
    assert payload["details"]["request_id"] == response.headers["X-Request-ID"]


async def test_unmatched_route_reports_path(client: AsyncClient) -> None:
    response = await client.get("/api/does-not-exist")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    payload = response.json()
    assert payload["code"] == "not_found"
    assert payload["path"] == "/api/does-not-exist"
    assert payload["error"]
    assert payload["details"]["request_id"] == response.headers["X-Request-ID"]


async def test_integrity_error_maps_to_conflict(app: FastAPI, client: AsyncClient) -> None:
    @app.get("/error/database")
    async def trigger_integrity_error() -> None:  # pragma: no cover - defined in test
        raise IntegrityError("statement", {}, Exception("constraint"))

    response = await client.get("/error/database")

    assert response.status_code == status.HTTP_409_CONFLICT
    payload = response.json()
    assert payload["code"] == "conflict"
    assert payload["error"] == "Database integrity violation."


async def test_store_unavailable_maps_to_server_error(app: FastAPI, client: AsyncClient) -> None:
    @app.get("/error/store")
    async def trigger_store_error() -> None:  # pragma: no cover - defined in test
        raise StoreUnavailableError()

    response = await client.get("/error/store")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["code"] == "store_unavailable"


async def test_unhandled_error_hides_internal_details(app: FastAPI, client: AsyncClient) -> None:
    @app.get("/error/unhandled")
    async def trigger_unhandled_error() -> None:  # pragma: no cover - defined in test
        raise RuntimeError("Sensitive detail")

    response = await client.get("/error/unhandled")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    request_id = response.headers["X-Request-ID"]
    assert response.json() == {
        "error": "Internal server error.",
        "code": "server_error",
        "details": {"request_id": request_id},
    }
    assert "Sensitive" not in response.text


async def test_incoming_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


class _InMemoryHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.INFO)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


async def test_request_id_attached_to_logs(app: FastAPI, client: AsyncClient) -> None:
    logger = logging.getLogger("tests.error_handling")
    handler = _InMemoryHandler()
    handler.addFilter(RequestContextFilter())
    logger.addHandler(handler)
    original_level = logger.level
    logger.setLevel(logging.INFO)

    @app.get("/log")
    async def emit_log() -> dict[str, str]:  # pragma: no cover - defined in test
        logger.info("Log entry")
        return {"status": "ok"}

    try:
        response = await client.get("/log")
    finally:
        logger.removeHandler(handler)
        logger.setLevel(original_level)
        handler.close()

    request_id = response.headers["X-Request-ID"]
    matching = [record for record in handler.records if record.getMessage() == "Log entry"]
    assert matching
    assert getattr(matching[0], "request_id", None) == request_id


@pytest.mark.parametrize("incoming", ["bad id with spaces", "x" * 200])
async def test_malformed_request_id_is_replaced(client: AsyncClient, incoming: str) -> None:
    response = await client.get("/health", headers={"X-Request-ID": incoming})

    echoed = response.headers["X-Request-ID"]
    assert echoed != incoming
    assert len(echoed) == 32
