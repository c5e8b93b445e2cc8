"""Entry point for the task desk FastAPI application."""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .api.routers import api_router, health_router
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .core.middleware import CorrelationIdMiddleware
from .errors import register_exception_handlers
from .schemas.system import RootResponse


def create_app(settings: Settings | None = None) -> FastAPI:
    """Instantiate and configure the FastAPI application."""

    settings = settings or get_settings()
    configure_logging(settings)

    router_prefix = settings.router_prefix
    openapi_url = f"{router_prefix}/openapi.json"

    application = FastAPI(
        title=settings.project_name,
        version=settings.version,
        summary="Task desk backend managing users, executors and tasks.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=openapi_url,
    )

    application.state.settings = settings

    application.add_middleware(CorrelationIdMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    if router_prefix:
        application.include_router(api_router, prefix=router_prefix)
    else:
        application.include_router(api_router)

    application.include_router(health_router)

    @application.get("/", response_model=RootResponse, summary="Service metadata", tags=["system"])
    async def read_root(request: Request) -> RootResponse:
        """Expose minimal service metadata for API clients."""

        current: Settings = request.app.state.settings
        return RootResponse(
            name=current.project_name,
            environment=current.environment,
            version=current.version,
            api_prefix=current.api_prefix,
        )

    register_exception_handlers(application)

    return application


app = create_app()


def run() -> None:
    """Console entry point for ``taskdesk``."""

    settings: Settings = get_settings()
    uvicorn.run(
        "taskdesk.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.reload,
        log_config=None,
    )
