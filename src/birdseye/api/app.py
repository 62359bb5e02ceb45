"""
birdseye.api.app

FastAPI app factory for the bird's-eye fleet service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Create the single registry instance the app owns for its lifetime.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from birdseye import __version__
from birdseye.api.routers.fleet import router as fleet_router
from birdseye.api.routers.health import router as health_router
from birdseye.api.routers.nodes import router as nodes_router
from birdseye.observability.logging import configure_logging, get_logger
from birdseye.observability.middleware import RequestContextMiddleware
from birdseye.services.fleet_service import FleetService, build_registry
from birdseye.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        fleet_level=settings.fleet_log_level,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, stat_buckets=list(app.state.registry.stat_buckets))
        yield
        log.info("shutdown", nodes=app.state.registry.node_count)

    app = FastAPI(
        title="Bird's-eye Fleet View",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # State lives only in memory; a restart starts with an empty fleet.
    registry = build_registry(settings)
    app.state.registry = registry
    app.state.fleet_service = FleetService(registry=registry)

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(nodes_router)
    app.include_router(fleet_router)

    return app


# --- Module Notes -----------------------------------------------------------
# The registry is created eagerly rather than in `lifespan` so in-process test clients
# (httpx.ASGITransport) work without driving lifespan events.
