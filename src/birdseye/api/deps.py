"""
birdseye.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for the registry and the fleet service.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

from fastapi import Request

from birdseye.fleet.registry import NodeRegistry
from birdseye.services.fleet_service import FleetService


def registry_dep(request: Request) -> NodeRegistry:
    # Created once in `birdseye.api.app.create_app`.
    return request.app.state.registry  # type: ignore[attr-defined]


def fleet_service_dep(request: Request) -> FleetService:
    return request.app.state.fleet_service  # type: ignore[attr-defined]
