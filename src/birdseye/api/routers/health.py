"""
birdseye.api.routers.health

Health endpoint.

Responsibilities:
- Provide liveness probe (`/healthz`) with the current fleet size.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from birdseye.api.deps import registry_dep
from birdseye.fleet.registry import NodeRegistry

router = APIRouter()


@router.get("/healthz")
async def healthz(registry: NodeRegistry = Depends(registry_dep)) -> dict[str, Any]:
    return {"status": "ok", "nodes": registry.node_count}


# --- Module Notes -----------------------------------------------------------
# There is no readiness probe: the service has no external dependencies to wait for.
