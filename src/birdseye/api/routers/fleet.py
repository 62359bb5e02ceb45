"""
birdseye.api.routers.fleet

Render-facing read endpoints plus the layout width control.

Responsibilities:
- Serve grid layout, machine-state statistics, tag buckets and full snapshots
  as plain JSON.
- Change `items_per_row`.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from birdseye.api.deps import registry_dep
from birdseye.fleet.registry import NodeRegistry

router = APIRouter(prefix="/v1", tags=["fleet"])


class ItemsPerRowRequest(BaseModel):
    items_per_row: int = Field(ge=1, le=10_000)


@router.get("/layout")
async def get_layout(registry: NodeRegistry = Depends(registry_dep)) -> dict[str, Any]:
    return {
        "geometry": registry.geometry(),
        "nodes": [p.as_dict() for p in registry.compute_layout()],
    }


@router.put("/layout/items-per-row")
async def set_items_per_row(
    body: ItemsPerRowRequest, registry: NodeRegistry = Depends(registry_dep)
) -> dict[str, int]:
    registry.set_items_per_row(body.items_per_row)
    return registry.geometry()


@router.get("/stats/machine-states")
async def machine_state_stats(registry: NodeRegistry = Depends(registry_dep)) -> list[list[Any]]:
    # Pairs, not an object: canonical state order is part of the contract.
    return [[name, count] for name, count in registry.state_statistics()]


@router.get("/stats/tags")
async def tag_stats(registry: NodeRegistry = Depends(registry_dep)) -> dict[str, list[str]]:
    return {bucket: sorted(ids) for bucket, ids in registry.tag_statistics.items()}


@router.get("/snapshot")
async def snapshot(registry: NodeRegistry = Depends(registry_dep)) -> dict[str, Any]:
    return registry.snapshot().as_dict()


# --- Module Notes -----------------------------------------------------------
# Dashboards typically poll `/v1/snapshot` once per refresh; the narrower endpoints exist
# for widgets that only need one panel.
