"""
birdseye.api.routers.nodes

Feed-facing endpoints that mutate individual nodes.

Responsibilities:
- Register nodes, replace/extend tags, set machine state.
- Accept full telemetry records through the ingestion service.

Mutations mirror the registry contract: they report whether anything changed
instead of failing on unknown ids or unrecognised state names.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field
from starlette.status import HTTP_404_NOT_FOUND

from birdseye.api.deps import fleet_service_dep, registry_dep
from birdseye.fleet.registry import NodeRegistry
from birdseye.services.fleet_service import FleetService, NodeUpdate

router = APIRouter(prefix="/v1", tags=["nodes"])


class TagRequest(BaseModel):
    tag: str = Field(min_length=1, max_length=128)


class MachineStateRequest(BaseModel):
    machine_state: str = Field(max_length=64)


class IngestRecord(BaseModel):
    node_id: str = Field(min_length=1, max_length=256)
    tags: list[str] | None = None
    machine_state: str | None = None


class IngestRequest(BaseModel):
    records: list[IngestRecord] = Field(default_factory=list)


class NodeResponse(BaseModel):
    node_id: str
    tags: list[str]
    machine_state: str


@router.post("/nodes/{node_id}")
async def register_node(
    node_id: str, registry: NodeRegistry = Depends(registry_dep)
) -> dict[str, bool]:
    return {"created": registry.register(node_id)}


@router.get("/nodes/{node_id}", response_model=NodeResponse)
async def get_node(node_id: str, registry: NodeRegistry = Depends(registry_dep)) -> NodeResponse:
    node = registry.get(node_id)
    if node is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Node not found")
    return NodeResponse(node_id=node.node_id, tags=sorted(node.tags), machine_state=node.machine_state)


@router.delete("/nodes/{node_id}/tags")
async def clear_node_tags(
    node_id: str, registry: NodeRegistry = Depends(registry_dep)
) -> dict[str, bool]:
    # Unknown ids are a silent no-op in the registry; report whether the node exists.
    registry.clear_tags(node_id)
    return {"known": node_id in registry}


@router.post("/nodes/{node_id}/tags")
async def add_node_tag(
    node_id: str, body: TagRequest, registry: NodeRegistry = Depends(registry_dep)
) -> dict[str, bool]:
    return {"applied": registry.add_tag(node_id, body.tag)}


@router.put("/nodes/{node_id}/machine-state")
async def set_node_machine_state(
    node_id: str, body: MachineStateRequest, registry: NodeRegistry = Depends(registry_dep)
) -> dict[str, bool]:
    return {"changed": registry.set_machine_state(node_id, body.machine_state)}


@router.post("/ingest")
async def ingest(
    body: IngestRequest, service: FleetService = Depends(fleet_service_dep)
) -> list[dict[str, Any]]:
    results = service.ingest_many(
        NodeUpdate(
            node_id=r.node_id,
            tags=tuple(r.tags) if r.tags is not None else None,
            machine_state=r.machine_state,
        )
        for r in body.records
    )
    return [
        {
            "node_id": res.node_id,
            "registered": res.registered,
            "tags_applied": res.tags_applied,
            "state_changed": res.state_changed,
        }
        for res in results
    ]
