"""
birdseye.fleet.models

Data model for tracked nodes and the structures handed to the rendering layer.

Responsibilities:
- `Node`: mutable per-device record owned by the registry.
- `NodePlacement` / `FleetSnapshot`: immutable query results with plain-data export.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from birdseye.fleet.machine_state import MachineState


@dataclass(slots=True)
class Node:
    """
    One tracked device. `node_id` is the registry key and never changes.
    """

    node_id: str
    tags: set[str] = field(default_factory=set)
    state: MachineState = MachineState.UNKNOWN

    @property
    def machine_state(self) -> str:
        return self.state.label


@dataclass(frozen=True, slots=True)
class NodePlacement:
    node_id: str
    tags: frozenset[str]
    machine_state: str
    x: int
    y: int

    def as_dict(self) -> dict[str, Any]:
        return {
            "node_id": self.node_id,
            "tags": sorted(self.tags),
            "machine_state": self.machine_state,
            "x": self.x,
            "y": self.y,
        }


@dataclass(frozen=True, slots=True)
class FleetSnapshot:
    """
    Everything a renderer needs for one frame.

    - `nodes`: placements in lexicographic id order
    - `machine_states`: `(name, count)` in canonical state order, zero-filled
    - `tags`: statistics bucket -> member ids
    - `geometry`: accessor name -> value
    """

    nodes: tuple[NodePlacement, ...]
    machine_states: tuple[tuple[str, int], ...]
    tags: dict[str, frozenset[str]]
    geometry: dict[str, int]

    def as_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.as_dict() for n in self.nodes],
            "machine_states": [[name, count] for name, count in self.machine_states],
            "tags": {bucket: sorted(ids) for bucket, ids in self.tags.items()},
            "geometry": dict(self.geometry),
        }


# --- Module Notes -----------------------------------------------------------
# `as_dict` output is JSON-ready; ordering of lists is part of the rendering contract.
