"""
birdseye.services.fleet_service

Ingestion facade over the node registry.

Responsibilities:
- Build a registry from settings.
- Apply one telemetry record (node id, tags, machine state) as a unit.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from birdseye.fleet.registry import NodeRegistry
from birdseye.observability.logging import get_logger
from birdseye.settings import Settings

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class NodeUpdate:
    """
    One record from the telemetry feed.

    `tags=None` leaves the node's tags untouched; an empty collection clears them.
    `machine_state=None` leaves the state untouched.
    """

    node_id: str
    tags: tuple[str, ...] | None = None
    machine_state: str | None = None


@dataclass(frozen=True, slots=True)
class IngestResult:
    node_id: str
    registered: bool
    tags_applied: int
    state_changed: bool


def build_registry(settings: Settings) -> NodeRegistry:
    return NodeRegistry(
        items_per_row=settings.items_per_row,
        cell_dimension=settings.cell_dimension,
        cell_margin=settings.cell_margin,
        padding=settings.padding,
        stat_buckets=settings.stat_buckets,
    )


class FleetService:
    def __init__(self, *, registry: NodeRegistry) -> None:
        self._registry = registry

    def ingest(self, update: NodeUpdate) -> IngestResult:
        registered = self._registry.register(update.node_id)

        tags_applied = 0
        if update.tags is not None:
            # Replace semantics: the feed always sends the complete tag set.
            self._registry.clear_tags(update.node_id)
            # Duplicate entries in one record count once.
            distinct = dict.fromkeys(update.tags)
            tags_applied = sum(1 for tag in distinct if self._registry.add_tag(update.node_id, tag))

        state_changed = False
        if update.machine_state is not None:
            state_changed = self._registry.set_machine_state(update.node_id, update.machine_state)

        result = IngestResult(
            node_id=update.node_id,
            registered=registered,
            tags_applied=tags_applied,
            state_changed=state_changed,
        )
        if registered or state_changed:
            log.info(
                "node_updated",
                node_id=update.node_id,
                registered=registered,
                state_changed=state_changed,
                machine_state=update.machine_state,
            )
        return result

    def ingest_many(self, updates: Iterable[NodeUpdate]) -> list[IngestResult]:
        return [self.ingest(u) for u in updates]


# --- Module Notes -----------------------------------------------------------
# `ingest` never raises for bad records: an unrecognised state name simply yields
# `state_changed=False`, matching the registry contract.
