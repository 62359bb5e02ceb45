"""
birdseye.fleet.registry

The node registry behind the bird's-eye dashboard.

Responsibilities:
- Own the node collection, grid geometry and aggregate statistics.
- Apply feed mutations (register, tag, machine state, row width).
- Answer rendering queries (layout, state statistics, tag buckets, snapshot).

Unknown node ids, unrecognised state names and duplicate registrations are
routine for an eventually-consistent feed. They never raise: operations report
"did this call change anything" through their boolean result.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping

from birdseye.fleet import geometry
from birdseye.fleet.geometry import GridConfig
from birdseye.fleet.machine_state import MachineState, name_to_state, ordered_states
from birdseye.fleet.models import FleetSnapshot, Node, NodePlacement
from birdseye.fleet.stats import TagStatistics
from birdseye.observability.logging import get_stdlib_logger

log = get_stdlib_logger(__name__)

DEFAULT_STAT_BUCKETS: tuple[str, ...] = ("macon_short_uptime", "no_identity")


class NodeRegistry:
    def __init__(
        self,
        *,
        items_per_row: int = 25,
        cell_dimension: int = 20,
        cell_margin: int = 5,
        padding: int = 5,
        stat_buckets: Iterable[str] = DEFAULT_STAT_BUCKETS,
    ) -> None:
        if items_per_row < 1:
            raise ValueError("items_per_row must be >= 1")
        self._config = GridConfig(
            items_per_row=items_per_row,
            cell_dimension=cell_dimension,
            cell_margin=cell_margin,
            padding=padding,
        )
        self._nodes: dict[str, Node] = {}
        self._tag_stats = TagStatistics(stat_buckets)

        self._rows = 0
        self._width = 0
        self._height = 0
        self._recompute_geometry()

    # --- Mutations -----------------------------------------------------------

    def register(self, node_id: str) -> bool:
        if node_id in self._nodes:
            return False

        self._nodes[node_id] = Node(node_id=node_id)
        self._recompute_geometry()
        log.debug("node_registered", node_id=node_id, rows=self._rows, height=self._height)
        return True

    def clear_tags(self, node_id: str) -> None:
        node = self._nodes.get(node_id)
        if node is None:
            return
        self._tag_stats.discard(node.tags, node_id)
        node.tags.clear()

    def add_tag(self, node_id: str, tag: str) -> bool:
        node = self._nodes.get(node_id)
        if node is None:
            log.debug("tag_for_unknown_node", node_id=node_id, tag=tag)
            return False

        node.tags.add(tag)
        self._tag_stats.add(tag, node_id)
        return True

    def set_machine_state(self, node_id: str, state_name: str) -> bool:
        """
        Overwrite the node's state; True only if the stored state actually changed.

        False covers three cases the caller cannot tell apart: unknown node id,
        a name that does not resolve to a catalog state, and a repeat of the
        current state.
        """

        node = self._nodes.get(node_id)
        if node is None:
            log.debug("state_for_unknown_node", node_id=node_id, state=state_name)
            return False

        state = name_to_state(state_name)
        if state is MachineState.UNKNOWN:
            log.debug("state_lookup_failed", node_id=node_id, state=state_name)
            return False
        if state is node.state:
            return False

        log.debug("state_changed", node_id=node_id, old=node.state.label, new=state.label)
        node.state = state
        return True

    def set_items_per_row(self, items_per_row: int) -> bool:
        # Invalid widths are ignored like any other bad feed input.
        if items_per_row < 1:
            log.debug("items_per_row_rejected", items_per_row=items_per_row)
            return False
        self._config = self._config.with_items_per_row(items_per_row)
        self._recompute_geometry()
        return True

    # --- Queries -------------------------------------------------------------

    def compute_layout(self) -> list[NodePlacement]:
        # Sorted ids, not insertion order: equal id sets always render identically.
        placements: list[NodePlacement] = []
        for slot, node_id in enumerate(sorted(self._nodes)):
            node = self._nodes[node_id]
            x, y = geometry.slot_position(self._config, slot)
            placements.append(
                NodePlacement(
                    node_id=node_id,
                    tags=frozenset(node.tags),
                    machine_state=node.state.label,
                    x=x,
                    y=y,
                )
            )
        return placements

    def state_statistics(self) -> list[tuple[str, int]]:
        counts = self.raw_state_counts()
        return [(state.label, counts.get(state.label, 0)) for state in ordered_states()]

    def raw_state_counts(self) -> dict[str, int]:
        """Per-state counts including `unknown`; only states with members appear."""

        return dict(Counter(node.state.label for node in self._nodes.values()))

    def snapshot(self) -> FleetSnapshot:
        return FleetSnapshot(
            nodes=tuple(self.compute_layout()),
            machine_states=tuple(self.state_statistics()),
            tags=dict(self.tag_statistics),
            geometry=self.geometry(),
        )

    def get(self, node_id: str) -> Node | None:
        """Detached copy of a node, or None. Mutating the copy does not touch the registry."""

        node = self._nodes.get(node_id)
        if node is None:
            return None
        return Node(node_id=node.node_id, tags=set(node.tags), state=node.state)

    def geometry(self) -> dict[str, int]:
        return {
            "width": self._width,
            "height": self._height,
            "rows": self._rows,
            "items_per_row": self.items_per_row,
            "cell_dimension": self.cell_dimension,
            "cell_margin": self.cell_margin,
            "padding": self.padding,
            "node_count": self.node_count,
        }

    @property
    def tag_statistics(self) -> Mapping[str, frozenset[str]]:
        return self._tag_stats.view()

    @property
    def stat_buckets(self) -> tuple[str, ...]:
        return self._tag_stats.buckets

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def items_per_row(self) -> int:
        return self._config.items_per_row

    @property
    def cell_dimension(self) -> int:
        return self._config.cell_dimension

    @property
    def cell_margin(self) -> int:
        return self._config.cell_margin

    @property
    def padding(self) -> int:
        return self._config.padding

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def _recompute_geometry(self) -> None:
        self._rows = geometry.row_count(len(self._nodes), self._config.items_per_row)
        self._width = geometry.total_width(self._config)
        self._height = geometry.total_height(self._config, self._rows)


# --- Module Notes -----------------------------------------------------------
# Single-owner, synchronous object: no locking. The API layer keeps one instance on
# `app.state` and calls it only from async handlers, which the event loop serializes.
