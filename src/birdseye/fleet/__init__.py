"""
birdseye.fleet

Fleet model: machine state catalog, grid geometry and the node registry.

Responsibilities:
- Track nodes, their tags and machine states.
- Compute deterministic grid placement and aggregate statistics.

Nothing in this package performs I/O or raises for bad input coming from the feed.
"""

from birdseye.fleet.machine_state import MachineState, name_to_state, ordered_states, state_to_name
from birdseye.fleet.models import FleetSnapshot, Node, NodePlacement
from birdseye.fleet.registry import NodeRegistry

__all__ = [
    "FleetSnapshot",
    "MachineState",
    "Node",
    "NodePlacement",
    "NodeRegistry",
    "name_to_state",
    "ordered_states",
    "state_to_name",
]
