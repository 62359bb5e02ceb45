"""
birdseye.fleet.machine_state

Catalog of machine operational states.

Responsibilities:
- Define the closed set of states and their stable integer identifiers.
- Convert between wire names, identifiers and enum members without ever raising.
- Provide the canonical ordering used for zero-filled statistics.
"""

from __future__ import annotations

import enum
from typing import Any


class MachineState(enum.IntEnum):
    # Identifiers are part of the dashboard contract; UNKNOWN sits outside the ordered range.
    NOT_SWITCHED_ON = 0
    WARMUP = 1
    PROGRAM_INTERRUPTION = 2
    PRODUCTION_LT_100 = 3
    PRODUCTION_100 = 4
    NOT_RUNNING_WO_ERROR = 5
    NOT_RUNNING_W_ERROR = 6
    UNKNOWN = 100

    @property
    def label(self) -> str:
        return self.name.lower()

    def __str__(self) -> str:
        return self.label


_ORDERED: tuple[MachineState, ...] = tuple(
    sorted((s for s in MachineState if s is not MachineState.UNKNOWN), key=int)
)
_BY_NAME: dict[str, MachineState] = {s.label: s for s in _ORDERED}


def name_to_state(name: Any) -> MachineState:
    """
    Resolve a feed-supplied name to a state.

    Matching is exact (lowercase wire names). Anything else, including `"unknown"`
    itself and non-string input, resolves to `MachineState.UNKNOWN`.
    """

    if not isinstance(name, str):
        return MachineState.UNKNOWN
    return _BY_NAME.get(name, MachineState.UNKNOWN)


def state_to_name(state: MachineState) -> str:
    return state.label


def id_to_state(identifier: Any) -> MachineState:
    """Resolve a numeric identifier; unknown or malformed ids give `UNKNOWN`."""

    if isinstance(identifier, bool) or not isinstance(identifier, int):
        return MachineState.UNKNOWN
    try:
        return MachineState(identifier)
    except ValueError:
        return MachineState.UNKNOWN


def ordered_states() -> tuple[MachineState, ...]:
    return _ORDERED


# --- Module Notes -----------------------------------------------------------
# Feeds send free-form strings that may be stale or malformed, so lookups degrade to
# UNKNOWN instead of raising. Callers decide whether UNKNOWN is an acceptable update.
