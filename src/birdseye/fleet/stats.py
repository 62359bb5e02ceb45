"""
birdseye.fleet.stats

Live membership sets for the declared tag buckets.

Responsibilities:
- Track which node ids currently carry each declared bucket tag.
- Expose a read-only view for rendering.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType


class TagStatistics:
    """
    Bucket name -> set of node ids.

    Buckets are fixed at construction; tags outside them are ignored here.
    """

    def __init__(self, buckets: Iterable[str]) -> None:
        self._data: dict[str, set[str]] = {name: set() for name in buckets}

    @property
    def buckets(self) -> tuple[str, ...]:
        return tuple(self._data)

    def add(self, tag: str, node_id: str) -> bool:
        members = self._data.get(tag)
        if members is None:
            return False
        members.add(node_id)
        return True

    def discard(self, tags: Iterable[str], node_id: str) -> None:
        for tag in tags:
            members = self._data.get(tag)
            if members is not None:
                members.discard(node_id)

    def view(self) -> Mapping[str, frozenset[str]]:
        return MappingProxyType({name: frozenset(members) for name, members in self._data.items()})
