from __future__ import annotations

import pytest

from birdseye.fleet.registry import NodeRegistry


@pytest.fixture
def registry() -> NodeRegistry:
    return NodeRegistry(stat_buckets=("alert", "no_identity"))
