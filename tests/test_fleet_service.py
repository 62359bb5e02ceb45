"""
tests.test_fleet_service

Ingestion facade tests.
"""

from __future__ import annotations

from birdseye.fleet.registry import NodeRegistry
from birdseye.services.fleet_service import FleetService, IngestResult, NodeUpdate, build_registry
from birdseye.settings import Settings


def test_build_registry_from_settings() -> None:
    settings = Settings(items_per_row=4, cell_dimension=10, cell_margin=2, padding=1, stat_buckets=["hot"])
    reg = build_registry(settings)
    assert reg.items_per_row == 4
    assert reg.width == 2 + 4 * 14
    assert reg.stat_buckets == ("hot",)


def test_ingest_registers_tags_and_sets_state(registry: NodeRegistry) -> None:
    svc = FleetService(registry=registry)

    res = svc.ingest(NodeUpdate(node_id="a", tags=("alert", "adhoc"), machine_state="warmup"))
    assert res.registered is True
    assert res.tags_applied == 2
    assert res.state_changed is True
    assert registry.tag_statistics["alert"] == frozenset({"a"})


def test_ingest_replaces_tags(registry: NodeRegistry) -> None:
    svc = FleetService(registry=registry)
    svc.ingest(NodeUpdate(node_id="a", tags=("alert",)))

    res = svc.ingest(NodeUpdate(node_id="a", tags=("no_identity",)))
    assert res.registered is False
    assert registry.get("a").tags == {"no_identity"}  # type: ignore[union-attr]
    assert registry.tag_statistics["alert"] == frozenset()
    assert registry.tag_statistics["no_identity"] == frozenset({"a"})


def test_ingest_leaves_unspecified_fields(registry: NodeRegistry) -> None:
    svc = FleetService(registry=registry)
    svc.ingest(NodeUpdate(node_id="a", tags=("alert",), machine_state="warmup"))

    res = svc.ingest(NodeUpdate(node_id="a"))
    assert res == IngestResult(node_id="a", registered=False, tags_applied=0, state_changed=False)
    node = registry.get("a")
    assert node is not None
    assert node.tags == {"alert"}
    assert node.machine_state == "warmup"


def test_ingest_many_with_bad_state(registry: NodeRegistry) -> None:
    svc = FleetService(registry=registry)
    results = svc.ingest_many(
        [
            NodeUpdate(node_id="a", machine_state="bogus"),
            NodeUpdate(node_id="b", machine_state="production_100"),
        ]
    )
    assert [r.state_changed for r in results] == [False, True]
    assert registry.get("a").machine_state == "unknown"  # type: ignore[union-attr]


def test_ingest_counts_duplicate_tags_once(registry: NodeRegistry) -> None:
    svc = FleetService(registry=registry)
    res = svc.ingest(NodeUpdate(node_id="a", tags=("alert", "alert", "adhoc")))
    assert res.tags_applied == 2
    assert registry.get("a").tags == {"alert", "adhoc"}  # type: ignore[union-attr]
