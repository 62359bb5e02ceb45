"""
tests.test_geometry

Grid arithmetic: row counts, frame size and cell origins.
"""

from __future__ import annotations

import pytest

from birdseye.fleet.geometry import GridConfig, row_count, slot_position, total_height, total_width


@pytest.mark.parametrize(
    ("nodes", "per_row", "rows"),
    [(0, 25, 0), (1, 25, 1), (25, 25, 1), (26, 25, 2), (3, 2, 2), (7, 1, 7)],
)
def test_row_count_is_ceiling(nodes: int, per_row: int, rows: int) -> None:
    assert row_count(nodes, per_row) == rows


def test_default_frame_size() -> None:
    cfg = GridConfig()
    assert cfg.pitch == 30
    assert total_width(cfg) == 5 + 25 * 30 + 5
    assert total_height(cfg, 0) == 10
    assert total_height(cfg, 3) == 100


def test_slot_position_wraps_rows() -> None:
    cfg = GridConfig(items_per_row=2, cell_dimension=20, cell_margin=5, padding=5)
    assert slot_position(cfg, 0) == (10, 10)
    assert slot_position(cfg, 1) == (40, 10)
    assert slot_position(cfg, 2) == (10, 40)


def test_with_items_per_row_keeps_other_fields() -> None:
    cfg = GridConfig(items_per_row=4, cell_dimension=8, cell_margin=1, padding=2)
    wider = cfg.with_items_per_row(10)
    assert wider.items_per_row == 10
    assert (wider.cell_dimension, wider.cell_margin, wider.padding) == (8, 1, 2)
