"""
birdseye.fleet.geometry

Uniform grid geometry for the bird's-eye layout.

Responsibilities:
- Hold the fixed-size grid configuration.
- Derive row count, total size and per-slot pixel origin from it.

All values are integer pixels. A cell occupies `cell_margin + cell_dimension + cell_margin`
along each axis; the whole grid is framed by `padding` on every side.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class GridConfig:
    items_per_row: int = 25
    cell_dimension: int = 20
    cell_margin: int = 5
    padding: int = 5

    @property
    def pitch(self) -> int:
        """Distance between the origins of two neighbouring cells."""
        return 2 * self.cell_margin + self.cell_dimension

    def with_items_per_row(self, items_per_row: int) -> GridConfig:
        return replace(self, items_per_row=items_per_row)


def row_count(node_count: int, items_per_row: int) -> int:
    # Ceiling division; 0 nodes -> 0 rows.
    return -(-node_count // items_per_row)


def total_width(config: GridConfig) -> int:
    return 2 * config.padding + config.items_per_row * config.pitch


def total_height(config: GridConfig, rows: int) -> int:
    return 2 * config.padding + rows * config.pitch


def slot_position(config: GridConfig, slot: int) -> tuple[int, int]:
    """Pixel (x, y) of the cell at `slot`, filling rows left to right."""

    row, col = divmod(slot, config.items_per_row)
    x = config.padding + config.cell_margin + col * config.pitch
    y = config.padding + config.cell_margin + row * config.pitch
    return x, y
