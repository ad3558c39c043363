from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .const import EDGE_MARGIN, HUD_HEIGHT, SLOT_GAP


@dataclass(frozen=True)
class Cell:
    x: int
    y: int
    w: int
    h: int

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h

    @property
    def center(self) -> Tuple[int, int]:
        return self.x + self.w // 2, self.y + self.h // 2


def grid_cells(screen_size: Tuple[int, int], count: int, columns: int) -> List[Cell]:
    """
    Lay `count` square cells out row-major below the HUD, centered, as large
    as the screen allows.
    """
    w, h = screen_size
    columns = max(1, min(columns, count))
    rows = (count + columns - 1) // columns

    avail_w = w - 2 * EDGE_MARGIN - (columns - 1) * SLOT_GAP
    avail_h = h - HUD_HEIGHT - 2 * EDGE_MARGIN - (rows - 1) * SLOT_GAP
    side = max(1, min(avail_w // columns, avail_h // rows))

    grid_w = columns * side + (columns - 1) * SLOT_GAP
    grid_h = rows * side + (rows - 1) * SLOT_GAP
    x0 = (w - grid_w) // 2
    y0 = HUD_HEIGHT + (h - HUD_HEIGHT - grid_h) // 2

    cells = []
    for i in range(count):
        r, c = divmod(i, columns)
        cells.append(Cell(x0 + c * (side + SLOT_GAP), y0 + r * (side + SLOT_GAP), side, side))
    return cells


def raised_part(cell: Cell, visibility: float) -> Cell:
    """The part of the cell the mole covers when it is `visibility` of the way up."""
    visibility = max(0.0, min(1.0, visibility))
    hh = int(round(cell.h * visibility))
    return Cell(cell.x, cell.y + cell.h - hh, cell.w, hh)


def slot_at(cells: List[Cell], visibilities: List[float], px: float, py: float) -> Optional[int]:
    """Index of the slot whose raised mole is under (px, py), if any."""
    for i, (cell, vis) in enumerate(zip(cells, visibilities)):
        if vis > 0 and raised_part(cell, vis).contains(px, py):
            return i
    return None
