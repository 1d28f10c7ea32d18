"""Piece model, catalogs per mode, rotation"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

Offset = Tuple[int, int]


class Mode(Enum):
    TRITRIS = 0
    TETRIS = 1
    HEXTRIS = 2


class Rotation(Enum):
    CW = 1
    CCW = -1
    HALF = 2


@dataclass(frozen=True)
class PieceShape:
    cells: Tuple[Offset, ...]
    style: int
    name: str = ""

    def rotated(self, direction: Rotation) -> "PieceShape":
        if direction is Rotation.CW:
            cells = tuple((-dy, dx) for dx, dy in self.cells)
        elif direction is Rotation.CCW:
            cells = tuple((dy, -dx) for dx, dy in self.cells)
        else:
            cells = tuple((-dx, -dy) for dx, dy in self.cells)
        return PieceShape(cells, self.style, self.name)

    def at(self, x: int, y: int) -> List[Offset]:
        """Board coordinates of every cell with the anchor at (x, y)."""
        return [(x + dx, y + dy) for dx, dy in self.cells]


def _shape(style, name, *cells):
    return PieceShape(tuple(cells), style, name)


# Three-cell set. "random" keeps its stacked origin cells.
TRITRIS = [
    _shape(1, "dot", (0,0), (0,0), (0,0)),
    _shape(2, "line", (0,-1), (0,0), (0,1)),
    _shape(3, "spaced", (-1,0), (1,0), (1,0)),
    _shape(4, "L", (-1,0), (0,0), (0,1)),
    _shape(5, "two line", (0,0), (1,0), (0,0)),
    _shape(6, "zig", (-1,-1), (0,0), (1,1)),
    _shape(7, "bent", (-1,-1), (0,0), (-1,1)),
    _shape(8, "random", (0,0), (0,0), (0,0)),
]

TETRIS = [
    _shape(1, "square", (0,0), (1,0), (0,1), (1,1)),
    _shape(2, "L", (-1,1), (-1,0), (0,0), (1,0)),
    _shape(3, "L backwards", (-1,0), (0,0), (1,0), (1,1)),
    _shape(4, "line", (-1,0), (0,0), (1,0), (2,0)),
    _shape(5, "N", (1,0), (0,0), (0,1), (-1,1)),
    _shape(6, "N backwards", (1,1), (0,1), (0,0), (-1,0)),
    _shape(7, "T", (0,1), (-1,0), (0,0), (1,0)),
]

HEXTRIS = TETRIS + [
    _shape(8, "dot", (0,0)),
    _shape(9, "screw", (-1,-1), (-1,0), (0,0), (1,0), (1,1)),
    _shape(10, "screw backwards", (1,-1), (1,0), (0,0), (-1,0), (-1,1)),
    _shape(11, "long cross", (-1,0), (0,0), (1,0), (0,-1), (0,1)),
    _shape(12, "cross", (-1,0), (0,0), (1,0), (0,-1), (0,1), (2,0)),
    _shape(13, "layers", (-1,-1), (0,-1), (1,-1), (-1,1), (0,1), (1,1)),
    _shape(14, "Y", (-1,-1), (-1,0), (0,0), (0,1), (1,-1), (1,0)),
    _shape(15, "U", (-1,0), (-1,1), (0,1), (0,1), (1,0), (1,1)),
    _shape(16, "5 line", (-2,0), (-1,0), (0,0), (1,0), (2,0), (2,0)),
    _shape(17, "6 line", (-2,0), (-1,0), (0,0), (1,0), (2,0), (3,0)),
    _shape(18, "3x2 block", (-1,0), (0,0), (1,0), (-1,1), (0,1), (1,1)),
    _shape(19, "zig-zag", (-1,0), (0,1), (1,0), (-1,0)),
    _shape(20, "notch top", (-1,0), (0,0), (0,0), (-1,1), (0,1), (1,0)),
    _shape(21, "notch bottom", (-1,0), (0,0), (0,0), (-1,1), (0,1), (1,1)),
    _shape(22, "small L", (0,0), (0,1)),
    _shape(23, "big T", (-1,-1), (0,-1), (1,-1), (0,0), (0,1)),
    _shape(24, "short parallel", (-1,0), (-1,1), (1,0), (1,1)),
    _shape(25, "big L backwards", (-1,-1), (0,-1), (1,-1), (1,0), (1,1)),
    _shape(26, "TO", (-2,0), (-1,0), (0,0), (1,0), (2,0), (0,1)),
    _shape(27, "small L", (-1,0), (0,0), (0,1)),
    _shape(28, "3x1 line", (-1,0), (0,0), (1,0)),
    _shape(29, "crazy", (0,0), (0,0), (0,0), (0,0), (0,0), (0,0)),
]

CATALOG: Dict[Mode, List[PieceShape]] = {
    Mode.TRITRIS: TRITRIS,
    Mode.TETRIS: TETRIS,
    Mode.HEXTRIS: HEXTRIS,
}


def catalog_size(mode: Mode) -> int:
    return len(CATALOG[mode])


def piece_for(mode: Mode, index: int) -> PieceShape:
    """Catalog entry `index` of `mode`; out-of-range indices fall back to entry 0."""
    shapes = CATALOG[mode]
    if not 0 <= index < len(shapes):
        index = 0
    return shapes[index]
