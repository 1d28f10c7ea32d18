"""Board grid and helpers: collides, place, clear, drop distance"""
from typing import List, Tuple
from blocks_piece import PieceShape

Anchor = Tuple[int, int]


class Board:
    """Fixed width x height grid of cells; 0 is empty, anything else is a piece style."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.grid: List[List[int]] = [[0] * width for _ in range(height)]

    def is_occupied(self, x: int, y: int) -> bool:
        if x < 0 or x >= self.width or y >= self.height:
            return True
        if y < 0:
            return False
        return self.grid[y][x] != 0

    def place(self, shape: PieceShape, anchor: Anchor) -> None:
        """Write the shape into the grid (no collision check); cells above row 0 are dropped."""
        for bx, by in shape.at(*anchor):
            if by >= 0:
                self.grid[by][bx] = shape.style

    def clear_full_lines(self) -> int:
        c = 0
        y = self.height - 1
        while y >= 0:
            if all(self.grid[y]):
                del self.grid[y]
                self.grid.insert(0, [0] * self.width)
                c += 1
            else:
                y -= 1
        return c

    def rows(self) -> List[List[int]]:
        return [r[:] for r in self.grid]

    def is_empty(self) -> bool:
        return not any(any(r) for r in self.grid)


def collides(shape: PieceShape, anchor: Anchor, board: Board) -> bool:
    """True if any cell of shape at anchor is off the board or on a filled cell."""
    return any(board.is_occupied(bx, by) for bx, by in shape.at(*anchor))


def drop_distance(shape: PieceShape, anchor: Anchor, board: Board) -> int:
    """Number of rows the shape can fall from anchor before it would collide."""
    x, y = anchor
    d = 0
    while not collides(shape, (x, y + d + 1), board):
        d += 1
    return d
