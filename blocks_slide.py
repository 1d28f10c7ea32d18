"""Slide / wall-kick placement resolver"""
from typing import Optional

from blocks_board import Anchor, Board, collides
from blocks_config import SlideConfig
from blocks_piece import PieceShape


def resolve(shape: PieceShape, target: Anchor, board: Board, slide: SlideConfig) -> Optional[Anchor]:
    """Return the first legal anchor near target, or None.

    With sliding disabled only the exact target is tried. Otherwise each
    attempt is added to target in table order and the first one that does
    not collide wins; attempts larger than slide.max_distance are skipped.
    """
    tx, ty = target
    if not slide.enabled:
        return None if collides(shape, target, board) else target
    for dx, dy in slide.attempts:
        if abs(dx) > slide.max_distance or abs(dy) > slide.max_distance:
            continue
        test = (tx + dx, ty + dy)
        if not collides(shape, test, board):
            return test
    return None
