"""Pixel geometry of the board and side panel for a given grid size"""
from dataclasses import dataclass
from blocks_config import CONFIG


@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    cols: int
    rows: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int


MARGIN = 16
PANEL_W = 220
# the panel needs room for the stats list even on the 10x10 board
PANEL_MIN_H = 480


def compute_dims(cols: int, rows: int, settings=CONFIG) -> Dims:
    cell = int(settings["CELL_SIZE"])
    board_w, board_h = cols * cell, rows * cell
    panel_x = 2 * MARGIN + board_w
    return Dims(
        cell=cell, margin=MARGIN, panel_w=PANEL_W,
        cols=cols, rows=rows,
        board_w=board_w, board_h=board_h,
        total_w=panel_x + PANEL_W + MARGIN,
        total_h=2 * MARGIN + max(board_h, PANEL_MIN_H),
        board_x=MARGIN, board_y=MARGIN,
        panel_x=panel_x, panel_y=MARGIN,
    )
