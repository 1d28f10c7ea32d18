from blocks_board import Board
from blocks_config import SlideConfig
from blocks_piece import HEXTRIS
from blocks_slide import resolve

DOT = HEXTRIS[7]
MINIMAL = SlideConfig(True, 1, ((0, 0), (-1, 0), (1, 0)))


def blocked_board():
    board = Board(6, 4)
    board.grid[2][2] = 1
    return board


def test_free_target_wins_first():
    board = Board(6, 4)
    assert resolve(DOT, (2, 2), board, MINIMAL) == (2, 2)


def test_first_legal_candidate_in_order():
    # left and right are both free; left is listed first
    assert resolve(DOT, (2, 2), blocked_board(), MINIMAL) == (1, 2)


def test_order_decides_not_distance():
    slide = SlideConfig(True, 1, ((0, 0), (1, 0), (-1, 0)))
    assert resolve(DOT, (2, 2), blocked_board(), slide) == (3, 2)


def test_candidates_beyond_max_distance_are_skipped():
    board = blocked_board()
    slide = SlideConfig(True, 1, ((0, 0), (-2, 0), (1, 0)))
    assert resolve(DOT, (2, 2), board, slide) == (3, 2)
    slide = SlideConfig(True, 1, ((0, 0), (0, -2), (-2, 0)))
    assert resolve(DOT, (2, 2), board, slide) is None


def test_no_legal_candidate():
    board = blocked_board()
    board.grid[2][1] = board.grid[2][3] = 1
    assert resolve(DOT, (2, 2), board, MINIMAL) is None


def test_disabled_only_tries_exact_target():
    disabled = SlideConfig.preset("disabled")
    assert resolve(DOT, (2, 2), blocked_board(), disabled) is None
    assert resolve(DOT, (4, 2), blocked_board(), disabled) == (4, 2)


def test_vertical_candidates():
    board = Board(3, 4)
    board.grid[3] = [1, 1, 1]
    slide = SlideConfig(True, 2, ((0, 0), (0, -1)))
    assert resolve(DOT, (1, 3), board, slide) == (1, 2)


def test_default_table_is_bounded_by_three():
    slide = SlideConfig.preset("default")
    assert slide.attempts[0] == (0, 0)
    assert len(slide.attempts) == 15
    assert all(abs(dx) <= 3 and abs(dy) <= 3 for dx, dy in slide.attempts)
