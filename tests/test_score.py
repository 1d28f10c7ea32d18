from blocks_piece import Mode
from blocks_score import (drop_interval_ms, level_for, line_bonus, lock_bonus,
                          special_message)


def test_lock_bonus():
    assert lock_bonus(0) == 30
    assert lock_bonus(3) == 60


def test_line_bonus_table():
    assert [line_bonus(n) for n in range(8)] == [0, 150, 350, 2500, 5000, 10000, 15000, 15000]


def test_level_from_lines():
    assert level_for(0) == 0
    assert level_for(9) == 0
    assert level_for(10) == 1
    assert level_for(25) == 2


def test_drop_interval_curve():
    assert drop_interval_ms(0) == 350
    assert drop_interval_ms(1) == 325
    assert drop_interval_ms(11) == 75
    assert drop_interval_ms(12) == 50
    assert drop_interval_ms(13) == 48
    assert drop_interval_ms(22) == 30
    assert drop_interval_ms(1000) == 30


def test_drop_interval_is_monotonic_with_floor():
    values = [drop_interval_ms(level) for level in range(200)]
    assert all(a >= b for a, b in zip(values, values[1:]))
    assert min(values) == 30


def test_special_messages():
    assert special_message(2, Mode.TETRIS) is None
    assert special_message(3, Mode.TETRIS) == "GREAT!"
    assert special_message(3, Mode.TRITRIS) == "WHAMMO!"
    assert special_message(4, Mode.HEXTRIS) == "AWESOME!"
    assert special_message(4, Mode.TRITRIS) == "GOOD!"
    assert special_message(5, Mode.HEXTRIS) == "ALMOST!"
    assert special_message(6, Mode.HEXTRIS) == "BLOCK!!"
    assert special_message(9, Mode.HEXTRIS) == "BLOCK!!"
