"""Scoring, level progression and gravity curve"""
from typing import Optional

from blocks_piece import Mode

LINES_PER_LEVEL = 10
LINE_BONUS = {1: 150, 2: 350, 3: 2500, 4: 5000, 5: 10000}
MAX_LINE_BONUS = 15000   # six or more rows in one lock

BASE_INTERVAL_MS = 350
FAST_STEP_MS, FAST_STEP_UNTIL = 25, 75
SLOW_STEP_MS = 2
MIN_INTERVAL_MS = 30
SOFT_DROP_INTERVAL_MS = 10


def lock_bonus(level: int) -> int:
    return 30 + 10 * level


def line_bonus(cleared: int) -> int:
    if cleared <= 0:
        return 0
    return LINE_BONUS.get(cleared, MAX_LINE_BONUS)


def level_for(lines: int) -> int:
    return lines // LINES_PER_LEVEL


def drop_interval_ms(level: int) -> int:
    """Milliseconds between gravity steps at `level`.

    Starts at 350 ms. Every level takes 25 ms off while the interval is still
    at least 75 ms, then 2 ms per level, and never goes below 30 ms.
    """
    ms = BASE_INTERVAL_MS
    for _ in range(max(level, 0)):
        if ms >= FAST_STEP_UNTIL:
            ms -= FAST_STEP_MS
        elif ms > MIN_INTERVAL_MS:
            ms -= SLOW_STEP_MS
        else:
            break
    return max(ms, MIN_INTERVAL_MS)


def special_message(cleared: int, mode: Mode) -> Optional[str]:
    if cleared == 3:
        return "WHAMMO!" if mode is Mode.TRITRIS else "GREAT!"
    if cleared == 4:
        return "GOOD!" if mode is Mode.TRITRIS else "AWESOME!"
    if cleared == 5:
        return "ALMOST!"
    if cleared >= 6:
        return "BLOCK!!"
    return None
