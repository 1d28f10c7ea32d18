"""Seedable piece randomizer"""
import time
from typing import Optional

MULTIPLIER = 0x41C64E6D
INCREMENT = 0x3039
MASK32 = 0xFFFFFFFF
SPAN = 1 << 15  # draw() keeps the top 15 bits of the state


class PieceRandom:
    """32-bit LCG with the subset of the random.Random API the engine needs.

    The same seed always yields the same piece sequence; with no seed the
    clock is used.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = time.monotonic_ns()
        self.state = seed & MASK32

    def draw(self) -> int:
        """Advance once and return a value in [0, SPAN)."""
        self.state = (self.state * MULTIPLIER + INCREMENT) & MASK32
        return self.state >> 17

    def randrange(self, n: int) -> int:
        """Uniform integer in [0, n) by rejection on the drawn range."""
        if n <= 0:
            raise ValueError(f"empty range for randrange({n})")
        limit = SPAN - SPAN % n
        r = self.draw()
        while r >= limit:
            r = self.draw()
        return r % n
