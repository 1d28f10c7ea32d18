"""Key repeat and rotate throttle for the driver"""
from blocks_config import CONFIG


class ShiftRepeat:
    """Horizontal auto-repeat.

    Pressing left or right steps once immediately; once the key has been
    held for REPEAT_DELAY_MS it steps again every REPEAT_MS. Releasing or
    switching direction starts over.
    """
    def __init__(self, settings=CONFIG):
        self.settings = settings
        self.dir = 0; self.held_ms = 0; self.last = 0; self.initial = False

    def update(self, dt, left, right) -> int:
        nd = (-1 if left else 0) + (1 if right else 0)
        if nd != self.dir:
            self.dir = nd; self.held_ms = 0; self.last = 0; self.initial = False
        if self.dir == 0: return 0
        self.held_ms += dt
        if not self.initial:
            self.initial = True; return self.dir
        if self.held_ms <= self.settings["REPEAT_DELAY_MS"]: return 0
        self.last += dt
        if self.last > self.settings["REPEAT_MS"]:
            self.last = 0; return self.dir
        return 0


class Cooldown:
    """Lets an action through at most once per `key` milliseconds."""
    def __init__(self, key="ROTATE_COOLDOWN_MS", settings=CONFIG):
        self.key = key; self.settings = settings
        self.since = None

    def update(self, dt):
        if self.since is not None: self.since += dt

    def ready(self) -> bool:
        if self.since is None or self.since > self.settings[self.key]:
            self.since = 0
            return True
        return False
