"""Driver tunables and validated engine configuration"""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from blocks_piece import Mode

CONFIG = {
    "CELL_SIZE": 24,
    "REPEAT_DELAY_MS": 100,
    "REPEAT_MS": 60,
    "ROTATE_COOLDOWN_MS": 150,
    "MODE": "HEXTRIS",
    "BOARD_SIZE": "big",
    "SLIDE_PRESET": "default",
    "SEED": None,
    "PLAYER_NAME": "",
    "HISCORE_PATH": "~/.blocks/hiscores.json",
}

BOARD_SIZES: Dict[str, Tuple[int, int]] = {
    "small": (10, 10),
    "medium": (10, 20),
    "big": (15, 25),
}


class ConfigError(ValueError):
    pass


Attempts = Tuple[Tuple[int, int], ...]

SLIDE_PRESETS: Dict[str, Tuple[bool, int, Attempts]] = {
    "disabled": (False, 0, ((0, 0),)),
    "minimal": (True, 1, ((0, 0), (-1, 0), (1, 0))),
    "standard": (True, 2, ((0, 0), (-1, 0), (1, 0), (-2, 0), (2, 0), (0, -1))),
    "aggressive": (True, 3, (
        (0, 0),
        (-1, 0), (1, 0),
        (-2, 0), (2, 0),
        (0, -1),
        (-1, -1), (1, -1),
        (-3, 0), (3, 0),
        (0, -2),
        (-2, -1), (2, -1),
    )),
    "default": (True, 3, (
        (0, 0),
        (-1, 0), (1, 0),
        (-2, 0), (2, 0),
        (0, -1),
        (-1, -1), (1, -1),
        (-3, 0), (3, 0),
        (0, -2),
        (-2, -1), (2, -1),
        (-1, -2), (1, -2),
    )),
}


@dataclass(frozen=True)
class SlideConfig:
    """Ordered slide/kick candidates tried around a blocked target.

    The first attempt must be (0, 0) so the requested position always wins
    when it is legal. Candidates with |dx| or |dy| above max_distance are
    skipped rather than rejected, so a table can be shared between presets.
    """
    enabled: bool = True
    max_distance: int = 3
    attempts: Attempts = SLIDE_PRESETS["default"][2]

    def __post_init__(self):
        attempts = tuple((int(dx), int(dy)) for dx, dy in self.attempts)
        object.__setattr__(self, "attempts", attempts)
        if not attempts or attempts[0] != (0, 0):
            raise ConfigError(f"slide attempts must start with (0, 0), got {attempts[:1]}")
        if self.max_distance < 0:
            raise ConfigError(f"max_distance must be >= 0, got {self.max_distance}")

    @staticmethod
    def preset(name: str) -> "SlideConfig":
        try:
            enabled, dist, attempts = SLIDE_PRESETS[name]
        except KeyError:
            raise ConfigError(f"unknown slide preset {name!r}; available: {', '.join(SLIDE_PRESETS)}") from None
        return SlideConfig(enabled, dist, attempts)

    def replace(self, enabled: Optional[bool] = None, max_distance: Optional[int] = None,
                attempts: Optional[Attempts] = None) -> "SlideConfig":
        return SlideConfig(
            self.enabled if enabled is None else enabled,
            self.max_distance if max_distance is None else max_distance,
            self.attempts if attempts is None else attempts,
        )


def parse_mode(value: Any) -> Mode:
    if isinstance(value, Mode):
        return value
    if isinstance(value, int):
        try:
            return Mode(value)
        except ValueError:
            raise ConfigError(f"unknown mode index {value}") from None
    try:
        return Mode[str(value).upper()]
    except KeyError:
        raise ConfigError(f"unknown mode {value!r}; available: {', '.join(m.name for m in Mode)}") from None


def board_size(name: str) -> Tuple[int, int]:
    try:
        return BOARD_SIZES[name]
    except KeyError:
        raise ConfigError(f"unknown board size {name!r}; available: {', '.join(BOARD_SIZES)}") from None


@dataclass(frozen=True)
class GameConfig:
    mode: Mode = Mode.HEXTRIS
    width: int = 15
    height: int = 25
    slide: SlideConfig = field(default_factory=SlideConfig)
    seed: Optional[int] = None
    player_name: str = ""

    def __post_init__(self):
        object.__setattr__(self, "mode", parse_mode(self.mode))
        if self.width < 1 or self.height < 1:
            raise ConfigError(f"board must be at least 1x1, got {self.width}x{self.height}")

    @staticmethod
    def from_settings(settings: Mapping[str, Any] = CONFIG) -> "GameConfig":
        w, h = board_size(settings.get("BOARD_SIZE", "big"))
        return GameConfig(
            mode=parse_mode(settings.get("MODE", "HEXTRIS")),
            width=w,
            height=h,
            slide=SlideConfig.preset(settings.get("SLIDE_PRESET", "default")),
            seed=settings.get("SEED"),
            player_name=settings.get("PLAYER_NAME", ""),
        )
