"""
Game engine: piece lifecycle, gravity ticks, scoring and game over.

A GameEngine owns one board, the active and next piece and all score state.
Nothing outside the engine mutates them; a driver either calls the
operations directly (move_piece, rotate_piece, hard_drop, ...) or posts
Intents that the next tick() services in order before applying gravity.

Renderers pull a Snapshot; everything the player should be told about
(line clears, level ups, special messages, game over, high scores) is
queued as Events and collected with drain_events().
"""
from __future__ import annotations

import dataclasses
import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Deque, Dict, List, Optional, Tuple, Union

from blocks_board import Board, collides, drop_distance
from blocks_config import ConfigError, GameConfig, SlideConfig, board_size, parse_mode
from blocks_hiscore import GameRecord, Table, insert
from blocks_piece import Mode, PieceShape, Rotation, catalog_size, piece_for
from blocks_rng import PieceRandom
from blocks_score import (SOFT_DROP_INTERVAL_MS, drop_interval_ms, level_for,
                          line_bonus, lock_bonus, special_message)
from blocks_slide import resolve

log = logging.getLogger(__name__)

MESSAGE_MS = 1000


class Phase(Enum):
    SPAWNING = "spawning"
    ACTIVE = "active"
    LOCKING = "locking"
    GAME_OVER = "game_over"


class Intent(Enum):
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    ROTATE_CW = "rotate_cw"
    ROTATE_CCW = "rotate_ccw"
    ROTATE_180 = "rotate_180"
    HARD_DROP = "hard_drop"
    SOFT_DROP_ON = "soft_drop_on"
    SOFT_DROP_OFF = "soft_drop_off"
    PAUSE = "pause"
    NEW_GAME = "new_game"


@dataclass
class Event:
    kind: str
    data: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Snapshot:
    rows: List[List[int]]
    piece: Optional[PieceShape]
    anchor: Tuple[int, int]
    drop_y: int
    next_piece: Optional[PieceShape]
    mode: Mode
    score: int
    lines: int
    level: int
    drop_interval: int
    phase: Phase
    playing: bool
    paused: bool
    game_over: bool
    stats: Dict[int, int]
    total_pieces: int
    message: Optional[str]


class GameEngine:
    def __init__(self, config: Optional[GameConfig] = None, rng=None,
                 high_scores: Optional[Table] = None):
        self.config = config or GameConfig()
        self.slide: SlideConfig = self.config.slide
        # anything with randrange(n), e.g. random.Random(seed)
        self.rng = rng if rng is not None else PieceRandom(self.config.seed)
        self.high_scores = high_scores
        self.events: List[Event] = []
        self._queue: Deque[Intent] = deque()
        self.new_game()

    # ---------- game setup ----------
    @property
    def mode(self) -> Mode:
        return self.config.mode

    def new_game(self) -> None:
        """Discard all state and start over with the current configuration."""
        self.board = Board(self.config.width, self.config.height)
        self.score = 0
        self.lines = 0
        self.level = 0
        self.paused = False
        self.playing = False
        self.soft_drop = False
        self.drop_ms = 0
        self.stats: Dict[int, int] = {}
        self.total_pieces = 0
        self.message: Optional[str] = None
        self.message_ms = 0
        self._queue.clear()
        self.piece: Optional[PieceShape] = None
        self.piece_index = 0
        self.x = self.y = 0
        self.phase = Phase.SPAWNING
        self._draw_next()
        log.info("new game: mode=%s board=%dx%d", self.mode.name, self.board.width, self.board.height)
        self._emit("new_game", mode=self.mode.name, width=self.board.width, height=self.board.height)
        self.playing = True
        self.spawn_new_piece()

    def set_mode(self, mode: Union[Mode, str, int]) -> None:
        self.config = dataclasses.replace(self.config, mode=parse_mode(mode))
        self.new_game()

    def set_board_size(self, width: Union[int, str], height: Optional[int] = None) -> None:
        """Resize to width x height, or to a named preset ("small", "medium", "big")."""
        if isinstance(width, str):
            width, height = board_size(width)
        elif height is None:
            raise ConfigError("board height is required with a numeric width")
        self.config = dataclasses.replace(self.config, width=width, height=height)
        self.new_game()

    def configure_slide(self, enabled: Optional[bool] = None, max_distance: Optional[int] = None,
                        attempts=None) -> SlideConfig:
        self.slide = self.slide.replace(enabled, max_distance, attempts)
        self.config = dataclasses.replace(self.config, slide=self.slide)
        log.info("slide configuration updated: enabled=%s max=%d attempts=%d",
                 self.slide.enabled, self.slide.max_distance, len(self.slide.attempts))
        return self.slide

    def set_slide_preset(self, name: str) -> SlideConfig:
        preset = SlideConfig.preset(name)
        if not preset.enabled:
            # only the flag; the current table comes back when re-enabled
            return self.configure_slide(enabled=False)
        return self.configure_slide(preset.enabled, preset.max_distance, preset.attempts)

    # ---------- lifecycle ----------
    def _draw_next(self) -> None:
        n = catalog_size(self.mode)
        idx = self.rng.randrange(n)
        if not 0 <= idx < n:
            idx = 0
        self.next_index = idx
        self.next_piece = piece_for(self.mode, idx)

    def spawn_new_piece(self) -> bool:
        """Promote the next piece; returns False if it has no room (game over)."""
        self.phase = Phase.SPAWNING
        self.piece, self.piece_index = self.next_piece, self.next_index
        self.x, self.y = self.board.width // 2, 0
        self.stats[self.piece_index] = self.stats.get(self.piece_index, 0) + 1
        self.total_pieces += 1
        self._draw_next()
        if collides(self.piece, (self.x, self.y), self.board):
            self._game_over()
            return False
        self.phase = Phase.ACTIVE
        return True

    def move_piece(self, dx: int, dy: int) -> bool:
        if self.phase is not Phase.ACTIVE:
            return False
        target = (self.x + dx, self.y + dy)
        if dx != 0 and self.slide.enabled:
            anchor = resolve(self.piece, target, self.board, self.slide)
        else:
            anchor = None if collides(self.piece, target, self.board) else target
        if anchor is None:
            return False
        self.x, self.y = anchor
        return True

    def rotate_piece(self, direction: Union[Rotation, int]) -> bool:
        if self.phase is not Phase.ACTIVE:
            return False
        rotated = self.piece.rotated(Rotation(direction))
        anchor = resolve(rotated, (self.x, self.y), self.board, self.slide)
        if anchor is None:
            return False
        self.piece = rotated
        self.x, self.y = anchor
        return True

    def drop_one_row(self) -> bool:
        """Gravity step. Returns True if the piece fell, False if it locked instead."""
        if self.phase is not Phase.ACTIVE:
            return False
        if self.move_piece(0, 1):
            return True
        self._lock()
        return False

    def hard_drop(self) -> int:
        """Drop straight down and lock; returns the number of rows fallen."""
        if self.phase is not Phase.ACTIVE:
            return 0
        rows = 0
        while self.move_piece(0, 1):
            rows += 1
        self._lock()
        return rows

    def _lock(self) -> None:
        self.phase = Phase.LOCKING
        self.board.place(self.piece, (self.x, self.y))
        bonus = lock_bonus(self.level)
        self.score += bonus
        cleared = self.board.clear_full_lines()
        log.debug("locked %s at (%d,%d), %d line(s)", self.piece.name, self.x, self.y, cleared)
        self._emit("lock", piece=self.piece_index, anchor=(self.x, self.y), bonus=bonus, cleared=cleared)
        if cleared:
            self._score_lines(cleared)
        self.spawn_new_piece()

    def _score_lines(self, cleared: int) -> None:
        bonus = line_bonus(cleared)
        self.lines += cleared
        self.score += bonus
        self._emit("lines", cleared=cleared, bonus=bonus, total=self.lines)
        msg = special_message(cleared, self.mode)
        if msg:
            self._show(msg)
        level = level_for(self.lines)
        if level != self.level:
            self.level = level
            self._emit("level", level=level, interval=drop_interval_ms(level))

    def _game_over(self) -> None:
        self.phase = Phase.GAME_OVER
        self.playing = False
        self.soft_drop = False
        record = GameRecord(self.score, self.lines, self.config.player_name)
        log.info("game over: score=%d lines=%d level=%d", self.score, self.lines, self.level)
        self._emit("game_over", record=record)
        if self.high_scores is not None:
            rank = insert(self.high_scores, record)
            if rank is not None:
                self._emit("high_score", rank=rank, record=record, table=list(self.high_scores))
                self._show(f"NEW HIGH SCORE! #{rank + 1}")

    # ---------- driver interface ----------
    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    @property
    def drop_interval(self) -> int:
        return SOFT_DROP_INTERVAL_MS if self.soft_drop else drop_interval_ms(self.level)

    def toggle_pause(self) -> bool:
        if not self.game_over:
            self.paused = not self.paused
            self._emit("pause", paused=self.paused)
        return self.paused

    def post(self, intent: Union[Intent, str]) -> None:
        self._queue.append(Intent(intent))

    def tick(self, elapsed_ms: float) -> None:
        """Service queued intents, then advance gravity by elapsed_ms."""
        while self._queue:
            self._apply(self._queue.popleft())
        if self.message_ms > 0:
            self.message_ms -= elapsed_ms
            if self.message_ms <= 0:
                self.message = None
        if not self.playing or self.paused or self.game_over:
            return
        self.drop_ms += elapsed_ms
        if self.drop_ms >= self.drop_interval:
            self.drop_ms = 0
            self.drop_one_row()

    def _apply(self, intent: Intent) -> None:
        if intent is Intent.PAUSE:
            self.toggle_pause()
        elif intent is Intent.NEW_GAME:
            self.new_game()
        elif intent is Intent.SOFT_DROP_OFF:
            self.soft_drop = False
        elif not self.playing or self.paused:
            return
        elif intent is Intent.LEFT:
            self.move_piece(-1, 0)
        elif intent is Intent.RIGHT:
            self.move_piece(1, 0)
        elif intent is Intent.DOWN:
            self.drop_one_row()
        elif intent is Intent.ROTATE_CW:
            self.rotate_piece(Rotation.CW)
        elif intent is Intent.ROTATE_CCW:
            self.rotate_piece(Rotation.CCW)
        elif intent is Intent.ROTATE_180:
            self.rotate_piece(Rotation.HALF)
        elif intent is Intent.HARD_DROP:
            self.hard_drop()
        elif intent is Intent.SOFT_DROP_ON:
            self.soft_drop = True

    def _show(self, message: str) -> None:
        self.message = message
        self.message_ms = MESSAGE_MS
        self._emit("message", text=message)

    def _emit(self, kind: str, **data) -> None:
        self.events.append(Event(kind, data))

    def drain_events(self) -> List[Event]:
        events, self.events = self.events, []
        return events

    def snapshot(self) -> Snapshot:
        anchor = (self.x, self.y)
        drop_y = self.y
        if self.phase is Phase.ACTIVE:
            drop_y += drop_distance(self.piece, anchor, self.board)
        return Snapshot(
            rows=self.board.rows(),
            piece=self.piece,
            anchor=anchor,
            drop_y=drop_y,
            next_piece=self.next_piece,
            mode=self.mode,
            score=self.score,
            lines=self.lines,
            level=self.level,
            drop_interval=self.drop_interval,
            phase=self.phase,
            playing=self.playing,
            paused=self.paused,
            game_over=self.game_over,
            stats=dict(self.stats),
            total_pieces=self.total_pieces,
            message=self.message,
        )
