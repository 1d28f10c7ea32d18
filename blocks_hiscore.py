"""Top-3 high score table and its JSON store"""
import json
import logging
import os
from dataclasses import asdict, dataclass
from typing import List, Optional

log = logging.getLogger(__name__)

SLOTS = 3


@dataclass(frozen=True)
class GameRecord:
    score: int
    lines: int
    name: str = ""


# None marks an empty slot
Table = List[Optional[GameRecord]]


def empty_table() -> Table:
    return [None] * SLOTS


def clear(table: Table) -> None:
    """Empty every slot in place."""
    table[:] = empty_table()


def qualifying_rank(table: Table, record: GameRecord) -> Optional[int]:
    """Index the record would take in the table, or None if it does not place.

    A record beats a slot that is empty, holds a lower score, or holds the
    same score with fewer lines. The first such slot wins.
    """
    for i in range(SLOTS):
        cur = table[i] if i < len(table) else None
        if cur is None or record.score > cur.score or (
                record.score == cur.score and record.lines > cur.lines):
            return i
    return None


def insert(table: Table, record: GameRecord) -> Optional[int]:
    """Insert record in place, shifting lower entries down; returns its rank."""
    rank = qualifying_rank(table, record)
    if rank is None:
        return None
    table[:] = (list(table) + empty_table())[:SLOTS]
    table.insert(rank, record)
    del table[SLOTS:]
    return rank


class HighScoreStore:
    """Loads and saves a table as JSON; I/O problems never reach the caller."""

    def __init__(self, path: str):
        self.path = os.path.expanduser(path)

    def load(self) -> Table:
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                raw = json.load(fh)
        except FileNotFoundError:
            return empty_table()
        except (OSError, ValueError) as e:
            log.warning("failed to load high scores from %s: %s", self.path, e)
            return empty_table()
        table = empty_table()
        try:
            for i, entry in enumerate(raw[:SLOTS]):
                if entry and not entry.get("isEmpty"):
                    table[i] = GameRecord(int(entry["score"]), int(entry["lines"]), str(entry.get("name", "")))
        except (TypeError, KeyError, ValueError, AttributeError) as e:
            log.warning("ignoring malformed high score file %s: %s", self.path, e)
            return empty_table()
        return table

    def save(self, table: Table) -> bool:
        data = [asdict(r) if r else {"score": 0, "lines": 0, "isEmpty": True} for r in table[:SLOTS]]
        try:
            os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2)
        except OSError as e:
            log.warning("failed to save high scores to %s: %s", self.path, e)
            return False
        return True

    def reset(self) -> bool:
        """Delete the stored table; a missing file already counts as reset."""
        try:
            os.remove(self.path)
        except FileNotFoundError:
            pass
        except OSError as e:
            log.warning("failed to reset high scores at %s: %s", self.path, e)
            return False
        log.info("high scores reset")
        return True
