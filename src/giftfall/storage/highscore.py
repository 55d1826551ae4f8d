"""Persistent high score.

The only persisted state is one named integer. Reads never fail: a
missing, unreadable or malformed value reads as 0. Writes are best
effort and log on failure.
"""

from pathlib import Path
from typing import Any, Protocol
import json
import math
import logging

logger = logging.getLogger(__name__)

DEFAULT_KEY = "santaHighScore"


class HighScoreStorage(Protocol):
    """Key-value store holding the high score."""

    def read(self) -> int: ...

    def write(self, value: int) -> None: ...


def parse_score(raw: Any) -> int:
    """Coerce a stored value to a non-negative int, 0 if it can't be."""
    if isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return max(raw, 0)
    if isinstance(raw, float):
        return max(int(raw), 0) if math.isfinite(raw) else 0
    if isinstance(raw, str):
        try:
            return max(int(raw.strip()), 0)
        except ValueError:
            return 0
    return 0


class HighScoreStore:
    """High score kept in a small JSON file.

    The file holds a JSON object so other keys written by other tools
    survive a write.

    Usage:
        store = HighScoreStore(Path("~/.giftfall/highscore.json").expanduser())
        best = store.read()
        store.write(120)
    """

    def __init__(self, path: Path, key: str = DEFAULT_KEY):
        self.path = Path(path)
        self.key = key

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read high score from {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed high score file {self.path}")
            return {}
        return data

    def read(self) -> int:
        value = parse_score(self._load().get(self.key))
        logger.debug(f"High score read: {value}")
        return value

    def write(self, value: int) -> None:
        data = self._load()
        data[self.key] = int(value)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            logger.info(f"High score saved: {value}")
        except OSError as e:
            logger.error(f"Failed to save high score to {self.path}: {e}")


class MemoryHighScoreStore:
    """In-memory store, for tests and for running without a writable disk."""

    def __init__(self, value: Any = None):
        self.value = value
        self.writes: list[int] = []

    def read(self) -> int:
        return parse_score(self.value)

    def write(self, value: int) -> None:
        self.value = int(value)
        self.writes.append(int(value))
