"""High score persistence."""

from giftfall.storage.highscore import (
    DEFAULT_KEY,
    HighScoreStorage,
    HighScoreStore,
    MemoryHighScoreStore,
    parse_score,
)

__all__ = [
    "DEFAULT_KEY",
    "HighScoreStorage",
    "HighScoreStore",
    "MemoryHighScoreStore",
    "parse_score",
]
