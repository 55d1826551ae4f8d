"""On-screen UI for GIFTFALL."""

from giftfall.ui.hud import ScoreBoard

__all__ = ["ScoreBoard"]
