"""Score readouts and the start / game-over screens.

The ScoreBoard only listens: the session announces starts, score changes
and game over on the event bus, and the board keeps what it needs to
draw on top of the playfield.
"""

from typing import Callable
import logging

from giftfall.core.events import Event, EventBus, EventType
from giftfall.graphics.primitives import Buffer, draw_centered_text, draw_rect, draw_text, text_width

logger = logging.getLogger(__name__)

TEXT_COLOR = (255, 255, 255)
ACCENT_COLOR = (255, 215, 0)
ALERT_COLOR = (255, 80, 80)
DIM_COLOR = (180, 180, 200)
PANEL_COLOR = (20, 30, 60)


class ScoreBoard:
    """UI collaborator mirroring the session's scores and screens."""

    def __init__(self, event_bus: EventBus, high_score: int = 0, scale: int = 2):
        self.score = 0
        self.high_score = high_score
        self.final_score = 0
        self.final_high_score = high_score
        self.start_screen_visible = True
        self.game_over_screen_visible = False
        self.scale = scale

        self._unsubscribers: list[Callable[[], None]] = [
            event_bus.subscribe(EventType.SESSION_STARTED, self._on_started),
            event_bus.subscribe(EventType.SCORE_CHANGED, self._on_score),
            event_bus.subscribe(EventType.GAME_OVER, self._on_game_over),
        ]

    def close(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    def _on_started(self, event: Event) -> None:
        self.start_screen_visible = False
        self.game_over_screen_visible = False
        self.score = event.data.get("score", 0)
        self.high_score = event.data.get("high_score", self.high_score)

    def _on_score(self, event: Event) -> None:
        self.score = event.data.get("score", self.score)
        self.high_score = event.data.get("high_score", self.high_score)

    def _on_game_over(self, event: Event) -> None:
        self.final_score = event.data.get("final_score", self.score)
        self.final_high_score = event.data.get("high_score", self.high_score)
        self.high_score = self.final_high_score
        self.game_over_screen_visible = True
        logger.debug(f"Game over screen: {self.final_score} / {self.final_high_score}")

    def render(self, buffer: Buffer) -> None:
        """Draw the score line and whichever screen is visible."""
        s = self.scale
        draw_text(buffer, f"SCORE {self.score}", 4 * s, 4 * s, TEXT_COLOR, scale=s)
        best = f"BEST {self.high_score}"
        draw_text(buffer, best, buffer.shape[1] - text_width(best, s) - 4 * s, 4 * s, ACCENT_COLOR, scale=s)

        if self.start_screen_visible:
            self._render_panel(buffer, [
                ("CATCH THE GIFTS!", ACCENT_COLOR),
                ("DODGE THE REST", TEXT_COLOR),
                ("", TEXT_COLOR),
                ("PRESS SPACE", DIM_COLOR),
            ])
        elif self.game_over_screen_visible:
            self._render_panel(buffer, [
                ("GAME OVER", ALERT_COLOR),
                (f"SCORE {self.final_score}", TEXT_COLOR),
                (f"BEST {self.final_high_score}", ACCENT_COLOR),
                ("", TEXT_COLOR),
                ("SPACE TO RETRY", DIM_COLOR),
            ])

    def _render_panel(self, buffer: Buffer, lines: list[tuple[str, tuple[int, int, int]]]) -> None:
        s = self.scale
        h, w = buffer.shape[:2]
        line_h = 8 * s
        panel_h = line_h * len(lines) + 8 * s
        top = (h - panel_h) // 2

        draw_rect(buffer, 8 * s, top, w - 16 * s, panel_h, PANEL_COLOR)
        draw_rect(buffer, 8 * s, top, w - 16 * s, panel_h, ACCENT_COLOR, filled=False)

        y = top + 4 * s + s
        for text, color in lines:
            if text:
                draw_centered_text(buffer, text, y, color, scale=s)
            y += line_h
