"""
Desktop window hosting a game session with pygame.

The window owns the frame clock and the input devices: it turns key,
mouse and touch input into bus events, calls the session's frame
callback, and blits the session's buffer with the score overlay.
"""

from dataclasses import dataclass
import asyncio
import logging

import numpy as np
import pygame

from ..core.events import EventBus, EventType, arcade_event, button_press_event, drag_event
from ..core.state import State
from ..game.session import GameSession
from ..graphics.surface import BufferSurface
from ..ui.hud import ScoreBoard

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Window configuration."""
    width: int = 400
    height: int = 600
    title: str = "Giftfall"
    resizable: bool = True
    fps: int = 60
    bg_color: tuple[int, int, int] = (12, 24, 48)


class GameWindow:
    """
    Window driving a GameSession.

    Keyboard Mapping:
        LEFT / RIGHT: Move (held)
        SPACE / RETURN: Start / restart
        S: Capture screenshot
        ESC / Q: Exit

    Mouse or touch drag moves the player horizontally.
    """

    def __init__(
        self,
        config: WindowConfig,
        event_bus: EventBus,
        session: GameSession,
        surface: BufferSurface,
        scoreboard: ScoreBoard,
    ) -> None:
        self.config = config
        self.event_bus = event_bus
        self.session = session
        self.surface = surface
        self.scoreboard = scoreboard

        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._running = False
        self._frame_count = 0
        self._dragging = False

        event_bus.subscribe(EventType.SHUTDOWN, lambda e: self.stop())

        logger.info("GameWindow created")

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        flags = pygame.DOUBLEBUF
        if self.config.resizable:
            flags |= pygame.RESIZABLE

        self._screen = pygame.display.set_mode(
            (self.config.width, self.config.height),
            flags
        )
        self._clock = pygame.time.Clock()
        self.surface.clear()

        logger.info(f"Pygame initialized: {self.config.width}x{self.config.height}")

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.KEYUP:
                self._handle_keyup(event)

            # SDL mirrors touches as mouse events; FINGERMOTION already covers those
            elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION) \
                    and getattr(event, "touch", False):
                continue

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._dragging = True

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self._dragging = False

            elif event.type == pygame.MOUSEMOTION and self._dragging:
                if event.rel[0]:
                    self.event_bus.emit(drag_event(event.rel[0], source="mouse"))

            elif event.type == pygame.FINGERMOTION:
                # Finger deltas are normalized to the window width
                self.event_bus.emit(drag_event(event.dx * self.config.width, source="touch"))

            elif event.type == pygame.VIDEORESIZE:
                self._resize(event.w, event.h)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._running = False
        elif key == pygame.K_s:
            self._capture_screenshot()
        elif key in (pygame.K_SPACE, pygame.K_RETURN):
            self.event_bus.emit(button_press_event(source="keyboard"))
        elif key == pygame.K_LEFT:
            self.event_bus.emit(arcade_event("left", source="keyboard"))
        elif key == pygame.K_RIGHT:
            self.event_bus.emit(arcade_event("right", source="keyboard"))

    def _handle_keyup(self, event: pygame.event.Event) -> None:
        """Handle key release."""
        key = event.key

        if key == pygame.K_LEFT:
            self.event_bus.emit(arcade_event("left", pressed=False, source="keyboard"))
        elif key == pygame.K_RIGHT:
            self.event_bus.emit(arcade_event("right", pressed=False, source="keyboard"))

    def _resize(self, width: int, height: int) -> None:
        """Follow the window size with the playfield."""
        self.config.width = width
        self.config.height = height
        self.surface.resize(width, height)
        self.session.resize(width, height)
        if self.session.state == State.GAME_OVER:
            # Keep the final playfield visible under the game-over panel
            self.session.draw()
        elif not self.session.running:
            self.surface.clear()
        logger.info(f"Window resized: {width}x{height}")

    def _render(self) -> None:
        """Blit the playfield with the HUD on top."""
        if not self._screen:
            return

        frame = self.surface.buffer.copy()
        self.scoreboard.render(frame)

        # pygame surfaces are indexed (x, y)
        image = pygame.surfarray.make_surface(np.ascontiguousarray(frame.swapaxes(0, 1)))
        self._screen.fill(self.config.bg_color)
        self._screen.blit(image, (0, 0))
        pygame.display.flip()

    def _capture_screenshot(self) -> None:
        """Capture and save a screenshot."""
        if self._screen:
            filename = f"screenshot_{self._frame_count}.png"
            pygame.image.save(self._screen, filename)
            logger.info(f"Screenshot saved: {filename}")

    async def run(self) -> None:
        """Main loop."""
        self._init_pygame()
        self._running = True

        logger.info("Window loop started")

        while self._running:
            self._handle_events()

            delta_ms = float(self._clock.get_time()) if self._clock else 0.0
            self.session.frame(delta_ms)

            self._render()

            if self._clock:
                self._clock.tick(self.config.fps)

            self._frame_count += 1

            # Yield to other tasks
            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        self.session.close()
        self.scoreboard.close()
        pygame.quit()
        logger.info("Window closed")

    def stop(self) -> None:
        """Stop the loop after the current frame."""
        self._running = False
