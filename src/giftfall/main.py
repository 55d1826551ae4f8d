"""
Main entry point for GIFTFALL.

Wires the event bus, session, high score store and UI, then runs the
pygame window until it is closed.
"""

import asyncio
import logging
import sys

from giftfall.config.settings import Settings, get_settings
from giftfall.core.events import EventBus


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


async def run_window(settings: Settings) -> None:
    """Build the game and run its window."""
    from giftfall.game.session import GameSession
    from giftfall.graphics.images import ImageLoader
    from giftfall.graphics.surface import BufferSurface
    from giftfall.simulator.window import GameWindow, WindowConfig
    from giftfall.storage.highscore import HighScoreStore
    from giftfall.ui.hud import ScoreBoard

    event_bus = EventBus()
    store = HighScoreStore(settings.high_score_path, key=settings.high_score_key)
    surface = BufferSurface(settings.playfield_width, settings.playfield_height)
    sprites = ImageLoader(settings.assets_path).load_sprites()

    session = GameSession(
        event_bus=event_bus,
        surface=surface,
        sprites=sprites,
        high_score_store=store,
        gift_interval_ms=settings.gift_interval_ms,
        obstacle_interval_ms=settings.obstacle_interval_ms,
    )
    scoreboard = ScoreBoard(event_bus, high_score=session.high_score)

    config = WindowConfig(
        width=settings.playfield_width,
        height=settings.playfield_height,
        title=settings.window_title,
        resizable=settings.resizable,
        fps=settings.fps,
    )
    window = GameWindow(
        config=config,
        event_bus=event_bus,
        session=session,
        surface=surface,
        scoreboard=scoreboard,
    )

    await window.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("GIFTFALL starting...")

    try:
        asyncio.run(run_window(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("GIFTFALL stopped")


if __name__ == "__main__":
    main()
