"""Sprite loading.

Sprites are looked up by name in the assets directory. A sprite that
can't be opened is logged and returned as None; the surface skips
None handles, so the game keeps running with that sprite invisible.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import logging

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

SPRITE_FILES = {
    "santa": "santa.png",
    "gift": "gift.png",
    "obstacle": "obstacle.png",
}


@dataclass
class SpriteSet:
    """Image handles drawn by the session. Any of them may be None."""
    player: Optional[Image.Image] = None
    gift: Optional[Image.Image] = None
    obstacle: Optional[Image.Image] = None


class ImageLoader:
    """Loads sprite images from a directory with Pillow."""

    def __init__(self, assets_path: Path):
        self.assets_path = Path(assets_path)

    def load(self, name: str) -> Optional[Image.Image]:
        """Load a sprite by name ("santa", "gift", "obstacle") or file name."""
        path = self.assets_path / SPRITE_FILES.get(name, name)
        try:
            with Image.open(path) as img:
                image = img.convert("RGBA")
        except (OSError, UnidentifiedImageError) as e:
            logger.warning(f"Could not load sprite '{name}' from {path}: {e}")
            return None

        logger.debug(f"Loaded sprite '{name}' {image.size[0]}x{image.size[1]}")
        return image

    def load_sprites(self) -> SpriteSet:
        return SpriteSet(
            player=self.load("santa"),
            gift=self.load("gift"),
            obstacle=self.load("obstacle"),
        )
