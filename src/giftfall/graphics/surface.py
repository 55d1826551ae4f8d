"""Drawing surface used by the game session.

The session only needs three operations: clear, filled circle and
scaled image. `BufferSurface` implements them on a numpy buffer which
the host blits to its window.
"""

from typing import Optional, Protocol
import logging

import numpy as np
from PIL import Image

from giftfall.graphics.primitives import Buffer, Color, clear, draw_circle, draw_image, new_buffer

logger = logging.getLogger(__name__)


class DrawingSurface(Protocol):
    """Abstract 2D drawing target."""

    width: int
    height: int

    def clear(self) -> None: ...

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None: ...

    def draw_image(
        self,
        handle: Optional[Image.Image],
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> None: ...


class BufferSurface:
    """DrawingSurface backed by a (height, width, 3) uint8 numpy buffer.

    Images are scaled with Pillow on first use at a given size and the
    scaled RGBA array is cached, since the same three sprites are drawn
    at the same few sizes every frame.
    """

    def __init__(self, width: int, height: int, background: Color = (0, 0, 0)):
        self.background = background
        self.buffer: Buffer = new_buffer(width, height)
        self._scaled: dict[tuple[int, int, int], np.ndarray] = {}

    @property
    def width(self) -> int:
        return self.buffer.shape[1]

    @property
    def height(self) -> int:
        return self.buffer.shape[0]

    def resize(self, width: int, height: int) -> None:
        """Reallocate the buffer for a new playfield size."""
        if (width, height) == (self.width, self.height):
            return
        self.buffer = new_buffer(width, height)
        logger.debug(f"Surface resized to {width}x{height}")

    def clear(self) -> None:
        clear(self.buffer, self.background)

    def fill_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        draw_circle(self.buffer, x, y, radius, color)

    def draw_image(
        self,
        handle: Optional[Image.Image],
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> None:
        # Images that failed to load are simply not drawn
        if handle is None:
            return

        w, h = max(int(round(width)), 1), max(int(round(height)), 1)
        pixels = self._scaled_pixels(handle, w, h)
        draw_image(self.buffer, pixels, int(round(x)), int(round(y)))

    def _scaled_pixels(self, handle: Image.Image, width: int, height: int) -> np.ndarray:
        key = (id(handle), width, height)
        pixels = self._scaled.get(key)
        if pixels is None:
            scaled = handle.convert("RGBA").resize((width, height), Image.Resampling.LANCZOS)
            pixels = np.asarray(scaled, dtype=np.uint8)
            self._scaled[key] = pixels
        return pixels
