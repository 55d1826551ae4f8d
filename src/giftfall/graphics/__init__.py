"""Graphics module for GIFTFALL rendering."""

from giftfall.graphics.primitives import (
    clear,
    draw_rect,
    draw_circle,
    draw_image,
    draw_text,
    draw_centered_text,
    new_buffer,
    text_width,
)
from giftfall.graphics.surface import DrawingSurface, BufferSurface
from giftfall.graphics.images import ImageLoader, SpriteSet

__all__ = [
    # Surfaces
    "DrawingSurface",
    "BufferSurface",
    # Sprites
    "ImageLoader",
    "SpriteSet",
    # Primitives
    "clear",
    "draw_rect",
    "draw_circle",
    "draw_image",
    "draw_text",
    "draw_centered_text",
    "new_buffer",
    "text_width",
]
