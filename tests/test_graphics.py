"""Tests for drawing primitives, the buffer surface and sprite loading."""

import numpy as np
from PIL import Image

from giftfall.graphics.images import ImageLoader
from giftfall.graphics.primitives import (
    clear,
    draw_circle,
    draw_image,
    draw_rect,
    draw_text,
    new_buffer,
    text_width,
)
from giftfall.graphics.surface import BufferSurface

RED = (255, 0, 0)


def test_new_buffer_shape():
    buf = new_buffer(40, 30)
    assert buf.shape == (30, 40, 3)
    assert buf.dtype == np.uint8
    assert not buf.any()


def test_rect_is_clipped():
    buf = new_buffer(10, 10)
    draw_rect(buf, -5, -5, 8, 8, RED)
    assert (buf[0:3, 0:3] == RED).all()
    assert not buf[3:, :].any()


def test_rect_outline():
    buf = new_buffer(10, 10)
    draw_rect(buf, 2, 2, 5, 5, RED, filled=False)
    assert (buf[2, 2:7] == RED).all()
    assert not buf[4, 4].any()


def test_circle_stays_inside_its_radius():
    buf = new_buffer(20, 20)
    draw_circle(buf, 10, 10, 3, RED)
    assert (buf[10, 10] == RED).all()
    assert not buf[10, 15].any()
    assert not buf[0, 0].any()


def test_circle_off_buffer_is_ignored():
    buf = new_buffer(20, 20)
    draw_circle(buf, -30, 5, 2, RED)
    draw_circle(buf, 5, 5, 0, RED)
    assert not buf.any()


def test_draw_image_with_negative_offset():
    buf = new_buffer(10, 10)
    img = np.full((4, 4, 3), 200, dtype=np.uint8)
    draw_image(buf, img, -2, -2)
    assert (buf[0:2, 0:2] == 200).all()
    assert not buf[2:, 2:].any()


def test_draw_image_respects_alpha_channel():
    buf = new_buffer(4, 4)
    img = np.zeros((2, 2, 4), dtype=np.uint8)
    img[0, 0] = (255, 255, 255, 255)
    img[1, 1] = (255, 255, 255, 0)
    draw_image(buf, img, 0, 0)
    assert (buf[0, 0] == 255).all()
    assert not buf[1, 1].any()


def test_text_width_matches_drawn_width():
    buf = new_buffer(100, 10)
    drawn = draw_text(buf, "SCORE 10", 0, 0, RED)
    assert drawn == text_width("SCORE 10")
    assert buf.any()


def test_buffer_surface_clear_uses_background():
    surface = BufferSurface(8, 6, background=(1, 2, 3))
    surface.clear()
    assert (surface.buffer == (1, 2, 3)).all()


def test_buffer_surface_scales_images():
    surface = BufferSurface(50, 50)
    sprite = Image.new("RGBA", (8, 8), (0, 255, 0, 255))

    surface.draw_image(sprite, 10.4, 20.6, 16, 16)

    for y, x in ((21, 10), (36, 25)):
        r, g, b = surface.buffer[y, x]
        assert g > 240 and r < 10 and b < 10
    assert not surface.buffer[37, 26].any()
    assert not surface.buffer[20, 10].any()


def test_buffer_surface_skips_missing_images():
    surface = BufferSurface(10, 10)
    surface.draw_image(None, 0, 0, 10, 10)
    assert not surface.buffer.any()


def test_buffer_surface_resize():
    surface = BufferSurface(10, 10)
    surface.resize(30, 20)
    assert (surface.width, surface.height) == (30, 20)


def test_loader_returns_none_for_missing_sprite(tmp_path):
    loader = ImageLoader(tmp_path)
    assert loader.load("santa") is None


def test_loader_returns_none_for_corrupt_sprite(tmp_path):
    (tmp_path / "gift.png").write_bytes(b"not a png")
    assert ImageLoader(tmp_path).load("gift") is None


def test_loader_loads_sprites_by_name(tmp_path):
    Image.new("RGB", (5, 7), (10, 20, 30)).save(tmp_path / "santa.png")

    sprites = ImageLoader(tmp_path).load_sprites()

    assert sprites.player is not None
    assert sprites.player.mode == "RGBA"
    assert sprites.player.size == (5, 7)
    assert sprites.gift is None
    assert sprites.obstacle is None


def test_clear():
    buf = new_buffer(3, 3)
    clear(buf, (9, 9, 9))
    assert (buf == 9).all()
