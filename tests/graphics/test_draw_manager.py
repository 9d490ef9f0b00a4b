"""
test_draw_manager.py
--------------------
Unit tests for image caching, placeholder fallback and layered rendering.
Uses real pygame surfaces on the dummy SDL driver.
"""

import pygame
import pytest
from unittest.mock import patch

from frogger.core.runtime.game_settings import Assets, Layers
from frogger.graphics.draw_manager import DrawManager


RED = (255, 0, 0)
BLUE = (0, 0, 255)


@pytest.fixture
def draw_manager(tmp_path):
    return DrawManager(
        asset_root=str(tmp_path),
        placeholder_colors={"red.png": RED, "blue.png": BLUE},
    )


def pixel(surface, pos):
    color = surface.get_at(pos)
    return (color.r, color.g, color.b)


# ===========================================================
# Image Loading
# ===========================================================

class TestImageLoading:

    def test_missing_file_uses_placeholder(self, draw_manager):
        img = draw_manager.get_image("red.png")

        assert img.get_size() == Assets.PLACEHOLDER_SIZE
        assert pixel(img, (5, 5)) == RED

    def test_unknown_sprite_uses_default_color(self, draw_manager):
        img = draw_manager.get_image("images/nothing.png")
        assert pixel(img, (0, 0)) == tuple(Assets.PLACEHOLDER_COLOR[:3])

    def test_images_are_cached(self, draw_manager):
        assert draw_manager.get_image("red.png") is draw_manager.get_image("red.png")

    def test_loads_real_file(self, draw_manager, tmp_path):
        source = pygame.Surface((20, 30))
        source.fill((10, 20, 30))
        pygame.image.save(source, str(tmp_path / "tile.png"))

        with patch("frogger.graphics.draw_manager.pygame.display.get_surface", return_value=None):
            img = draw_manager.get_image("tile.png")

        assert img.get_size() == (20, 30)
        assert pixel(img, (1, 1)) == (10, 20, 30)


# ===========================================================
# Queueing and Rendering
# ===========================================================

class TestQueueAndRender:

    def test_queue_and_clear(self, draw_manager):
        draw_manager.draw_image("red.png", (0, 0), Layers.BACKGROUND)
        draw_manager.draw_text("Score: 1", (200, 586), (128, 0, 128))
        assert draw_manager.queued_count() == 2

        draw_manager.clear()
        assert draw_manager.queued_count() == 0

    def test_empty_text_not_queued(self, draw_manager):
        draw_manager.draw_text("", (0, 0), (0, 0, 0))
        assert draw_manager.queued_count() == 0

    def test_positions_are_truncated_to_pixels(self, draw_manager):
        draw_manager.draw_image("red.png", (10.7, -0.4), Layers.ENEMIES)
        _, pos = draw_manager.surface_layers[Layers.ENEMIES][0]
        assert pos == (10, 0)

    def test_higher_layer_drawn_on_top(self, draw_manager):
        target = pygame.Surface((505, 606))

        draw_manager.draw_image("blue.png", (0, 0), Layers.PLAYER)
        draw_manager.draw_image("red.png", (0, 0), Layers.BACKGROUND)
        draw_manager.render(target)

        assert pixel(target, (10, 10)) == BLUE

    def test_render_fills_background(self, draw_manager):
        target = pygame.Surface((505, 606))
        target.fill(RED)

        draw_manager.render(target)

        assert pixel(target, (300, 300)) == (255, 255, 255)
