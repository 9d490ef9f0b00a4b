"""
test_entity_body.py
-------------------
Unit tests for the shared EntityBody component.
"""

import pytest
from unittest.mock import MagicMock

from frogger.entities.entity_body import EntityBody


class TestEntityBody:

    def test_position_and_size(self):
        body = EntityBody(10, 20, 68, 80, "images/char-boy.png")

        assert (body.x, body.y) == (10, 20)
        assert body.width == 68
        assert body.height == 80
        assert body.size == (68, 80)
        assert body.sprite == "images/char-boy.png"

    @pytest.mark.parametrize("width,height", [(0, 80), (68, 0), (-1, 80)])
    def test_non_positive_size_rejected(self, width, height):
        with pytest.raises(ValueError):
            EntityBody(0, 0, width, height, "x.png")

    def test_setters_and_move_to(self):
        body = EntityBody(0, 0, 101, 69, "bug.png")

        body.x = 50
        body.y = -10
        assert (body.x, body.y) == (50, -10)

        body.move_to(202, 405)
        assert (body.x, body.y) == (202, 405)

    def test_size_is_read_only(self):
        body = EntityBody(0, 0, 101, 69, "bug.png")
        with pytest.raises(AttributeError):
            body.width = 5

    def test_render_queues_sprite_at_position(self):
        body = EntityBody(101, 57, 101, 69, "bug.png")
        draw_manager = MagicMock()

        body.render(draw_manager, 300)

        draw_manager.draw_image.assert_called_once_with("bug.png", (101, 57), 300)
