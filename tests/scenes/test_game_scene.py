"""
test_game_scene.py
------------------
Integration tests for one play scene driven frame by frame.
"""

import random

import pygame
import pytest

from frogger.core.runtime.game_session import GamePhase
from frogger.core.runtime.game_settings import Layers
from frogger.scenes.game_scene import GameScene


@pytest.fixture
def scene(mock_draw_manager):
    return GameScene(mock_draw_manager, rng=random.Random(7))


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


@pytest.mark.integration
class TestGameScene:

    def test_builds_board_entities(self, scene):
        assert len(scene.enemies) == 5
        assert [(e.x, e.y) for e in scene.enemies] == [
            (0, 57), (101, 140), (202, 223), (101, 223), (303, 223)
        ]
        assert (scene.player.x, scene.player.y) == (202, 405)
        assert scene.gem.visible
        assert scene.session.phase is GamePhase.NOT_STARTED

    def test_idle_before_start(self, scene):
        positions = [e.x for e in scene.enemies]

        scene.update(0.1)

        assert [e.x for e in scene.enemies] == positions
        assert scene.hud.message.startswith("Press 'p'")

    def test_start_key_starts_game(self, scene):
        assert scene.handle_event(key_up(pygame.K_s)) is True
        assert scene.session.is_running
        assert scene.stats.games_played == 1

        scene.update(0.1)

        assert scene.enemies[0].x == pytest.approx(5.0)
        assert scene.hud.score_text == "Score: 0"

    def test_unmapped_key_returns_false(self, scene):
        assert scene.handle_event(key_up(pygame.K_q)) is False

    def test_select_character_before_start(self, scene):
        scene.handle_event(key_up(pygame.K_p))
        assert scene.player.sprite == "images/char-boy.png"

    def test_crossing_to_water_scores(self, scene):
        scene.handle_event(key_up(pygame.K_s))
        for enemy in scene.enemies:
            enemy.body.move_to(-101, enemy.y)
        scene.gem.hide()

        for _ in range(5):
            scene.handle_event(key_up(pygame.K_UP))

        scene.update(0.0)

        assert scene.player.score == 1
        assert (scene.player.x, scene.player.y) == (202, 405)
        assert scene.stats.crossings == 1

    def test_draw_queues_board_and_entities(self, scene, mock_draw_manager):
        scene.update(0.0)
        mock_draw_manager.reset_mock()

        scene.draw(mock_draw_manager)

        layers = [c.args[2] for c in mock_draw_manager.draw_image.call_args_list]
        assert layers.count(Layers.BACKGROUND) == 30
        assert layers.count(Layers.ENEMIES) == 5
        assert layers.count(Layers.PICKUPS) == 1
        assert layers.count(Layers.PLAYER) == 1
        mock_draw_manager.draw_text.assert_called_once()
