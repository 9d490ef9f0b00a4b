"""
game_scene.py
-------------
The single play scene: board, bugs, gem, player and HUD.

Frame order
-----------
1. update(dt): every bug and the gem move, the player is clamped,
   then the player's scoring pass runs against all bugs and the gem.
2. draw(draw_manager): board rows, gem, bugs, player, HUD.
3. handle_event(event): key releases become player commands between frames.
"""

import random

from frogger.core.debug.debug_logger import DebugLogger
from frogger.core.runtime.game_settings import Board, Layers
from frogger.core.runtime.game_session import GameSession
from frogger.core.runtime.session_stats import SessionStats
from frogger.core.services.config_manager import load_config
from frogger.core.services.event_manager import EventManager
from frogger.core.services.input_manager import InputManager
from frogger.entities.enemies.enemy_bug import EnemyBug
from frogger.entities.items.gem import Gem
from frogger.entities.player.player_core import Player
from frogger.ui.hud_manager import HudManager


class GameScene:
    """Owns every entity of one game and drives them once per frame."""

    def __init__(self, draw_manager, rng=None, input_manager=None, events=None):
        """
        Args:
            draw_manager: DrawManager used for sprite lookups and rendering
            rng: random.Random-compatible source shared by bugs and gem
            input_manager: Key-to-command mapper (default bindings if None)
            events: EventManager for scoring events (a fresh one if None)
        """
        DebugLogger.section("Initializing GameScene")

        self.draw_manager = draw_manager
        self.rng = rng or random.Random()
        self.input_manager = input_manager or InputManager()
        self.events = events or EventManager()

        self.stats = SessionStats()
        self.stats.subscribe(self.events)

        self.session = GameSession(events=self.events)
        self.hud = HudManager()

        board_cfg = load_config("board.json", {"row_sprites": []})
        self.row_sprites = list(board_cfg["row_sprites"])

        self.enemies = self._spawn_enemies()
        self.gem = Gem(rng=self.rng)
        self.player = Player(draw_manager, events=self.events)

        DebugLogger.init_entry("GameScene")
        DebugLogger.init_sub(f"Enemies: {len(self.enemies)}")

    def _spawn_enemies(self):
        cfg = load_config("enemies.json")
        enemies = [
            EnemyBug.at_cell(column, lane, self.draw_manager, rng=self.rng, cfg=cfg)
            for column, lane in cfg.get("spawns", [])
        ]
        DebugLogger.state(f"Spawned {len(enemies)} bugs", category="entity_spawn")
        return enemies

    # ===========================================================
    # Frame Cycle
    # ===========================================================

    def update(self, dt: float):
        """Advance every entity, then run the player's scoring pass."""
        for enemy in self.enemies:
            enemy.update(dt, self.session)
        self.gem.update(dt)
        self.player.update(self.session, dt)

        self.player.handle_events(self.enemies, self.gem, self.session, self.hud)

    def draw(self, draw_manager):
        """Queue the board, entities and HUD."""
        for row, sprite in enumerate(self.row_sprites):
            for column in range(Board.COLUMNS):
                draw_manager.draw_image(
                    sprite,
                    (column * Board.TILE_WIDTH, row * Board.TILE_HEIGHT),
                    Layers.BACKGROUND
                )

        self.gem.draw(draw_manager)
        for enemy in self.enemies:
            enemy.draw(draw_manager)
        self.player.draw(draw_manager)
        self.hud.draw(draw_manager)

    def handle_event(self, event) -> bool:
        """
        Forward a key release to the player.

        Returns:
            bool: True if the event mapped to a command
        """
        command = self.input_manager.command_for(event)
        if command is None:
            return False

        self.player.handle_input(command, self.session)
        return True
