"""
player_core.py
--------------
Defines the Player entity: input handling, board clamping and the per-frame
scoring pass against bugs, the water row and the gem.
"""

from frogger.core.debug.debug_logger import DebugLogger
from frogger.core.runtime.game_settings import Offsets, Layers
from frogger.core.runtime.game_session import GamePhase
from frogger.core.services.config_manager import load_config
from frogger.core.services.event_manager import (
    EnemyCollisionEvent,
    WaterReachedEvent,
    GemCollectedEvent,
)
from frogger.entities.entity_body import EntityBody
from .player_logic import row_collision
from .player_movement import step, clamp_to_board, in_water_band, start_position
from .player_state import PlayerCommand, MOVEMENT_COMMANDS


DEFAULT_CONFIG = {
    "size": [68, 80],
    "characters": ["images/char-boy.png"],
}


class Player:
    """Represents the controllable player entity."""

    def __init__(self, resources, x=None, y=None, cfg=None, events=None):
        """
        Args:
            resources: Sprite resolver exposing get_image(sprite_id)
            x, y: Spawn position (defaults to the start cell)
            cfg: Config override (or use player.json)
            events: Optional EventManager notified about scoring
        """
        cfg = cfg if cfg is not None else load_config("player.json", DEFAULT_CONFIG)

        self.characters = list(cfg["characters"])
        if not self.characters:
            raise ValueError("Player requires at least one character sprite")
        self.character_index = 0

        start_x, start_y = start_position()
        x = x if x is not None else start_x
        y = y if y is not None else start_y

        width, height = cfg["size"]
        self.body = EntityBody(x, y, width, height, self.characters[0])

        self.score = 0
        self.in_water = False

        self.resources = resources
        self.events = events

        DebugLogger.init_entry("Player Initialized")
        DebugLogger.init_sub(f"Location: ({x:.1f}, {y:.1f})")
        DebugLogger.init_sub(f"Characters: {len(self.characters)}")

    # ===========================================================
    # Properties
    # ===========================================================
    @property
    def x(self):
        return self.body.x

    @property
    def y(self):
        return self.body.y

    @property
    def width(self):
        return self.body.width

    @property
    def height(self):
        return self.body.height

    @property
    def sprite(self):
        return self.body.sprite

    def _sprite_width(self) -> int:
        return self.resources.get_image(self.body.sprite).get_width()

    # ===========================================================
    # Frame Cycle
    # ===========================================================
    def update(self, session, dt: float = 0.0) -> bool:
        """
        Keep the player on the board.

        Args:
            session: GameSession; nothing happens unless it is running
            dt: Unused, accepted for a uniform update signature

        Returns:
            bool: Whether the clamp was applied
        """
        if not session.is_running:
            return False

        clamp_to_board(self.body, self._sprite_width())
        return True

    def draw(self, draw_manager):
        self.body.render(draw_manager, Layers.PLAYER)

    def reset_position(self):
        """Return to the start cell."""
        self.body.move_to(*start_position())

    # ===========================================================
    # Input
    # ===========================================================
    def handle_input(self, command, session):
        """
        Apply one logical command.

        Args:
            command: PlayerCommand, or None for an unmapped key
            session: GameSession the command acts on
        """
        if command is None:
            return

        if command in MOVEMENT_COMMANDS:
            if session.is_running:
                step(self.body, MOVEMENT_COMMANDS[command], self._sprite_width())

        elif command is PlayerCommand.SELECT_CHARACTER:
            if not session.is_running:
                self.select_next_character()
                self.update(session, 0)

        elif command is PlayerCommand.START:
            session.start()
            self.score = 0
            DebugLogger.action("Game started, score reset", category="game_state")

    def select_next_character(self):
        """Cycle to the next character skin, wrapping to the first."""
        self.character_index = (self.character_index + 1) % len(self.characters)
        self.body.sprite = self.characters[self.character_index]
        DebugLogger.state(f"Character -> {self.body.sprite}", category="game_state")

    # ===========================================================
    # Collision Checks
    # ===========================================================
    def detect_collision(self, enemy) -> bool:
        """True when the bug shares the player's row and overlaps horizontally."""
        return row_collision(self.body, enemy.body, Offsets.ENEMY_ROW)

    def reached_water(self) -> bool:
        """
        True when the player stands on the water row.
        On success the player is sent back to the start cell.
        """
        if in_water_band(self.body):
            self.reset_position()
            return True
        return False

    def collected_gem(self, gem) -> bool:
        """True when the gem is visible, in the player's row, and overlapping."""
        if not gem.visible:
            return False
        return row_collision(self.body, gem.body, Offsets.GEM_ROW)

    # ===========================================================
    # Scoring Pass
    # ===========================================================
    def handle_events(self, enemies, gem, session, hud):
        """
        Evaluate at most one scoring event this frame and refresh the HUD.

        Order: bug collision (-1), water (+1 once per entry), gem (+points).
        When nothing happened the in-water flag is cleared. A negative score
        ends the game.

        Args:
            enemies: Iterable of bugs; the first one hit counts
            gem: The board's Gem
            session: GameSession updated on game over
            hud: HudManager receiving this frame's lines
        """
        hud.clear()

        hit = next((enemy for enemy in enemies if self.detect_collision(enemy)), None)

        if hit is not None:
            self.score -= 1
            self.reset_position()
            hud.show_message("collision")
            DebugLogger.state(f"Hit by {hit!r}, score {self.score}", category="collision")
            self._dispatch(EnemyCollisionEvent(score=self.score))

        elif self.reached_water():
            scored = not self.in_water
            if scored:
                self.score += 1
                self.in_water = True
            hud.show_message("water")
            DebugLogger.state(f"Reached water, score {self.score}", category="score")
            self._dispatch(WaterReachedEvent(score=self.score, scored=scored))

        elif self.collected_gem(gem):
            self.score += gem.points
            gem.hide()
            DebugLogger.state(f"Collected gem, score {self.score}", category="score")
            self._dispatch(GemCollectedEvent(score=self.score, points=gem.points))

        else:
            self.in_water = False

        if self.score < 0:
            session.end(self.score)

        if session.is_running:
            hud.show_score(self.score)
        elif session.phase is GamePhase.GAME_OVER:
            hud.show_prompt("game_over")
        else:
            hud.show_prompt("start")

    def _dispatch(self, event):
        if self.events is not None:
            self.events.dispatch(event)

    def __repr__(self) -> str:
        return (
            f"<Player pos=({self.body.x:.1f}, {self.body.y:.1f}) "
            f"score={self.score} sprite={self.body.sprite}>"
        )
