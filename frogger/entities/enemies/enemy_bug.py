"""
enemy_bug.py
------------
Defines the bug that crawls left-to-right across one of the stone lanes.

Responsibilities
----------------
- Advance horizontally each frame while the game is running.
- Wrap back to the left edge once it leaves the board on the right.
- Pick a new lane and speed once per lap, at the moment of wrapping.
"""

import random

from frogger.core.debug.debug_logger import DebugLogger
from frogger.core.runtime.game_settings import Board, Offsets, Layers
from frogger.core.services.config_manager import load_config
from frogger.entities.entity_body import EntityBody


DEFAULT_CONFIG = {
    "sprite": "images/enemy-bug.png",
    "size": [101, 69],
    "speed": 10,
    "speed_scale": 5,
    "spawns": [],
}


def lane_y(lane: int) -> float:
    """Top-left y of a bug travelling in the given board row."""
    return lane * Board.TILE_HEIGHT - Offsets.ENEMY_ROW


class EnemyBug:
    """A bug moving right along one lane, wrapping with a fresh lane and speed."""

    __slots__ = ('body', 'speed', 'speed_scale', 'resources', 'rng')

    _cached_defaults = None

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, x, y, resources, rng=None, speed=None, cfg=None):
        """
        Args:
            x, y: Spawn position (top-left)
            resources: Sprite resolver exposing get_image(sprite_id)
            rng: random.Random-compatible source for respawn draws
            speed: Initial speed override (or use JSON default)
            cfg: Config override (or use enemies.json)
        """
        if cfg is None:
            if EnemyBug._cached_defaults is None:
                EnemyBug._cached_defaults = load_config("enemies.json", DEFAULT_CONFIG)
            cfg = EnemyBug._cached_defaults

        width, height = cfg["size"]
        self.body = EntityBody(x, y, width, height, cfg["sprite"])
        self.speed = speed if speed is not None else cfg["speed"]
        self.speed_scale = cfg["speed_scale"]
        self.resources = resources
        self.rng = rng or random.Random()

    @classmethod
    def at_cell(cls, column, lane, resources, rng=None, cfg=None):
        """Spawn a bug at a board column on the given lane."""
        return cls(column * Board.TILE_WIDTH, lane_y(lane), resources, rng=rng, cfg=cfg)

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

    # ===========================================================
    # Update Logic
    # ===========================================================
    def update(self, dt: float, session) -> bool:
        """
        Move the bug right and wrap it once it leaves the board.

        Args:
            dt: Elapsed time since the last frame
            session: GameSession; the bug stays put unless it is running

        Returns:
            bool: False when the game is not running
        """
        if not session.is_running:
            return False

        self.body.x += dt * self.speed * self.speed_scale

        if self.body.x > Board.FIELD_WIDTH:
            self.respawn()
        return True

    def respawn(self):
        """Re-enter one body width left of the board on a random lane at a random speed."""
        sprite_width = self.resources.get_image(self.body.sprite).get_width()

        lane = self.rng.randint(Board.ENEMY_LANES[0], Board.ENEMY_LANES[-1])
        self.body.move_to(-self.body.width, lane_y(lane))
        self.speed = self.rng.randint(1, sprite_width)

        DebugLogger.trace(f"Bug wrapped to lane {lane} at speed {self.speed}", category="entity_spawn")

    # ===========================================================
    # Rendering
    # ===========================================================
    def draw(self, draw_manager):
        """Render the bug sprite."""
        self.body.render(draw_manager, Layers.ENEMIES)

    def __repr__(self) -> str:
        return f"<EnemyBug pos=({self.body.x:.1f}, {self.body.y:.1f}) speed={self.speed}>"
