"""
gem.py
------
The collectible gem that periodically reappears somewhere on the lanes.

Responsibilities
----------------
- Accumulate elapsed time every frame, whether or not the game is running.
- Once hidden for longer than the reveal interval, roll whether to show again,
  move to a random cell and switch to the next gem skin.
"""

import random

from frogger.core.debug.debug_logger import DebugLogger
from frogger.core.runtime.game_settings import Board, Offsets, Layers
from frogger.core.services.config_manager import load_config
from frogger.entities.entity_body import EntityBody


DEFAULT_CONFIG = {
    "skins": ["images/Gem Blue.png"],
    "size": [101, 105],
    "start_cell": [0, 3],
    "reveal_interval": 15,
    "reveal_chance": 1.0,
    "points": 2,
}


def gem_y(row: int) -> float:
    """Top-left y of a gem sitting in the given board row."""
    return row * Board.TILE_HEIGHT - Offsets.GEM_ROW


class Gem:
    """Single persistent gem that toggles between hidden and visible."""

    __slots__ = (
        'body', 'visible', 'reveal_timer', 'reveal_interval', 'reveal_chance',
        'points', 'skins', 'skin_index', 'rng'
    )

    def __init__(self, x=None, y=None, rng=None, cfg=None):
        """
        Args:
            x, y: Start position (defaults to the configured start cell)
            rng: random.Random-compatible source for reveal draws
            cfg: Config override (or use gem.json)
        """
        cfg = cfg if cfg is not None else load_config("gem.json", DEFAULT_CONFIG)

        column, row = cfg["start_cell"]
        x = x if x is not None else column * Board.TILE_WIDTH
        y = y if y is not None else gem_y(row)

        self.skins = list(cfg["skins"])
        if not self.skins:
            raise ValueError("Gem requires at least one skin")
        self.skin_index = 0

        width, height = cfg["size"]
        self.body = EntityBody(x, y, width, height, self.skins[0])

        self.visible = True
        self.reveal_timer = 0.0
        self.reveal_interval = cfg["reveal_interval"]
        self.reveal_chance = cfg["reveal_chance"]
        self.points = cfg["points"]
        self.rng = rng or random.Random()

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
    def update(self, dt: float) -> bool:
        """
        Accumulate time and, once hidden past the interval, relocate the gem.

        Args:
            dt: Elapsed time since the last frame
        """
        self.reveal_timer += dt

        if not self.visible and self.reveal_timer > self.reveal_interval:
            self.visible = self.rng.random() < self.reveal_chance

            column = self.rng.randrange(Board.COLUMNS)
            row = self.rng.randint(Board.ENEMY_LANES[0], Board.ENEMY_LANES[-1])
            self.body.move_to(column * Board.TILE_WIDTH, gem_y(row))

            self.skin_index = (self.skin_index + 1) % len(self.skins)
            self.body.sprite = self.skins[self.skin_index]
            self.reveal_timer = 0.0

            DebugLogger.state(
                f"Gem relocated to ({column}, {row}) visible={self.visible}",
                category="item"
            )
        return True

    def hide(self):
        """Remove the gem from the board until the next reveal."""
        self.visible = False

    # ===========================================================
    # Rendering
    # ===========================================================
    def draw(self, draw_manager):
        """Render the gem sprite while it is on the board."""
        if self.visible:
            self.body.render(draw_manager, Layers.PICKUPS)
