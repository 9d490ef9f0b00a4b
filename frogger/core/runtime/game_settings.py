"""
game_settings.py
----------------
Centralized constants for all game systems.
"""


# ===========================================================
# Board Geometry
# ===========================================================

class Board:
    """Tile grid layout. Row 0 is water, rows 1-3 are enemy lanes, rows 4-5 are grass."""
    TILE_WIDTH: int = 101
    TILE_HEIGHT: int = 83
    COLUMNS: int = 5
    ROWS: int = 6

    WATER_ROW: int = 0
    ENEMY_LANES = (1, 2, 3)
    START_COLUMN: int = 2
    START_ROW: int = 5

    FIELD_WIDTH: int = COLUMNS * TILE_WIDTH


# ===========================================================
# Sprite Offsets
# ===========================================================

class Offsets:
    """Pixel offsets that seat each sprite inside its tile."""
    PLAYER_ROW: int = 10
    PLAYER_LEAD: int = 17
    ENEMY_ROW: int = 26
    GEM_ROW: int = 35


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = Board.FIELD_WIDTH
    HEIGHT: int = 606
    FPS: int = 60
    CAPTION: str = "Frogger"
    BACKGROUND = (255, 255, 255)


# ===========================================================
# Font Configuration
# ===========================================================

class Fonts:
    NAME: str = "arial"
    SIZE: int = 16
    BOLD: bool = True


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Frame timing."""
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Assets
# ===========================================================

class Assets:
    """Asset lookup for sprite ids such as 'images/char-boy.png'."""
    ROOT: str = "assets"
    PLACEHOLDER_SIZE = (101, 171)
    PLACEHOLDER_COLOR = (255, 0, 255)


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    BACKGROUND: int = 0
    PICKUPS: int = 100
    ENEMIES: int = 300
    PLAYER: int = 400
    UI: int = 600
