"""
player_movement.py
------------------
Handles tile-step movement and board-boundary logic for the player.

Responsibilities
----------------
- Step the player exactly one tile per movement command.
- Snap the player back onto the board after stepping off an edge.
"""

from frogger.core.runtime.game_settings import Board, Offsets


WATER_Y = -Offsets.PLAYER_ROW
BOTTOM_LIMIT = Board.TILE_HEIGHT * Board.START_ROW


def step(body, direction, sprite_width: int):
    """
    Move a body one tile in the given direction.

    Args:
        body: EntityBody to move
        direction: (dx, dy) unit step
        sprite_width: Horizontal step size in pixels
    """
    dx, dy = direction
    body.x += dx * sprite_width
    body.y += dy * Board.TILE_HEIGHT


def clamp_to_board(body, sprite_width: int):
    """
    Keep the body on the board after a step.

    Horizontally the body snaps to the last or first column. Vertically it
    steps back up from below the home row, and above the board it settles
    on the water row.
    """
    if body.x + sprite_width > Board.FIELD_WIDTH:
        body.x = (Board.COLUMNS - 1) * sprite_width
    elif body.x <= -sprite_width:
        body.x = 0

    if body.y > BOTTOM_LIMIT:
        body.y -= Board.TILE_HEIGHT
    elif body.y <= 0:
        body.y = WATER_Y


def in_water_band(body) -> bool:
    """True while the body is inside the top (water) row."""
    return WATER_Y <= body.y < Board.TILE_HEIGHT - Offsets.PLAYER_ROW


def start_position():
    """Top-left position of the start cell."""
    return (
        Board.TILE_WIDTH * Board.START_COLUMN,
        Board.TILE_HEIGHT * Board.START_ROW - Offsets.PLAYER_ROW,
    )
