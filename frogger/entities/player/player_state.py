"""
player_state.py
---------------
Defines the logical commands the player accepts from the input dispatcher.
"""

from enum import Enum


class PlayerCommand(Enum):
    """One command per key release."""

    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    SELECT_CHARACTER = "select_character"
    START = "start"


MOVEMENT_COMMANDS = {
    PlayerCommand.LEFT: (-1, 0),
    PlayerCommand.UP: (0, -1),
    PlayerCommand.RIGHT: (1, 0),
    PlayerCommand.DOWN: (0, 1),
}
