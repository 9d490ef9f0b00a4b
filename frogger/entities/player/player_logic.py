"""
player_logic.py
---------------
Row-based collision tests between the player and other bodies.

Two bodies collide when their row-adjusted y values are exactly equal and
either horizontal edge of the player falls inside the other body's span.
"""

from frogger.core.runtime.game_settings import Offsets


def same_row(player_body, other_body, other_row_offset: int) -> bool:
    """True when both bodies sit in the same board row."""
    return other_body.y + other_row_offset == player_body.y + Offsets.PLAYER_ROW


def spans_overlap(player_body, other_body) -> bool:
    """True when the player's leading or trailing edge lies within the other body."""
    leading = player_body.x + Offsets.PLAYER_LEAD
    trailing = leading + player_body.width
    left = other_body.x
    right = other_body.x + other_body.width

    return left <= leading <= right or left <= trailing <= right


def row_collision(player_body, other_body, other_row_offset: int) -> bool:
    """Combined row match and horizontal overlap test."""
    return (
        same_row(player_body, other_body, other_row_offset)
        and spans_overlap(player_body, other_body)
    )
