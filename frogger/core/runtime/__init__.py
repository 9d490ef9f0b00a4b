"""
Runtime configuration exports.

Provides game-wide constants, the game session and run statistics.
"""

from frogger.core.runtime.game_settings import (
    Board,
    Offsets,
    Display,
    Fonts,
    Physics,
    Assets,
    Layers,
)
from frogger.core.runtime.game_session import GamePhase, GameSession
from frogger.core.runtime.session_stats import SessionStats

__all__ = [
    # Geometry
    'Board',
    'Offsets',
    # Display & Rendering
    'Display',
    'Fonts',
    'Assets',
    'Layers',
    'Physics',
    # Session
    'GamePhase',
    'GameSession',
    'SessionStats',
]
