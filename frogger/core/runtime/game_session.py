"""
game_session.py
---------------
Holds the phase of the current game and the transitions between phases.

The session is passed explicitly to every update and input call so that
entities never read a module-level flag.
"""

from enum import Enum

from frogger.core.debug.debug_logger import DebugLogger
from frogger.core.services.event_manager import GameStartedEvent, GameOverEvent


class GamePhase(Enum):
    """Lifecycle of a single play session."""
    NOT_STARTED = "not_started"
    RUNNING = "running"
    GAME_OVER = "game_over"


class GameSession:
    """Owns the game phase. Entities only move while the phase is RUNNING."""

    __slots__ = ('phase', 'events')

    def __init__(self, events=None):
        self.phase = GamePhase.NOT_STARTED
        self.events = events

    @property
    def is_running(self) -> bool:
        return self.phase is GamePhase.RUNNING

    def start(self):
        """Enter RUNNING from any phase. Restarting while running is allowed."""
        previous = self.phase
        self.phase = GamePhase.RUNNING
        DebugLogger.state(f"Game {previous.name} -> RUNNING", category="game_state")
        if self.events is not None:
            self.events.dispatch(GameStartedEvent())

    def end(self, score: int):
        """Enter GAME_OVER. Repeated calls are ignored."""
        if self.phase is GamePhase.GAME_OVER:
            return
        self.phase = GamePhase.GAME_OVER
        DebugLogger.state(f"Game over with score {score}", category="game_state")
        if self.events is not None:
            self.events.dispatch(GameOverEvent(score=score))

    def __repr__(self) -> str:
        return f"<GameSession phase={self.phase.name}>"
