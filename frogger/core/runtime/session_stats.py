"""
session_stats.py
----------------
Tracks statistics for the current game run.
Separated from entity management and scene state.
"""

from frogger.core.debug.debug_logger import DebugLogger
from frogger.core.services.event_manager import (
    GameStartedEvent,
    GameOverEvent,
    EnemyCollisionEvent,
    WaterReachedEvent,
    GemCollectedEvent,
)


# ===========================================================
# Session Stats
# ===========================================================

class SessionStats:
    """Container for run-specific statistics. Reset when a new game starts."""

    def __init__(self):
        self.score = 0
        self.high_score = 0
        self.crossings = 0
        self.gems_collected = 0
        self.collisions = 0
        self.games_played = 0

    # ===========================================================
    # Event Wiring
    # ===========================================================

    def subscribe(self, events):
        """Listen to scoring and lifecycle events."""
        events.subscribe(GameStartedEvent, self._on_game_started)
        events.subscribe(GameOverEvent, self._on_game_over)
        events.subscribe(EnemyCollisionEvent, self._on_collision)
        events.subscribe(WaterReachedEvent, self._on_water_reached)
        events.subscribe(GemCollectedEvent, self._on_gem_collected)

    def _on_game_started(self, event):
        self.reset()
        self.games_played += 1

    def _on_game_over(self, event):
        self.set_score(event.score)
        DebugLogger.state(
            f"Run finished: crossings={self.crossings} gems={self.gems_collected} "
            f"collisions={self.collisions} best={self.high_score}",
            category="score"
        )

    def _on_collision(self, event):
        self.collisions += 1
        self.set_score(event.score)

    def _on_water_reached(self, event):
        if event.scored:
            self.crossings += 1
        self.set_score(event.score)

    def _on_gem_collected(self, event):
        self.gems_collected += 1
        self.set_score(event.score)

    # ===========================================================
    # Core Stats
    # ===========================================================

    def set_score(self, score: int):
        """Record the current score and update high score."""
        self.score = score
        if score > self.high_score:
            self.high_score = score

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self):
        """Reset all stats for a new run. Preserves high score and games played."""
        self.score = 0
        self.crossings = 0
        self.gems_collected = 0
        self.collisions = 0

    def full_reset(self):
        """Reset everything including high score."""
        self.reset()
        self.high_score = 0
        self.games_played = 0
