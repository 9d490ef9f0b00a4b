"""
Core services exports.

Provides the event system and configuration loading.
"""

from frogger.core.services.config_manager import load_config
from frogger.core.services.event_manager import (
    get_events,
    EventManager,
    BaseEvent,
    GameStartedEvent,
    GameOverEvent,
    EnemyCollisionEvent,
    WaterReachedEvent,
    GemCollectedEvent,
)

__all__ = [
    # Config
    'load_config',
    # Events
    'get_events',
    'EventManager',
    'BaseEvent',
    'GameStartedEvent',
    'GameOverEvent',
    'EnemyCollisionEvent',
    'WaterReachedEvent',
    'GemCollectedEvent',
]
