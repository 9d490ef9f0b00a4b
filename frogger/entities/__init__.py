"""
frogger/entities/__init__.py
----------------------------
Entity module exports.

Exports:
    EntityBody - Shared position/size/sprite value embedded in every entity
    EnemyBug   - Lane-crawling enemy
    Gem        - Periodically revealed collectible
    Player     - Controllable player
"""

from frogger.entities.entity_body import EntityBody
from frogger.entities.enemies.enemy_bug import EnemyBug
from frogger.entities.items.gem import Gem
from frogger.entities.player.player_core import Player

__all__ = [
    'EntityBody',
    'EnemyBug',
    'Gem',
    'Player',
]
