"""
entity_body.py
--------------
Shared spatial state embedded in every game entity (player, bug, gem).

Coordinate System
-----------------
Bodies use top-left coordinates, matching how sprites are blitted:
- pos is the sprite's top-left corner on the board
- width/height describe the collision body and never change
"""

import pygame


class EntityBody:
    """Position, fixed size and sprite id of a drawable entity."""

    __slots__ = ('pos', '_size', 'sprite')

    def __init__(self, x: float, y: float, width: int, height: int, sprite: str):
        """
        Args:
            x, y: Top-left position in pixels
            width, height: Collision body size in pixels
            sprite: Asset id resolved by the DrawManager
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"EntityBody size must be positive, got ({width}, {height})")

        self.pos = pygame.Vector2(x, y)
        self._size = (width, height)
        self.sprite = sprite

    # ===================================================================
    # Properties
    # ===================================================================

    @property
    def x(self) -> float:
        return self.pos.x

    @x.setter
    def x(self, value: float):
        self.pos.x = value

    @property
    def y(self) -> float:
        return self.pos.y

    @y.setter
    def y(self, value: float):
        self.pos.y = value

    @property
    def width(self) -> int:
        return self._size[0]

    @property
    def height(self) -> int:
        return self._size[1]

    @property
    def size(self) -> tuple:
        return self._size

    def move_to(self, x: float, y: float):
        self.pos.update(x, y)

    # ===================================================================
    # Rendering
    # ===================================================================

    def render(self, draw_manager, layer: int):
        """Queue the current sprite at the current position."""
        draw_manager.draw_image(self.sprite, (self.pos.x, self.pos.y), layer)

    def __repr__(self) -> str:
        return (
            f"<EntityBody pos=({self.pos.x:.1f}, {self.pos.y:.1f}) "
            f"size={self._size} sprite={self.sprite}>"
        )
