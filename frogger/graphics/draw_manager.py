"""
draw_manager.py
---------------
Centralized rendering manager for batching and layered draw calls.

Responsibilities:
- Resolve sprite ids to loaded, cached images
- Maintain layered draw queues for images and text
- Render queued items onto the target surface
"""

import os

import pygame

from frogger.core.debug.debug_logger import DebugLogger
from frogger.core.runtime.game_settings import Assets, Display, Fonts, Layers


class DrawManager:
    """Handles all rendering operations with layered batching."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, asset_root=None, placeholder_colors=None):
        """
        Args:
            asset_root: Directory sprite ids are resolved against
            placeholder_colors: {sprite_id: (r, g, b)} used when a file is missing
        """
        self.asset_root = asset_root or Assets.ROOT
        self.placeholder_colors = placeholder_colors or {}

        # Image cache
        self.images = {}

        # Layer queues
        self.surface_layers = {}  # {layer: [(surface, pos), ...]}
        self.text_layers = {}     # {layer: [(text, pos, color), ...]}
        self._layer_keys_cache = []
        self._layers_dirty = False

        self._font = None

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Image Loading
    # ===========================================================

    def load_image(self, key, path=None):
        """
        Load and cache an image.

        Args:
            key: Sprite id used as cache key
            path: File path (defaults to asset_root/key)

        Returns:
            pygame.Surface: Loaded image or placeholder
        """
        path = path or os.path.join(self.asset_root, key)

        try:
            img = pygame.image.load(path)
            if pygame.display.get_surface() is not None:
                img = img.convert_alpha()
        except (FileNotFoundError, pygame.error) as e:
            DebugLogger.warn(f"Missing image at {path} ({e}), using placeholder", category="render")
            img = self._generate_fallback(key)

        self.images[key] = img
        return img

    def get_image(self, key):
        """
        Resolve a sprite id to a drawable surface, loading it on first use.

        Args:
            key: Sprite id

        Returns:
            pygame.Surface: Always a valid surface
        """
        img = self.images.get(key)
        if img is None:
            img = self.load_image(key)
        return img

    def _generate_fallback(self, key):
        """Build a solid placeholder with the standard sprite size."""
        img = pygame.Surface(Assets.PLACEHOLDER_SIZE, pygame.SRCALPHA)
        color = tuple(self.placeholder_colors.get(key, Assets.PLACEHOLDER_COLOR))
        img.fill(color)
        return img

    # ===========================================================
    # Queue Management
    # ===========================================================

    def clear(self):
        """Clear all draw queues for new frame."""
        for layer_items in self.surface_layers.values():
            layer_items.clear()
        for layer_items in self.text_layers.values():
            layer_items.clear()

    def _ensure_layer(self, queues, layer):
        if layer not in queues:
            queues[layer] = []
            self._layers_dirty = True
        return queues[layer]

    def draw_image(self, key, pos, layer=0):
        """
        Queue a sprite for drawing at a top-left position.

        Args:
            key: Sprite id
            pos: (x, y) top-left pixel position
            layer: Render layer (lower = first)
        """
        surface = self.get_image(key)
        self._ensure_layer(self.surface_layers, layer).append(
            (surface, (int(pos[0]), int(pos[1])))
        )

    def draw_text(self, text, pos, color, layer=Layers.UI):
        """
        Queue a line of text.

        Args:
            text: String to draw
            pos: (x, y) top-left pixel position
            color: RGB tuple
            layer: Render layer
        """
        if not text:
            return
        self._ensure_layer(self.text_layers, layer).append((text, tuple(pos), tuple(color)))

    def queued_count(self) -> int:
        """Number of items waiting to be rendered."""
        images = sum(len(items) for items in self.surface_layers.values())
        texts = sum(len(items) for items in self.text_layers.values())
        return images + texts

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target_surface, debug=False):
        """
        Render all queued items to target surface.

        Args:
            target_surface: Main display surface
            debug: Log render stats if True
        """
        target_surface.fill(Display.BACKGROUND)

        if self._layers_dirty:
            all_layers = set(self.surface_layers.keys()) | set(self.text_layers.keys())
            self._layer_keys_cache = sorted(all_layers)
            self._layers_dirty = False

        for layer in self._layer_keys_cache:
            items = self.surface_layers.get(layer)
            if items:
                target_surface.blits(items)

            for text, pos, color in self.text_layers.get(layer, ()):
                rendered = self._get_font().render(text, True, color)
                target_surface.blit(rendered, pos)

        if debug:
            DebugLogger.state(f"Rendered {self.queued_count()} items", category="drawing")

    def _get_font(self):
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.SysFont(Fonts.NAME, Fonts.SIZE, bold=Fonts.BOLD)
        return self._font
