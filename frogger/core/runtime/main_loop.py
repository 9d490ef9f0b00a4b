"""
main_loop.py
------------
Core game loop orchestrating timing, events, updates, and rendering.

Responsibilities:
- Initialize pygame and the window
- Drain input events between frames
- Run one scene update per frame with elapsed time in seconds
- Render the queued frame
"""

import pygame

from frogger.core.debug.debug_logger import DebugLogger
from frogger.core.runtime.game_settings import Display, Physics
from frogger.core.services.config_manager import load_config
from frogger.graphics.draw_manager import DrawManager
from frogger.scenes.game_scene import GameScene


class MainLoop:
    """Runtime controller: one update and one render per frame."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, asset_root=None, rng=None):
        """
        Args:
            asset_root: Directory holding the images/ folder
            rng: Optional random source for reproducible runs
        """
        DebugLogger.section("Initializing MainLoop")

        self._init_pygame()

        board_cfg = load_config("board.json", {"placeholder_colors": {}})
        self.draw_manager = DrawManager(
            asset_root=asset_root,
            placeholder_colors=board_cfg["placeholder_colors"]
        )
        self.scene = GameScene(self.draw_manager, rng=rng)

        self.clock = pygame.time.Clock()
        self.running = True

        DebugLogger.init_entry("Main Loop Runtime")
        DebugLogger.init_sub("Game Clock Initialized", level=1)

    def _init_pygame(self):
        """Initialize pygame subsystems and window."""
        pygame.init()
        pygame.font.init()

        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))
        pygame.display.set_caption(Display.CAPTION)

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {Display.WIDTH}x{Display.HEIGHT}")

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Execute main game loop until quit."""
        DebugLogger.section("Game Loop")

        while self.running:
            dt = self.clock.tick(Display.FPS) / 1000.0
            dt = min(dt, Physics.MAX_FRAME_TIME)

            self._handle_events()
            if not self.running:
                break

            self.scene.update(dt)
            self._draw()

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

            self.scene.handle_event(event)

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        self.draw_manager.clear()
        self.scene.draw(self.draw_manager)
        self.draw_manager.render(self.screen)
        pygame.display.flip()
