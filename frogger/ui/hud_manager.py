"""
hud_manager.py
--------------
Status line shown under the board: event messages, score and prompts.

The HUD is cleared at the start of every scoring pass and refilled by the
player's event handling, so it always reflects the latest frame.
"""

from frogger.core.debug.debug_logger import DebugLogger
from frogger.core.runtime.game_settings import Layers
from frogger.core.services.config_manager import load_config


DEFAULT_CONFIG = {
    "color": [128, 0, 128],
    "message_pos": [0, 586],
    "score_pos": [200, 586],
    "messages": {
        "collision": "Yikes! Collision",
        "water": "I love the lake!",
        "score": "Score: {score}",
        "game_over": "Game Over. Press 's' to restart, 'p' to select another player.",
        "start": "Press 'p' to select a player. Then 's' to start the game.",
    },
}


class HudManager:
    """Holds the text lines for the current frame and queues them for drawing."""

    def __init__(self, cfg=None):
        cfg = cfg if cfg is not None else load_config("hud.json", DEFAULT_CONFIG)

        self.color = tuple(cfg["color"])
        self.message_pos = tuple(cfg["message_pos"])
        self.score_pos = tuple(cfg["score_pos"])
        self.messages = dict(cfg["messages"])

        self.message = None
        self.score_text = None

        DebugLogger.init_entry("HudManager")

    # ===========================================================
    # Content
    # ===========================================================

    def clear(self):
        """Drop every line shown last frame."""
        self.message = None
        self.score_text = None

    def show_message(self, key: str):
        """Show one of the configured event messages ('collision', 'water', ...)."""
        self.message = self.messages.get(key, key)
        DebugLogger.trace(f"HUD message: {self.message}", category="ui")

    def show_prompt(self, key: str):
        """Show a start or game-over prompt in the message slot."""
        self.show_message(key)

    def show_score(self, score: int):
        self.score_text = self.messages["score"].format(score=score)

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, draw_manager):
        """Queue the current lines on the UI layer."""
        if self.message:
            draw_manager.draw_text(self.message, self.message_pos, self.color, Layers.UI)
        if self.score_text:
            draw_manager.draw_text(self.score_text, self.score_pos, self.color, Layers.UI)
