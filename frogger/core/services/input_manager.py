"""
input_manager.py
----------------
Maps raw keyboard events to the player's logical commands.

Provides:
- Default key bindings (arrows, 'p' to pick a character, 's' to start)
- Exactly one command per key release
"""

import pygame

from frogger.core.debug.debug_logger import DebugLogger
from frogger.entities.player.player_state import PlayerCommand


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    PlayerCommand.LEFT: [pygame.K_LEFT],
    PlayerCommand.UP: [pygame.K_UP],
    PlayerCommand.RIGHT: [pygame.K_RIGHT],
    PlayerCommand.DOWN: [pygame.K_DOWN],
    PlayerCommand.SELECT_CHARACTER: [pygame.K_p],
    PlayerCommand.START: [pygame.K_s],
}


class InputManager:
    """
    Translates pygame KEYUP events into PlayerCommand values.

    Usage:
        command = input_manager.command_for(event)
        player.handle_input(command, session)
    """

    def __init__(self, key_bindings=None):
        """
        Args:
            key_bindings: {PlayerCommand: [key codes]} (uses DEFAULT_KEY_BINDINGS if None)
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._key_to_command = {}

        for command, keys in self.key_bindings.items():
            for key in keys:
                if key in self._key_to_command:
                    DebugLogger.warn(f"Key {key} bound twice, keeping {self._key_to_command[key].name}")
                    continue
                self._key_to_command[key] = command

        DebugLogger.init_entry("InputManager")

    def command_for_key(self, key):
        """Look up the command bound to a key code, or None."""
        return self._key_to_command.get(key)

    def command_for(self, event):
        """
        Map a pygame event to a command.

        Only key releases produce commands, so holding a key moves once.

        Returns:
            PlayerCommand or None
        """
        if event.type != pygame.KEYUP:
            return None

        command = self.command_for_key(event.key)
        if command is not None:
            DebugLogger.trace(f"Key {event.key} -> {command.name}", category="input")
        return command
