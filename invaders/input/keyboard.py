"""
Keyboard Controls
=================

Translates pygame key events into held movement state and edge-triggered
actions. Keys without a binding are ignored.
"""

from dataclasses import dataclass
from typing import Optional

import pygame

from ..game.state import Action, InputState


@dataclass
class KeyBindings:
    """pygame key codes for every control."""
    left: int = pygame.K_LEFT
    right: int = pygame.K_RIGHT
    confirm: int = pygame.K_SPACE
    pause: int = pygame.K_p
    quit: int = pygame.K_q
    restart: int = pygame.K_r


class KeyboardController:
    """Tracks held keys and reports actions from a pygame event stream."""

    def __init__(self, bindings: Optional[KeyBindings] = None):
        self.bindings = bindings or KeyBindings()
        self.inputs = InputState()
        self._actions = {
            self.bindings.confirm: Action.CONFIRM,
            self.bindings.pause: Action.PAUSE,
            self.bindings.quit: Action.QUIT,
            self.bindings.restart: Action.RESTART,
        }

    def handle_event(self, event: pygame.event.Event) -> Optional[Action]:
        """
        Update held state and return the action for a key press, if any.

        Args:
            event: A pygame event (non-key events are ignored)

        Returns:
            The bound Action on KEYDOWN, else None
        """
        if event.type == pygame.KEYDOWN:
            self._set_held(event.key, True)
            return self._actions.get(event.key)
        if event.type == pygame.KEYUP:
            self._set_held(event.key, False)
        return None

    def _set_held(self, key: int, held: bool) -> None:
        if key == self.bindings.left:
            self.inputs.left = held
        elif key == self.bindings.right:
            self.inputs.right = held

    def release_all(self) -> None:
        """Forget held keys (e.g. when the window loses focus)."""
        self.inputs = InputState()
