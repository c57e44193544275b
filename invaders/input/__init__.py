"""Keyboard input mapping."""

from .keyboard import KeyBindings, KeyboardController

__all__ = ['KeyBindings', 'KeyboardController']
