"""Persistence for the single high score value."""

from .high_score import HighScoreStore

__all__ = ['HighScoreStore']
