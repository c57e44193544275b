"""Synthesized sound effects."""

from .sounds import SoundBoard, tone, to_pcm, synthesize_effects

__all__ = ['SoundBoard', 'tone', 'to_pcm', 'synthesize_effects']
