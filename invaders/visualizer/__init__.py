"""
Visualization Module
====================

Components:
- Renderer: Draws the play field and phase overlays from a FrameSnapshot
- Scoreboard: Push-synced score/lives/level/high-score widgets
"""

from .renderer import Renderer
from .hud import Scoreboard

__all__ = ['Renderer', 'Scoreboard']
