"""
Scoreboard HUD
==============

Push-based score/lives/level/high-score widgets. Values are synced from
dispatched events; text is only re-rendered for values that changed.
"""

from typing import Dict, List, Optional

import pygame

from ..config import Config


class Scoreboard:
    """
    On-screen score widgets drawn in the top-right corner.

    Displays:
    - Score
    - Lives
    - Level
    - High score
    """

    FIELDS = ('score', 'lives', 'level', 'high_score')
    LABELS = {
        'score': 'Score',
        'lives': 'Lives',
        'level': 'Level',
        'high_score': 'Best',
    }

    def __init__(self, config: Config, font: Optional[pygame.font.Font] = None):
        """
        Args:
            config: Configuration object (colors, screen size)
            font: Font override (defaults to pygame's built-in font)
        """
        self.config = config
        self._font = font or pygame.font.Font(None, 24)
        self.text_color = config.COLOR_TEXT

        self.values: Dict[str, Optional[int]] = {name: None for name in self.FIELDS}
        self._surfaces: Dict[str, pygame.Surface] = {}
        self.render_count = 0

    def sync(self, **values: int) -> List[str]:
        """
        Push new values into the widgets.

        Unknown names are ignored. Unchanged values are not re-rendered.

        Returns:
            Names of the widgets that changed
        """
        changed = []
        for name, value in values.items():
            if name not in self.values or self.values[name] == value:
                continue
            self.values[name] = value
            self._surfaces[name] = self._font.render(
                f"{self.LABELS[name]}: {value}", True, self.text_color
            )
            self.render_count += 1
            changed.append(name)
        return changed

    def sync_all(self, score: int, lives: int, level: int, high_score: int) -> List[str]:
        """Push every value at once (startup and restart)."""
        return self.sync(score=score, lives=lives, level=level, high_score=high_score)

    def text(self, name: str) -> str:
        """Current widget text, e.g. 'Score: 120'."""
        return f"{self.LABELS[name]}: {self.values[name]}"

    def render(self, surface: pygame.Surface) -> None:
        """Draw the widgets right-aligned along the top edge."""
        x = surface.get_width() - 10
        y = 10
        for name in self.FIELDS:
            text_surface = self._surfaces.get(name)
            if text_surface is None:
                continue
            surface.blit(text_surface, (x - text_surface.get_width(), y))
            y += text_surface.get_height() + 4
