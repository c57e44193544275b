"""
Game Renderer
=============

Draws a FrameSnapshot onto a pygame surface. The renderer only reads the
snapshot; it never touches the simulation.

Sprites (player.png, enemy.png) are loaded from ASSET_DIR when present,
otherwise the ship and invaders are drawn as simple block shapes.
"""

import os
from typing import Optional, Tuple

import pygame

from ..config import Config
from ..game.simulation import FrameSnapshot
from ..game.state import Phase
from ..utils.logger import get_logger


logger = get_logger(__name__)


def load_sprite(path: str, size: Tuple[int, int]) -> Optional[pygame.Surface]:
    """Load and scale an image, or return None if it is missing or unreadable."""
    if not os.path.exists(path):
        return None
    try:
        image = pygame.image.load(path)
    except pygame.error as e:
        logger.warning(f"Could not load sprite {path}: {e}")
        return None
    return pygame.transform.scale(image, size)


class Renderer:
    """Draws the play field and the phase overlays."""

    def __init__(self, config: Config):
        self.config = config
        self.width = config.SCREEN_WIDTH
        self.height = config.SCREEN_HEIGHT

        # Fonts
        self._font_title = pygame.font.Font(None, 64)
        self._font_large = pygame.font.Font(None, 42)
        self._font_medium = pygame.font.Font(None, 32)
        self._font_small = pygame.font.Font(None, 22)

        self.player_sprite = load_sprite(
            os.path.join(config.ASSET_DIR, 'player.png'),
            (config.PLAYER_WIDTH, config.PLAYER_HEIGHT)
        )
        self.enemy_sprite = load_sprite(
            os.path.join(config.ASSET_DIR, 'enemy.png'),
            (config.ENEMY_WIDTH, config.ENEMY_HEIGHT)
        )

    def draw(self, surface: pygame.Surface, snapshot: FrameSnapshot) -> None:
        """Render one frame for the snapshot's phase."""
        surface.fill(self.config.COLOR_BACKGROUND)

        if snapshot.phase == Phase.QUIT:
            self._draw_quit(surface, snapshot)
        elif snapshot.phase == Phase.PAUSED:
            self._draw_lines(surface, [
                ("PAUSED", self._font_title, 0),
                ("Press P to Resume", self._font_medium, 50),
                ("Press Q to Quit", self._font_medium, 80),
            ])
        elif snapshot.phase == Phase.LEVEL_INTRO:
            self._draw_lines(surface, [
                (f"LEVEL {snapshot.level}", self._font_title, -50),
                (f"Speed: {snapshot.next_level_speed:.1f}", self._font_medium, 0),
                ("Press SPACE to Start", self._font_medium, 50),
            ])
        elif snapshot.phase == Phase.LEVEL_COMPLETE:
            self._draw_lines(surface, [
                ("LEVEL COMPLETE!", self._font_title, -25),
                ("Press SPACE for Next Level", self._font_medium, 25),
            ])
        elif snapshot.phase == Phase.GAME_OVER:
            self._draw_lines(surface, [
                ("GAME OVER", self._font_title, -25),
                (f"Final Score: {snapshot.score}", self._font_medium, 25),
                (f"High Score: {snapshot.high_score}", self._font_medium, 55),
                ("Press R to Restart", self._font_medium, 85),
            ], color=self.config.COLOR_GAME_OVER)
        else:
            self._draw_player(surface, snapshot)
            self._draw_enemies(surface, snapshot)
            self._draw_bullets(surface, snapshot)
            self._draw_stats(surface, snapshot)

    def _draw_quit(self, surface: pygame.Surface, snapshot: FrameSnapshot) -> None:
        self._draw_lines(surface, [
            ("GAME QUIT", self._font_title, -50),
            (f"Final Score: {snapshot.score}", self._font_large, 0),
            (f"Level Reached: {snapshot.level}", self._font_medium, 40),
            (f"High Score: {snapshot.high_score}", self._font_medium, 70),
            ("Press R to Restart", self._font_medium, 100),
        ])

    def _draw_lines(self, surface: pygame.Surface, lines, color=None) -> None:
        """Draw centered text lines at vertical offsets from the screen center."""
        color = color or self.config.COLOR_TEXT
        center_x = self.width // 2
        center_y = self.height // 2
        for text, font, offset in lines:
            text_surface = font.render(text, True, color)
            text_rect = text_surface.get_rect(center=(center_x, center_y + offset))
            surface.blit(text_surface, text_rect)

    def _draw_player(self, surface: pygame.Surface, snapshot: FrameSnapshot) -> None:
        x, y, w, h = (int(v) for v in snapshot.player)
        if self.player_sprite is not None:
            surface.blit(self.player_sprite, (x, y))
            return
        color = self.config.COLOR_PLAYER
        pygame.draw.rect(surface, color, (x, y, w, h))
        # Cannon
        pygame.draw.rect(surface, color, (x + 15, y - 15, 20, 15))

    def _draw_enemies(self, surface: pygame.Surface, snapshot: FrameSnapshot) -> None:
        color = self.config.COLOR_ENEMY
        for (x, y, w, h), alive in snapshot.enemies:
            if not alive:
                continue
            x, y = int(x), int(y)
            if self.enemy_sprite is not None:
                surface.blit(self.enemy_sprite, (x, y))
                continue
            pygame.draw.rect(surface, color, (x, y, w, h))
            # Antenna and legs
            pygame.draw.rect(surface, color, (x + 8, y - 8, 24, 8))
            pygame.draw.rect(surface, color, (x + 12, y + h, 16, 8))

    def _draw_bullets(self, surface: pygame.Surface, snapshot: FrameSnapshot) -> None:
        for x, y, w, h in snapshot.bullets:
            pygame.draw.rect(surface, self.config.COLOR_BULLET, (int(x), int(y), w, h))
        for x, y, w, h in snapshot.enemy_bullets:
            pygame.draw.rect(surface, self.config.COLOR_ENEMY_BULLET, (int(x), int(y), w, h))

    def _draw_stats(self, surface: pygame.Surface, snapshot: FrameSnapshot) -> None:
        lines = [
            f"Enemies: {snapshot.alive_count}",
            f"Speed: {snapshot.enemy_speed:.1f}",
            f"High Score: {snapshot.high_score}",
        ]
        for i, text in enumerate(lines):
            text_surface = self._font_small.render(text, True, self.config.COLOR_TEXT)
            surface.blit(text_surface, (10, 15 + i * 20))
