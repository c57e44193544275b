"""
Tests for the visualizer module.

Tests cover:
- Scoreboard push-based sync
- Renderer drawing every phase
- Sprite fallback when assets are missing
"""

import os
from unittest.mock import patch

import numpy as np
import pytest

# Set SDL_VIDEODRIVER before importing pygame to avoid display errors in CI
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')

with patch.dict('os.environ', {'SDL_VIDEODRIVER': 'dummy'}):
    import pygame
    pygame.init()

from invaders.game import Action, Phase
from invaders.visualizer import Renderer, Scoreboard
from invaders.visualizer.renderer import load_sprite


def drawn(surface):
    """True if anything but the black background was drawn."""
    return bool(np.any(pygame.surfarray.array3d(surface)))


@pytest.fixture
def surface(config):
    return pygame.Surface((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))


@pytest.fixture
def renderer(config, tmp_path):
    config.ASSET_DIR = str(tmp_path)
    return Renderer(config)


class TestScoreboard:
    """Push-based widgets."""

    def test_initial_sync_renders_everything(self, config):
        board = Scoreboard(config)
        changed = board.sync_all(score=0, lives=3, level=1, high_score=50)
        assert changed == ['score', 'lives', 'level', 'high_score']
        assert board.render_count == 4

    def test_unchanged_values_not_rerendered(self, config):
        board = Scoreboard(config)
        board.sync_all(score=0, lives=3, level=1, high_score=0)
        assert board.sync(score=0, lives=3) == []
        assert board.render_count == 4

    def test_changed_value_rerendered(self, config):
        board = Scoreboard(config)
        board.sync_all(score=0, lives=3, level=1, high_score=0)
        assert board.sync(score=11) == ['score']
        assert board.text('score') == 'Score: 11'
        assert board.render_count == 5

    def test_unknown_widget_ignored(self, config):
        board = Scoreboard(config)
        assert board.sync(ammo=3) == []

    def test_render_draws_text(self, config, surface):
        board = Scoreboard(config)
        board.sync_all(score=123, lives=3, level=1, high_score=456)
        board.render(surface)
        assert drawn(surface)


class TestRenderer:
    """Frame drawing."""

    def test_missing_sprites_fall_back(self, renderer):
        assert renderer.player_sprite is None
        assert renderer.enemy_sprite is None

    def test_load_sprite_from_file(self, tmp_path):
        path = str(tmp_path / 'enemy.png')
        image = pygame.Surface((8, 8))
        image.fill((255, 0, 255))
        pygame.image.save(image, path)
        sprite = load_sprite(path, (40, 35))
        assert sprite is not None
        assert sprite.get_size() == (40, 35)

    @pytest.mark.parametrize("phase", list(Phase))
    def test_draws_every_phase(self, renderer, surface, playing_sim, phase):
        playing_sim.phase = phase
        renderer.draw(surface, playing_sim.snapshot())
        assert drawn(surface)

    def test_playing_draws_player_and_enemies(self, renderer, surface, playing_sim, config):
        renderer.draw(surface, playing_sim.snapshot())
        px, py = int(playing_sim.player.x), int(playing_sim.player.y)
        assert tuple(surface.get_at((px + 5, py + 5)))[:3] == config.COLOR_PLAYER
        enemy = playing_sim.formation.enemies[-1]
        assert tuple(surface.get_at((int(enemy.x) + 5, int(enemy.y) + 5)))[:3] == config.COLOR_ENEMY

    def test_dead_enemies_not_drawn(self, renderer, surface, playing_sim, config):
        enemy = playing_sim.formation.enemies[-1]
        enemy.alive = False
        renderer.draw(surface, playing_sim.snapshot())
        assert tuple(surface.get_at((int(enemy.x) + 5, int(enemy.y) + 5)))[:3] == config.COLOR_BACKGROUND

    def test_bullets_drawn(self, renderer, surface, playing_sim, config):
        playing_sim.handle_action(Action.CONFIRM)
        bullet = playing_sim.bullets[0]
        bullet.y = 400
        renderer.draw(surface, playing_sim.snapshot())
        assert tuple(surface.get_at((int(bullet.x) + 1, int(bullet.y) + 5)))[:3] == config.COLOR_BULLET

    def test_overlay_hides_field(self, renderer, surface, playing_sim, config):
        playing_sim.phase = Phase.PAUSED
        renderer.draw(surface, playing_sim.snapshot())
        px, py = int(playing_sim.player.x), int(playing_sim.player.y)
        assert tuple(surface.get_at((px + 5, py + 5)))[:3] == config.COLOR_BACKGROUND
