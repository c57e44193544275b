"""
Tests for high score persistence.

These tests verify:
    - Missing, corrupt and non-numeric files read as 0
    - Saved values survive into a new store (a new session)
    - Write failures are reported, not raised
    - The in-game high score reaches disk through the dispatcher
"""

import json
import os

import pytest

from invaders.dispatcher import EventDispatcher
from invaders.game import Simulation, Action, Phase
from invaders.game.collisions import resolve_collisions
from invaders.game.entities import Bullet
from invaders.storage import HighScoreStore


class TestHighScoreStore:
    """JSON file store."""

    def test_missing_file_reads_zero(self, tmp_path):
        store = HighScoreStore(str(tmp_path / 'none.json'))
        assert store.load() == 0

    def test_save_then_load_in_new_session(self, tmp_path):
        path = str(tmp_path / 'high_score.json')
        assert HighScoreStore(path).save(10)
        assert HighScoreStore(path).load() == 10

    def test_creates_parent_directories(self, tmp_path):
        path = str(tmp_path / 'nested' / 'dir' / 'hs.json')
        assert HighScoreStore(path).save(7)
        assert os.path.exists(path)

    def test_corrupt_file_reads_zero(self, tmp_path):
        path = tmp_path / 'hs.json'
        path.write_text('{not json')
        assert HighScoreStore(str(path)).load() == 0

    def test_non_numeric_value_reads_zero(self, tmp_path):
        path = tmp_path / 'hs.json'
        path.write_text(json.dumps({'spaceInvadersHighScore': 'lots'}))
        assert HighScoreStore(str(path)).load() == 0

    @pytest.mark.parametrize("raw", ['1e999', 'Infinity', '-Infinity', 'NaN'])
    def test_infinite_value_reads_zero(self, tmp_path, raw):
        """JSON numbers that don't fit an int read as 0 instead of crashing."""
        path = tmp_path / 'hs.json'
        path.write_text('{"spaceInvadersHighScore": %s}' % raw)
        assert HighScoreStore(str(path)).load() == 0

    def test_non_object_file_reads_zero(self, tmp_path):
        path = tmp_path / 'hs.json'
        path.write_text('[1, 2, 3]')
        assert HighScoreStore(str(path)).load() == 0

    def test_numeric_string_is_accepted(self, tmp_path):
        path = tmp_path / 'hs.json'
        path.write_text(json.dumps({'spaceInvadersHighScore': '42'}))
        assert HighScoreStore(str(path)).load() == 42

    def test_keeps_other_keys(self, tmp_path):
        path = tmp_path / 'hs.json'
        path.write_text(json.dumps({'other': 1}))
        HighScoreStore(str(path)).save(5)
        data = json.loads(path.read_text())
        assert data == {'other': 1, 'spaceInvadersHighScore': 5}

    def test_custom_key(self, tmp_path):
        path = str(tmp_path / 'hs.json')
        HighScoreStore(path, key='best').save(3)
        assert HighScoreStore(path, key='best').load() == 3
        assert HighScoreStore(path).load() == 0

    def test_write_failure_is_not_raised(self, tmp_path):
        """Saving onto a directory path fails quietly."""
        store = HighScoreStore(str(tmp_path))
        assert store.save(10) is False


class TestHighScoreFlow:
    """High score from a kill all the way to disk."""

    def test_first_points_become_persisted_high_score(self, config, quiet_rng, tmp_path):
        """Starting from 0, scoring 10 sets and persists a high score of 10."""
        config.SCORE_BASE_POINTS = 9  # 9 + level 1 = 10 points per kill
        path = str(tmp_path / 'hs.json')
        store = HighScoreStore(path)
        sim = Simulation(config, quiet_rng, high_score=store.load())
        dispatcher = EventDispatcher(store=store)

        sim.handle_action(Action.CONFIRM)
        enemy = sim.formation.enemies[0]
        sim.bullets = [Bullet(x=enemy.x + 5, y=enemy.y + 5)]
        dispatcher.dispatch(resolve_collisions(sim), sim.snapshot())

        assert sim.run.score == 10
        assert sim.run.high_score == 10
        assert HighScoreStore(path).load() == 10

    def test_restart_keeps_high_score(self, config, quiet_rng):
        sim = Simulation(config, quiet_rng, high_score=80)
        sim.phase = Phase.GAME_OVER
        sim.handle_action(Action.RESTART)
        assert sim.run.high_score == 80
