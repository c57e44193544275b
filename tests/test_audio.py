"""
Tests for the synthesized sound effects.

The numpy generators are tested directly; SoundBoard is tested on its
disabled and failure paths so the suite never needs a real audio device.
"""

from unittest.mock import MagicMock, patch

import numpy as np
import pygame
import pytest

from invaders.audio import SoundBoard, tone, to_pcm, synthesize_effects
from invaders.game import GameEvent, SOUND_EVENTS


class TestToneGeneration:

    def test_length_matches_duration(self):
        wave = tone(800, 400, 0.1, 0.3, sample_rate=22050)
        assert len(wave) == int(22050 * 0.1)

    def test_amplitude_bounded_by_start_gain(self):
        wave = tone(200, 50, 0.2, 0.4, sample_rate=22050)
        assert np.max(np.abs(wave)) <= 0.4 + 1e-9

    def test_gain_decays(self):
        wave = tone(150, 150, 0.3, 0.5, sample_rate=22050)
        head = np.max(np.abs(wave[:500]))
        tail = np.max(np.abs(wave[-500:]))
        assert tail < head

    def test_effects_cover_every_sound_event(self):
        effects = synthesize_effects(22050)
        assert set(effects) == set(SOUND_EVENTS)
        assert all(len(w) > 0 for w in effects.values())


class TestPcmConversion:

    def test_stereo_int16(self):
        pcm = to_pcm(np.array([0.0, 0.5, -1.0]), channels=2)
        assert pcm.dtype == np.int16
        assert pcm.shape == (3, 2)
        assert pcm.flags['C_CONTIGUOUS']
        assert pcm[2, 0] == -32767

    def test_mono(self):
        pcm = to_pcm(np.array([0.0, 1.0]), channels=1)
        assert pcm.shape == (2,)

    def test_clipping(self):
        pcm = to_pcm(np.array([2.0, -2.0]), channels=1)
        assert list(pcm) == [32767, -32767]


class TestSoundBoard:

    def test_disabled_board_is_silent(self, config):
        board = SoundBoard(config, enabled=False)
        assert not board.enabled
        assert board.sounds == {}
        board.play(GameEvent.SHOOT)  # no-op

    def test_disabled_by_config(self, config):
        config.SOUND_ENABLED = False
        assert not SoundBoard(config).enabled

    def test_mixer_failure_disables_audio(self, config):
        with patch('pygame.mixer.init', side_effect=pygame.error("no audio device")):
            board = SoundBoard(config, enabled=True)
        assert not board.enabled
        board.play(GameEvent.PLAYER_HIT)

    def test_playback_error_ignored(self, config):
        board = SoundBoard(config, enabled=False)
        sound = MagicMock()
        sound.play.side_effect = pygame.error("channel busy")
        board.sounds[GameEvent.ENEMY_HIT] = sound
        board.play(GameEvent.ENEMY_HIT)
        sound.play.assert_called_once()

    def test_jingles_restart(self, config):
        board = SoundBoard(config, enabled=False)
        sound = MagicMock()
        board.sounds[GameEvent.LEVEL_UP] = sound
        board.play(GameEvent.LEVEL_UP)
        sound.stop.assert_called_once()
        sound.play.assert_called_once()

    def test_non_sound_event_ignored(self, config):
        board = SoundBoard(config, enabled=False)
        board.play(GameEvent.SCORE_CHANGED)
