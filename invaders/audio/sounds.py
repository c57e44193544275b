"""
Sound Effects
=============

Retro tones synthesized with numpy and played through pygame.mixer.
The game over and level up jingles load from ASSET_DIR when the mp3s
are present and fall back to synthesized arpeggios otherwise.

Audio is strictly fire-and-forget: a missing device or a playback error
disables or skips the sound, it never stops the game.
"""

import os
from typing import Dict, List, Optional

import numpy as np
import pygame

from ..config import Config
from ..game.events import GameEvent
from ..utils.logger import get_logger


logger = get_logger(__name__)


def tone(
    start_freq: float,
    end_freq: float,
    duration: float,
    start_gain: float,
    end_gain: float = 0.01,
    sample_rate: int = 22050
) -> np.ndarray:
    """
    Sine tone with exponential pitch and gain ramps.

    Args:
        start_freq: Frequency at t=0 (Hz)
        end_freq: Frequency at t=duration (Hz)
        duration: Length in seconds
        start_gain: Amplitude at t=0
        end_gain: Amplitude at t=duration (must be > 0 for an exponential ramp)
        sample_rate: Samples per second

    Returns:
        Float waveform in [-1, 1]
    """
    n = max(1, int(sample_rate * duration))
    progress = np.linspace(0.0, 1.0, n, endpoint=False)
    freq = start_freq * (end_freq / start_freq) ** progress
    gain = start_gain * (end_gain / start_gain) ** progress
    # Integrate frequency so the sweep has no phase jumps
    phase = 2 * np.pi * np.cumsum(freq) / sample_rate
    return gain * np.sin(phase)


def arpeggio(notes: List[float], note_length: float, gain: float, sample_rate: int) -> np.ndarray:
    """Chain short decaying tones into a jingle."""
    return np.concatenate([
        tone(f, f, note_length, gain, 0.05, sample_rate) for f in notes
    ])


def to_pcm(wave: np.ndarray, channels: int = 2) -> np.ndarray:
    """Convert a float waveform to int16 samples, duplicated per channel."""
    samples = np.clip(wave * 32767, -32767, 32767).astype(np.int16)
    if channels == 1:
        return samples
    return np.ascontiguousarray(np.column_stack([samples] * channels))


def synthesize_effects(sample_rate: int) -> Dict[GameEvent, np.ndarray]:
    """Waveforms for every sound event."""
    return {
        GameEvent.SHOOT: tone(800, 400, 0.1, 0.3, sample_rate=sample_rate),
        GameEvent.ENEMY_HIT: tone(200, 50, 0.2, 0.4, sample_rate=sample_rate),
        GameEvent.PLAYER_HIT: tone(150, 150, 0.3, 0.5, sample_rate=sample_rate),
        GameEvent.GAME_OVER: arpeggio([392, 330, 262, 196], 0.18, 0.4, sample_rate),
        GameEvent.LEVEL_UP: arpeggio([523, 659, 784, 1047], 0.1, 0.35, sample_rate),
    }


# Jingles that can be replaced by audio files in ASSET_DIR
ASSET_FILES = {
    GameEvent.GAME_OVER: 'gameover.mp3',
    GameEvent.LEVEL_UP: 'levelup.mp3',
}


class SoundBoard:
    """Maps sound events to pygame Sounds."""

    def __init__(self, config: Config, enabled: Optional[bool] = None):
        """
        Initialize the mixer and build every sound.

        Args:
            config: Configuration (sample rate, volume, asset dir)
            enabled: Override config.SOUND_ENABLED
        """
        self.config = config
        self.enabled = config.SOUND_ENABLED if enabled is None else enabled
        self.sounds: Dict[GameEvent, pygame.mixer.Sound] = {}

        if not self.enabled:
            return

        try:
            pygame.mixer.init(
                frequency=config.SOUND_SAMPLE_RATE, size=-16, channels=2, buffer=512
            )
            self._build_sounds()
        except pygame.error as e:
            logger.warning(f"Audio unavailable, continuing without sound: {e}")
            self.enabled = False
            self.sounds = {}

    def _build_sounds(self) -> None:
        init = pygame.mixer.get_init()
        if init is None:
            raise pygame.error("mixer not initialized")
        sample_rate, _, channels = init

        for event, wave in synthesize_effects(sample_rate).items():
            sound = self._load_asset(event) or pygame.sndarray.make_sound(to_pcm(wave, channels))
            sound.set_volume(self.config.SOUND_VOLUME)
            self.sounds[event] = sound

    def _load_asset(self, event: GameEvent) -> Optional[pygame.mixer.Sound]:
        filename = ASSET_FILES.get(event)
        if filename is None:
            return None
        path = os.path.join(self.config.ASSET_DIR, filename)
        if not os.path.exists(path):
            return None
        try:
            return pygame.mixer.Sound(path)
        except pygame.error as e:
            logger.warning(f"Could not load {path}, using synthesized sound: {e}")
            return None

    def play(self, event: GameEvent) -> None:
        """Play the sound for an event. Unknown events and errors are ignored."""
        sound = self.sounds.get(event)
        if sound is None:
            return
        try:
            if event in ASSET_FILES:
                # Jingles restart from the beginning instead of overlapping
                sound.stop()
            sound.play()
        except pygame.error as e:
            logger.debug(f"Playback of {event.name} failed: {e}")

    def close(self) -> None:
        if self.enabled:
            pygame.mixer.quit()
            self.enabled = False
