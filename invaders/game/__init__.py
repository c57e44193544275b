"""
Game Module
===========

The simulation core: pure game logic with no rendering, audio or I/O.

Classes:
    Simulation - Owns run state and runs the per-tick pipeline
    Formation - Enemy grid with shared direction/speed
    Autopilot - Scripted player for headless runs
"""

from .entities import Player, Bullet, EnemyBullet, Enemy
from .events import GameEvent, SOUND_EVENTS
from .formation import Formation, generate_formation, formation_speed
from .state import Phase, Action, InputState, RunState
from .simulation import Simulation, FrameSnapshot
from .autopilot import Autopilot


__all__ = [
    # Entities
    'Player',
    'Bullet',
    'EnemyBullet',
    'Enemy',
    # Events
    'GameEvent',
    'SOUND_EVENTS',
    # Formation
    'Formation',
    'generate_formation',
    'formation_speed',
    # State machine
    'Phase',
    'Action',
    'InputState',
    'RunState',
    'Simulation',
    'FrameSnapshot',
    'Autopilot',
]
