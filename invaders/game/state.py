"""
Phase, input and run-state types shared by the simulation and its shell.
"""

from dataclasses import dataclass
from enum import Enum, auto


class Phase(Enum):
    """Game phase state machine."""
    LEVEL_INTRO = auto()
    PLAYING = auto()
    PAUSED = auto()
    LEVEL_COMPLETE = auto()
    GAME_OVER = auto()
    QUIT = auto()


class Action(Enum):
    """Edge-triggered player actions."""
    CONFIRM = auto()  # Fire while playing, start/advance otherwise
    PAUSE = auto()
    QUIT = auto()
    RESTART = auto()


@dataclass
class InputState:
    """Held movement keys, sampled once per tick."""
    left: bool = False
    right: bool = False


@dataclass
class RunState:
    """Score, lives and level for the current run plus the persisted best."""
    score: int = 0
    lives: int = 3
    level: int = 1
    high_score: int = 0
