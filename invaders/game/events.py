"""
Outcome events produced by the simulation.

The core never plays sounds, touches widgets or writes files. It returns
a list of these events per action/tick and the dispatcher maps them to
collaborators.
"""

from enum import Enum, auto
from typing import FrozenSet


class GameEvent(Enum):
    """Discrete outcomes emitted by the simulation."""
    # Sound events
    SHOOT = auto()
    ENEMY_HIT = auto()
    PLAYER_HIT = auto()
    GAME_OVER = auto()
    LEVEL_UP = auto()
    # Widget / persistence sync
    SCORE_CHANGED = auto()
    LIVES_CHANGED = auto()
    LEVEL_CHANGED = auto()
    HIGH_SCORE_CHANGED = auto()


SOUND_EVENTS: FrozenSet[GameEvent] = frozenset({
    GameEvent.SHOOT,
    GameEvent.ENEMY_HIT,
    GameEvent.PLAYER_HIT,
    GameEvent.GAME_OVER,
    GameEvent.LEVEL_UP,
})
