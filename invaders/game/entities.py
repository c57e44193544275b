"""
Entity Model
============

Plain data records for everything that moves on the play field.
Collision shapes are axis-aligned rectangles (x, y, width, height)
with (x, y) at the top-left corner.
"""

from dataclasses import dataclass
from typing import Tuple

from ..config import Config


Rect = Tuple[float, float, float, float]


@dataclass
class Player:
    """The player's ship. One instance lives for the whole process."""
    x: float
    y: float
    width: int = 50
    height: int = 40
    speed: int = 5


@dataclass
class Bullet:
    """A player-fired projectile travelling upward."""
    x: float
    y: float
    width: int = 3
    height: int = 10


@dataclass
class EnemyBullet(Bullet):
    """A projectile fired downward by an enemy."""


@dataclass
class Enemy:
    """
    One invader in the formation.

    Dead enemies stay in the formation with alive=False so the
    grid keeps its indices.
    """
    x: float
    y: float
    width: int = 40
    height: int = 35
    alive: bool = True


def rect_of(entity) -> Rect:
    """Return the (x, y, width, height) rectangle of any entity."""
    return (entity.x, entity.y, entity.width, entity.height)


def make_player(config: Config) -> Player:
    """Create a ship centered at the bottom of the field."""
    return Player(
        x=config.PLAYER_START_X,
        y=config.PLAYER_Y,
        width=config.PLAYER_WIDTH,
        height=config.PLAYER_HEIGHT,
        speed=config.PLAYER_SPEED,
    )
