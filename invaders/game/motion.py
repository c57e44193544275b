"""
Motion Update
=============

Per-tick movement of the ship, both bullet streams and the enemy formation,
plus the formation's return fire.
"""

import random
from typing import List, Optional, Tuple

from ..config import Config
from .entities import Player, Bullet, EnemyBullet
from .formation import Formation
from .state import InputState


def move_player(player: Player, inputs: InputState, field_width: int) -> None:
    """Move the ship by its speed for each held direction, clamped to the field."""
    if inputs.left and player.x > 0:
        player.x = max(0, player.x - player.speed)
    if inputs.right and player.x < field_width - player.width:
        player.x = min(field_width - player.width, player.x + player.speed)


def advance_bullets(
    bullets: List[Bullet],
    enemy_bullets: List[EnemyBullet],
    config: Config
) -> Tuple[List[Bullet], List[EnemyBullet]]:
    """
    Move both bullet streams and drop the ones that left the field.

    Returns:
        (surviving player bullets, surviving enemy bullets)
    """
    for bullet in bullets:
        bullet.y -= config.BULLET_SPEED
    for bullet in enemy_bullets:
        bullet.y += config.ENEMY_BULLET_SPEED

    bullets = [b for b in bullets if b.y > 0]
    enemy_bullets = [b for b in enemy_bullets if b.y < config.SCREEN_HEIGHT]
    return bullets, enemy_bullets


def advance_formation(formation: Formation, config: Config) -> bool:
    """
    Step the formation sideways, or bounce it off a field edge.

    Only alive enemies count toward the edge test and only alive
    enemies move. A bounce flips the direction and drops the formation
    without any horizontal step that tick.

    Returns:
        True if the formation bounced this tick
    """
    bounds = formation.alive_bounds()
    if bounds is None:
        return False

    left, right = bounds
    hit_edge = (
        (formation.direction == 1 and right >= config.SCREEN_WIDTH - config.EDGE_MARGIN)
        or (formation.direction == -1 and left <= config.EDGE_MARGIN)
    )

    if hit_edge:
        formation.direction *= -1
        for enemy in formation.enemies:
            if enemy.alive:
                enemy.y += config.ENEMY_DROP
    else:
        step = formation.direction * formation.speed
        for enemy in formation.enemies:
            if enemy.alive:
                enemy.x += step

    return hit_edge


def enemy_shoot_chance(level: int, config: Config) -> float:
    return config.ENEMY_SHOOT_BASE + level * config.ENEMY_SHOOT_PER_LEVEL


def maybe_enemy_fire(
    formation: Formation,
    level: int,
    rng: random.Random,
    config: Config
) -> Optional[EnemyBullet]:
    """
    Roll for enemy fire. At most one bullet per tick, from a random
    alive enemy's bottom-center.
    """
    if rng.random() >= enemy_shoot_chance(level, config):
        return None

    alive = formation.alive_enemies()
    if not alive:
        return None

    shooter = alive[rng.randrange(len(alive))]
    return EnemyBullet(
        x=shooter.x + shooter.width / 2,
        y=shooter.y + shooter.height,
        width=config.BULLET_WIDTH,
        height=config.BULLET_HEIGHT,
    )
