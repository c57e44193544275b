"""
Formation Generator
===================

Builds the enemy grid for a level. Row and column counts are randomized
through an injected random source so tests can seed it.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..config import Config
from .entities import Enemy


@dataclass
class Formation:
    """All enemies of the current level plus their shared movement."""
    enemies: List[Enemy] = field(default_factory=list)
    direction: int = 1  # 1 = right, -1 = left
    speed: float = 1.0

    def alive_enemies(self) -> List[Enemy]:
        return [e for e in self.enemies if e.alive]

    def alive_count(self) -> int:
        return sum(1 for e in self.enemies if e.alive)

    def all_dead(self) -> bool:
        return all(not e.alive for e in self.enemies)

    def alive_bounds(self) -> Optional[Tuple[float, float]]:
        """
        Horizontal extent of the alive enemies.

        Returns:
            (leftmost x, rightmost x + width), or None if no enemy is alive
        """
        alive = self.alive_enemies()
        if not alive:
            return None
        left = min(e.x for e in alive)
        right = max(e.x + e.width for e in alive)
        return left, right


def formation_speed(level: int, config: Config) -> float:
    """Horizontal enemy speed for a level."""
    return config.ENEMY_BASE_SPEED + (level - 1) * config.ENEMY_SPEED_PER_LEVEL


def formation_size(level: int, rng: random.Random, config: Config) -> Tuple[int, int]:
    """
    Pick the (rows, cols) of a level's grid.

    Rows grow by one every FORMATION_ROWS_LEVEL_STEP levels, plus 1-3 random
    rows, capped at FORMATION_MAX_ROWS. Columns are uniform in [8, 12].
    """
    base_rows = config.FORMATION_BASE_ROWS + level // config.FORMATION_ROWS_LEVEL_STEP
    random_rows = rng.randint(config.FORMATION_EXTRA_ROWS_MIN, config.FORMATION_EXTRA_ROWS_MAX)
    rows = min(config.FORMATION_MAX_ROWS, base_rows + random_rows)
    cols = rng.randint(config.FORMATION_MIN_COLS, config.FORMATION_MAX_COLS)
    return rows, cols


def generate_formation(level: int, rng: random.Random, config: Config) -> Formation:
    """
    Create a fresh, fully alive formation for a level.

    Args:
        level: Level number (1-based)
        rng: Random source (random.Random or compatible)
        config: Game configuration

    Returns:
        Formation moving right at the level's speed
    """
    rows, cols = formation_size(level, rng, config)

    enemies = []
    for row in range(rows):
        for col in range(cols):
            enemies.append(Enemy(
                x=col * config.ENEMY_SPACING_X + config.ENEMY_OFFSET_LEFT,
                y=row * config.ENEMY_SPACING_Y + config.ENEMY_OFFSET_TOP,
                width=config.ENEMY_WIDTH,
                height=config.ENEMY_HEIGHT,
            ))

    return Formation(enemies=enemies, direction=1, speed=formation_speed(level, config))
