"""
Collision & Outcome Resolver
============================

Runs right after the motion update while playing. Resolves bullet hits,
applies score and damage, and decides whether the tick ended the level
or the game.

Precedence: game over wins. A tick that ends the game never also
reports a level clear.
"""

from typing import List, TYPE_CHECKING

from .events import GameEvent
from .state import Phase, RunState
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from .simulation import Simulation


logger = get_logger(__name__)


def rects_overlap(
    ax: float, ay: float, aw: float, ah: float,
    bx: float, by: float, bw: float, bh: float
) -> bool:
    """Strict axis-aligned overlap; rectangles that only touch do not collide."""
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def update_high_score(run: RunState, events: List[GameEvent]) -> None:
    """Raise the high score to the current score if it was beaten."""
    if run.score > run.high_score:
        run.high_score = run.score
        events.append(GameEvent.HIGH_SCORE_CHANGED)


def _end_game(sim: 'Simulation', events: List[GameEvent], reason: str) -> None:
    if sim.phase == Phase.GAME_OVER:
        return
    sim.phase = Phase.GAME_OVER
    update_high_score(sim.run, events)
    events.append(GameEvent.GAME_OVER)
    logger.info(f"Game over ({reason}) at level {sim.run.level}, score {sim.run.score}")


def resolve_player_bullets(sim: 'Simulation', events: List[GameEvent]) -> None:
    """Each bullet kills at most the first alive enemy it overlaps."""
    run = sim.run
    surviving = []
    for bullet in sim.bullets:
        hit = False
        for enemy in sim.formation.enemies:
            if not enemy.alive:
                continue
            if rects_overlap(bullet.x, bullet.y, bullet.width, bullet.height,
                             enemy.x, enemy.y, enemy.width, enemy.height):
                enemy.alive = False
                run.score += sim.config.SCORE_BASE_POINTS + run.level
                events.append(GameEvent.ENEMY_HIT)
                events.append(GameEvent.SCORE_CHANGED)
                update_high_score(run, events)
                hit = True
                break
        if not hit:
            surviving.append(bullet)
    sim.bullets = surviving


def resolve_enemy_bullets(sim: 'Simulation', events: List[GameEvent]) -> None:
    """Enemy bullets cost a life each; the last life ends the game."""
    run = sim.run
    player = sim.player
    surviving = []
    for bullet in sim.enemy_bullets:
        if run.lives > 0 and rects_overlap(
            bullet.x, bullet.y, bullet.width, bullet.height,
            player.x, player.y, player.width, player.height
        ):
            run.lives -= 1
            events.append(GameEvent.PLAYER_HIT)
            events.append(GameEvent.LIVES_CHANGED)
            if run.lives == 0:
                _end_game(sim, events, 'no lives left')
            continue
        surviving.append(bullet)
    sim.enemy_bullets = surviving


def check_breach(sim: 'Simulation', events: List[GameEvent]) -> None:
    """Any alive enemy reaching the ship's row ends the game outright."""
    player_top = sim.player.y
    for enemy in sim.formation.enemies:
        if enemy.alive and enemy.y + enemy.height >= player_top:
            _end_game(sim, events, 'formation breached')
            return


def check_level_clear(sim: 'Simulation', events: List[GameEvent]) -> None:
    if sim.phase != Phase.PLAYING:
        return
    if sim.formation.all_dead():
        sim.phase = Phase.LEVEL_COMPLETE
        events.append(GameEvent.LEVEL_UP)
        logger.info(f"Level {sim.run.level} cleared, score {sim.run.score}")


def resolve_collisions(sim: 'Simulation') -> List[GameEvent]:
    """
    Resolve one tick of collisions and outcome checks.

    Args:
        sim: Simulation context, mutated in place

    Returns:
        Events produced this tick, in the order they happened
    """
    events: List[GameEvent] = []
    resolve_player_bullets(sim, events)
    resolve_enemy_bullets(sim, events)
    check_breach(sim, events)
    check_level_clear(sim, events)
    return events
