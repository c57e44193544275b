"""
Simulation Context & Phase Controller
=====================================

Single owner of all mutable run state. External input arrives as
actions (edge-triggered) and an InputState (held keys, sampled per tick).
Every call returns the GameEvents it produced; the caller hands them to
a dispatcher for sound, widgets and persistence.

Phase transitions:
    LEVEL_INTRO    --CONFIRM-->  PLAYING         (spawns the formation)
    PLAYING        --PAUSE---->  PAUSED          (and back)
    PLAYING        --(tick)--->  LEVEL_COMPLETE | GAME_OVER
    LEVEL_COMPLETE --CONFIRM-->  LEVEL_INTRO     (level + 1, bullets cleared)
    PAUSED | LEVEL_INTRO | LEVEL_COMPLETE --QUIT--> QUIT
    GAME_OVER | QUIT --RESTART--> LEVEL_INTRO    (full reset, high score kept)
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config import Config
from .entities import Player, Bullet, EnemyBullet, Rect, make_player, rect_of
from .events import GameEvent
from .formation import Formation, generate_formation, formation_speed
from .motion import move_player, advance_bullets, advance_formation, maybe_enemy_fire
from .collisions import resolve_collisions
from .state import Phase, Action, InputState, RunState
from ..utils.logger import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class FrameSnapshot:
    """Read-only view of the simulation for renderers and widgets."""
    phase: Phase
    player: Rect
    enemies: Tuple[Tuple[Rect, bool], ...]
    bullets: Tuple[Rect, ...]
    enemy_bullets: Tuple[Rect, ...]
    score: int
    lives: int
    level: int
    high_score: int
    enemy_speed: float
    alive_count: int
    next_level_speed: float


class Simulation:
    """The whole game state plus the per-tick pipeline."""

    def __init__(
        self,
        config: Optional[Config] = None,
        rng: Optional[random.Random] = None,
        high_score: int = 0
    ):
        """
        Initialize a fresh run at the level 1 intro screen.

        Args:
            config: Game configuration
            rng: Random source for formation layout and enemy fire
            high_score: Previously persisted best score
        """
        self.config = config or Config()
        self.rng = rng or random.Random(self.config.SEED)

        self.player: Player = make_player(self.config)
        self.bullets: List[Bullet] = []
        self.enemy_bullets: List[EnemyBullet] = []
        self.formation = Formation(speed=self.config.ENEMY_BASE_SPEED)
        self.run = RunState(lives=self.config.LIVES, high_score=max(0, high_score))
        self.phase = Phase.LEVEL_INTRO

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def handle_action(self, action: Action) -> List[GameEvent]:
        """
        Apply an edge-triggered action. Actions that are not valid in the
        current phase are ignored.

        Returns:
            Events produced by the action (empty if ignored)
        """
        if action == Action.CONFIRM:
            if self.phase == Phase.LEVEL_INTRO:
                return self._start_level()
            if self.phase == Phase.LEVEL_COMPLETE:
                return self._advance_level()
            if self.phase == Phase.PLAYING:
                return self._fire()
        elif action == Action.PAUSE:
            if self.phase == Phase.PLAYING:
                self._set_phase(Phase.PAUSED)
            elif self.phase == Phase.PAUSED:
                self._set_phase(Phase.PLAYING)
        elif action == Action.QUIT:
            if self.phase in (Phase.PAUSED, Phase.LEVEL_INTRO, Phase.LEVEL_COMPLETE):
                self._set_phase(Phase.QUIT)
                logger.info(f"Player quit at level {self.run.level}, score {self.run.score}")
        elif action == Action.RESTART:
            if self.phase in (Phase.GAME_OVER, Phase.QUIT):
                return self._restart()
        return []

    def _set_phase(self, phase: Phase) -> None:
        logger.debug(f"Phase {self.phase.name} -> {phase.name}")
        self.phase = phase

    def _start_level(self) -> List[GameEvent]:
        self.formation = generate_formation(self.run.level, self.rng, self.config)
        logger.info(
            f"Level {self.run.level} started: {len(self.formation.enemies)} enemies, "
            f"speed {self.formation.speed:.1f}"
        )
        self._set_phase(Phase.PLAYING)
        return []

    def _advance_level(self) -> List[GameEvent]:
        self.run.level += 1
        self.bullets = []
        self.enemy_bullets = []
        self._set_phase(Phase.LEVEL_INTRO)
        return [GameEvent.LEVEL_CHANGED]

    def _fire(self) -> List[GameEvent]:
        self.bullets.append(Bullet(
            x=self.player.x + self.player.width / 2,
            y=self.player.y,
            width=self.config.BULLET_WIDTH,
            height=self.config.BULLET_HEIGHT,
        ))
        return [GameEvent.SHOOT]

    def _restart(self) -> List[GameEvent]:
        high_score = self.run.high_score
        self.run = RunState(lives=self.config.LIVES, high_score=high_score)
        self.player = make_player(self.config)
        self.bullets = []
        self.enemy_bullets = []
        self.formation = Formation(speed=self.config.ENEMY_BASE_SPEED)
        self._set_phase(Phase.LEVEL_INTRO)
        return [GameEvent.SCORE_CHANGED, GameEvent.LIVES_CHANGED, GameEvent.LEVEL_CHANGED]

    # -------------------------------------------------------------------------
    # Tick
    # -------------------------------------------------------------------------

    def tick(self, inputs: Optional[InputState] = None) -> List[GameEvent]:
        """
        Advance one frame. Only runs while PLAYING.

        Args:
            inputs: Held movement keys for this frame

        Returns:
            Events produced by the collision resolver
        """
        if self.phase != Phase.PLAYING:
            return []

        move_player(self.player, inputs or InputState(), self.config.SCREEN_WIDTH)
        self.bullets, self.enemy_bullets = advance_bullets(
            self.bullets, self.enemy_bullets, self.config
        )
        advance_formation(self.formation, self.config)

        shot = maybe_enemy_fire(self.formation, self.run.level, self.rng, self.config)
        if shot is not None:
            self.enemy_bullets.append(shot)

        return resolve_collisions(self)

    # -------------------------------------------------------------------------
    # Render sink
    # -------------------------------------------------------------------------

    def snapshot(self) -> FrameSnapshot:
        """Capture everything a renderer or widget needs for this frame."""
        return FrameSnapshot(
            phase=self.phase,
            player=rect_of(self.player),
            enemies=tuple((rect_of(e), e.alive) for e in self.formation.enemies),
            bullets=tuple(rect_of(b) for b in self.bullets),
            enemy_bullets=tuple(rect_of(b) for b in self.enemy_bullets),
            score=self.run.score,
            lives=self.run.lives,
            level=self.run.level,
            high_score=self.run.high_score,
            enemy_speed=self.formation.speed,
            alive_count=self.formation.alive_count(),
            next_level_speed=formation_speed(self.run.level, self.config),
        )
