"""
Event Dispatcher
================

Maps the simulation's outcome events onto its collaborators:
    - sound events    -> SoundBoard.play
    - value changes   -> Scoreboard.sync
    - new high score  -> HighScoreStore.save

Every collaborator is optional so the same dispatcher works in the
interactive shell, headless runs and tests.
"""

from typing import Any, Iterable, Optional

from .game.events import GameEvent, SOUND_EVENTS
from .game.simulation import FrameSnapshot
from .utils.logger import log_run_summary


class EventDispatcher:
    """Fans simulation events out to audio, widgets and persistence."""

    def __init__(
        self,
        sounds: Optional[Any] = None,
        scoreboard: Optional[Any] = None,
        store: Optional[Any] = None
    ):
        """
        Args:
            sounds: Object with play(event)
            scoreboard: Object with sync(**values)
            store: Object with save(score)
        """
        self.sounds = sounds
        self.scoreboard = scoreboard
        self.store = store

    def dispatch(self, events: Iterable[GameEvent], snapshot: FrameSnapshot) -> None:
        """
        Handle one batch of events, reading current values from the snapshot.

        Args:
            events: Events returned by Simulation.handle_action or tick
            snapshot: Simulation state after those events
        """
        for event in events:
            if event in SOUND_EVENTS and self.sounds is not None:
                self.sounds.play(event)

            if event == GameEvent.SCORE_CHANGED:
                self._sync(score=snapshot.score)
            elif event == GameEvent.LIVES_CHANGED:
                self._sync(lives=snapshot.lives)
            elif event == GameEvent.LEVEL_CHANGED:
                self._sync(level=snapshot.level)
            elif event == GameEvent.HIGH_SCORE_CHANGED:
                self._sync(high_score=snapshot.high_score)
                if self.store is not None:
                    self.store.save(snapshot.high_score)
            elif event == GameEvent.GAME_OVER:
                log_run_summary(snapshot.score, snapshot.level, snapshot.high_score, 'game_over')

    def _sync(self, **values: int) -> None:
        if self.scoreboard is not None:
            self.scoreboard.sync(**values)
