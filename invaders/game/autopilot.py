"""
Heuristic autopilot for headless demo and soak runs.

Steers under the lowest alive enemy, fires on a fixed cadence and
presses confirm on intro/complete screens.
"""

from typing import Optional, Tuple

from .simulation import FrameSnapshot
from .state import Phase, Action, InputState


class Autopilot:
    """Scripted player that reads snapshots and returns inputs."""

    def __init__(self, fire_interval: int = 12, dead_zone: float = 4.0):
        """
        Args:
            fire_interval: Fire once every N playing ticks
            dead_zone: Don't move when within this many pixels of the target
        """
        self.fire_interval = max(1, fire_interval)
        self.dead_zone = dead_zone
        self._ticks = 0

    def target_x(self, snapshot: FrameSnapshot) -> Optional[float]:
        """Center x of the lowest alive enemy, or None if none are alive."""
        best = None
        for (x, y, w, h), alive in snapshot.enemies:
            if not alive:
                continue
            if best is None or y + h > best[1]:
                best = (x + w / 2, y + h)
        return best[0] if best else None

    def decide(self, snapshot: FrameSnapshot) -> Tuple[InputState, Optional[Action]]:
        """
        Choose held keys and an optional action for the next tick.

        Returns:
            (inputs, action) - action is None when nothing should be pressed
        """
        if snapshot.phase in (Phase.LEVEL_INTRO, Phase.LEVEL_COMPLETE):
            return InputState(), Action.CONFIRM
        if snapshot.phase != Phase.PLAYING:
            return InputState(), None

        inputs = InputState()
        target = self.target_x(snapshot)
        if target is not None:
            px, _, pw, _ = snapshot.player
            offset = target - (px + pw / 2)
            if offset < -self.dead_zone:
                inputs.left = True
            elif offset > self.dead_zone:
                inputs.right = True

        self._ticks += 1
        action = Action.CONFIRM if self._ticks % self.fire_interval == 0 else None
        return inputs, action
