"""Eased player motion.

The host owns the frame loop (a browser repaint callback, an asyncio task,
a test calling step() by hand). This module only answers "where is the
player after this much time", so the math stays independent of whatever
schedules the frames.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from shuttle.simulation.court import Vec2

logger = logging.getLogger(__name__)


ROTATION_DURATION_MS = 300


def ease_out_quad(progress: float) -> float:
    """Fast start, gentle stop. progress is clamped to [0, 1]."""
    p = max(0.0, min(1.0, progress))
    return 1.0 - (1.0 - p) * (1.0 - p)


@dataclass(frozen=True)
class Tween:
    """Ease-out movement from start to target over duration_ms."""

    player_id: str
    start: Vec2
    target: Vec2
    duration_ms: float = ROTATION_DURATION_MS

    def progress(self, elapsed_ms: float) -> float:
        if self.duration_ms <= 0:
            return 1.0
        return min(1.0, max(0.0, elapsed_ms / self.duration_ms))

    def is_complete(self, elapsed_ms: float) -> bool:
        return elapsed_ms >= self.duration_ms

    def position_at(self, elapsed_ms: float) -> Vec2:
        """Position after elapsed_ms; exactly the target once complete."""
        if self.is_complete(elapsed_ms):
            return self.target.copy()
        return self.start.lerp(self.target, ease_out_quad(self.progress(elapsed_ms)))


@dataclass
class _ActiveTween:
    tween: Tween
    player: object
    elapsed_ms: float = 0.0


@dataclass
class MotionInterpolator:
    """
    Runs at most one tween per player.

    Starting a tween for a player that is already moving replaces the
    in-flight one, starting from wherever the player currently is.
    """

    _active: dict[str, _ActiveTween] = field(default_factory=dict)

    def animate(self, player, target: Vec2, duration_ms: float = ROTATION_DURATION_MS) -> Tween:
        """Start moving a player toward target.

        Args:
            player: Object with `id`, `position` and `move_to(x, y)`
            target: Destination in court coordinates
            duration_ms: Time to reach the destination
        """
        if player.id in self._active:
            logger.debug(f"Replacing in-flight tween for {player.id}")

        tween = Tween(
            player_id=player.id,
            start=player.position.copy(),
            target=target.copy(),
            duration_ms=duration_ms,
        )
        self._active[player.id] = _ActiveTween(tween=tween, player=player)
        logger.debug(f"Tween {player.id}: {tween.start} -> {tween.target} over {duration_ms}ms")
        return tween

    def cancel(self, player_id: str) -> bool:
        """Drop a player's tween, leaving the player where it is."""
        return self._active.pop(player_id, None) is not None

    def clear(self) -> None:
        self._active.clear()

    def step(self, delta_ms: float) -> list[str]:
        """Advance every active tween by delta_ms.

        Writes the new positions back to the players and retires tweens
        that reached their target.

        Returns:
            Ids of the players that moved this step
        """
        moved = []
        for player_id, active in list(self._active.items()):
            active.elapsed_ms += delta_ms
            position = active.tween.position_at(active.elapsed_ms)
            active.player.move_to(position.x, position.y)
            moved.append(player_id)

            if active.tween.is_complete(active.elapsed_ms):
                del self._active[player_id]

        return moved

    def is_idle(self) -> bool:
        return not self._active

    def is_animating(self, player_id: str) -> bool:
        return player_id in self._active

    def get_tween(self, player_id: str) -> Optional[Tween]:
        active = self._active.get(player_id)
        return active.tween if active else None
