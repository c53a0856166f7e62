"""Court context: the four players and everything derived from them.

One CourtContext owns all mutable state for a court view: player
positions (and their derived radii), the auto-rotation toggle, in-flight
partner animations and the last computed heatmap. Callers drive it
explicitly:

    ctx.set_player_position("A1", x, y)   # every pointer move
    ctx.on_drag_end("A1")                 # gesture finished
    ctx.advance(16)                       # every host frame
    field = ctx.render_field()            # whenever a redraw is needed

The heatmap is recomputed lazily: any position change marks it stale and
the next render_field() rescans the full grid.
"""

from __future__ import annotations

import logging
from typing import Optional

from shuttle.simulation.court import PLAYER_RADIUS, TeamSide, Vec2, clamp_to_half
from shuttle.simulation.heatmap import HeatmapField, compute_field
from shuttle.simulation.models import Player, default_roster
from shuttle.simulation.motion import ROTATION_DURATION_MS, MotionInterpolator
from shuttle.simulation.rotation import RotationPlan, solve_rotation

logger = logging.getLogger(__name__)


class UnknownPlayerError(KeyError):
    """Raised for a player id that is not on the court."""


class CourtContext:
    """
    State and operations for one doubles court.

    Auto-rotation only ever repositions Team A: when a Team A player is
    released after a drag, the other Team A player is animated to the
    solver's target.
    """

    def __init__(
        self,
        auto_rotation: bool = True,
        rotation_ms: float = ROTATION_DURATION_MS,
        analyzed_side: TeamSide = TeamSide.A,
    ) -> None:
        self.auto_rotation = auto_rotation
        self.rotation_ms = rotation_ms
        self.analyzed_side = analyzed_side
        self.motion = MotionInterpolator()
        self._players: dict[str, Player] = {}
        self._field: Optional[HeatmapField] = None
        self.last_plan: Optional[RotationPlan] = None
        self.reset()

    # ------------------------------------------------------------------
    # Roster
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Restore the starting layout and stop any animation."""
        self.motion.clear()
        self._players = {p.id: p for p in default_roster()}
        self.last_plan = None
        self.invalidate()

    def get_player(self, player_id: str) -> Player:
        try:
            return self._players[player_id]
        except KeyError:
            raise UnknownPlayerError(player_id) from None

    def get_players(self) -> list[Player]:
        return list(self._players.values())

    def team(self, side: TeamSide) -> list[Player]:
        return [p for p in self._players.values() if p.side == side]

    def partner_of(self, player: Player) -> Optional[Player]:
        for other in self.team(player.side):
            if other.id != player.id:
                return other
        return None

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def set_player_position(self, player_id: str, x: float, y: float) -> Player:
        """Move a player, clamped into its own half.

        The player keeps PLAYER_RADIUS clear of the sidelines, its back line
        and the net. A drag takes over the token, so any animation running
        for this player is dropped.
        """
        player = self.get_player(player_id)
        self.motion.cancel(player_id)
        cx, cy = clamp_to_half(x, y, player.side, PLAYER_RADIUS)
        player.move_to(cx, cy)
        self.invalidate()
        return player

    def on_drag_end(self, player_id: str) -> Optional[RotationPlan]:
        """Handle the end of a drag gesture.

        Returns:
            The rotation plan that was started, or None when auto-rotation
            is off or the player is not on Team A.
        """
        player = self.get_player(player_id)
        if not self.auto_rotation or player.side != TeamSide.A:
            return None

        partner = self.partner_of(player)
        if partner is None:
            return None

        plan = solve_rotation(player.position)
        self.motion.animate(partner, plan.target, self.rotation_ms)
        self.last_plan = plan
        logger.info(
            f"{player.id} released in {plan.state.value}; "
            f"rotating {partner.id} to {plan.target}"
        )
        return plan

    def set_auto_rotation_enabled(self, enabled: bool) -> None:
        self.auto_rotation = enabled
        logger.info(f"Auto-rotation {'enabled' if enabled else 'disabled'}")

    # ------------------------------------------------------------------
    # Frames
    # ------------------------------------------------------------------

    def advance(self, delta_ms: float) -> bool:
        """Advance animations by one host frame.

        Returns:
            True while any player is still animating
        """
        moved = self.motion.step(delta_ms)
        if moved:
            self.invalidate()
        return not self.motion.is_idle()

    def is_animating(self) -> bool:
        return not self.motion.is_idle()

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    def invalidate(self) -> None:
        """Mark the heatmap stale after a position change."""
        self._field = None

    def recompute(self) -> HeatmapField:
        """Rescan the heatmap for the analyzed team."""
        self._field = compute_field(self.team(self.analyzed_side), self.analyzed_side)
        return self._field

    def render_field(self) -> HeatmapField:
        """Current heatmap, recomputed only if a position changed."""
        if self._field is None:
            return self.recompute()
        return self._field

    @property
    def furthest_point(self) -> Optional[Vec2]:
        return self.render_field().furthest_point

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "players": [p.to_dict() for p in self.get_players()],
            "auto_rotation": self.auto_rotation,
            "is_animating": self.is_animating(),
            "last_rotation": self.last_plan.to_dict() if self.last_plan else None,
        }
