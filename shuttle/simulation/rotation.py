"""Auto-rotation: where should the partner go when a player moves?

Doubles pairs rotate between two basic formations:

- Attack (front/back): one player smashes from deep, the partner closes
  the net to intercept the reply.
- Defense (side-by-side): both players split the court laterally at
  mid-depth.

The solver looks only at where the moving player ended up, classifies the
position into one of three tactical states and derives the partner's
target from it. It has no memory: the same position always gives the same
answer.

All coordinates are Team A's (lower half, net at NET_Y, back line at
COURT_HEIGHT).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from shuttle.simulation.court import (
    CENTER_X,
    CENTER_Y,
    COURT_HEIGHT,
    COURT_WIDTH,
    NET_Y,
    PLAYER_RADIUS,
    Vec2,
    clamp,
)
from shuttle.simulation.coverage import defense_radius

logger = logging.getLogger(__name__)


# =============================================================================
# Tactical thresholds
# =============================================================================

ATTACK_DEPTH = 1200.0      # deeper than this: mover is attacking from the back
NET_PLAY_DEPTH = 900.0     # shallower than this: mover is at the net

# Attack: partner takes the front interception line, leaning to the mover's side
ATTACK_PARTNER_Y = 920.0
ATTACK_SAME_SIDE_BIAS = 0.2

# Net play: partner retreats as the mover goes forward, on the opposite side
NET_RETREAT_FACTOR = 0.25
NET_RETREAT_MAX_Y = 1300.0
NET_OPPOSITE_SIDE_BIAS = 0.2

# Defense: see-saw in depth, lateral split that narrows as the mover goes wide
DEFENSE_SEESAW_FACTOR = 0.5
DEFENSE_MAX_SPLIT = 260.0
DEFENSE_MIN_SPLIT = 20.0
DEFENSE_SPLIT_SHRINK = 0.8


class TacticalState(str, Enum):
    """Classification of the moving player's depth."""

    ATTACK = "attack"      # deep back court
    NET_PLAY = "net_play"  # close to the net
    DEFENSE = "defense"    # mid-court


@dataclass(frozen=True)
class RotationPlan:
    """Partner placement computed from a mover's position.

    Attributes:
        state: Tactical state of the mover
        raw_target: Partner target straight from the state formula, before
            the boundary clamp. The lateral split is measured here: a
            centered DEFENSE mover puts raw_target.x exactly 260 left of
            CENTER_X.
        target: Where the partner is actually sent, after the boundary
            clamp. For the centered mover above the clamp moves x to 90.
    """

    state: TacticalState
    raw_target: Vec2
    target: Vec2

    def to_dict(self) -> dict:
        return {
            "state": self.state.value,
            "raw_target": self.raw_target.to_dict(),
            "target": self.target.to_dict(),
        }


def classify(y: float) -> TacticalState:
    """Classify a Team A position by depth."""
    if y > ATTACK_DEPTH:
        return TacticalState.ATTACK
    if y < NET_PLAY_DEPTH:
        return TacticalState.NET_PLAY
    return TacticalState.DEFENSE


def _attack_target(mover: Vec2) -> Vec2:
    x = CENTER_X + (mover.x - CENTER_X) * ATTACK_SAME_SIDE_BIAS
    return Vec2(x, ATTACK_PARTNER_Y)


def _net_play_target(mover: Vec2) -> Vec2:
    y = CENTER_Y + (CENTER_Y - mover.y) * NET_RETREAT_FACTOR
    x = CENTER_X - (mover.x - CENTER_X) * NET_OPPOSITE_SIDE_BIAS
    return Vec2(x, min(y, NET_RETREAT_MAX_Y))


def _defense_target(mover: Vec2) -> Vec2:
    dx = mover.x - CENTER_X
    # Exactly centered counts as the right side
    sign = -1.0 if dx < 0 else 1.0
    split = max(DEFENSE_MIN_SPLIT, DEFENSE_MAX_SPLIT - abs(dx) * DEFENSE_SPLIT_SHRINK)
    y = CENTER_Y - (mover.y - CENTER_Y) * DEFENSE_SEESAW_FACTOR
    return Vec2(CENTER_X - sign * split, y)


_TARGETS = {
    TacticalState.ATTACK: _attack_target,
    TacticalState.NET_PLAY: _net_play_target,
    TacticalState.DEFENSE: _defense_target,
}


def clamp_partner_target(target: Vec2) -> Vec2:
    """Keep a target far enough inside Team A's half.

    The margin is the larger of the token radius and half the defense
    radius at the target depth, applied to the sidelines, the back line
    and the net.
    """
    margin = max(PLAYER_RADIUS, 0.5 * defense_radius(target.y))
    return Vec2(
        clamp(target.x, margin, COURT_WIDTH - margin),
        clamp(target.y, NET_Y + margin, COURT_HEIGHT - margin),
    )


def solve_rotation(mover: Vec2) -> RotationPlan:
    """Compute where the partner should stand.

    Args:
        mover: Final position of the player who was moved

    Returns:
        RotationPlan with the tactical state and the clamped target
    """
    state = classify(mover.y)
    raw_target = _TARGETS[state](mover)
    plan = RotationPlan(state=state, raw_target=raw_target, target=clamp_partner_target(raw_target))
    logger.debug(f"Rotation from {mover}: {state.value} -> {plan.target}")
    return plan
