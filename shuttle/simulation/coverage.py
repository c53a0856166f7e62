"""Defensive coverage math.

Pure functions behind every coverage overlay:

- defense_radius(y): how far a player at depth y can comfortably reach.
  Players at the net react to short, fast shots and cover less ground;
  players at the back line have more time and cover more.
- evaluate_point(point, players): how well a team covers a single point,
  as the best (smallest) distance-to-reach ratio over its players and the
  smallest raw distance.
- evaluate_grid(xs, ys, players): the same evaluation over an array of
  points. evaluate_point and the heatmap both go through it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from shuttle.simulation.court import (
    HALF_COURT_DEPTH,
    MIN_RADIUS_DIVISOR,
    NET_Y,
    R_BACK,
    R_NET,
    Vec2,
)


def defense_radius(y: float) -> float:
    """Coverage radius for a player standing at depth y.

    Linear in the distance from the net: R_NET at the net, R_BACK at the
    back line. The court is symmetric about the net, so the same curve
    serves both halves. y is not range-checked.
    """
    t = abs(y - NET_Y) / HALF_COURT_DEPTH
    return R_NET + t * (R_BACK - R_NET)


@dataclass(frozen=True)
class VulnerabilitySample:
    """Coverage of one point by one team.

    Attributes:
        x, y: Sampled point
        min_ratio: Smallest distance / defense radius over the team
        min_distance: Smallest raw distance over the team
    """

    x: float
    y: float
    min_ratio: float
    min_distance: float

    @property
    def is_defended(self) -> bool:
        """Inside at least one defender's reach."""
        return self.min_ratio <= 1.0


def evaluate_grid(xs, ys, players: Iterable) -> tuple[np.ndarray, np.ndarray]:
    """Evaluate a team's coverage at many points at once.

    Args:
        xs, ys: Point coordinates; any pair of broadcastable arrays (a
            meshgrid for the heatmap, 0-d arrays for a single point)
        players: Objects with `position` (Vec2) and `radius` attributes

    Returns:
        (min_ratio, min_distance) arrays in the broadcast shape. An empty
        team gives inf everywhere.
    """
    xs, ys = np.broadcast_arrays(np.asarray(xs, dtype=float), np.asarray(ys, dtype=float))
    min_ratio = np.full(xs.shape, np.inf)
    min_distance = np.full(xs.shape, np.inf)

    for player in players:
        distance = np.hypot(xs - player.position.x, ys - player.position.y)
        # A zero radius divides as one unit; the player's radius is left alone
        min_ratio = np.minimum(min_ratio, distance / max(player.radius, MIN_RADIUS_DIVISOR))
        min_distance = np.minimum(min_distance, distance)

    return min_ratio, min_distance


def evaluate_point(point: Vec2, players: Iterable) -> VulnerabilitySample:
    """Evaluate how exposed a point is to a team.

    Args:
        point: Query point in court coordinates
        players: Objects with `position` (Vec2) and `radius` attributes

    Returns:
        VulnerabilitySample; an empty team gives inf for both values.
    """
    min_ratio, min_distance = evaluate_grid(point.x, point.y, players)
    return VulnerabilitySample(point.x, point.y, float(min_ratio), float(min_distance))
