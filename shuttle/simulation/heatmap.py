"""Vulnerability heatmap and furthest-point search.

Samples one half of the court on a regular grid and, for every sample,
measures how far it is from the team's defenders relative to their reach.
The result is a scalar surface the renderer paints as translucent cells,
plus the single sample that is furthest from any defender (the "weakest
point"), clamped so its marker stays on the team's side of the net.

Grids are numpy arrays shaped (rows, cols) = (len(ys), len(xs)). Row-major
order is the scan order: top-to-bottom, then left-to-right within a row.
Ties for the furthest point keep the first sample in that order.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from shuttle.simulation.court import (
    COURT_WIDTH,
    GRID_STEP,
    MARKER_RADIUS,
    TeamSide,
    Vec2,
    clamp_to_half,
    side_bounds,
)
from shuttle.simulation.coverage import evaluate_grid

logger = logging.getLogger(__name__)


# Ratio at or below which a sample counts as fully safe
SAFE_RATIO = 0.5
# Ratio span over which alpha ramps from 0 to MAX_ALPHA
RATIO_RAMP = 2.0
MAX_ALPHA = 0.5
# Cells at or below this alpha are not drawn
ALPHA_CUTOFF = 0.05


def alpha_for_ratio(ratio: float) -> float:
    """Overlay opacity for a coverage ratio.

    0 up to SAFE_RATIO, then a linear ramp that saturates at MAX_ALPHA
    when the ratio reaches SAFE_RATIO + RATIO_RAMP (2.5).
    """
    if not math.isfinite(ratio) or ratio <= SAFE_RATIO:
        return 0.0
    alpha = ((ratio - SAFE_RATIO) / RATIO_RAMP) * MAX_ALPHA
    return max(0.0, min(MAX_ALPHA, alpha))


@dataclass(frozen=True)
class HeatCell:
    """A drawable heatmap cell centered on a sample point."""

    x: float
    y: float
    alpha: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "alpha": round(self.alpha, 4)}


@dataclass
class HeatmapField:
    """Result of one heatmap pass.

    Attributes:
        side: Half of the court that was sampled
        xs, ys: Sample coordinates along each axis
        ratio: Minimum distance / radius per sample
        distance: Minimum raw distance per sample
        alpha: Overlay opacity per sample (before the draw cutoff)
        furthest_point: Clamped marker position, or None when there is none
    """

    side: TeamSide
    xs: np.ndarray
    ys: np.ndarray
    ratio: np.ndarray
    distance: np.ndarray
    alpha: np.ndarray
    furthest_point: Optional[Vec2] = None

    def cells(self) -> list[HeatCell]:
        """Drawable cells in scan order (alpha above the cutoff)."""
        rows, cols = np.nonzero(self.alpha > ALPHA_CUTOFF)
        return [
            HeatCell(float(self.xs[c]), float(self.ys[r]), float(self.alpha[r, c]))
            for r, c in zip(rows, cols)
        ]

    def coverage_fraction(self) -> float:
        """Share of samples inside at least one defender's reach."""
        if self.ratio.size == 0:
            return 0.0
        return float(np.count_nonzero(self.ratio <= 1.0)) / self.ratio.size

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "team": self.side.value,
            "step": GRID_STEP,
            "cells": [cell.to_dict() for cell in self.cells()],
            "furthest_point": self.furthest_point.to_dict() if self.furthest_point else None,
            "coverage_fraction": round(self.coverage_fraction(), 4),
        }


def sample_axes(side: TeamSide, step: int = GRID_STEP) -> tuple[np.ndarray, np.ndarray]:
    """Sample coordinates for a half court, inclusive of both bounds."""
    min_y, max_y = side_bounds(side)
    # Half a step of slack keeps the far bound in the range
    xs = np.arange(0.0, COURT_WIDTH + step / 2, step)
    ys = np.arange(min_y, max_y + step / 2, step)
    return xs, ys


def alpha_grid(ratio: np.ndarray) -> np.ndarray:
    """Vectorized alpha_for_ratio."""
    finite = np.isfinite(ratio)
    ramp = np.clip(((ratio - SAFE_RATIO) / RATIO_RAMP) * MAX_ALPHA, 0.0, MAX_ALPHA)
    return np.where(finite & (ratio > SAFE_RATIO), ramp, 0.0)


def find_furthest_point(
    xs: np.ndarray,
    ys: np.ndarray,
    distance: np.ndarray,
    side: TeamSide = TeamSide.A,
) -> Optional[Vec2]:
    """Locate the sample furthest from every defender.

    Strictly greater wins, so the first maximum in scan order is kept
    (np.argmax returns the first occurrence in row-major order). The winner
    is clamped MARKER_RADIUS inside the sidelines, back line and net.

    Returns:
        Marker position, or None when no sample is a positive finite
        distance from the team.
    """
    if distance.size == 0 or not np.all(np.isfinite(distance)):
        return None

    index = int(np.argmax(distance))
    row, col = np.unravel_index(index, distance.shape)
    if distance[row, col] <= 0:
        return None

    x, y = clamp_to_half(float(xs[col]), float(ys[row]), side, MARKER_RADIUS)
    return Vec2(x, y)


def compute_field(
    players: Iterable,
    side: TeamSide = TeamSide.A,
    step: int = GRID_STEP,
) -> HeatmapField:
    """Sample a half court against a team's defenders.

    Args:
        players: Objects with `position` (Vec2) and `radius`; normally the
            two players of `side`
        side: Half of the court to sample
        step: Grid spacing in court units

    Returns:
        HeatmapField. An empty team gives inf ratios and distances, no
        drawable cells and no furthest point.
    """
    xs, ys = sample_axes(side, step)
    grid_x, grid_y = np.meshgrid(xs, ys)
    ratio, distance = evaluate_grid(grid_x, grid_y, players)

    field = HeatmapField(
        side=side,
        xs=xs,
        ys=ys,
        ratio=ratio,
        distance=distance,
        alpha=alpha_grid(ratio),
        furthest_point=find_furthest_point(xs, ys, distance, side),
    )

    logger.debug(
        f"Heatmap for team {side.value}: {ratio.size} samples, "
        f"furthest point {field.furthest_point}"
    )
    return field
