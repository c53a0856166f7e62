"""Court dimensions and coordinate conventions.

Court Coordinate System:
    Origin (0, 0) = Top-left corner (Team B's back line, left sideline)

    X-axis (lateral):
        0 = Left sideline, COURT_WIDTH = right sideline

    Y-axis (depth):
        0 = Team B's back line
        NET_Y = Net
        COURT_HEIGHT = Team A's back line

    Team A defends the lower half (NET_Y..COURT_HEIGHT), Team B the upper
    half (0..NET_Y). All tactical reasoning in this package (heatmap,
    auto-rotation) is done from Team A's point of view.
"""

from __future__ import annotations

from enum import Enum


# =============================================================================
# Court Dimension Constants
# =============================================================================

COURT_WIDTH = 610.0
COURT_HEIGHT = 1340.0
NET_Y = 670.0

CENTER_X = COURT_WIDTH / 2                 # 305
CENTER_Y = (NET_Y + COURT_HEIGHT) / 2      # 1005, middle of Team A's half

# Longest net-to-back-line distance; equals either half-court span
HALF_COURT_DEPTH = max(NET_Y, COURT_HEIGHT - NET_Y)


# =============================================================================
# Player / Overlay Constants
# =============================================================================

PLAYER_RADIUS = 20.0   # token radius, used as the drag clamp margin
MARKER_RADIUS = 30.0   # furthest-point marker radius

# Defense radius at the net and at the back line
R_NET = 120.0
R_BACK = 240.0

# Smallest divisor used when turning a distance into a coverage ratio
MIN_RADIUS_DIVISOR = 1.0

# Heatmap sampling step (both axes)
GRID_STEP = 10


# =============================================================================
# Team Sides
# =============================================================================

class TeamSide(str, Enum):
    """Which half of the court a team occupies."""

    A = "A"  # lower half, y in [NET_Y, COURT_HEIGHT]
    B = "B"  # upper half, y in [0, NET_Y]


def side_bounds(side: TeamSide, margin: float = 0.0) -> tuple[float, float]:
    """Get the legal y-range for a team's half.

    Args:
        side: Team half
        margin: Distance to keep from the net and the back line

    Returns:
        Tuple of (min_y, max_y)
    """
    if side == TeamSide.A:
        return NET_Y + margin, COURT_HEIGHT - margin
    return margin, NET_Y - margin


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_x(x: float, margin: float = 0.0) -> float:
    """Clamp lateral position to stay within the sidelines."""
    return clamp(x, margin, COURT_WIDTH - margin)


def clamp_to_half(x: float, y: float, side: TeamSide, margin: float = 0.0) -> tuple[float, float]:
    """Clamp a point into a team's half of the court.

    Args:
        x: Lateral position
        y: Depth position
        side: Team half the point must stay in
        margin: Distance to keep from every sideline, back line and the net

    Returns:
        Clamped (x, y)
    """
    min_y, max_y = side_bounds(side, margin)
    return clamp_x(x, margin), clamp(y, min_y, max_y)


def team_side_for_id(player_id: str) -> TeamSide:
    """Team-tagged ids start with the team letter ("A1", "B2")."""
    return TeamSide(player_id[:1].upper())
