"""Court geometry shared by the coverage, heatmap and rotation modules.

Usage:
    from shuttle.simulation.court import Vec2, TeamSide, NET_Y
"""

from .vec2 import Vec2

from .coordinate import (
    # Court dimensions
    COURT_WIDTH,
    COURT_HEIGHT,
    NET_Y,
    CENTER_X,
    CENTER_Y,
    HALF_COURT_DEPTH,
    # Overlay / player constants
    PLAYER_RADIUS,
    MARKER_RADIUS,
    R_NET,
    R_BACK,
    MIN_RADIUS_DIVISOR,
    GRID_STEP,
    # Sides and clamping
    TeamSide,
    side_bounds,
    clamp,
    clamp_x,
    clamp_to_half,
    team_side_for_id,
)

__all__ = [
    "Vec2",
    "COURT_WIDTH",
    "COURT_HEIGHT",
    "NET_Y",
    "CENTER_X",
    "CENTER_Y",
    "HALF_COURT_DEPTH",
    "PLAYER_RADIUS",
    "MARKER_RADIUS",
    "R_NET",
    "R_BACK",
    "MIN_RADIUS_DIVISOR",
    "GRID_STEP",
    "TeamSide",
    "side_bounds",
    "clamp",
    "clamp_x",
    "clamp_to_half",
    "team_side_for_id",
]
