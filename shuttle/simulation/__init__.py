"""Court coverage, heatmap and auto-rotation engine."""

from .court import TeamSide, Vec2
from .coverage import VulnerabilitySample, defense_radius, evaluate_grid, evaluate_point
from .heatmap import HeatCell, HeatmapField, alpha_for_ratio, compute_field
from .models import Player, default_roster
from .motion import MotionInterpolator, Tween, ease_out_quad
from .rotation import RotationPlan, TacticalState, classify, solve_rotation
from .court_session import CourtContext, UnknownPlayerError
from .session_manager import CourtSession, CourtSessionManager, get_session_manager

__all__ = [
    "TeamSide",
    "Vec2",
    # Coverage
    "VulnerabilitySample",
    "defense_radius",
    "evaluate_grid",
    "evaluate_point",
    # Heatmap
    "HeatCell",
    "HeatmapField",
    "alpha_for_ratio",
    "compute_field",
    # Players
    "Player",
    "default_roster",
    # Motion
    "MotionInterpolator",
    "Tween",
    "ease_out_quad",
    # Rotation
    "RotationPlan",
    "TacticalState",
    "classify",
    "solve_rotation",
    # Context and sessions
    "CourtContext",
    "UnknownPlayerError",
    "CourtSession",
    "CourtSessionManager",
    "get_session_manager",
]
