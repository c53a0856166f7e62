"""2D vector for court positions.

Coordinate System Convention:
    x-axis: lateral position, 0 at the left sideline, COURT_WIDTH at the right.
    y-axis: depth, 0 at Team B's back line, COURT_HEIGHT at Team A's back line.

    The net runs horizontally at y = NET_Y. Court units are the same
    abstract units the renderer draws in (one unit per display pixel at
    scale 1.0).
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vec2:
    """2D point on the court.

    Examples:
        >>> Vec2(0, 0).distance_to(Vec2(6, 8))
        10.0
        >>> Vec2(100, 1000).lerp(Vec2(200, 1100), 0.5)
        Vec2(x=150.000, y=1050.000)
    """
    x: float = 0.0
    y: float = 0.0

    def __eq__(self, other: object) -> bool:
        """Check equality with floating point tolerance."""
        if not isinstance(other, Vec2):
            return NotImplemented
        return math.isclose(self.x, other.x, abs_tol=1e-9) and \
               math.isclose(self.y, other.y, abs_tol=1e-9)

    # =========================================================================
    # Distance
    # =========================================================================

    def distance_to(self, other: Vec2) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    # =========================================================================
    # Interpolation
    # =========================================================================

    def lerp(self, target: Vec2, t: float) -> Vec2:
        """Linear interpolation toward target.

        Args:
            target: Target vector to interpolate toward.
            t: Interpolation factor (0 = self, 1 = target).
        """
        return Vec2(
            self.x + (target.x - self.x) * t,
            self.y + (target.y - self.y) * t
        )

    # =========================================================================
    # Utility
    # =========================================================================

    def copy(self) -> Vec2:
        return Vec2(self.x, self.y)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"x": round(self.x, 3), "y": round(self.y, 3)}

    def __repr__(self) -> str:
        return f"Vec2(x={self.x:.3f}, y={self.y:.3f})"
