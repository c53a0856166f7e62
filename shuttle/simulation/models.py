"""Models for the doubles court."""

from dataclasses import dataclass, field

from shuttle.simulation.coverage import defense_radius
from shuttle.simulation.court import CENTER_Y, NET_Y, TeamSide, Vec2, team_side_for_id


TEAM_COLORS = {
    TeamSide.A: "#3b82f6",  # blue
    TeamSide.B: "#ef4444",  # red
}


@dataclass
class Player:
    """
    One player token on the court.

    `radius` is derived from the current depth and refreshed on every move;
    it is never set from user input.
    """

    id: str
    label: str
    side: TeamSide
    position: Vec2 = field(default_factory=Vec2)
    color: str = ""
    radius: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        if not self.color:
            self.color = TEAM_COLORS[self.side]
        self.refresh_radius()

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def move_to(self, x: float, y: float) -> None:
        """Place the token and recompute its defense radius."""
        self.position = Vec2(x, y)
        self.refresh_radius()

    def refresh_radius(self) -> None:
        self.radius = defense_radius(self.position.y)

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "id": self.id,
            "label": self.label,
            "team": self.side.value,
            "x": round(self.position.x, 3),
            "y": round(self.position.y, 3),
            "radius": round(self.radius, 3),
            "color": self.color,
        }


# Fixed starting layout: side-by-side in the middle of each half
INITIAL_POSITIONS = {
    "A1": Vec2(205.0, CENTER_Y),
    "A2": Vec2(405.0, CENTER_Y),
    "B1": Vec2(205.0, NET_Y / 2),
    "B2": Vec2(405.0, NET_Y / 2),
}


def default_roster() -> list[Player]:
    """Create the four players at their starting positions."""
    roster = []
    for player_id, position in INITIAL_POSITIONS.items():
        roster.append(Player(
            id=player_id,
            label=player_id,
            side=team_side_for_id(player_id),
            position=position.copy(),
        ))
    return roster
