"""Shared pytest fixtures for Shuttle tests."""

import pytest

from shuttle.config import reset_config
from shuttle.simulation import CourtContext, Player, TeamSide, Vec2


# =============================================================================
# Player Fixtures
# =============================================================================


def _player(player_id: str, x: float, y: float) -> Player:
    return Player(
        id=player_id,
        label=player_id,
        side=TeamSide(player_id[0]),
        position=Vec2(x, y),
    )


@pytest.fixture
def make_player():
    """Factory for a player at (x, y) with its derived radius."""
    return _player


@pytest.fixture
def team_a() -> list[Player]:
    """Team A side-by-side at mid-court."""
    return [_player("A1", 205.0, 1005.0), _player("A2", 405.0, 1005.0)]


@pytest.fixture
def lone_defender() -> Player:
    """A single Team A player near the left back corner."""
    return _player("A1", 20.0, 1320.0)


# =============================================================================
# Context Fixtures
# =============================================================================


@pytest.fixture
def context() -> CourtContext:
    """Court with the starting layout and auto-rotation on."""
    return CourtContext(auto_rotation=True)


@pytest.fixture
def manual_context() -> CourtContext:
    """Court with auto-rotation off."""
    return CourtContext(auto_rotation=False)


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Keep environment overrides from leaking between tests."""
    for name in (
        "SHUTTLE_API_HOST",
        "SHUTTLE_API_PORT",
        "SHUTTLE_FRAME_MS",
        "SHUTTLE_ROTATION_MS",
        "SHUTTLE_AUTO_ROTATION",
        "SHUTTLE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
