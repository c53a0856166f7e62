"""Tests for CourtSessionManager."""

import asyncio

import pytest

from shuttle.simulation import CourtSessionManager


@pytest.fixture
def manager() -> CourtSessionManager:
    return CourtSessionManager()


class TestSessions:
    """Session registry."""

    def test_create_and_get(self, manager):
        async def scenario():
            session = await manager.create_session()
            found = await manager.get_session(session.session_id)
            ids = await manager.list_sessions()
            return session, found, ids

        session, found, ids = asyncio.run(scenario())
        assert found is session
        assert ids == [session.session_id]

    def test_defaults_from_config(self, manager, monkeypatch):
        monkeypatch.setenv("SHUTTLE_AUTO_ROTATION", "false")
        monkeypatch.setenv("SHUTTLE_ROTATION_MS", "450")

        session = asyncio.run(manager.create_session())

        assert session.context.auto_rotation is False
        assert session.context.rotation_ms == 450

    def test_explicit_settings_win(self, manager, monkeypatch):
        monkeypatch.setenv("SHUTTLE_AUTO_ROTATION", "false")
        session = asyncio.run(manager.create_session(auto_rotation=True, frame_ms=5))
        assert session.context.auto_rotation is True
        assert session.frame_ms == 5

    def test_delete(self, manager):
        async def scenario():
            session = await manager.create_session()
            deleted = await manager.delete_session(session.session_id)
            again = await manager.delete_session(session.session_id)
            return deleted, again, await manager.list_sessions()

        deleted, again, ids = asyncio.run(scenario())
        assert deleted is True
        assert again is False
        assert ids == []


class TestAnimationLoop:
    """Frame loop driving partner rotation."""

    def test_runs_to_completion(self, manager):
        frames = []
        completed = []

        async def scenario():
            session = await manager.create_session(frame_ms=5, rotation_ms=50)
            session.context.set_player_position("A1", 150.0, 1250.0)
            plan = session.context.on_drag_end("A1")

            started = await manager.start_animation(
                session.session_id,
                on_frame=lambda ctx: frames.append(ctx.get_player("A2").y),
                on_complete=completed.append,
            )
            await asyncio.wait_for(session._task, timeout=2.0)
            return session, plan, started

        session, plan, started = asyncio.run(scenario())

        assert started is True
        assert len(completed) == 1
        assert len(frames) == 10
        assert frames[-1] == pytest.approx(plan.target.y)
        assert not session.context.is_animating()

    def test_nothing_to_animate(self, manager):
        async def scenario():
            session = await manager.create_session()
            return await manager.start_animation(session.session_id)

        assert asyncio.run(scenario()) is False

    def test_reset_stops_loop(self, manager):
        async def scenario():
            session = await manager.create_session(frame_ms=5, rotation_ms=5000)
            session.context.set_player_position("A1", 150.0, 1250.0)
            session.context.on_drag_end("A1")
            await manager.start_animation(session.session_id)
            await asyncio.sleep(0.02)
            reset = await manager.reset_session(session.session_id)
            return session, reset

        session, reset = asyncio.run(scenario())
        assert reset is True
        assert not session.is_animating
        assert not session.context.is_animating()

    def test_unknown_session(self, manager):
        from uuid import uuid4

        assert asyncio.run(manager.start_animation(uuid4())) is False
        assert asyncio.run(manager.reset_session(uuid4())) is False
