"""Session manager for court views."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional
from uuid import UUID, uuid4

from shuttle.config import get_config
from shuttle.simulation.court_session import CourtContext

logger = logging.getLogger(__name__)


@dataclass
class CourtSession:
    """A court view with its own players and animation loop."""

    session_id: UUID
    context: CourtContext
    frame_ms: int = 16
    on_frame: Optional[Callable[[CourtContext], None]] = None
    on_complete: Optional[Callable[[CourtContext], None]] = None

    # Async control
    _task: Optional[asyncio.Task] = field(default=None, repr=False)
    _stop_requested: bool = field(default=False, repr=False)

    @property
    def is_animating(self) -> bool:
        return self._task is not None and not self._task.done()


class CourtSessionManager:
    """
    Manages active court sessions.

    Session storage is guarded by an asyncio lock; each session runs at most
    one animation loop at a time.
    """

    def __init__(self) -> None:
        self._sessions: dict[UUID, CourtSession] = {}
        self._lock = asyncio.Lock()

    async def create_session(
        self,
        auto_rotation: Optional[bool] = None,
        rotation_ms: Optional[int] = None,
        frame_ms: Optional[int] = None,
    ) -> CourtSession:
        """
        Create a new court session.

        Args:
            auto_rotation: Start with auto-rotation on (defaults to config)
            rotation_ms: Partner animation duration (defaults to config)
            frame_ms: Milliseconds per animation frame (defaults to config)

        Returns:
            New CourtSession
        """
        config = get_config()
        context = CourtContext(
            auto_rotation=config.auto_rotation if auto_rotation is None else auto_rotation,
            rotation_ms=config.rotation_ms if rotation_ms is None else rotation_ms,
        )

        session_id = uuid4()
        session = CourtSession(
            session_id=session_id,
            context=context,
            frame_ms=config.frame_ms if frame_ms is None else frame_ms,
        )

        async with self._lock:
            self._sessions[session_id] = session

        logger.info(f"Created court session {session_id}")
        return session

    async def get_session(self, session_id: UUID) -> Optional[CourtSession]:
        """Get a session by ID."""
        async with self._lock:
            return self._sessions.get(session_id)

    async def delete_session(self, session_id: UUID) -> bool:
        """
        Delete a session.

        Stops the animation loop if running.
        Returns True if session existed and was deleted.
        """
        async with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return False

            await self._stop_session(session)

            del self._sessions[session_id]

        logger.info(f"Deleted court session {session_id}")
        return True

    async def list_sessions(self) -> list[UUID]:
        """List all active session IDs."""
        async with self._lock:
            return list(self._sessions.keys())

    async def start_animation(
        self,
        session_id: UUID,
        on_frame: Optional[Callable[[CourtContext], None]] = None,
        on_complete: Optional[Callable[[CourtContext], None]] = None,
    ) -> bool:
        """
        Start the frame loop for a session.

        The loop advances the context one frame at a time until no player
        is animating. A loop that is already running keeps running and
        picks up any newly started tween.

        Args:
            session_id: Session to animate
            on_frame: Callback after each frame
            on_complete: Callback when the last tween finishes

        Returns:
            True if a loop is running, False if session not found or idle
        """
        async with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return False

            if session.is_animating:
                return True

            if not session.context.is_animating():
                return False

            session.on_frame = on_frame
            session.on_complete = on_complete
            session._stop_requested = False
            session._task = asyncio.create_task(self._run_frame_loop(session))
            return True

    async def stop_animation(self, session_id: UUID) -> bool:
        """Stop a running frame loop, leaving players mid-move."""
        async with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return False

            await self._stop_session(session)
            return True

    async def reset_session(self, session_id: UUID) -> bool:
        """Reset a session to the starting layout."""
        async with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return False

            await self._stop_session(session)
            session.context.reset()
            return True

    async def cleanup_all(self) -> None:
        """Stop every frame loop and forget all sessions."""
        async with self._lock:
            for session in self._sessions.values():
                await self._stop_session(session)
            self._sessions.clear()

    async def _stop_session(self, session: CourtSession) -> None:
        """Stop a session's frame loop (must hold lock)."""
        if session._task is not None and not session._task.done():
            session._stop_requested = True
            try:
                await asyncio.wait_for(session._task, timeout=1.0)
            except asyncio.TimeoutError:
                session._task.cancel()
                try:
                    await session._task
                except asyncio.CancelledError:
                    pass
            session._task = None

    async def _run_frame_loop(self, session: CourtSession) -> None:
        """Run the animation frame loop."""
        context = session.context
        frame_s = session.frame_ms / 1000.0

        while not session._stop_requested:
            still_animating = context.advance(session.frame_ms)

            if session.on_frame:
                try:
                    session.on_frame(context)
                except Exception:
                    logger.exception(f"Frame callback failed for session {session.session_id}")

            if not still_animating:
                break

            await asyncio.sleep(frame_s)

        if session.on_complete and not session._stop_requested:
            try:
                session.on_complete(context)
            except Exception:
                logger.exception(f"Completion callback failed for session {session.session_id}")


# Global session manager instance
_session_manager: Optional[CourtSessionManager] = None


def get_session_manager() -> CourtSessionManager:
    """Get the global session manager instance."""
    global _session_manager
    if _session_manager is None:
        _session_manager = CourtSessionManager()
    return _session_manager
