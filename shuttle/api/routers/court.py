"""REST API router for court sessions."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, status

from shuttle.api.schemas.court import (
    AdvanceRequest,
    CreateSessionRequest,
    DragEndResponse,
    FieldResponse,
    SessionResponse,
    SetAutoRotationRequest,
    SetPositionRequest,
)
from shuttle.simulation import UnknownPlayerError, get_session_manager
from shuttle.simulation.session_manager import CourtSession

router = APIRouter(prefix="/court", tags=["court"])


def _session_to_response(session: CourtSession) -> SessionResponse:
    """Convert CourtSession to response schema."""
    return SessionResponse(session_id=str(session.session_id), **session.context.to_dict())


async def _get_session(session_id: str) -> CourtSession:
    """Look up a session, raising 400/404 like every other resource."""
    try:
        uuid = UUID(session_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid session ID format",
        )

    session = await get_session_manager().get_session(uuid)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found",
        )
    return session


def _player_not_found(player_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Player not found: {player_id}",
    )


@router.post("/sessions", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(request: Optional[CreateSessionRequest] = None) -> SessionResponse:
    """Create a new court session with the starting layout."""
    manager = get_session_manager()

    if request is None:
        request = CreateSessionRequest()

    session = await manager.create_session(
        auto_rotation=request.auto_rotation,
        rotation_ms=request.rotation_ms,
        frame_ms=request.frame_ms,
    )
    return _session_to_response(session)


@router.get("/sessions", response_model=list[str])
async def list_sessions() -> list[str]:
    """List all active court session IDs."""
    sessions = await get_session_manager().list_sessions()
    return [str(s) for s in sessions]


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str) -> SessionResponse:
    """Get a court session by ID."""
    session = await _get_session(session_id)
    return _session_to_response(session)


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: str) -> None:
    """Delete a court session."""
    session = await _get_session(session_id)
    await get_session_manager().delete_session(session.session_id)


@router.post("/sessions/{session_id}/reset", response_model=SessionResponse)
async def reset_session(session_id: str) -> SessionResponse:
    """Put every player back at the starting layout."""
    session = await _get_session(session_id)
    await get_session_manager().reset_session(session.session_id)
    return _session_to_response(session)


@router.put("/sessions/{session_id}/players/{player_id}/position", response_model=SessionResponse)
async def set_player_position(
    session_id: str, player_id: str, request: SetPositionRequest
) -> SessionResponse:
    """Move a player; the position is clamped into the player's half."""
    session = await _get_session(session_id)
    try:
        session.context.set_player_position(player_id, request.x, request.y)
    except UnknownPlayerError:
        raise _player_not_found(player_id)
    return _session_to_response(session)


@router.post("/sessions/{session_id}/players/{player_id}/drag-end", response_model=DragEndResponse)
async def drag_end(session_id: str, player_id: str) -> DragEndResponse:
    """
    Finish a drag gesture.

    Starts the partner's rotation when auto-rotation applies. The partner
    moves as the host calls /advance (or over the WebSocket frame loop).
    """
    session = await _get_session(session_id)
    try:
        plan = session.context.on_drag_end(player_id)
    except UnknownPlayerError:
        raise _player_not_found(player_id)

    return DragEndResponse(
        rotation=plan.to_dict() if plan else None,
        session=_session_to_response(session),
    )


@router.put("/sessions/{session_id}/auto-rotation", response_model=SessionResponse)
async def set_auto_rotation(session_id: str, request: SetAutoRotationRequest) -> SessionResponse:
    """Turn auto-rotation on or off."""
    session = await _get_session(session_id)
    session.context.set_auto_rotation_enabled(request.enabled)
    return _session_to_response(session)


@router.post("/sessions/{session_id}/advance", response_model=SessionResponse)
async def advance(session_id: str, request: AdvanceRequest) -> SessionResponse:
    """Advance animations by one host-scheduled frame."""
    session = await _get_session(session_id)
    session.context.advance(request.elapsed_ms)
    return _session_to_response(session)


@router.get("/sessions/{session_id}/field", response_model=FieldResponse)
async def get_field(session_id: str) -> FieldResponse:
    """Heatmap cells and the weakest point for the current positions."""
    session = await _get_session(session_id)
    return FieldResponse(**session.context.render_field().to_dict())
