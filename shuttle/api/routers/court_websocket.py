"""WebSocket router for live court updates."""

import asyncio
import json
import logging
from uuid import UUID

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from shuttle.api.schemas.court import (
    DragEndMessage,
    MovePlayerMessage,
    RequestSyncMessage,
    SetAutoRotationMessage,
)
from shuttle.simulation import CourtContext, UnknownPlayerError, get_session_manager

logger = logging.getLogger(__name__)

router = APIRouter(tags=["court-websocket"])


def _state_to_payload(session_id: UUID, context: CourtContext) -> dict:
    """Full state: players plus the heatmap for the current positions."""
    return {
        "session_id": str(session_id),
        **context.to_dict(),
        "field": context.render_field().to_dict(),
    }


def _error(message: str, code: str) -> dict:
    return {"type": "error", "message": message, "code": code}


@router.websocket("/ws/court/{session_id}")
async def court_websocket(websocket: WebSocket, session_id: str) -> None:
    """
    WebSocket endpoint for a court session.

    Client messages:
    - move_player: Pointer moved a player to (x, y)
    - drag_end: Pointer released a player
    - set_auto_rotation: Toggle auto-rotation
    - request_sync: Request full state sync

    Server messages:
    - state_sync: Full state on connect, on request and after each move
    - frame_update: Sent each animation frame while a partner rotates
    - animation_complete: Sent when the rotation finishes
    - error: Error message
    """
    await websocket.accept()

    manager = get_session_manager()

    # Validate session ID
    try:
        uuid = UUID(session_id)
    except ValueError:
        await websocket.send_json(_error("Invalid session ID format", "INVALID_SESSION_ID"))
        await websocket.close()
        return

    session = await manager.get_session(uuid)
    if session is None:
        await websocket.send_json(_error("Session not found", "SESSION_NOT_FOUND"))
        await websocket.close()
        return

    context = session.context

    # Send initial state
    await websocket.send_json({
        "type": "state_sync",
        "payload": _state_to_payload(uuid, context),
    })

    async def send(message_type: str) -> None:
        try:
            await websocket.send_json({
                "type": message_type,
                "payload": _state_to_payload(uuid, context),
            })
        except (WebSocketDisconnect, RuntimeError):
            logger.debug(f"Dropped {message_type} for closed socket on session {uuid}")

    loop = asyncio.get_running_loop()

    def on_frame(ctx: CourtContext) -> None:
        asyncio.run_coroutine_threadsafe(send("frame_update"), loop)

    def on_complete(ctx: CourtContext) -> None:
        asyncio.run_coroutine_threadsafe(send("animation_complete"), loop)

    try:
        while True:
            data = await websocket.receive_text()
            try:
                message = json.loads(data)
            except json.JSONDecodeError:
                await websocket.send_json(_error("Invalid JSON", "INVALID_JSON"))
                continue

            if not isinstance(message, dict):
                await websocket.send_json(_error("Invalid message", "INVALID_MESSAGE"))
                continue

            msg_type = message.get("type")

            try:
                if msg_type == "move_player":
                    move = MovePlayerMessage.model_validate(message)
                    context.set_player_position(move.player_id, move.x, move.y)
                    await send("state_sync")

                elif msg_type == "drag_end":
                    release = DragEndMessage.model_validate(message)
                    plan = context.on_drag_end(release.player_id)
                    await send("state_sync")
                    if plan is not None:
                        await manager.start_animation(uuid, on_frame=on_frame, on_complete=on_complete)

                elif msg_type == "set_auto_rotation":
                    toggle = SetAutoRotationMessage.model_validate(message)
                    context.set_auto_rotation_enabled(toggle.enabled)
                    await send("state_sync")

                elif msg_type == "request_sync":
                    RequestSyncMessage.model_validate(message)
                    await send("state_sync")

                else:
                    await websocket.send_json(
                        _error(f"Unknown message type: {msg_type}", "UNKNOWN_MESSAGE")
                    )

            except ValidationError as e:
                await websocket.send_json(_error(str(e), "INVALID_MESSAGE"))
            except UnknownPlayerError as e:
                await websocket.send_json(_error(f"Player not found: {e.args[0]}", "PLAYER_NOT_FOUND"))

    except WebSocketDisconnect:
        logger.info(f"Client disconnected from court session {uuid}")
    finally:
        # No client left to receive frames
        await manager.stop_animation(uuid)
