"""Pydantic schemas for the court API."""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class Position2DSchema(BaseModel):
    """2D position on the court."""

    x: float = 0.0
    y: float = 0.0


class PlayerSchema(BaseModel):
    """Schema for a player token."""

    id: str
    label: str
    team: Literal["A", "B"]
    x: float
    y: float
    radius: float
    color: str


class RotationPlanSchema(BaseModel):
    """Partner placement produced by auto-rotation."""

    state: Literal["attack", "net_play", "defense"]
    raw_target: Position2DSchema = Field(..., description="Target from the state formula, before the boundary clamp")
    target: Position2DSchema = Field(..., description="Clamped target the partner animates to")


class CreateSessionRequest(BaseModel):
    """Request to create a new court session."""

    auto_rotation: Optional[bool] = None
    rotation_ms: Optional[int] = Field(default=None, ge=0, le=5000)
    frame_ms: Optional[int] = Field(default=None, ge=5, le=200)


class SessionResponse(BaseModel):
    """Response containing session information."""

    session_id: str
    players: list[PlayerSchema]
    auto_rotation: bool
    is_animating: bool
    last_rotation: Optional[RotationPlanSchema] = None


class SetPositionRequest(BaseModel):
    """Request to move a player (already divided by the display scale)."""

    x: float
    y: float


class DragEndResponse(BaseModel):
    """Result of releasing a player."""

    rotation: Optional[RotationPlanSchema] = None
    session: SessionResponse


class SetAutoRotationRequest(BaseModel):
    """Request to toggle auto-rotation."""

    enabled: bool


class AdvanceRequest(BaseModel):
    """Request to advance animations by one host frame."""

    elapsed_ms: float = Field(gt=0, le=1000)


class HeatCellSchema(BaseModel):
    """A drawable heatmap cell."""

    x: float
    y: float
    alpha: float


class FieldResponse(BaseModel):
    """Heatmap cells and the weakest point."""

    team: Literal["A", "B"]
    step: int
    cells: list[HeatCellSchema]
    furthest_point: Optional[Position2DSchema] = None
    coverage_fraction: float


# WebSocket message types

class WSMessageBase(BaseModel):
    """Base WebSocket message."""

    type: str


class MovePlayerMessage(WSMessageBase):
    """Client message for a pointer move."""

    type: Literal["move_player"] = "move_player"
    player_id: str
    x: float
    y: float


class DragEndMessage(WSMessageBase):
    """Client message for a finished drag."""

    type: Literal["drag_end"] = "drag_end"
    player_id: str


class SetAutoRotationMessage(WSMessageBase):
    """Client message to toggle auto-rotation."""

    type: Literal["set_auto_rotation"] = "set_auto_rotation"
    enabled: bool


class RequestSyncMessage(WSMessageBase):
    """Client message requesting a full state sync."""

    type: Literal["request_sync"] = "request_sync"
