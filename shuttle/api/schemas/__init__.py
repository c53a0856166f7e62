"""Pydantic schemas for API request/response models."""

from shuttle.api.schemas.court import (
    AdvanceRequest,
    CreateSessionRequest,
    DragEndMessage,
    DragEndResponse,
    FieldResponse,
    HeatCellSchema,
    MovePlayerMessage,
    PlayerSchema,
    Position2DSchema,
    RequestSyncMessage,
    RotationPlanSchema,
    SessionResponse,
    SetAutoRotationMessage,
    SetAutoRotationRequest,
    SetPositionRequest,
)

__all__ = [
    "AdvanceRequest",
    "CreateSessionRequest",
    "DragEndMessage",
    "DragEndResponse",
    "FieldResponse",
    "HeatCellSchema",
    "MovePlayerMessage",
    "PlayerSchema",
    "Position2DSchema",
    "RequestSyncMessage",
    "RotationPlanSchema",
    "SessionResponse",
    "SetAutoRotationMessage",
    "SetAutoRotationRequest",
    "SetPositionRequest",
]
