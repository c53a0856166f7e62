"""API routers for different resource types."""

from shuttle.api.routers.court import router as court_router
from shuttle.api.routers.court_websocket import router as court_websocket_router

__all__ = [
    "court_router",
    "court_websocket_router",
]
