"""FastAPI application for the Shuttle court engine."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shuttle import __version__
from shuttle.api.routers import court_router, court_websocket_router
from shuttle.config import configure_logging, get_config
from shuttle.simulation import get_session_manager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Shuttle API starting up...")
    yield
    logger.info("Shuttle API shutting down...")
    await get_session_manager().cleanup_all()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Shuttle API",
        description="Doubles badminton coverage and auto-rotation API",
        version=__version__,
        lifespan=lifespan,
    )

    # Configure CORS for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",  # Vite dev server
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(court_router, prefix="/api/v1")
    app.include_router(court_websocket_router)

    return app


# Create app instance
app = create_app()


@app.get("/")
async def root() -> dict:
    """Root endpoint - API info."""
    return {
        "name": "Shuttle API",
        "version": __version__,
        "description": "Doubles badminton coverage and auto-rotation",
        "docs": "/docs",
    }


@app.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    sessions = await get_session_manager().list_sessions()
    return {
        "status": "healthy",
        "active_sessions": len(sessions),
    }


def run_api(host: Optional[str] = None, port: Optional[int] = None, reload: bool = False) -> None:
    """Run the API server."""
    config = get_config()
    configure_logging(config.log_level)
    uvicorn.run(
        "shuttle.api.main:app",
        host=host or config.api_host,
        port=port or config.api_port,
        reload=reload,
    )


if __name__ == "__main__":
    run_api(reload=True)
