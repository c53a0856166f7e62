"""Shuttle API package - FastAPI backend for the court view."""

from shuttle.api.main import app, create_app

__all__ = ["app", "create_app"]
