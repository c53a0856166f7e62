"""Shuttle - doubles badminton coverage and auto-rotation engine."""

__version__ = "0.1.0"
