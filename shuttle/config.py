"""
Runtime configuration.

Controls the API server, animation timing and logging.
All settings can be overridden via environment variables.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ShuttleConfig:
    """Configuration for the court engine and its API."""

    # API server
    api_host: str = field(default_factory=lambda: os.getenv("SHUTTLE_API_HOST", "127.0.0.1"))
    api_port: int = field(default_factory=lambda: int(os.getenv("SHUTTLE_API_PORT", "8000")))

    # Animation
    frame_ms: int = field(default_factory=lambda: int(os.getenv("SHUTTLE_FRAME_MS", "16")))  # ~60 fps
    rotation_ms: int = field(default_factory=lambda: int(os.getenv("SHUTTLE_ROTATION_MS", "300")))

    # Feature flag - auto-rotation is on for new sessions by default
    auto_rotation: bool = field(
        default_factory=lambda: os.getenv("SHUTTLE_AUTO_ROTATION", "true").lower() == "true"
    )

    log_level: str = field(default_factory=lambda: os.getenv("SHUTTLE_LOG_LEVEL", "INFO"))

    @classmethod
    def from_env(cls) -> "ShuttleConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if not 0 < self.api_port < 65536:
            errors.append("SHUTTLE_API_PORT must be between 1 and 65535")
        if self.frame_ms <= 0:
            errors.append("SHUTTLE_FRAME_MS must be positive")
        if self.rotation_ms < 0:
            errors.append("SHUTTLE_ROTATION_MS must not be negative")
        if logging.getLevelName(self.log_level.upper()) not in (
            logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL,
        ):
            errors.append(f"Unknown SHUTTLE_LOG_LEVEL: {self.log_level}")
        return errors


# Singleton config instance
_config: Optional[ShuttleConfig] = None


def get_config() -> ShuttleConfig:
    """Get the global configuration."""
    global _config
    if _config is None:
        _config = ShuttleConfig.from_env()
    return _config


def reset_config() -> None:
    """
    Drop the cached configuration so the next get_config() re-reads the
    environment. Useful for testing.
    """
    global _config
    _config = None


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging for the CLI and API entry points."""
    logging.basicConfig(
        level=(level or get_config().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
