"""Tests for runtime configuration."""

from shuttle.config import ShuttleConfig, get_config, reset_config


class TestShuttleConfig:
    """Tests for ShuttleConfig."""

    def test_defaults(self):
        config = ShuttleConfig()
        assert config.api_port == 8000
        assert config.frame_ms == 16
        assert config.rotation_ms == 300
        assert config.auto_rotation is True
        assert config.validate() == []

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("SHUTTLE_API_PORT", "9100")
        monkeypatch.setenv("SHUTTLE_AUTO_ROTATION", "FALSE")
        config = ShuttleConfig.from_env()
        assert config.api_port == 9100
        assert config.auto_rotation is False

    def test_validate_reports_errors(self):
        config = ShuttleConfig(api_port=0, frame_ms=0, rotation_ms=-1, log_level="LOUD")
        errors = config.validate()
        assert len(errors) == 4

    def test_singleton(self, monkeypatch):
        first = get_config()
        assert get_config() is first

        monkeypatch.setenv("SHUTTLE_FRAME_MS", "33")
        reset_config()
        assert get_config().frame_ms == 33
