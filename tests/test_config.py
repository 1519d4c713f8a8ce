"""Test configuration loading."""
import json
import pytest

from pyroshow.core.config import (
    Settings, ConfigError, load_settings, SCREEN_WIDTH, SCREEN_HEIGHT, FPS,
)


class TestSettings:
    """Tests for Settings and load_settings."""

    def test_defaults(self):
        settings = load_settings()
        assert settings.width == SCREEN_WIDTH == 800
        assert settings.height == SCREEN_HEIGHT == 600
        assert settings.fps == FPS == 60

    def test_load_overrides(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"width": 1024, "fps": 30, "title": "New Year"}))
        settings = load_settings(path)
        assert settings == Settings(width=1024, height=600, fps=30, title="New Year")

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"rocket_speed": 5}))
        with pytest.raises(ConfigError, match="rocket_speed"):
            load_settings(path)

    @pytest.mark.parametrize("data", [
        {"width": 0},
        {"height": -5},
        {"fps": 12.5},
        {"fps": True},
        {"title": 3},
    ])
    def test_invalid_values(self, tmp_path, data):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(data))
        with pytest.raises(ConfigError):
            load_settings(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{width: 800")
        with pytest.raises(ConfigError, match="invalid JSON"):
            load_settings(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("[800, 600]")
        with pytest.raises(ConfigError, match="JSON object"):
            load_settings(path)

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)
