"""Unit tests for settings and logging configuration."""

import logging

from media_picker.config import Settings
from media_picker.utils.logging_config import configure_logging


class TestSettings:
    """Test Settings loading."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.max_selectable == 9
        assert settings.max_video_duration is None
        assert settings.effective_log_level() == "INFO"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("MAX_SELECTABLE", "4")
        monkeypatch.setenv("MAX_VIDEO_DURATION", "15.5")

        settings = Settings(_env_file=None)

        assert settings.max_selectable == 4
        assert settings.max_video_duration == 15.5

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("MIN_IMAGE_WIDTH=320\nUNKNOWN_KEY=ignored\n", encoding="utf-8")

        settings = Settings(_env_file=str(env_file))

        assert settings.min_image_width == 320

    def test_debug_forces_debug_level(self):
        assert Settings(_env_file=None, debug=True, log_level="WARNING").effective_log_level() == "DEBUG"


class TestLogging:
    """Test configure_logging."""

    def test_configure_level_and_stream(self, capsys):
        configure_logging("warning", stream=None)
        root = logging.getLogger()
        try:
            assert root.level == logging.WARNING
            logging.getLogger("media_picker.test").warning("hello")
            assert "hello" in capsys.readouterr().out
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
            root.setLevel(logging.WARNING)
