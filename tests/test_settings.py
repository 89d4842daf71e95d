"""
Tests for process settings and logger setup.
"""

import logging
import logging.handlers
import os

from bot_config_server import settings
from bot_config_server.logging_utils import configure, get_logger


class TestSettings:

    def test_defaults(self, monkeypatch):
        for var in ("PORT", "BOT_CONFIG_FILE", "BOT_DIST_DIR", "BOT_LOG_DIR", "BOT_LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)
        assert settings.port() == 3001
        assert settings.config_path() == os.path.abspath("bot-config.json")
        assert settings.dist_dir() == os.path.abspath("dist")
        assert settings.log_dir() is None
        assert settings.log_level() == "INFO"

    def test_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("BOT_CONFIG_FILE", str(tmp_path / "c.json"))
        monkeypatch.setenv("BOT_LOG_LEVEL", "debug")
        assert settings.port() == 8080
        assert settings.config_path() == str(tmp_path / "c.json")
        assert settings.log_level() == "DEBUG"

    def test_bad_port_falls_back(self, monkeypatch):
        monkeypatch.setenv("PORT", "not-a-port")
        assert settings.port() == 3001


class TestLogger:

    def test_children_of_package_logger(self):
        assert get_logger("config").name == "bot_config_server.config"
        assert get_logger("bot_config_server.app").name == "bot_config_server.app"

    def test_configure_with_file(self, tmp_path):
        root = logging.getLogger("bot_config_server")
        saved = root.handlers[:]
        root.handlers = []
        try:
            configure("DEBUG", str(tmp_path / "logs"))
            assert root.level == logging.DEBUG
            assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers)
            assert (tmp_path / "logs" / "bot_config_server.log").exists()
        finally:
            for h in root.handlers:
                h.close()
            root.handlers = saved
            root.setLevel(logging.NOTSET)
