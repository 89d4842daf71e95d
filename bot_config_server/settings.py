"""Process-level settings, read from the environment on each call."""
from __future__ import annotations
import os

PORT_ENV = "PORT"
CONF_ENV = "BOT_CONFIG_FILE"
DIST_ENV = "BOT_DIST_DIR"
LOG_DIR_ENV = "BOT_LOG_DIR"
LOG_LEVEL_ENV = "BOT_LOG_LEVEL"

DEFAULT_PORT = 3001
CONF_NAME = "bot-config.json"
DIST_NAME = "dist"


def port() -> int:
    try:
        return int(os.environ.get(PORT_ENV) or DEFAULT_PORT)
    except ValueError:
        return DEFAULT_PORT

def config_path() -> str:
    return os.path.abspath(os.environ.get(CONF_ENV) or CONF_NAME)

def dist_dir() -> str:
    return os.path.abspath(os.environ.get(DIST_ENV) or DIST_NAME)

def log_dir():
    return os.environ.get(LOG_DIR_ENV) or None

def log_level() -> str:
    return (os.environ.get(LOG_LEVEL_ENV) or "INFO").upper()
