"""Shared logger setup.

Every module asks for a child of the ``bot_config_server`` logger so handlers
are attached exactly once, on the package root.
"""
from __future__ import annotations
import logging
import logging.handlers
import os
import pathlib
from typing import Optional

ROOT = "bot_config_server"
FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def get_logger(name: str = ROOT) -> logging.Logger:
    if name != ROOT and not name.startswith(ROOT + "."):
        name = f"{ROOT}.{name}"
    return logging.getLogger(name)


def configure(level: str = "INFO", log_dir: Optional[str] = None) -> logging.Logger:
    """Attach console and (optionally) rotating file handlers to the root logger.

    Safe to call more than once; existing handlers are left in place.
    """
    logger = logging.getLogger(ROOT)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return logger

    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter(FORMAT))
    logger.addHandler(ch)

    if log_dir:
        pathlib.Path(log_dir).mkdir(parents=True, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, f"{ROOT}.log"),
            maxBytes=5_000_000, backupCount=5, encoding="utf-8",
        )
        fh.setFormatter(logging.Formatter(FORMAT))
        logger.addHandler(fh)
    return logger
