"""
Centralized logging configuration for wurfl_handsets.

Key behaviors
-------------
* Single entry point via ``get_logger`` so every module shares one format.
* Handlers live on the ``wurfl_handsets`` logger; module loggers propagate.
* Console output at INFO, or DEBUG when the config ``debug`` flag is set.
* Master log file only when ``logging.file`` is configured.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from pathlib import Path
from typing import Dict, List

from wurfl_handsets.config import get_config

BASE_LOGGER_NAME = "wurfl_handsets"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False


def _file_handler(cfg, level: int) -> logging.Handler | None:
    filename = cfg.logging.get("file")
    if not filename:
        return None

    log_dir = Path(cfg.logging.get("dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = cfg.base_dir / log_dir
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_dir / filename, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger() -> Logger:
    """Attach the console and optional file handlers to the package logger once."""
    global _base_configured

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    level_name = str(cfg.logging.get("level", "INFO")).upper()
    debug_enabled = bool(cfg.debug)
    level = logging.DEBUG if debug_enabled else getattr(logging, level_name, logging.INFO)

    base_logger.setLevel(level)
    base_logger.propagate = False

    file_handler = _file_handler(cfg, level)
    if file_handler is not None:
        base_logger.addHandler(file_handler)

    console = StreamHandler()
    console.setLevel(logging.DEBUG if debug_enabled else logging.INFO)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


def get_logger(name: str | None = None) -> Logger:
    """Return a logger that reports through the package handlers."""
    base_logger = _configure_base_logger()
    logger = logging.getLogger(name or BASE_LOGGER_NAME)
    if logger is not base_logger:
        logger.propagate = True

    _logger_cache[logger.name] = logger
    return logger


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
