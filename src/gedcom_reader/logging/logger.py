"""
Centralized logging configuration for gedcom-reader.

Key behaviors
-------------
* Single entry point via ``get_logger`` to keep handlers/formatters consistent.
* Console logging on the base ``gedcom_reader`` logger; module loggers
  propagate to it.
* Optional master log file (``logs/gedcom_reader.log``), optional rotation and
  optional per-module files, all controlled by ``config/gedcom_reader.yml``.
* The ``debug`` flag forces DEBUG output everywhere.
"""

from __future__ import annotations

import logging
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict

from gedcom_reader.config import get_config

# -----------------------------------------------------------------------------
# Paths and configuration
# -----------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "gedcom_reader"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO
_rotate_logs: bool = False
_per_module_files: bool = False


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _ensure_log_dir() -> Path:
    """Resolve and create the log directory from configuration."""
    cfg = get_config()

    log_dir = Path(cfg.paths.get("logs_dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _build_file_handler(path: Path, level: int) -> logging.Handler:
    """Create a file handler with optional rotation."""
    if _rotate_logs:
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger() -> Logger:
    """Configure the shared base logger once."""
    global _base_configured, _effective_level, _rotate_logs, _per_module_files

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    _rotate_logs = bool(cfg.logging.get("rotate", False))
    _per_module_files = bool(cfg.logging.get("per_module", False))

    level_name = str(cfg.logging.get("level", "INFO")).upper()
    base_level = getattr(logging, level_name, logging.INFO)
    debug_enabled = bool(cfg.debug)

    _effective_level = logging.DEBUG if debug_enabled else base_level

    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    if cfg.logging.get("to_file", False):
        master_path = _ensure_log_dir() / cfg.logging.get("file", "gedcom_reader.log")
        base_logger.addHandler(_build_file_handler(master_path, _effective_level))

    # Console stays quiet below WARNING unless debugging; per-line diagnostics
    # are DEBUG records and belong in the log file.
    console = StreamHandler()
    console.setLevel(logging.DEBUG if debug_enabled else logging.WARNING)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


def _module_handler_exists(logger: Logger) -> bool:
    return any(getattr(h, "is_module_handler", False) for h in logger.handlers)


def _attach_module_handler(logger: Logger, module_name: str) -> None:
    path = _ensure_log_dir() / f"{module_name.replace('.', '_')}.log"

    handler = _build_file_handler(path, _effective_level)
    handler.is_module_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger configured with project-wide handlers.

    * Module loggers (``gedcom_reader.*``) propagate to the base logger.
    * With ``logging.per_module`` enabled each module also gains its own
      file handler: ``logs/<module>.log``.
    """

    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    logger = logging.getLogger(logger_name)

    if logger_name != base_logger.name:
        logger.setLevel(_effective_level)
        if _per_module_files and not _module_handler_exists(logger):
            _attach_module_handler(logger, logger_name)
        logger.propagate = True

    _logger_cache[logger_name] = logger
    return logger


def set_debug(enabled: bool = True) -> None:
    """Switch every cached logger (and the console handler) to DEBUG or back."""
    global _effective_level
    base_logger = _configure_base_logger()
    cfg = get_config()
    level_name = str(cfg.logging.get("level", "INFO")).upper()
    _effective_level = logging.DEBUG if enabled else getattr(logging, level_name, logging.INFO)

    base_logger.setLevel(_effective_level)
    for handler in base_logger.handlers:
        if isinstance(handler, StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(logging.DEBUG if enabled else logging.WARNING)
        else:
            handler.setLevel(_effective_level)
    for logger in _logger_cache.values():
        logger.setLevel(_effective_level)
