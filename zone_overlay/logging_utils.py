from __future__ import annotations

import logging
import os
import tempfile
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "ModernZones.Overlay"
LOG_FILENAME = "modern-zones.log"
PROPAGATE_ENV_VAR = "MODERN_ZONES_PROPAGATE_LOGS"
LOG_DIR_ENV_VAR = "MODERN_ZONES_LOG_DIR"

_TRUTHY = {"1", "true", "yes", "on"}


def resolve_logs_dir(log_dir_name: str = "ModernZones") -> Path:
    """
    Resolve the directory to store overlay logs.

    Strategy:
    - Use MODERN_ZONES_LOG_DIR if set.
    - Fall back to XDG state/cache locations, then `cwd/logs/<log_dir_name>`.
    - Final fallback: tempdir/<log_dir_name>.
    """
    candidates = []

    env_override = os.environ.get(LOG_DIR_ENV_VAR)
    if env_override:
        # The override names the final directory, not its parent.
        override = Path(env_override).expanduser()
        try:
            override.mkdir(parents=True, exist_ok=True)
            return override
        except OSError:
            pass

    state_home = Path(os.environ.get("XDG_STATE_HOME", Path.home() / ".local" / "state"))
    cache_home = Path(os.environ.get("XDG_CACHE_HOME", Path.home() / ".cache"))
    candidates.append(state_home / "logs")
    candidates.append(cache_home / "logs")
    candidates.append(Path.cwd() / "logs")

    for base in candidates:
        try:
            target = base / log_dir_name
            target.mkdir(parents=True, exist_ok=True)
            return target
        except OSError:
            continue

    temp_fallback = Path(tempfile.gettempdir()) / log_dir_name
    temp_fallback.mkdir(parents=True, exist_ok=True)
    return temp_fallback


def build_rotating_file_handler(
    log_dir: Path,
    filename: str,
    *,
    retention: int = 5,
    max_bytes: int = 512 * 1024,
    formatter: Optional[logging.Formatter] = None,
) -> logging.Handler:
    """Construct a rotating file handler with sane defaults."""
    retention = max(1, retention)
    backup_count = max(0, retention - 1)
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / filename,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    if formatter is not None:
        handler.setFormatter(formatter)
    return handler


def resolve_log_level(debug_enabled: bool) -> int:
    return logging.DEBUG if debug_enabled else logging.INFO


def configure_logging(
    *,
    debug_enabled: bool,
    retention: int = 5,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """Attach a single rotating file handler to the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_log_level(debug_enabled))
    logger.propagate = os.environ.get(PROPAGATE_ENV_VAR, "").lower() in _TRUTHY
    for existing in list(logger.handlers):
        if isinstance(existing, RotatingFileHandler):
            logger.removeHandler(existing)
            existing.close()
    target_dir = log_dir if log_dir is not None else resolve_logs_dir()
    handler = build_rotating_file_handler(
        target_dir,
        LOG_FILENAME,
        retention=retention,
        formatter=logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s"),
    )
    logger.addHandler(handler)
    logger.debug("Logging to %s (retention=%d debug=%s)", target_dir / LOG_FILENAME, retention, debug_enabled)
    return logger
