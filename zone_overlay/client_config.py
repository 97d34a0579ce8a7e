"""Settings and per-user paths for the zone overlay."""
from __future__ import annotations

import json
import os
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

CONFIG_DIR_ENV_VAR = "MODERN_ZONES_CONFIG_DIR"
DEBUG_ENV_VAR = "MODERN_ZONES_DEBUG"
APP_DIR_NAME = "ModernZones"
SETTINGS_FILENAME = "settings.json"

KNOWN_MODIFIERS = ("shift", "option", "control", "command")


@dataclass(frozen=True)
class OverlaySettings:
    """Values used to bootstrap the overlay services."""

    activation_modifiers: Tuple[str, ...] = ("shift", "option")
    preferred_layout: Optional[str] = None
    log_retention: int = 5
    debug: bool = False


def resolve_config_dir() -> Path:
    env_override = os.environ.get(CONFIG_DIR_ENV_VAR)
    if env_override:
        return Path(env_override).expanduser()
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home).expanduser() if config_home else Path.home() / ".config"
    return base / APP_DIR_NAME


def resolve_settings_path(root: Optional[Path] = None) -> Path:
    base = root if root is not None else resolve_config_dir()
    return base / SETTINGS_FILENAME


def debug_forced() -> bool:
    value = os.environ.get(DEBUG_ENV_VAR)
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _coerce_modifiers(raw: Any, fallback: Tuple[str, ...]) -> Tuple[str, ...]:
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, (list, tuple)):
        return fallback
    modifiers = []
    for item in raw:
        token = str(item).strip().lower()
        if token in KNOWN_MODIFIERS and token not in modifiers:
            modifiers.append(token)
    return tuple(modifiers) if modifiers else fallback


def load_settings(settings_path: Path) -> OverlaySettings:
    """Read settings.json, falling back to defaults for anything missing or invalid."""
    defaults = OverlaySettings()
    try:
        raw = settings_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return OverlaySettings(debug=debug_forced())

    try:
        data: Dict[str, Any] = json.loads(raw)
    except json.JSONDecodeError:
        return OverlaySettings(debug=debug_forced())
    if not isinstance(data, dict):
        return OverlaySettings(debug=debug_forced())

    retention = defaults.log_retention
    try:
        retention = int(data.get("log_retention", retention))
    except (TypeError, ValueError):
        retention = defaults.log_retention

    preferred = data.get("preferred_layout")
    if not isinstance(preferred, str) or not preferred.strip():
        preferred = None

    return OverlaySettings(
        activation_modifiers=_coerce_modifiers(data.get("activation_modifiers"), defaults.activation_modifiers),
        preferred_layout=preferred,
        log_retention=max(1, retention),
        debug=bool(data.get("debug", defaults.debug)) or debug_forced(),
    )


def save_settings(settings_path: Path, settings: OverlaySettings) -> None:
    payload = asdict(settings)
    payload["activation_modifiers"] = list(settings.activation_modifiers)
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = settings_path.with_suffix(settings_path.suffix + ".tmp")
    tmp_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
    tmp_path.replace(settings_path)
