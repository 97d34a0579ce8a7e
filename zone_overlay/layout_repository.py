"""Loads and saves user layouts as JSON in the per-user config directory."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from zone_engine.models import DEFAULT_LAYOUTS, ZoneLayout
from zone_engine.serialization import LayoutDecodeError, dump_layouts, load_layouts
from zone_overlay.client_config import resolve_config_dir
from zone_overlay.logging_utils import LOGGER_NAME

LAYOUTS_FILENAME = "layouts.json"


def resolve_layouts_path(root: Optional[Path] = None) -> Path:
    base = root if root is not None else resolve_config_dir()
    return base / LAYOUTS_FILENAME


def merge_with_defaults(saved: Iterable[ZoneLayout]) -> List[ZoneLayout]:
    """Built-in presets first, then saved layouts; a saved layout replaces a preset of the same name."""
    merged = list(DEFAULT_LAYOUTS)
    positions = {layout.name: index for index, layout in enumerate(merged)}
    seen = set()
    for layout in saved:
        if layout.name in seen:
            continue
        seen.add(layout.name)
        if layout.name in positions:
            merged[positions[layout.name]] = layout
        else:
            positions[layout.name] = len(merged)
            merged.append(layout)
    return merged


class LayoutRepository:
    """Reads and writes the ordered list of user layouts."""

    def __init__(self, path: Path, logger: logging.Logger | None = None) -> None:
        self._path = path
        self._logger = logger or logging.getLogger(LOGGER_NAME)

    @property
    def path(self) -> Path:
        return self._path

    def load_layouts(self) -> List[ZoneLayout]:
        """Return saved layouts; [] when the file is missing or cannot be decoded."""
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as exc:
            self._logger.warning("Failed to read layouts from %s: %s", self._path, exc)
            return []
        except UnicodeDecodeError as exc:
            self._logger.warning("Ignoring unreadable layouts file %s: %s", self._path, exc)
            return []
        try:
            layouts = load_layouts(raw)
        except LayoutDecodeError as exc:
            self._logger.warning("Ignoring unreadable layouts file %s: %s", self._path, exc)
            return []
        self._logger.debug("Loaded %d saved layout(s) from %s", len(layouts), self._path)
        return layouts

    def save_layouts(self, layouts: Iterable[ZoneLayout]) -> None:
        """Write layouts atomically; OSError propagates to the caller."""
        payload = dump_layouts(list(layouts))
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(payload, encoding="utf-8")
        tmp_path.replace(self._path)
        self._logger.debug("Saved layouts to %s", self._path)

    def get_all_layouts(self) -> List[ZoneLayout]:
        return merge_with_defaults(self.load_layouts())
