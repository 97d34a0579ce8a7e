"""Pure zone geometry: models, coordinate conversion, hit testing and frame math."""
from __future__ import annotations

from zone_engine.engine import (
    ZoneEngine,
    active_zone_index,
    normalized_layout_point,
    overlay_zone_rect,
    target_frame,
)
from zone_engine.geometry import ORIGIN, Point, Rect
from zone_engine.models import (
    DEFAULT_LAYOUTS,
    PRIORITY_GRID,
    THREE_COLUMN,
    TWO_BY_TWO,
    WIDE_CENTER,
    Zone,
    ZoneLayout,
)
from zone_engine.serialization import LayoutDecodeError, dump_layouts, load_layouts

__all__ = [
    "DEFAULT_LAYOUTS",
    "LayoutDecodeError",
    "ORIGIN",
    "PRIORITY_GRID",
    "Point",
    "Rect",
    "THREE_COLUMN",
    "TWO_BY_TWO",
    "WIDE_CENTER",
    "Zone",
    "ZoneEngine",
    "ZoneLayout",
    "active_zone_index",
    "dump_layouts",
    "load_layouts",
    "normalized_layout_point",
    "overlay_zone_rect",
    "target_frame",
]
