"""Value-returning edit operations behind the layout editor.

Nothing here mutates a stored layout: every operation returns a new
``ZoneLayout`` (or a new list of layouts) for the caller to swap in.
"""
from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import Iterable, List, Sequence

from zone_engine.geometry import Rect
from zone_engine.models import Zone, ZoneLayout

MIN_ZONE_SIZE = 0.05
MAX_SPACING = 100.0
NEW_LAYOUT_SPACING = 16.0
NEW_LAYOUT_ZONE = Rect(0.25, 0.25, 0.5, 0.5)
ADDED_ZONE = Rect(0.4, 0.4, 0.2, 0.2)


class ResizeHandle(Enum):
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


def new_layout(existing: Sequence[ZoneLayout]) -> ZoneLayout:
    return ZoneLayout(
        name=f"New Layout {len(existing) + 1}",
        spacing=NEW_LAYOUT_SPACING,
        zones=(Zone(rect=NEW_LAYOUT_ZONE),),
    )


def rename_layout(layout: ZoneLayout, name: str) -> ZoneLayout:
    return replace(layout, name=name)


def set_spacing(layout: ZoneLayout, spacing: float) -> ZoneLayout:
    return replace(layout, spacing=min(MAX_SPACING, max(0.0, float(spacing))))


def add_zone(layout: ZoneLayout, rect: Rect = ADDED_ZONE) -> ZoneLayout:
    return replace(layout, zones=layout.zones + (Zone(rect=rect),))


def delete_zone(layout: ZoneLayout, index: int) -> ZoneLayout:
    zones = list(layout.zones)
    del zones[index]
    return replace(layout, zones=tuple(zones))


def update_zone_rect(layout: ZoneLayout, index: int, rect: Rect) -> ZoneLayout:
    """Swap one zone's rect, keeping its id."""
    zones = list(layout.zones)
    zones[index] = replace(zones[index], rect=rect)
    return replace(layout, zones=tuple(zones))


def move_zone(layout: ZoneLayout, index: int, dx: float, dy: float) -> ZoneLayout:
    """Translate a zone by a normalized delta, keeping it inside the layout bounds."""
    rect = layout.zones[index].rect
    new_x = max(0.0, min(1.0 - rect.width, rect.x + dx))
    new_y = max(0.0, min(1.0 - rect.height, rect.y + dy))
    return update_zone_rect(layout, index, Rect(new_x, new_y, rect.width, rect.height))


def resize_zone(layout: ZoneLayout, index: int, handle: ResizeHandle, dx: float, dy: float) -> ZoneLayout:
    """Drag one corner of a zone by a normalized delta.

    Width and height never drop below ``MIN_ZONE_SIZE``.
    """
    rect = layout.zones[index].rect
    x, y, width, height = rect.as_tuple()
    if handle is ResizeHandle.TOP_LEFT:
        x, y, width, height = x + dx, y + dy, width - dx, height - dy
    elif handle is ResizeHandle.TOP_RIGHT:
        y, width, height = y + dy, width + dx, height - dy
    elif handle is ResizeHandle.BOTTOM_LEFT:
        x, width, height = x + dx, width - dx, height + dy
    elif handle is ResizeHandle.BOTTOM_RIGHT:
        width, height = width + dx, height + dy
    width = max(MIN_ZONE_SIZE, width)
    height = max(MIN_ZONE_SIZE, height)
    return update_zone_rect(layout, index, Rect(x, y, width, height))


def replace_layout(layouts: Iterable[ZoneLayout], layout_id: str, layout: ZoneLayout) -> List[ZoneLayout]:
    return [layout if existing.id == layout_id else existing for existing in layouts]


def remove_layout(layouts: Iterable[ZoneLayout], layout_id: str) -> List[ZoneLayout]:
    return [existing for existing in layouts if existing.id != layout_id]
