"""Coordinate conversion, hit testing and target-frame math for zone snapping.

Three coordinate spaces meet here:

- host-native pointer space: origin at the bottom-left of the primary display,
  Y increasing upward (pointer positions, display and visible frames);
- normalized layout space: origin at the top-left, ``[0, 1]`` on both axes,
  Y increasing downward (zone rects);
- window-placement space: origin at the top-left, absolute points
  (the rect handed to whatever moves the window).

Everything in this module is a pure function of its arguments.
"""
from __future__ import annotations

from typing import Optional

from zone_engine.geometry import ORIGIN, Point, Rect
from zone_engine.models import ZoneLayout


def normalized_layout_point(pointer: Point, display_frame: Rect) -> Point:
    """Map a host-native pointer position into normalized layout space.

    The result is not clamped: pointers outside ``display_frame`` map outside
    ``[0, 1]``. A display with zero or negative width or height maps every
    pointer to the origin.
    """
    if display_frame.width <= 0 or display_frame.height <= 0:
        return ORIGIN
    nx = (pointer.x - display_frame.x) / display_frame.width
    # Pointer Y grows upward, layout Y grows downward.
    ny = 1.0 - (pointer.y - display_frame.y) / display_frame.height
    return Point(nx, ny)


def active_zone_index(point: Point, layout: ZoneLayout) -> Optional[int]:
    """Return the index of the first zone containing ``point``, or ``None``.

    Containment is closed on the min edge and open on the max edge, so a point
    on a shared edge belongs to the zone that starts there; where zones
    overlap the earlier-declared zone wins.
    """
    for index, zone in enumerate(layout.zones):
        if zone.rect.contains(point):
            return index
    return None


def target_frame(zone_rect: Rect, visible_frame: Rect, display_frame: Rect, spacing: float) -> Rect:
    """Convert a normalized zone rect into an absolute window-placement rect.

    Args:
        zone_rect: Normalized zone rect (top-left origin).
        visible_frame: Usable display area, host-native (bottom-left origin).
        display_frame: Full display bounds, host-native (bottom-left origin).
        spacing: Gap in points; half of it is inset on every side.

    Returns:
        Rect in window-placement space (top-left origin).
    """
    width = zone_rect.width * visible_frame.width
    height = zone_rect.height * visible_frame.height
    x = visible_frame.x + zone_rect.x * visible_frame.width
    # Zone y=0 is the top of the visible area, which is its highest native Y.
    native_y = visible_frame.y + (1.0 - zone_rect.y - zone_rect.height) * visible_frame.height

    inset = Rect(x, native_y, width, height).inset_by(spacing / 2.0, spacing / 2.0)

    placement_y = display_frame.height - (inset.y + inset.height)
    return Rect(inset.x, placement_y, inset.width, inset.height)


def overlay_zone_rect(zone_rect: Rect, width: float, height: float, spacing: float) -> Rect:
    """Rect a zone occupies inside a top-left overlay surface of ``width`` x ``height``."""
    scaled = Rect(
        zone_rect.x * width,
        zone_rect.y * height,
        zone_rect.width * width,
        zone_rect.height * height,
    )
    return scaled.inset_by(spacing / 2.0, spacing / 2.0)


class ZoneEngine:
    """Stateless facade over the zone math, for injection into services."""

    def normalized_layout_point(self, pointer: Point, display_frame: Rect) -> Point:
        return normalized_layout_point(pointer, display_frame)

    def active_zone_index(self, point: Point, layout: ZoneLayout) -> Optional[int]:
        return active_zone_index(point, layout)

    def target_frame(self, zone_rect: Rect, visible_frame: Rect, display_frame: Rect, spacing: float) -> Rect:
        return target_frame(zone_rect, visible_frame, display_frame, spacing)

    def zone_at_pointer(self, pointer: Point, display_frame: Rect, layout: ZoneLayout) -> Optional[int]:
        """Convert and hit-test in one step."""
        return active_zone_index(normalized_layout_point(pointer, display_frame), layout)

    def frame_for_zone(
        self,
        layout: ZoneLayout,
        index: int,
        visible_frame: Rect,
        display_frame: Rect,
    ) -> Rect:
        zone = layout.zones[index]
        return target_frame(zone.rect, visible_frame, display_frame, layout.spacing)
