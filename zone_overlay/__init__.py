"""Services around the zone engine: drag tracking, overlay state, layouts and settings.

Qt-backed pieces live in ``zone_overlay.display`` (lazy) and
``zone_overlay.event_channel`` and are not imported here.
"""
from __future__ import annotations

from zone_overlay.drag_events import DragEvent, DragEventKind
from zone_overlay.input_monitor import DragTracker
from zone_overlay.layout_repository import LayoutRepository
from zone_overlay.overlay_manager import OverlayManager

__all__ = [
    "DragEvent",
    "DragEventKind",
    "DragTracker",
    "LayoutRepository",
    "OverlayManager",
]
