"""Drag-driven overlay state and snapping, free of Qt types.

Callers inject the engine, a display-geometry provider and a placement sink;
the manager never talks to a window or a screen directly.
"""
from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from zone_engine.engine import ZoneEngine
from zone_engine.geometry import Point, Rect
from zone_engine.models import WIDE_CENTER, ZoneLayout
from zone_overlay.display import DisplayGeometry
from zone_overlay.drag_events import DragEvent, DragEventKind

ChangeListener = Callable[[ZoneLayout, Optional[int], bool], None]


class OverlayManager:
    """Tracks the active layout and zone during a drag and snaps on drag end."""

    def __init__(
        self,
        engine: ZoneEngine,
        display_provider: Callable[[], DisplayGeometry],
        placement_sink: Callable[[Rect], None],
        layouts: Sequence[ZoneLayout],
        *,
        preferred_layout: Optional[str] = None,
        on_change: Optional[ChangeListener] = None,
        log_fn: Optional[Callable[..., None]] = None,
    ) -> None:
        self._engine = engine
        self._display_provider = display_provider
        self._placement_sink = placement_sink
        self._on_change = on_change
        self._log_fn = log_fn
        self._layouts: List[ZoneLayout] = list(layouts)
        self._current = self._pick_layout(preferred_layout)
        self._active_index: Optional[int] = None
        self._visible = False

    @property
    def layouts(self) -> List[ZoneLayout]:
        return list(self._layouts)

    @property
    def current_layout(self) -> ZoneLayout:
        return self._current

    @property
    def active_zone_index(self) -> Optional[int]:
        return self._active_index

    @property
    def is_visible(self) -> bool:
        return self._visible

    # Drag events -----------------------------------------------------------

    def handle_event(self, event: DragEvent) -> None:
        if event.kind is DragEventKind.START:
            self.activate_overlay()
            if event.location is not None:
                self.update_pointer(event.location)
        elif event.kind is DragEventKind.MOVE:
            if event.location is not None:
                self.update_pointer(event.location)
        elif event.kind is DragEventKind.END:
            if event.location is not None:
                self.update_pointer(event.location)
            # The hide below is the single notification for the drag end.
            self._snap_active_zone()
            self.deactivate_overlay()
        elif event.kind is DragEventKind.CANCEL:
            self.deactivate_overlay()

    def activate_overlay(self) -> None:
        if self._visible:
            return
        self._visible = True
        self._log("Overlay shown (layout=%s)", self._current.name)
        self._notify()

    def deactivate_overlay(self) -> None:
        was_visible = self._visible
        self._visible = False
        self._active_index = None
        if was_visible:
            self._log("Overlay hidden")
            self._notify()

    def update_pointer(self, location: Point) -> Optional[int]:
        display = self._display_provider()
        point = self._engine.normalized_layout_point(location, display.frame)
        found = self._engine.active_zone_index(point, self._current)
        if found != self._active_index:
            self._active_index = found
            self._notify()
        return found

    def end_drag(self) -> Optional[Rect]:
        """Hand the active zone's frame to the placement sink; returns the frame."""
        frame = self._snap_active_zone()
        self._notify()
        return frame

    def _snap_active_zone(self) -> Optional[Rect]:
        index = self._active_index
        self._active_index = None
        if index is None:
            self._log("Drag ended outside every zone; nothing to snap")
            return None
        display = self._display_provider()
        zone = self._current.zones[index]
        frame = self._engine.target_frame(zone.rect, display.visible_frame, display.frame, self._current.spacing)
        self._log(
            "Snapping to zone %d of %s: frame=%s",
            index,
            self._current.name,
            frame.as_tuple(),
        )
        try:
            self._placement_sink(frame)
        except Exception as exc:
            self._log("Placement sink failed for frame %s: %s", frame.as_tuple(), exc)
        return frame

    # Layout selection ------------------------------------------------------

    def cycle_layout(self) -> ZoneLayout:
        names = [layout.name for layout in self._layouts]
        if self._current.name not in names:
            self._current = self._layouts[0] if self._layouts else WIDE_CENTER
        else:
            next_index = (names.index(self._current.name) + 1) % len(self._layouts)
            self._current = self._layouts[next_index]
        self._active_index = None
        self._log("Switched layout to: %s", self._current.name)
        self._notify()
        return self._current

    def select_layout(self, name: str) -> bool:
        for layout in self._layouts:
            if layout.name == name:
                self._current = layout
                self._active_index = None
                self._log("Selected layout: %s", name)
                self._notify()
                return True
        self._log("Layout %r not found; keeping %s", name, self._current.name)
        return False

    def reload_layouts(self, layouts: Sequence[ZoneLayout]) -> None:
        self._layouts = list(layouts)
        self._current = self._pick_layout(self._current.name)
        self._active_index = None
        self._log("Reloaded %d layout(s); current=%s", len(self._layouts), self._current.name)
        self._notify()

    # Internals -------------------------------------------------------------

    def _pick_layout(self, name: Optional[str]) -> ZoneLayout:
        if name is not None:
            for layout in self._layouts:
                if layout.name == name:
                    return layout
        return self._layouts[0] if self._layouts else WIDE_CENTER

    def _notify(self) -> None:
        listener = self._on_change
        if listener is None:
            return
        try:
            listener(self._current, self._active_index, self._visible)
        except Exception as exc:
            self._log("Overlay change listener failed: %s", exc)

    def _log(self, message: str, *args: object) -> None:
        if self._log_fn is None:
            return
        try:
            self._log_fn(message, *args)
        except Exception:
            pass
