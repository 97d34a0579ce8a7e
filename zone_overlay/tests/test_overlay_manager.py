from __future__ import annotations

import types

import pytest

from zone_engine.engine import ZoneEngine
from zone_engine.geometry import Point, Rect
from zone_engine.models import DEFAULT_LAYOUTS, PRIORITY_GRID, TWO_BY_TWO, WIDE_CENTER, ZoneLayout
from zone_overlay.display import DisplayGeometry
from zone_overlay.drag_events import DragEvent, DragEventKind
from zone_overlay.input_monitor import DragTracker
from zone_overlay.overlay_manager import OverlayManager

DISPLAY = DisplayGeometry(frame=Rect(0, 0, 2560, 1440), visible_frame=Rect(0, 0, 2560, 1415))

# Host-native pointer positions (bottom-left origin) over the Priority Grid columns.
LEFT = Point(320, 720)
CENTER = Point(1280, 720)
RIGHT = Point(2240, 720)


def _build_manager(layouts=DEFAULT_LAYOUTS, *, preferred="Priority Grid", sink_error=None):
    calls = types.SimpleNamespace(placed=[], changes=[], logs=[])

    def sink(frame: Rect) -> None:
        calls.placed.append(frame)
        if sink_error is not None:
            raise sink_error

    manager = OverlayManager(
        ZoneEngine(),
        lambda: DISPLAY,
        sink,
        layouts,
        preferred_layout=preferred,
        on_change=lambda layout, index, visible: calls.changes.append((layout.name, index, visible)),
        log_fn=lambda msg, *args: calls.logs.append(msg % args),
    )
    return manager, calls


def test_preferred_layout_is_selected() -> None:
    manager, _ = _build_manager()
    assert manager.current_layout == PRIORITY_GRID
    assert manager.is_visible is False
    assert manager.active_zone_index is None


def test_unknown_preferred_layout_falls_back_to_first() -> None:
    manager, _ = _build_manager(preferred="Nope")
    assert manager.current_layout == WIDE_CENTER


def test_empty_layout_list_falls_back_to_wide_center() -> None:
    manager, _ = _build_manager(layouts=[], preferred=None)
    assert manager.current_layout == WIDE_CENTER
    assert manager.cycle_layout() == WIDE_CENTER


def test_drag_over_center_snaps_to_center_zone() -> None:
    manager, calls = _build_manager()

    manager.handle_event(DragEvent(DragEventKind.START, LEFT))
    assert manager.is_visible
    assert manager.active_zone_index == 0
    manager.handle_event(DragEvent(DragEventKind.MOVE, CENTER))
    assert manager.active_zone_index == 1
    manager.handle_event(DragEvent(DragEventKind.END, CENTER))

    assert len(calls.placed) == 1
    assert calls.placed[0].as_tuple() == pytest.approx((648, 33, 1264, 1399))
    assert manager.is_visible is False
    assert manager.active_zone_index is None


def test_change_listener_fires_only_when_index_changes() -> None:
    manager, calls = _build_manager()
    manager.activate_overlay()
    calls.changes.clear()

    manager.update_pointer(LEFT)
    manager.update_pointer(Point(330, 700))
    manager.update_pointer(RIGHT)

    assert calls.changes == [("Priority Grid", 0, True), ("Priority Grid", 2, True)]


def test_cancel_hides_without_snapping() -> None:
    manager, calls = _build_manager()
    manager.handle_event(DragEvent(DragEventKind.START, CENTER))
    manager.handle_event(DragEvent(DragEventKind.CANCEL))
    assert calls.placed == []
    assert manager.is_visible is False
    assert manager.active_zone_index is None


def test_end_outside_every_zone_does_not_snap() -> None:
    manager, calls = _build_manager()
    manager.handle_event(DragEvent(DragEventKind.START, CENTER))
    manager.handle_event(DragEvent(DragEventKind.END, Point(5000, 720)))
    assert calls.placed == []
    assert any("outside every zone" in entry for entry in calls.logs)


def test_placement_failure_is_logged_and_drag_finishes() -> None:
    manager, calls = _build_manager(sink_error=RuntimeError("AX denied"))
    manager.handle_event(DragEvent(DragEventKind.START, LEFT))
    manager.handle_event(DragEvent(DragEventKind.END, LEFT))
    assert len(calls.placed) == 1
    assert manager.is_visible is False
    assert any("AX denied" in entry for entry in calls.logs)


def test_listener_failure_does_not_break_state_machine() -> None:
    def broken(layout, index, visible):
        raise ValueError("render failed")

    placed = []
    manager = OverlayManager(ZoneEngine(), lambda: DISPLAY, placed.append, [PRIORITY_GRID], on_change=broken)
    manager.handle_event(DragEvent(DragEventKind.START, RIGHT))
    manager.handle_event(DragEvent(DragEventKind.END, RIGHT))
    assert len(placed) == 1
    assert placed[0].x == pytest.approx(1928)


def test_cycle_layout_wraps_around() -> None:
    manager, calls = _build_manager(preferred="2x2 Grid")
    assert manager.cycle_layout() == WIDE_CENTER
    assert manager.cycle_layout() == PRIORITY_GRID
    assert "Switched layout to: Priority Grid" in calls.logs


def test_select_layout_by_name() -> None:
    manager, _ = _build_manager()
    assert manager.select_layout("2x2 Grid") is True
    assert manager.current_layout == TWO_BY_TWO
    assert manager.select_layout("Missing") is False
    assert manager.current_layout == TWO_BY_TWO


def test_reload_keeps_current_layout_by_name() -> None:
    manager, _ = _build_manager()
    edited = ZoneLayout(name="Priority Grid", spacing=0, zones=PRIORITY_GRID.zones)
    manager.reload_layouts([WIDE_CENTER, edited])
    assert manager.current_layout is edited


def test_reload_without_current_layout_resets_to_first() -> None:
    manager, _ = _build_manager()
    manager.reload_layouts([TWO_BY_TWO, WIDE_CENTER])
    assert manager.current_layout == TWO_BY_TWO


def test_tracker_feeds_manager_end_to_end() -> None:
    manager, calls = _build_manager()
    tracker = DragTracker(manager.handle_event)

    tracker.mouse_dragged(LEFT, {"shift"})
    tracker.mouse_dragged(RIGHT, {"shift"})
    tracker.mouse_up(RIGHT)

    assert len(calls.placed) == 1
    assert calls.placed[0].as_tuple() == pytest.approx((1928, 33, 624, 1399))
    assert calls.changes[-1] == ("Priority Grid", None, False)


def test_drag_end_produces_single_hide_notification() -> None:
    manager, calls = _build_manager()
    manager.handle_event(DragEvent(DragEventKind.START, CENTER))
    calls.changes.clear()

    manager.handle_event(DragEvent(DragEventKind.END, CENTER))

    assert calls.changes == [("Priority Grid", None, False)]
    assert len(calls.placed) == 1


def test_direct_end_drag_notifies_once() -> None:
    manager, calls = _build_manager()
    manager.handle_event(DragEvent(DragEventKind.START, LEFT))
    calls.changes.clear()

    frame = manager.end_drag()

    assert frame is not None
    assert calls.changes == [("Priority Grid", None, True)]
