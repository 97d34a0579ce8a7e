from __future__ import annotations

from typing import Callable, Collection, Iterable, Optional

from zone_engine.geometry import Point
from zone_overlay.drag_events import DragEvent, DragEventKind


class DragTracker:
    """Turns raw drag/modifier/mouse-up input into ordered drag events.

    A modifier drag always produces ``START``, zero or more ``MOVE`` and then
    exactly one ``END`` or ``CANCEL``.
    """

    def __init__(
        self,
        emit: Callable[[DragEvent], None],
        *,
        activation_modifiers: Iterable[str] = ("shift", "option"),
        log_fn: Optional[Callable[..., None]] = None,
    ) -> None:
        self._emit = emit
        self._activation_modifiers = frozenset(token.lower() for token in activation_modifiers)
        self._log = log_fn
        self._dragging = False

    @property
    def is_dragging(self) -> bool:
        return self._dragging

    @property
    def activation_modifiers(self) -> frozenset:
        return self._activation_modifiers

    def mouse_dragged(self, location: Point, modifiers: Collection[str]) -> None:
        if self._is_armed(modifiers):
            if not self._dragging:
                self._dragging = True
                self._send(DragEvent(DragEventKind.START, location))
            self._send(DragEvent(DragEventKind.MOVE, location))
        elif self._dragging:
            self._finish(DragEventKind.CANCEL, location, reason="modifier missing during drag")

    def flags_changed(self, modifiers: Collection[str]) -> None:
        if self._dragging and not self._is_armed(modifiers):
            self._finish(DragEventKind.CANCEL, None, reason="modifier released")

    def mouse_up(self, location: Point) -> None:
        if self._dragging:
            self._finish(DragEventKind.END, location, reason="mouse up")

    def reset(self) -> None:
        if self._dragging:
            self._finish(DragEventKind.CANCEL, None, reason="reset")

    def _is_armed(self, modifiers: Collection[str]) -> bool:
        return any(token.lower() in self._activation_modifiers for token in modifiers)

    def _finish(self, kind: DragEventKind, location: Optional[Point], *, reason: str) -> None:
        self._dragging = False
        if self._log is not None:
            self._log("Drag %s (%s)", kind.value, reason)
        self._send(DragEvent(kind, location))

    def _send(self, event: DragEvent) -> None:
        self._emit(event)
