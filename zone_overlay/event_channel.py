"""Qt signal channel that hands drag events to the GUI thread."""
from __future__ import annotations

from typing import Callable

from PyQt6.QtCore import QObject, Qt, pyqtSignal

from zone_overlay.drag_events import DragEvent


class DragEventChannel(QObject):
    """Delivers drag events in publish order; cross-thread publishes are queued."""

    drag_event = pyqtSignal(object)

    def publish(self, event: DragEvent) -> None:
        self.drag_event.emit(event)

    def subscribe(self, handler: Callable[[DragEvent], None], *, queued: bool = False) -> None:
        if queued:
            self.drag_event.connect(handler, Qt.ConnectionType.QueuedConnection)
        else:
            self.drag_event.connect(handler)
