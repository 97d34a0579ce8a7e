"""Display geometry in host-native coordinates, plus PyQt6-backed providers.

Host-native coordinates put the origin at the bottom-left of the primary
display with Y increasing upward. Qt reports global geometry with the origin
at the top-left of the primary screen and Y increasing downward, so every
value read from Qt is flipped against the primary screen height.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from zone_engine.geometry import Point, Rect

if TYPE_CHECKING:
    from PyQt6.QtCore import QPoint, QRect


@dataclass(frozen=True)
class DisplayGeometry:
    frame: Rect
    visible_frame: Rect


def qt_to_native_rect(x: float, y: float, width: float, height: float, primary_height: float) -> Rect:
    return Rect(float(x), float(primary_height) - (float(y) + float(height)), float(width), float(height))


def qt_to_native_point(x: float, y: float, primary_height: float) -> Point:
    return Point(float(x), float(primary_height) - float(y))


def _rect_from_qrect(rect: "QRect", primary_height: float) -> Rect:
    return qt_to_native_rect(rect.x(), rect.y(), rect.width(), rect.height(), primary_height)


def _require_primary_screen():
    from PyQt6.QtGui import QGuiApplication

    screen = QGuiApplication.primaryScreen()
    if screen is None:
        raise RuntimeError("No primary screen available; is a QGuiApplication running?")
    return screen


class QtDisplayProvider:
    """Reads the primary screen's full and available geometry."""

    def __call__(self) -> DisplayGeometry:
        screen = _require_primary_screen()
        full = screen.geometry()
        primary_height = full.height()
        return DisplayGeometry(
            frame=_rect_from_qrect(full, primary_height),
            visible_frame=_rect_from_qrect(screen.availableGeometry(), primary_height),
        )


class QtPointerProvider:
    """Reads the global cursor position in host-native coordinates."""

    def __init__(self, primary_height: Optional[float] = None) -> None:
        self._primary_height = primary_height

    def __call__(self) -> Point:
        from PyQt6.QtGui import QCursor

        height = self._primary_height
        if height is None:
            height = _require_primary_screen().geometry().height()
        pos: "QPoint" = QCursor.pos()
        return qt_to_native_point(pos.x(), pos.y(), height)
