from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from zone_engine.engine import ZoneEngine
from zone_engine.geometry import Point, Rect
from zone_engine.models import ZoneLayout
from zone_overlay.client_config import load_settings, resolve_settings_path
from zone_overlay.display import DisplayGeometry, QtDisplayProvider
from zone_overlay.layout_repository import LayoutRepository, resolve_layouts_path
from zone_overlay.logging_utils import LOGGER_NAME, configure_logging

_LOGGER = logging.getLogger(LOGGER_NAME)


def _parse_numbers(raw: str, count: int) -> List[float]:
    parts = [part.strip() for part in raw.split(",")]
    if len(parts) != count:
        raise argparse.ArgumentTypeError(f"expected {count} comma-separated numbers, got {raw!r}")
    try:
        return [float(part) for part in parts]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number in {raw!r}") from exc


def parse_rect(raw: str) -> Rect:
    return Rect(*_parse_numbers(raw, 4))


def parse_point(raw: str) -> Point:
    return Point(*_parse_numbers(raw, 2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Modern Zones layout inspector")
    parser.add_argument("--list", action="store_true", help="List available layouts")
    parser.add_argument("--layout", help="Layout name to inspect (defaults to the preferred layout)")
    parser.add_argument("--frames", action="store_true", help="Print the window frame of every zone")
    parser.add_argument("--point", type=parse_point, help="Hit-test a pointer position X,Y (bottom-left origin)")
    parser.add_argument("--display", type=parse_rect, help="Display frame X,Y,W,H (bottom-left origin)")
    parser.add_argument("--visible", type=parse_rect, help="Visible frame X,Y,W,H (bottom-left origin)")
    parser.add_argument("--layouts-file", type=Path, help="Path to layouts.json")
    parser.add_argument("--settings", type=Path, help="Path to settings.json")
    parser.add_argument("--log-dir", type=Path, help="Directory for the rotating log file")
    return parser


def resolve_display(display: Optional[Rect], visible: Optional[Rect]) -> DisplayGeometry:
    """Use explicit geometry when given, otherwise ask Qt for the primary screen."""
    if display is not None:
        return DisplayGeometry(frame=display, visible_frame=visible if visible is not None else display)
    from PyQt6.QtGui import QGuiApplication

    app = QGuiApplication.instance()
    if app is None:
        app = QGuiApplication(sys.argv[:1])
    geometry = QtDisplayProvider()()
    if visible is not None:
        geometry = DisplayGeometry(frame=geometry.frame, visible_frame=visible)
    return geometry


def _find_layout(layouts: Sequence[ZoneLayout], name: Optional[str]) -> Optional[ZoneLayout]:
    if name is None:
        return layouts[0] if layouts else None
    return next((layout for layout in layouts if layout.name == name), None)


def _format_rect(rect: Rect) -> str:
    return "x={:.1f} y={:.1f} w={:.1f} h={:.1f}".format(*rect.as_tuple())


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings_path = args.settings or resolve_settings_path()
    settings = load_settings(settings_path)
    configure_logging(debug_enabled=settings.debug, retention=settings.log_retention, log_dir=args.log_dir)

    repository = LayoutRepository(args.layouts_file or resolve_layouts_path(), logger=_LOGGER)
    layouts = repository.get_all_layouts()
    _LOGGER.debug("Loaded settings from %s; %d layout(s) available", settings_path, len(layouts))

    if args.list:
        for layout in layouts:
            print(f"{layout.name}: {len(layout.zones)} zone(s), spacing {layout.spacing:g}")
        if not (args.frames or args.point):
            return 0

    layout = _find_layout(layouts, args.layout or settings.preferred_layout)
    if layout is None and args.layout is None:
        layout = _find_layout(layouts, None)
    if layout is None:
        print(f"Unknown layout: {args.layout or settings.preferred_layout}", file=sys.stderr)
        return 2

    if not (args.frames or args.point):
        return 0

    display = resolve_display(args.display, args.visible)
    engine = ZoneEngine()

    if args.frames:
        print(f"{layout.name} on display {_format_rect(display.frame)}")
        for index in range(len(layout.zones)):
            frame = engine.frame_for_zone(layout, index, display.visible_frame, display.frame)
            print(f"  zone {index}: {_format_rect(frame)}")

    if args.point is not None:
        point = engine.normalized_layout_point(args.point, display.frame)
        index = engine.active_zone_index(point, layout)
        location = f"({point.x:.3f}, {point.y:.3f})"
        if index is None:
            print(f"{location}: no zone")
        else:
            print(f"{location}: zone {index}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
