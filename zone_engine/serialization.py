"""JSON encoding for zones and layouts.

Layouts are stored as a list of objects::

    [{"name": "...", "spacing": 16.0,
      "zones": [{"id": "...", "rect": {"x": 0.0, "y": 0.0, "width": 0.5, "height": 1.0}}]}]

The decoder also accepts rects written as ``[[x, y], [width, height]]``.
"""
from __future__ import annotations

import json
import math
from typing import Any, Dict, Iterable, List, Mapping

from zone_engine.geometry import Rect
from zone_engine.models import Zone, ZoneLayout


class LayoutDecodeError(ValueError):
    """Raised when persisted layout data cannot be turned back into values."""


def rect_to_dict(rect: Rect) -> Dict[str, float]:
    return {"x": rect.x, "y": rect.y, "width": rect.width, "height": rect.height}


def rect_from_data(data: Any) -> Rect:
    if isinstance(data, Mapping):
        try:
            values = (data["x"], data["y"], data["width"], data["height"])
        except KeyError as exc:
            raise LayoutDecodeError(f"rect is missing field {exc.args[0]!r}") from exc
    elif isinstance(data, (list, tuple)) and len(data) == 2:
        origin, size = data
        if not (isinstance(origin, (list, tuple)) and isinstance(size, (list, tuple))):
            raise LayoutDecodeError(f"unsupported rect encoding: {data!r}")
        if len(origin) != 2 or len(size) != 2:
            raise LayoutDecodeError(f"unsupported rect encoding: {data!r}")
        values = (origin[0], origin[1], size[0], size[1])
    else:
        raise LayoutDecodeError(f"unsupported rect encoding: {data!r}")
    return Rect(*(_finite_float(value, "rect") for value in values))


def zone_to_dict(zone: Zone) -> Dict[str, Any]:
    return {"id": zone.id, "rect": rect_to_dict(zone.rect)}


def zone_from_dict(data: Any) -> Zone:
    if not isinstance(data, Mapping):
        raise LayoutDecodeError(f"zone must be an object, got {type(data).__name__}")
    zone_id = data.get("id")
    if not isinstance(zone_id, str) or not zone_id:
        raise LayoutDecodeError(f"zone id must be a non-empty string, got {zone_id!r}")
    if "rect" not in data:
        raise LayoutDecodeError(f"zone {zone_id} has no rect")
    return Zone(rect=rect_from_data(data["rect"]), id=zone_id)


def layout_to_dict(layout: ZoneLayout) -> Dict[str, Any]:
    return {
        "name": layout.name,
        "spacing": layout.spacing,
        "zones": [zone_to_dict(zone) for zone in layout.zones],
    }


def layout_from_dict(data: Any) -> ZoneLayout:
    if not isinstance(data, Mapping):
        raise LayoutDecodeError(f"layout must be an object, got {type(data).__name__}")
    name = data.get("name")
    if not isinstance(name, str):
        raise LayoutDecodeError(f"layout name must be a string, got {name!r}")
    zones_data = data.get("zones", [])
    if not isinstance(zones_data, list):
        raise LayoutDecodeError(f"layout {name!r} zones must be a list")
    zones = tuple(zone_from_dict(item) for item in zones_data)
    spacing = _finite_float(data.get("spacing", 0.0), "spacing")
    try:
        return ZoneLayout(name=name, spacing=spacing, zones=zones)
    except ValueError as exc:
        raise LayoutDecodeError(f"layout {name!r}: {exc}") from exc


def dump_layouts(layouts: Iterable[ZoneLayout], *, indent: int | None = 2) -> str:
    return json.dumps([layout_to_dict(layout) for layout in layouts], indent=indent)


def load_layouts(text: str) -> List[ZoneLayout]:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LayoutDecodeError(f"invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise LayoutDecodeError("layout JSON is nested too deeply") from exc
    if not isinstance(payload, list):
        raise LayoutDecodeError("layout file must contain a JSON list")
    return [layout_from_dict(item) for item in payload]


def _finite_float(value: Any, label: str) -> float:
    if isinstance(value, bool):
        raise LayoutDecodeError(f"{label} value must be numeric, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise LayoutDecodeError(f"{label} value must be numeric, got {value!r}") from exc
    if not math.isfinite(number):
        raise LayoutDecodeError(f"{label} value must be finite, got {value!r}")
    return number
