"""Zone and layout value types plus the built-in layout presets.

Zones are expressed in normalized layout space: origin at the top-left of the
display, both axes in ``[0, 1]``, Y increasing downward. Both types are frozen;
edits build new values instead of mutating stored ones.
"""
from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from typing import Sequence, Tuple

from zone_engine.geometry import Rect

# Namespace for the deterministic ids handed to preset zones.
_PRESET_NAMESPACE = uuid.UUID("6f1c1f55-3c1e-4c55-9d5a-2a0f4b8e9a10")


def new_zone_id() -> str:
    return str(uuid.uuid4()).upper()


@dataclass(frozen=True)
class Zone:
    rect: Rect
    id: str = field(default_factory=new_zone_id)

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            raise ValueError(f"zone id must be a non-empty string, got {self.id!r}")


@dataclass(frozen=True)
class ZoneLayout:
    """A named, ordered set of zones sharing one spacing value."""

    name: str
    spacing: float
    zones: Tuple[Zone, ...] = ()

    def __post_init__(self) -> None:
        spacing = float(self.spacing)
        if not math.isfinite(spacing) or spacing < 0.0:
            raise ValueError(f"spacing must be a non-negative finite number, got {self.spacing!r}")
        object.__setattr__(self, "spacing", spacing)
        if not isinstance(self.zones, tuple):
            object.__setattr__(self, "zones", tuple(self.zones))

    @property
    def id(self) -> str:
        # The layout-selection code keys layouts by name.
        return self.name


def _preset(name: str, spacing: float, rects: Sequence[Tuple[float, float, float, float]]) -> ZoneLayout:
    zones = tuple(
        Zone(
            rect=Rect.from_tuple(rect),
            id=str(uuid.uuid5(_PRESET_NAMESPACE, f"{name}/{index}")).upper(),
        )
        for index, rect in enumerate(rects)
    )
    return ZoneLayout(name=name, spacing=spacing, zones=zones)


# Left 25% | Center 50% | Right 25%
PRIORITY_GRID = _preset(
    "Priority Grid",
    16,
    [
        (0.00, 0.0, 0.25, 1.0),
        (0.25, 0.0, 0.50, 1.0),
        (0.75, 0.0, 0.25, 1.0),
    ],
)

THREE_COLUMN = _preset(
    "3-Column",
    16,
    [
        (0.000, 0.0, 0.333, 1.0),
        (0.333, 0.0, 0.334, 1.0),
        (0.667, 0.0, 0.333, 1.0),
    ],
)

TWO_BY_TWO = _preset(
    "2x2 Grid",
    16,
    [
        (0.0, 0.0, 0.5, 0.5),
        (0.5, 0.0, 0.5, 0.5),
        (0.0, 0.5, 0.5, 0.5),
        (0.5, 0.5, 0.5, 0.5),
    ],
)

# Left 30% | Center 40% | Right 30%, no gaps
WIDE_CENTER = _preset(
    "Wide Center",
    0,
    [
        (0.0, 0.0, 0.30, 1.0),
        (0.3, 0.0, 0.40, 1.0),
        (0.7, 0.0, 0.30, 1.0),
    ],
)

DEFAULT_LAYOUTS: Tuple[ZoneLayout, ...] = (WIDE_CENTER, PRIORITY_GRID, THREE_COLUMN, TWO_BY_TWO)
