from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from zone_engine.geometry import Point


class DragEventKind(Enum):
    START = "start"
    MOVE = "move"
    END = "end"
    CANCEL = "cancel"


@dataclass(frozen=True)
class DragEvent:
    """One step of a modifier drag; ``location`` is in host-native pointer coordinates."""

    kind: DragEventKind
    location: Optional[Point] = None
