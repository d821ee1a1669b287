"""Marker records placed on a video frame.

Markers are immutable value records. Editing a marker means building a new
one; ``with_position`` returns a copy at another position.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, replace
from enum import Enum
from typing import Any, Optional


class AntActivity(str, Enum):
    """What the observed ant is doing."""

    WALKING = "Walking"
    STANDING = "Standing"
    CARRYING = "Carrying"
    DIGGING = "Digging"
    GROOMING = "Grooming"


class AntLocation(str, Enum):
    """Where in the nest the observed ant is."""

    ENTRANCE_CHAMBER = "EntranceChamber"
    AT_EXIT = "AtExit"
    AT_TUNNEL = "AtTunnel"
    EDGE = "Edge"
    OUTSIDE = "Outside"


class InteractionType(str, Enum):
    """Direction of an interaction between two ants."""

    ONE_WAY = "OneWay"
    TWO_WAY = "TwoWay"
    UNKNOWN = "Unknown"


# SVG stroke colors, one per location
LOCATION_COLORS: dict[AntLocation, str] = {
    AntLocation.ENTRANCE_CHAMBER: "#ff3b30",
    AntLocation.AT_EXIT: "#34c759",
    AntLocation.AT_TUNNEL: "#007aff",
    AntLocation.EDGE: "#ffcc00",
    AntLocation.OUTSIDE: "#af52de",
}
INTERACTION_COLOR = "#ff9500"


@dataclass(frozen=True)
class Marker:
    """A single ant observation at an image-space position."""

    x: float
    y: float
    activity: AntActivity
    location: AntLocation
    ant_id: Optional[int] = None

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y

    @property
    def is_interaction(self) -> bool:
        return False

    @property
    def color(self) -> str:
        return LOCATION_COLORS.get(self.location, "#ffffff")

    def with_position(self, x: float, y: float) -> "Marker":
        """Return a copy of this marker moved to (x, y)."""
        return replace(self, x=float(x), y=float(y))

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        # str-valued enums -> plain strings
        for key, value in d.items():
            if isinstance(value, Enum):
                d[key] = value.value
        return d


@dataclass(frozen=True)
class InteractionMarker(Marker):
    """A marker recording an interaction between the focal ant and a second ant."""

    activity2: AntActivity = AntActivity.WALKING
    location2: AntLocation = AntLocation.ENTRANCE_CHAMBER
    interaction_type: InteractionType = InteractionType.UNKNOWN

    @property
    def is_interaction(self) -> bool:
        return True

    @property
    def color(self) -> str:
        return INTERACTION_COLOR
