# framemarker/src/framemarker/frame_viewer/shortcuts.py

from __future__ import annotations

from typing import Optional

from .errors import UnrecognizedShortcut
from .markers import AntActivity, AntLocation, InteractionMarker, InteractionType, Marker

# Single-ant shortcuts: key -> location. Activity is always walking.
SINGLE_ANT_SHORTCUTS: dict[str, AntLocation] = {
    "x": AntLocation.AT_EXIT,
    "e": AntLocation.ENTRANCE_CHAMBER,
    "t": AntLocation.AT_TUNNEL,
    "g": AntLocation.EDGE,
    "o": AntLocation.OUTSIDE,
}
INTERACTION_SHORTCUT = "i"


def marker_from_shortcut(
    key: str,
    x: float,
    y: float,
    ant_id: Optional[int],
) -> Marker:
    """Build the default marker for a typed shortcut character.

    Raises:
        UnrecognizedShortcut: if ``key`` has no template.
    """
    if key == INTERACTION_SHORTCUT:
        # Two-way interaction, both ants walking in the entrance chamber
        return InteractionMarker(
            x=x,
            y=y,
            activity=AntActivity.WALKING,
            location=AntLocation.ENTRANCE_CHAMBER,
            ant_id=ant_id,
            activity2=AntActivity.WALKING,
            location2=AntLocation.ENTRANCE_CHAMBER,
            interaction_type=InteractionType.TWO_WAY,
        )

    location = SINGLE_ANT_SHORTCUTS.get(key)
    if location is None:
        raise UnrecognizedShortcut(key)

    return Marker(
        x=x,
        y=y,
        activity=AntActivity.WALKING,
        location=location,
        ant_id=ant_id,
    )
