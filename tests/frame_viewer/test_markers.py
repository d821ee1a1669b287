# tests/frame_viewer/test_markers.py

from __future__ import annotations

import pytest

from framemarker.frame_viewer.errors import UnrecognizedShortcut
from framemarker.frame_viewer.markers import (
    INTERACTION_COLOR,
    LOCATION_COLORS,
    AntActivity,
    AntLocation,
    InteractionMarker,
    InteractionType,
    Marker,
)
from framemarker.frame_viewer.shortcuts import marker_from_shortcut


# --- Marker records ---


def test_marker_is_frozen() -> None:
    m = Marker(x=1.0, y=2.0, activity=AntActivity.WALKING, location=AntLocation.EDGE)
    with pytest.raises(Exception):  # FrozenInstanceError
        m.x = 10.0  # type: ignore[misc]


def test_with_position_keeps_attributes_and_type() -> None:
    m = InteractionMarker(
        x=1.0,
        y=2.0,
        activity=AntActivity.CARRYING,
        location=AntLocation.OUTSIDE,
        ant_id=4,
        activity2=AntActivity.STANDING,
        location2=AntLocation.EDGE,
        interaction_type=InteractionType.ONE_WAY,
    )
    moved = m.with_position(30, 40)
    assert isinstance(moved, InteractionMarker)
    assert moved.position == (30.0, 40.0)
    assert moved.activity2 is AntActivity.STANDING
    assert moved.interaction_type is InteractionType.ONE_WAY
    assert m.position == (1.0, 2.0)


def test_enum_values_are_plain_strings() -> None:
    assert AntActivity("Walking") is AntActivity.WALKING
    assert AntLocation("AtExit") is AntLocation.AT_EXIT
    assert InteractionType("TwoWay") is InteractionType.TWO_WAY


def test_to_dict_uses_enum_values() -> None:
    m = Marker(x=1.0, y=2.0, activity=AntActivity.WALKING, location=AntLocation.AT_TUNNEL, ant_id=9)
    assert m.to_dict() == {
        "x": 1.0,
        "y": 2.0,
        "activity": "Walking",
        "location": "AtTunnel",
        "ant_id": 9,
    }
    im = InteractionMarker(x=0.0, y=0.0, activity=AntActivity.WALKING, location=AntLocation.EDGE)
    d = im.to_dict()
    assert d["interaction_type"] == "Unknown"
    assert d["location2"] == "EntranceChamber"


def test_colors() -> None:
    m = Marker(x=0.0, y=0.0, activity=AntActivity.WALKING, location=AntLocation.OUTSIDE)
    assert m.color == LOCATION_COLORS[AntLocation.OUTSIDE]
    assert not m.is_interaction
    im = InteractionMarker(x=0.0, y=0.0, activity=AntActivity.WALKING, location=AntLocation.OUTSIDE)
    assert im.color == INTERACTION_COLOR
    assert im.is_interaction


# --- keyboard shortcuts ---


@pytest.mark.parametrize(
    "key, location",
    [
        ("x", AntLocation.AT_EXIT),
        ("e", AntLocation.ENTRANCE_CHAMBER),
        ("t", AntLocation.AT_TUNNEL),
        ("g", AntLocation.EDGE),
        ("o", AntLocation.OUTSIDE),
    ],
)
def test_single_ant_shortcuts(key: str, location: AntLocation) -> None:
    m = marker_from_shortcut(key, 10.0, 20.0, 5)
    assert type(m) is Marker
    assert m.position == (10.0, 20.0)
    assert m.activity is AntActivity.WALKING
    assert m.location is location
    assert m.ant_id == 5


def test_interaction_shortcut() -> None:
    m = marker_from_shortcut("i", 10.0, 20.0, None)
    assert isinstance(m, InteractionMarker)
    assert m.activity is AntActivity.WALKING
    assert m.activity2 is AntActivity.WALKING
    assert m.location is AntLocation.ENTRANCE_CHAMBER
    assert m.location2 is AntLocation.ENTRANCE_CHAMBER
    assert m.interaction_type is InteractionType.TWO_WAY
    assert m.ant_id is None


@pytest.mark.parametrize("key", ["q", "X", "T", " ", "", "ee"])
def test_unrecognized_shortcut(key: str) -> None:
    with pytest.raises(UnrecognizedShortcut) as excinfo:
        marker_from_shortcut(key, 0.0, 0.0, None)
    assert excinfo.value.key == key
