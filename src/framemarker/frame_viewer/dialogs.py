# framemarker/src/framemarker/frame_viewer/dialogs.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from nicegui import ui

from framemarker.utils.logging import get_logger

from .controller import AntIdMemory, CreateOutcome, EditOutcome
from .markers import (
    AntActivity,
    AntLocation,
    InteractionMarker,
    InteractionType,
    Marker,
)

logger = get_logger(__name__)

# dialog.submit() values
_OK = "ok"
_DELETE = "delete"


@dataclass
class MarkerFormValues:
    """Raw values read back from the marker dialog widgets."""

    interaction: bool
    ant_id: Optional[float]
    activity: str
    location: str
    activity2: str = AntActivity.WALKING.value
    location2: str = AntLocation.ENTRANCE_CHAMBER.value
    interaction_type: str = InteractionType.UNKNOWN.value

    @classmethod
    def from_marker(cls, marker: Marker) -> "MarkerFormValues":
        values = cls(
            interaction=marker.is_interaction,
            ant_id=marker.ant_id,
            activity=marker.activity.value,
            location=marker.location.value,
        )
        if isinstance(marker, InteractionMarker):
            values.activity2 = marker.activity2.value
            values.location2 = marker.location2.value
            values.interaction_type = marker.interaction_type.value
        return values


def build_marker(values: MarkerFormValues) -> Marker:
    """Build a marker at (0, 0) from form values. Callers set the position.

    Raises:
        ValueError: if a select holds a value that is not a known enum value.
    """
    ant_id = int(values.ant_id) if values.ant_id is not None else None
    activity = AntActivity(values.activity)
    location = AntLocation(values.location)

    if values.interaction:
        return InteractionMarker(
            x=0.0,
            y=0.0,
            activity=activity,
            location=location,
            ant_id=ant_id,
            activity2=AntActivity(values.activity2),
            location2=AntLocation(values.location2),
            interaction_type=InteractionType(values.interaction_type),
        )
    return Marker(x=0.0, y=0.0, activity=activity, location=location, ant_id=ant_id)


def dialog_position(
    anchor: tuple[float, float], surface_size: Optional[tuple[int, int]]
) -> str:
    """Quasar dialog position docked on the side of the surface under the pointer.

    A Quasar dialog cannot be placed at arbitrary coordinates, so the pointer
    only picks the side. Without a surface size the dialog is centered.
    """
    if surface_size is None:
        return "standard"
    width, _ = surface_size
    return "left" if anchor[0] < width / 2 else "right"


def _options(enum_cls) -> dict[str, str]:
    return {member.value: member.value for member in enum_cls}


class NiceGuiMarkerDialogs:
    """Modal NiceGUI dialogs for creating and editing markers.

    Each request builds a fresh ``ui.dialog`` in the current slot, awaits it,
    and deletes it afterwards. A confirmed dialog remembers the entered ant id.
    The dialog docks on the side of the surface where the user clicked, given
    ``surface_size`` (display pixels).
    """

    def __init__(
        self,
        ant_ids: AntIdMemory,
        *,
        surface_size: Optional[tuple[int, int]] = None,
    ) -> None:
        self._ant_ids = ant_ids
        self.surface_size = surface_size

    async def request_create(
        self, *, interaction: bool, anchor: tuple[float, float]
    ) -> CreateOutcome:
        initial = MarkerFormValues(
            interaction=interaction,
            ant_id=self._ant_ids.last_ant_id,
            activity=AntActivity.WALKING.value,
            location=AntLocation.ENTRANCE_CHAMBER.value,
        )
        result, values = await self._show("New marker", initial, anchor, allow_delete=False)
        if result != _OK:
            return CreateOutcome()
        marker = build_marker(values)
        self._ant_ids.remember(marker.ant_id)
        return CreateOutcome(marker)

    async def request_edit(
        self, marker: Marker, *, anchor: tuple[float, float]
    ) -> EditOutcome:
        initial = MarkerFormValues.from_marker(marker)
        result, values = await self._show("Edit marker", initial, anchor, allow_delete=True)
        if result == _DELETE:
            return EditOutcome.deleted()
        if result != _OK:
            return EditOutcome.cancelled()
        new_marker = build_marker(values)
        self._ant_ids.remember(new_marker.ant_id)
        return EditOutcome.confirmed(new_marker)

    async def _show(
        self,
        title: str,
        initial: MarkerFormValues,
        anchor: tuple[float, float],
        *,
        allow_delete: bool,
    ) -> tuple[Optional[str], MarkerFormValues]:
        """Show the marker form and wait for the user.

        Returns the submit value (None if dismissed) and the values read back.
        """
        position = dialog_position(anchor, self.surface_size)
        with ui.dialog().props(f"position={position}") as dialog, ui.card().classes("min-w-[20rem]"):
            ui.label(title).classes("text-lg font-bold")

            interaction_box = ui.checkbox(
                "Interaction with a second ant", value=initial.interaction
            )
            ant_input = ui.number("Ant ID", value=initial.ant_id, format="%d", min=0)

            ui.label("Focal ant").classes("text-sm text-gray-600")
            activity_select = ui.select(
                _options(AntActivity), value=initial.activity, label="Activity"
            ).classes("w-full")
            location_select = ui.select(
                _options(AntLocation), value=initial.location, label="Location"
            ).classes("w-full")

            with ui.column().classes("w-full gap-1") as second_ant:
                ui.label("Second ant").classes("text-sm text-gray-600")
                activity2_select = ui.select(
                    _options(AntActivity), value=initial.activity2, label="Activity"
                ).classes("w-full")
                location2_select = ui.select(
                    _options(AntLocation), value=initial.location2, label="Location"
                ).classes("w-full")
                type_select = ui.select(
                    _options(InteractionType),
                    value=initial.interaction_type,
                    label="Interaction type",
                ).classes("w-full")
            second_ant.bind_visibility_from(interaction_box, "value")

            with ui.row().classes("w-full justify-end gap-2"):
                if allow_delete:
                    ui.button("Delete", on_click=lambda: dialog.submit(_DELETE)).props(
                        "flat color=negative"
                    )
                ui.button("Cancel", on_click=lambda: dialog.submit(None)).props("flat")
                ui.button("OK", on_click=lambda: dialog.submit(_OK))

        logger.debug(
            f"{title} dialog opened for display ({anchor[0]:.1f}, {anchor[1]:.1f}), position={position}"
        )
        result = await dialog
        logger.debug(f"{title} dialog closed: {result!r}")

        values = MarkerFormValues(
            interaction=bool(interaction_box.value),
            ant_id=ant_input.value,
            activity=activity_select.value,
            location=location_select.value,
            activity2=activity2_select.value,
            location2=location2_select.value,
            interaction_type=type_select.value,
        )
        dialog.delete()
        return result, values
