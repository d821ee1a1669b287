"""
Marker interaction controller.

Decides, for each pointer or key event on the frame surface, whether to edit an
existing marker, create a new one, or ignore the event. UI-agnostic: the
surface forwards raw display coordinates, dialogs are reached through the
``MarkerDialogs`` port, and redraws are requested through a callback.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Protocol

from framemarker.utils.logging import get_logger

from .errors import OutOfBounds, UnrecognizedShortcut
from .markers import Marker
from .shortcuts import marker_from_shortcut
from .viewport import FrameGeometry, to_image_coordinates

logger = get_logger(__name__)

# Image-space distance within which a click selects an existing marker
HIT_RADIUS = 6.0


class EditResult(Enum):
    CANCELLED = "cancelled"
    DELETED = "deleted"
    CONFIRMED = "confirmed"


@dataclass(frozen=True)
class EditOutcome:
    """Result of an edit dialog. ``marker`` is set only when confirmed."""

    result: EditResult
    marker: Optional[Marker] = None

    @classmethod
    def cancelled(cls) -> "EditOutcome":
        return cls(EditResult.CANCELLED)

    @classmethod
    def deleted(cls) -> "EditOutcome":
        return cls(EditResult.DELETED)

    @classmethod
    def confirmed(cls, marker: Marker) -> "EditOutcome":
        return cls(EditResult.CONFIRMED, marker)


@dataclass(frozen=True)
class CreateOutcome:
    """Result of a create dialog. ``marker`` is None when cancelled."""

    marker: Optional[Marker] = None

    @property
    def cancelled(self) -> bool:
        return self.marker is None


class MarkerDialogs(Protocol):
    """Request/response port to the dialogs that collect marker attributes."""

    async def request_edit(
        self, marker: Marker, *, anchor: tuple[float, float]
    ) -> EditOutcome: ...

    async def request_create(
        self, *, interaction: bool, anchor: tuple[float, float]
    ) -> CreateOutcome: ...


class AntIdMemory:
    """Remembers the most recently used ant identifier."""

    def __init__(self, last_ant_id: Optional[int] = None) -> None:
        self._last_ant_id = last_ant_id

    @property
    def last_ant_id(self) -> Optional[int]:
        return self._last_ant_id

    def remember(self, ant_id: Optional[int]) -> None:
        self._last_ant_id = ant_id


class MarkerController:
    """Turns surface events into marker edits.

    The marker list is owned here. It is only ever appended to, replaced at an
    index, or removed at an index; it is never reordered.

    Events are discarded silently when they do not apply: a point outside the
    displayed frame, an unknown shortcut key, no geometry yet, or a dialog
    already open. An edit outcome is also dropped when its marker left the list
    through set_markers() while the dialog was open.
    """

    def __init__(
        self,
        dialogs: MarkerDialogs,
        ant_ids: AntIdMemory,
        *,
        request_repaint: Callable[[], None],
        hit_radius: float = HIT_RADIUS,
    ) -> None:
        self._dialogs = dialogs
        self._ant_ids = ant_ids
        self._request_repaint = request_repaint
        self.hit_radius = float(hit_radius)

        self._markers: List[Marker] = []
        self.geometry: Optional[FrameGeometry] = None

        # Last pointer-move position in display coords
        self._pending_pointer: Optional[tuple[float, float]] = None

        # True while a dialog is awaiting the user
        self._busy = False

    # ------------- marker list -------------

    def get_markers(self) -> List[Marker]:
        """Return a copy of the current markers, in display order."""
        return list(self._markers)

    def set_markers(self, markers: Optional[Iterable[Marker]]) -> None:
        """Replace all markers with a copy of ``markers``.

        Raises:
            ValueError: if ``markers`` is None. The current markers are kept.
        """
        if markers is None:
            raise ValueError("The marker list must not be None")
        self._markers = list(markers)
        logger.debug(f"set_markers: loaded {len(self._markers)} markers")

    # ------------- state -------------

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def pending_pointer(self) -> Optional[tuple[float, float]]:
        return self._pending_pointer

    # ------------- hit testing -------------

    def hit_test(self, x: float, y: float) -> Optional[int]:
        """Index of the first marker within the hit radius of image point (x, y)."""
        for index, marker in enumerate(self._markers):
            if math.hypot(marker.x - x, marker.y - y) <= self.hit_radius:
                return index
        return None

    def _index_of(self, marker: Marker) -> Optional[int]:
        """Current index of this exact marker object, or None if it was removed."""
        return next((i for i, m in enumerate(self._markers) if m is marker), None)

    def _resolve(self, display_x: float, display_y: float) -> tuple[float, float]:
        if self.geometry is None:
            raise OutOfBounds(display_x, display_y)
        return to_image_coordinates(display_x, display_y, self.geometry)

    # ------------- events -------------

    async def handle_click(
        self,
        display_x: float,
        display_y: float,
        *,
        secondary: bool = False,
    ) -> None:
        """Edit the marker under the pointer, or create a new one."""
        if self._busy:
            return
        try:
            x, y = self._resolve(display_x, display_y)
        except OutOfBounds:
            return

        anchor = (display_x, display_y)
        self._busy = True
        try:
            index = self.hit_test(x, y)
            if index is not None:
                await self._edit_marker(index, anchor)
            else:
                await self._create_marker(x, y, secondary, anchor)
        finally:
            self._busy = False

    async def _edit_marker(self, index: int, anchor: tuple[float, float]) -> None:
        original = self._markers[index]
        outcome = await self._dialogs.request_edit(original, anchor=anchor)

        if outcome.result is EditResult.CANCELLED:
            return

        # set_markers() may have replaced the list while the dialog was open
        index = self._index_of(original)
        if index is None:
            return

        if outcome.result is EditResult.DELETED:
            del self._markers[index]
            logger.info(f"Deleted marker {index} at ({original.x:.1f}, {original.y:.1f})")
        else:
            if outcome.marker is None:
                raise ValueError("A confirmed edit must carry a marker")
            # The edited marker always stays where the original was
            self._markers[index] = outcome.marker.with_position(original.x, original.y)
            logger.info(f"Edited marker {index}: {self._markers[index].to_dict()}")

        self._request_repaint()

    async def _create_marker(
        self,
        x: float,
        y: float,
        interaction: bool,
        anchor: tuple[float, float],
    ) -> None:
        outcome = await self._dialogs.request_create(interaction=interaction, anchor=anchor)
        if outcome.cancelled:
            return

        marker = outcome.marker.with_position(x, y)
        self._markers.append(marker)
        logger.info(f"Created marker: {marker.to_dict()}")
        self._request_repaint()

    def handle_move(self, display_x: float, display_y: float) -> None:
        """Remember the pointer position for keyboard shortcuts."""
        self._pending_pointer = (display_x, display_y)

    def handle_key(self, key: str) -> None:
        """Create a default marker at the last pointer position."""
        if self._busy or self._pending_pointer is None:
            return
        try:
            x, y = self._resolve(*self._pending_pointer)
            marker = marker_from_shortcut(key, x, y, self._ant_ids.last_ant_id)
        except (OutOfBounds, UnrecognizedShortcut):
            return

        self._markers.append(marker)
        logger.info(f"Created marker from shortcut {key!r}: {marker.to_dict()}")
        self._request_repaint()
