# framemarker/src/framemarker/frame_viewer/errors.py

from __future__ import annotations


class FrameViewerError(Exception):
    """Base class for expected, event-local frame viewer conditions."""


class OutOfBounds(FrameViewerError):
    """A display point lies outside the currently displayed frame."""

    def __init__(self, display_x: float, display_y: float) -> None:
        super().__init__(
            f"Display point ({display_x:.1f}, {display_y:.1f}) is outside the displayed frame"
        )
        self.display_x = display_x
        self.display_y = display_y


class UnrecognizedShortcut(FrameViewerError):
    """A typed character has no marker template."""

    def __init__(self, key: str) -> None:
        super().__init__(f"No marker default corresponding to key {key!r}")
        self.key = key
