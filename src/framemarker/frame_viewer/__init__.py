"""Frame Viewer - video frame display with ant marker annotation."""

from .controller import (
    AntIdMemory,
    CreateOutcome,
    EditOutcome,
    EditResult,
    MarkerController,
    MarkerDialogs,
)
from .errors import FrameViewerError, OutOfBounds, UnrecognizedShortcut
from .frame_viewer import FrameViewerConfig, FrameViewerWidget
from .markers import AntActivity, AntLocation, InteractionMarker, InteractionType, Marker
from .viewport import FrameGeometry, compute_geometry, to_display_coordinates, to_image_coordinates

__all__ = [
    "AntActivity",
    "AntIdMemory",
    "AntLocation",
    "CreateOutcome",
    "EditOutcome",
    "EditResult",
    "FrameGeometry",
    "FrameViewerConfig",
    "FrameViewerError",
    "FrameViewerWidget",
    "InteractionMarker",
    "InteractionType",
    "Marker",
    "MarkerController",
    "MarkerDialogs",
    "OutOfBounds",
    "UnrecognizedShortcut",
    "compute_geometry",
    "to_display_coordinates",
    "to_image_coordinates",
]
