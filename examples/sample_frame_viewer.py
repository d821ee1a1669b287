"""
Demo of FrameViewerWidget on a synthetic frame.

Left click to add/edit a marker, right click for an interaction marker,
or hover and type i/x/e/t/g/o for a default marker.

Run:
    python examples/sample_frame_viewer.py
"""

from __future__ import annotations

import numpy as np
from nicegui import ui

from framemarker.frame_viewer import (
    AntActivity,
    AntLocation,
    FrameViewerConfig,
    FrameViewerWidget,
    Marker,
)
from framemarker.utils.logging import configure_logging


def create_demo_frame(height: int = 720, width: int = 1280) -> np.ndarray:
    """Grayscale frame: a bright disc (the nest entrance) on a noisy background."""
    yy, xx = np.mgrid[0:height, 0:width]
    r = np.hypot(xx - width / 2, yy - height / 2)
    img = np.exp(-(r / (0.25 * height)) ** 2)
    img += 0.05 * np.random.randn(height, width)
    return np.clip(img, 0.0, 1.0)


if __name__ in {"__main__", "__mp_main__"}:
    configure_logging(level="DEBUG")

    with ui.column().classes("w-full items-start gap-2"):
        ui.label("FrameViewerWidget demo").classes("text-lg font-bold")

        widget = FrameViewerWidget(
            create_demo_frame(),
            markers=[
                Marker(x=640.0, y=360.0, activity=AntActivity.WALKING, location=AntLocation.ENTRANCE_CHAMBER, ant_id=1),
            ],
            config=FrameViewerConfig(surface_width_px=960, surface_height_px=540),
        )
        count = ui.label(f"{len(widget.get_markers())} markers")

        def on_markers_changed(markers: list[Marker]) -> None:
            count.text = f"{len(markers)} markers"

        widget.on_markers_changed(on_markers_changed)

    ui.run()
