# framemarker/src/framemarker/frame_viewer/viewport.py

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any

from .errors import OutOfBounds


@dataclass(frozen=True)
class FrameGeometry:
    """Placement of a frame inside a display surface.

    ``top_left_x``/``top_left_y`` and ``displayed_width``/``displayed_height``
    are in display (surface) pixels. ``image_width``/``image_height`` are the
    frame's natural size in image pixels.
    """

    top_left_x: float
    top_left_y: float
    displayed_width: float
    displayed_height: float
    image_width: int
    image_height: int

    @property
    def bottom_right_x(self) -> float:
        return self.top_left_x + self.displayed_width

    @property
    def bottom_right_y(self) -> float:
        return self.top_left_y + self.displayed_height

    def contains(self, display_x: float, display_y: float) -> bool:
        """True if the display point is on or inside the displayed frame."""
        return (
            self.top_left_x <= display_x <= self.bottom_right_x
            and self.top_left_y <= display_y <= self.bottom_right_y
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def compute_geometry(
    surface_width: float,
    surface_height: float,
    image_width: int,
    image_height: int,
) -> FrameGeometry:
    """Fit a frame into a surface, preserving aspect ratio and centering it.

    The frame is only ever shrunk to fit; it is never scaled up beyond its
    natural size.
    """
    if surface_width <= 0 or surface_height <= 0:
        raise ValueError(f"Surface size must be positive, got {surface_width}x{surface_height}")
    if image_width <= 0 or image_height <= 0:
        raise ValueError(f"Image size must be positive, got {image_width}x{image_height}")

    aspect = image_width / float(image_height)
    width_ratio = image_width / float(surface_width)
    height_ratio = image_height / float(surface_height)

    if height_ratio < width_ratio:
        # Surface is relatively taller than the frame: width is the constraint
        displayed_width = min(float(image_width), float(surface_width))
        displayed_height = displayed_width / aspect
    else:
        # Surface is relatively wider than the frame: height is the constraint
        displayed_height = min(float(image_height), float(surface_height))
        displayed_width = displayed_height * aspect

    return FrameGeometry(
        top_left_x=surface_width / 2.0 - displayed_width / 2.0,
        top_left_y=surface_height / 2.0 - displayed_height / 2.0,
        displayed_width=displayed_width,
        displayed_height=displayed_height,
        image_width=image_width,
        image_height=image_height,
    )


def to_image_coordinates(
    display_x: float,
    display_y: float,
    geometry: FrameGeometry,
) -> tuple[float, float]:
    """Display coords -> image coords.

    Raises:
        OutOfBounds: if the point is outside the displayed frame rectangle.
    """
    if not geometry.contains(display_x, display_y):
        raise OutOfBounds(display_x, display_y)

    x_ratio = (display_x - geometry.top_left_x) / geometry.displayed_width
    y_ratio = (display_y - geometry.top_left_y) / geometry.displayed_height
    return geometry.image_width * x_ratio, geometry.image_height * y_ratio


def to_display_coordinates(
    x: float,
    y: float,
    geometry: FrameGeometry,
) -> tuple[float, float]:
    """Image coords -> display coords. Not bounds checked."""
    x_ratio = x / float(geometry.image_width)
    y_ratio = y / float(geometry.image_height)
    display_x = geometry.top_left_x + geometry.displayed_width * x_ratio
    display_y = geometry.top_left_y + geometry.displayed_height * y_ratio
    return display_x, display_y
