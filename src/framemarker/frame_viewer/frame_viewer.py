# framemarker/src/framemarker/frame_viewer/frame_viewer.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Union

import matplotlib
import numpy as np
from nicegui import ui, events
from PIL import Image

from framemarker.utils.logging import get_logger

from .controller import HIT_RADIUS, AntIdMemory, MarkerController, MarkerDialogs
from .dialogs import NiceGuiMarkerDialogs
from .markers import Marker
from .viewport import FrameGeometry, compute_geometry, to_display_coordinates

logger = get_logger(__name__)

Frame = Union[np.ndarray, Image.Image]
OnMarkersChanged = Callable[[List[Marker]], None]


@dataclass
class FrameViewerConfig:
    # Surface size (logical display pixel grid)
    surface_width_px: int = 800
    surface_height_px: int = 600
    background_color: str = "#000000"
    image_border_width: int = 0             # in pixels

    # Hit-testing (image pixels)
    hit_radius: float = HIT_RADIUS

    # Marker glyph appearance (display pixels)
    marker_radius_px: float = 5.0
    marker_line_width: float = 2.0
    show_ant_ids: bool = True

    # Colormap for single-channel frames
    cmap: str = "gray"


def frame_to_pil(frame: Frame, cmap: str = "gray") -> Image.Image:
    """Convert a frame to an 8-bit RGB PIL image.

    2D arrays are mapped through a matplotlib colormap. RGB/RGBA arrays that
    are not uint8 are min/max scaled to 0..255.
    """
    if isinstance(frame, Image.Image):
        return frame.convert("RGB")

    arr = np.asarray(frame)

    if arr.ndim == 3 and arr.shape[2] in (3, 4):
        rgb = arr[..., :3]
        if rgb.dtype != np.uint8:
            rgb = _normalize(rgb)
            rgb = (rgb * 255).astype(np.uint8)
        return Image.fromarray(rgb)

    if arr.ndim == 2:
        norm = _normalize(arr)
        cmap_fn = matplotlib.colormaps[cmap]
        rgba = cmap_fn(norm)
        rgb = (rgba[..., :3] * 255).astype(np.uint8)
        return Image.fromarray(rgb)

    raise ValueError(f"Expected a 2D or RGB(A) frame, got array of shape {arr.shape}")


def _normalize(arr: np.ndarray) -> np.ndarray:
    arr = np.asarray(arr, dtype=float)
    vmin = float(np.nanmin(arr))
    vmax = float(np.nanmax(arr))
    if vmax <= vmin:
        vmax = vmin + 1e-6
    return np.clip((arr - vmin) / (vmax - vmin), 0.0, 1.0)


class FrameViewerWidget:
    """NiceGUI widget showing one video frame with ant markers.

    - The frame is letterboxed into a fixed-size surface, never upscaled.
    - Left click: edit the marker under the pointer, or create one.
    - Right click: create an interaction marker (or edit the one under the pointer).
    - Keys i/x/e/t/g/o: create a default marker at the last pointer position.

    Events (via callback registration):
        on_markers_changed(handler): handler(markers) after any marker edit
    """

    def __init__(
        self,
        frame: Optional[Frame] = None,
        *,
        markers: List[Marker] | None = None,
        dialogs: MarkerDialogs | None = None,
        ant_ids: AntIdMemory | None = None,
        parent=None,
        config: FrameViewerConfig | None = None,
    ) -> None:
        self.config = config if config is not None else FrameViewerConfig()
        self.SURFACE_W = int(self.config.surface_width_px)
        self.SURFACE_H = int(self.config.surface_height_px)

        self.ant_ids = ant_ids if ant_ids is not None else AntIdMemory()
        if dialogs is None:
            dialogs = NiceGuiMarkerDialogs(
                self.ant_ids, surface_size=(self.SURFACE_W, self.SURFACE_H)
            )

        self.controller = MarkerController(
            dialogs,
            self.ant_ids,
            request_repaint=self._on_markers_mutated,
            hit_radius=self.config.hit_radius,
        )

        self._frame: Optional[Image.Image] = None
        self._repaint_pending = False
        self._markers_changed_handlers: List[OnMarkersChanged] = []

        container = parent if parent is not None else ui.element("div").classes("w-full")

        with container:
            self.interactive = (
                ui.interactive_image(
                    self._render_surface_pil(),
                    events=["click", "contextmenu", "mousemove"],
                )
                .classes("w-full")
                .style(self._surface_style())
            )
            self.interactive.on_mouse(self._on_mouse)

            ui.on("keydown", self._on_key)

        if markers is not None:
            self.controller.set_markers(markers)
        if frame is not None:
            self._frame = frame_to_pil(frame, self.config.cmap)

        self._update_image()

        logger.info(
            f"FrameViewerWidget initialized: surface={self.SURFACE_W}x{self.SURFACE_H}, "
            f"frame={self.frame_size}, markers={len(self.controller.get_markers())}"
        )

    # ------------- properties -------------

    @property
    def frame_size(self) -> Optional[tuple[int, int]]:
        """(width, height) of the current frame, or None."""
        if self._frame is None:
            return None
        return self._frame.size

    @property
    def geometry(self) -> Optional[FrameGeometry]:
        return self.controller.geometry

    # ------------- public API -------------

    def set_image(self, frame: Optional[Frame]) -> None:
        """Show a new frame and redraw."""
        self._frame = frame_to_pil(frame, self.config.cmap) if frame is not None else None
        self._update_image()
        logger.debug(f"set_image: frame={self.frame_size}")

    def get_markers(self) -> List[Marker]:
        """Return a copy of the current markers."""
        return self.controller.get_markers()

    def set_markers(self, markers: List[Marker]) -> None:
        """Replace markers with a copy of ``markers`` and redraw.

        Raises:
            ValueError: if ``markers`` is None.
        """
        self.controller.set_markers(markers)
        self.request_repaint()

    def on_markers_changed(self, handler: OnMarkersChanged) -> None:
        """Register callback for marker edits made through the surface.

        Handler is called with: markers (list of Marker, a copy)
        """
        self._markers_changed_handlers.append(handler)

    def request_repaint(self) -> None:
        """Schedule a marker overlay redraw. Repeated requests coalesce."""
        if self._repaint_pending:
            return
        self._repaint_pending = True
        ui.timer(0.0, self._flush_repaint, once=True)

    # ------------- internals: rendering -------------

    def _surface_style(self) -> str:
        return (
            f"aspect-ratio: {self.SURFACE_W} / {self.SURFACE_H}; "
            f"border: {self.config.image_border_width}px solid #666;"
        )

    def _compute_geometry(self) -> Optional[FrameGeometry]:
        if self._frame is None:
            return None
        frame_w, frame_h = self._frame.size
        return compute_geometry(self.SURFACE_W, self.SURFACE_H, frame_w, frame_h)

    def _render_surface_pil(self) -> Image.Image:
        """Render the frame letterboxed into a SURFACE_W x SURFACE_H image."""
        surface = Image.new("RGB", (self.SURFACE_W, self.SURFACE_H), self.config.background_color)
        geometry = self._compute_geometry()
        if self._frame is None or geometry is None:
            return surface

        size = (
            max(1, int(round(geometry.displayed_width))),
            max(1, int(round(geometry.displayed_height))),
        )
        img = self._frame
        if img.size != size:
            img = img.resize(size, Image.BILINEAR)
        surface.paste(img, (int(round(geometry.top_left_x)), int(round(geometry.top_left_y))))
        return surface

    def _update_image(self) -> None:
        """Redraw surface image + overlays."""
        self.interactive.set_source(self._render_surface_pil())
        self._redraw_overlays()

    def _flush_repaint(self) -> None:
        self._repaint_pending = False
        self._redraw_overlays()

    def _redraw_overlays(self) -> None:
        """Draw marker glyphs as an SVG overlay in surface coordinates.

        Also refreshes the controller's geometry, so event handling always uses
        the placement that is on screen.
        """
        geometry = self._compute_geometry()
        self.controller.geometry = geometry

        svg_parts: list[str] = []
        if geometry is not None:
            for marker in self.controller.get_markers():
                svg_parts.append(self._marker_svg(marker, geometry))

        self.interactive.content = "".join(svg_parts)
        self.interactive.update()
        logger.debug(f"redraw: {len(svg_parts)} markers")

    def _marker_svg(self, marker: Marker, geometry: FrameGeometry) -> str:
        cx, cy = to_display_coordinates(marker.x, marker.y, geometry)
        r = self.config.marker_radius_px
        lw = self.config.marker_line_width
        stroke = marker.color

        parts = [
            f'<circle cx="{cx}" cy="{cy}" r="{r}" '
            f'stroke="{stroke}" stroke-width="{lw}" fill="none" />'
        ]
        if marker.is_interaction:
            parts.append(
                f'<line x1="{cx - r}" y1="{cy - r}" x2="{cx + r}" y2="{cy + r}" '
                f'stroke="{stroke}" stroke-width="{lw}" />'
                f'<line x1="{cx - r}" y1="{cy + r}" x2="{cx + r}" y2="{cy - r}" '
                f'stroke="{stroke}" stroke-width="{lw}" />'
            )
        if self.config.show_ant_ids and marker.ant_id is not None:
            parts.append(
                f'<text x="{cx + r + 2}" y="{cy - r - 2}" fill="{stroke}" '
                f'font-size="12">{marker.ant_id}</text>'
            )
        return "".join(parts)

    # ------------- internals: events -------------

    def _on_markers_mutated(self) -> None:
        self.request_repaint()
        markers = self.controller.get_markers()
        for handler in list(self._markers_changed_handlers):
            try:
                handler(markers)
            except Exception:
                logger.exception("Error in markers_changed handler")

    async def _on_mouse(self, e: events.MouseEventArguments) -> None:
        """Route NiceGUI mouse events to the controller (surface coordinates)."""
        if e.type == "mousemove":
            self.controller.handle_move(e.image_x, e.image_y)
        elif e.type == "click":
            await self.controller.handle_click(e.image_x, e.image_y, secondary=False)
        elif e.type == "contextmenu":
            await self.controller.handle_click(e.image_x, e.image_y, secondary=True)

    def _on_key(self, e: events.GenericEventArguments) -> None:
        """Handle typed characters as marker shortcuts."""
        args = e.args or {}
        key = args.get("key", "")

        # Only plain typed characters; ignore Shift, Enter, Ctrl+X, etc.
        if not isinstance(key, str) or len(key) != 1:
            return
        if args.get("ctrlKey") or args.get("metaKey") or args.get("altKey"):
            return

        self.controller.handle_key(key)
