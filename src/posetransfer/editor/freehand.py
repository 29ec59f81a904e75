"""Freehand drawing canvas, the alternative to the skeleton editor."""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING

from PIL import Image, ImageDraw

from posetransfer.models.pose import LIMB_WIDTH
from posetransfer.pipeline.export import encode_png, to_data_url
from posetransfer.pipeline.render import Surface, stroke_segment

if TYPE_CHECKING:
    from posetransfer.models.viewport import Point

logger = logging.getLogger(__name__)

INK = (0, 0, 0, 255)


class FreehandCanvas:
    """A blank surface the user draws pose strokes on directly.

    ``is_empty`` distinguishes "nothing drawn" from a real drawing, so an
    untouched canvas never reaches the generation service. It is re-read
    from the surface pixels when a stroke is released, so strokes that miss
    the surface entirely leave it empty. :meth:`clear` and :meth:`resize`
    reset it.
    """

    def __init__(self, width: float, height: float, device_pixel_ratio: float = 1.0) -> None:
        self.surface = Surface(width, height, device_pixel_ratio)
        self.stroke_width = LIMB_WIDTH
        self._drawing = False
        self._last: Point | None = None
        self._empty = True

    @property
    def is_empty(self) -> bool:
        return self._empty

    @property
    def is_drawing(self) -> bool:
        return self._drawing

    def press(self, x: float, y: float) -> None:
        self._drawing = True
        self._last = (x, y)

    def move(self, x: float, y: float) -> None:
        if not self._drawing or self._last is None:
            return
        draw = ImageDraw.Draw(self.surface.image)
        stroke_segment(
            draw,
            self.surface.to_pixels(self._last),
            self.surface.to_pixels((x, y)),
            self.stroke_width * self.surface.device_pixel_ratio,
            INK,
        )
        self._last = (x, y)

    def release(self) -> None:
        if not self._drawing:
            return
        self._drawing = False
        self._last = None
        self._empty = self.surface.image.getbbox() is None

    def leave(self) -> None:
        self.release()

    def clear(self) -> None:
        self.surface.clear()
        self._drawing = False
        self._last = None
        self._empty = True

    def resize(self, width: float, height: float, device_pixel_ratio: float | None = None) -> None:
        """Reallocate the surface. The drawing is discarded."""
        self.surface.resize(width, height, device_pixel_ratio)
        self.clear()

    def load_image(self, data: bytes | Image.Image) -> None:
        """Replace the drawing with an image, letterboxed to the canvas."""
        img = Image.open(io.BytesIO(data)) if isinstance(data, bytes) else data
        img = img.convert("RGBA")
        self.clear()

        canvas_w, canvas_h = self.surface.image.size
        canvas_ar = canvas_w / canvas_h
        img_ar = img.width / img.height
        if canvas_ar > img_ar:
            draw_h = canvas_h
            draw_w = max(1, round(img_ar * draw_h))
        else:
            draw_w = canvas_w
            draw_h = max(1, round(draw_w / img_ar))
        x = (canvas_w - draw_w) // 2
        y = (canvas_h - draw_h) // 2

        self.surface.image.alpha_composite(img.resize((draw_w, draw_h)), (x, y))
        self._empty = False
        logger.debug("Loaded %dx%d image into freehand canvas", img.width, img.height)

    def get_export_png(self) -> bytes | None:
        """Return the drawing over a white background, or ``None`` if empty."""
        if self._empty:
            return None
        flat = Image.new("RGBA", self.surface.image.size, (255, 255, 255, 255))
        flat.alpha_composite(self.surface.image)
        return encode_png(flat.convert("RGB"))

    def get_export_data_url(self) -> str | None:
        png = self.get_export_png()
        return to_data_url(png) if png is not None else None
