"""Skeleton rendering for the interactive editor and the exported pose cue."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PIL import Image, ImageDraw

from posetransfer.models.enums import JointId
from posetransfer.models.pose import (
    DESIGN_HEIGHT,
    DESIGN_WIDTH,
    HEAD_RADIUS,
    JOINT_RADIUS,
    LIMB_WIDTH,
    SKELETON_EDGES,
)

if TYPE_CHECKING:
    from posetransfer.models.pose import PoseGraph
    from posetransfer.models.viewport import Point, ViewportTransform

RGBA = tuple[int, int, int, int]

# Interactive editor palette (drawn over a dark translucent backdrop).
LIMB_COLOUR: RGBA = (255, 255, 255, 204)
HEAD_FILL: RGBA = (255, 255, 255, 26)
HEAD_OUTLINE: RGBA = (0, 255, 255, 230)
HEAD_OUTLINE_WIDTH = 3.0
JOINT_COLOUR: RGBA = (255, 255, 255, 230)
HIGHLIGHT_COLOUR: RGBA = (0, 255, 255, 255)

# Preset thumbnails use heavier strokes so they read at small sizes.
ICON_LIMB_WIDTH = 15.0
ICON_HEAD_RADIUS = 20.0
ICON_HEAD_WIDTH = 12.0


class Surface:
    """An RGBA drawing surface with logical size and device pixel ratio.

    The backing image holds ``round(width * ratio) x round(height * ratio)``
    pixels. Drawing code works in logical units and the surface scales them
    up, so strokes stay sharp on dense displays.
    """

    def __init__(self, width: float, height: float, device_pixel_ratio: float = 1.0) -> None:
        self.width = width
        self.height = height
        self.device_pixel_ratio = device_pixel_ratio
        self.image = self._allocate()

    @property
    def pixel_size(self) -> tuple[int, int]:
        ratio = self.device_pixel_ratio
        return (max(1, round(self.width * ratio)), max(1, round(self.height * ratio)))

    def resize(self, width: float, height: float, device_pixel_ratio: float | None = None) -> None:
        """Change the logical size and/or ratio; discards the current pixels."""
        if width <= 0 or height <= 0:
            msg = f"surface must have a positive size, got {width}x{height}"
            raise ValueError(msg)
        self.width = width
        self.height = height
        if device_pixel_ratio is not None:
            if device_pixel_ratio <= 0:
                msg = f"device pixel ratio must be positive, got {device_pixel_ratio}"
                raise ValueError(msg)
            self.device_pixel_ratio = device_pixel_ratio
        self.image = self._allocate()

    def clear(self) -> None:
        self.image.paste((0, 0, 0, 0), (0, 0, *self.image.size))

    def to_pixels(self, point: Point) -> Point:
        return (point[0] * self.device_pixel_ratio, point[1] * self.device_pixel_ratio)

    def _allocate(self) -> Image.Image:
        return Image.new("RGBA", self.pixel_size, (0, 0, 0, 0))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def render_interactive(
    surface: Surface,
    graph: PoseGraph,
    transform: ViewportTransform,
    highlight: JointId | None = None,
) -> None:
    """Redraw the editor view: limbs, then the head, then joint markers.

    Limbs go first so the joint markers are never hidden under a stroke.
    *highlight* names the joint being dragged, if any.
    """
    surface.clear()
    ratio = surface.device_pixel_ratio
    scale = transform.scale * ratio
    positions = graph.positions()

    def at(joint_id: JointId) -> Point:
        return surface.to_pixels(transform.to_screen(positions[joint_id]))

    for a, b in SKELETON_EDGES:
        _composite_stroke(surface.image, at(a), at(b), LIMB_WIDTH * scale, LIMB_COLOUR)

    draw = ImageDraw.Draw(surface.image, "RGBA")

    hx, hy = at(JointId.HEAD)
    head_r = HEAD_RADIUS * scale
    draw.ellipse(_bbox(hx, hy, head_r), fill=HEAD_FILL)
    _ring(draw, hx, hy, head_r, HEAD_OUTLINE_WIDTH * scale, HEAD_OUTLINE)

    joint_r = JOINT_RADIUS * scale
    for joint in graph.joints:
        if joint.id == JointId.HEAD:
            continue
        jx, jy = at(joint.id)
        colour = HIGHLIGHT_COLOUR if joint.id == highlight else JOINT_COLOUR
        draw.ellipse(_bbox(jx, jy, joint_r), fill=colour)


def render_export(graph: PoseGraph) -> Image.Image:
    """Draw the pose cue: black stick figure on white, in raw design units."""
    img = Image.new("RGB", (DESIGN_WIDTH, DESIGN_HEIGHT), (255, 255, 255))
    draw = ImageDraw.Draw(img)
    positions = graph.positions()

    for a, b in SKELETON_EDGES:
        stroke_segment(draw, positions[a], positions[b], LIMB_WIDTH, (0, 0, 0))

    hx, hy = positions[JointId.HEAD]
    _ring(draw, hx, hy, HEAD_RADIUS, LIMB_WIDTH, (0, 0, 0))
    return img


def render_icon(
    graph: PoseGraph,
    size: int = 64,
    *,
    colour: tuple[int, int, int] = (0, 0, 0),
    background: tuple[int, int, int] = (255, 255, 255),
) -> Image.Image:
    """Render a square thumbnail of a pose for preset pickers."""
    scale = min(size / DESIGN_WIDTH, size / DESIGN_HEIGHT)
    off_x = (size - DESIGN_WIDTH * scale) / 2
    off_y = (size - DESIGN_HEIGHT * scale) / 2
    img = Image.new("RGB", (size, size), background)
    draw = ImageDraw.Draw(img)
    pts = {jid: (x * scale + off_x, y * scale + off_y) for jid, (x, y) in graph.positions().items()}

    hx, hy = pts[JointId.HEAD]
    _ring(draw, hx, hy, ICON_HEAD_RADIUS * scale, ICON_HEAD_WIDTH * scale, colour)
    for a, b in SKELETON_EDGES:
        stroke_segment(draw, pts[a], pts[b], ICON_LIMB_WIDTH * scale, colour)
    return img


def stroke_segment(
    draw: ImageDraw.ImageDraw,
    start: Point,
    end: Point,
    width: float,
    fill: int | tuple[int, ...],
) -> None:
    """Draw a line segment with round caps."""
    w = max(1, round(width))
    draw.line([start, end], fill=fill, width=w)
    cap = w / 2
    for x, y in (start, end):
        draw.ellipse(_bbox(x, y, cap), fill=fill)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _bbox(cx: float, cy: float, r: float) -> list[float]:
    return [cx - r, cy - r, cx + r, cy + r]


def _ring(
    draw: ImageDraw.ImageDraw,
    cx: float,
    cy: float,
    radius: float,
    width: float,
    outline: tuple[int, ...],
) -> None:
    """Stroke a circle outline centred on *radius*, like a canvas arc."""
    w = max(1, round(width))
    draw.ellipse(_bbox(cx, cy, radius + w / 2), outline=outline, width=w)


def _composite_stroke(
    image: Image.Image,
    start: Point,
    end: Point,
    width: float,
    colour: RGBA,
) -> None:
    """Blend one translucent round-capped stroke onto *image*.

    The stroke's shape is drawn into a mask first so the caps and the line
    body blend once, not twice where they overlap.
    """
    mask = Image.new("L", image.size, 0)
    stroke_segment(ImageDraw.Draw(mask), start, end, width, colour[3])
    layer = Image.new("RGBA", image.size, (*colour[:3], 0))
    layer.putalpha(mask)
    image.alpha_composite(layer)
