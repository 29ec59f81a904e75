"""Design-space to viewport transform."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from posetransfer.models.pose import DESIGN_HEIGHT, DESIGN_WIDTH

# Fraction of the surface the design space may fill; the rest is margin so
# joints near the edges stay reachable.
FIT_RATIO = 0.9

Point = tuple[float, float]


class ViewportTransform(BaseModel):
    """Uniform scale plus centering offsets, in logical surface units.

    Device pixel ratio is not part of the transform; the render surface
    applies it when drawing, so pointer input and hit-testing only ever
    deal with logical coordinates.
    """

    model_config = ConfigDict(frozen=True)

    scale: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0

    @classmethod
    def recompute(cls, surface_width: float, surface_height: float) -> ViewportTransform:
        """Fit the design space into a surface, centred, aspect preserved."""
        if surface_width <= 0 or surface_height <= 0:
            msg = f"surface must have a positive size, got {surface_width}x{surface_height}"
            raise ValueError(msg)
        scale = min(surface_width / DESIGN_WIDTH, surface_height / DESIGN_HEIGHT) * FIT_RATIO
        return cls(
            scale=scale,
            offset_x=(surface_width - DESIGN_WIDTH * scale) / 2,
            offset_y=(surface_height - DESIGN_HEIGHT * scale) / 2,
        )

    def to_screen(self, point: Point) -> Point:
        x, y = point
        return (x * self.scale + self.offset_x, y * self.scale + self.offset_y)

    def to_design(self, point: Point) -> Point:
        x, y = point
        return ((x - self.offset_x) / self.scale, (y - self.offset_y) / self.scale)
