"""Interactive skeleton editor: pointer handling over a live joint graph."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from posetransfer.models.pose import DEFAULT_JOINTS, JOINT_RADIUS, PoseGraph
from posetransfer.models.viewport import ViewportTransform
from posetransfer.pipeline.export import export_data_url, export_png
from posetransfer.pipeline.hit_test import HIT_TOLERANCE, find_nearest
from posetransfer.pipeline.render import Surface, render_interactive

if TYPE_CHECKING:
    from posetransfer.models.enums import JointId
    from posetransfer.models.pose import Preset

logger = logging.getLogger(__name__)


@dataclass
class DragState:
    """Which joint, if any, follows the pointer."""

    joint_id: JointId | None = None

    @property
    def active(self) -> bool:
        return self.joint_id is not None


class PoseEditor:
    """Owns the live pose and turns pointer events into joint moves.

    Pointer coordinates are logical surface coordinates (CSS pixels, terminal
    half-cells, ...). They go through :meth:`ViewportTransform.to_design`
    before hit-testing, so the editor behaves the same at any surface size or
    pixel ratio.
    """

    def __init__(
        self,
        width: float = 256,
        height: float = 280,
        device_pixel_ratio: float = 1.0,
        *,
        joint_radius: float = JOINT_RADIUS,
        hit_tolerance: float = HIT_TOLERANCE,
    ) -> None:
        self.graph = PoseGraph()
        self.drag = DragState()
        self.hit_radius = joint_radius + hit_tolerance
        self.surface = Surface(width, height, device_pixel_ratio)
        self.transform = ViewportTransform.recompute(width, height)
        self.render()

    # -- surface ------------------------------------------------------------

    def resize(self, width: float, height: float, device_pixel_ratio: float | None = None) -> None:
        """Track a new surface size or pixel ratio and redraw."""
        self.surface.resize(width, height, device_pixel_ratio)
        self.transform = ViewportTransform.recompute(width, height)
        logger.debug(
            "Editor resized to %sx%s @%sx (scale %.3f)",
            width, height, self.surface.device_pixel_ratio, self.transform.scale,
        )
        self.render()

    def render(self) -> None:
        render_interactive(self.surface, self.graph, self.transform, self.drag.joint_id)

    # -- pointer events -----------------------------------------------------

    def press(self, x: float, y: float) -> JointId | None:
        """Start dragging the joint under the pointer, if any."""
        hit = find_nearest(self.graph, self.transform.to_design((x, y)), self.hit_radius)
        if hit is not None:
            self.drag.joint_id = hit
            self.render()
        return hit

    def move(self, x: float, y: float) -> bool:
        """Move the dragged joint to the pointer. Returns whether it moved."""
        if not self.drag.active:
            return False
        dx, dy = self.transform.to_design((x, y))
        self.graph.set_position(self.drag.joint_id, dx, dy)
        self.render()
        return True

    def release(self) -> None:
        if self.drag.active:
            self.drag.joint_id = None
            self.render()

    def leave(self) -> None:
        """Pointer left the surface; same as releasing."""
        self.release()

    # -- pose ---------------------------------------------------------------

    def load_preset(self, preset: Preset) -> None:
        """Copy *preset*'s joints into the live graph."""
        self.graph.replace_all(preset.joints)
        self.drag.joint_id = None
        logger.debug("Loaded preset '%s'", preset.name)
        self.render()

    def reset(self) -> None:
        """Restore the default standing pose."""
        self.graph.replace_all(DEFAULT_JOINTS)
        self.drag.joint_id = None
        self.render()

    # -- export -------------------------------------------------------------

    def get_export_png(self) -> bytes:
        return export_png(self.graph)

    def get_export_data_url(self) -> str:
        """Return the pose cue as a PNG data URL. Never empty."""
        return export_data_url(self.graph)
