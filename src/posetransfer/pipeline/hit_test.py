"""Pointer hit-testing against the joint graph."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from posetransfer.models.pose import JOINT_RADIUS

if TYPE_CHECKING:
    from posetransfer.models.enums import JointId
    from posetransfer.models.pose import PoseGraph
    from posetransfer.models.viewport import Point

# Extra slack around a joint marker that still counts as a hit, in design units.
HIT_TOLERANCE = 5.0


def find_nearest(
    graph: PoseGraph,
    design_point: Point,
    radius: float = JOINT_RADIUS + HIT_TOLERANCE,
) -> JointId | None:
    """Return the closest joint strictly within *radius*, or ``None``.

    Equal distances go to the joint that comes first in graph order, so a
    point exactly on a joint always returns that joint even where markers
    overlap. *design_point* must already be in design space (see
    :meth:`ViewportTransform.to_design`).
    """
    px, py = design_point
    best: JointId | None = None
    best_distance = radius
    for joint in graph.joints:
        distance = math.hypot(px - joint.x, py - joint.y)
        if distance < best_distance:
            best, best_distance = joint.id, distance
    return best
