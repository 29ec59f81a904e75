"""Joint graph models for the stick-figure pose editor."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from posetransfer.models.enums import JointId

# Logical design space every pose is defined in, independent of screen size.
DESIGN_WIDTH = 256
DESIGN_HEIGHT = 280

# Marker and stroke sizes in design units.
JOINT_RADIUS = 8.0
HEAD_RADIUS = 15.0
LIMB_WIDTH = 5.0

# Limb segments between joints. Fixed; only joint positions change at runtime.
SKELETON_EDGES: tuple[tuple[JointId, JointId], ...] = (
    (JointId.NECK, JointId.L_SHOULDER),
    (JointId.NECK, JointId.R_SHOULDER),
    (JointId.L_SHOULDER, JointId.L_ELBOW),
    (JointId.L_ELBOW, JointId.L_HAND),
    (JointId.R_SHOULDER, JointId.R_ELBOW),
    (JointId.R_ELBOW, JointId.R_HAND),
    (JointId.NECK, JointId.HIP),
    (JointId.L_HIP, JointId.R_HIP),
    (JointId.L_HIP, JointId.L_KNEE),
    (JointId.L_KNEE, JointId.L_FOOT),
    (JointId.R_HIP, JointId.R_KNEE),
    (JointId.R_KNEE, JointId.R_FOOT),
)


class Joint(BaseModel):
    """A named body landmark in design-space coordinates."""

    model_config = ConfigDict(frozen=True)

    id: JointId
    x: float
    y: float


def _joints(*points: tuple[str, float, float]) -> tuple[Joint, ...]:
    return tuple(Joint(id=JointId(jid), x=x, y=y) for jid, x, y in points)


# Initial editor pose: standing with arms spread.
DEFAULT_JOINTS: tuple[Joint, ...] = _joints(
    ("head", 128, 40), ("neck", 128, 70),
    ("l_shoulder", 98, 80), ("r_shoulder", 158, 80),
    ("l_elbow", 78, 120), ("r_elbow", 178, 120),
    ("l_hand", 58, 160), ("r_hand", 198, 160),
    ("hip", 128, 130), ("l_hip", 108, 130),
    ("r_hip", 148, 130), ("l_knee", 98, 180),
    ("r_knee", 158, 180), ("l_foot", 88, 230),
    ("r_foot", 168, 230),
)


def _check_vocabulary(joints: Iterable[Joint]) -> None:
    seen: set[JointId] = set()
    for joint in joints:
        if joint.id in seen:
            msg = f"duplicate joint id: {joint.id}"
            raise ValueError(msg)
        seen.add(joint.id)
    missing = set(JointId) - seen
    if missing:
        msg = f"pose is missing joints: {', '.join(sorted(missing))}"
        raise ValueError(msg)


class PoseGraph(BaseModel):
    """Ordered joints plus the fixed skeleton edges.

    The live graph is the single source of truth for the pose shape. Joints
    are frozen, so moving one swaps in a new :class:`Joint` at the same index
    and nothing outside the graph can observe the change.
    """

    joints: list[Joint] = Field(default_factory=lambda: list(DEFAULT_JOINTS))

    @model_validator(mode="after")
    def _validate_joints(self) -> PoseGraph:
        _check_vocabulary(self.joints)
        return self

    def get(self, joint_id: str) -> Joint | None:
        for joint in self.joints:
            if joint.id == joint_id:
                return joint
        return None

    def set_position(self, joint_id: str, x: float, y: float) -> None:
        """Move one joint. Unknown ids are ignored."""
        for i, joint in enumerate(self.joints):
            if joint.id == joint_id:
                self.joints[i] = Joint(id=joint.id, x=float(x), y=float(y))
                return

    def replace_all(self, joints: Iterable[Joint]) -> None:
        """Replace every joint with copies of *joints*.

        Raises
        ------
        ValueError
            If *joints* repeats an id or does not cover the whole skeleton.
        """
        copied = [Joint(id=j.id, x=j.x, y=j.y) for j in joints]
        _check_vocabulary(copied)
        self.joints = copied

    def edges(self) -> list[tuple[JointId, JointId]]:
        return list(SKELETON_EDGES)

    def positions(self) -> dict[JointId, tuple[float, float]]:
        """Map each joint id to its ``(x, y)`` position."""
        return {j.id: (j.x, j.y) for j in self.joints}

    def copy_graph(self) -> PoseGraph:
        return PoseGraph(joints=[Joint(id=j.id, x=j.x, y=j.y) for j in self.joints])


class Preset(BaseModel):
    """A named, immutable pose from the built-in catalog."""

    model_config = ConfigDict(frozen=True)

    name: str
    joints: tuple[Joint, ...]

    @model_validator(mode="after")
    def _validate_joints(self) -> Preset:
        _check_vocabulary(self.joints)
        return self

    def to_graph(self) -> PoseGraph:
        """Return a fresh graph holding copies of this preset's joints."""
        graph = PoseGraph()
        graph.replace_all(self.joints)
        return graph
