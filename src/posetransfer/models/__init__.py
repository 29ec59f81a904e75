"""PoseTransfer data models - pure Pydantic, no rendering."""

from posetransfer.models.enums import JointId, PoseMode
from posetransfer.models.pose import (
    DEFAULT_JOINTS,
    DESIGN_HEIGHT,
    DESIGN_WIDTH,
    HEAD_RADIUS,
    JOINT_RADIUS,
    LIMB_WIDTH,
    SKELETON_EDGES,
    Joint,
    PoseGraph,
    Preset,
)
from posetransfer.models.sizes import IMAGE_SIZE_OPTIONS, ImageDimensions, get_size
from posetransfer.models.upload import ImageLoadError, UploadedImage, split_data_url
from posetransfer.models.viewport import ViewportTransform

__all__ = [
    "DEFAULT_JOINTS",
    "DESIGN_HEIGHT",
    "DESIGN_WIDTH",
    "HEAD_RADIUS",
    "IMAGE_SIZE_OPTIONS",
    "ImageDimensions",
    "ImageLoadError",
    "Joint",
    "JOINT_RADIUS",
    "JointId",
    "LIMB_WIDTH",
    "PoseGraph",
    "PoseMode",
    "Preset",
    "SKELETON_EDGES",
    "UploadedImage",
    "ViewportTransform",
    "get_size",
    "split_data_url",
]
