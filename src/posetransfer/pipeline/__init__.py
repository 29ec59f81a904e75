"""Pose geometry, rendering, export and generation pipeline."""

from posetransfer.pipeline.export import export_data_url, export_png, save_pose_image
from posetransfer.pipeline.hit_test import HIT_TOLERANCE, find_nearest
from posetransfer.pipeline.prompts import build_instruction
from posetransfer.pipeline.render import Surface, render_export, render_icon, render_interactive
from posetransfer.pipeline.transfer import (
    GenerationInProgressError,
    NoPoseError,
    PoseTransferSession,
    save_result,
)

__all__ = [
    "GenerationInProgressError",
    "HIT_TOLERANCE",
    "NoPoseError",
    "PoseTransferSession",
    "Surface",
    "build_instruction",
    "export_data_url",
    "export_png",
    "find_nearest",
    "render_export",
    "render_icon",
    "render_interactive",
    "save_pose_image",
    "save_result",
]
