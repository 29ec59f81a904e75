"""Pose input editors: the skeleton editor and the freehand canvas."""

from posetransfer.editor.freehand import FreehandCanvas
from posetransfer.editor.pose_editor import DragState, PoseEditor

__all__ = ["DragState", "FreehandCanvas", "PoseEditor"]
