"""PoseTransfer TUI custom widgets."""

from posetransfer.widgets.freehand_pad import FreehandPad
from posetransfer.widgets.pose_canvas import PoseCanvas

__all__ = ["FreehandPad", "PoseCanvas"]
