"""Pose canvas widget - drag skeleton joints with the mouse in the terminal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.message import Message
from textual.widget import Widget

from posetransfer.editor.pose_editor import PoseEditor
from posetransfer.widgets.halfblock import image_to_text

if TYPE_CHECKING:
    from rich.console import RenderableType
    from textual import events

    from posetransfer.models.pose import PoseGraph, Preset


def cell_to_logical(x: int, y: int) -> tuple[float, float]:
    """Centre of a terminal cell in half-block surface units."""
    return (x + 0.5, y * 2 + 1.0)


class PoseCanvas(Widget):
    """Skeleton editor drawn with half blocks; one cell is 1x2 surface pixels.

    Posts ``PoseCanvas.Changed`` when a drag that moved a joint ends.
    """

    DEFAULT_CSS = """
    PoseCanvas {
        width: 1fr;
        height: 1fr;
        min-height: 12;
    }
    """

    class Changed(Message):
        """Fired when the user has dragged a joint to a new position."""

        def __init__(self, graph: PoseGraph) -> None:
            super().__init__()
            self.graph = graph

    def __init__(
        self,
        editor: PoseEditor | None = None,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.editor = editor or PoseEditor()
        self._moved = False

    def render(self) -> RenderableType:
        return image_to_text(self.editor.surface.image)

    def on_resize(self, event: events.Resize) -> None:
        width, height = event.size.width, event.size.height
        if width > 0 and height > 0:
            self.editor.resize(width, height * 2)

    def on_mouse_down(self, event: events.MouseDown) -> None:
        if self.editor.press(*cell_to_logical(event.x, event.y)) is not None:
            self._moved = False
            self.capture_mouse()
            self.refresh()

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self.editor.move(*cell_to_logical(event.x, event.y)):
            self._moved = True
            self.refresh()

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if self.editor.drag.active:
            self.release_mouse()
            self.editor.release()
            self.refresh()
            if self._moved:
                self.post_message(self.Changed(self.editor.graph))

    def load_preset(self, preset: Preset) -> None:
        self.editor.load_preset(preset)
        self.refresh()

    def reset(self) -> None:
        self.editor.reset()
        self.refresh()
