"""Freehand pad widget - sketch a pose with the mouse."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.widget import Widget

from posetransfer.editor.freehand import FreehandCanvas
from posetransfer.widgets.halfblock import image_to_text
from posetransfer.widgets.pose_canvas import cell_to_logical

if TYPE_CHECKING:
    from rich.console import RenderableType
    from textual import events

# Paper colour behind the strokes.
PAPER = (255, 255, 255)


class FreehandPad(Widget):
    """Terminal front end for :class:`FreehandCanvas`."""

    DEFAULT_CSS = """
    FreehandPad {
        width: 1fr;
        height: 1fr;
        min-height: 12;
    }
    """

    def __init__(
        self,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.sketch = FreehandCanvas(1, 2)
        # Thinner pen: one terminal cell is only two surface pixels tall.
        self.sketch.stroke_width = 1.0

    def render(self) -> RenderableType:
        return image_to_text(self.sketch.surface.image, PAPER)

    def on_resize(self, event: events.Resize) -> None:
        width, height = event.size.width, event.size.height
        if width > 0 and height > 0:
            self.sketch.resize(width, height * 2)
            self.refresh()

    def on_mouse_down(self, event: events.MouseDown) -> None:
        self.capture_mouse()
        self.sketch.press(*cell_to_logical(event.x, event.y))

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self.sketch.is_drawing:
            self.sketch.move(*cell_to_logical(event.x, event.y))
            self.refresh()

    def on_mouse_up(self, event: events.MouseUp) -> None:
        self.release_mouse()
        self.sketch.release()

    def clear(self) -> None:
        self.sketch.clear()
        self.refresh()
