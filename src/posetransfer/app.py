"""PoseTransfer - Textual TUI application entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import (
    Button,
    Footer,
    Header,
    Input,
    Label,
    OptionList,
    Select,
    Static,
    TabbedContent,
    TabPane,
)

from posetransfer.backend.base import GenerationError
from posetransfer.editor import PoseEditor
from posetransfer.models.enums import PoseMode
from posetransfer.models.sizes import IMAGE_SIZE_OPTIONS, get_size
from posetransfer.models.upload import ImageLoadError, UploadedImage
from posetransfer.pipeline.export import save_pose_image
from posetransfer.pipeline.transfer import NoPoseError, PoseTransferSession, save_result
from posetransfer.poses import all_presets
from posetransfer.widgets import FreehandPad, PoseCanvas

if TYPE_CHECKING:
    from textual.binding import BindingType

    from posetransfer.backend.base import GenerationBackend
    from posetransfer.config import AppConfig
    from posetransfer.models.sizes import ImageDimensions

logger = logging.getLogger(__name__)

RESULT_FILENAME = "ai-pose-transfer.png"
POSE_FILENAME = "pose.png"


def _tab(mode: PoseMode) -> str:
    return f"tab-{mode}"


class PoseTransferApp(App[None]):
    """Pick a photo, shape a pose, and re-render the photo in that pose."""

    TITLE = "PoseTransfer"
    SUB_TITLE = "Photo re-posing with a generative image model"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        background: #0e7490;
        color: #ecfeff;
        dock: top;
        height: 1;
    }

    Footer {
        background: #0f172a;
        color: #a5f3fc;
    }

    #pose-area {
        width: 2fr;
        height: 1fr;
    }

    #side-panel {
        width: 1fr;
        height: 1fr;
        padding: 0 2;
        background: #0f172a;
        border: round #0e7490;
    }

    #side-panel Label {
        color: #a5f3fc;
        margin: 1 0 0 0;
    }

    #side-panel Button {
        width: 100%;
        margin: 1 0 0 0;
    }

    Button.primary {
        background: #0891b2;
        color: #ecfeff;
    }

    #status {
        margin: 1 0 0 0;
        color: #e2e8f0;
        height: auto;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("q", "quit", "Quit", show=True),
        Binding("g", "generate", "Generate", show=True),
        Binding("e", "export_pose", "Export pose", show=True),
        Binding("r", "reset_pose", "Reset pose", show=True),
        Binding("c", "clear_drawing", "Clear drawing", show=False),
    ]

    def __init__(self, config: AppConfig, backend: GenerationBackend) -> None:
        super().__init__()
        self.config = config
        self.backend = backend
        self.session = PoseTransferSession(backend)
        self.status_text = ""

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal():
            with TabbedContent(initial=_tab(PoseMode.EDITOR), id="pose-area"):
                with TabPane("Editor", id=_tab(PoseMode.EDITOR)):
                    yield PoseCanvas(
                        PoseEditor(
                            joint_radius=self.config.editor.joint_radius,
                            hit_tolerance=self.config.editor.hit_tolerance,
                        ),
                        id="pose-canvas",
                    )
                with TabPane("Presets", id=_tab(PoseMode.PRESETS)):
                    yield OptionList(*(p.name for p in all_presets()), id="preset-list")
                with TabPane("Draw", id=_tab(PoseMode.DRAW)):
                    yield FreehandPad(id="freehand")
            with Vertical(id="side-panel"):
                yield Label("Subject photo")
                yield Input(placeholder="path/to/photo.png", id="photo-path")
                yield Label("Output size")
                yield Select(
                    [(f"{o.label} {o.width}x{o.height}", o.key) for o in IMAGE_SIZE_OPTIONS],
                    value=self.config.editor.default_size,
                    allow_blank=False,
                    id="size-select",
                )
                yield Button("Generate", id="btn-generate", classes="primary")
                yield Button("Export pose", id="btn-export")
                yield Static("Your generated image will appear here.", id="status")
        yield Footer()

    async def on_mount(self) -> None:
        await self.backend.connect()

    async def on_unmount(self) -> None:
        await self.backend.disconnect()

    # ── Events ───────────────────────────────────────────────
    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.select_preset(event.option_index)

    def select_preset(self, index: int) -> None:
        """Load catalog preset *index* into the editor and switch to it."""
        preset = all_presets()[index]
        self.query_one(PoseCanvas).load_preset(preset)
        self.query_one(TabbedContent).active = _tab(PoseMode.EDITOR)
        self._set_status(f"Loaded preset: {preset.name}")

    def on_pose_canvas_changed(self, event: PoseCanvas.Changed) -> None:
        self._set_status("Pose edited. Press g to generate.")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        match event.button.id:
            case "btn-generate":
                self.action_generate()
            case "btn-export":
                self.action_export_pose()

    # ── Actions ──────────────────────────────────────────────
    def action_reset_pose(self) -> None:
        self.query_one(PoseCanvas).reset()
        self._set_status("Pose reset")

    def action_clear_drawing(self) -> None:
        self.query_one(FreehandPad).clear()

    def action_export_pose(self) -> None:
        out = self.config.output_dir / POSE_FILENAME
        save_pose_image(self.query_one(PoseCanvas).editor.graph, out)
        self._set_status(f"Pose cue saved: {out}")

    def action_generate(self) -> None:
        if self.session.is_pending:
            return
        photo = self.query_one("#photo-path", Input).value.strip()
        if not photo:
            self._set_status("Please upload an image first.")
            return
        try:
            subject = UploadedImage.from_path(Path(photo).expanduser())
        except ImageLoadError as exc:
            self._set_status(f"Error: {exc}")
            return

        size_key = self.query_one("#size-select", Select).value
        dimensions = get_size(str(size_key))
        self.query_one("#btn-generate", Button).disabled = True
        self._set_status("Warming up the AI's digital paintbrush...")
        self.run_worker(self._run_generation(subject, self.pose_data_url(), dimensions), exclusive=True)

    @property
    def pose_mode(self) -> PoseMode:
        """Pose input mode of the active tab."""
        return PoseMode(self.query_one(TabbedContent).active.removeprefix("tab-"))

    def pose_data_url(self) -> str | None:
        """Pose cue for the active mode; ``None`` when nothing is drawn."""
        if self.pose_mode is PoseMode.DRAW:
            return self.query_one(FreehandPad).sketch.get_export_data_url()
        return self.query_one(PoseCanvas).editor.get_export_data_url()

    async def _run_generation(
        self,
        subject: UploadedImage,
        pose_data_url: str | None,
        dimensions: ImageDimensions,
    ) -> None:
        def on_progress(step: int, total: int, status: str) -> None:
            self._set_status(f"{status} ({step}/{total})")

        try:
            result = await self.session.generate(
                subject, pose_data_url, dimensions, progress_callback=on_progress,
            )
            out = save_result(result, self.config.output_dir / RESULT_FILENAME)
            self._set_status(f"Saved: {out}")
        except (NoPoseError, GenerationError) as exc:
            logger.warning("Generation failed: %s", exc)
            self._set_status(f"Error: {exc}")
        finally:
            self.query_one("#btn-generate", Button).disabled = False

    def _set_status(self, text: str) -> None:
        self.status_text = text
        self.query_one("#status", Static).update(text)


def run(config: AppConfig | None = None) -> None:
    """Launch the TUI with the configured backend."""
    from posetransfer.backend import create_backend
    from posetransfer.config import load_config

    config = config or load_config()
    app = PoseTransferApp(config, create_backend(config.active_backend, config))
    app.run()


if __name__ == "__main__":
    run()
