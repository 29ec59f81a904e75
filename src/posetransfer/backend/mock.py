"""Mock backend for testing and offline development."""

from __future__ import annotations

import asyncio
import io
from typing import TYPE_CHECKING

from PIL import Image, ImageChops, ImageOps

from posetransfer.backend.base import GenerationRequest, GenerationResult

if TYPE_CHECKING:
    from posetransfer.backend.base import ProgressCallback

DEFAULT_WIDTH = 512
DEFAULT_HEIGHT = 768


class MockBackend:
    """A mock backend that overlays the pose cue on the subject photo.

    Useful for exercising the full flow without network access or an API key.
    """

    def __init__(self, delay: float = 0.01) -> None:
        self.delay = delay

    async def connect(self) -> None:
        pass

    async def disconnect(self) -> None:
        pass

    async def is_available(self) -> bool:
        return True

    async def generate(
        self,
        request: GenerationRequest,
        progress_callback: ProgressCallback | None = None,
    ) -> GenerationResult:
        total_steps = 5
        for step in range(total_steps):
            if progress_callback:
                progress_callback(step + 1, total_steps, f"Mock generating step {step + 1}")
            await asyncio.sleep(self.delay)

        if request.dimensions is not None:
            size = (request.dimensions.width, request.dimensions.height)
        else:
            size = (DEFAULT_WIDTH, DEFAULT_HEIGHT)

        img = _overlay_pose(request.subject.open(), request.pose.open(), size)
        buf = io.BytesIO()
        img.save(buf, "PNG")
        return GenerationResult(
            image=buf.getvalue(),
            mime_type="image/png",
            text="[MOCK] pose overlay",
            metadata={"backend": "mock"},
        )

    async def get_models(self) -> list[str]:
        return ["mock-v1"]


def _overlay_pose(subject: Image.Image, pose: Image.Image, size: tuple[int, int]) -> Image.Image:
    """Fit the subject into *size* and multiply the pose cue over it."""
    base = ImageOps.fit(subject.convert("RGB"), size)
    cue = ImageOps.pad(pose.convert("RGB"), size, color=(255, 255, 255))
    return ImageChops.multiply(base, cue)
