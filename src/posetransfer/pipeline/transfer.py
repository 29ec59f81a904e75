"""Pose-transfer orchestration: validate inputs, call the backend, check output."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from posetransfer.backend.base import GenerationError, GenerationRequest
from posetransfer.models.upload import UploadedImage
from posetransfer.pipeline.prompts import build_instruction

if TYPE_CHECKING:
    from pathlib import Path

    from posetransfer.backend.base import GenerationBackend, GenerationResult, ProgressCallback
    from posetransfer.models.sizes import ImageDimensions

logger = logging.getLogger(__name__)

NO_POSE_MESSAGE = "Please create a pose first using one of the available modes."
NO_IMAGE_MESSAGE = (
    "The AI model did not return an image. Please try a different pose or source image."
)


class NoPoseError(ValueError):
    """Raised when generation is requested before any pose exists."""


class GenerationInProgressError(RuntimeError):
    """Raised when a second request is started while one is still pending."""


class PoseTransferSession:
    """Runs one generation at a time against a backend.

    A request, once issued, runs to completion or failure; there is no
    cancellation and no automatic retry.
    """

    def __init__(self, backend: GenerationBackend) -> None:
        self.backend = backend
        self._pending = False

    @property
    def is_pending(self) -> bool:
        return self._pending

    async def generate(
        self,
        subject: UploadedImage,
        pose_data_url: str | None,
        dimensions: ImageDimensions | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> GenerationResult:
        """Re-render *subject* in the pose encoded by *pose_data_url*.

        Raises
        ------
        NoPoseError
            If *pose_data_url* is ``None`` (nothing drawn yet).
        GenerationInProgressError
            If another request from this session has not finished.
        GenerationError
            If the backend fails or answers without an image.
        """
        if pose_data_url is None:
            raise NoPoseError(NO_POSE_MESSAGE)
        if self._pending:
            msg = "A generation request is already in progress"
            raise GenerationInProgressError(msg)

        request = GenerationRequest(
            subject=subject,
            pose=UploadedImage.from_data_url(pose_data_url),
            instruction=build_instruction(dimensions),
            dimensions=dimensions,
        )

        self._pending = True
        try:
            logger.info(
                "Generating pose transfer (%s)",
                dimensions.key if dimensions is not None else "default size",
            )
            result = await self.backend.generate(request, progress_callback=progress_callback)
        finally:
            self._pending = False

        if result.image is None:
            raise GenerationError(NO_IMAGE_MESSAGE)
        return result


def save_result(result: GenerationResult, output_path: Path) -> Path:
    """Write a generated image to disk."""
    if result.image is None:
        raise GenerationError(NO_IMAGE_MESSAGE)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(result.image)
    logger.info("Saved generated image: %s", output_path)
    return output_path
