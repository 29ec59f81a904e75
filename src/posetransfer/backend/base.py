"""Backend protocol and shared types for pose-transfer generation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, TypeAlias, runtime_checkable

if TYPE_CHECKING:
    from posetransfer.models.sizes import ImageDimensions
    from posetransfer.models.upload import UploadedImage


class GenerationError(RuntimeError):
    """Raised when the generation service fails or returns no image."""


@dataclass
class GenerationRequest:
    """A subject photo plus a pose cue to re-render it in."""

    subject: UploadedImage
    pose: UploadedImage
    instruction: str
    dimensions: ImageDimensions | None = None
    extra_params: dict[str, object] = field(default_factory=dict)


@dataclass
class GenerationResult:
    """Result from a generation request.

    ``image`` is ``None`` when the service answered without an image.
    """

    image: bytes | None
    mime_type: str = "image/png"
    text: str = ""
    metadata: dict[str, object] = field(default_factory=dict)


@runtime_checkable
class GenerationBackend(Protocol):
    """Protocol for image generation backends."""

    async def connect(self) -> None:
        """Establish connection to the backend."""
        ...

    async def disconnect(self) -> None:
        """Close connection to the backend."""
        ...

    async def is_available(self) -> bool:
        """Check if the backend is reachable and ready."""
        ...

    async def generate(
        self,
        request: GenerationRequest,
        progress_callback: ProgressCallback | None = None,
    ) -> GenerationResult:
        """Re-render the subject in the requested pose."""
        ...

    async def get_models(self) -> list[str]:
        """List the models this backend talks to."""
        ...


# Callback type for generation progress updates
ProgressCallback: TypeAlias = Callable[[int, int, str], None]  # (step, total, status)
