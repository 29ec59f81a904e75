"""Output dimension hints accepted by the generation service."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ImageDimensions(BaseModel):
    """A requested output size for the generated image."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(gt=0)
    height: int = Field(gt=0)
    label: str

    @property
    def key(self) -> str:
        return f"{self.width}x{self.height}"


IMAGE_SIZE_OPTIONS: tuple[ImageDimensions, ...] = (
    ImageDimensions(width=512, height=512, label="Square (1:1)"),
    ImageDimensions(width=512, height=768, label="Portrait (2:3)"),
    ImageDimensions(width=768, height=512, label="Landscape (3:2)"),
    ImageDimensions(width=512, height=896, label="Full-body portrait (4:7)"),
    ImageDimensions(width=896, height=512, label="Full-body landscape (7:4)"),
    ImageDimensions(width=1024, height=1024, label="HD square (1:1)"),
)


def get_size(key: str) -> ImageDimensions:
    """Look up one of :data:`IMAGE_SIZE_OPTIONS` by its ``"WxH"`` key.

    Raises
    ------
    ValueError
        If *key* does not name one of the supported sizes.
    """
    normalized = key.strip().lower().replace("×", "x")
    for option in IMAGE_SIZE_OPTIONS:
        if option.key == normalized:
            return option
    choices = ", ".join(o.key for o in IMAGE_SIZE_OPTIONS)
    msg = f"Unsupported output size '{key}' (choose from: {choices})"
    raise ValueError(msg)
