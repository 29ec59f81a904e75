"""Uploaded images and data-URL helpers."""

from __future__ import annotations

import base64
import binascii
import io
from pathlib import Path

from PIL import Image, UnidentifiedImageError
from pydantic import BaseModel, ConfigDict

SUPPORTED_MIME_TYPES: dict[str, str] = {
    "PNG": "image/png",
    "JPEG": "image/jpeg",
    "WEBP": "image/webp",
}


class ImageLoadError(ValueError):
    """Raised when an image cannot be read or is not a supported format."""


def split_data_url(data_url: str) -> tuple[str, str]:
    """Split ``data:<mime>;base64,<payload>`` into ``(mime, payload)``.

    A header without a media type falls back to ``image/png``.
    """
    header, sep, payload = data_url.partition(",")
    if not sep or not header.startswith("data:"):
        msg = "not a data URL"
        raise ImageLoadError(msg)
    mime = header[len("data:"):].split(";", 1)[0] or "image/png"
    return mime, payload


class UploadedImage(BaseModel):
    """Raw image bytes plus their declared media type."""

    model_config = ConfigDict(frozen=True)

    data: bytes
    mime_type: str = "image/png"

    @classmethod
    def from_bytes(cls, data: bytes) -> UploadedImage:
        """Sniff the format of *data* and accept PNG, JPEG or WEBP."""
        try:
            with Image.open(io.BytesIO(data)) as img:
                fmt = img.format
        except UnidentifiedImageError:
            msg = "file is not a recognised image"
            raise ImageLoadError(msg) from None
        mime = SUPPORTED_MIME_TYPES.get(fmt or "")
        if mime is None:
            msg = f"unsupported image format: {fmt} (use PNG, JPEG or WEBP)"
            raise ImageLoadError(msg)
        return cls(data=data, mime_type=mime)

    @classmethod
    def from_path(cls, path: Path) -> UploadedImage:
        try:
            data = path.read_bytes()
        except FileNotFoundError:
            msg = f"image file not found: {path}"
            raise ImageLoadError(msg) from None
        except PermissionError:
            msg = f"permission denied reading image file: {path}"
            raise ImageLoadError(msg) from None
        return cls.from_bytes(data)

    @classmethod
    def from_data_url(cls, data_url: str) -> UploadedImage:
        mime, payload = split_data_url(data_url)
        try:
            data = base64.b64decode(payload, validate=True)
        except binascii.Error as exc:
            msg = f"data URL has an invalid base64 payload: {exc}"
            raise ImageLoadError(msg) from None
        return cls(data=data, mime_type=mime)

    @property
    def base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.base64}"

    def open(self) -> Image.Image:
        """Decode the bytes into a Pillow image."""
        img = Image.open(io.BytesIO(self.data))
        img.load()
        return img
