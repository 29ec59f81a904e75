"""Encode pose cues as PNG payloads for the generation service."""

from __future__ import annotations

import base64
import io
import logging
from typing import TYPE_CHECKING

from posetransfer.pipeline.render import render_export

if TYPE_CHECKING:
    from pathlib import Path

    from PIL import Image

    from posetransfer.models.pose import PoseGraph

logger = logging.getLogger(__name__)

PNG_MIME = "image/png"


def encode_png(img: Image.Image) -> bytes:
    """Serialise *img* as PNG bytes."""
    buf = io.BytesIO()
    img.save(buf, "PNG")
    return buf.getvalue()


def to_data_url(data: bytes, mime_type: str = PNG_MIME) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def export_png(graph: PoseGraph) -> bytes:
    """Rasterise *graph* as a pose cue and return the PNG bytes.

    The graph is only read; the result shares nothing with it.
    """
    return encode_png(render_export(graph))


def export_data_url(graph: PoseGraph) -> str:
    return to_data_url(export_png(graph))


def save_pose_image(graph: PoseGraph, output_path: Path) -> Path:
    """Write the pose cue for *graph* to *output_path* as PNG."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(export_png(graph))
    logger.info("Saved pose cue: %s", output_path)
    return output_path
