"""Shared fixtures for PoseTransfer tests."""

import io
from pathlib import Path

import pytest
from PIL import Image

from posetransfer.models import PoseGraph, UploadedImage
from posetransfer.poses import load


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep config/output directories out of the real home directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    return home


@pytest.fixture
def subject_png() -> bytes:
    img = Image.new("RGB", (64, 96), (180, 120, 90))
    buf = io.BytesIO()
    img.save(buf, "PNG")
    return buf.getvalue()


@pytest.fixture
def subject(subject_png: bytes) -> UploadedImage:
    return UploadedImage(data=subject_png, mime_type="image/png")


@pytest.fixture
def subject_path(tmp_path: Path, subject_png: bytes) -> Path:
    path = tmp_path / "subject.png"
    path.write_bytes(subject_png)
    return path


@pytest.fixture
def standing() -> PoseGraph:
    return load("Standing").to_graph()
