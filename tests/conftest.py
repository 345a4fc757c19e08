"""Pytest fixtures for WebP converter tests."""

import logging
from pathlib import Path
from typing import Callable, Iterable

import pytest
import structlog
from PIL import Image

from webpconvert.core.exceptions import ConversionFailedError


def write_webp(path: Path, mode: str = "RGB", size=(16, 12), color="red") -> Path:
    """Write a small real WebP image to ``path``."""
    img = Image.new(mode, size, color=color)
    img.save(path, format="WEBP")
    return path


@pytest.fixture
def make_webp() -> Callable[..., Path]:
    """Factory writing real WebP files."""
    return write_webp


@pytest.fixture
def webp_file(tmp_path) -> Path:
    """A single WebP photo in a temporary directory."""
    return write_webp(tmp_path / "photo.webp")


@pytest.fixture
def webp_dir(tmp_path) -> Path:
    """Directory holding three WebP files and two unrelated files."""
    images = tmp_path / "images"
    images.mkdir()
    write_webp(images / "one.webp")
    write_webp(images / "two.WEBP", mode="RGBA", color=(0, 0, 255, 128))
    write_webp(images / "three.webp")
    (images / "notes.txt").write_text("not an image")
    Image.new("RGB", (4, 4)).save(images / "already.png", format="PNG")
    return images


class FakeConverter:
    """Stands in for the image library; fails for the listed file names."""

    def __init__(self, fail_names: Iterable[str] = ()):
        self.fail_names = set(fail_names)
        self.calls = []

    def __call__(self, source_path, output_format):
        self.calls.append((Path(source_path).name, output_format))
        if Path(source_path).name in self.fail_names:
            raise ConversionFailedError(f"simulated failure for {source_path}")
        return b"converted-bytes"


@pytest.fixture
def fake_converter() -> Callable[..., FakeConverter]:
    """Factory for converters that simulate collaborator faults."""
    return FakeConverter


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configuration done by CLI invocations."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    structlog.reset_defaults()
    root.handlers = saved_handlers
    root.setLevel(saved_level)
