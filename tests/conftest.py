"""Test configuration and fixtures for image_optimizer.

This module provides:
- Synthetic source images (numpy gradients) as SourceImage and as files
- A loguru sink fixture for asserting on log output
"""

from pathlib import Path

import numpy as np
import pytest
from loguru import logger
from numpy.typing import NDArray
from PIL import Image

from image_optimizer.common.source_image import SourceImage

# ============================================================================
# Helpers
# ============================================================================


def make_gradient(width: int, height: int) -> NDArray[np.uint8]:
    """Horizontal red ramp, vertical green ramp, constant blue."""
    xs = np.linspace(0, 255, width, dtype=np.float64)
    ys = np.linspace(0, 255, height, dtype=np.float64)
    array = np.zeros((height, width, 3), dtype=np.uint8)
    array[..., 0] = xs[np.newaxis, :].astype(np.uint8)
    array[..., 1] = ys[:, np.newaxis].astype(np.uint8)
    array[..., 2] = 128
    return array


def write_image(path: Path, width: int, height: int) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(make_gradient(width, height)).save(path)
    return path


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def source_800x600() -> SourceImage:
    return SourceImage.from_array(make_gradient(800, 600))


@pytest.fixture
def small_source() -> SourceImage:
    return SourceImage.from_array(make_gradient(64, 48))


@pytest.fixture
def jpeg_file(tmp_path: Path) -> Path:
    """800x600 JPEG inside its own directory."""
    return write_image(tmp_path / "photos" / "sample.jpg", 800, 600)


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    """64x48 PNG inside its own directory."""
    return write_image(tmp_path / "photos" / "small.png", 64, 48)


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message)), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def image_file_factory(tmp_path: Path):
    """Write a gradient image of any size/extension under tmp_path/photos."""

    def _factory(name: str, width: int, height: int) -> Path:
        return write_image(tmp_path / "photos" / name, width, height)

    return _factory
