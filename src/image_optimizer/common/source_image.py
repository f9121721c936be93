"""Decoded source image held by the optimizer for a whole run."""

from dataclasses import dataclass
from pathlib import Path

import numpy as np
from loguru import logger
from numpy.typing import NDArray
from PIL import Image

from ..errors import ConfigurationError, DecodeError

CHANNELS = 3


@dataclass(frozen=True)
class SourceImage:
    """Immutable 8-bit RGB buffer (row-major, no alpha) plus its dimensions."""

    pixels: bytes
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"Source dimensions must be positive, got {self.width}x{self.height}"
            )
        expected = self.width * self.height * CHANNELS
        if len(self.pixels) != expected:
            raise ConfigurationError(
                f"Source buffer holds {len(self.pixels)} bytes, "
                + f"expected {expected} for {self.width}x{self.height} RGB"
            )

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @classmethod
    def from_array(cls, array: NDArray[np.uint8]) -> "SourceImage":
        """Build from an (height, width, 3) uint8 array."""
        if array.ndim != 3 or array.shape[2] != CHANNELS:
            raise ConfigurationError(f"Expected an (H, W, 3) array, got shape {array.shape}")
        height, width = int(array.shape[0]), int(array.shape[1])
        return cls(
            pixels=np.ascontiguousarray(array, dtype=np.uint8).tobytes(),
            width=width,
            height=height,
        )

    def as_array(self) -> NDArray[np.uint8]:
        """Read-only (height, width, 3) view over the pixel buffer."""
        return np.frombuffer(self.pixels, dtype=np.uint8).reshape(
            self.height, self.width, CHANNELS
        )


def load_source_image(path: str | Path) -> SourceImage:
    """
    Decode an image file into an RGB8 SourceImage.

    Any container Pillow can read is accepted; alpha and palette modes are
    flattened to RGB.

    Raises:
        DecodeError: If the file is missing or Pillow cannot decode it
    """
    path = Path(path)

    if not path.exists():
        raise DecodeError("Input file not found", path=path)

    try:
        with Image.open(path) as img:
            rgb = img.convert("RGB")
            pixels = rgb.tobytes()
            width, height = rgb.size
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"Could not decode image: {exc}", path=path) from exc

    logger.debug(f"Decoded {path} ({width}x{height})")
    return SourceImage(pixels=pixels, width=width, height=height)
