"""Lossy encoder backends and the compressor that dispatches between them."""

from collections.abc import Callable
from io import BytesIO
from typing import TypeAlias

from PIL import Image

from ..common.schemas import CompressionConfig, Encoder
from ..errors import CompressionFailed
from ..utils.profiling import timed

CHANNELS = 3

EncodeFn: TypeAlias = Callable[[bytes, int, int, float], bytes]


def _to_image(pixels: bytes, width: int, height: int) -> Image.Image:
    expected = width * height * CHANNELS
    if width <= 0 or height <= 0 or len(pixels) != expected:
        raise CompressionFailed(
            f"Buffer holds {len(pixels)} bytes, expected {expected} for {width}x{height} RGB",
            width=width,
        )
    return Image.frombytes("RGB", (width, height), pixels)


def _encode(img: Image.Image, format: str, **save_kwargs: object) -> bytes:
    buffer = BytesIO()
    try:
        img.save(buffer, format=format, **save_kwargs)
    except (OSError, ValueError) as exc:
        raise CompressionFailed(
            f"{format} encoder failed: {exc}",
            width=img.width,
        ) from exc
    return buffer.getvalue()


@timed
def encode_jpeg(pixels: bytes, width: int, height: int, quality: float) -> bytes:
    """Baseline JPEG. Quality is rounded onto libjpeg's integer 0-100 scale."""
    img = _to_image(pixels, width, height)
    return _encode(img, "JPEG", quality=int(round(quality)), optimize=True)


@timed
def encode_webp(pixels: bytes, width: int, height: int, quality: float) -> bytes:
    """Lossy WebP; never falls back to lossless."""
    img = _to_image(pixels, width, height)
    return _encode(img, "WEBP", quality=float(quality), lossless=False)


ENCODERS: dict[Encoder, EncodeFn] = {
    Encoder.JPEG: encode_jpeg,
    Encoder.WEBP: encode_webp,
}


def get_encoder(encoder: Encoder) -> EncodeFn:
    return ENCODERS[encoder]


class Compressor:
    """Binds one CompressionConfig to its encoder backend."""

    def __init__(self, config: CompressionConfig):
        self.config: CompressionConfig = config
        self._encode: EncodeFn = get_encoder(config.encoder)

    @property
    def quality(self) -> float:
        return self.config.quality

    @property
    def encoder(self) -> Encoder:
        return self.config.encoder

    def compress(self, pixels: bytes, width: int, height: int) -> bytes:
        """
        Encode an RGB8 buffer of exactly ``width x height`` pixels.

        Raises:
            CompressionFailed: On buffer/shape mismatch or encoder failure
        """
        return self._encode(pixels, width, height, self.config.quality)
