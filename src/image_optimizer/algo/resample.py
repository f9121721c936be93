"""Raw RGB buffer resampling (Lanczos, 3-lobe window)."""

from PIL import Image

from ..errors import ResizeError
from ..utils.profiling import timed

CHANNELS = 3


@timed
def resample(
    pixels: bytes,
    src_size: tuple[int, int],
    dest_size: tuple[int, int],
) -> bytes:
    """
    Resample an RGB8 buffer from ``src_size`` to ``dest_size``.

    Always returns a new buffer of exactly ``dest_width * dest_height * 3``
    bytes; a same-size request yields a copy of the input.

    Raises:
        ResizeError: If the buffer length does not match ``src_size`` or
            either size has a zero/negative side
    """
    src_width, src_height = src_size
    dest_width, dest_height = dest_size

    if src_width <= 0 or src_height <= 0:
        raise ResizeError(f"Invalid source size {src_width}x{src_height}")
    if dest_width <= 0 or dest_height <= 0:
        raise ResizeError(
            f"Cannot resample {src_width}x{src_height} to {dest_width}x{dest_height}",
            width=dest_width,
        )

    expected = src_width * src_height * CHANNELS
    if len(pixels) != expected:
        raise ResizeError(
            f"Buffer holds {len(pixels)} bytes, expected {expected} "
            + f"for {src_width}x{src_height} RGB",
            width=dest_width,
        )

    try:
        source = Image.frombytes("RGB", (src_width, src_height), pixels)
        resized = source.resize(
            (dest_width, dest_height),
            Image.Resampling.LANCZOS,
        )
    except (OSError, ValueError) as exc:
        raise ResizeError(f"Error resizing image: {exc}", width=dest_width) from exc

    return resized.tobytes()
