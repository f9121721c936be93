"""Aspect-ratio preserving target dimension computation."""

from ..errors import InvalidTarget


def compute_height_preserving_aspect_ratio(
    source_size: tuple[int, int],
    target_width: int,
    *,
    exact: bool = False,
) -> int:
    """
    Compute the target height for ``target_width`` keeping the source aspect ratio.

    Default policy truncates: ``factor = source_width // target_width`` and
    ``height = source_height // factor``. This is only exact when
    ``target_width`` divides ``source_width``; other widths get the height of
    the next coarser integer factor (e.g. 800x600 -> 300 gives 300x300).
    ``exact=True`` uses the rounded proportional height instead.

    Args:
        source_size: (width, height) of the source image
        target_width: Requested output width
        exact: Use rounded proportional scaling instead of truncation

    Returns:
        Target height in pixels

    Raises:
        InvalidTarget: If the target width is not positive or exceeds the
            source width (zero scaling factor)
    """
    source_width, source_height = source_size

    if source_width <= 0 or source_height <= 0:
        raise InvalidTarget(
            f"Source dimensions must be positive, got {source_width}x{source_height}",
            width=target_width,
        )
    if target_width <= 0:
        raise InvalidTarget("Target width must be positive", width=target_width)

    factor = source_width // target_width
    if factor == 0:
        raise InvalidTarget(
            f"Target width exceeds source width {source_width}; upscaling is not supported",
            width=target_width,
        )

    if exact:
        return max(1, round(source_height * target_width / source_width))

    return source_height // factor
