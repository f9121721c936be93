"""Typed failures raised by the optimization pipeline."""

from pathlib import Path
from typing import override


class ImageOptimizerError(Exception):
    """
    Base class for every failure surfaced by image_optimizer.

    Carries the offending width and/or path (when known) so callers can
    report which variant broke the run.
    """

    def __init__(
        self,
        message: str = "An unknown optimizer error occurred.",
        *,
        width: int | None = None,
        path: str | Path | None = None,
    ):
        self.message: str = message
        self.width: int | None = width
        self.path: Path | None = Path(path) if path is not None else None
        super().__init__(self.message)

    @override
    def __str__(self):
        context: list[str] = []
        if self.width is not None:
            context.append(f"width={self.width}")
        if self.path is not None:
            context.append(f"path={self.path}")
        if not context:
            return f"{type(self).__name__}: {self.message}"
        return f"{type(self).__name__}: {self.message} ({', '.join(context)})"


class ConfigurationError(ImageOptimizerError):
    """No work requested, or the requested work is inconsistent."""


class InvalidTarget(ImageOptimizerError):
    """Target width produces a degenerate scaling factor."""


class ResizeError(ImageOptimizerError):
    """Resampler could not be built or failed to run."""


class CompressionFailed(ImageOptimizerError):
    """Lossy encoder rejected the buffer or aborted."""


class PathError(ImageOptimizerError):
    """Source path lacks a parent directory, stem or extension."""


class IoError(ImageOptimizerError):
    """Directory creation or file write failed."""


class DecodeError(ImageOptimizerError):
    """Source image could not be read or decoded."""
