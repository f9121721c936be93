"""Staged builder producing a frozen OptimizeConfig."""

from collections.abc import Iterable
from typing import Self

from pydantic import ValidationError

from ..algo.dimensions import compute_height_preserving_aspect_ratio
from ..errors import ConfigurationError
from .schemas import DEFAULT_QUALITY, CompressionConfig, Encoder, OptimizeConfig, TargetSpec


class ConfigBuilder:
    """
    Collects target widths and compression settings for one source image.

    Heights are derived when ``build()`` runs, so ``with_exact_aspect`` may be
    called in any order. Selecting an encoder without a quality compresses at
    the default quality (75); a quality without an encoder uses JPEG.
    """

    def __init__(self, source_size: tuple[int, int]):
        self.source_size: tuple[int, int] = source_size
        self._widths: list[int] = []
        self._quality: float | None = None
        self._encoder: Encoder | None = None
        self._exact_aspect: bool = False

    def with_widths(self, widths: Iterable[int]) -> Self:
        self._widths = list(widths)
        return self

    def add_width(self, width: int) -> Self:
        self._widths.append(width)
        return self

    def with_quality(self, quality: float) -> Self:
        self._quality = quality
        return self

    def with_encoder(self, encoder: Encoder | str) -> Self:
        try:
            self._encoder = Encoder(encoder)
        except ValueError as exc:
            raise ConfigurationError(
                f"Unknown encoder '{encoder}'. Supported: {[e.value for e in Encoder]}"
            ) from exc
        return self

    def with_exact_aspect(self, exact: bool = True) -> Self:
        self._exact_aspect = exact
        return self

    def _compression(self) -> CompressionConfig | None:
        if self._quality is None and self._encoder is None:
            return None
        return CompressionConfig(
            quality=self._quality if self._quality is not None else DEFAULT_QUALITY,
            encoder=self._encoder if self._encoder is not None else Encoder.JPEG,
        )

    def build(self) -> OptimizeConfig:
        """
        Freeze the staged settings.

        Raises:
            ConfigurationError: If neither widths nor compression were
                requested, or a setting fails validation
            InvalidTarget: If a width cannot be scaled from the source
        """
        if not self._widths and self._quality is None and self._encoder is None:
            raise ConfigurationError(
                "Nothing to do: provide target widths and/or a quality value"
            )

        targets = tuple(
            TargetSpec(
                width=width,
                height=compute_height_preserving_aspect_ratio(
                    self.source_size, width, exact=self._exact_aspect
                ),
            )
            for width in self._widths
        )

        try:
            return OptimizeConfig(
                targets=targets,
                compression=self._compression(),
                exact_aspect=self._exact_aspect,
            )
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc
