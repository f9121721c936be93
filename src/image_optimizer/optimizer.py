"""Optimizer - resize/compress orchestration for one source image."""

from enum import StrEnum
from pathlib import Path

from loguru import logger
from PIL import Image

from .algo.encoders import Compressor
from .algo.path_namer import ensure_parent_directory_exists, generate_save_path, get_pil_format
from .algo.resample import resample
from .common.schemas import OptimizeConfig, OptimizeOutput, TargetSpec, VariantOutput
from .common.source_image import SourceImage
from .errors import ConfigurationError, ImageOptimizerError, IoError


class OptimizerState(StrEnum):
    CONFIGURED = "configured"
    OPTIMIZED = "optimized"
    FAILED = "failed"


class Optimizer:
    """
    Produces every requested variant of one decoded source image.

    - Resize is all-or-nothing: either every target is resampled or the run
      works on the source dimensions
    - Variants are processed in order; the first failure aborts the run and
      files already written stay on disk
    - A run happens once; the optimizer is then OPTIMIZED or FAILED
    """

    def __init__(self, source: SourceImage, source_path: str | Path, config: OptimizeConfig):
        self.source: SourceImage = source
        self.source_path: Path = Path(source_path)
        self.config: OptimizeConfig = config
        self.compressor: Compressor | None = (
            Compressor(config.compression) if config.compression is not None else None
        )
        self.state: OptimizerState = OptimizerState.CONFIGURED

    def generate_save_path(self, width: int) -> Path:
        return generate_save_path(self.source_path, width, self.config.compression)

    def compress(self) -> bytes:
        """Encode the source at its own dimensions without writing anything."""
        if self.compressor is None:
            raise ConfigurationError("Must provide a quality value/compressor to compress an image")
        return self.compressor.compress(self.source.pixels, self.source.width, self.source.height)

    def optimize(self) -> OptimizeOutput:
        """
        Write every requested variant.

        Returns:
            OptimizeOutput listing the written variants in order

        Raises:
            ConfigurationError: If nothing was requested or the run already happened
            ImageOptimizerError: First failure of any variant
        """
        if self.state != OptimizerState.CONFIGURED:
            raise ConfigurationError(f"Optimizer already ran (state: {self.state})")

        if not self.config.resize_requested and not self.config.compression_requested:
            self.state = OptimizerState.FAILED
            raise ConfigurationError("Nothing to do: encoding or resizing must be requested")

        output = OptimizeOutput()
        try:
            if self.config.resize_requested:
                for target in self.config.targets:
                    output.variants.append(self._resize_and_maybe_compress(target))
            else:
                output.variants.append(self._compress_self())
        except ImageOptimizerError:
            self.state = OptimizerState.FAILED
            logger.error(
                f"Optimization of {self.source_path} failed after "
                + f"{len(output.variants)} variant(s) were written"
            )
            raise

        self.state = OptimizerState.OPTIMIZED
        return output

    def _compress_self(self) -> VariantOutput:
        write_path = self.generate_save_path(self.source.width)
        data = self.compress()
        self._write_bytes(write_path, data)
        return self._variant(write_path, self.source.width, self.source.height, len(data))

    def _resize_and_maybe_compress(self, target: TargetSpec) -> VariantOutput:
        write_path = self.generate_save_path(target.width)
        raw_format = get_pil_format(self.source_path.suffix) if self.compressor is None else None

        resized = resample(
            self.source.pixels,
            self.source.size,
            (target.width, target.height),
        )

        if self.compressor is not None:
            data = self.compressor.compress(resized, target.width, target.height)
            self._write_bytes(write_path, data)
            size = len(data)
        else:
            assert raw_format is not None
            size = self._save_raw(write_path, resized, target, raw_format)

        return self._variant(write_path, target.width, target.height, size)

    def _variant(self, path: Path, width: int, height: int, size: int) -> VariantOutput:
        logger.info(f"Wrote {path} ({width}x{height}, {size} bytes)")
        return VariantOutput(
            path=str(path),
            width=width,
            height=height,
            size_bytes=size,
            encoder=self.compressor.encoder if self.compressor is not None else None,
        )

    def _write_bytes(self, path: Path, data: bytes) -> None:
        ensure_parent_directory_exists(path)
        try:
            with open(path, "wb") as f:
                _ = f.write(data)
        except OSError as exc:
            raise IoError(f"Could not write variant: {exc}", path=path) from exc

    def _save_raw(self, path: Path, pixels: bytes, target: TargetSpec, pil_format: str) -> int:
        """Save RGB8 pixels in the source's own container format."""
        ensure_parent_directory_exists(path)
        try:
            Image.frombytes("RGB", (target.width, target.height), pixels).save(
                path, format=pil_format
            )
        except (OSError, ValueError) as exc:
            raise IoError(f"Could not save variant as {pil_format}: {exc}", path=path) from exc
        return path.stat().st_size


def optimize(source: SourceImage, source_path: str | Path, config: OptimizeConfig) -> OptimizeOutput:
    """Run a fresh Optimizer once."""
    return Optimizer(source, source_path, config).optimize()
