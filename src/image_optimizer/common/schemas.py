"""Run configuration and output schemas."""

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_QUALITY = 75.0


class Encoder(StrEnum):
    """Lossy encoder variants. JPEG is the baseline encoder."""

    JPEG = "jpeg"
    WEBP = "webp"


class TargetSpec(BaseModel):
    """One requested resize, height derived from width once."""

    width: int = Field(gt=0, description="target width in pixels")
    height: int = Field(ge=0, description="derived target height in pixels")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


class CompressionConfig(BaseModel):
    quality: float = Field(DEFAULT_QUALITY, ge=0, le=100, description="lossy quality, 0-100")
    encoder: Encoder = Encoder.JPEG

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def quality_label(self) -> str:
        """Quality as rendered in output file names (80.0 -> "80", 80.5 -> "80.5")."""
        if self.quality.is_integer():
            return str(int(self.quality))
        return repr(self.quality)


class OptimizeConfig(BaseModel):
    """
    Frozen configuration for a single optimization run.

    - targets: ordered resize requests, duplicates allowed
    - compression: None means raw-save in the source container
    """

    targets: tuple[TargetSpec, ...] = ()
    compression: CompressionConfig | None = None
    exact_aspect: bool = False

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def resize_requested(self) -> bool:
        return len(self.targets) > 0

    @property
    def compression_requested(self) -> bool:
        return self.compression is not None


class VariantOutput(BaseModel):
    path: str = Field(description="path of the written variant")
    width: int
    height: int
    size_bytes: int = Field(ge=0)
    encoder: Encoder | None = Field(default=None, description="None for raw-saved variants")


class OptimizeOutput(BaseModel):
    variants: list[VariantOutput] = Field(default_factory=list)

    @property
    def paths(self) -> list[str]:
        return [variant.path for variant in self.variants]
