"""image_optimizer - resize and re-encode a source image into optimized variants."""

from .algo.dimensions import compute_height_preserving_aspect_ratio
from .algo.encoders import Compressor, encode_jpeg, encode_webp, get_encoder
from .algo.path_namer import generate_save_path
from .algo.resample import resample
from .common.config_builder import ConfigBuilder
from .common.schemas import (
    CompressionConfig,
    Encoder,
    OptimizeConfig,
    OptimizeOutput,
    TargetSpec,
    VariantOutput,
)
from .common.source_image import SourceImage, load_source_image
from .errors import (
    CompressionFailed,
    ConfigurationError,
    DecodeError,
    ImageOptimizerError,
    InvalidTarget,
    IoError,
    PathError,
    ResizeError,
)
from .optimizer import Optimizer, OptimizerState, optimize

__version__ = "0.1.0"

__all__ = [
    "CompressionConfig",
    "CompressionFailed",
    "Compressor",
    "ConfigBuilder",
    "ConfigurationError",
    "DecodeError",
    "Encoder",
    "ImageOptimizerError",
    "InvalidTarget",
    "IoError",
    "OptimizeConfig",
    "OptimizeOutput",
    "Optimizer",
    "OptimizerState",
    "PathError",
    "ResizeError",
    "SourceImage",
    "TargetSpec",
    "VariantOutput",
    "__version__",
    "compute_height_preserving_aspect_ratio",
    "encode_jpeg",
    "encode_webp",
    "generate_save_path",
    "get_encoder",
    "load_source_image",
    "optimize",
    "resample",
]
