"""Output path naming for optimized variants."""

from pathlib import Path

from PIL import Image

from ..common.schemas import CompressionConfig, Encoder
from ..errors import IoError, PathError

OUTPUT_DIR_NAME = "optimized"


def _source_extension(path: Path, width: int) -> str:
    ext = path.suffix.lstrip(".")
    if not ext:
        raise PathError("Expected an extension present on image path", width=width, path=path)
    return ext


def generate_save_path(
    source_path: str | Path,
    width: int,
    compression: CompressionConfig | None = None,
) -> Path:
    """
    Derive ``<source_dir>/optimized/<stem>_<width>[_<quality>].<ext>``.

    The extension is ``webp`` for the WebP encoder and the source extension
    otherwise (baseline JPEG output and raw-saved variants alike). Pure: the
    directory is not created here.

    Raises:
        PathError: If the source path has no parent, no stem, or no extension
    """
    path = Path(source_path)

    if path.parent == path:
        raise PathError("Provided image must have a parent directory", width=width, path=path)

    stem = path.stem
    if not stem:
        raise PathError("Error getting file name", width=width, path=path)

    file_name = f"{stem}_{width}"

    if compression is not None:
        file_name += f"_{compression.quality_label}"
        if compression.encoder == Encoder.WEBP:
            ext = "webp"
        else:
            ext = _source_extension(path, width)
    else:
        ext = _source_extension(path, width)

    return path.parent / OUTPUT_DIR_NAME / f"{file_name}.{ext}"


def ensure_parent_directory_exists(path: Path) -> None:
    """Create the parent directory of ``path`` recursively; existing dirs are fine."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise IoError(f"Could not create output directory: {exc}", path=path.parent) from exc


def get_pil_format(extension: str) -> str:
    """
    Map a file extension (``jpg``, ``.PNG``...) to a Pillow format it can write.

    Raises:
        PathError: If the extension is unknown or Pillow can only read it
    """
    suffix = "." + extension.lower().lstrip(".")
    pil_format = Image.registered_extensions().get(suffix)
    if pil_format is None:
        raise PathError(f"No image container registered for extension '{extension}'")
    Image.init()
    if pil_format.upper() not in Image.SAVE:
        raise PathError(f"No writer for container {pil_format} (extension '{extension}')")
    return pil_format
