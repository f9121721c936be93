"""Command-line entry point: image-optimizer IMG_SRC [-w W ...] [-q Q] [-e ENCODER]."""

import argparse
import sys

from loguru import logger

from .common.config_builder import ConfigBuilder
from .common.schemas import Encoder
from .common.source_image import load_source_image
from .errors import ConfigurationError, ImageOptimizerError
from .optimizer import Optimizer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="image-optimizer",
        description="Resize and/or re-encode an image into <dir>/optimized/.",
    )
    parser.add_argument("img_src", help="Path to the source image")
    parser.add_argument(
        "-w",
        "--widths",
        type=int,
        nargs="+",
        metavar="WIDTH",
        help="Target widths; heights keep the source aspect ratio",
    )
    parser.add_argument(
        "-q",
        "--quality",
        type=float,
        help="Lossy quality 0-100; enables compression",
    )
    parser.add_argument(
        "-e",
        "--encoder",
        choices=[e.value for e in Encoder],
        help="Lossy encoder (default: jpeg, quality 75 when -q is omitted)",
    )
    parser.add_argument(
        "--exact-aspect",
        action="store_true",
        help="Round target heights proportionally instead of truncating the scale factor",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def configure_logging(verbose: bool) -> None:
    logger.remove()
    _ = logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "INFO",
        format="<level>{level: <8}</level> | {message}",
    )


def run(args: argparse.Namespace) -> int:
    if args.widths is None and args.quality is None:
        raise ConfigurationError("Either widths or quality must be provided")

    source = load_source_image(args.img_src)

    builder = ConfigBuilder(source.size).with_exact_aspect(args.exact_aspect)
    if args.widths is not None:
        _ = builder.with_widths(args.widths)
    if args.quality is not None:
        _ = builder.with_quality(args.quality)
    if args.encoder is not None:
        _ = builder.with_encoder(args.encoder)

    output = Optimizer(source, args.img_src, builder.build()).optimize()
    logger.info(f"Done: {len(output.variants)} variant(s) written")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        return run(args)
    except ImageOptimizerError as exc:
        logger.error(str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())
