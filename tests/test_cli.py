"""Tests for the image-optimizer command line."""

from pathlib import Path

import pytest
from PIL import Image

from image_optimizer.cli import build_parser, main


class TestParser:
    def test_parses_all_flags(self) -> None:
        args = build_parser().parse_args(
            ["cat.jpg", "-w", "400", "200", "-q", "80", "-e", "webp", "--exact-aspect", "-v"]
        )

        assert args.img_src == "cat.jpg"
        assert args.widths == [400, 200]
        assert args.quality == 80.0
        assert args.encoder == "webp"
        assert args.exact_aspect
        assert args.verbose

    def test_defaults(self) -> None:
        args = build_parser().parse_args(["cat.jpg"])

        assert args.widths is None
        assert args.quality is None
        assert args.encoder is None
        assert not args.exact_aspect

    def test_unknown_encoder_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _ = build_parser().parse_args(["cat.jpg", "-e", "avif"])

        assert exc_info.value.code == 2


class TestMain:
    def test_requires_widths_or_quality(self, jpeg_file: Path) -> None:
        assert main([str(jpeg_file)]) == 1
        assert not (jpeg_file.parent / "optimized").exists()

    def test_encoder_alone_is_not_enough(self, jpeg_file: Path) -> None:
        assert main([str(jpeg_file), "-e", "webp"]) == 1
        assert not (jpeg_file.parent / "optimized").exists()

    def test_widths_and_quality(self, jpeg_file: Path) -> None:
        assert main([str(jpeg_file), "-w", "400", "200", "-q", "80"]) == 0

        out_dir = jpeg_file.parent / "optimized"
        assert sorted(p.name for p in out_dir.iterdir()) == [
            "sample_200_80.jpg",
            "sample_400_80.jpg",
        ]

    def test_quality_webp(self, jpeg_file: Path) -> None:
        assert main([str(jpeg_file), "-q", "90", "-e", "webp"]) == 0
        assert (jpeg_file.parent / "optimized" / "sample_800_90.webp").is_file()

    def test_widths_with_encoder_uses_default_quality(self, jpeg_file: Path) -> None:
        assert main([str(jpeg_file), "-w", "200", "-e", "webp"]) == 0
        assert (jpeg_file.parent / "optimized" / "sample_200_75.webp").is_file()

    def test_exact_aspect(self, jpeg_file: Path) -> None:
        assert main([str(jpeg_file), "-w", "300", "--exact-aspect", "-v"]) == 0

        with Image.open(jpeg_file.parent / "optimized" / "sample_300.jpg") as img:
            assert img.size == (300, 225)

    def test_width_wider_than_source(self, jpeg_file: Path) -> None:
        assert main([str(jpeg_file), "-w", "1600"]) == 1
        assert not (jpeg_file.parent / "optimized").exists()

    def test_missing_source(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "missing.jpg"), "-q", "80"]) == 1

    def test_resize_only_read_only_container(self, image_file_factory) -> None:
        """A source Pillow cannot write back is reported, not a traceback."""
        source = image_file_factory("layers.png", 64, 48)
        psd_path = source.with_suffix(".psd")
        _ = psd_path.write_bytes(source.read_bytes())

        assert main([str(psd_path), "-w", "32"]) == 1
        assert not (psd_path.parent / "optimized").exists()

    def test_decompression_bomb_exits_cleanly(
        self, jpeg_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)
        assert main([str(jpeg_file), "-q", "80"]) == 1
