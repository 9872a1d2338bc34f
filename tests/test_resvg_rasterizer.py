"""Tests for ResvgRasterizer."""

import os
import tempfile

import pytest
from PIL import Image

from icon2png.rasterizer import ResvgRasterizer, create_rasterizer


@pytest.fixture
def simple_svg() -> str:
    """Simple SVG for basic testing."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
    <rect x="10" y="10" width="80" height="80" fill="red"/>
</svg>"""


def test_rasterizer_basic(simple_svg: str) -> None:
    """Test basic rasterization functionality."""
    rasterizer = ResvgRasterizer()
    image = rasterizer.from_string(simple_svg)

    assert isinstance(image, Image.Image)
    assert image.mode == "RGBA"
    assert image.size == (100, 100)


def test_rasterizer_from_file(simple_svg: str) -> None:
    """Test rasterization from file."""
    with tempfile.NamedTemporaryFile(
        mode="w", suffix=".svg", delete=False, encoding="utf-8"
    ) as f:
        f.write(simple_svg)
        svg_path = f.name

    try:
        image = ResvgRasterizer().from_file(svg_path)
        assert image.mode == "RGBA"
        assert image.size == (100, 100)
    finally:
        os.unlink(svg_path)


def test_rasterizer_bytes_input(simple_svg: str) -> None:
    """Test rasterization with bytes input."""
    image = ResvgRasterizer().from_string(simple_svg.encode("utf-8"))
    assert image.size == (100, 100)


def test_rasterizer_transparency(simple_svg: str) -> None:
    """Test that uncovered pixels stay transparent."""
    image = ResvgRasterizer().from_string(simple_svg)

    corner = image.getpixel((5, 5))
    center = image.getpixel((50, 50))
    assert isinstance(corner, tuple)
    assert isinstance(center, tuple)
    assert corner[3] == 0
    assert center == (255, 0, 0, 255)


def test_rasterizer_with_opacity() -> None:
    """Test rendering of semi-transparent elements."""
    opacity_svg = """<svg xmlns="http://www.w3.org/2000/svg" width="200" height="200">
    <rect x="50" y="50" width="100" height="100" fill="red" opacity="0.5"/>
</svg>"""
    image = ResvgRasterizer().from_string(opacity_svg)

    pixel = image.getpixel((100, 100))
    assert isinstance(pixel, tuple)
    assert 0 < pixel[3] < 255


def test_rasterizer_composite_background() -> None:
    """Test that _composite_background normalizes to RGBA."""
    rasterizer = ResvgRasterizer()
    result = rasterizer._composite_background(Image.new("RGB", (10, 20), (255, 0, 0)))

    assert result.mode == "RGBA"
    assert result.size == (10, 20)
    assert result.getpixel((0, 0)) == (255, 0, 0, 255)


def test_create_rasterizer() -> None:
    """Test creating rasterizers by name."""
    rasterizer = create_rasterizer("RESVG", font_files=["icons.ttf"])
    assert isinstance(rasterizer, ResvgRasterizer)
    assert rasterizer.font_files == ["icons.ttf"]

    with pytest.raises(ValueError, match="Unknown rasterizer"):
        create_rasterizer("inkscape")


def test_from_file_reads_content(tmp_path) -> None:
    """Test that from_file passes the file content to from_string."""
    from conftest import StubRasterizer

    svg = '<svg xmlns="http://www.w3.org/2000/svg" width="4" height="4"/>'
    path = tmp_path / "icon.svg"
    path.write_text(svg, encoding="utf-8")
    rasterizer = StubRasterizer(image=Image.new("RGBA", (4, 4)))

    assert rasterizer.from_file(str(path)).size == (4, 4)
    assert rasterizer.calls == [svg]
