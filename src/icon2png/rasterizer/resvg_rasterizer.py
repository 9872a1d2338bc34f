"""Resvg-based rasterizer module.

This module provides SVG rasterization using the resvg library via resvg-py,
offering fast and accurate rendering with no external dependencies.
"""

import logging
from io import BytesIO
from typing import Union

import resvg_py
from PIL import Image

from .base_rasterizer import BaseRasterizer

logger = logging.getLogger(__name__)


class ResvgRasterizer(BaseRasterizer):
    """SVG rasterizer using resvg.

    Physical units are rendered at resvg's default of 96 DPI, the same
    resolution used to resolve the intrinsic size of a document.

    Example:
        >>> rasterizer = ResvgRasterizer()
        >>> image = rasterizer.from_string('<svg xmlns="...">...</svg>')
        >>> image.save('output.png')
    """

    def __init__(self, font_files: list[str] | None = None) -> None:
        """Initialize the resvg rasterizer.

        Args:
            font_files: Optional extra font files for text rendering.
        """
        self.font_files = font_files

    def from_string(self, svg_content: Union[str, bytes]) -> Image.Image:
        """Rasterize SVG content directly, without a temporary file.

        Raises:
            ValueError: If resvg rejects the SVG content.
        """
        svg_string = (
            svg_content.decode("utf-8")
            if isinstance(svg_content, bytes)
            else svg_content
        )
        png_bytes = resvg_py.svg_to_bytes(
            svg_string=svg_string, font_files=self.font_files
        )
        image = Image.open(BytesIO(bytes(png_bytes)))
        return self._composite_background(image)
