"""SVG to PNG conversion pipeline.

The pipeline parses the SVG, fits it into a square of the requested size
without distortion, renders it on a transparent canvas, rejects blank
results and encodes the pixels to PNG.
"""

import logging
from typing import Union

from PIL import Image

from icon2png import image_utils
from icon2png.errors import EmptyRenderError, EncodeError, ParseError
from icon2png.rasterizer import BaseRasterizer
from icon2png.svg_document import SVGDocument

logger = logging.getLogger(__name__)


def _check_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"size must be an integer, got {type(size).__name__}")
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")


def convert_to_image(
    svg_content: Union[str, bytes],
    size: int,
    rasterizer: BaseRasterizer | None = None,
) -> Image.Image:
    """Render SVG content into a ``size`` x ``size`` RGBA image.

    Args:
        svg_content: SVG document text.
        size: Side length of the output image in pixels.
        rasterizer: Rendering engine. Defaults to resvg.

    Returns:
        PIL Image in RGBA mode with at least one visible pixel.

    Raises:
        ParseError: If the SVG is malformed or rejected by the engine.
        InvalidGeometryError: If the SVG has a zero-sized width or height.
        EmptyRenderError: If nothing visible was rendered.
        EncodeError: If the engine produced an image of the wrong size.
    """
    _check_size(size)
    document = SVGDocument.from_string(svg_content)
    transform = document.fit(size)
    logger.debug(
        f"Scale factor: {transform.scale}, "
        f"offset: ({transform.offset_x}, {transform.offset_y})"
    )

    try:
        image = document.render(size, transform, rasterizer=rasterizer)
    except (ValueError, RuntimeError, OSError) as e:
        raise ParseError(f"Rendering engine rejected the SVG: {e}") from e

    if image.size != (size, size):
        raise EncodeError(
            f"Rendered image is {image.size[0]}x{image.size[1]}, expected {size}x{size}"
        )

    visible = image_utils.count_visible_pixels(image)
    logger.debug(f"Non-transparent pixels: {visible}")
    if visible == 0:
        raise EmptyRenderError("Rendered image has no visible pixels")
    return image


def convert(
    svg_content: Union[str, bytes],
    size: int,
    rasterizer: BaseRasterizer | None = None,
) -> bytes:
    """Convert SVG content to PNG bytes of ``size`` x ``size`` pixels.

    Example:
        >>> png = convert('<svg xmlns="http://www.w3.org/2000/svg" ...>', 48)

    Raises:
        ParseError: If the SVG is malformed or rejected by the engine.
        InvalidGeometryError: If the SVG has a zero-sized width or height.
        EmptyRenderError: If nothing visible was rendered.
        EncodeError: If PNG encoding failed.
    """
    image = convert_to_image(svg_content, size, rasterizer=rasterizer)
    try:
        png_data = image_utils.encode_image(image, "PNG")
    except (OSError, ValueError) as e:
        raise EncodeError(f"Failed to encode PNG: {e}") from e
    logger.debug(f"PNG encoding completed, data size: {len(png_data)} bytes")
    return png_data
