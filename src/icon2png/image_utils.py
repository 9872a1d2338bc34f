import io
import logging

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def encode_image(image: Image.Image, format: str = "PNG") -> bytes:
    """Encode a PIL image to bytes in the specified format."""
    with io.BytesIO() as output:
        image.save(output, format=format.upper())
        return output.getvalue()


def decode_image(data: bytes, mode: str | None = None) -> Image.Image:
    """Decode image data from bytes to a PIL image."""
    with io.BytesIO(data) as input:
        image = Image.open(input)
        image.load()
    if mode is not None:
        return image.convert(mode)
    return image


def count_visible_pixels(image: Image.Image) -> int:
    """Count pixels whose alpha channel is non-zero."""
    alpha = np.asarray(image.convert("RGBA").getchannel("A"))
    return int(np.count_nonzero(alpha))
