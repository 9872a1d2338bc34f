import logging
from abc import ABC, abstractmethod
from typing import Union

from PIL import Image

logger = logging.getLogger(__name__)


class BaseRasterizer(ABC):
    """Base class for SVG rendering engines.

    A rasterizer turns a complete SVG document into an RGBA PIL Image whose
    size is the document's own width and height. Fitting and centering are
    done beforehand on the document itself, so engines never see a size or
    transform parameter. Subclasses must implement `from_string`.
    """

    @abstractmethod
    def from_string(self, svg_content: Union[str, bytes]) -> Image.Image:
        """Rasterize SVG content from a string or bytes to a PIL Image.

        Args:
            svg_content: SVG content as string or bytes.

        Returns:
            PIL Image object containing the rasterized SVG.
        """
        raise NotImplementedError

    def from_file(self, filepath: str) -> Image.Image:
        """Rasterize an SVG file to a PIL Image.

        Raises:
            FileNotFoundError: If the SVG file does not exist.
        """
        logger.debug(f"Rasterizing {filepath}")
        with open(filepath, "rb") as f:
            return self.from_string(f.read())

    def _composite_background(self, image: Image.Image) -> Image.Image:
        """Composite image onto a fully transparent RGBA canvas of the same size."""
        background = Image.new("RGBA", size=image.size, color=(255, 255, 255, 0))
        background.alpha_composite(image.convert("RGBA"))
        return background
