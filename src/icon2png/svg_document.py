import dataclasses
import logging
import xml.etree.ElementTree as ET
from copy import deepcopy
from typing import Optional, Union

from PIL import Image

from icon2png import svg_utils
from icon2png.errors import InvalidGeometryError, ParseError
from icon2png.rasterizer import BaseRasterizer, ResvgRasterizer
from icon2png.transform import FitTransform

logger = logging.getLogger(__name__)

# Attributes of the root element that only make sense on a nested viewport.
_POSITION_ATTRIBUTES = ("x", "y")


@dataclasses.dataclass(frozen=True)
class SVGDocument:
    """Parsed SVG document with a resolved intrinsic size.

    The element tree is owned by the document and never modified; placement
    works on a copy.

    Example usage::

        from icon2png import SVGDocument

        document = SVGDocument.from_string(svg_text)
        transform = document.fit(48)
        image = document.render(48, transform)
    """

    svg: ET.Element
    width: float
    height: float
    view_box: Optional[tuple[float, float, float, float]] = None

    @classmethod
    def from_string(cls, svg_content: Union[str, bytes]) -> "SVGDocument":
        """Parse SVG text and resolve its intrinsic size.

        Raises:
            ParseError: If the text is not well-formed SVG, or its root
                dimensions or viewBox cannot be parsed.
            InvalidGeometryError: If the intrinsic width or height, or the
                viewBox width or height, is zero or negative.
        """
        svg = svg_utils.parse(svg_content)
        try:
            view_box = svg_utils.parse_view_box(svg.get("viewBox"))
            width = svg_utils.resolve_length(
                svg.get("width"), view_box[2] if view_box else None
            )
            height = svg_utils.resolve_length(
                svg.get("height"), view_box[3] if view_box else None
            )
        except ValueError as e:
            raise ParseError(f"Failed to parse SVG dimensions: {e}") from e

        if view_box is not None and (view_box[2] <= 0 or view_box[3] <= 0):
            raise InvalidGeometryError(
                f"SVG viewBox has a non-positive size: {view_box[2]}x{view_box[3]}"
            )
        if width <= 0 or height <= 0:
            raise InvalidGeometryError(f"SVG size is not positive: {width}x{height}")

        logger.debug(f"Intrinsic SVG size: {width}x{height}, viewBox: {view_box}")
        return cls(svg=svg, width=width, height=height, view_box=view_box)

    @classmethod
    def from_file(cls, filepath: str) -> "SVGDocument":
        """Read and parse an SVG file."""
        with open(filepath, "rb") as f:
            return cls.from_string(f.read())

    def fit(self, size: int) -> FitTransform:
        """Compute the transform that fits this document into a square target."""
        return FitTransform.fit(self.width, self.height, size)

    def place(self, size: int, transform: FitTransform) -> ET.Element:
        """Build a ``size`` x ``size`` SVG that draws this document transformed.

        The original root becomes a nested ``<svg>`` viewport of the intrinsic
        size, inside a group carrying the transform.
        """
        inner = deepcopy(self.svg)
        for key in _POSITION_ATTRIBUTES:
            inner.attrib.pop(key, None)
        inner.set("width", svg_utils.num2str(self.width))
        inner.set("height", svg_utils.num2str(self.height))

        outer = ET.Element(
            f"{{{svg_utils.NAMESPACE}}}svg",
            width=str(size),
            height=str(size),
            viewBox=f"0 0 {size} {size}",
        )
        group = ET.SubElement(
            outer, f"{{{svg_utils.NAMESPACE}}}g", transform=transform.to_matrix()
        )
        group.append(inner)
        return outer

    def render(
        self,
        size: int,
        transform: FitTransform,
        rasterizer: BaseRasterizer | None = None,
    ) -> Image.Image:
        """Render onto a transparent ``size`` x ``size`` RGBA image.

        Args:
            size: Side length of the square target in pixels.
            transform: Placement of the document inside the target.
            rasterizer: Rendering engine. Defaults to :class:`ResvgRasterizer`.
        """
        if rasterizer is None:
            rasterizer = ResvgRasterizer()
        placed = self.place(size, transform)
        return rasterizer.from_string(svg_utils.tostring(placed))

    def tostring(self) -> str:
        """Serialize the original document."""
        return svg_utils.tostring(self.svg)
