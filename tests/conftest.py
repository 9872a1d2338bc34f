import logging
from typing import Union

import pytest
from PIL import Image

from icon2png.rasterizer import BaseRasterizer

logger = logging.getLogger(__name__)


def make_svg(width: str, height: str, body: str, view_box: str | None = None) -> str:
    """Build a namespaced SVG document."""
    view_box_attr = f' viewBox="{view_box}"' if view_box else ""
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}"'
        f"{view_box_attr}>{body}</svg>"
    )


class StubRasterizer(BaseRasterizer):
    """Rasterizer returning a fixed image, or raising a fixed error."""

    def __init__(
        self, image: Image.Image | None = None, error: Exception | None = None
    ) -> None:
        self.image = image
        self.error = error
        self.calls: list[str] = []

    def from_string(self, svg_content: Union[str, bytes]) -> Image.Image:
        self.calls.append(
            svg_content.decode("utf-8") if isinstance(svg_content, bytes) else svg_content
        )
        if self.error is not None:
            raise self.error
        assert self.image is not None
        return self.image


@pytest.fixture
def square_svg() -> str:
    """24x24 icon with a filled square."""
    return make_svg(
        "24",
        "24",
        '<rect x="4" y="4" width="16" height="16" fill="#000000"/>',
        view_box="0 0 24 24",
    )


@pytest.fixture
def wide_svg() -> str:
    """48x24 icon fully covered by a rectangle."""
    return make_svg(
        "48", "24", '<rect width="48" height="24" fill="red"/>', view_box="0 0 48 24"
    )


@pytest.fixture
def tall_svg() -> str:
    """24x48 icon fully covered by a rectangle."""
    return make_svg(
        "24", "48", '<rect width="24" height="48" fill="blue"/>', view_box="0 0 24 48"
    )


@pytest.fixture
def invisible_svg() -> str:
    """Valid SVG whose only shape is fully transparent."""
    return make_svg(
        "24",
        "24",
        '<rect width="24" height="24" fill="red" opacity="0"/>',
        view_box="0 0 24 24",
    )


@pytest.fixture
def current_color_svg() -> str:
    """Icon using currentColor in several syntactic forms."""
    return (
        '<svg xmlns="http://www.w3.org/2000/svg" width="1em" height="1em" '
        'viewBox="0 0 24 24">'
        '<path d="M4 4h16v16H4z" fill="currentColor"/>'
        "<circle cx=\"12\" cy=\"12\" r=\"6\" stroke='currentColor' fill=\"none\"/>"
        '<rect x="2" y="2" width="4" height="4" style="fill:currentColor"/>'
        "</svg>"
    )
