from logging import getLogger

from icon2png.color_utils import CURRENT_COLOR, rewrite_color
from icon2png.converter import convert, convert_to_image
from icon2png.errors import (
    ConversionError,
    EmptyRenderError,
    EncodeError,
    InvalidGeometryError,
    ParseError,
)
from icon2png.export import ExportReport, export_icon, export_icons
from icon2png.settings import ExportSettings
from icon2png.svg_document import SVGDocument
from icon2png.svg_utils import normalize_size
from icon2png.transform import FitTransform
from icon2png.version import __version__ as __version__

logger = getLogger(__name__)

__all__ = [
    "CURRENT_COLOR",
    "ConversionError",
    "EmptyRenderError",
    "EncodeError",
    "ExportReport",
    "ExportSettings",
    "FitTransform",
    "InvalidGeometryError",
    "ParseError",
    "SVGDocument",
    "convert",
    "convert_to_image",
    "export_icon",
    "export_icons",
    "normalize_size",
    "rewrite_color",
]
