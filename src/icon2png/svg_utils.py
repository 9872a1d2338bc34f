import logging
import re
import math
import xml.etree.ElementTree as ET
from re import Pattern
from typing import Optional, Sequence, Union

from icon2png.errors import ParseError

logger = logging.getLogger(__name__)

NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"

ET.register_namespace("", NAMESPACE)
ET.register_namespace("xlink", XLINK_NAMESPACE)

DEFAULT_NUMBER_DIGITS = 6

# Fallback icon size when a document declares neither width/height nor viewBox.
DEFAULT_ICON_SIZE = 24

# Used for width/height without either the attribute or a viewBox to resolve against.
DEFAULT_VIEWPORT_SIZE = 100.0

# Font size assumed for em/ex lengths on the root element.
DEFAULT_FONT_SIZE = 16.0

# User units per unit at 96 DPI.
UNIT_SCALES = {
    "": 1.0,
    "px": 1.0,
    "in": 96.0,
    "cm": 96.0 / 2.54,
    "mm": 96.0 / 25.4,
    "pt": 96.0 / 72.0,
    "pc": 96.0 / 6.0,
    "em": DEFAULT_FONT_SIZE,
    "ex": DEFAULT_FONT_SIZE / 2.0,
}

LENGTH_RE: Pattern[str] = re.compile(
    r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*(px|in|cm|mm|pt|pc|em|ex|%)?\s*$"
)

VIEW_BOX_SEP_RE: Pattern[str] = re.compile(r"[\s,]+")


def num2str(num: int | float | bool, digit: int = DEFAULT_NUMBER_DIGITS) -> str:
    """Convert a number to a string, using the specified format for floats."""
    if isinstance(num, bool):
        return "true" if num else "false"
    if isinstance(num, int):
        return str(num)
    if isinstance(num, float):
        if num.is_integer():
            return str(int(num))
        # Format float with specified number of digits, and trim trailing zeros
        number = f"{num:.{digit}f}"
        return f"{number[0]}{number[1:].rstrip('0').rstrip('.')}"
    raise ValueError(f"Unsupported type: {type(num)}")


def seq2str(
    seq: Sequence[int | float | bool],
    sep: str = " ",
    digit: int = DEFAULT_NUMBER_DIGITS,
) -> str:
    """Convert a sequence of numbers to a string, using the specified format for floats."""
    return sep.join(num2str(n, digit) for n in seq)


def local_name(tag: str) -> str:
    """Strip the namespace part from an element tag."""
    return tag.split("}")[-1] if "}" in tag else tag


def _adopt_namespace(node: ET.Element) -> None:
    """Move un-namespaced elements into the SVG namespace.

    Documents without an ``xmlns`` declaration are otherwise ignored by the
    renderer, which only recognizes SVG elements.
    """
    for element in node.iter():
        if isinstance(element.tag, str) and not element.tag.startswith("{"):
            element.tag = f"{{{NAMESPACE}}}{element.tag}"


def parse(svg_content: Union[str, bytes]) -> ET.Element:
    """Parse SVG text into its root ``<svg>`` element.

    Raises:
        ParseError: If the text is not well-formed XML or the root element is
            not ``svg``. The parser diagnostic is kept in the message.
    """
    try:
        root = ET.fromstring(svg_content)
    except ET.ParseError as e:
        raise ParseError(f"Failed to parse SVG: {e}") from e
    if local_name(root.tag) != "svg":
        raise ParseError(f"Root element must be <svg>, got <{local_name(root.tag)}>")
    _adopt_namespace(root)
    return root


def tostring(node: ET.Element) -> str:
    """Convert an XML node to a string."""
    return ET.tostring(node, encoding="unicode", xml_declaration=False)


def parse_length(value: str) -> tuple[float, str]:
    """Parse an SVG length into its number and unit.

    Example:
        >>> parse_length("1.5em")
        (1.5, 'em')
        >>> parse_length("24")
        (24.0, '')

    Raises:
        ValueError: If the value is not a valid length.
    """
    match = LENGTH_RE.match(value)
    if match is None:
        raise ValueError(f"Invalid length: {value!r}")
    number = float(match.group(1))
    if not math.isfinite(number):
        raise ValueError(f"Length out of range: {value!r}")
    return number, match.group(2) or ""


def resolve_length(value: Optional[str], reference: Optional[float]) -> float:
    """Resolve a root width or height attribute to user units.

    Missing values and percentages resolve against ``reference``, the matching
    viewBox dimension, or :data:`DEFAULT_VIEWPORT_SIZE` when there is none.
    """
    base = reference if reference is not None else DEFAULT_VIEWPORT_SIZE
    if value is None:
        return base
    number, unit = parse_length(value)
    if unit == "%":
        length = base * number / 100.0
    else:
        length = number * UNIT_SCALES[unit]
    if not math.isfinite(length):
        raise ValueError(f"Length out of range: {value!r}")
    return length


def parse_view_box(value: Optional[str]) -> Optional[tuple[float, float, float, float]]:
    """Parse a viewBox attribute into ``(min_x, min_y, width, height)``.

    Raises:
        ValueError: If the attribute does not hold exactly four numbers.
    """
    if value is None or not value.strip():
        return None
    parts = VIEW_BOX_SEP_RE.split(value.strip())
    if len(parts) != 4:
        raise ValueError(f"Invalid viewBox: {value!r}")
    try:
        x, y, width, height = (float(part) for part in parts)
    except ValueError as e:
        raise ValueError(f"Invalid viewBox: {value!r}") from e
    if not all(math.isfinite(n) for n in (x, y, width, height)):
        raise ValueError(f"Invalid viewBox: {value!r}")
    return x, y, width, height


def normalize_size(svg_content: Union[str, bytes]) -> str:
    """Replace the root width and height with the viewBox dimensions.

    Icon services frequently emit relative sizes such as ``width="1em"``.
    This rewrites the root ``<svg>`` element so that its width and height are
    the viewBox size in user units. Without a viewBox, existing dimensions are
    kept and missing ones default to :data:`DEFAULT_ICON_SIZE`.

    Raises:
        ParseError: If the text is not well-formed SVG.
    """
    root = parse(svg_content)
    try:
        view_box = parse_view_box(root.get("viewBox"))
    except ValueError as e:
        raise ParseError(str(e)) from e

    if view_box is None:
        logger.debug("No viewBox found, using default size for missing dimensions")
        root.attrib.setdefault("width", str(DEFAULT_ICON_SIZE))
        root.attrib.setdefault("height", str(DEFAULT_ICON_SIZE))
    else:
        root.set("width", num2str(view_box[2]))
        root.set("height", num2str(view_box[3]))
        logger.debug(f"Normalized SVG size to {root.get('width')}x{root.get('height')}")
    return tostring(root)
