import logging
import re
from re import Pattern

logger = logging.getLogger(__name__)

# Reserved SVG keyword meaning "use the color supplied by the caller".
CURRENT_COLOR = "currentColor"

# Replaced in order; the bare keyword goes last.
_CURRENT_COLOR_FORMS = (
    'fill="{}"',
    "fill='{}'",
    'stroke="{}"',
    "stroke='{}'",
    "fill:{}",
    "stroke:{}",
)

HEX_COLOR_RE: Pattern[str] = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def rewrite_color(svg_content: str, replacement: str) -> str:
    """Replace every ``currentColor`` in SVG text with ``replacement``.

    Fill and stroke attributes (either quote style) and inline style
    declarations are replaced first, then any remaining occurrence. The
    replacement is inserted verbatim.

    Example:
        >>> rewrite_color('<path fill="currentColor"/>', "#FF0000")
        '<path fill="#FF0000"/>'
    """
    for form in _CURRENT_COLOR_FORMS:
        svg_content = svg_content.replace(
            form.format(CURRENT_COLOR), form.format(replacement)
        )
    return svg_content.replace(CURRENT_COLOR, replacement)


def is_hex_color(value: str) -> bool:
    """Check if the value is a ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA`` color."""
    return HEX_COLOR_RE.match(value) is not None
