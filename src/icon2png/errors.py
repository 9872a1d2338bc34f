"""Exceptions raised by the SVG to PNG conversion pipeline.

All conversion failures derive from :class:`ConversionError`, which is a
``ValueError`` so that callers treating bad input generically keep working.
Each failure is terminal for the call that raised it.
"""


class ConversionError(ValueError):
    """Base class for SVG to PNG conversion failures."""


class ParseError(ConversionError):
    """The input text is not a well-formed SVG document."""


class InvalidGeometryError(ConversionError):
    """The document has a zero or negative intrinsic width or height."""


class EmptyRenderError(ConversionError):
    """Rendering finished but produced no visible pixels."""


class EncodeError(ConversionError):
    """The rendered pixel buffer could not be encoded to PNG."""
