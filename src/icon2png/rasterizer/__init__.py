"""Rendering engines for converting SVG documents to PIL Images.

The default engine is :class:`ResvgRasterizer`, backed by resvg.
"""

from .base_rasterizer import BaseRasterizer
from .resvg_rasterizer import ResvgRasterizer

RASTERIZERS: dict[str, type[BaseRasterizer]] = {
    "resvg": ResvgRasterizer,
}


def create_rasterizer(name: str = "resvg", **kwargs) -> BaseRasterizer:
    """Create a rasterizer by engine name.

    Raises:
        ValueError: If the engine name is unknown.
    """
    try:
        cls = RASTERIZERS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown rasterizer: {name!r}. Available: {', '.join(sorted(RASTERIZERS))}"
        ) from None
    return cls(**kwargs)


__all__ = ["BaseRasterizer", "ResvgRasterizer", "create_rasterizer"]
