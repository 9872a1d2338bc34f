"""Minimal client for the Iconify icon API."""

import logging

from icon2png.storage import UrlStorage

logger = logging.getLogger(__name__)

API_BASE = "https://api.iconify.design/"


def parse_icon_id(icon_id: str) -> tuple[str, str]:
    """Split an icon id such as ``mdi:home`` into ``(prefix, name)``.

    Raises:
        ValueError: If the id is not of the form ``prefix:name``.
    """
    prefix, sep, name = icon_id.partition(":")
    if not sep or not prefix or not name:
        raise ValueError(f"Invalid icon id: {icon_id!r}, expected 'prefix:name'")
    return prefix, name


def get_icon_svg(prefix: str, name: str, storage: UrlStorage | None = None) -> str:
    """Download the SVG for an icon.

    Raises:
        urllib.error.URLError: If the request fails.
        ValueError: If the API returns an empty body.
    """
    if storage is None:
        storage = UrlStorage(API_BASE)
    data = storage.get(f"{prefix}/{name}.svg")
    if not data:
        raise ValueError(f"Empty SVG returned for {prefix}:{name}")
    logger.debug(f"Downloaded {prefix}:{name}, {len(data)} bytes")
    return data.decode("utf-8")
