"""Export settings.

Settings can be configured via environment variables or constructor
parameters. Constructor parameters take precedence over environment variables.
"""

import dataclasses
import logging
import os
from typing import Any
from urllib.parse import urlparse

from icon2png.color_utils import is_hex_color

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("png", "svg")

DEFAULT_SIZE = 128
DEFAULT_COLOR = "#000000"


@dataclasses.dataclass(frozen=True)
class ExportSettings:
    """Options for exporting icons.

    Environment variables:
        ICON2PNG_DEFAULT_FOLDER: Output directory (default: platform download
            folder, see :func:`icon2png.storage.default_export_folder`)
        ICON2PNG_FORMAT: ``png`` or ``svg`` (default: png)
        ICON2PNG_SIZE: PNG side length in pixels (default: 128)
        ICON2PNG_COLOR: Replacement for ``currentColor`` (default: #000000).
            An empty value disables recoloring.
        ICON2PNG_AUTO_SAVE: Overwrite without asking (default: 1)

    Example:
        >>> settings = ExportSettings.default()
        >>> settings = settings.with_overrides(size=48, color="#FF0000")
    """

    default_folder: str = ""
    format: str = "png"
    size: int = DEFAULT_SIZE
    color: str = DEFAULT_COLOR
    auto_save: bool = True

    def __post_init__(self) -> None:
        if self.format not in EXPORT_FORMATS:
            raise ValueError(
                f"Unsupported export format: {self.format!r}. "
                f"Expected one of {', '.join(EXPORT_FORMATS)}"
            )
        if self.size <= 0:
            raise ValueError(f"Export size must be positive, got {self.size}")
        if urlparse(self.default_folder).scheme in ("http", "https"):
            raise ValueError(
                f"Export folder must be a local directory, got {self.default_folder!r}"
            )
        if self.color and not is_hex_color(self.color):
            logger.warning(f"Export color {self.color!r} is not a hex color")

    @classmethod
    def default(cls) -> "ExportSettings":
        """Create ExportSettings from environment variables.

        Raises:
            ValueError: If an environment variable holds an invalid value.
        """

        def parse_env_int(key: str, default: int) -> int:
            value_str = os.environ.get(key)
            if value_str is None:
                return default
            try:
                return int(value_str)
            except ValueError as e:
                raise ValueError(
                    f"Environment variable {key}={value_str!r} is not a valid integer"
                ) from e

        def parse_env_bool(key: str, default: bool) -> bool:
            value_str = os.environ.get(key)
            if value_str is None:
                return default
            return value_str.strip().lower() in ("1", "true", "yes", "on")

        return cls(
            default_folder=os.environ.get("ICON2PNG_DEFAULT_FOLDER", ""),
            format=os.environ.get("ICON2PNG_FORMAT", "png").lower(),
            size=parse_env_int("ICON2PNG_SIZE", DEFAULT_SIZE),
            color=os.environ.get("ICON2PNG_COLOR", DEFAULT_COLOR),
            auto_save=parse_env_bool("ICON2PNG_AUTO_SAVE", True),
        )

    def with_overrides(self, **kwargs: Any) -> "ExportSettings":
        """Return a copy with the given options replaced, ignoring ``None`` values."""
        return dataclasses.replace(
            self, **{key: value for key, value in kwargs.items() if value is not None}
        )
