"""Icon export workflow.

Exporting an icon normalizes its size, resolves ``currentColor`` to the
configured color and writes either the SVG text or a rendered PNG.
"""

import dataclasses
import logging
import os
from typing import Iterable

from icon2png import svg_utils
from icon2png.color_utils import rewrite_color
from icon2png.converter import convert
from icon2png.errors import ConversionError
from icon2png.settings import ExportSettings
from icon2png.storage import FileSystemStorage, default_export_folder

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class ExportReport:
    """Outcome of a batch export."""

    paths: list[str] = dataclasses.field(default_factory=list)
    errors: list[str] = dataclasses.field(default_factory=list)
    total: int = 0

    @property
    def ok(self) -> bool:
        return not self.errors


def _resolve_storage(
    settings: ExportSettings, storage: FileSystemStorage | None
) -> FileSystemStorage:
    if storage is not None:
        return storage
    return FileSystemStorage(settings.default_folder or default_export_folder())


def export_icon(
    svg_content: str,
    file_name: str,
    settings: ExportSettings | None = None,
    storage: FileSystemStorage | None = None,
) -> str:
    """Export one icon and return the written path.

    Args:
        svg_content: SVG text of the icon.
        file_name: Output file name without extension.
        settings: Export options. Defaults to :meth:`ExportSettings.default`.
        storage: Output storage. Defaults to the settings' folder, or the
            platform download folder when none is configured.

    Raises:
        ConversionError: If the SVG cannot be normalized or rendered.
        FileExistsError: If the file exists and auto save is disabled.
        OSError: If the file cannot be written.
    """
    if settings is None:
        settings = ExportSettings.default()
    storage = _resolve_storage(settings, storage)

    svg_content = svg_utils.normalize_size(svg_content)
    if settings.color:
        logger.debug(f"Changing color to: {settings.color}")
        svg_content = rewrite_color(svg_content, settings.color)

    filename = f"{file_name}.{settings.format}"
    if not settings.auto_save and storage.exists(filename):
        raise FileExistsError(f"{storage.url(filename)} already exists")

    if settings.format == "svg":
        storage.put(filename, svg_content.encode("utf-8"))
    else:
        storage.put(filename, convert(svg_content, settings.size))
    path = storage.url(filename)
    logger.info(f"Exported {path}")
    return path


def export_icons(
    icons: Iterable[tuple[str, str]],
    settings: ExportSettings | None = None,
    storage: FileSystemStorage | None = None,
) -> ExportReport:
    """Export several ``(file_name, svg_content)`` pairs.

    A failing icon is recorded in the report and does not stop the batch.

    Raises:
        ValueError: If there is nothing to export.
    """
    icons = list(icons)
    if not icons:
        raise ValueError("No icons to export")
    if settings is None:
        settings = ExportSettings.default()
    storage = _resolve_storage(settings, storage)

    report = ExportReport(total=len(icons))
    logger.info(f"Starting batch export of {len(icons)} icons")
    for index, (file_name, svg_content) in enumerate(icons, start=1):
        logger.debug(f"Exporting {index}/{len(icons)}: {file_name}")
        try:
            report.paths.append(export_icon(svg_content, file_name, settings, storage))
        except (ConversionError, OSError) as e:
            message = f"{file_name}: {e}"
            logger.warning(f"Export error: {message}")
            report.errors.append(message)

    if report.ok:
        logger.info("Batch export completed successfully")
    else:
        logger.warning(f"Batch export completed with {len(report.errors)} errors")
    return report


def icon_file_name(location: str) -> str:
    """Derive an output file name from an input path, URL or icon id."""
    base = os.path.splitext(location.rstrip("/").rsplit("/", 1)[-1])[0]
    return base.replace(":", "-")
