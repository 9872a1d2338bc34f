import argparse
import logging
import sys

from icon2png.export import export_icons, icon_file_name
from icon2png.iconify import get_icon_svg, parse_icon_id
from icon2png.settings import EXPORT_FORMATS, ExportSettings
from icon2png.storage import read_svg

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Convert SVG icons to PNG")
    parser.add_argument(
        "inputs",
        metavar="INPUT",
        type=str,
        nargs="+",
        help="Input SVG file path or URL, or icon id with --iconify",
    )
    parser.add_argument(
        "--output",
        metavar="DIR",
        type=str,
        default=None,
        help="Output directory. Default: Download_Icon in the download folder",
    )
    parser.add_argument(
        "--size",
        metavar="PIXELS",
        type=int,
        default=None,
        help="Output PNG size in pixels. Default: 128",
    )
    parser.add_argument(
        "--color",
        metavar="COLOR",
        type=str,
        default=None,
        help="Color replacing currentColor, e.g. '#FF0000'. Default: #000000",
    )
    parser.add_argument(
        "--format",
        metavar="FORMAT",
        type=str,
        choices=EXPORT_FORMATS,
        default=None,
        help="Output format (png, svg). Default: png",
    )
    parser.add_argument(
        "--iconify",
        action="store_true",
        help="Treat inputs as Iconify icon ids such as mdi:home.",
    )
    parser.add_argument(
        "--no-overwrite",
        dest="auto_save",
        action="store_false",
        default=None,
        help="Fail instead of overwriting existing files.",
    )
    parser.add_argument(
        "--loglevel",
        metavar="LEVEL",
        default="WARNING",
        help="Logging level, default WARNING",
    )
    return parser.parse_args(argv)


def load_icon(location: str, iconify: bool) -> str:
    if iconify:
        return get_icon_svg(*parse_icon_id(location))
    return read_svg(location)


def main(argv: list[str] | None = None) -> int:
    """Main function to export SVG icons."""
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.loglevel.upper(), "WARNING"))
    try:
        settings = ExportSettings.default().with_overrides(
            default_folder=args.output,
            size=args.size,
            color=args.color,
            format=args.format,
            auto_save=args.auto_save,
        )
    except ValueError as e:
        logger.error(f"Invalid settings: {e}")
        return 1

    icons = []
    failures = 0
    for location in args.inputs:
        try:
            icons.append((icon_file_name(location), load_icon(location, args.iconify)))
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load {location}: {e}")
            failures += 1
    if icons:
        report = export_icons(icons, settings)
        for path in report.paths:
            print(path)
        for error in report.errors:
            logger.error(error)
        failures += len(report.errors)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
