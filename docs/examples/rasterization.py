"""Rasterization examples - converting SVG icons to PNG images."""

from icon2png import (
    EmptyRenderError,
    InvalidGeometryError,
    SVGDocument,
    convert,
    export_icons,
    rewrite_color,
)
from icon2png.rasterizer import create_rasterizer
from icon2png.settings import ExportSettings

ICON = """<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
    <path d="M12 3l9 8h-3v9h-5v-6h-2v6H6v-9H3z" fill="currentColor"/>
</svg>"""

# Example 1: Basic conversion
print("Example 1: Basic conversion")
with open("home.png", "wb") as f:
    f.write(convert(ICON, 128))
print("✓ Created home.png")

# Example 2: Recoloring before conversion
print("\nExample 2: Recoloring")
red_icon = rewrite_color(ICON, "#FF0000")
with open("home_red.png", "wb") as f:
    f.write(convert(red_icon, 48))
print("✓ Created home_red.png")

# Example 3: Inspecting the fit transform
print("\nExample 3: Fit transform")
document = SVGDocument.from_string(ICON)
transform = document.fit(100)
print(f"scale={transform.scale}, offset=({transform.offset_x}, {transform.offset_y})")

# Example 4: Explicit rendering engine
print("\nExample 4: Rendering engine")
rasterizer = create_rasterizer("resvg")
png = convert(ICON, 256, rasterizer=rasterizer)
print(f"✓ Rendered {len(png)} bytes")

# Example 5: Handling errors
print("\nExample 5: Errors")
for svg in (
    '<svg xmlns="http://www.w3.org/2000/svg" width="0" height="10"/>',
    '<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10"/>',
):
    try:
        convert(svg, 48)
    except (InvalidGeometryError, EmptyRenderError) as e:
        print(f"⚠ {type(e).__name__}: {e}")

# Example 6: Batch export to a folder
print("\nExample 6: Batch export")
settings = ExportSettings(default_folder="icons", size=64, color="#336699")
report = export_icons([("home", ICON), ("empty", "<svg/>")], settings)
print(f"✓ Exported {len(report.paths)}/{report.total}, errors: {report.errors}")
