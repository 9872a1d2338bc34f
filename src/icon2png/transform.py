import dataclasses
import logging

from icon2png import svg_utils

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class FitTransform:
    """Uniform scale plus translation that fits a document into a square.

    The larger intrinsic dimension fills the square exactly and the smaller
    one is centered, so offsets are never negative.
    """

    scale: float
    offset_x: float
    offset_y: float

    @classmethod
    def fit(cls, width: float, height: float, size: int) -> "FitTransform":
        """Compute the transform placing a ``width`` x ``height`` box in ``size``.

        Args:
            width: Intrinsic width in user units, strictly positive.
            height: Intrinsic height in user units, strictly positive.
            size: Side length of the square target in pixels.
        """
        scale = size / max(width, height)
        scaled_width = width * scale
        scaled_height = height * scale
        return cls(
            scale=scale,
            offset_x=(size - scaled_width) / 2.0,
            offset_y=(size - scaled_height) / 2.0,
        )

    def apply(self, x: float, y: float) -> tuple[float, float]:
        """Map a point from document space to target pixel space."""
        return x * self.scale + self.offset_x, y * self.scale + self.offset_y

    def to_matrix(self) -> str:
        """Format as an SVG ``transform`` attribute value."""
        return "matrix(%s)" % svg_utils.seq2str(
            (self.scale, 0.0, 0.0, self.scale, self.offset_x, self.offset_y)
        )
