"""Seven-segment digital clock renderer."""

from datetime import datetime
from typing import FrozenSet, NamedTuple, Optional, Tuple

from deckclock.clock.palette import DigitalPalette
from deckclock.clock.renderer import ClockRenderer
from deckclock.clock.surface import Surface
from deckclock.logging.config import get_logger

logger = get_logger(__name__)

LINE_WIDTH = 4

#     1
#    ---
# 0 |   | 2
#    ---  3
# 4 |   | 5
#    ---
#     6
UPPER_LEFT, TOP, UPPER_RIGHT, MIDDLE, LOWER_LEFT, LOWER_RIGHT, BOTTOM = range(7)

SEGMENT_PATTERNS: Tuple[FrozenSet[int], ...] = (
    frozenset({UPPER_LEFT, TOP, UPPER_RIGHT, LOWER_LEFT, LOWER_RIGHT, BOTTOM}),  # 0
    frozenset({UPPER_RIGHT, LOWER_RIGHT}),  # 1
    frozenset({TOP, UPPER_RIGHT, MIDDLE, LOWER_LEFT, BOTTOM}),  # 2
    frozenset({TOP, UPPER_RIGHT, MIDDLE, LOWER_RIGHT, BOTTOM}),  # 3
    frozenset({UPPER_LEFT, UPPER_RIGHT, MIDDLE, LOWER_RIGHT}),  # 4
    frozenset({UPPER_LEFT, TOP, MIDDLE, LOWER_RIGHT, BOTTOM}),  # 5
    frozenset({UPPER_LEFT, TOP, MIDDLE, LOWER_LEFT, LOWER_RIGHT, BOTTOM}),  # 6
    frozenset({TOP, UPPER_RIGHT, LOWER_RIGHT}),  # 7
    frozenset(range(7)),  # 8
    frozenset({UPPER_LEFT, TOP, UPPER_RIGHT, MIDDLE, LOWER_RIGHT, BOTTOM}),  # 9
)


class Segment(NamedTuple):
    """Line segment relative to a digit cell's top-left corner."""

    x1: float
    y1: float
    x2: float
    y2: float


def segments_for(digit: int) -> FrozenSet[int]:
    """
    Get the lit segment indices for a decimal digit.

    Args:
        digit: Value 0-9

    Returns:
        Set of segment indices that are on

    Raises:
        ValueError: If digit is outside 0-9
    """
    if not 0 <= digit <= 9:
        raise ValueError(f"Not a decimal digit: {digit}")
    return SEGMENT_PATTERNS[digit]


def build_segment_geometry(w: float, h: float, l: float) -> Tuple[Segment, ...]:
    """
    Build the seven segment lines of one digit cell.

    Args:
        w: Digit width
        h: Digit height
        l: Line thickness

    Returns:
        Segments in index order (upper-left, top, upper-right, middle,
        lower-left, lower-right, bottom)
    """
    right = (3 * l / 2) + w
    return (
        Segment(l / 2, l, l / 2, (h / 2) + (l / 2)),
        Segment(l, l / 2, l + w, l / 2),
        Segment(right, l, right, (h / 2) + (l / 2)),
        Segment(l, (h / 2) + l, l + w, (h / 2) + l),
        Segment(l / 2, (h / 2) + (3 * l / 2), l / 2, h + (l / 2)),
        Segment(right, (h / 2) + (3 * l / 2), right, h + (l / 2)),
        Segment(l / 2, h + l, l + w, h + l),
    )


def format_digits(current_time: datetime) -> str:
    """Format hours and minutes as a four character string, e.g. ``"0941"``."""
    return f"{current_time.hour:02d}{current_time.minute:02d}"


def separator_color(second: int, palette: DigitalPalette) -> str:
    """The colon is lit on odd seconds and dimmed on even ones."""
    return palette.line_off if second % 2 == 0 else palette.line_on


class SegmentDigitRenderer(ClockRenderer):
    """Renders HH:MM as four seven-segment digits with a blinking colon."""

    palette: Optional[DigitalPalette]

    def __init__(self, surface: Optional[Surface] = None, line_width: float = LINE_WIDTH):
        """
        Initialize renderer.

        Args:
            surface: Drawing surface, or None for an inert renderer
            line_width: Segment stroke thickness in pixels
        """
        super().__init__(surface)
        if self.inert:
            return

        l = line_width
        self.line_width = l
        self.digit_width = (self.width / 5) - (l * 2)
        self.digit_height = (self.height / 2) - (l * 2)
        self.digit_spacing = (self.width / 20) + l
        self.origin_x = l
        self.origin_y = (self.height - self.digit_height) / 2

        h = self.digit_height
        self.segments = build_segment_geometry(self.digit_width, h, l)
        self.separator_points: Tuple[Tuple[float, float], ...] = (
            (0, (h / 4) + (l / 2)),
            (0, (3 * h / 4) + (3 * l / 2)),
        )

    def _default_palette(self) -> DigitalPalette:
        return DigitalPalette()

    def _draw(self, current_time: datetime) -> None:
        palette = self.palette
        digits = format_digits(current_time)
        l = self.line_width

        self.surface.fill_rect(0, 0, self.width, self.height, palette.background)

        x = self.origin_x
        y = self.origin_y
        for position, char in enumerate(digits):
            lit = segments_for(int(char))
            for index, seg in enumerate(self.segments):
                color = palette.line_on if index in lit else palette.line_off
                self.surface.stroke_line(seg.x1 + x, seg.y1 + y, seg.x2 + x, seg.y2 + y, l, color)
            x += self.digit_width + self.digit_spacing

            if position == 1:
                color = separator_color(current_time.second, palette)
                for px, py in self.separator_points:
                    self.surface.fill_rect(px + (l / 2) + x, py + y, l, l, color)
                x += self.digit_spacing

        logger.debug(f"Drew digits {digits}")
