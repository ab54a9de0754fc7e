"""Analog clock renderer."""

import math
from datetime import datetime
from typing import NamedTuple, Optional, Tuple

from deckclock.clock.palette import AnalogPalette
from deckclock.clock.renderer import ClockRenderer
from deckclock.clock.surface import Surface
from deckclock.logging.config import get_logger

logger = get_logger(__name__)


class ArmProgress(NamedTuple):
    """How far each arm has travelled through its cycle, in [0, 1)."""

    hour: float
    minute: float
    second: float


def arm_progress(current_time: datetime) -> ArmProgress:
    """
    Compute continuous arm progress for a time of day.

    Smaller units feed fractionally into larger ones, so the minute arm moves
    with the seconds and the hour arm moves with the minutes.

    Args:
        current_time: Time to display

    Returns:
        Hour, minute and second progress
    """
    second = current_time.second / 60
    minute = current_time.minute / 60 + second / 60
    hour = (current_time.hour % 12) / 12 + minute / 12
    return ArmProgress(hour=hour, minute=minute, second=second)


def progress_to_angle(progress: float) -> float:
    """Angle in radians; progress 0 points at 12 o'clock, 0.25 at 3 o'clock."""
    return 2 * math.pi * progress - math.pi / 2


class ArcArmRenderer(ClockRenderer):
    """Renders a clock with arms computed from angular position."""

    palette: Optional[AnalogPalette]

    def __init__(self, surface: Optional[Surface] = None):
        """
        Initialize renderer.

        Args:
            surface: Drawing surface, or None for an inert renderer
        """
        super().__init__(surface)
        if self.inert:
            return

        self.radius = self.width / 2
        self.center = (self.width / 2, self.height / 2)
        self.last_progress: Optional[ArmProgress] = None

    def _default_palette(self) -> AnalogPalette:
        return AnalogPalette()

    def _draw(self, current_time: datetime) -> None:
        self.last_progress = arm_progress(current_time)
        self.surface.fill_rect(0, 0, self.width, self.height, self.palette.background)
        # Arms are not drawn; only the background is shown for now.
        logger.debug(f"Drew background at {current_time:%H:%M:%S}, progress {self.last_progress}")

    def arm_endpoint(self, progress: float, length: float) -> Optional[Tuple[float, float]]:
        """
        Compute where an arm ends.

        Args:
            progress: Arm progress in [0, 1)
            length: Arm length as a fraction of the clock radius

        Returns:
            End point (x, y) in surface coordinates, or None for an inert renderer
        """
        if self.inert:
            return None
        angle = progress_to_angle(progress)
        cx, cy = self.center
        return (
            cx + length * self.radius * math.cos(angle),
            cy + length * self.radius * math.sin(angle),
        )

    def draw_arm(
        self,
        progress: float,
        thickness: float,
        length: float,
        color: str,
    ) -> Optional[Tuple[float, float]]:
        """
        Stroke one arm from the center outward.

        Args:
            progress: Arm progress in [0, 1)
            thickness: Stroke thickness in pixels
            length: Arm length as a fraction of the clock radius
            color: Stroke color

        Returns:
            End point of the arm, or None for an inert renderer
        """
        if self.inert:
            return None
        x, y = self.arm_endpoint(progress, length)
        cx, cy = self.center
        self.surface.stroke_line(cx, cy, x, y, thickness, color)
        return (x, y)
