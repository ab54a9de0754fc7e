"""Clock face renderers."""

from typing import Optional

from deckclock.clock.analog import ArcArmRenderer, ArmProgress, arm_progress
from deckclock.clock.digital import SegmentDigitRenderer, format_digits, segments_for
from deckclock.clock.palette import AnalogPalette, DigitalPalette, Palette
from deckclock.clock.renderer import ClockRenderer
from deckclock.clock.surface import PillowSurface, Surface

RENDERERS = {
    "digital": SegmentDigitRenderer,
    "analog": ArcArmRenderer,
}


def create_renderer(variant: str, surface: Optional[Surface] = None) -> ClockRenderer:
    """
    Create a renderer for a clock variant.

    Args:
        variant: ``"digital"`` or ``"analog"``
        surface: Drawing surface, or None for an inert renderer

    Returns:
        Renderer instance

    Raises:
        ValueError: If the variant is unknown
    """
    try:
        renderer_cls = RENDERERS[variant]
    except KeyError:
        raise ValueError(f"Unknown clock variant: {variant}") from None
    return renderer_cls(surface)


__all__ = [
    "AnalogPalette",
    "ArcArmRenderer",
    "ArmProgress",
    "ClockRenderer",
    "DigitalPalette",
    "Palette",
    "PillowSurface",
    "SegmentDigitRenderer",
    "Surface",
    "arm_progress",
    "create_renderer",
    "format_digits",
    "segments_for",
]
