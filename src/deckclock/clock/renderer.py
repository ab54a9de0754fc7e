"""Shared contract of the clock renderers."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Optional

from deckclock.clock.palette import Palette
from deckclock.clock.surface import Surface
from deckclock.logging.config import get_logger

logger = get_logger(__name__)


class ClockRenderer(ABC):
    """
    Draws a clock face onto an externally owned surface.

    A renderer built without a surface is inert: every method is a safe no-op,
    ``get_image_data`` returns ``""`` and ``get_colors`` returns ``{}``. Hosts may
    construct renderers before their surface exists.

    Geometry is derived from the surface size once, at construction. Resizing
    the surface afterwards is not supported.
    """

    def __init__(self, surface: Optional[Surface] = None):
        """
        Initialize renderer.

        Args:
            surface: Drawing surface, or None for an inert renderer
        """
        self.surface = surface
        self.palette: Optional[Palette] = None

        if surface is None:
            logger.warning(f"{type(self).__name__} created without a surface; drawing disabled")
            return

        self.width = surface.width
        self.height = surface.height
        self.palette = self._default_palette()
        logger.debug(f"{type(self).__name__} ready for {self.width}x{self.height} surface")

    @property
    def inert(self) -> bool:
        """True when there is no surface to draw on."""
        return self.surface is None

    @abstractmethod
    def _default_palette(self) -> Palette:
        """Build the palette with this variant's default colors."""
        pass

    @abstractmethod
    def _draw(self, current_time: datetime) -> None:
        """Draw one frame for ``current_time``."""
        pass

    def draw_clock(self, current_time: Optional[datetime] = None) -> None:
        """
        Redraw the clock face.

        Args:
            current_time: Instant to display (defaults to the local time now)
        """
        if self.inert:
            return
        self._draw(current_time or datetime.now())

    def get_image_data(self) -> str:
        """
        Return the surface contents as a data URL.

        Returns:
            Image string, or ``""`` for an inert renderer
        """
        if self.inert:
            return ""
        return self.surface.to_data_url()

    def set_colors(self, colors: Any) -> None:
        """
        Merge role -> color entries into the palette.

        Args:
            colors: Mapping of roles to colors; non-mappings are ignored
        """
        if self.inert:
            return
        self.palette.merge(colors)

    def get_colors(self) -> Dict[str, Any]:
        """Return a snapshot of the palette."""
        if self.inert:
            return {}
        return self.palette.snapshot()

    def reset_colors(self) -> None:
        """Restore the default palette."""
        if self.inert:
            return
        self.palette.reset()
