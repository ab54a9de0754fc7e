"""Clock service daemon."""

import time
from pathlib import Path
from typing import Optional

from deckclock.clock import create_renderer
from deckclock.clock.renderer import ClockRenderer
from deckclock.clock.surface import PillowSurface, decode_data_url
from deckclock.config import get_settings
from deckclock.logging.config import get_logger

logger = get_logger(__name__)

ERROR_BACKOFF_SECONDS = 5


class ClockService:
    """Host loop that redraws the clock and publishes the image."""

    def __init__(
        self,
        renderer: Optional[ClockRenderer] = None,
        output_path: Optional[Path] = None,
    ):
        """
        Initialize clock service.

        Args:
            renderer: Renderer to drive (built from settings when omitted)
            output_path: Where to write the PNG (defaults to settings)
        """
        self.settings = get_settings()
        if renderer is None:
            surface = PillowSurface(self.settings.width, self.settings.height)
            renderer = create_renderer(self.settings.variant, surface)
            renderer.set_colors(self.settings.colors_for(self.settings.variant))
        self.renderer = renderer
        self.output_path = Path(output_path or self.settings.clock_output_path)

    def tick(self) -> str:
        """
        Draw the current time and read back the image.

        Returns:
            Data URL of the new frame ("" for an inert renderer)
        """
        self.renderer.draw_clock()
        return self.renderer.get_image_data()

    def update_clock(self) -> bool:
        """
        Generate and save an updated clock image.

        Returns:
            True if a frame was written
        """
        image_data = self.tick()
        if not image_data:
            logger.warning("Renderer produced no image; nothing written")
            return False

        # Atomic write
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.output_path.with_suffix(".tmp")
        try:
            temp_path.write_bytes(decode_data_url(image_data))
            temp_path.replace(self.output_path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise
        return True

    def run_daemon(self, max_ticks: Optional[int] = None) -> None:
        """
        Run the clock service loop.

        Args:
            max_ticks: Stop after this many updates (runs forever when None)
        """
        interval = self.settings.clock_update_interval
        logger.info(f"Clock service started, outputting to {self.output_path} every {interval}s")

        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            try:
                self.update_clock()
                ticks += 1
                time.sleep(interval)

            except KeyboardInterrupt:
                logger.info("Clock service stopped")
                break
            except Exception as e:
                logger.error(f"Error in clock service: {e}")
                ticks += 1
                time.sleep(ERROR_BACKOFF_SECONDS)
