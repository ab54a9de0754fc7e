"""Drawing surfaces the clock renderers paint on."""

import base64
from abc import ABC, abstractmethod
from io import BytesIO

from PIL import Image, ImageDraw


class Surface(ABC):
    """Immediate-mode 2D drawing surface with fixed pixel dimensions."""

    width: int
    height: int

    @abstractmethod
    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        """
        Fill an axis-aligned rectangle.

        Args:
            x: Left edge
            y: Top edge
            w: Rectangle width
            h: Rectangle height
            color: Fill color (e.g. ``#RRGGBB``)
        """
        pass

    @abstractmethod
    def stroke_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        width: float,
        color: str,
    ) -> None:
        """
        Stroke a straight line segment.

        Args:
            x1: Start x
            y1: Start y
            x2: End x
            y2: End y
            width: Stroke thickness in pixels
            color: Stroke color (e.g. ``#RRGGBB``)
        """
        pass

    @abstractmethod
    def to_data_url(self) -> str:
        """
        Export the current contents as a self-contained image string.

        Returns:
            ``data:`` URI with base64-encoded image data
        """
        pass


class PillowSurface(Surface):
    """Surface backed by a Pillow RGBA image."""

    def __init__(self, width: int, height: int):
        """
        Initialize a transparent surface.

        Args:
            width: Width in pixels
            height: Height in pixels
        """
        self.width = width
        self.height = height
        self.image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        self._draw = ImageDraw.Draw(self.image)

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        if w <= 0 or h <= 0:
            return
        # Pillow boxes are inclusive of the bottom-right pixel
        self._draw.rectangle((x, y, x + w - 1, y + h - 1), fill=color)

    def stroke_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        width: float,
        color: str,
    ) -> None:
        self._draw.line((x1, y1, x2, y2), fill=color, width=max(1, round(width)))

    def to_png_bytes(self) -> bytes:
        """Encode the surface as PNG."""
        buf = BytesIO()
        self.image.save(buf, format="PNG")
        return buf.getvalue()

    def to_data_url(self) -> str:
        b64 = base64.b64encode(self.to_png_bytes()).decode("ascii")
        return f"data:image/png;base64,{b64}"


def decode_data_url(data_url: str) -> bytes:
    """
    Decode the payload of a base64 ``data:`` URI.

    Args:
        data_url: String produced by :meth:`Surface.to_data_url`

    Returns:
        Raw image bytes

    Raises:
        ValueError: If the string is not a base64 data URI
    """
    header, sep, payload = data_url.partition(",")
    if not sep or not header.startswith("data:") or not header.endswith(";base64"):
        raise ValueError("Not a base64 data URL")
    return base64.b64decode(payload, validate=True)
