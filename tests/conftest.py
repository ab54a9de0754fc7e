import base64
import logging
from unittest.mock import patch

import pytest

from deckclock.clock.surface import Surface
from deckclock.config.settings import Settings


class RecordingSurface(Surface):
    """Surface that records draw calls instead of painting pixels."""

    def __init__(self, width: int = 144, height: int = 144):
        self.width = width
        self.height = height
        self.calls = []

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("fill_rect", x, y, w, h, color))

    def stroke_line(self, x1, y1, x2, y2, width, color):
        self.calls.append(("stroke_line", x1, y1, x2, y2, width, color))

    def to_data_url(self):
        payload = base64.b64encode(repr(self.calls).encode()).decode("ascii")
        return f"data:text/plain;base64,{payload}"

    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def recording_surface():
    """A 144x144 recording surface."""
    return RecordingSurface()


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at temporary paths."""
    return Settings(
        clock_output_path=tmp_path / "out" / "clock.png",
        log_file=None,
    )


@pytest.fixture(autouse=True)
def mock_settings(test_settings):
    """Patch get_settings wherever it has been imported."""
    with patch("deckclock.cli.get_settings", return_value=test_settings), \
         patch("deckclock.clock.service.get_settings", return_value=test_settings):
        yield test_settings


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo configure_logging() between tests."""
    yield
    logger = logging.getLogger("deckclock")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
