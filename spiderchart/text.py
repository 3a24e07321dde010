"""Font metrics for label layout, measured with matplotlib's Agg renderer."""
from functools import lru_cache

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend, no display needed
from matplotlib.backends.backend_agg import RendererAgg
from matplotlib.font_manager import FontProperties

from spiderchart.constants import LABEL_FONT_FAMILY

# At 72 dpi one point is one pixel, so font sizes in px pass straight through.
DPI = 72.0

_renderer = RendererAgg(1, 1, DPI)


@lru_cache(maxsize=256)
def text_extent(family: str, text: str, size: float) -> tuple[float, float]:
    """(width, height) in pixels; empty or zero-size text measures 0 x 0."""
    if not text or size <= 0:
        return (0.0, 0.0)
    w, h, _d = _renderer.get_text_width_height_descent(
        text, FontProperties(family=family, size=size), ismath=False)
    return (float(w), float(h))


class TextMetrics:
    """Width and ink height of a string at a given pixel size."""

    def __init__(self, family: str = LABEL_FONT_FAMILY):
        self.family = family

    def extent(self, text: str, size: float) -> tuple[float, float]:
        return text_extent(self.family, text, size)

    def width(self, text: str, size: float) -> float:
        return self.extent(text, size)[0]

    def height(self, text: str, size: float) -> float:
        return self.extent(text, size)[1]
