"""Matplotlib drawing backend: renders the chart to a raster image."""
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend for file output
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from matplotlib.patches import Polygon
import numpy as np

from shared.color import to_rgba
from spiderchart.backend import Paint
from spiderchart.text import TextMetrics, DPI


class MatplotlibBackend:
    """Draws onto a figure exactly width x height pixels, y axis pointing down."""

    def __init__(self, width: int, height: int, metrics: TextMetrics | None = None):
        self.metrics = metrics if metrics is not None else TextMetrics()
        self.fig = plt.figure(figsize=(width / DPI, height / DPI), dpi=DPI)
        self.ax = self.fig.add_axes((0, 0, 1, 1))
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)
        self.ax.axis('off')
        self._z = 0

    def _next_z(self) -> int:
        # Later primitives on top, regardless of artist type
        self._z += 1
        return self._z

    def draw_lines(self, pts, paint: Paint) -> None:
        # pts may be a reused scratch buffer, so copy before handing it over
        segs = np.array(pts, dtype=float).reshape(-1, 2, 2)
        self.ax.add_collection(LineCollection(
            segs, colors=[to_rgba(paint.color)], linewidths=paint.stroke_width,
            zorder=self._next_z()))

    def draw_path(self, path, paint: Paint) -> None:
        verts = np.array(path, dtype=float).reshape(-1, 2)
        if len(verts) == 0:
            return
        if paint.style == "fill":
            patch = Polygon(verts, closed=True, facecolor=to_rgba(paint.color),
                            edgecolor="none", linewidth=0)
        else:
            patch = Polygon(verts, closed=True, fill=False, edgecolor=to_rgba(paint.color),
                            linewidth=paint.stroke_width)
        patch.set_zorder(self._next_z())
        self.ax.add_patch(patch)

    def draw_text(self, text: str, x: float, y: float, paint: Paint) -> None:
        self.ax.text(x, y, text, ha=paint.align, va="baseline",
                     fontsize=paint.text_size, family=self.metrics.family,
                     color=to_rgba(paint.color), zorder=self._next_z())

    def measure_text_width(self, text: str, paint: Paint) -> float:
        return self.metrics.width(text, paint.text_size)

    def measure_text_height(self, text: str, paint: Paint) -> float:
        return self.metrics.height(text, paint.text_size)

    def save(self, path, background: str = "white") -> None:
        self.fig.savefig(path, dpi=DPI, facecolor=background)

    def close(self) -> None:
        plt.close(self.fig)


def render_png(chart, path, background: str = "white") -> None:
    """Draw *chart* at its host's current size and write a PNG to *path*."""
    backend = MatplotlibBackend(chart.host.width, chart.host.height)
    try:
        chart.draw(backend)
        backend.save(path, background=background)
    finally:
        backend.close()
