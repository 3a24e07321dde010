"""Spider (radar) chart: state, style properties, measure and render pass."""
import logging

import numpy as np

from shared.geometry import (
    axis_pt, ring_vertices, value_vertices, ring_radii, fill_spokes, fill_edges,
)
from spiderchart.backend import DrawBackend, Paint
from spiderchart.data import SpiderData, check_data, check_labels
from spiderchart.host import ChartHost, MeasureSpec, resolve_size, dp_to_px, px_to_dp, sp_to_px, px_to_sp
from spiderchart.layout import LabelExtents, label_extents, web_radius, desired_size, place_label
from spiderchart.style import ChartStyle, default_style

logger = logging.getLogger(__name__)


class SpiderChart:
    """Radar chart over N axes, N taken from the series data.

    Style properties take density-independent units (dp for lengths, sp for
    label size) and store pixels; changes show on the next draw(). Call
    refresh() after changing labels or sizes so the host re-measures.
    """

    def __init__(self, host: ChartHost, style: ChartStyle | None = None):
        self.host = host
        self.style = style if style is not None else default_style(host)
        self._data: list[SpiderData] = []
        self._labels: list[str] = []
        self._edge_count = 0
        # Segment scratch buffer, 4 floats (x0, y0, x1, y1) per edge
        self._points = np.zeros(0)
        # Closed ring vertices keyed by (center, radius); valid for _layout_key only
        self._paths: dict[tuple, np.ndarray] = {}
        self._layout_key: tuple | None = None
        self._size: tuple[int, int] | None = None

    # ============================================================
    # Data and labels
    # ============================================================
    @property
    def data(self) -> list[SpiderData]:
        return list(self._data)

    def set_data(self, data) -> None:
        """Replace all series. Raises InvalidArgument and keeps the old data on bad input."""
        items = None if data is None else list(data)
        n = check_data(items)
        self._data = items
        if n != self._edge_count:
            self._points = np.zeros(4 * n)
            logger.debug("scratch buffer reallocated for %d axes", n)
        self._edge_count = n
        self.reset_paths()
        logger.debug("data set: %d series, %d axes", len(items), n)

    @property
    def labels(self) -> list[str]:
        return list(self._labels)

    def set_labels(self, labels) -> None:
        """Replace all labels. Label count is not checked against the axis count."""
        items = None if labels is None else list(labels)
        check_labels(items)
        self._labels = items
        logger.debug("labels set: %d", len(items))

    @property
    def edge_count(self) -> int:
        """Number of axes, from the current series (0 when there is no data)."""
        return self._edge_count

    @property
    def scratch_size(self) -> int:
        return len(self._points)

    # ============================================================
    # Style properties (public units: sp, dp, degrees)
    # ============================================================
    @property
    def label_size(self) -> float:
        """Label text size in sp."""
        return px_to_sp(self.style.label_size, self.host.scaled_density)

    @label_size.setter
    def label_size(self, size: float) -> None:
        self.style.label_size = sp_to_px(size, self.host.scaled_density)

    @property
    def label_color(self) -> int:
        return self.style.label_color

    @label_color.setter
    def label_color(self, color: int) -> None:
        self.style.label_color = color

    @property
    def label_margin(self) -> float:
        """Gap between the web edge and label text, in dp."""
        return px_to_dp(self.style.label_margin, self.host.density)

    @label_margin.setter
    def label_margin(self, size: float) -> None:
        self.style.label_margin = dp_to_px(size, self.host.density)

    @property
    def web_color(self) -> int:
        return self.style.web_color

    @web_color.setter
    def web_color(self, color: int) -> None:
        self.style.web_color = color

    @property
    def web_background_color(self) -> int:
        return self.style.web_background_color

    @web_background_color.setter
    def web_background_color(self, color: int) -> None:
        self.style.web_background_color = color

    @property
    def web_stroke_width(self) -> float:
        """Ring and spoke stroke width in dp."""
        return px_to_dp(self.style.web_stroke_width, self.host.density)

    @web_stroke_width.setter
    def web_stroke_width(self, width: float) -> None:
        self.style.web_stroke_width = dp_to_px(width, self.host.density)

    @property
    def web_edge_color(self) -> int:
        return self.style.web_edge_color

    @web_edge_color.setter
    def web_edge_color(self, color: int) -> None:
        self.style.web_edge_color = color

    @property
    def web_edge_stroke_width(self) -> float:
        """Outer edge stroke width in dp."""
        return px_to_dp(self.style.web_edge_stroke_width, self.host.density)

    @web_edge_stroke_width.setter
    def web_edge_stroke_width(self, width: float) -> None:
        self.style.web_edge_stroke_width = dp_to_px(width, self.host.density)

    @property
    def rotation_angle(self) -> float:
        """Degrees subtracted from every axis angle (90 puts axis 0 at the top)."""
        return self.style.rotation_angle

    @rotation_angle.setter
    def rotation_angle(self, value: float) -> None:
        self.style.rotation_angle = value

    @property
    def draw_web(self) -> bool:
        return self.style.draw_web

    @draw_web.setter
    def draw_web(self, enabled: bool) -> None:
        self.style.draw_web = enabled

    @property
    def draw_labels(self) -> bool:
        return self.style.draw_labels

    @draw_labels.setter
    def draw_labels(self, enabled: bool) -> None:
        self.style.draw_labels = enabled

    # ============================================================
    # Host lifecycle
    # ============================================================
    def refresh(self) -> None:
        """Drop cached paths and ask the host to re-measure and redraw."""
        self.reset_paths()
        self.host.request_layout()
        self.host.invalidate()

    def reset_paths(self) -> None:
        self._paths.clear()
        self._layout_key = None

    def on_size_changed(self, w: int, h: int, old_w: int, old_h: int) -> None:
        logger.debug("surface resized %dx%d -> %dx%d", old_w, old_h, w, h)
        self._size = (w, h)
        self.reset_paths()

    def measure(self, width_spec: MeasureSpec, height_spec: MeasureSpec,
                backend: DrawBackend) -> tuple[int, int]:
        """Size this chart wants within the given constraints."""
        ext = self._label_extents(backend)
        radius = web_radius(width_spec.size, height_spec.size, ext)
        want_w, want_h = desired_size(radius, ext)
        size = (resolve_size(want_w, width_spec), resolve_size(want_h, height_spec))
        logger.debug("measured %dx%d (radius %.1f)", size[0], size[1], radius)
        return size

    # ============================================================
    # Render pass
    # ============================================================
    def draw(self, backend: DrawBackend) -> None:
        """Issue every draw call for the current state, back to front."""
        n = self._edge_count
        if n == 0:
            return
        w, h = self.host.width, self.host.height
        if self._size != (w, h):
            old = self._size or (0, 0)
            self.on_size_changed(w, h, old[0], old[1])

        s = self.style
        ext = self._label_extents(backend)
        radius = web_radius(w, h, ext)
        c = (w / 2.0, h / 2.0)
        key = (n, s.rotation_angle, radius, c)
        if key != self._layout_key:
            self._paths.clear()
            self._layout_key = key
        logger.debug("draw: %d axes, radius %.1f, %d series, %d labels",
                     n, radius, len(self._data), len(self._labels))

        self._draw_web_background(backend, c, radius)
        if s.draw_web:
            self._draw_web(backend, c, radius)
        self._draw_polygon(backend, Paint(s.web_edge_color, "stroke", s.web_edge_stroke_width), c, radius)
        self._draw_data(backend, c, radius)
        if s.draw_labels:
            self._draw_labels(backend, c, radius)

    def _label_paint(self, align="left") -> Paint:
        s = self.style
        return Paint(s.label_color, "fill", 0.0, s.label_size, align)

    def _label_extents(self, backend: DrawBackend) -> LabelExtents:
        return label_extents(self._labels, backend, self._label_paint(), self.style.label_margin)

    def _ring(self, c, r) -> np.ndarray:
        ring = self._paths.get((c, r))
        if ring is None:
            ring = ring_vertices(c, r, self._edge_count, self.style.rotation_angle)
            self._paths[(c, r)] = ring
        return ring

    def _draw_web_background(self, backend, c, radius):
        s = self.style
        backend.draw_path(self._ring(c, radius), Paint(s.web_background_color, "fill"))

    def _draw_web(self, backend, c, radius):
        s = self.style
        paint = Paint(s.web_color, "stroke", s.web_stroke_width)
        for k, r in enumerate(ring_radii(radius, self._edge_count)):
            if k == 0:
                fill_spokes(self._points, self._ring(c, r), c)
                backend.draw_lines(self._points, paint)
            else:
                self._draw_polygon(backend, paint, c, r)

    def _draw_polygon(self, backend, paint, c, r):
        fill_edges(self._points, self._ring(c, r))
        backend.draw_lines(self._points, paint)

    def _draw_data(self, backend, c, radius):
        n, rot = self._edge_count, self.style.rotation_angle
        for entry in self._data:
            path = value_vertices(c, radius, entry.values, n, rot)
            backend.draw_path(path, Paint(entry.color, "fill"))

    def _draw_labels(self, backend, c, radius):
        s = self.style
        n = self._edge_count
        for i, label in enumerate(self._labels):
            anchor = axis_pt(c, radius, i, n, s.rotation_angle)
            text_h = backend.measure_text_height(label, self._label_paint())
            pl = place_label(anchor, c, text_h, s.label_margin)
            backend.draw_text(label, pl.x, pl.y, self._label_paint(pl.align))
