"""Chart layout: label extents, web radius, desired size, label placement."""
import math
from typing import NamedTuple

from shared.types import Point, Align
from spiderchart.backend import DrawBackend, Paint
from spiderchart.constants import CENTER_LINE_TOL


class LabelExtents(NamedTuple):
    """Widest and tallest label, each including the label margin."""
    width: float
    height: float


class LabelPlacement(NamedTuple):
    """Where a label's text is drawn: baseline point and horizontal alignment."""
    x: float
    y: float
    align: Align


def label_extents(labels, backend: DrawBackend, paint: Paint, margin: float) -> LabelExtents:
    """Max measured label width/height plus *margin* (margin alone if no labels)."""
    max_w = max((backend.measure_text_width(s, paint) for s in labels), default=0.0)
    max_h = max((backend.measure_text_height(s, paint) for s in labels), default=0.0)
    return LabelExtents(max_w + margin, max_h + margin)


def web_radius(width: float, height: float, ext: LabelExtents) -> float:
    """Largest web radius that leaves room for labels on every side.

    Not clamped: a surface smaller than the labels gives a negative radius.
    """
    return min((width - 2*ext.width)/2, (height - 2*ext.height)/2)


def desired_size(radius: float, ext: LabelExtents) -> tuple[float, float]:
    """Surface size (w, h) that fits a web of *radius* plus labels."""
    return (2*radius + 2*ext.width, 2*radius + 2*ext.height)


def place_label(anchor: Point, c: Point, text_h: float, margin: float) -> LabelPlacement:
    """Baseline position and alignment for a label anchored on the web edge.

    Labels left of center are right-aligned and pushed left by margin, labels
    right of center the opposite; labels on the vertical center line are
    centered. Below center the whole text height drops under the anchor,
    above center the baseline sits margin above it, and on the horizontal
    center line the text is centered vertically.
    """
    x, y = anchor; cx, cy = c
    on_vert = math.isclose(x, cx, abs_tol=CENTER_LINE_TOL)
    on_horiz = math.isclose(y, cy, abs_tol=CENTER_LINE_TOL)

    if on_vert:
        tx, align = x, "center"
    elif x < cx:
        tx, align = x - margin, "right"
    else:
        tx, align = x + margin, "left"

    if on_horiz:
        ty = y + text_h/2
    elif y > cy:
        ty = y + text_h + margin
    else:
        ty = y - margin
    return LabelPlacement(tx, ty, align)
