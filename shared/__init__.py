"""Shared types, radial geometry, color, and SVG utilities."""

from .types import Point, Align, PaintStyle
from .geometry import (
    GeometryError,
    axis_angle, polar_pt, axis_pt,
    ring_vertices, value_vertices, ring_radii,
    fill_spokes, fill_edges,
)
from .color import argb, rgb, to_css, to_rgba, parse_color, ColorParseError
from .svg import W, H
