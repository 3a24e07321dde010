"""Pure geometry for radial charts: axis angles, ring vertices, segment buffers."""
import math

import numpy as np

from .types import Point

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

# ============================================================
# Axis Geometry
# ============================================================
def axis_angle(i: int, n: int, rotation: float) -> float:
    """Angle in degrees of axis *i* out of *n*, offset by *rotation* degrees."""
    if n < 1:
        raise GeometryError(f"Axis count must be positive: n={n}")
    return i * (360.0 / n) - rotation

def polar_pt(c: Point, r: float, deg: float) -> Point:
    """Point at distance r from c along direction deg (degrees, screen space)."""
    rad = math.radians(deg)
    return (c[0] + r*math.cos(rad), c[1] + r*math.sin(rad))

def axis_pt(c: Point, r: float, i: int, n: int, rotation: float) -> Point:
    """Point at radius r on axis i."""
    return polar_pt(c, r, axis_angle(i, n, rotation))

def _unit_dirs(n: int, rotation: float, count: int) -> np.ndarray:
    if n < 1:
        raise GeometryError(f"Axis count must be positive: n={n}")
    rad = np.radians(np.arange(count) * (360.0 / n) - rotation)
    return np.column_stack((np.cos(rad), np.sin(rad)))

def ring_vertices(c: Point, r: float, n: int, rotation: float) -> np.ndarray:
    """Closed ring of n+1 vertices at radius r; row n repeats row 0 exactly."""
    verts = np.empty((n + 1, 2))
    verts[:n] = np.asarray(c) + r * _unit_dirs(n, rotation, n)
    verts[n] = verts[0]
    return verts

def value_vertices(c: Point, radius: float, values, n: int, rotation: float) -> np.ndarray:
    """Open polygon with vertex i at radius*values[i]/100 along axis i.

    Values are laid out on an n-axis grid; len(values) normally equals n.
    """
    vals = np.asarray(values, dtype=float)
    r = radius * (vals / 100.0)
    return np.asarray(c) + r[:, None] * _unit_dirs(n, rotation, len(vals))

def ring_radii(radius: float, n: int) -> list[float]:
    """Web ring radii, outermost first: radius - k*(radius/n) for k in 0..n-1."""
    return [radius - k*(radius/n) for k in range(n)]

# ============================================================
# Segment Buffers
# ============================================================
# A segment buffer holds 4 floats per segment: x0, y0, x1, y1.
def fill_spokes(buf: np.ndarray, ring: np.ndarray, c: Point) -> np.ndarray:
    """Write one segment per axis, from the ring vertex to the center c."""
    n = len(ring) - 1
    buf[0:4*n:4] = ring[:n, 0]; buf[1:4*n:4] = ring[:n, 1]
    buf[2:4*n:4] = c[0];        buf[3:4*n:4] = c[1]
    return buf

def fill_edges(buf: np.ndarray, ring: np.ndarray) -> np.ndarray:
    """Write the n edges of a closed ring, each edge starting where the last ended."""
    n = len(ring) - 1
    buf[0:4*n:4] = ring[:n, 0];   buf[1:4*n:4] = ring[:n, 1]
    buf[2:4*n:4] = ring[1:, 0];   buf[3:4*n:4] = ring[1:, 1]
    return buf
