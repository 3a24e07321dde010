"""SVG page constants and formatting helpers."""
from xml.sax.saxutils import escape

from .types import Point

# Default chart page (square, px)
W, H = 480, 480

def fmt_pts(points) -> str:
    """Space-separated "x,y" pairs for polygon/polyline points attributes."""
    return " ".join(f"{p[0]:.1f},{p[1]:.1f}" for p in points)

def svg_open(w: float, h: float) -> str:
    return (f'<svg xmlns="http://www.w3.org/2000/svg" width="{w:g}" height="{h:g}"'
            f' viewBox="0 0 {w:g} {h:g}">')

def svg_text(s: str) -> str:
    """Escape label text for element content."""
    return escape(s)

def line_el(a: Point, b: Point, stroke: str, width: float) -> str:
    return (f'<line x1="{a[0]:.1f}" y1="{a[1]:.1f}" x2="{b[0]:.1f}" y2="{b[1]:.1f}"'
            f' stroke="{stroke}" stroke-width="{width:g}"/>')
