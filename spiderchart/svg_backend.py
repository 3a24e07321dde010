"""SVG drawing backend and whole-chart SVG export."""
from shared.color import to_css
from shared.svg import fmt_pts, svg_open, svg_text, line_el
from spiderchart.backend import Paint
from spiderchart.text import TextMetrics

_ANCHOR = {"left": "start", "center": "middle", "right": "end"}


class SvgBackend:
    """Appends one SVG element per primitive to *lines*."""

    def __init__(self, lines: list | None = None, metrics: TextMetrics | None = None):
        self.lines = [] if lines is None else lines
        self.metrics = metrics if metrics is not None else TextMetrics()

    def draw_lines(self, pts, paint: Paint) -> None:
        stroke = to_css(paint.color)
        for i in range(0, len(pts) - 3, 4):
            self.lines.append(line_el((pts[i], pts[i+1]), (pts[i+2], pts[i+3]),
                                      stroke, paint.stroke_width))

    def draw_path(self, path, paint: Paint) -> None:
        if paint.style == "fill":
            attrs = f'fill="{to_css(paint.color)}" stroke="none"'
        else:
            attrs = (f'fill="none" stroke="{to_css(paint.color)}"'
                     f' stroke-width="{paint.stroke_width:g}"')
        self.lines.append(f'<polygon points="{fmt_pts(path)}" {attrs}/>')

    def draw_text(self, text: str, x: float, y: float, paint: Paint) -> None:
        self.lines.append(
            f'<text x="{x:.1f}" y="{y:.1f}" text-anchor="{_ANCHOR[paint.align]}"'
            f' font-family="{self.metrics.family}" font-size="{paint.text_size:g}"'
            f' fill="{to_css(paint.color)}">{svg_text(text)}</text>')

    def measure_text_width(self, text: str, paint: Paint) -> float:
        return self.metrics.width(text, paint.text_size)

    def measure_text_height(self, text: str, paint: Paint) -> float:
        return self.metrics.height(text, paint.text_size)


def render_svg(chart, background: str | None = "white") -> str:
    """Complete SVG document for *chart* at its host's current size."""
    w, h = chart.host.width, chart.host.height
    backend = SvgBackend()
    lines = backend.lines
    lines.append(svg_open(w, h))
    if background:
        lines.append(f'<rect width="{w}" height="{h}" fill="{background}"/>')
    chart.draw(backend)
    lines.append('</svg>')
    return "\n".join(lines)
