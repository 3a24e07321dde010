"""Render a spider chart to SVG and PNG.

    python gen_chart.py                      # built-in sample chart
    python gen_chart.py chart.yml [out.svg]  # chart description file

The PNG is written next to the SVG with the same stem.
"""
import logging
import os, sys

from shared.color import argb, GRAY, WHITE, BLACK
from shared.svg import W, H
from spiderchart.chart import SpiderChart
from spiderchart.config import load_chart_config, build_chart
from spiderchart.data import SpiderData
from spiderchart.host import StaticHost
from spiderchart.mpl_backend import render_png
from spiderchart.svg_backend import render_svg

_DIR = os.path.dirname(os.path.abspath(__file__))

# ============================================================
# Sample chart (static, no computed values)
# ============================================================
SAMPLE_LABELS = ["ART0", "ART1", "ART2", "ART3", "ART4", "ART5"]
SAMPLE_SERIES = [
    ([45, 82, 76, 55, 55, 55], argb(125, 193, 230, 219)),
    ([85, 72, 41, 75, 75, 75], argb(125, 209, 217, 234)),
]


def build_sample_chart(width: int = W, height: int = H) -> SpiderChart:
    """Six-axis, two-series demo chart."""
    chart = SpiderChart(StaticHost(width, height))
    chart.label_size = 13
    chart.label_color = GRAY
    chart.label_margin = 10
    chart.web_color = GRAY
    chart.web_background_color = WHITE
    chart.web_stroke_width = 1
    chart.web_edge_color = BLACK
    chart.web_edge_stroke_width = 1.5
    chart.rotation_angle = 90
    chart.set_labels(SAMPLE_LABELS)
    chart.set_data([SpiderData(v, c) for v, c in SAMPLE_SERIES])
    chart.refresh()
    return chart


def write_chart(chart: SpiderChart, svg_path: str) -> str:
    """Write SVG and PNG renderings; return the PNG path."""
    with open(svg_path, "w", encoding="utf-8") as f:
        f.write(render_svg(chart))
    png_path = os.path.splitext(svg_path)[0] + ".png"
    render_png(chart, png_path)
    return png_path


def main(argv: list[str]) -> int:
    if argv:
        chart = build_chart(load_chart_config(argv[0]))
        default_out = os.path.splitext(os.path.abspath(argv[0]))[0] + ".svg"
    else:
        chart = build_sample_chart()
        default_out = os.path.join(_DIR, "spider_chart.svg")
    svg_path = argv[1] if len(argv) > 1 else default_out

    png_path = write_chart(chart, svg_path)
    print(f"SVG written to {svg_path}")
    print(f"PNG written to {png_path}")
    print(f"  {chart.host.width}x{chart.host.height} px, {chart.edge_count} axes, "
          f"{len(chart.data)} series, {len(chart.labels)} labels")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("SPIDERCHART_LOG", "WARNING").upper())
    sys.exit(main(sys.argv[1:]))
