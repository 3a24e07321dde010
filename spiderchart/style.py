"""Per-chart style configuration (pixel units)."""
from dataclasses import dataclass

from spiderchart.constants import (
    DEFAULT_LABEL_SIZE, DEFAULT_LABEL_COLOR, DEFAULT_LABEL_MARGIN_SIZE,
    DEFAULT_WEB_COLOR, DEFAULT_WEB_BACKGROUND_COLOR, DEFAULT_WEB_STROKE_WIDTH,
    DEFAULT_WEB_EDGE_COLOR, DEFAULT_WEB_EDGE_STROKE_WIDTH,
    DEFAULT_ROTATION_ANGLE, DEFAULT_DRAW_WEB, DEFAULT_DRAW_LABELS,
)
from spiderchart.host import ChartHost, dp_to_px, sp_to_px


@dataclass
class ChartStyle:
    """Everything that controls how a chart looks. Lengths are device pixels."""
    label_size: float
    label_color: int
    label_margin: float
    web_color: int
    web_background_color: int
    web_stroke_width: float
    web_edge_color: int
    web_edge_stroke_width: float
    rotation_angle: float = DEFAULT_ROTATION_ANGLE
    draw_web: bool = DEFAULT_DRAW_WEB
    draw_labels: bool = DEFAULT_DRAW_LABELS


def default_style(host: ChartHost) -> ChartStyle:
    """Defaults from constants.py, converted to pixels for *host*."""
    return ChartStyle(
        label_size=sp_to_px(DEFAULT_LABEL_SIZE, host.scaled_density),
        label_color=DEFAULT_LABEL_COLOR,
        label_margin=dp_to_px(DEFAULT_LABEL_MARGIN_SIZE, host.density),
        web_color=DEFAULT_WEB_COLOR,
        web_background_color=DEFAULT_WEB_BACKGROUND_COLOR,
        web_stroke_width=dp_to_px(DEFAULT_WEB_STROKE_WIDTH, host.density),
        web_edge_color=DEFAULT_WEB_EDGE_COLOR,
        web_edge_stroke_width=dp_to_px(DEFAULT_WEB_EDGE_STROKE_WIDTH, host.density),
    )
