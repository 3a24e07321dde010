"""Chart description files (YAML, or JSON since YAML is a superset).

    width: 480
    height: 480
    labels: [ART0, ART1, ART2]
    series:
      - values: [45, 82, 76]
        color: "#7DC1E6DB"
    style:
      label_size: 13
      rotation_angle: 90
"""
import logging
from pathlib import Path
from typing import Any, NamedTuple

import yaml

from shared.color import ColorParseError, parse_color
from shared.svg import W, H
from spiderchart.chart import SpiderChart
from spiderchart.data import SpiderData
from spiderchart.host import StaticHost

logger = logging.getLogger(__name__)

# Style keys that hold colors; everything else in STYLE_KEYS is a number or flag
_COLOR_KEYS = {"label_color", "web_color", "web_background_color", "web_edge_color"}
STYLE_KEYS = _COLOR_KEYS | {
    "label_size", "label_margin", "web_stroke_width", "web_edge_stroke_width",
    "rotation_angle", "draw_web", "draw_labels",
}


class ChartConfigError(ValueError):
    """Raised for unreadable or malformed chart description files."""


class ChartConfig(NamedTuple):
    width: int
    height: int
    labels: list[str]
    series: list[SpiderData]
    style: dict[str, Any]


def parse_chart_config(raw: Any, source: str = "<config>") -> ChartConfig:
    """Validate an already-loaded mapping into a ChartConfig."""
    if not isinstance(raw, dict):
        raise ChartConfigError(f"{source}: expected a mapping at top level")
    if "series" not in raw or not isinstance(raw["series"], list):
        raise ChartConfigError(f"{source}: 'series' must be a list")
    try:
        series = [SpiderData(s["values"], parse_color(s.get("color", 0)))
                  for s in raw["series"]]
    except ColorParseError as e:
        raise ChartConfigError(f"{source}: {e}") from e
    except (KeyError, TypeError, AttributeError, ValueError) as e:
        raise ChartConfigError(f"{source}: each series needs a numeric 'values' list ({e})") from e

    style = raw.get("style") or {}
    if not isinstance(style, dict):
        raise ChartConfigError(f"{source}: 'style' must be a mapping")
    style = dict(style)
    unknown = set(style) - STYLE_KEYS
    if unknown:
        raise ChartConfigError(f"{source}: unknown style keys {sorted(unknown)}")
    try:
        for k in _COLOR_KEYS & set(style):
            style[k] = parse_color(style[k])
    except ColorParseError as e:
        raise ChartConfigError(f"{source}: {e}") from e

    labels = raw.get("labels") or []
    if not isinstance(labels, list):
        raise ChartConfigError(f"{source}: 'labels' must be a list")
    # None stays None so set_labels rejects it
    labels = [s if s is None else str(s) for s in labels]
    try:
        width, height = int(raw.get("width", W)), int(raw.get("height", H))
    except (TypeError, ValueError) as e:
        raise ChartConfigError(f"{source}: width and height must be integers ({e})") from e
    return ChartConfig(width, height, labels, series, style)


def load_chart_config(path) -> ChartConfig:
    path = Path(path)
    if not path.exists():
        raise ChartConfigError(f"Missing chart description: {path}")
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ChartConfigError(f"{path}: {e}") from e
    logger.debug("loaded chart description %s", path)
    return parse_chart_config(raw, str(path))


def build_chart(cfg: ChartConfig, host=None) -> SpiderChart:
    """SpiderChart configured from *cfg* on *host* (a StaticHost of cfg size by default)."""
    host = host if host is not None else StaticHost(cfg.width, cfg.height)
    chart = SpiderChart(host)
    for key, value in cfg.style.items():
        setattr(chart, key, value)
    chart.set_labels(cfg.labels)
    chart.set_data(cfg.series)
    chart.refresh()
    return chart
