"""Spider (radar) chart layout and rendering."""

from .data import SpiderData, InvalidArgument
from .style import ChartStyle, default_style
from .host import ChartHost, StaticHost, MeasureSpec, resolve_size
from .backend import Paint, DrawBackend, DrawCall, LineSeg, RecordingBackend
from .layout import LabelExtents, LabelPlacement, label_extents, web_radius, desired_size, place_label
from .chart import SpiderChart
