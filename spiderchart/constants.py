"""Named default style constants for the spider chart.

Sizes are in density-independent units unless noted: dp for lengths,
sp for text. The host converts them to pixels.
"""
from shared.color import DKGRAY, LTGRAY, TRANSPARENT

# Labels
DEFAULT_LABEL_SIZE = 12.0            # sp
DEFAULT_LABEL_COLOR = DKGRAY
DEFAULT_LABEL_MARGIN_SIZE = 8.0      # dp, gap between web edge and label text

# Web (rings and spokes)
DEFAULT_WEB_COLOR = LTGRAY
DEFAULT_WEB_BACKGROUND_COLOR = TRANSPARENT
DEFAULT_WEB_STROKE_WIDTH = 0.5       # dp

# Outer edge polygon
DEFAULT_WEB_EDGE_COLOR = DKGRAY
DEFAULT_WEB_EDGE_STROKE_WIDTH = 0.8  # dp

# Axis 0 points straight up with the y axis pointing down
DEFAULT_ROTATION_ANGLE = 90.0        # degrees

DEFAULT_DRAW_WEB = True
DEFAULT_DRAW_LABELS = True

# Series value range (percent of radius)
VALUE_MIN = 0.0
VALUE_MAX = 100.0

# Label alignment treats anchors this close to the center line as on it (px)
CENTER_LINE_TOL = 1e-6

# Font family used for text measurement and SVG output
LABEL_FONT_FAMILY = "DejaVu Sans"
