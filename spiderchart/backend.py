"""Drawing backend capability interface and a recording implementation."""
from typing import NamedTuple, Protocol, Sequence

from shared.types import Point, Align, PaintStyle


class Paint(NamedTuple):
    """How to draw one primitive. Lengths in pixels, color as 0xAARRGGBB."""
    color: int
    style: PaintStyle = "fill"
    stroke_width: float = 0.0
    text_size: float = 0.0
    align: Align = "left"


class DrawBackend(Protocol):
    """Primitives the chart renderer issues. Coordinates are pixels, y down."""

    def draw_lines(self, pts: Sequence[float], paint: Paint) -> None:
        """Stroke a batch of segments given as flat x0, y0, x1, y1, ... floats."""
    def draw_path(self, path: Sequence[Point], paint: Paint) -> None:
        """Fill or stroke the closed polygon through *path*."""
    def draw_text(self, text: str, x: float, y: float, paint: Paint) -> None:
        """Draw text with its baseline at y, aligned on x per paint.align."""
    def measure_text_width(self, text: str, paint: Paint) -> float: ...
    def measure_text_height(self, text: str, paint: Paint) -> float: ...


class LineSeg(NamedTuple):
    start: Point; end: Point


def buffer_segments(buf) -> list[LineSeg]:
    """Split a flat x0, y0, x1, y1 segment buffer into LineSeg tuples.

    Used to inspect recorded draw_lines calls.
    """
    return [LineSeg((float(buf[i]), float(buf[i+1])), (float(buf[i+2]), float(buf[i+3])))
            for i in range(0, len(buf) - 3, 4)]


class DrawCall(NamedTuple):
    op: str          # "lines" | "path" | "text"
    args: tuple
    paint: Paint

    def segments(self) -> list[LineSeg]:
        """Segments of a "lines" call."""
        if self.op != "lines":
            raise ValueError(f"{self.op!r} call has no segments")
        return buffer_segments(self.args[0])


class RecordingBackend:
    """Records every draw call instead of drawing.

    Text metrics are synthetic: each character advances char_width * text_size
    and every non-empty string is text_size tall.
    """

    def __init__(self, char_width: float = 0.6):
        self.char_width = char_width
        self.calls: list[DrawCall] = []

    def draw_lines(self, pts, paint):
        self.calls.append(DrawCall("lines", (tuple(float(v) for v in pts),), paint))

    def draw_path(self, path, paint):
        self.calls.append(DrawCall("path", (tuple((float(x), float(y)) for x, y in path),), paint))

    def draw_text(self, text, x, y, paint):
        self.calls.append(DrawCall("text", (text, float(x), float(y)), paint))

    def measure_text_width(self, text, paint):
        return len(text) * self.char_width * paint.text_size

    def measure_text_height(self, text, paint):
        return paint.text_size if text else 0.0

    def ops(self) -> list[str]:
        return [c.op for c in self.calls]

    def clear(self) -> None:
        self.calls.clear()
