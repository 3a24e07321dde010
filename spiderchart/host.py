"""Host surface interface, density conversions, and measure specs."""
from typing import Literal, NamedTuple, Protocol


class ChartHost(Protocol):
    """What the chart needs from whatever owns the drawing surface."""
    width: int
    height: int
    density: float
    scaled_density: float

    def request_layout(self) -> None: ...
    def invalidate(self) -> None: ...


# ============================================================
# Density conversions
# ============================================================
def dp_to_px(dp: float, density: float) -> float:
    return dp * density

def px_to_dp(px: float, density: float) -> float:
    return px / density

def sp_to_px(sp: float, scaled_density: float) -> float:
    return sp * scaled_density

def px_to_sp(px: float, scaled_density: float) -> float:
    return px / scaled_density


class StaticHost:
    """Fixed-size, in-process surface used for file export and tests.

    Layout and redraw requests are only counted; whoever drives the chart
    decides when to measure and draw again.
    """

    def __init__(self, width: int, height: int, density: float = 1.0,
                 scaled_density: float | None = None):
        self.width = width
        self.height = height
        self.density = density
        self.scaled_density = density if scaled_density is None else scaled_density
        self.layout_requests = 0
        self.invalidations = 0

    def resize(self, width: int, height: int) -> tuple[int, int]:
        """Set a new surface size and return the old one."""
        old = (self.width, self.height)
        self.width, self.height = width, height
        return old

    def request_layout(self) -> None:
        self.layout_requests += 1

    def invalidate(self) -> None:
        self.invalidations += 1


# ============================================================
# Measure specs
# ============================================================
class MeasureSpec(NamedTuple):
    """Size constraint from the parent, as in Android's View.MeasureSpec."""
    mode: Literal["exactly", "at_most", "unspecified"]
    size: int

    @classmethod
    def exactly(cls, size: int) -> "MeasureSpec": return cls("exactly", size)
    @classmethod
    def at_most(cls, size: int) -> "MeasureSpec": return cls("at_most", size)
    @classmethod
    def unspecified(cls, size: int = 0) -> "MeasureSpec": return cls("unspecified", size)


def resolve_size(desired: float, spec: MeasureSpec) -> int:
    """Reconcile a desired size with a constraint. Desired is truncated to int."""
    want = int(desired)
    if spec.mode == "exactly":
        return spec.size
    if spec.mode == "at_most":
        return min(want, spec.size)
    return want
