"""Data series model and input validation for the spider chart."""
import numpy as np

from spiderchart.constants import VALUE_MIN, VALUE_MAX


class InvalidArgument(ValueError):
    """Raised when chart data or labels are rejected."""


def clamp_values(values) -> np.ndarray:
    """Copy *values* into a read-only float array clamped to [0, 100]."""
    arr = np.clip(np.array(values, dtype=float).reshape(-1), VALUE_MIN, VALUE_MAX)
    arr.setflags(write=False)
    return arr


class SpiderData:
    """One series: a value per axis (0..100) and a 0xAARRGGBB fill color.

    Out-of-range values are clamped silently. The color is kept as given.
    """
    __slots__ = ("_values", "color")

    def __init__(self, values, color: int):
        self._values = clamp_values(values)
        self.color = color

    @property
    def values(self) -> np.ndarray:
        return self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"SpiderData(values={self._values.tolist()!r}, color=0x{self.color & 0xFFFFFFFF:08X})"


def check_data(data) -> int:
    """Validate a series list and return its shared value count (0 if empty)."""
    if data is None:
        raise InvalidArgument("Series list must not be None.")
    size = 0
    for i, entry in enumerate(data):
        if entry is None:
            raise InvalidArgument(f"Series list must not contain None (index {i}).")
        if not isinstance(entry, SpiderData):
            raise InvalidArgument(
                f"Series list entries must be SpiderData, got {type(entry).__name__} (index {i}).")
        if i == 0:
            size = len(entry.values)
        elif len(entry.values) != size:
            raise InvalidArgument(
                f"All series must have the same number of values: "
                f"index 0 has {size}, index {i} has {len(entry.values)}.")
    return size


def check_labels(labels) -> None:
    """Validate a label list. Labels are otherwise free-form."""
    if labels is None:
        raise InvalidArgument("Label list must not be None.")
    for i, label in enumerate(labels):
        if label is None:
            raise InvalidArgument(f"Label list must not contain None (index {i}).")
