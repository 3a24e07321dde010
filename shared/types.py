"""Shared type definitions for the spider chart renderer."""
from typing import Literal

Point = tuple[float, float]

Align = Literal["left", "center", "right"]
PaintStyle = Literal["fill", "stroke"]
