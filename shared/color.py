"""ARGB color packing and conversion.

Colors are plain ints in the form 0xAARRGGBB. Nothing here validates range;
callers may pass any int and get whatever the low 32 bits say.
"""

# Named colors (same values as the Android Color constants)
BLACK = 0xFF000000
DKGRAY = 0xFF444444
GRAY = 0xFF888888
LTGRAY = 0xFFCCCCCC
WHITE = 0xFFFFFFFF
TRANSPARENT = 0x00000000


class ColorParseError(ValueError):
    """Raised when a color string cannot be parsed."""


def argb(a: int, r: int, g: int, b: int) -> int:
    """Pack alpha, red, green, blue (0-255 each) into 0xAARRGGBB."""
    return ((a & 0xFF) << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)

def rgb(r: int, g: int, b: int) -> int:
    """Opaque color from red, green, blue."""
    return argb(0xFF, r, g, b)

def alpha(c: int) -> int: return (c >> 24) & 0xFF
def red(c: int) -> int: return (c >> 16) & 0xFF
def green(c: int) -> int: return (c >> 8) & 0xFF
def blue(c: int) -> int: return c & 0xFF

def to_css(c: int) -> str:
    """SVG/CSS paint string. Opaque colors as #rrggbb, others as rgba()."""
    if alpha(c) == 0xFF:
        return f"#{red(c):02x}{green(c):02x}{blue(c):02x}"
    a = f"{alpha(c)/255:.3f}".rstrip('0').rstrip('.')
    return f"rgba({red(c)},{green(c)},{blue(c)},{a})"

def to_rgba(c: int) -> tuple[float, float, float, float]:
    """Matplotlib RGBA tuple with components in 0..1."""
    return (red(c)/255, green(c)/255, blue(c)/255, alpha(c)/255)

def parse_color(value) -> int:
    """Color from an int, '#RRGGBB' (opaque) or '#AARRGGBB' string."""
    if isinstance(value, bool):
        raise ColorParseError(f"Not a color: {value!r}")
    if isinstance(value, int):
        return value & 0xFFFFFFFF
    if isinstance(value, str):
        s = value.strip()
        if s.startswith("#"):
            s = s[1:]
        elif s.lower().startswith("0x"):
            s = s[2:]
        try:
            v = int(s, 16)
        except ValueError:
            raise ColorParseError(f"Not a hex color: {value!r}") from None
        if len(s) == 6:
            return 0xFF000000 | v
        if len(s) == 8:
            return v
    raise ColorParseError(f"Not a color: {value!r}")
