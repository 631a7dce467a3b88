"""Color string parsing.

Normalizes any supported color string to a ColorSample with unit-interval
sRGB channels plus alpha. Hex and named colors are handled by matplotlib;
CSS functional notation (rgb/rgba/hsl/hsla) is parsed here since
matplotlib does not accept it.
"""

import colorsys
import logging
import math
import re
from typing import NamedTuple, Optional, Tuple

import matplotlib.colors as mcolors

logger = logging.getLogger(__name__)


class ColorSample(NamedTuple):
    """Normalized color: every channel in [0, 1] (NaN when unparseable)."""

    r: float
    g: float
    b: float
    a: float


NAN_SAMPLE = ColorSample(math.nan, math.nan, math.nan, math.nan)

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?%?"
_FUNCTIONAL_RE = re.compile(
    rf"^(rgba?|hsla?)\(\s*({_NUMBER})(?:deg)?\s*[,\s]\s*({_NUMBER})\s*[,\s]\s*({_NUMBER})"
    rf"(?:\s*[,/]\s*({_NUMBER}))?\s*\)$",
    re.IGNORECASE,
)
_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return min(max(value, low), high)


def _channel(token: str) -> float:
    """rgb() channel token -> 8-bit value in [0, 255]."""
    if token.endswith("%"):
        return _clamp(float(token[:-1]) * 255 / 100, 0.0, 255.0)
    return _clamp(float(token), 0.0, 255.0)


def _fraction(token: str) -> float:
    """Percentage or plain number -> [0, 1]."""
    if token.endswith("%"):
        return _clamp(float(token[:-1]) / 100)
    return _clamp(float(token))


def _parse_functional(text: str) -> Optional[Tuple[float, float, float, float]]:
    """Parse rgb()/rgba()/hsl()/hsla() into 8-bit channels plus opacity."""
    match = _FUNCTIONAL_RE.match(text)
    if match is None:
        return None

    kind, first, second, third, alpha = match.groups()
    opacity = _fraction(alpha) if alpha is not None else 1.0

    if kind.lower().startswith("rgb"):
        return _channel(first), _channel(second), _channel(third), opacity

    # hsl: hue in degrees, saturation/lightness as percentages
    if first.endswith("%"):
        return None
    hue = (float(first) % 360) / 360
    saturation = _fraction(second if second.endswith("%") else second + "%")
    lightness = _fraction(third if third.endswith("%") else third + "%")
    r, g, b = colorsys.hls_to_rgb(hue, lightness, saturation)
    return r * 255, g * 255, b * 255, opacity


def parse_color_rgb255(color: str) -> Tuple[float, float, float, float]:
    """Parse a color string into 8-bit R/G/B plus opacity.

    Only CSS forms are accepted: hex, CSS named colors, 'transparent' and
    functional notation. Matplotlib shorthands ('r', 'C0', '0.5', 'tab:blue')
    are rejected. A fully transparent color has undefined (NaN) channels.

    Raises:
        ValueError: If the string is not a recognized color
    """
    text = str(color).strip()

    functional = _parse_functional(text)
    if functional is not None:
        r, g, b, opacity = functional
    elif text.lower() == "transparent":
        r, g, b, opacity = math.nan, math.nan, math.nan, 0.0
    elif _HEX_RE.match(text) or text.lower() in mcolors.CSS4_COLORS:
        r, g, b, opacity = mcolors.to_rgba(text.lower())
        r, g, b = r * 255, g * 255, b * 255
    else:
        raise ValueError(f"Unrecognized color string: {color!r}")

    if opacity <= 0:
        return math.nan, math.nan, math.nan, float(opacity)
    return r, g, b, float(opacity)


def parse_color_normalized_rgb(color: str, strict: bool = False) -> ColorSample:
    """Parse a color string into normalized sRGB values (all between 0 and 1).

    Accepts hex (#rgb, #rgba, #rrggbb, #rrggbbaa), named colors,
    'transparent', rgb()/rgba() and hsl()/hsla().

    Args:
        color: Color string
        strict: Raise instead of returning NaN channels for bad input

    Returns:
        ColorSample(r, g, b, a). Unparseable input yields NaN for every
        channel unless strict is set.

    Raises:
        ValueError: If strict and the string cannot be parsed

    Examples:
        >>> parse_color_normalized_rgb("#ff0000")
        ColorSample(r=1.0, g=0.0, b=0.0, a=1.0)
    """
    try:
        r, g, b, opacity = parse_color_rgb255(color)
    except ValueError:
        if strict:
            raise ValueError(f"Invalid color string: {color!r}")
        logger.warning(f"Could not parse color {color!r}, returning NaN channels")
        return NAN_SAMPLE

    return ColorSample(r / 255.0, g / 255.0, b / 255.0, opacity)
