"""
ColorScheme Engine - Color Space Conversions

Pure numeric helpers used when deriving a scheme from an arbitrary hex color:
RGB -> RYB (a subtractive-mixing approximation), RGB -> HSV in two flavours,
and hex parsing/encoding.
"""

import colorsys
import math
import numbers
import re
from typing import Sequence, Tuple, Union

from .errors import InvalidFormatError, InvalidRangeError, MissingArgumentError

RgbArgs = Union[float, Sequence[float]]

HEX_RE = re.compile(r"[0-9a-fA-F]{6}")

# Step between two web-safe channel levels (0, 51, ..., 255)
WEB_SAFE_STEP = 51


def round_half_up(x: float) -> int:
    """Round to the nearest integer with halves rounded up (0.5 -> 1, -0.5 -> 0)."""
    return math.floor(x + 0.5)


def _normalize_rgb_args(args: Tuple[RgbArgs, ...]) -> Tuple[float, float, float]:
    """Accept either three channel numbers or a single 3-element sequence."""
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        args = tuple(args[0])
    if len(args) != 3:
        raise ValueError(f"Expected 3 color channels, got {len(args)}")
    return args[0], args[1], args[2]


def rgb2ryb(*args: RgbArgs) -> Tuple[int, int, int]:
    """
    Convert an RGB triple to an approximate RYB triple.

    Args:
        *args: red, green, blue in 0-255, or one (r, g, b) sequence

    Returns:
        Tuple of (red, yellow, blue) floored to integers
    """
    red, green, blue = _normalize_rgb_args(args)

    # Remove the shared white component
    white = min(red, green, blue)
    red -= white
    green -= white
    blue -= white

    max_green = max(red, green, blue)

    # Yellow is what red and green have in common
    yellow = min(red, green)
    red -= yellow
    green -= yellow

    # Green left over is split between yellow and blue
    if blue > 0 and green > 0:
        blue /= 2
        green /= 2

    yellow += green
    blue += green

    # Rescale so the strongest channel keeps its original magnitude
    max_yellow = max(red, yellow, blue)
    if max_yellow > 0:
        scale = max_green / max_yellow
        red *= scale
        yellow *= scale
        blue *= scale

    red += white
    yellow += white
    blue += white

    return math.floor(red), math.floor(yellow), math.floor(blue)


def rgb2hsv(*args: RgbArgs) -> Tuple[float, float, float]:
    """
    Convert RGB (0-255) to HSV with hue in degrees.

    Returns:
        Tuple of (H, S, V) where H in [0, 360), S and V in [0, 1]
    """
    h, s, v = rgb_to_hsv(*args)
    return (h * 360) % 360, s, v


def rgb_to_hsv(*args: RgbArgs) -> Tuple[float, float, float]:
    """
    Convert RGB (0-255) to HSV with hue as a fraction of a turn.

    Returns:
        Tuple of (H, S, V) where H in [0, 1), S and V in [0, 1]
    """
    r, g, b = (c / 255 for c in _normalize_rgb_args(args))
    return colorsys.rgb_to_hsv(r, g, b)


def check_finite(operation: str, value) -> float:
    """
    Reject values that cannot be used as an angle or factor.

    Raises:
        MissingArgumentError: If value is None
        InvalidRangeError: If value is not a finite real number
    """
    if value is None:
        raise MissingArgumentError(operation)
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
        raise InvalidRangeError(operation, value, "a finite number")
    return value


def parse_hex(hex_color: str) -> Tuple[int, int, int]:
    """
    Parse a bare RRGGBB string into channel values.

    Args:
        hex_color: Exactly 6 hexadecimal digits, any case, no '#'

    Returns:
        RGB tuple (r, g, b) with values 0-255

    Raises:
        MissingArgumentError: If hex_color is None
        InvalidFormatError: If hex_color is not 6 hex digits
    """
    if hex_color is None:
        raise MissingArgumentError("from_hex")
    if not isinstance(hex_color, str) or not HEX_RE.fullmatch(hex_color):
        raise InvalidFormatError(hex_color)
    return tuple(int(hex_color[i:i + 2], 16) for i in (0, 2, 4))


def quantize_web_safe(channel: int) -> int:
    """Snap a channel value to the nearest web-safe level."""
    return round_half_up(channel / WEB_SAFE_STEP) * WEB_SAFE_STEP


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Encode channels as 6 lowercase hex digits without a '#' prefix."""
    return f"{r:02x}{g:02x}{b:02x}"
