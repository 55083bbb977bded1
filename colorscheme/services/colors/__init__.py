"""
ColorScheme Engine

Deterministic color scheme generation: hue interpolation over a fixed color
wheel, scheme-specific hue rotations and tonal variants rendered as hex.
"""

from .channel import Channel
from .conversions import rgb2hsv, rgb2ryb, rgb_to_hsv
from .errors import (
    InvalidFormatError, InvalidRangeError, MissingArgumentError,
    SchemeConfigError, UnknownNameError
)
from .scheme import Scheme
from .wheel import COLOR_WHEEL, PRESETS, HueSample, SchemeKind, scheme_names

__all__ = [
    "Channel",
    "Scheme",
    "SchemeKind",
    "HueSample",
    "COLOR_WHEEL",
    "PRESETS",
    "scheme_names",
    "rgb2ryb",
    "rgb2hsv",
    "rgb_to_hsv",
    "SchemeConfigError",
    "MissingArgumentError",
    "InvalidFormatError",
    "InvalidRangeError",
    "UnknownNameError",
]
