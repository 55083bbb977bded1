"""
ColorScheme Engine - Static Color Wheel Data

Fixed lookup tables shared by every scheme: the 24-sample color wheel used for
hue interpolation, the named tonal variation presets, and the registered
scheme kinds. Tables are built once at import time and exposed read-only.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, NamedTuple, Tuple


class HueSample(NamedTuple):
    """Approximate color of one wheel position."""
    red: int    # 0-255
    green: int  # 0-255
    blue: int   # 0-255
    value: int  # 0-100


class SchemeKind(str, Enum):
    """Harmonic relationships between the hues of a scheme."""
    MONO = "mono"
    CONTRAST = "contrast"
    TRIADE = "triade"
    TETRADE = "tetrade"
    ANALOGIC = "analogic"


# Degrees between two neighbouring wheel samples
HUE_STEP = 15

COLOR_WHEEL: Mapping[int, HueSample] = MappingProxyType({
    0: HueSample(255, 0, 0, 100),
    15: HueSample(255, 51, 0, 100),
    30: HueSample(255, 102, 0, 100),
    45: HueSample(255, 128, 0, 100),
    60: HueSample(255, 153, 0, 100),
    75: HueSample(255, 178, 0, 100),
    90: HueSample(255, 204, 0, 100),
    105: HueSample(255, 229, 0, 100),
    120: HueSample(255, 255, 0, 100),
    135: HueSample(204, 255, 0, 100),
    150: HueSample(153, 255, 0, 100),
    165: HueSample(51, 255, 0, 100),
    180: HueSample(0, 204, 0, 80),
    195: HueSample(0, 178, 102, 70),
    210: HueSample(0, 153, 153, 60),
    225: HueSample(0, 102, 178, 70),
    240: HueSample(0, 51, 204, 80),
    255: HueSample(25, 25, 178, 70),
    270: HueSample(51, 0, 153, 60),
    285: HueSample(64, 0, 153, 60),
    300: HueSample(102, 0, 153, 60),
    315: HueSample(153, 0, 153, 60),
    330: HueSample(204, 0, 153, 80),
    345: HueSample(229, 0, 102, 90),
})

# Four (saturation, value) pairs per preset. Negative entries scale the
# channel's own base saturation/value instead of setting an absolute level.
PRESETS: Mapping[str, Tuple[float, ...]] = MappingProxyType({
    "default": (-1, -1, 1, -0.7, 0.25, 1, 0.5, 1),
    "pastel": (0.5, -0.9, 0.5, 0.5, 0.1, 0.9, 0.75, 0.75),
    "soft": (0.3, -0.8, 0.3, 0.5, 0.1, 0.9, 0.5, 0.75),
    "light": (0.25, 1, 0.5, 0.75, 0.1, 1, 0.5, 1),
    "hard": (1, -1, 1, -0.6, 0.1, 1, 0.6, 1),
    "pale": (0.1, -0.85, 0.1, 0.5, 0.1, 1, 0.1, 0.75),
})

SCHEME_ALIASES: Mapping[str, SchemeKind] = MappingProxyType({
    "monochromatic": SchemeKind.MONO,
})

# Number of tonal variants rendered per hue
VARIANT_COUNT = 4


def scheme_names() -> Tuple[str, ...]:
    """All accepted scheme names, aliases included."""
    return tuple(kind.value for kind in SchemeKind) + tuple(SCHEME_ALIASES)


def resolve_scheme_kind(name: str) -> SchemeKind:
    """
    Normalize a scheme name to its kind.

    Args:
        name: Registered scheme name or alias

    Returns:
        The matching SchemeKind

    Raises:
        KeyError: If the name is not registered
    """
    if name in SCHEME_ALIASES:
        return SCHEME_ALIASES[name]
    try:
        return SchemeKind(name)
    except ValueError:
        raise KeyError(name) from None


def neighbour_samples(hue: float) -> Tuple[HueSample, HueSample]:
    """Wheel samples bracketing a normalized hue, wrapping 345 -> 0."""
    lower = int(hue // HUE_STEP) * HUE_STEP % 360
    upper = (lower + HUE_STEP) % 360
    return COLOR_WHEEL[lower], COLOR_WHEEL[upper]


def preset_table() -> Dict[str, Tuple[float, ...]]:
    """Mutable copy of the built-in presets for per-instance registration."""
    return dict(PRESETS)
