"""
ColorScheme Engine - Channel

A Channel holds one hue of a scheme plus its four tonal variants. The base
color for the hue is interpolated from the two nearest color wheel samples;
each variant is then rendered by mixing that base with white/black according
to its saturation and value.
"""

from typing import List, Sequence

from .conversions import check_finite, quantize_web_safe, rgb_to_hex, round_half_up
from .wheel import HUE_STEP, PRESETS, VARIANT_COUNT, neighbour_samples


def _blend(a: float, b: float, k: float) -> int:
    return a + round_half_up((b - a) * k)


def _clamp_unit(x: float) -> float:
    return min(1.0, max(0.0, x))


class Channel:
    """One hue of a scheme and its four (saturation, value) variants."""

    def __init__(self, hue: float):
        check_finite("Channel", hue)
        self.hue = 0.0
        self.base_red = 0
        self.base_green = 0
        self.base_blue = 0
        self.base_value = 0.0
        self.base_saturation = 0.0
        self._saturation: List[float] = [0.0] * VARIANT_COUNT
        self._value: List[float] = [0.0] * VARIANT_COUNT

        self.set_hue(hue)
        self.set_variant_preset(PRESETS["default"])

    def __repr__(self) -> str:
        return f"Channel(hue={self.hue!r})"

    def get_hue(self) -> float:
        return self.hue

    def set_hue(self, h: float) -> None:
        """
        Move the channel to a new hue and recompute its base color.

        Args:
            h: Hue in degrees; any value, normalized into [0, 360)
        """
        check_finite("set_hue", h)

        hue = h % 360
        if hue >= 360:
            # Tiny negative inputs round up to 360.0
            hue = 0.0
        self.hue = hue

        k = (hue % HUE_STEP) / HUE_STEP
        lower, upper = neighbour_samples(hue)

        self.base_red = _blend(lower.red, upper.red, k)
        self.base_green = _blend(lower.green, upper.green, k)
        self.base_blue = _blend(lower.blue, upper.blue, k)
        self.base_value = _blend(lower.value, upper.value, k) / 100
        self.base_saturation = _blend(100, 100, k) / 100

    def rotate(self, angle: float) -> None:
        """Shift the hue by a relative angle in degrees."""
        self.set_hue((self.hue + angle) % 360)

    def get_saturation(self, variation: int) -> float:
        x = self._saturation[variation]
        s = -x * self.base_saturation if x < 0 else x
        return _clamp_unit(s)

    def get_value(self, variation: int) -> float:
        x = self._value[variation]
        v = -x * self.base_value if x < 0 else x
        return _clamp_unit(v)

    def set_variant(self, variation: int, s: float, v: float) -> float:
        """Overwrite a single tonal slot."""
        self._saturation[variation] = s
        self._value[variation] = v
        return v

    def set_variant_preset(self, preset: Sequence[float]) -> None:
        """Apply the four (saturation, value) pairs of a preset."""
        for i in range(VARIANT_COUNT):
            self.set_variant(i, preset[2 * i], preset[2 * i + 1])

    def to_hex(self, web_safe: bool, variation: int) -> str:
        """
        Render a tonal variant as a hex string.

        Args:
            web_safe: Snap every channel to a multiple of 51
            variation: Tonal slot 0-3, or a negative number for the pure
                base color of the hue

        Returns:
            Six lowercase hex digits, e.g. "ff9900"
        """
        base = (self.base_red, self.base_green, self.base_blue)
        top = max(base)

        if variation < 0:
            v = self.base_value * 255
            s = self.base_saturation
        else:
            v = self.get_value(variation) * 255
            s = self.get_saturation(variation)
        k = v / top if top > 0 else 0

        rgb = [
            max(0, min(255, round_half_up(v - (v - c * k) * s)))
            for c in base
        ]

        if web_safe:
            rgb = [quantize_web_safe(c) for c in rgb]

        return rgb_to_hex(*rgb)
