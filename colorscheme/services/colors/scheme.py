"""
ColorScheme Engine - Scheme

The Scheme orchestrates four Channels. Slot 0 carries the base hue; slots 1-3
are rotated around the wheel according to the selected scheme kind and
rendered as four tonal variants each.

Example:
    >>> Scheme().from_hue(60).scheme("contrast").variation("light").colors()
"""

from typing import Dict, List, Optional, Sequence

from .channel import Channel
from .conversions import check_finite, parse_hex, rgb2hsv, rgb2ryb, rgb_to_hsv
from .errors import InvalidRangeError, MissingArgumentError, UnknownNameError
from .wheel import (
    PRESETS, VARIANT_COUNT, SchemeKind, preset_table, resolve_scheme_kind,
    scheme_names
)

DEFAULT_HUE = 60
DEFAULT_SCHEME = "mono"
DEFAULT_DISTANCE = 0.5
DEFAULT_VARIATION = "default"
CHANNEL_COUNT = 4


class Scheme:
    """
    Fluent color scheme builder.

    Every setter validates its argument before touching any state and
    returns the scheme itself, so calls can be chained.
    """

    # Shared with the module-level helpers so callers can reach them from
    # the class, e.g. Scheme.rgb2ryb(51, 102, 153)
    rgb2ryb = staticmethod(rgb2ryb)
    rgb2hsv = staticmethod(rgb2hsv)
    rgb_to_hsv = staticmethod(rgb_to_hsv)

    def __init__(self):
        self._channels: List[Channel] = [Channel(DEFAULT_HUE) for _ in range(CHANNEL_COUNT)]
        self._presets: Dict[str, Sequence[float]] = preset_table()
        self._scheme = DEFAULT_SCHEME
        self._distance = DEFAULT_DISTANCE
        self._web_safe = False
        self._add_complement = False

    def __repr__(self) -> str:
        return (
            f"Scheme(hue={self._channels[0].get_hue()!r}, scheme={self._scheme!r}, "
            f"distance={self._distance!r}, web_safe={self._web_safe!r}, "
            f"add_complement={self._add_complement!r})"
        )

    # ------------------------------------------------------------------
    # Color production
    # ------------------------------------------------------------------

    def colors(self) -> List[str]:
        """
        Generate the hex colors of the configured scheme.

        Returns:
            Flat list of 6-digit lowercase hex strings, four per used hue,
            ordered hue-major then variant-minor
        """
        try:
            kind = resolve_scheme_kind(self._scheme)
        except KeyError:
            raise UnknownNameError("color scheme", self._scheme) from None

        used_colors = self._arrange(kind)

        output = []
        for channel in self._channels[:used_colors]:
            for variation in range(VARIANT_COUNT):
                output.append(channel.to_hex(self._web_safe, variation))
        return output

    def colorset(self) -> List[List[str]]:
        """Colors grouped into one list of four variants per hue."""
        flat = self.colors()
        return [flat[i:i + VARIANT_COUNT] for i in range(0, len(flat), VARIANT_COUNT)]

    def _arrange(self, kind: SchemeKind) -> int:
        """Rotate slots 1-3 around the base hue; returns how many slots are used."""
        h = self._channels[0].get_hue()

        if kind is SchemeKind.MONO:
            return 1

        if kind is SchemeKind.CONTRAST:
            self._place(1, h, 180)
            return 2

        if kind is SchemeKind.TRIADE:
            dif = 60 * self._distance
            self._place(1, h, 180 - dif)
            self._place(2, h, 180 + dif)
            return 3

        if kind is SchemeKind.TETRADE:
            dif = 90 * self._distance
            self._place(1, h, 180)
            self._place(2, h, 180 + dif)
            self._place(3, h, dif)
            return 4

        if kind is SchemeKind.ANALOGIC:
            dif = 60 * self._distance
            self._place(1, h, dif)
            self._place(2, h, 360 - dif)
            self._place(3, h, 180)
            return 4 if self._add_complement else 3

    def _place(self, slot: int, hue: float, angle: float) -> None:
        channel = self._channels[slot]
        channel.set_hue(hue)
        channel.rotate(angle)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def channel(self, slot: int) -> Channel:
        """Channel owned by the given slot (0 is the base hue)."""
        return self._channels[slot]

    def from_hue(self, h: float) -> "Scheme":
        check_finite("from_hue", h)
        self._channels[0].set_hue(h)
        return self

    def from_hex(self, hex_color: str) -> "Scheme":
        """
        Derive the base hue and tonal variants from an RRGGBB color.

        The color is mapped through RYB space first so the resulting hue
        lines up with the artist's wheel the scheme rotates on.

        Args:
            hex_color: Exactly 6 hex digits, without '#'

        Raises:
            MissingArgumentError: If hex_color is None
            InvalidFormatError: If hex_color is not in RRGGBB form
        """
        r, g, b = parse_hex(hex_color)
        h, s, v = rgb_to_hsv(rgb2ryb(r, g, b))

        self.from_hue(h * 360)
        self._set_variant_preset([s, v, s, v * 0.7, s * 0.25, 1, s * 0.5, 1])
        return self

    def add_complement(self, b: bool) -> "Scheme":
        if b is None:
            raise MissingArgumentError("add_complement")
        self._add_complement = bool(b)
        return self

    def web_safe(self, b: bool) -> "Scheme":
        if b is None:
            raise MissingArgumentError("web_safe")
        self._web_safe = bool(b)
        return self

    def distance(self, d: float) -> "Scheme":
        """Set the angular spread between related hues, 0 to 1."""
        check_finite("distance", d)
        if d < 0:
            raise InvalidRangeError("distance", d, ">= 0")
        if d > 1:
            raise InvalidRangeError("distance", d, "<= 1")
        self._distance = d
        return self

    def scheme(self, name: Optional[str] = None):
        """
        Get or set the scheme kind.

        Args:
            name: One of mono, monochromatic, contrast, triade, tetrade,
                analogic. Omit to read the current name.

        Returns:
            The current name when called without an argument, else self
        """
        if name is None:
            return self._scheme
        if name not in scheme_names():
            raise UnknownNameError("scheme", name)
        self._scheme = name
        return self

    def variation(self, name: str) -> "Scheme":
        if name is None:
            raise MissingArgumentError("variation")
        if name not in self._presets:
            raise UnknownNameError("variation", name)
        self._set_variant_preset(self._presets[name])
        return self

    def register_variation(self, name: str, values: Sequence[float]) -> "Scheme":
        """
        Make an extra variation preset available to this scheme.

        Args:
            name: Preset name; built-in names cannot be replaced
            values: Eight numbers, four (saturation, value) pairs
        """
        if name is None:
            raise MissingArgumentError("register_variation")
        if values is None:
            raise MissingArgumentError("register_variation")
        if name in PRESETS:
            raise ValueError(f"'{name}' is a built-in variation and cannot be replaced")
        values = tuple(float(x) for x in values)
        if len(values) != 2 * VARIANT_COUNT:
            raise ValueError(
                f"variation '{name}' needs {2 * VARIANT_COUNT} numbers, got {len(values)}"
            )
        self._presets[name] = values
        return self

    def variations(self) -> List[str]:
        """Names of every preset usable with variation()."""
        return list(self._presets)

    def _set_variant_preset(self, preset: Sequence[float]) -> None:
        for channel in self._channels:
            channel.set_variant_preset(preset)
