"""
ColorScheme Preset Interchange

A preset is the two-color record shared between clients:
``{"primary": "#RRGGBB", "bgColor": "#RRGGBB" | "transparent"}``.
This module generates random presets from the scheme engine and moves
presets in and out of JSON files and URL query strings.
"""

import json
import random
from pathlib import Path
from typing import Mapping, Optional, Union
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from colorscheme.config import config
from colorscheme.services.colors import Scheme
from colorscheme.utils.logging import get_logger

TRANSPARENT = "transparent"


class PresetFormatError(ValueError):
    """Preset payload could not be parsed or failed validation."""
    pass


class Preset(BaseModel):
    """Two-color preset exchanged through files and share links."""
    model_config = ConfigDict(populate_by_name=True)

    primary: str = Field(
        ...,
        pattern=r"^#[0-9A-Fa-f]{6}$",
        description="Primary color in format #RRGGBB"
    )
    bg_color: str = Field(
        TRANSPARENT,
        alias="bgColor",
        pattern=r"^(#[0-9A-Fa-f]{6}|transparent)$",
        description="Background color in format #RRGGBB, or 'transparent'"
    )

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


def preset_from_params(data: Mapping) -> Preset:
    """Validate a preset from a primary/bgColor mapping."""
    try:
        return Preset.model_validate(data)
    except ValidationError as e:
        raise PresetFormatError(f"Invalid preset: {e.errors()[0]['msg']}") from e


def preset_from_scheme(scheme: Scheme) -> Preset:
    """Primary from the first color of a scheme, background from the last."""
    colors = scheme.colors()
    return Preset(primary="#" + colors[0], bg_color="#" + colors[-1])


def random_preset(rng: Optional[random.Random] = None) -> Preset:
    """
    Build a preset from a randomly rotated scheme.

    Args:
        rng: Random source; defaults to the module-level generator

    Returns:
        Preset with primary and background taken from the configured
        random scheme kind and variation
    """
    rng = rng or random
    scheme = (
        Scheme()
        .from_hue(rng.random() * config.RANDOM_HUE_SPAN)
        .scheme(config.RANDOM_SCHEME)
        .variation(config.RANDOM_VARIATION)
    )
    return preset_from_scheme(scheme)


def preset_to_json(preset: Preset) -> str:
    """Serialize a preset with two-space indentation."""
    return json.dumps(preset.to_dict(), indent=2)


def preset_from_json(text: Union[str, bytes]) -> Preset:
    """
    Parse a preset from JSON text.

    Raises:
        PresetFormatError: On malformed JSON or invalid colors
    """
    try:
        data = json.loads(text)
    except ValueError as e:
        raise PresetFormatError(f"Preset is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise PresetFormatError("Preset must be a JSON object")
    return preset_from_params(data)


def export_preset(preset: Preset, path: Union[str, Path]) -> Path:
    """Write a preset to a JSON file and return its path."""
    path = Path(path)
    path.write_text(preset_to_json(preset), encoding="utf-8")
    get_logger().info("Preset exported", extra={"path": str(path), **preset.to_dict()})
    return path


def import_preset(path: Union[str, Path]) -> Preset:
    """Read a preset from a JSON file."""
    path = Path(path)
    preset = preset_from_json(path.read_text(encoding="utf-8"))
    get_logger().info("Preset imported", extra={"path": str(path), **preset.to_dict()})
    return preset


def preset_to_query(preset: Preset) -> str:
    """Encode a preset as URL query parameters."""
    return urlencode(preset.to_dict())


def preset_from_query(query: str, default: Optional[Preset] = None) -> Preset:
    """
    Decode a preset from a URL query string.

    Parameters missing from the query keep their value from ``default``.

    Args:
        query: Query string, with or without the leading '?'
        default: Preset supplying values for absent parameters

    Raises:
        PresetFormatError: If the merged preset is incomplete or invalid
    """
    params = parse_qs(query.lstrip("?"))
    data = default.to_dict() if default is not None else {}
    for key in ("primary", "bgColor"):
        if params.get(key):
            data[key] = params[key][0]
    return preset_from_params(data)


def share_url(base_url: str, preset: Preset) -> str:
    """Replace any query on ``base_url`` with the preset parameters."""
    parts = urlsplit(base_url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, preset_to_query(preset), ""))
