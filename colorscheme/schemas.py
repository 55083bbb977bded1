"""
ColorScheme API Schemas
Pydantic models for scheme generation and preset request/response validation.
"""
from typing import List, Dict, Optional
from pydantic import BaseModel, Field, model_validator


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("colorscheme", description="Service name")


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str = Field(..., description="Error message")


# ============================================================================
# SCHEME SCHEMAS
# ============================================================================

class SchemeRequest(BaseModel):
    """Scheme configuration. Exactly one of hue or hex selects the base color."""
    hue: Optional[float] = Field(
        None,
        description="Base hue in degrees; any value, wrapped into [0, 360)"
    )
    hex: Optional[str] = Field(
        None,
        description="Base color as 6 hex digits (RRGGBB, '#' optional)"
    )
    scheme: str = Field("mono", description="Scheme kind: mono, monochromatic, contrast, triade, tetrade, analogic")
    variation: Optional[str] = Field(
        None,
        description="Variation preset name; defaults to 'default', or to the preset derived from hex"
    )
    distance: float = Field(0.5, description="Angular spread between related hues (0.0-1.0)")
    web_safe: bool = Field(False, description="Quantize every channel to the web-safe palette")
    add_complement: bool = Field(False, description="Add the complementary hue to analogic schemes")

    @model_validator(mode="after")
    def check_base_color(self):
        if self.hue is not None and self.hex is not None:
            raise ValueError("provide either hue or hex, not both")
        return self


class SchemeDebug(BaseModel):
    """Request tracing information."""
    request_id: str = Field(..., description="Unique request identifier")
    timing_ms: Dict[str, float] = Field(..., description="Processing time per stage in milliseconds")


class SchemeResponse(BaseModel):
    """Generated color scheme."""
    scheme: str = Field(..., description="Scheme kind used")
    hue: float = Field(..., description="Base hue in degrees [0, 360)")
    colors: List[str] = Field(..., description="Flat list of RRGGBB colors, four variants per hue")
    colorset: List[List[str]] = Field(..., description="Colors grouped per hue")
    debug: SchemeDebug = Field(..., description="Debug information")


class SchemeCatalog(BaseModel):
    """Registered scheme kinds and variation presets."""
    schemes: List[str] = Field(..., description="Accepted scheme names, aliases included")
    aliases: Dict[str, str] = Field(..., description="Alias to canonical scheme kind")
    variations: Dict[str, List[float]] = Field(..., description="Variation name to its 8 preset numbers")


class ShareResponse(BaseModel):
    """Share link for a preset."""
    url: str = Field(..., description="URL carrying the preset as query parameters")
