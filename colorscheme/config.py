"""
ColorScheme Configuration
Manages environment variables and defaults for the API and preset helpers.
"""
import os
from typing import List

from colorscheme.services.colors.wheel import PRESETS, scheme_names


class Config:
    """Configuration class for ColorScheme services."""

    # Logging
    LOG_LEVEL: str = os.environ.get("COLORSCHEME_LOG_LEVEL", "INFO")

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get("COLORSCHEME_ALLOWED_ORIGINS", "http://localhost:3000")

    # Random preset generation
    RANDOM_SCHEME: str = os.environ.get("COLORSCHEME_RANDOM_SCHEME", "contrast")
    RANDOM_VARIATION: str = os.environ.get("COLORSCHEME_RANDOM_VARIATION", "light")
    RANDOM_HUE_SPAN: float = float(os.environ.get("COLORSCHEME_RANDOM_HUE_SPAN", "1000"))

    # Preset export
    PRESET_FILENAME: str = os.environ.get("COLORSCHEME_PRESET_FILENAME", "color-scheme.json")

    # Observability
    METRICS_ENABLED: bool = bool(int(os.environ.get("COLORSCHEME_METRICS_ENABLED", "1")))

    @classmethod
    def allowed_origins(cls) -> List[str]:
        """CORS origins as a list."""
        return [origin.strip() for origin in cls.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @classmethod
    def validate_scheme(cls, scheme: str) -> bool:
        """Validate scheme kind name."""
        return scheme in scheme_names()

    @classmethod
    def validate_variation(cls, variation: str) -> bool:
        """Validate built-in variation name."""
        return variation in PRESETS


# Global config instance
config = Config()
