"""
ColorScheme Backend

Color scheme generation engine, preset interchange helpers and the HTTP API
that exposes them.
"""

__version__ = "1.0.0"
