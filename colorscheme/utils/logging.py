"""
ColorScheme Structured Logging
Centralized logging configuration using loguru.
"""
import sys
from typing import Dict, Any, Optional

from loguru import logger

from colorscheme.config import config

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message} | {extra}"


class StructuredLogger:
    """Structured logger for the ColorScheme service."""

    def __init__(self, level: Optional[str] = None, sink=sys.stdout):
        """Replace loguru's default handler with the service format."""
        self.level = (level or config.LOG_LEVEL).upper()
        logger.remove()
        self._handler_id = logger.add(sink, format=LOG_FORMAT, level=self.level, serialize=False)

    def _log(self, level: str, message: str, extra: Optional[Dict[str, Any]]):
        target = logger.bind(**extra) if extra else logger
        target.log(level, message)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with optional extra data."""
        self._log("INFO", message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with optional extra data."""
        self._log("WARNING", message, extra)

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log error message with optional extra data."""
        self._log("ERROR", message, extra)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with optional extra data."""
        self._log("DEBUG", message, extra)


# Global logger instance
_logger: Optional[StructuredLogger] = None


def get_logger() -> StructuredLogger:
    """Get or create global logger instance."""
    global _logger
    if _logger is None:
        _logger = StructuredLogger()
    return _logger
