"""Utility modules."""
from .logger import get_logger, configure_logging
from .exceptions import (
    DocScanError,
    ConfigError,
    ScanError,
    ParseError,
    MalformedFilename,
    InvalidDate
)

__all__ = [
    "get_logger",
    "configure_logging",
    "DocScanError",
    "ConfigError",
    "ScanError",
    "ParseError",
    "MalformedFilename",
    "InvalidDate"
]
