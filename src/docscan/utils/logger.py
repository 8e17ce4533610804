"""Logging infrastructure for the scanner and the CLI."""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional, TextIO


LOGGER_NAME = "docscan"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_RED = "\033[31m"
_RESET = "\033[0m"


class ColorFormatter(logging.Formatter):
    """Paint ERROR and above red so per-file problems stand out."""

    def format(self, record):
        message = super().format(record)
        if record.levelno >= logging.ERROR:
            return f"{_RED}{message}{_RESET}"
        return message


class DocScanLogger:
    """Centralized logging manager."""

    def __init__(
        self,
        log_level: str = "INFO",
        log_file: Optional[Path] = None,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
        stream: Optional[TextIO] = None
    ):
        self.log_file = Path(log_file) if log_file else None

        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(getattr(logging, log_level.upper()))
        self.logger.propagate = False

        # Remove existing handlers
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        # Console goes to stderr; stdout is reserved for the report
        stream = stream or sys.stderr
        console_handler = logging.StreamHandler(stream)
        console_handler.setLevel(logging.DEBUG)

        if hasattr(stream, "isatty") and stream.isatty():
            console_handler.setFormatter(ColorFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        else:
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        self.logger.addHandler(console_handler)

        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                self.log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8"
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            self.logger.addHandler(file_handler)

    def get_logger(self) -> logging.Logger:
        """Get the configured logger."""
        return self.logger


# Global logger instance
_logger_instance: Optional[DocScanLogger] = None


def get_logger(log_level: str = "INFO") -> logging.Logger:
    """Get or create global logger instance."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = DocScanLogger(log_level)
    return _logger_instance.get_logger()


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """Rebuild the global logger once settings are known."""
    global _logger_instance
    _logger_instance = DocScanLogger(log_level, log_file, max_bytes, backup_count, stream)
    return _logger_instance.get_logger()
