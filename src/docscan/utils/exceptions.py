"""Custom exception classes for DocScan."""


class DocScanError(Exception):
    """Base exception for DocScan."""
    pass


class ConfigError(DocScanError):
    """Configuration-related errors."""
    pass


class ScanError(DocScanError):
    """Directory walk failed; the whole scan is aborted."""
    pass


# Per-file errors: reported, never fatal
class ParseError(DocScanError):
    """Base class for errors raised while turning a filename into a record."""

    def __init__(self, message: str, filename: str = ""):
        super().__init__(message)
        self.filename = filename


class MalformedFilename(ParseError):
    """Filename does not split into enough fields."""
    pass


class InvalidDate(ParseError):
    """Date token is not a real YYYY-MM-DD calendar date."""
    pass
