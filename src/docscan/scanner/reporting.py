"""Sinks for recoverable per-file problems found during a scan."""
from pathlib import Path
from typing import List, Protocol, Tuple

from ..utils.exceptions import ParseError, InvalidDate
from ..utils.logger import get_logger


class IssueReporter(Protocol):
    """Receives files that were relevant but could not be turned into a record."""

    def report(self, path: Path, error: ParseError) -> None:
        ...


class LoggingIssueReporter:
    """Report problems through the application logger at ERROR level."""

    def __init__(self, logger=None):
        self.logger = logger or get_logger()

    def report(self, path: Path, error: ParseError) -> None:
        if isinstance(error, InvalidDate):
            self.logger.error(f"Error processing date for file {path}: {error}")
        else:
            self.logger.error(f"Error processing file {path}: {error}")


class CollectingIssueReporter:
    """Keep problems in memory."""

    def __init__(self):
        self.issues: List[Tuple[Path, ParseError]] = []

    def report(self, path: Path, error: ParseError) -> None:
        self.issues.append((path, error))

    @property
    def count(self) -> int:
        return len(self.issues)
