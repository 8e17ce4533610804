"""Recursive directory walker that turns invoice filenames into records.

Sibling entries are visited in lexical order of their names and a
sub-directory is descended into at its position among its siblings, so the
record order is stable for an unchanged tree. Symbolic links below the root
are not followed.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .filters import is_relevant_file
from .models import Record
from .parser import parse_filename
from .reporting import IssueReporter, LoggingIssueReporter
from ..utils.exceptions import ParseError, ScanError
from ..utils.logger import get_logger

logger = get_logger()


@dataclass
class ScanStats:
    files_seen: int = 0
    files_relevant: int = 0
    files_failed: int = 0
    records: int = 0


class DirectoryWalker:
    """Walks a tree: filter -> parser -> validator -> record list."""

    def __init__(self, root: Union[str, Path], reporter: Optional[IssueReporter] = None):
        self.root = root
        self.reporter = reporter or LoggingIssueReporter()
        self.stats = ScanStats()

    def scan(self) -> List[Record]:
        """
        Scan the root path.

        Returns:
            Records in visitation order

        Raises:
            ScanError: If the root is empty or the filesystem cannot be walked
        """
        if str(self.root) == "":
            raise ScanError("No directory provided")

        root = Path(self.root)
        self.stats = ScanStats()
        records: List[Record] = []

        try:
            if root.is_dir():
                self._walk(root, records)
            else:
                # Raises for a missing root; a plain file is scanned on its own
                root.stat()
                self._process_file(root, root.name, records)
        except OSError as e:
            raise ScanError(str(e)) from e

        logger.debug(
            f"Walked {root}: {self.stats.files_seen} files, "
            f"{self.stats.files_relevant} relevant, {self.stats.files_failed} failed"
        )
        return records

    @staticmethod
    def _sorted_entries(directory: Union[str, Path]) -> Iterator[os.DirEntry]:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
        return iter(entries)

    def _walk(self, root: Path, records: List[Record]) -> None:
        # Explicit stack of sibling iterators; depth is bounded by the filesystem only
        pending = [self._sorted_entries(root)]
        while pending:
            entry = next(pending[-1], None)
            if entry is None:
                pending.pop()
            elif entry.is_dir(follow_symlinks=False):
                pending.append(self._sorted_entries(entry.path))
            else:
                self._process_file(Path(entry.path), entry.name, records)

    def _process_file(self, path: Path, name: str, records: List[Record]) -> None:
        self.stats.files_seen += 1

        if not is_relevant_file(name):
            return
        self.stats.files_relevant += 1

        try:
            record = parse_filename(name)
        except ParseError as e:
            self.stats.files_failed += 1
            self.reporter.report(path, e)
            return

        records.append(record)
        self.stats.records += 1


def scan_directory(root: Union[str, Path], reporter: Optional[IssueReporter] = None) -> List[Record]:
    """Scan a directory tree for invoice files and return their records."""
    return DirectoryWalker(root, reporter).scan()
