"""Invoice filename scanning module."""
from .models import Record, FilenameFields
from .filters import is_relevant_file
from .parser import extract_fields, fields_from_tokens, parse_date, parse_filename
from .reporting import IssueReporter, LoggingIssueReporter, CollectingIssueReporter
from .walker import DirectoryWalker, ScanStats, scan_directory

__all__ = [
    "Record",
    "FilenameFields",
    "is_relevant_file",
    "extract_fields",
    "fields_from_tokens",
    "parse_date",
    "parse_filename",
    "IssueReporter",
    "LoggingIssueReporter",
    "CollectingIssueReporter",
    "DirectoryWalker",
    "ScanStats",
    "scan_directory"
]
