"""Command-line entry point: scan a directory and print the invoice report."""
import sys
import argparse
from pathlib import Path
from typing import Optional, Sequence, TextIO

from .config.settings import AppSettings, LOG_LEVELS
from .report.generator import ReportGenerator, GROUP_ORDERS, FORMATS
from .scanner.reporting import LoggingIssueReporter
from .scanner.walker import DirectoryWalker
from .utils.exceptions import ConfigError, ScanError
from .utils.logger import configure_logging, get_logger

logger = get_logger()

PROMPT = "Please provide a directory. Using '.' for current directory: "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docscan",
        description="Scan a directory for invoice files and report them by group"
    )
    parser.add_argument(
        "directory",
        nargs="?",
        help="Directory to scan (prompted for when omitted)"
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=FORMATS,
        help="Report format (default: text, or the config file value)"
    )
    parser.add_argument(
        "--group-order",
        choices=GROUP_ORDERS,
        help="Order of groups in the report (default: insertion)"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML settings file"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override the configured log level"
    )
    return parser


def get_directory_from_user(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> str:
    """Prompt for a directory and return the trimmed answer ("" on end of input)."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    stdout.write(PROMPT)
    stdout.flush()
    return stdin.readline().strip()


def _load_settings(args: argparse.Namespace) -> AppSettings:
    """Load settings and apply command-line overrides."""
    settings = AppSettings.load(args.config)

    if args.log_level:
        settings.log_level = args.log_level
    if args.group_order:
        settings.group_order = args.group_order
    if args.output_format:
        settings.output_format = args.output_format

    settings.validate()
    return settings


def _log_scan_results(walker: DirectoryWalker) -> None:
    """Log summary of a finished scan."""
    stats = walker.stats
    logger.info(
        f"Scan of {walker.root} complete: "
        f"{stats.files_seen} files seen, "
        f"{stats.files_relevant} invoice files, "
        f"{stats.files_failed} failed, "
        f"{stats.records} records"
    )


def _allow_raw_filenames(stdout: TextIO) -> None:
    """Let undecodable filename bytes pass through to the output unchanged."""
    if hasattr(stdout, "reconfigure"):
        stdout.reconfigure(errors="surrogateescape")


def run(directory: str, settings: AppSettings, stdout: Optional[TextIO] = None) -> None:
    """
    Scan a directory and write the report.

    Raises:
        ScanError: If the directory cannot be walked
    """
    stdout = stdout or sys.stdout
    generator = ReportGenerator(settings.group_order)

    walker = DirectoryWalker(directory, LoggingIssueReporter(logger))
    records = walker.scan()
    _log_scan_results(walker)

    _allow_raw_filenames(stdout)
    print("Scanning complete. Preparing report...", file=stdout)
    print(generator.render(records, settings.output_format), file=stdout)
    stdout.flush()


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for DocScan."""
    args = build_parser().parse_args(list(argv) if argv is not None else None)

    try:
        settings = _load_settings(args)
    except ConfigError as e:
        logger.critical(f"Invalid configuration: {e}")
        sys.exit(1)

    try:
        configure_logging(
            settings.log_level,
            log_file=settings.log_file,
            max_bytes=settings.log_max_bytes,
            backup_count=settings.log_backup_count
        )
    except OSError as e:
        logger.critical(f"Cannot open log file {settings.log_file}: {e}")
        sys.exit(1)

    logger.info(f"{settings.app_name} {settings.app_version} starting...")

    try:
        # A directory argument is used as given; only the prompt answer is trimmed
        directory = args.directory if args.directory is not None else get_directory_from_user()
        run(directory, settings)
    except ScanError as e:
        logger.critical(f"Error scanning directory: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt")
        sys.exit(130)


if __name__ == "__main__":
    main()
