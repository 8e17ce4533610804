"""Application settings loader from YAML configuration."""
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass

from ..report.generator import GROUP_ORDERS, FORMATS
from ..utils.exceptions import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppSettings:
    """Application-wide settings, optionally loaded from a YAML file."""

    # App info
    app_name: str = "DocScan"
    app_version: str = "1.0.0"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_max_file_size_mb: int = 10
    log_backup_count: int = 5

    # Report
    group_order: str = "insertion"
    output_format: str = "text"

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "AppSettings":
        """
        Load settings from a YAML file.

        Args:
            config_path: YAML file; None returns the built-in defaults

        Raises:
            ConfigError: If the file is missing, unreadable or invalid
        """
        if config_path is None:
            return cls()

        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration root must be a mapping: {config_path}")

        settings = cls.from_dict(config)
        settings.validate()
        return settings

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "AppSettings":
        """Build settings from parsed YAML, falling back to defaults per key."""
        defaults = cls()
        app = config.get("app") or {}
        logging_cfg = config.get("logging") or {}
        report = config.get("report") or {}

        try:
            return cls(
                app_name=str(app.get("name", defaults.app_name)),
                app_version=str(app.get("version", defaults.app_version)),
                log_level=str(logging_cfg.get("level", defaults.log_level)).upper(),
                log_file=logging_cfg.get("file", defaults.log_file),
                log_max_file_size_mb=int(logging_cfg.get("max_file_size_mb", defaults.log_max_file_size_mb)),
                log_backup_count=int(logging_cfg.get("backup_count", defaults.log_backup_count)),
                group_order=str(report.get("group_order", defaults.group_order)),
                output_format=str(report.get("format", defaults.output_format))
            )
        except (AttributeError, TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration value: {e}") from e

    def validate(self) -> None:
        """Raise ConfigError for values the application cannot use."""
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Invalid log level: {self.log_level}")

        if self.group_order not in GROUP_ORDERS:
            raise ConfigError(f"Invalid group order: {self.group_order}")

        if self.output_format not in FORMATS:
            raise ConfigError(f"Invalid report format: {self.output_format}")

        if self.log_file is not None and not isinstance(self.log_file, str):
            raise ConfigError(f"Log file must be a path string, got {self.log_file!r}")

        if self.log_max_file_size_mb < 1:
            raise ConfigError("Log file size must be at least 1 MB")

        if self.log_backup_count < 0:
            raise ConfigError("Log backup count cannot be negative")

    @property
    def log_max_bytes(self) -> int:
        return self.log_max_file_size_mb * 1024 * 1024
