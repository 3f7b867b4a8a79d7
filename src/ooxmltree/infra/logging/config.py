from __future__ import annotations

"""
Logging Configuration Models.

Turns the validated application configuration into the settings consumed
by 'configure_logging', and resolves level names to logging constants.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings for one logging bootstrap.

    Attributes:
        level: Level name; unknown names resolve to INFO.
        console: Mirror records on stderr; stdout carries command output.
        log_file: Rotating log file, or None for no file output.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files to keep.
        console_fmt: Terminal format.
        file_fmt: File format; includes the logger name so codec and
            builder records can be told apart.
        datefmt: Timestamp format for file entries.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 3

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @property
    def level_int(self) -> int:
        """Numeric level for 'level'."""
        if not self.level:
            return logging.INFO
        return _LEVEL_MAP.get(str(self.level).strip().upper(), logging.INFO)

    @classmethod
    def from_app_config(cls, config: Mapping[str, Any], log_file: Optional[str] = None) -> LoggingConfig:
        """
        Build the settings for a CLI run.

        Args:
            config: Validated application configuration.
            log_file: Rotating log file, or None for console only.

        Returns:
            LoggingConfig: Console logging plus the optional file.
        """
        return cls(
            level=str(config.get("log_level") or "INFO"),
            console=True,
            log_file=log_file,
        )
