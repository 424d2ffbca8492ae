"""Logging setup for the scanner and its scripts."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Optional
from logging import Logger

# Custom AUDIT log level between DEBUG (10) and INFO (20)
AUDIT_LEVEL = 15
logging.addLevelName(AUDIT_LEVEL, "AUDIT")


def audit(self, message, *args, **kwargs):
    if self.isEnabledFor(AUDIT_LEVEL):
        self._log(AUDIT_LEVEL, message, args, **kwargs)


logging.Logger.audit = audit

DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> Logger:
    """Get a logger instance.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


class ScriptLogging:
    """Logging setup for standalone scripts.

    Standard output belongs to the scan report, so the console handler writes
    to stderr and only shows warnings unless debug is enabled.
    """

    @staticmethod
    def get_script_logger(
        name: str = "imagescan",
        log_dir: Optional[Path] = None,
        debug: bool = False,
        config: Optional[Any] = None,
        console_level: Optional[int] = None,
        file_level: Optional[int] = None,
    ) -> Logger:
        """Get a logger configured for standalone scripts.

        Args:
            name: Logger name, also used as the log file prefix
            log_dir: Directory for log files (no file output when None)
            debug: Enable debug level console logging
            config: Optional ScanSettings supplying log_format and log_dir
            console_level: Explicit console level (overrides debug)
            file_level: Explicit log file level (overrides config.log_level)

        Returns:
            Configured logger instance
        """
        log_format = getattr(config, "log_format", None) or DEFAULT_LOG_FORMAT
        if log_dir is None and config is not None:
            log_dir = getattr(config, "log_dir", None)
        if console_level is None:
            console_level = logging.DEBUG if debug else logging.WARNING
        if file_level is None:
            level_name = str(getattr(config, "log_level", None) or "DEBUG").upper()
            file_level = logging.getLevelName(level_name)

        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        # Clear any existing handlers to avoid duplicates
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

        formatter = logging.Formatter(log_format, datefmt="%Y-%m-%d %H:%M:%S")

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        # File handler (DEBUG and above, including AUDIT)
        log_file = None
        if log_dir is not None:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = log_dir / f"{name}_{timestamp}.log"

            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(file_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        # Usage:
        # - logger.audit("...") for single file transactions (log file only)
        # - logger.info("...") for summary/progress

        if log_file:
            logger.info("=" * 80)
            logger.info(f"LOG FILE: {log_file}")
            logger.info(f"SCRIPT: {name}")
            logger.info(f"DEBUG MODE: {debug}")
            logger.info("=" * 80)

        logger.debug(f"Script logging initialized for {name} (debug: {debug})")
        return logger
