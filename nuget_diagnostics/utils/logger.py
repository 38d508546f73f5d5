"""
Logging utility for NuGet diagnostics.

Logs go to stderr; stdout carries the diagnostic report.
"""

import logging
import sys
import os
from typing import Optional
from pathlib import Path
from datetime import datetime


class CorrelationIdFormatter(logging.Formatter):
    """
    Log format: timestamp | level | class | correlation_id | message
    """

    def formatTime(self, record, datefmt=None):
        """
        Format: YYYY-MM-DD HH:MM:SS.mmm
        """
        ct = datetime.fromtimestamp(record.created)
        s = ct.strftime(datefmt or "%Y-%m-%d %H:%M:%S")
        return f"{s}.{int(record.msecs):03d}"

    def format(self, record: logging.LogRecord) -> str:
        parts = [
            self.formatTime(record, self.datefmt),
            record.levelname,
            getattr(record, 'class_name', 'N/A'),
            str(getattr(record, 'correlation_id', 'N/A')),
            record.getMessage()
        ]

        log_line = " | ".join(parts)

        if record.exc_info:
            log_line += "\n" + self.formatException(record.exc_info)

        return log_line


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    log_to_console: bool = True
) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, reads from LOG_LEVEL env var (default: INFO)
        log_file: Optional file path to write logs to.
                  If None, reads from LOG_FILE env var
        log_to_console: Whether to write logs to stderr (default: True)
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    if log_file is None:
        log_file = os.getenv("LOG_FILE")

    formatter = CorrelationIdFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level))
    root_logger.handlers.clear()

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(getattr(logging, level))
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setFormatter(formatter)
        file_handler.setLevel(getattr(logging, level))
        root_logger.addHandler(file_handler)

    _configure_third_party_loggers()

    logger = logging.getLogger(__name__)
    logger.debug(
        "Logging configured: level=%s, console=%s, file=%s",
        level, log_to_console, log_file or "None",
        extra={'correlation_id': 'SYSTEM', 'class_name': 'LoggingConfig'}
    )


def _configure_third_party_loggers():
    """Configure log levels for noisy third-party libraries."""
    noisy_loggers = {
        "urllib3": logging.WARNING,
        "requests": logging.WARNING,
        "httpx": logging.WARNING,
        "httpcore": logging.WARNING,
        "uvicorn.access": logging.WARNING,
        "uvicorn.error": logging.INFO,
    }

    for logger_name, log_level in noisy_loggers.items():
        logging.getLogger(logger_name).setLevel(log_level)


class ContextLogger:
    """
    Logger wrapper for class context.

    Usage:
        logger = ContextLogger(__name__, "ConnectivityProber")
        logger.info("Message", correlation_id="12345678")
    """

    def __init__(self, name: str, class_name: str = "N/A"):
        self.logger = logging.getLogger(name)
        self.class_name = class_name

    def _log(self, level: int, msg: str, correlation_id: Optional[str] = None, *args, **kwargs):
        extra = kwargs.pop('extra', {})
        extra['correlation_id'] = correlation_id or 'N/A'
        extra['class_name'] = self.class_name

        self.logger.log(level, msg, *args, extra=extra, **kwargs)

    def debug(self, msg: str, correlation_id: Optional[str] = None, *args, **kwargs):
        self._log(logging.DEBUG, msg, correlation_id, *args, **kwargs)

    def info(self, msg: str, correlation_id: Optional[str] = None, *args, **kwargs):
        self._log(logging.INFO, msg, correlation_id, *args, **kwargs)

    def warning(self, msg: str, correlation_id: Optional[str] = None, *args, **kwargs):
        self._log(logging.WARNING, msg, correlation_id, *args, **kwargs)

    def error(self, msg: str, correlation_id: Optional[str] = None, *args, **kwargs):
        self._log(logging.ERROR, msg, correlation_id, *args, **kwargs)

    def exception(self, msg: str, correlation_id: Optional[str] = None, *args, **kwargs):
        kwargs['exc_info'] = True
        self._log(logging.ERROR, msg, correlation_id, *args, **kwargs)

    def critical(self, msg: str, correlation_id: Optional[str] = None, *args, **kwargs):
        self._log(logging.CRITICAL, msg, correlation_id, *args, **kwargs)


def get_logger(name: str, class_name: str = "N/A") -> ContextLogger:
    """
    Get a context-aware logger instance.

    Args:
        name: Logger name (typically __name__ of the module)
        class_name: Name of the class using the logger

    Returns:
        ContextLogger instance with correlation_id support
    """
    return ContextLogger(name, class_name)


def enable_debug_mode():
    """Switch the root logger to DEBUG while keeping HTTP libraries quiet."""
    logging.getLogger().setLevel(logging.DEBUG)
    for handler in logging.getLogger().handlers:
        handler.setLevel(logging.DEBUG)

    logging.getLogger("urllib3").setLevel(logging.INFO)

    logger = get_logger(__name__, "LoggingConfig")
    logger.debug("Debug mode enabled", correlation_id="SYSTEM")
