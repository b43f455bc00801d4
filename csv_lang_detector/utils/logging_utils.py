#!/usr/bin/env python3
"""
PROJECT:
-------
CSVLangDetector

TITLE:
------
logging_utils.py

MAIN OBJECTIVE:
---------------
This script provides logging utilities for the CSVLangDetector package
including Rich console output, rotating log files and timing of pipeline
passes.

Dependencies:
-------------
- logging
- rich
- json
- datetime

MAIN FEATURES:
--------------
1) Rich console handler for readable terminal logs
2) Optional rotating file handler
3) JSON formatter for structured log files
4) Performance timers for parse and classification passes

Author:
-------
Antoine Lemor
"""

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Any, Optional, List

from rich.logging import RichHandler

PACKAGE_LOGGER = 'csv_lang_detector'


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if hasattr(record, 'context'):
            log_obj['context'] = record.context

        if record.exc_info:
            log_obj['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_obj, ensure_ascii=False)


class PerformanceLogger:
    """Logger for tracking durations of pipeline operations"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(f"{PACKAGE_LOGGER}.performance")
        self.metrics: Dict[str, List[float]] = {}

    @contextmanager
    def timer(self, operation: str, **context):
        """Context manager for timing operations"""
        start_time = time.perf_counter()

        try:
            yield
        finally:
            elapsed = time.perf_counter() - start_time
            self.metrics.setdefault(operation, []).append(elapsed)

            context_str = ' | '.join(f"{k}={v}" for k, v in context.items())
            message = f"Operation completed: {operation} | duration_seconds={elapsed:.4f}"
            if context_str:
                message = f"{message} | {context_str}"
            self.logger.debug(message)

    def get_statistics(self, operation: Optional[str] = None) -> Dict[str, Any]:
        """Get performance statistics"""
        operations = [operation] if operation else list(self.metrics)

        stats = {}
        for op in operations:
            times = self.metrics.get(op)
            if not times:
                continue
            stats[op] = {
                'count': len(times),
                'total': sum(times),
                'mean': sum(times) / len(times),
                'min': min(times),
                'max': max(times)
            }

        if operation:
            return stats.get(operation, {})
        return stats


def setup_logging(
    level: str = 'INFO',
    log_file: Optional[Path] = None,
    use_console: bool = True,
    use_rich: bool = True,
    use_json: bool = False,
    fmt: str = "[%(levelname)s] %(message)s",
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5
) -> logging.Logger:
    """
    Setup logging for the application.

    Parameters
    ----------
    level : str
        Logging level
    log_file : Path, optional
        File to write rotated logs to; no file handler when omitted
    use_console : bool
        Whether to log to the console
    use_rich : bool
        Whether to render console logs with Rich
    use_json : bool
        Whether the file handler writes JSON lines
    fmt : str
        Format string for the plain (non-Rich) console handler

    Returns
    -------
    logging.Logger
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers = []  # Clear existing handlers
    logger.propagate = False

    if use_console:
        if use_rich:
            console_handler = RichHandler(
                rich_tracebacks=True,
                markup=False,
                show_time=False,
                show_level=True
            )
            console_handler.setFormatter(logging.Formatter('%(message)s'))
        else:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        if use_json:
            file_handler.setFormatter(JsonFormatter())
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    '[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
                    datefmt='%Y-%m-%d %H:%M:%S'
                )
            )
        logger.addHandler(file_handler)

    # Language backends are chatty at DEBUG
    for logger_name in ['lingua', 'langid']:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    return logger


def setup_logging_from_settings(settings) -> logging.Logger:
    """Configure logging from a Settings instance"""
    log_file = settings.get_log_path() if settings.logging.file_logging else None
    return setup_logging(
        level=settings.logging.level,
        log_file=log_file,
        use_console=settings.logging.console_logging,
        use_rich=settings.logging.rich_console,
        use_json=settings.logging.json_logging,
        fmt=settings.logging.format,
        max_bytes=settings.logging.max_bytes,
        backup_count=settings.logging.backup_count
    )
