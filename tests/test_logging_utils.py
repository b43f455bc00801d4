#!/usr/bin/env python3
"""
PROJECT:
-------
CSVLangDetector

TITLE:
------
test_logging_utils.py

MAIN OBJECTIVE:
---------------
Pytest test suite for logging setup from settings and operation timing.

Author:
-------
Antoine Lemor
"""

import json
import logging

from rich.logging import RichHandler

from csv_lang_detector.utils.logging_utils import PerformanceLogger, setup_logging_from_settings


def _file_handler(logger):
    return next(h for h in logger.handlers if isinstance(h, logging.FileHandler))


def test_json_file_logging(tmp_path, settings):
    settings.paths.logs_dir = tmp_path / "logs"
    settings.logging.file_logging = True
    settings.logging.json_logging = True
    settings.logging.console_logging = False

    logger = setup_logging_from_settings(settings)
    logger.info("parsed upload")
    _file_handler(logger).flush()

    record = json.loads((tmp_path / "logs" / "csv_lang_detector.log").read_text(encoding="utf-8"))
    assert record["message"] == "parsed upload"
    assert record["level"] == "INFO"


def test_plain_console_uses_configured_format(settings):
    settings.logging.rich_console = False
    settings.logging.format = "%(levelname)s|%(message)s"

    logger = setup_logging_from_settings(settings)

    console_handler = logger.handlers[0]
    assert not isinstance(console_handler, RichHandler)
    assert console_handler.formatter._fmt == "%(levelname)s|%(message)s"


def test_rich_console_by_default(settings):
    logger = setup_logging_from_settings(settings)

    assert isinstance(logger.handlers[0], RichHandler)
    assert not logger.propagate


def test_performance_statistics():
    performance = PerformanceLogger()
    for _ in range(3):
        with performance.timer("classification", column="text"):
            pass

    stats = performance.get_statistics("classification")

    assert stats["count"] == 3
    assert stats["min"] <= stats["mean"] <= stats["max"]
    assert performance.get_statistics("parse") == {}
    assert list(performance.get_statistics()) == ["classification"]
