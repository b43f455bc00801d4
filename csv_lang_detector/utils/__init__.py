#!/usr/bin/env python3
"""
PROJECT:
-------
CSVLangDetector

TITLE:
------
__init__.py

MAIN OBJECTIVE:
---------------
This script initializes the utils module.

MAIN FEATURES:
--------------
1) Export the language classifier and code resolver
2) Export logging helpers

Author:
-------
Antoine Lemor
"""

from .language_codes import (
    LanguageCodeResolver,
    UNDETERMINED_CODE,
    UNDETERMINED_NAME,
    get_language_name
)
from .language_detector import LanguageClassifier, DetectionMethod
from .logging_utils import setup_logging, setup_logging_from_settings, PerformanceLogger

__all__ = [
    'LanguageCodeResolver',
    'UNDETERMINED_CODE',
    'UNDETERMINED_NAME',
    'get_language_name',
    'LanguageClassifier',
    'DetectionMethod',
    'setup_logging',
    'setup_logging_from_settings',
    'PerformanceLogger'
]
