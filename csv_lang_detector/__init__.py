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
This script initializes the CSVLangDetector package, which reads a CSV file,
infers its schema and detects the natural language of a chosen text column.

Dependencies:
-------------
- os

MAIN FEATURES:
--------------
1) Exposes the one-shot process() pipeline and the DetectionSession holder
2) Exposes the data model (Schema, LanguageResult, Stats, PipelineResult)
3) Exposes the error types raised or emitted by the pipeline

Author:
-------
Antoine Lemor
"""

__version__ = "1.0.0"
__author__ = "Antoine Lemor"

from .errors import CSVLangDetectorError, ParseError, EmptyFileWarning
from .pipelines.models import Schema, LanguageResult, Stats, PipelineResult
from .pipelines.pipeline_controller import process, DetectionSession

__all__ = [
    '__version__',
    '__author__',
    'CSVLangDetectorError',
    'ParseError',
    'EmptyFileWarning',
    'Schema',
    'LanguageResult',
    'Stats',
    'PipelineResult',
    'process',
    'DetectionSession',
]


def get_version():
    """Return the current version of CSVLangDetector"""
    return __version__
