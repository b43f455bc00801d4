#!/usr/bin/env python3
"""
PROJECT:
-------
CSVLangDetector

TITLE:
------
errors.py

MAIN OBJECTIVE:
---------------
Error and warning types surfaced by the detection pipeline.

Author:
-------
Antoine Lemor
"""


class CSVLangDetectorError(Exception):
    """Base class for all package errors"""


class ParseError(CSVLangDetectorError):
    """Raised when the uploaded file cannot be decoded or tokenised as CSV"""

    def __init__(self, message: str, source: str = None):
        self.source = source
        super().__init__(message)


class EmptyFileWarning(UserWarning):
    """Emitted when a file holds zero rows; the pipeline then yields an empty state"""
