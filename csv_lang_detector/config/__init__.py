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
This script initializes the config module.

MAIN FEATURES:
--------------
1) Export settings classes

Author:
-------
Antoine Lemor
"""

from .settings import (
    Settings,
    DataConfig,
    LanguageConfig,
    LoggingConfig,
    PathConfig,
    get_settings,
    reset_settings,
)

__all__ = [
    'Settings',
    'DataConfig',
    'LanguageConfig',
    'LoggingConfig',
    'PathConfig',
    'get_settings',
    'reset_settings',
]
