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
This script initializes the terminal presentation module.

Author:
-------
Antoine Lemor
"""

from .display import (
    create_columns_table,
    create_summary_panel,
    create_results_table,
    display_result
)

__all__ = [
    'create_columns_table',
    'create_summary_panel',
    'create_results_table',
    'display_result'
]
