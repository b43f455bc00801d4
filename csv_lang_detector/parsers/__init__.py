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
This script initializes the parsers module.

Author:
-------
Antoine Lemor
"""

from .tabular_parser import TabularParser, Table

__all__ = ['TabularParser', 'Table']
