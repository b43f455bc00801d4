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
This script initializes the pipelines module.

MAIN FEATURES:
--------------
1) Export the pipeline stages and the data model
2) Export process() and DetectionSession

Author:
-------
Antoine Lemor
"""

from .models import Schema, LanguageResult, Stats, PipelineResult
from .schema_inference import SchemaInferer, is_header_row
from .row_classification import RowClassificationPipeline, truncate_text
from .stats import StatsAggregator
from .pipeline_controller import process, DetectionSession, UploadSnapshot

__all__ = [
    'Schema',
    'LanguageResult',
    'Stats',
    'PipelineResult',
    'SchemaInferer',
    'is_header_row',
    'RowClassificationPipeline',
    'truncate_text',
    'StatsAggregator',
    'process',
    'DetectionSession',
    'UploadSnapshot',
]
