#!/usr/bin/env python3
"""
PROJECT:
-------
CSVLangDetector

TITLE:
------
pipeline_controller.py

MAIN OBJECTIVE:
---------------
This script orchestrates the complete detection pipeline: parse, infer the
schema, classify the chosen column and aggregate statistics. It also holds the
latest snapshot for an interactive front-end and discards stale completions.

Dependencies:
-------------
- asyncio
- logging
- pathlib
- dataclasses
- csv_lang_detector.parsers
- csv_lang_detector.pipelines
- csv_lang_detector.utils

MAIN FEATURES:
--------------
1) process(): one-shot file -> PipelineResult, raising ParseError
2) DetectionSession: parse once per upload, reuse the table on column changes
3) Monotonic request generations so stale results never overwrite newer state
4) Async upload / selection running the heavy work in an executor
5) Error message recording without partial state commits

Author:
-------
Antoine Lemor
"""

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..config.settings import Settings, get_settings
from ..errors import ParseError
from ..parsers.tabular_parser import Table, TabularParser
from ..utils.language_codes import LanguageCodeResolver
from ..utils.language_detector import LanguageClassifier
from ..utils.logging_utils import PerformanceLogger
from .models import PipelineResult, Schema
from .row_classification import RowClassificationPipeline
from .schema_inference import SchemaInferer

logger = logging.getLogger(__name__)


def process(data: Union[bytes, str],
            column: Optional[str] = None,
            classifier=None,
            settings: Optional[Settings] = None,
            force_header: Optional[bool] = None,
            source: Optional[str] = None) -> PipelineResult:
    """
    Run the whole pipeline on CSV content.

    Args:
        data: Raw CSV bytes (or already decoded text)
        column: Column to classify; the schema's default column when omitted
        classifier: Object with ``classify(text) -> code``; built from settings when omitted
        settings: Settings to use (global settings when omitted)
        force_header: Override the header heuristic
        source: File name used in messages

    Returns:
        PipelineResult; results are empty when no column can be selected

    Raises:
        ParseError: The content is malformed or cannot be decoded
    """
    settings = settings or get_settings()
    table = TabularParser.from_settings(settings).load(data, source=source)
    schema = SchemaInferer(force_header).infer_table(table)

    column = column or schema.default_column
    if column is None:
        return PipelineResult(schema=schema, column=None)

    classifier = classifier or LanguageClassifier.from_settings(settings)
    pipeline = RowClassificationPipeline.from_settings(settings, classifier)
    return pipeline.run(table, column, schema)


@dataclass(frozen=True)
class UploadSnapshot:
    """A parsed upload and its schema, replaced wholesale on every new upload"""
    file_name: Optional[str]
    table: Table
    schema: Schema


class DetectionSession:
    """Latest-snapshot holder for interactive use.

    Each upload or column selection takes a new generation number. Work that
    finishes after a newer request has started is dropped.
    """

    def __init__(self,
                 classifier=None,
                 settings: Optional[Settings] = None,
                 force_header: Optional[bool] = None,
                 resolver: Optional[LanguageCodeResolver] = None):
        self.settings = settings or get_settings()
        self.parser = TabularParser.from_settings(self.settings)
        self.inferer = SchemaInferer(force_header)
        self.resolver = resolver or LanguageCodeResolver()
        self.performance = PerformanceLogger()
        self._classifier = classifier
        self._pipeline: Optional[RowClassificationPipeline] = None

        self.generation = 0
        self.upload: Optional[UploadSnapshot] = None
        self.selected_column: Optional[str] = None
        self.result: Optional[PipelineResult] = None
        self.error: Optional[str] = None
        self.is_processing = False

    @property
    def schema(self) -> Optional[Schema]:
        return self.upload.schema if self.upload else None

    @property
    def pipeline(self) -> RowClassificationPipeline:
        # Building a lingua detector is slow, defer until a column is classified
        if self._pipeline is None:
            classifier = self._classifier or LanguageClassifier.from_settings(self.settings)
            self._pipeline = RowClassificationPipeline(
                classifier,
                resolver=self.resolver,
                preview_length=self.settings.language.preview_length,
                ellipsis=self.settings.language.ellipsis,
                performance=self.performance,
            )
        return self._pipeline

    def begin_request(self) -> int:
        """Start a new request and return its generation"""
        self.generation += 1
        self.error = None
        return self.generation

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    def _fail(self, generation: int, message: str) -> None:
        if not self.is_current(generation):
            logger.debug(f"Dropping stale error from request {generation}: {message}")
            return
        self.error = message
        self.is_processing = False
        logger.error(message)

    def commit_upload(self, generation: int, snapshot: UploadSnapshot) -> bool:
        """Install a parsed upload if ``generation`` is still current"""
        if not self.is_current(generation):
            logger.debug(f"Dropping stale upload from request {generation}")
            return False
        self.upload = snapshot
        self.selected_column = snapshot.schema.default_column
        self.result = None
        self.is_processing = False
        logger.info(
            f"Loaded {snapshot.file_name or 'CSV content'}: {len(snapshot.table)} rows, "
            f"{len(snapshot.schema.selectable_columns)} selectable column(s)"
        )
        return True

    def commit_result(self, generation: int, result: PipelineResult) -> bool:
        """Install results and stats together if ``generation`` is still current"""
        if not self.is_current(generation):
            logger.debug(f"Dropping stale results from request {generation}")
            return False
        self.result = result
        self.is_processing = False
        return True

    def _load(self, data: Union[bytes, str], file_name: Optional[str]) -> UploadSnapshot:
        with self.performance.timer('parse', file=file_name):
            table = self.parser.load(data, source=file_name)
        return UploadSnapshot(file_name=file_name, table=table, schema=self.inferer.infer_table(table))

    def upload_bytes(self, data: Union[bytes, str], file_name: Optional[str] = None) -> Optional[Schema]:
        """
        Parse an upload and infer its schema.

        Returns the new Schema, or None when parsing failed (``self.error``
        then holds the message and the previous state is left untouched).
        """
        generation = self.begin_request()
        self.is_processing = True
        try:
            snapshot = self._load(data, file_name)
        except ParseError as e:
            self._fail(generation, f"Error parsing CSV: {e}")
            return None
        if self.commit_upload(generation, snapshot):
            return snapshot.schema
        return None

    def upload_file(self, file_path: Union[str, Path]) -> Optional[Schema]:
        file_path = Path(file_path)
        try:
            data = file_path.read_bytes()
        except OSError as e:
            generation = self.begin_request()
            self._fail(generation, f"Error parsing CSV: could not read {file_path}: {e}")
            return None
        return self.upload_bytes(data, file_name=file_path.name)

    async def upload_file_async(self, file_path: Union[str, Path]) -> Optional[Schema]:
        """Like upload_file, with reading and parsing off the event loop"""
        file_path = Path(file_path)
        generation = self.begin_request()
        self.is_processing = True
        loop = asyncio.get_running_loop()
        try:
            data = await loop.run_in_executor(None, file_path.read_bytes)
            snapshot = await loop.run_in_executor(None, self._load, data, file_path.name)
        except OSError as e:
            self._fail(generation, f"Error parsing CSV: could not read {file_path}: {e}")
            return None
        except ParseError as e:
            self._fail(generation, f"Error parsing CSV: {e}")
            return None
        if self.commit_upload(generation, snapshot):
            return snapshot.schema
        return None

    def select_column(self, column: str) -> Optional[PipelineResult]:
        """
        Classify ``column`` of the current upload.

        Returns the committed PipelineResult, or None when nothing is uploaded.
        """
        generation = self.begin_request()
        self.selected_column = column
        if self.upload is None:
            logger.warning("No file uploaded; select a file before choosing a column")
            return None

        self.is_processing = True
        result = self.pipeline.run(self.upload.table, column, self.upload.schema)
        if self.commit_result(generation, result):
            return result
        return None

    async def select_column_async(self, column: str) -> Optional[PipelineResult]:
        """Like select_column, with classification off the event loop"""
        generation = self.begin_request()
        self.selected_column = column
        upload = self.upload
        if upload is None:
            logger.warning("No file uploaded; select a file before choosing a column")
            return None

        self.is_processing = True
        pipeline = self.pipeline
        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, pipeline.run, upload.table, column, upload.schema)
        if self.commit_result(generation, result):
            return result
        return None

    def snapshot(self) -> Dict[str, Any]:
        """JSON-friendly view of the current state"""
        return {
            'generation': self.generation,
            'file_name': self.upload.file_name if self.upload else None,
            'schema': self.schema.to_dict() if self.schema else None,
            'selected_column': self.selected_column,
            'result': self.result.to_dict() if self.result else None,
            'error': self.error,
            'is_processing': self.is_processing,
        }
