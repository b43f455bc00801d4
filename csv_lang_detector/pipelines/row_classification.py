#!/usr/bin/env python3
"""
PROJECT:
-------
CSVLangDetector

TITLE:
------
row_classification.py

MAIN OBJECTIVE:
---------------
Classify the language of every data row's cell in the selected column and
produce the ordered result sequence together with its statistics.

Dependencies:
-------------
- logging
- typing
- csv_lang_detector.utils.language_codes
- csv_lang_detector.pipelines.stats

MAIN FEATURES:
--------------
1) Header-aware cell access (header names, or synthetic "Column N" positions)
2) Silent exclusion of empty / non-string cells (still counted as rows)
3) Source-order results with "Row N" labels for headerless tables
4) 50-character previews with an ellipsis marker when truncated
5) Stats computed from the same pass as the results

Author:
-------
Antoine Lemor
"""

import logging
from typing import Any, Callable, List, Optional, Tuple, Union

from ..parsers.tabular_parser import Table
from ..utils.language_codes import LanguageCodeResolver
from ..utils.logging_utils import PerformanceLogger
from .models import LanguageResult, PipelineResult, Schema
from .schema_inference import synthetic_column_position
from .stats import StatsAggregator

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 50
ELLIPSIS = "..."


def truncate_text(text: str, length: int = PREVIEW_LENGTH, marker: str = ELLIPSIS) -> str:
    """First ``length`` characters, with ``marker`` appended only when text was longer."""
    if len(text) > length:
        return text[:length] + marker
    return text


def is_classifiable(cell: Any) -> bool:
    return isinstance(cell, str) and cell != ''


class RowClassificationPipeline:
    """Map data rows of one column to LanguageResult records"""

    def __init__(self,
                 classifier: Union[Callable[[str], str], Any],
                 resolver: Optional[LanguageCodeResolver] = None,
                 preview_length: int = PREVIEW_LENGTH,
                 ellipsis: str = ELLIPSIS,
                 performance: Optional[PerformanceLogger] = None):
        """
        Args:
            classifier: Object with a ``classify(text) -> code`` method, or a plain callable
            resolver: Code to name lookup (default table when omitted)
            preview_length: Characters kept in the text preview
            ellipsis: Marker appended to truncated previews
            performance: Optional timer sink
        """
        self._classify = getattr(classifier, 'classify', classifier)
        self.resolver = resolver or LanguageCodeResolver()
        self.preview_length = preview_length
        self.ellipsis = ellipsis
        self.performance = performance or PerformanceLogger()

    @classmethod
    def from_settings(cls, settings, classifier, resolver: Optional[LanguageCodeResolver] = None):
        return cls(
            classifier,
            resolver=resolver,
            preview_length=settings.language.preview_length,
            ellipsis=settings.language.ellipsis,
        )

    def data_rows(self, table: Table, column: str, schema: Schema) -> List[Tuple[Any, Any]]:
        """
        (label value, selected cell) for every data row, in source order.

        The label column and unknown columns select no cells, so every row
        is counted but none is classified.
        """
        selectable = column in schema.selectable_columns
        if not selectable:
            logger.warning(f"Column {column!r} is not a selectable column")

        if schema.has_header:
            label_key = schema.label_column_name
            return [
                (record.get(label_key), record.get(column) if selectable else None)
                for record in table.records()
            ]

        position = synthetic_column_position(column) if selectable else None

        pairs = []
        for row in table.rows:
            label = row[0] if row else None
            cell = row[position] if position is not None and position < len(row) else None
            pairs.append((label, cell))
        return pairs

    def run(self, table: Table, column: str, schema: Schema) -> PipelineResult:
        """
        Classify ``column`` of ``table``.

        Returns:
            PipelineResult holding the ordered results and their Stats
        """
        pairs = self.data_rows(table, column, schema)
        results = []

        with self.performance.timer('classification', column=column, rows=len(pairs)):
            for label_value, cell in pairs:
                if not is_classifiable(cell):
                    continue

                code = self._classify(cell)
                if schema.has_header:
                    label = "" if label_value is None else str(label_value)
                else:
                    label = f"Row {len(results) + 1}"

                results.append(LanguageResult(
                    label=label,
                    language=self.resolver.resolve(code),
                    text=truncate_text(cell, self.preview_length, self.ellipsis),
                ))

        stats = StatsAggregator.aggregate(
            row_count=len(pairs),
            has_header=schema.has_header,
            label_values=[label_value for label_value, _ in pairs],
            results=results,
        )

        skipped = len(pairs) - len(results)
        if skipped:
            logger.debug(f"Skipped {skipped} rows with an empty or missing {column!r} cell")
        logger.info(
            f"Classified {len(results)} of {stats.rows} rows in {column!r}: "
            f"{len(stats.languages)} language(s)"
        )

        return PipelineResult(schema=schema, column=column, results=tuple(results), stats=stats)
