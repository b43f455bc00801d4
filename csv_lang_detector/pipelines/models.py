#!/usr/bin/env python3
"""
PROJECT:
-------
CSVLangDetector

TITLE:
------
models.py

MAIN OBJECTIVE:
---------------
Immutable records exchanged between the pipeline stages and handed to the
presentation layer.

Dependencies:
-------------
- dataclasses
- typing

MAIN FEATURES:
--------------
1) Schema: header flag, label column and selectable text columns
2) LanguageResult: one classified row
3) Stats: row, label and language counts
4) PipelineResult: the consistent snapshot of all of the above

Author:
-------
Antoine Lemor
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple

HEADERLESS_LABEL_KEY = "0"
SYNTHETIC_COLUMN_PREFIX = "Column "


@dataclass(frozen=True)
class Schema:
    """Shape of an uploaded table.

    The first column is always the label column and is never selectable.
    """

    has_header: bool
    label_column_name: str
    selectable_columns: Tuple[str, ...] = ()
    default_column: Optional[str] = None

    @classmethod
    def empty(cls) -> "Schema":
        return cls(has_header=False, label_column_name="", selectable_columns=(), default_column=None)

    @property
    def is_empty(self) -> bool:
        return not self.selectable_columns and not self.label_column_name

    def to_dict(self) -> Dict[str, Any]:
        return {
            'has_header': self.has_header,
            'label_column_name': self.label_column_name,
            'selectable_columns': list(self.selectable_columns),
            'default_column': self.default_column,
        }


@dataclass(frozen=True)
class LanguageResult:
    label: str
    language: str
    text: str

    def to_dict(self) -> Dict[str, str]:
        return {'label': self.label, 'language': self.language, 'text': self.text}


@dataclass(frozen=True)
class Stats:
    rows: int = 0
    labels: int = 0
    languages: FrozenSet[str] = field(default_factory=frozenset)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'rows': self.rows,
            'labels': self.labels,
            'languages': sorted(self.languages),
        }


@dataclass(frozen=True)
class PipelineResult:
    """Results and stats for one (file, column) pair, always produced together"""

    schema: Schema
    column: Optional[str]
    results: Tuple[LanguageResult, ...] = ()
    stats: Stats = field(default_factory=Stats)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'schema': self.schema.to_dict(),
            'column': self.column,
            'results': [result.to_dict() for result in self.results],
            'stats': self.stats.to_dict(),
        }
