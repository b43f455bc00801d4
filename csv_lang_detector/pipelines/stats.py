#!/usr/bin/env python3
"""
PROJECT:
-------
CSVLangDetector

TITLE:
------
stats.py

MAIN OBJECTIVE:
---------------
Aggregate row, label and language counts for a classified column.

Author:
-------
Antoine Lemor
"""

from typing import Any, Iterable, Sequence

from .models import LanguageResult, Stats


class StatsAggregator:
    """Pure aggregation over the data rows and the produced results"""

    @staticmethod
    def aggregate(row_count: int,
                  has_header: bool,
                  label_values: Iterable[Any],
                  results: Sequence[LanguageResult]) -> Stats:
        """
        Compute Stats.

        ``row_count`` counts every data row, including rows dropped for an
        empty cell. Labels are only distinct-counted when a header exists;
        otherwise every row is its own label.
        """
        labels = len(set(label_values)) if has_header else row_count
        languages = frozenset(result.language for result in results)
        return Stats(rows=row_count, labels=labels, languages=languages)
