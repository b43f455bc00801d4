#!/usr/bin/env python3
"""
PROJECT:
-------
CSVLangDetector

TITLE:
------
schema_inference.py

MAIN OBJECTIVE:
---------------
Decide whether row 0 of a table is a header and expose the columns that can
be used as a text source.

Dependencies:
-------------
- logging
- typing

MAIN FEATURES:
--------------
1) Whole-row header predicate: every cell a non-blank string
2) Label column fixed to the first column
3) Synthetic "Column N" names (1-based) for headerless tables
4) Optional manual override of the header decision

Known limitation: a first data row with no blank cell (for example "x,y" or
"1,2") is indistinguishable from a header and is read as one. Callers that
know better pass ``force_header``.

Author:
-------
Antoine Lemor
"""

import logging
from typing import Any, Optional, Sequence

from .models import Schema, HEADERLESS_LABEL_KEY, SYNTHETIC_COLUMN_PREFIX

logger = logging.getLogger(__name__)


def is_header_row(row: Sequence[Any]) -> bool:
    """True iff every cell is a string that is non-empty once stripped."""
    if not row:
        return False
    return all(isinstance(cell, str) and cell.strip() != '' for cell in row)


def synthetic_column_name(position: int) -> str:
    """Name of the column at 0-based ``position`` in a headerless table."""
    return f"{SYNTHETIC_COLUMN_PREFIX}{position + 1}"


def synthetic_column_position(name: str) -> Optional[int]:
    """0-based position encoded in a synthetic column name, or None."""
    if not isinstance(name, str) or not name.startswith(SYNTHETIC_COLUMN_PREFIX):
        return None
    suffix = name[len(SYNTHETIC_COLUMN_PREFIX):]
    if not suffix.isdigit() or int(suffix) < 1:
        return None
    return int(suffix) - 1


class SchemaInferer:
    """Infer a Schema from the first parsed row"""

    def __init__(self, force_header: Optional[bool] = None):
        self.force_header = force_header

    def infer(self, first_row: Optional[Sequence[Any]], width: Optional[int] = None) -> Schema:
        """
        Build the schema for a table.

        Args:
            first_row: Row 0 of the table, or None when the table has no rows
            width: Number of columns; defaults to the length of ``first_row``

        Returns:
            The inferred Schema (empty when there are no rows)
        """
        if first_row is None:
            logger.debug("No rows to infer a schema from")
            return Schema.empty()

        if self.force_header is None:
            has_header = is_header_row(first_row)
        else:
            has_header = self.force_header

        if has_header:
            names = ["" if cell is None else str(cell) for cell in first_row]
            selectable = tuple(names[1:])
            schema = Schema(
                has_header=True,
                label_column_name=names[0] if names else "",
                selectable_columns=selectable,
                default_column=selectable[0] if selectable else None,
            )
        else:
            column_count = width if width is not None else len(first_row)
            selectable = tuple(synthetic_column_name(i) for i in range(1, column_count))
            schema = Schema(
                has_header=False,
                label_column_name=HEADERLESS_LABEL_KEY,
                selectable_columns=selectable,
                default_column=synthetic_column_name(1),
            )

        logger.debug(
            f"Schema inferred: header={schema.has_header}, "
            f"label={schema.label_column_name!r}, columns={list(schema.selectable_columns)}"
        )
        return schema

    def infer_table(self, table) -> Schema:
        """Infer the schema of a parsed Table"""
        return self.infer(table.first_row, width=table.width if len(table) else None)
