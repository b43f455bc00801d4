#!/usr/bin/env python3
"""
PROJECT:
-------
CSVLangDetector

TITLE:
------
tabular_parser.py

MAIN OBJECTIVE:
---------------
This script turns raw CSV bytes into an ordered, immutable table of string
cells, either as rows of cells or as header-keyed records.

Dependencies:
-------------
- io
- logging
- warnings
- pathlib
- pandas

MAIN FEATURES:
--------------
1) Decode bytes trying several encodings in order
2) Tokenise with pandas while keeping every cell as a string
3) Array-of-arrays mode and header-keyed array-of-mappings mode
4) Rows longer than row 0 truncated to its width instead of rejected
5) Undecodable or malformed content reported as ParseError, empty files as
   EmptyFileWarning

Author:
-------
Antoine Lemor
"""

import io
import logging
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

import pandas as pd

from ..errors import ParseError, EmptyFileWarning

Cell = Optional[str]
Row = Tuple[Cell, ...]

DEFAULT_ENCODINGS = ("utf-8-sig", "utf-8", "cp1252", "latin-1")


@dataclass(frozen=True)
class Table:
    """Parsed CSV content. Row 0 is kept whether or not it is a header."""

    rows: Tuple[Row, ...]
    source: Optional[str] = None

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    @property
    def first_row(self) -> Optional[Row]:
        return self.rows[0] if self.rows else None

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    def header_keys(self) -> List[str]:
        first = self.first_row or ()
        return ["" if cell is None else cell for cell in first]

    def records(self) -> List[Dict[str, Cell]]:
        """Data rows (row 0 excluded) keyed by the values of row 0."""
        keys = self.header_keys()
        return [dict(zip(keys, row)) for row in self.rows[1:]]


class TabularParser:
    """CSV tokenizer built on pandas"""

    def __init__(self, encodings: Optional[Sequence[str]] = None, delimiter: str = ","):
        self.encodings = tuple(encodings or DEFAULT_ENCODINGS)
        self.delimiter = delimiter
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings) -> "TabularParser":
        return cls(encodings=settings.data.encodings, delimiter=settings.data.delimiter)

    def _decode(self, data: Union[bytes, str], source: Optional[str]) -> Tuple[str, str]:
        if isinstance(data, str):
            return data, "str"

        for enc in self.encodings:
            try:
                return data.decode(enc), enc
            except UnicodeDecodeError:
                continue

        raise ParseError(
            f"Could not decode file with any of: {', '.join(self.encodings)}",
            source=source
        )

    def load(self, data: Union[bytes, str], source: Optional[str] = None) -> Table:
        """
        Tokenise CSV content into a Table.

        Parameters
        ----------
        data : bytes or str
            Raw file content
        source : str, optional
            File name, used in messages only

        Returns
        -------
        Table
            All rows, including row 0; missing trailing cells are None

        Raises
        ------
        ParseError
            When the content cannot be decoded or tokenised
        """
        text, encoding = self._decode(data, source)
        read_options = dict(
            header=None,
            dtype=str,
            keep_default_na=False,
            sep=self.delimiter,
            skip_blank_lines=True,
            engine='python',
        )
        overflow_rows = []

        try:
            # Row 0 fixes the column count; longer rows are cut back to it
            width = len(pd.read_csv(io.StringIO(text), nrows=1, **read_options).columns)

            def truncate_row(fields: List[str]) -> List[str]:
                overflow_rows.append(len(fields))
                return fields[:width]

            df = pd.read_csv(io.StringIO(text), on_bad_lines=truncate_row, **read_options)
        except pd.errors.EmptyDataError:
            message = f"{source or 'CSV content'} contains no rows"
            self.logger.warning(message)
            warnings.warn(message, EmptyFileWarning, stacklevel=2)
            return Table(rows=(), source=source)
        except (pd.errors.ParserError, ValueError) as e:
            self.logger.error(f"Error parsing {source or 'CSV content'}: {e}")
            raise ParseError(str(e), source=source) from e

        if overflow_rows:
            self.logger.warning(
                f"{len(overflow_rows)} row(s) in {source or 'CSV content'} had more than "
                f"{width} fields; extra fields were dropped"
            )

        rows = tuple(
            tuple(cell if isinstance(cell, str) else None for cell in record)
            for record in df.itertuples(index=False, name=None)
        )
        self.logger.debug(f"Parsed {len(rows)} rows ({encoding}) from {source or 'CSV content'}")
        return Table(rows=rows, source=source)

    def load_file(self, file_path: Union[str, Path]) -> Table:
        """Read and tokenise a CSV file from disk"""
        file_path = Path(file_path)
        try:
            data = file_path.read_bytes()
        except OSError as e:
            raise ParseError(f"Could not read {file_path}: {e}", source=str(file_path)) from e
        return self.load(data, source=file_path.name)

    def parse(self, data: Union[bytes, str], header: bool = False) -> Union[List[List[Cell]], List[Dict[str, Cell]]]:
        """
        Parse CSV content.

        With ``header=False`` every row is returned as a list of cells. With
        ``header=True`` row 0 provides the keys and the remaining rows are
        returned as mappings.
        """
        table = self.load(data)
        if header:
            return table.records()
        return [list(row) for row in table.rows]
