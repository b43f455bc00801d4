#!/usr/bin/env python3
"""
PROJECT:
-------
CSVLangDetector

TITLE:
------
test_schema_inference.py

MAIN OBJECTIVE:
---------------
Pytest test suite for header detection and selectable column naming.

Author:
-------
Antoine Lemor
"""

import pytest

from csv_lang_detector.parsers.tabular_parser import TabularParser
from csv_lang_detector.pipelines.schema_inference import (
    SchemaInferer,
    is_header_row,
    synthetic_column_name,
    synthetic_column_position,
)


@pytest.mark.parametrize(
    "row, expected",
    [
        (["label", "text"], True),
        (["  id ", "body", "notes"], True),
        (["label", ""], False),
        (["label", "   "], False),
        (["label", None], False),
        (["label", 3], False),
        ([], False),
    ],
)
def test_is_header_row(row, expected):
    assert is_header_row(row) is expected


def test_header_schema_excludes_label_column():
    schema = SchemaInferer().infer(["id", "text", "comment"])

    assert schema.has_header
    assert schema.label_column_name == "id"
    assert schema.selectable_columns == ("text", "comment")
    assert schema.default_column == "text"


def test_single_column_header_has_no_default():
    schema = SchemaInferer().infer(["id"])

    assert schema.has_header
    assert schema.selectable_columns == ()
    assert schema.default_column is None


def test_headerless_schema_uses_one_based_names():
    schema = SchemaInferer().infer(["1", "", "x", "y"])

    assert not schema.has_header
    assert schema.label_column_name == "0"
    assert schema.selectable_columns == ("Column 2", "Column 3", "Column 4")
    assert schema.default_column == "Column 2"



def test_single_column_headerless_defaults_to_column_2():
    schema = SchemaInferer(force_header=False).infer(["only"])

    assert schema.selectable_columns == ()
    assert schema.default_column == "Column 2"


def test_empty_table_gives_empty_schema():
    schema = SchemaInferer().infer(None)

    assert schema.selectable_columns == ()
    assert schema.default_column is None
    assert schema.is_empty


def test_numeric_looking_first_row_reads_as_header():
    # Known limitation: "x,y" / "1,2" cannot be told apart from a header
    table = TabularParser().load(b"x,y\n1,2\n")
    schema = SchemaInferer().infer_table(table)

    assert schema.has_header
    assert schema.selectable_columns == ("y",)


def test_force_header_override():
    table = TabularParser().load(b"x,y\n1,2\n")
    schema = SchemaInferer(force_header=False).infer_table(table)

    assert not schema.has_header
    assert schema.selectable_columns == ("Column 2",)


def test_synthetic_names_round_trip_positions():
    assert synthetic_column_name(1) == "Column 2"
    assert synthetic_column_position("Column 2") == 1
    assert synthetic_column_position("Column 0") is None
    assert synthetic_column_position("text") is None
