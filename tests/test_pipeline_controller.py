#!/usr/bin/env python3
"""
PROJECT:
-------
CSVLangDetector

TITLE:
------
test_pipeline_controller.py

MAIN OBJECTIVE:
---------------
Pytest test suite for process() and DetectionSession.

MAIN FEATURES:
--------------
1) One-shot processing of CSV bytes
2) Parse errors leave the previous snapshot untouched
3) Cached table reuse across column changes
4) Stale completions are discarded by generation

Author:
-------
Antoine Lemor
"""

import asyncio

import pytest

from csv_lang_detector.errors import EmptyFileWarning, ParseError
from csv_lang_detector.pipelines.models import PipelineResult, Stats
from csv_lang_detector.pipelines.pipeline_controller import DetectionSession, process


def test_process_uses_default_column(sample_csv, classifier, settings):
    result = process(sample_csv, classifier=classifier, settings=settings)

    assert result.column == "text"
    assert len(result.results) == 2
    assert result.stats.rows == 3
    assert result.to_dict()["stats"] == {"rows": 3, "labels": 3, "languages": ["English", "French"]}


def test_process_raises_parse_error(classifier, settings):
    settings.data.encodings = ["utf-8"]

    with pytest.raises(ParseError):
        process(b"label,text\nA,\xff\xfe\xfd\n", classifier=classifier, settings=settings)


def test_process_keeps_rows_with_extra_fields(classifier, settings):
    data = b"label,text\nA,Hello world\nB,Hello there, friend\nC,Bonjour le monde\n"

    result = process(data, column="text", classifier=classifier, settings=settings)

    assert [r.label for r in result.results] == ["A", "B", "C"]
    assert result.stats.rows == 3
    assert result.stats.languages == {"English", "French"}



def test_process_single_column_headerless(classifier, settings):
    result = process(b"Hello world again\nBonjour le monde\n", classifier=classifier, settings=settings,
                     force_header=False)

    assert result.column == "Column 2"
    assert result.results == ()
    assert result.stats.rows == 2
    assert classifier.calls == []


def test_process_empty_file(classifier, settings):
    with pytest.warns(EmptyFileWarning):
        result = process(b"", classifier=classifier, settings=settings)

    assert result.column is None
    assert result.results == ()
    assert result.schema.selectable_columns == ()


def test_process_respects_preview_settings(classifier, settings):
    settings.language.preview_length = 5
    result = process(b"label,text\nA,Hello world\n", classifier=classifier, settings=settings)

    assert result.results[0].text == "Hello..."


def test_session_upload_then_select(sample_csv, classifier, settings):
    session = DetectionSession(classifier=classifier, settings=settings)

    schema = session.upload_bytes(sample_csv, file_name="reviews.csv")
    assert schema.selectable_columns == ("text",)
    assert session.selected_column == "text"
    assert session.result is None

    result = session.select_column("text")
    assert session.result is result
    assert result.stats.rows == 3
    assert not session.is_processing
    assert session.snapshot()["file_name"] == "reviews.csv"


def test_column_change_reuses_parsed_table(classifier, settings, monkeypatch):
    data = b"id,title,body\n1,Hello world today,Bonjour le monde\n"
    session = DetectionSession(classifier=classifier, settings=settings)
    session.upload_bytes(data)

    def fail_load(*args, **kwargs):
        raise AssertionError("table was parsed again")

    monkeypatch.setattr(session.parser, "load", fail_load)

    assert session.select_column("title").stats.languages == {"English"}
    assert session.select_column("body").stats.languages == {"French"}


def test_parse_error_keeps_previous_state(sample_csv, classifier, settings):
    settings.data.encodings = ["utf-8"]
    session = DetectionSession(classifier=classifier, settings=settings)
    session.upload_bytes(sample_csv)
    previous = session.select_column("text")

    assert session.upload_bytes(b"label,text\nA,\xff\xfe\xfd\n") is None
    assert session.error.startswith("Error parsing CSV:")
    assert session.result is previous
    assert session.schema.selectable_columns == ("text",)


def test_new_upload_replaces_results(sample_csv, classifier, settings):
    session = DetectionSession(classifier=classifier, settings=settings)
    session.upload_bytes(sample_csv)
    session.select_column("text")

    session.upload_bytes(b"key,comment,body\nk,Hola a todos amigos,x\n")

    assert session.result is None
    assert session.selected_column == "comment"
    assert session.error is None


def test_select_without_upload(classifier, settings):
    session = DetectionSession(classifier=classifier, settings=settings)

    assert session.select_column("text") is None
    assert session.result is None


def test_stale_commit_is_dropped(classifier, settings):
    session = DetectionSession(classifier=classifier, settings=settings)
    stale = session.begin_request()
    current = session.begin_request()
    fresh = PipelineResult(schema=None, column="b", stats=Stats(rows=1))

    assert not session.commit_result(stale, PipelineResult(schema=None, column="a"))
    assert session.result is None
    assert session.commit_result(current, fresh)
    assert session.result is fresh


def test_upload_file_missing(tmp_path, classifier, settings):
    session = DetectionSession(classifier=classifier, settings=settings)

    assert session.upload_file(tmp_path / "missing.csv") is None
    assert "Error parsing CSV" in session.error


def test_async_uploads_keep_latest(tmp_path, classifier, settings):
    first = tmp_path / "first.csv"
    first.write_bytes(b"label,old_column\nA,Hello world again\n")
    second = tmp_path / "second.csv"
    second.write_bytes(b"label,new_column\nA,Bonjour le monde\n")
    session = DetectionSession(classifier=classifier, settings=settings)

    async def scenario():
        return await asyncio.gather(
            session.upload_file_async(first),
            session.upload_file_async(second),
        )

    stale, latest = asyncio.run(scenario())

    assert stale is None
    assert latest.selectable_columns == ("new_column",)
    assert session.upload.file_name == "second.csv"


def test_async_selection(sample_csv, classifier, settings):
    session = DetectionSession(classifier=classifier, settings=settings)
    session.upload_bytes(sample_csv)

    result = asyncio.run(session.select_column_async("text"))

    assert session.result is result
    assert [r.label for r in result.results] == ["A", "B"]
