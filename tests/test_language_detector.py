#!/usr/bin/env python3
"""
PROJECT:
-------
CSVLangDetector

TITLE:
------
test_language_detector.py

MAIN OBJECTIVE:
---------------
Pytest test suite for the LanguageClassifier short-text guard, thresholds and
backends.

Author:
-------
Antoine Lemor
"""

from unittest.mock import MagicMock

import pytest

from csv_lang_detector.utils.language_detector import DetectionMethod, LanguageClassifier


@pytest.fixture
def lingua_classifier():
    pytest.importorskip("lingua")
    return LanguageClassifier(method=DetectionMethod.LINGUA)


def test_short_text_is_undetermined(lingua_classifier):
    assert lingua_classifier.classify("Hi") == "und"
    assert lingua_classifier.classify("   ok    ") == "und"
    assert lingua_classifier.detect("")["method"] == "too_short"


def test_non_string_is_undetermined(lingua_classifier):
    assert lingua_classifier.classify(None) == "und"


def test_lingua_detects_common_languages(lingua_classifier):
    assert lingua_classifier.classify("The quick brown fox jumps over the lazy dog and runs away") == "eng"
    assert lingua_classifier.classify("Le renard brun rapide saute par-dessus le chien paresseux") == "fra"


def test_low_confidence_becomes_undetermined(lingua_classifier):
    lingua_classifier.lingua_detector = MagicMock()
    lingua_classifier.lingua_detector.detect_language_of.return_value = MagicMock(
        **{"iso_code_639_3.name": "ENG"}
    )
    lingua_classifier.lingua_detector.compute_language_confidence.return_value = 0.2
    lingua_classifier.confidence_threshold = 0.5

    result = lingua_classifier.detect("some ambiguous sentence here")

    assert result["language"] == "und"
    assert result["method"] == "lingua+low_confidence"


def test_abstention_is_undetermined(lingua_classifier):
    lingua_classifier.lingua_detector = MagicMock()
    lingua_classifier.lingua_detector.detect_language_of.return_value = None

    assert lingua_classifier.classify("some ambiguous sentence here") == "und"


def test_backend_failure_is_undetermined(lingua_classifier):
    lingua_classifier.lingua_detector = MagicMock()
    lingua_classifier.lingua_detector.detect_language_of.side_effect = RuntimeError("boom")

    assert lingua_classifier.classify("a perfectly normal sentence") == "und"


def test_langid_codes_are_normalised():
    pytest.importorskip("langid")
    classifier = LanguageClassifier(method=DetectionMethod.LANGID)
    classifier.langid_identifier = MagicMock()
    classifier.langid_identifier.classify.return_value = ("fr", 0.99)

    assert classifier.classify("Bonjour tout le monde, comment allez-vous") == "fra"


def test_from_settings(settings):
    pytest.importorskip("langid")
    settings.language.method = "langid"
    settings.language.min_text_length = 3

    classifier = LanguageClassifier.from_settings(settings)

    assert classifier.method == DetectionMethod.LANGID
    assert classifier.min_text_length == 3


def test_classify_batch_keeps_order(lingua_classifier):
    assert lingua_classifier.classify_batch(["Hi", None, ""]) == ["und", "und", "und"]
