"""Shared fixtures for the CSVLangDetector test-suite."""

import logging

import pytest

from csv_lang_detector.config.settings import Settings


class KeywordClassifier:
    """Deterministic stand-in for the language backend."""

    KEYWORDS = {
        'hello': 'eng',
        'the': 'eng',
        'bonjour': 'fra',
        'merci': 'fra',
        'hola': 'spa',
        'guten': 'deu',
        'xyzzy': 'zzz',  # not in the name table
    }

    def __init__(self, min_text_length=10):
        self.min_text_length = min_text_length
        self.calls = []

    def classify(self, text):
        self.calls.append(text)
        if len(text.strip()) < self.min_text_length:
            return 'und'
        lowered = text.lower()
        for keyword, code in self.KEYWORDS.items():
            if keyword in lowered.split():
                return code
        return 'und'


@pytest.fixture
def classifier():
    return KeywordClassifier()


@pytest.fixture
def settings(tmp_path):
    return Settings(config_file=str(tmp_path / "config.json"))


@pytest.fixture
def sample_csv():
    return b"label,text\nA,Hello world\nB,Bonjour le monde\nC,\n"


@pytest.fixture(autouse=True)
def restore_package_logger():
    package_logger = logging.getLogger("csv_lang_detector")
    handlers, propagate, level = package_logger.handlers[:], package_logger.propagate, package_logger.level
    yield
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers = handlers
    package_logger.propagate = propagate
    package_logger.setLevel(level)
