#!/usr/bin/env python3
"""
PROJECT:
-------
CSVLangDetector

TITLE:
------
language_detector.py

MAIN OBJECTIVE:
---------------
This script provides the language classifier used on every selected cell,
returning an ISO 639-3 code or the "und" sentinel when the text is too short
or too ambiguous to call.

Dependencies:
-------------
- lingua-language-detector (PRIMARY - deterministic, high accuracy)
- langid (FALLBACK)
- typing

MAIN FEATURES:
--------------
1) Short-text guard: texts under min_text_length characters are "und"
2) Lingua detection with optional minimum relative distance (abstains -> "und")
3) Confidence threshold below which detections become "und"
4) langid fallback normalised to ISO 639-3 codes
5) Total classify(): backend failures never escape, they yield "und"

Author:
-------
Antoine Lemor
"""

import logging
from enum import Enum
from typing import Optional, List, Dict, Any

from .language_codes import LanguageCodeResolver, UNDETERMINED_CODE

# Primary: lingua-language-detector (most accurate)
try:
    from lingua import Language, LanguageDetectorBuilder
    HAS_LINGUA = True
except ImportError:
    HAS_LINGUA = False
    Language = LanguageDetectorBuilder = None

# Fallback: langid
try:
    from langid.langid import LanguageIdentifier, model as langid_model
    HAS_LANGID = True
except ImportError:
    HAS_LANGID = False
    LanguageIdentifier = langid_model = None


class DetectionMethod(Enum):
    """Available language detection methods"""
    LINGUA = "lingua"
    LANGID = "langid"


class LanguageClassifier:
    """Classify a text into an ISO 639-3 code, or "und" when undecidable"""

    def __init__(self, method: DetectionMethod = DetectionMethod.LINGUA,
                 min_text_length: int = 10,
                 confidence_threshold: float = 0.0,
                 minimum_relative_distance: float = 0.0,
                 languages: Optional[List[str]] = None):
        """
        Initialize the language classifier

        Args:
            method: Detection backend to use (default: LINGUA)
            min_text_length: Stripped texts shorter than this are "und"
            confidence_threshold: Minimum confidence for a detection (0.0-1.0)
            minimum_relative_distance: Lingua distance below which it abstains
            languages: Restrict lingua to these Language names (e.g. "ENGLISH")
        """
        self.method = DetectionMethod(method)
        self.min_text_length = min_text_length
        self.confidence_threshold = confidence_threshold
        self.minimum_relative_distance = minimum_relative_distance
        self.languages = languages
        self.logger = logging.getLogger(__name__)

        self._check_available_libraries()

        self.lingua_detector = None
        self.langid_identifier = None
        if self.method == DetectionMethod.LINGUA:
            self.lingua_detector = self._build_lingua_detector()
        elif self.method == DetectionMethod.LANGID:
            self.langid_identifier = LanguageIdentifier.from_modelstring(langid_model, norm_probs=True)

    @classmethod
    def from_settings(cls, settings) -> "LanguageClassifier":
        """Build a classifier from the ``language`` section of Settings"""
        config = settings.language
        return cls(
            method=DetectionMethod(config.method),
            min_text_length=config.min_text_length,
            confidence_threshold=config.confidence_threshold,
            minimum_relative_distance=config.minimum_relative_distance,
        )

    def _check_available_libraries(self):
        """Check which language detection libraries are available"""
        if not HAS_LINGUA and not HAS_LANGID:
            self.method = None
            self.logger.warning(
                "No language detection libraries found. "
                "Install with: pip install lingua-language-detector"
            )
            return

        # Adjust method if requested library not available
        if self.method == DetectionMethod.LINGUA and not HAS_LINGUA:
            self.method = DetectionMethod.LANGID
            self.logger.warning("Lingua not available, falling back to langid")
        elif self.method == DetectionMethod.LANGID and not HAS_LANGID:
            self.method = DetectionMethod.LINGUA
            self.logger.warning("langid not available, falling back to lingua")

    def _build_lingua_detector(self):
        if self.languages:
            selected = [getattr(Language, name.upper()) for name in self.languages]
            builder = LanguageDetectorBuilder.from_languages(*selected)
        else:
            builder = LanguageDetectorBuilder.from_all_languages()
        if self.minimum_relative_distance > 0:
            builder = builder.with_minimum_relative_distance(self.minimum_relative_distance)
        detector = builder.build()
        self.logger.debug("Lingua detector initialized")
        return detector

    def classify(self, text: str) -> str:
        """Return the ISO 639-3 code of ``text`` or "und"."""
        return self.detect(text)['language']

    __call__ = classify

    def detect(self, text: str) -> Dict[str, Any]:
        """
        Detect language of text

        Args:
            text: Text to analyze

        Returns:
            Dictionary with language code, confidence, and method used
        """
        if not isinstance(text, str) or len(text.strip()) < self.min_text_length:
            return self._undetermined('too_short')

        text = text.strip()

        if self.method == DetectionMethod.LINGUA:
            result = self._detect_lingua(text)
        elif self.method == DetectionMethod.LANGID:
            result = self._detect_langid(text)
        else:
            result = self._undetermined('unavailable')

        if result['language'] != UNDETERMINED_CODE and result['confidence'] < self.confidence_threshold:
            return self._undetermined(f"{result['method']}+low_confidence", result['confidence'])

        return result

    def _undetermined(self, method: str, confidence: float = 0.0) -> Dict[str, Any]:
        return {
            'language': UNDETERMINED_CODE,
            'confidence': confidence,
            'method': method,
        }

    def _detect_lingua(self, text: str) -> Dict[str, Any]:
        """Detect language using lingua library"""
        try:
            detected = self.lingua_detector.detect_language_of(text)
            if detected is None:
                return self._undetermined('lingua_abstained')

            confidence = self.lingua_detector.compute_language_confidence(text, detected)
            return {
                'language': detected.iso_code_639_3.name.lower(),
                'confidence': float(confidence),
                'method': 'lingua',
            }
        except Exception as e:
            self.logger.debug(f"Lingua detection failed: {e}")

        return self._undetermined('lingua_failed')

    def _detect_langid(self, text: str) -> Dict[str, Any]:
        """Detect language using langid library"""
        try:
            lang, confidence = self.langid_identifier.classify(text)
            return {
                'language': LanguageCodeResolver.to_iso639_3(lang),
                'confidence': float(confidence),
                'method': 'langid',
            }
        except Exception as e:
            self.logger.debug(f"Langid failed: {e}")

        return self._undetermined('langid_failed')

    def classify_batch(self, texts: List[str]) -> List[str]:
        """Classify texts in order"""
        return [self.classify(text) for text in texts]
