#!/usr/bin/env python3
"""
PROJECT:
-------
CSVLangDetector

TITLE:
------
language_codes.py

MAIN OBJECTIVE:
---------------
Translate language codes returned by the classifier into human-readable
names, with a reserved sentinel for undetermined detections.

Dependencies:
-------------
- typing

MAIN FEATURES:
--------------
1) Fixed ISO 639-3 to English name reference table
2) "und" always resolves to "Undetermined"
3) Unknown codes pass through unchanged (never raises)
4) ISO 639-1 to ISO 639-3 normalisation for two-letter backends

Author:
-------
Antoine Lemor
"""

from typing import Dict, Optional

UNDETERMINED_CODE = "und"
UNDETERMINED_NAME = "Undetermined"


class LanguageCodeResolver:
    """Pure lookup from language code to display name."""

    # ISO 639-3 codes mapping
    LANGUAGE_NAMES: Dict[str, str] = {
        'afr': 'Afrikaans',
        'amh': 'Amharic',
        'ara': 'Arabic',
        'arb': 'Standard Arabic',
        'aze': 'Azerbaijani',
        'azj': 'North Azerbaijani',
        'bel': 'Belarusian',
        'ben': 'Bengali',
        'bos': 'Bosnian',
        'bul': 'Bulgarian',
        'cat': 'Catalan',
        'ces': 'Czech',
        'cmn': 'Mandarin Chinese',
        'cym': 'Welsh',
        'dan': 'Danish',
        'deu': 'German',
        'ell': 'Greek',
        'eng': 'English',
        'epo': 'Esperanto',
        'est': 'Estonian',
        'eus': 'Basque',
        'fas': 'Persian',
        'fin': 'Finnish',
        'fra': 'French',
        'gle': 'Irish',
        'guj': 'Gujarati',
        'hau': 'Hausa',
        'heb': 'Hebrew',
        'hin': 'Hindi',
        'hrv': 'Croatian',
        'hun': 'Hungarian',
        'hye': 'Armenian',
        'ibo': 'Igbo',
        'ind': 'Indonesian',
        'isl': 'Icelandic',
        'ita': 'Italian',
        'jpn': 'Japanese',
        'kan': 'Kannada',
        'kat': 'Georgian',
        'kaz': 'Kazakh',
        'khm': 'Khmer',
        'kor': 'Korean',
        'lat': 'Latin',
        'lav': 'Latvian',
        'lit': 'Lithuanian',
        'lug': 'Ganda',
        'mal': 'Malayalam',
        'mar': 'Marathi',
        'mkd': 'Macedonian',
        'mon': 'Mongolian',
        'mri': 'Maori',
        'msa': 'Malay',
        'mya': 'Burmese',
        'nep': 'Nepali',
        'nld': 'Dutch',
        'nno': 'Norwegian Nynorsk',
        'nob': 'Norwegian Bokmål',
        'nor': 'Norwegian',
        'pan': 'Punjabi',
        'pes': 'Iranian Persian',
        'pol': 'Polish',
        'por': 'Portuguese',
        'ron': 'Romanian',
        'rus': 'Russian',
        'sin': 'Sinhala',
        'slk': 'Slovak',
        'slv': 'Slovenian',
        'sna': 'Shona',
        'som': 'Somali',
        'sot': 'Sotho',
        'spa': 'Spanish',
        'sqi': 'Albanian',
        'srp': 'Serbian',
        'swa': 'Swahili',
        'swe': 'Swedish',
        'tam': 'Tamil',
        'tel': 'Telugu',
        'tgl': 'Tagalog',
        'tha': 'Thai',
        'tsn': 'Tswana',
        'tso': 'Tsonga',
        'tur': 'Turkish',
        'ukr': 'Ukrainian',
        'urd': 'Urdu',
        'uzb': 'Uzbek',
        'vie': 'Vietnamese',
        'xho': 'Xhosa',
        'yor': 'Yoruba',
        'zho': 'Chinese',
        'zul': 'Zulu',
    }

    # ISO 639-1 -> ISO 639-3, for detectors that only speak two-letter codes
    ISO_639_1_TO_3: Dict[str, str] = {
        'af': 'afr', 'am': 'amh', 'ar': 'ara', 'az': 'aze', 'be': 'bel',
        'bg': 'bul', 'bn': 'ben', 'bs': 'bos', 'ca': 'cat', 'cs': 'ces',
        'cy': 'cym', 'da': 'dan', 'de': 'deu', 'el': 'ell', 'en': 'eng',
        'eo': 'epo', 'es': 'spa', 'et': 'est', 'eu': 'eus', 'fa': 'fas',
        'fi': 'fin', 'fr': 'fra', 'ga': 'gle', 'gu': 'guj', 'ha': 'hau',
        'he': 'heb', 'hi': 'hin', 'hr': 'hrv', 'hu': 'hun', 'hy': 'hye',
        'id': 'ind', 'ig': 'ibo', 'is': 'isl', 'it': 'ita', 'ja': 'jpn',
        'ka': 'kat', 'kk': 'kaz', 'km': 'khm', 'kn': 'kan', 'ko': 'kor',
        'la': 'lat', 'lg': 'lug', 'lt': 'lit', 'lv': 'lav', 'mi': 'mri',
        'mk': 'mkd', 'ml': 'mal', 'mn': 'mon', 'mr': 'mar', 'ms': 'msa',
        'my': 'mya', 'nb': 'nob', 'ne': 'nep', 'nl': 'nld', 'nn': 'nno',
        'no': 'nor', 'pa': 'pan', 'pl': 'pol', 'pt': 'por', 'ro': 'ron',
        'ru': 'rus', 'si': 'sin', 'sk': 'slk', 'sl': 'slv', 'sn': 'sna',
        'so': 'som', 'sq': 'sqi', 'sr': 'srp', 'st': 'sot', 'sv': 'swe',
        'sw': 'swa', 'ta': 'tam', 'te': 'tel', 'th': 'tha', 'tl': 'tgl',
        'tn': 'tsn', 'tr': 'tur', 'ts': 'tso', 'uk': 'ukr', 'ur': 'urd',
        'uz': 'uzb', 'vi': 'vie', 'xh': 'xho', 'yo': 'yor', 'zh': 'zho',
        'zu': 'zul',
    }

    def __init__(self, extra_names: Optional[Dict[str, str]] = None):
        self._names = dict(self.LANGUAGE_NAMES)
        if extra_names:
            self._names.update(extra_names)

    def resolve(self, code: str) -> str:
        """Return the display name for ``code``, or ``code`` itself when unknown."""
        if code == UNDETERMINED_CODE:
            return UNDETERMINED_NAME
        return self._names.get(code, code)

    __call__ = resolve

    def is_known(self, code: str) -> bool:
        return code == UNDETERMINED_CODE or code in self._names

    @classmethod
    def to_iso639_3(cls, code: str) -> str:
        """Normalise a two-letter code (``en``, ``pt-BR``) to ISO 639-3; other values pass through."""
        if not code:
            return UNDETERMINED_CODE
        lowered = code.strip().lower()
        primary = lowered.replace("_", "-").split("-")[0]
        if len(primary) == 2:
            return cls.ISO_639_1_TO_3.get(primary, primary)
        return lowered


_default_resolver = LanguageCodeResolver()


def get_language_name(code: str) -> str:
    """Module-level shortcut around the default resolver"""
    return _default_resolver.resolve(code)
