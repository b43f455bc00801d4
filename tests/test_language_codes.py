import pytest

from csv_lang_detector.utils.language_codes import (
    LanguageCodeResolver,
    get_language_name,
)


@pytest.mark.parametrize(
    "code, name",
    [
        ("eng", "English"),
        ("fra", "French"),
        ("cmn", "Mandarin Chinese"),
        ("und", "Undetermined"),
        ("qqq", "qqq"),
        ("", ""),
    ],
)
def test_resolve(code, name):
    assert LanguageCodeResolver().resolve(code) == name


def test_undetermined_cannot_be_overridden():
    resolver = LanguageCodeResolver(extra_names={"und": "Unknown", "sco": "Scots"})

    assert resolver.resolve("und") == "Undetermined"
    assert resolver.resolve("sco") == "Scots"


def test_module_shortcut():
    assert get_language_name("deu") == "German"


@pytest.mark.parametrize(
    "code, expected",
    [
        ("en", "eng"),
        ("pt-BR", "por"),
        ("zh_CN", "zho"),
        ("eng", "eng"),
        ("xx", "xx"),
        ("", "und"),
    ],
)
def test_to_iso639_3(code, expected):
    assert LanguageCodeResolver.to_iso639_3(code) == expected


def test_is_known():
    resolver = LanguageCodeResolver()

    assert resolver.is_known("und")
    assert resolver.is_known("fra")
    assert not resolver.is_known("zzz")
