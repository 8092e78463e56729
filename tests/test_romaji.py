from __future__ import annotations

import pytest

from furiyomi.romaji import (
    KakasiRomanizer,
    build_romanizer,
    get_default_romanizer,
)


def test_build_romanizer_aliases() -> None:
    assert isinstance(build_romanizer("pykakasi"), KakasiRomanizer)
    assert isinstance(build_romanizer(" Default "), KakasiRomanizer)


def test_build_romanizer_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown romanizer"):
        build_romanizer("wanakana")


def test_default_romanizer_is_shared() -> None:
    assert get_default_romanizer() is get_default_romanizer()


def test_kakasi_to_romaji() -> None:
    r = KakasiRomanizer()
    assert r.to_romaji("ありがとう") == "arigatou"
    assert r.to_romaji("チカラ") == "chikara"
    assert r.to_romaji("") == ""


def test_kakasi_match_kana_prefix() -> None:
    r = KakasiRomanizer()
    assert r.match_kana_prefix("chikara") == ("ち", 3)
    assert r.match_kana_prefix("kara") == ("か", 2)
    assert r.match_kana_prefix("de") == ("で", 2)
    assert r.match_kana_prefix("a") == ("あ", 1)
    assert r.match_kana_prefix("bcd") is None
    assert r.match_kana_prefix("j") is None


def test_kakasi_match_kana_prefix_only_doubles_repeated_consonants() -> None:
    r = KakasiRomanizer()
    assert r.match_kana_prefix("kka") == ("っか", 3)
    assert r.match_kana_prefix("cde") is None
    assert r.match_kana_prefix("cdefghij") is None
    assert r.match_kana_prefix("ghij") is None
    assert r.match_kana_prefix("c") is None


def test_kakasi_match_kana_prefix_syllabic_n() -> None:
    r = KakasiRomanizer()
    assert r.match_kana_prefix("nn") == ("ん", 2)
    assert r.match_kana_prefix("nnk") == ("ん", 2)
    assert r.match_kana_prefix("nna") == ("ん", 1)
    assert r.match_kana_prefix("n") == ("ん", 1)
