from __future__ import annotations

import json

import pytest

from furiyomi.cli import main


def _run(capsys: pytest.CaptureFixture[str], argv: list[str]) -> object:
    assert main(argv) == 0
    return json.loads(capsys.readouterr().out)


def test_cli_classify(capsys: pytest.CaptureFixture[str]) -> None:
    out = _run(capsys, ["classify", "漢か、a"])
    assert [x["class"] for x in out] == ["kanji", "kana", "punctuation", "other"]


def test_cli_convert_full_width_with_source_map(capsys: pytest.CaptureFixture[str]) -> None:
    out = _run(capsys, ["convert", "ﾆｯﾎﾟﾝ", "--to", "full-width", "--source-map"])
    assert out == {"text": "ニッポン", "source_map": [1, 1, 2, 1]}


def test_cli_convert_katakana(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(capsys, ["convert", "ひらがな", "--to", "katakana"]) == {"text": "ヒラガナ"}


def test_cli_reading_absent_vs_empty(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(capsys, ["reading", "有り難う", "--mode", "romaji"]) == {"reading": None}
    assert _run(capsys, ["reading", "有り難う", "", "--mode", "romaji"]) == {"reading": ""}


def test_cli_furigana_inflected(capsys: pytest.CaptureFixture[str]) -> None:
    out = _run(capsys, ["furigana", "食べる", "たべる", "--source", "食べた"])
    assert out == [{"text": "食", "furigana": "た"}, {"text": "べ"}, {"text": "た"}]


def test_cli_furigana_html(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["furigana", "お祝い", "おいわい", "--html"]) == 0
    assert capsys.readouterr().out == "お<ruby>祝<rt>いわ</rt></ruby>い\n"


def test_cli_pitch(capsys: pytest.CaptureFixture[str]) -> None:
    out = _run(capsys, ["pitch", "はし", "1"])
    assert out == {
        "category": "atamadaka",
        "morae": [{"mora": "は", "high": True}, {"mora": "し", "high": False}],
    }


def test_cli_rejects_unknown_subcommand() -> None:
    with pytest.raises(SystemExit):
        main(["segment", "x"])
