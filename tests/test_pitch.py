from __future__ import annotations

from furiyomi.pitch import (
    MoraPitch,
    get_kana_morae,
    get_pitch_category,
    get_pitch_pattern,
    is_mora_pitch_high,
)


def test_is_mora_pitch_high_table() -> None:
    # (mora index, accent position) -> high
    expected = {
        (0, 0): False,
        (1, 0): True,
        (2, 0): True,
        (3, 0): True,
        (0, 1): True,
        (1, 1): False,
        (2, 1): False,
        (3, 1): False,
        (0, 2): True,
        (1, 2): True,
        (2, 2): False,
        (3, 2): False,
        (0, 3): True,
        (1, 3): True,
        (2, 3): True,
        (3, 3): False,
        (0, 4): True,
        (1, 4): True,
        (2, 4): True,
        (3, 4): True,
    }
    for (mora_index, position), high in expected.items():
        assert is_mora_pitch_high(mora_index, position) is high, (mora_index, position)


def test_get_kana_morae() -> None:
    assert get_kana_morae("かこ") == ["か", "こ"]
    assert get_kana_morae("かっこ") == ["か", "っ", "こ"]
    assert get_kana_morae("カコ") == ["カ", "コ"]
    assert get_kana_morae("カッコ") == ["カ", "ッ", "コ"]
    assert get_kana_morae("コート") == ["コ", "ー", "ト"]
    assert get_kana_morae("ちゃんと") == ["ちゃ", "ん", "と"]
    assert get_kana_morae("とうきょう") == ["と", "う", "きょ", "う"]
    assert get_kana_morae("ぎゅう") == ["ぎゅ", "う"]
    assert get_kana_morae("ディスコ") == ["ディ", "ス", "コ"]


def test_get_kana_morae_concatenates_back() -> None:
    for text in ["キャット", "しゅっちょう", "ヴァイオリン", "ゃあ", ""]:
        assert "".join(get_kana_morae(text)) == text
    assert get_kana_morae("ゃあ") == ["ゃ", "あ"]
    assert get_kana_morae("") == []


def test_get_pitch_pattern() -> None:
    assert get_pitch_pattern("はし", 1) == [
        MoraPitch(mora="は", high=True),
        MoraPitch(mora="し", high=False),
    ]
    assert [m.high for m in get_pitch_pattern("さくら", 0)] == [False, True, True]


def test_get_pitch_category() -> None:
    assert get_pitch_category("さくら", 0) == "heiban"
    assert get_pitch_category("はし", 1) == "atamadaka"
    assert get_pitch_category("たまご", 2) == "nakadaka"
    assert get_pitch_category("おとこ", 3) == "odaka"
    assert get_pitch_category("きゃく", 2) == "odaka"
