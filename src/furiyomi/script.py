from __future__ import annotations

from enum import Enum


class ScriptClass(str, Enum):
    KANJI = "kanji"
    KANA = "kana"
    PUNCTUATION = "punctuation"
    OTHER = "other"


ITERATION_MARK = 0x3005  # 々

# Inclusive (start, end) code point ranges.
KANJI_RANGES: tuple[tuple[int, int], ...] = (
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0x3400, 0x4DBF),  # Extension A
    (0x20000, 0x2A6DF),  # Extension B
    (0x2A700, 0x2B73F),  # Extension C
    (0x2B740, 0x2B81F),  # Extension D
    (0x2B820, 0x2CEAF),  # Extension E
    (0x2CEB0, 0x2EBEF),  # Extension F
    (0x30000, 0x3134F),  # Extension G
    (0xF900, 0xFAFF),  # CJK Compatibility Ideographs
    (0x2F800, 0x2FA1F),  # CJK Compatibility Ideographs Supplement
)

KANA_RANGES: tuple[tuple[int, int], ...] = (
    (0x3040, 0x309F),  # Hiragana
    (0x30A0, 0x30FF),  # Katakana (small forms, prolonged sound mark)
    (0x31F0, 0x31FF),  # Katakana Phonetic Extensions
)

# Other Japanese characters: punctuation, half-width and full-width forms.
PUNCTUATION_RANGES: tuple[tuple[int, int], ...] = (
    (0x3000, 0x303F),  # CJK Symbols and Punctuation (includes 々)
    (0xFF61, 0xFF9F),  # Half-width kana punctuation and katakana
    (0xFF01, 0xFF60),  # Full-width digits, Latin letters and punctuation
    (0xFFE0, 0xFFEE),  # Full-width currency and symbols
)


def _in_ranges(cp: int, ranges: tuple[tuple[int, int], ...]) -> bool:
    for start, end in ranges:
        if start <= cp <= end:
            return True
    return False


def classify_code_point(cp: int) -> ScriptClass:
    if _in_ranges(cp, KANJI_RANGES):
        return ScriptClass.KANJI
    if _in_ranges(cp, KANA_RANGES):
        return ScriptClass.KANA
    if _in_ranges(cp, PUNCTUATION_RANGES):
        return ScriptClass.PUNCTUATION
    return ScriptClass.OTHER


def is_code_point_kanji(cp: int) -> bool:
    return classify_code_point(cp) is ScriptClass.KANJI


def is_code_point_kana(cp: int) -> bool:
    return classify_code_point(cp) is ScriptClass.KANA


def is_code_point_japanese(cp: int) -> bool:
    return cp == ITERATION_MARK or classify_code_point(cp) is not ScriptClass.OTHER


def is_string_entirely_kana(text: str) -> bool:
    """True iff `text` is non-empty and every character is hiragana or katakana."""
    if not text:
        return False
    return all(is_code_point_kana(ord(ch)) for ch in text)


def is_string_partially_japanese(text: str) -> bool:
    return any(is_code_point_japanese(ord(ch)) for ch in text)


def contains_kanji(text: str) -> bool:
    return any(is_code_point_kanji(ord(ch)) for ch in text)
