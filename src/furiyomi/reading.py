from __future__ import annotations

from enum import Enum

from furiyomi.kana import (
    convert_hiragana_to_katakana,
    convert_katakana_to_hiragana,
    convert_to_romaji,
)
from furiyomi.romaji import Romanizer
from furiyomi.script import contains_kanji


class ReadingMode(str, Enum):
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    ROMAJI = "romaji"
    NONE = "none"
    DEFAULT = "default"


def parse_reading_mode(mode: ReadingMode | str) -> ReadingMode:
    try:
        return ReadingMode(mode)
    except ValueError:
        raise ValueError(
            f"Unknown reading mode: {mode!r} "
            f"(expected one of {', '.join(m.value for m in ReadingMode)})."
        ) from None


def convert_reading(
    expression: str,
    reading: str | None,
    mode: ReadingMode | str,
    *,
    romanizer: Romanizer | None = None,
) -> str | None:
    """
    Render `reading` for display in `mode`.

    `reading` is three-valued: None (absent), "" (explicitly empty) or populated.
    Modes that cannot produce text from an empty reading hand back the same kind
    they were given, so callers can still tell "omit" from "render blank".
    """
    mode = parse_reading_mode(mode)
    has_reading = reading is not None and reading != ""

    if mode is ReadingMode.NONE:
        return None
    if mode is ReadingMode.DEFAULT:
        return reading
    if mode is ReadingMode.HIRAGANA:
        return convert_katakana_to_hiragana(reading) if has_reading else ""
    if mode is ReadingMode.KATAKANA:
        return convert_hiragana_to_katakana(reading) if has_reading else ""

    # romaji
    if has_reading:
        return convert_to_romaji(reading, romanizer=romanizer)
    if not contains_kanji(expression):
        # The expression is itself phonetic.
        return convert_to_romaji(expression, romanizer=romanizer)
    return reading
