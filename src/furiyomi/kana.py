from __future__ import annotations

import jaconv

from furiyomi.romaji import Romanizer, get_default_romanizer
from furiyomi.script import is_code_point_kana
from furiyomi.source_map import SourceMap

__all__ = [
    "convert_katakana_to_hiragana",
    "convert_hiragana_to_katakana",
    "convert_numeric_to_full_width",
    "convert_half_width_kana_to_full_width",
    "convert_alphabetic_to_kana",
    "convert_to_romaji",
]

# Katakana [ァ..ヶ] <-> Hiragana [ぁ..ゖ] via fixed offset.
_KATAKANA_START = 0x30A1
_KATAKANA_END = 0x30F6
_HIRAGANA_START = 0x3041
_HIRAGANA_END = 0x3096
_KANA_OFFSET = _KATAKANA_START - _HIRAGANA_START

_FULL_WIDTH_DIGIT_OFFSET = 0xFF10 - ord("0")

_HALF_WIDTH_START = 0xFF61
_HALF_WIDTH_END = 0xFF9F
# Half-width (semi-)voiced sound marks and their spacing full-width forms.
_HALF_WIDTH_MARKS = {"\uff9e": "\u309b", "\uff9f": "\u309c"}  # ﾞ -> ゛, ﾟ -> ゜


def _shift(text: str, start: int, end: int, offset: int) -> str:
    out: list[str] = []
    for ch in text:
        o = ord(ch)
        if start <= o <= end:
            out.append(chr(o + offset))
        else:
            out.append(ch)
    return "".join(out)


def convert_katakana_to_hiragana(text: str) -> str:
    return _shift(text, _KATAKANA_START, _KATAKANA_END, -_KANA_OFFSET)


def convert_hiragana_to_katakana(text: str) -> str:
    return _shift(text, _HIRAGANA_START, _HIRAGANA_END, _KANA_OFFSET)


def convert_numeric_to_full_width(text: str) -> str:
    return _shift(text, ord("0"), ord("9"), _FULL_WIDTH_DIGIT_OFFSET)


def _is_half_width(ch: str) -> bool:
    return _HALF_WIDTH_START <= ord(ch) <= _HALF_WIDTH_END


def convert_half_width_kana_to_full_width(
    text: str, source_map: SourceMap | None = None
) -> str:
    """
    Convert half-width katakana (and kana punctuation) to full width.

    A base followed by ﾞ/ﾟ becomes one voiced/semi-voiced character when such a
    character exists (ｶﾞ -> ガ); `source_map` then records 2 for it. Marks that do
    not merge become the spacing full-width ゛/゜.
    """
    out: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if not _is_half_width(ch):
            out.append(ch)
            i += 1
            continue

        nxt = text[i + 1] if i + 1 < len(text) else ""
        if nxt in _HALF_WIDTH_MARKS and ch not in _HALF_WIDTH_MARKS:
            merged = jaconv.h2z(ch + nxt)
            if len(merged) == 1:
                if source_map is not None:
                    source_map.combine(len(out), 1)
                out.append(merged)
                i += 2
                continue

        # jaconv leaves unmerged marks half-width.
        out.append(_HALF_WIDTH_MARKS.get(ch) or jaconv.h2z(ch))
        i += 1
    return "".join(out)


def _is_ascii_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def _convert_alphabetic_run(
    run: str,
    *,
    romanizer: Romanizer,
    source_map: SourceMap | None,
    start: int,
) -> str:
    out: list[str] = []
    pos = start
    i = 0
    while i < len(run):
        match = romanizer.match_kana_prefix(run[i:])
        if match is None:
            out.append(run[i])
            pos += 1
            i += 1
            continue

        kana, consumed = match
        if source_map is not None:
            source_map.combine(pos, consumed - 1)
            if len(kana) > 1:
                source_map.insert(pos + 1, *([0] * (len(kana) - 1)))
        out.append(kana)
        pos += len(kana)
        i += consumed
    return "".join(out)


def convert_alphabetic_to_kana(
    text: str,
    source_map: SourceMap | None = None,
    *,
    romanizer: Romanizer | None = None,
) -> str:
    """
    Convert runs of Latin letters to hiragana, mora by mora.

    Upper case is folded to lower case. A letter that starts no mora is kept as
    itself; everything that is not a Latin letter passes through unchanged.
    """
    romanizer = romanizer or get_default_romanizer()
    out: list[str] = []
    out_len = 0
    run: list[str] = []

    def flush() -> None:
        nonlocal out_len
        if not run:
            return
        converted = _convert_alphabetic_run(
            "".join(run), romanizer=romanizer, source_map=source_map, start=out_len
        )
        out.append(converted)
        out_len += len(converted)
        run.clear()

    for ch in text:
        if _is_ascii_letter(ch):
            run.append(ch.lower())
            continue
        flush()
        out.append(ch)
        out_len += 1
    flush()
    return "".join(out)


def convert_to_romaji(text: str, *, romanizer: Romanizer | None = None) -> str:
    """Romanize every kana run in `text`; Latin letters, kanji and symbols are kept."""
    romanizer = romanizer or get_default_romanizer()
    out: list[str] = []
    run: list[str] = []
    for ch in text:
        if is_code_point_kana(ord(ch)):
            run.append(ch)
            continue
        if run:
            out.append(romanizer.to_romaji("".join(run)))
            run.clear()
        out.append(ch)
    if run:
        out.append(romanizer.to_romaji("".join(run)))
    return "".join(out)
