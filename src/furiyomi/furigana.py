from __future__ import annotations

import html
import logging
from dataclasses import dataclass

from furiyomi.kana import convert_katakana_to_hiragana
from furiyomi.script import ITERATION_MARK, is_code_point_kanji

logger = logging.getLogger(__name__)

__all__ = [
    "FuriganaSegment",
    "distribute_furigana",
    "distribute_furigana_inflected",
    "segments_to_html",
]

# Two alignments are enough to call a split ambiguous.
_AMBIGUOUS = 2


@dataclass(frozen=True)
class FuriganaSegment:
    """
    One span of an expression, with the reading it carries when it is kanji.

    `furigana` is None for spans that are read as written (kana, symbols).
    """

    text: str
    furigana: str | None = None

    def to_dict(self) -> dict[str, str]:
        out = {"text": self.text}
        if self.furigana is not None:
            out["furigana"] = self.furigana
        return out


@dataclass(frozen=True)
class _Group:
    text: str
    is_kanji: bool


def _group_expression(expression: str) -> list[_Group]:
    groups: list[_Group] = []
    for ch in expression:
        cp = ord(ch)
        is_kanji = is_code_point_kanji(cp) or cp == ITERATION_MARK
        if groups and groups[-1].is_kanji == is_kanji:
            groups[-1] = _Group(text=groups[-1].text + ch, is_kanji=is_kanji)
        else:
            groups.append(_Group(text=ch, is_kanji=is_kanji))
    return groups


def _count_alignments(reading: str, groups: list[_Group]) -> list[list[int]]:
    """
    DP over (group index, reading offset), filled from the last group backwards.

    counts[g][r] is the number of ways (capped at two) to align `groups[g:]` with
    `reading[r:]`. Kana groups must appear verbatim (up to kana script) at offset
    r; a kanji group reads at least one kana per character, so it may end at any
    offset e >= r + len(group) from which the remaining groups still align.
    """
    n = len(reading)
    reading_hira = convert_katakana_to_hiragana(reading)
    counts = [[0] * (n + 1) for _ in range(len(groups) + 1)]
    counts[len(groups)][n] = 1

    for g in range(len(groups) - 1, -1, -1):
        group = groups[g]
        size = len(group.text)
        row = counts[g]
        nxt = counts[g + 1]
        if not group.is_kanji:
            text = convert_katakana_to_hiragana(group.text)
            for r in range(n - size + 1):
                if reading_hira.startswith(text, r):
                    row[r] = nxt[r + size]
            continue

        # tail[e]: alignments of the remaining groups starting anywhere at or after e.
        tail = [0] * (n + 1)
        running = 0
        for e in range(n, -1, -1):
            running = min(_AMBIGUOUS, running + nxt[e])
            tail[e] = running
        for r in range(n - size + 1):
            row[r] = tail[r + size]

    return counts


def _trace_alignment(
    reading: str, groups: list[_Group], counts: list[list[int]]
) -> list[FuriganaSegment]:
    # Only called when counts[0][0] == 1, so every kanji group has exactly one viable end.
    segments: list[FuriganaSegment] = []
    r = 0
    for g, group in enumerate(groups):
        size = len(group.text)
        if not group.is_kanji:
            segments.append(FuriganaSegment(text=group.text))
            r += size
            continue
        end = next(e for e in range(r + size, len(reading) + 1) if counts[g + 1][e])
        segments.append(FuriganaSegment(text=group.text, furigana=reading[r:end]))
        r = end
    return segments


def distribute_furigana(expression: str, reading: str) -> list[FuriganaSegment]:
    """
    Split `expression` so that only its kanji runs carry furigana.

    When the reading admits no split, or more than one (飼い犬/かいいぬ), the whole
    expression gets the whole reading instead of a guessed partial split.

    Kana spans match the reading up to kana script and keep their own spelling,
    so カナ/かな is one plain カナ segment. Joining `furigana or text` over the
    segments gives back the reading once both sides are folded to hiragana.
    """
    if not expression:
        return []
    fallback = [FuriganaSegment(text=expression, furigana=reading or None)]
    if not reading:
        return fallback

    groups = _group_expression(expression)
    counts = _count_alignments(reading, groups)
    if counts[0][0] == 1:
        return _trace_alignment(reading, groups, counts)

    logger.debug(
        "Furigana: %s alignment for %s/%s, using whole word",
        "ambiguous" if counts[0][0] else "no",
        expression,
        reading,
    )
    return fallback


def distribute_furigana_inflected(
    expression: str, reading: str, source: str
) -> list[FuriganaSegment]:
    """
    Annotate an inflected surface form `source` of dictionary form `expression`.

    The stem shared with `expression` is aligned against the matching part of
    `reading`; the inflected ending of `source` follows as one plain segment.
    """
    source_hira = convert_katakana_to_hiragana(source)
    expression_hira = convert_katakana_to_hiragana(expression)
    shortest = min(len(source), len(expression))

    stem_length = 0
    while stem_length < shortest and source_hira[stem_length] == expression_hira[stem_length]:
        stem_length += 1

    # The dropped dictionary ending is kana, so it has the same length in the reading.
    reading_length = max(0, len(reading) - (len(expression) - stem_length))
    segments = distribute_furigana(source[:stem_length], reading[:reading_length])

    if stem_length < len(source):
        segments.append(FuriganaSegment(text=source[stem_length:]))
    return segments


def segments_to_html(segments: list[FuriganaSegment]) -> str:
    out: list[str] = []
    for seg in segments:
        text = html.escape(seg.text)
        if seg.furigana is None:
            out.append(text)
        else:
            out.append(f"<ruby>{text}<rt>{html.escape(seg.furigana)}</rt></ruby>")
    return "".join(out)
