from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

__all__ = [
    "MoraPitch",
    "PitchCategory",
    "get_kana_morae",
    "is_mora_pitch_high",
    "get_pitch_pattern",
    "get_pitch_category",
]

PitchCategory = Literal["heiban", "atamadaka", "nakadaka", "odaka"]

# Small glides/vowels extend the preceding mora; っ and ー are morae of their own.
_SMALL_KANA = frozenset("ぁぃぅぇぉゃゅょゎァィゥェォャュョヮ")


@dataclass(frozen=True)
class MoraPitch:
    mora: str
    high: bool


def get_kana_morae(text: str) -> list[str]:
    """
    Split kana into morae.

    - small kana (ャュョァィゥェォ, ...) attach to the previous mora
    - sokuon (ッ/っ) and the prolonged sound mark (ー) each count as a mora
    """
    morae: list[str] = []
    for ch in text:
        if morae and ch in _SMALL_KANA:
            morae[-1] = morae[-1] + ch
        else:
            morae.append(ch)
    return morae


def is_mora_pitch_high(mora_index: int, pitch_accent_position: int) -> bool:
    if pitch_accent_position == 0:
        # Heiban: low start, then high with no drop.
        return mora_index > 0
    # High up to and including the accented mora, low after the drop.
    return mora_index < pitch_accent_position


def get_pitch_pattern(reading: str, pitch_accent_position: int) -> list[MoraPitch]:
    return [
        MoraPitch(mora=mora, high=is_mora_pitch_high(i, pitch_accent_position))
        for i, mora in enumerate(get_kana_morae(reading))
    ]


def get_pitch_category(reading: str, pitch_accent_position: int) -> PitchCategory:
    """
    Name the accent pattern of `reading`.

    A drop after the last mora (odaka) is only audible on a following particle,
    so it needs the mora count to tell it apart from nakadaka.
    """
    if pitch_accent_position == 0:
        return "heiban"
    if pitch_accent_position == 1:
        return "atamadaka"
    if pitch_accent_position >= len(get_kana_morae(reading)):
        return "odaka"
    return "nakadaka"
