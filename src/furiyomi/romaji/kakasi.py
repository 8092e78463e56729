from __future__ import annotations

import logging

import jaconv
from pykakasi import kakasi

from furiyomi.pitch import get_kana_morae
from furiyomi.romaji.base import Romanizer
from furiyomi.script import is_string_entirely_kana

logger = logging.getLogger(__name__)

# Longest mora spellings are four letters ("xtsu", "ltsu").
_MAX_MORA_LETTERS = 4
_VOWELS = frozenset("aeiou")
_SOKUON = "っ"
_SYLLABIC_N = "ん"


def _is_doubled_consonant(head: str) -> bool:
    # "kka" and "tcha" spell a geminate; "nn" is the syllabic nasal instead.
    if head.startswith("tch"):
        return True
    return (
        len(head) > 1
        and head[0] == head[1]
        and head[0] not in _VOWELS
        and head[0] != "n"
    )


def _is_one_mora(kana: str, *, geminate: bool) -> bool:
    if not kana or not is_string_entirely_kana(kana):
        return False
    if geminate:
        return kana[0] == _SOKUON and len(get_kana_morae(kana[1:])) == 1
    return len(get_kana_morae(kana)) == 1


class KakasiRomanizer(Romanizer):
    """
    pykakasi for kana -> Hepburn, jaconv for Hepburn -> hiragana.

    jaconv only converts whole strings, so mora matching probes prefixes from the
    longest down and keeps the first one that spells exactly one mora. A leading
    っ is only accepted when the prefix really doubles its consonant: jaconv also
    emits っ for any consonant followed by another consonant ("cde" -> "っで").
    """

    def __init__(self) -> None:
        self._kks = kakasi()
        logger.debug("Romanizer: pykakasi (hepburn) + jaconv (alphabet2kana)")

    def to_romaji(self, kana: str) -> str:
        if not kana:
            return ""
        return "".join(str(piece.get("hepburn", "")) for piece in self._kks.convert(kana))

    def match_kana_prefix(self, text: str) -> tuple[str, int] | None:
        if not text:
            return None
        for size in range(min(len(text), _MAX_MORA_LETTERS), 1, -1):
            head = text[:size]
            # Every multi-letter mora spelling ends in a vowel.
            if head[-1] not in _VOWELS:
                continue
            kana = jaconv.alphabet2kana(head)
            if _is_one_mora(kana, geminate=_is_doubled_consonant(head)):
                return kana, size

        # Single letters: a bare vowel, or the syllabic nasal. "nn" is one ん
        # unless the second n starts a mora of its own ("onna" -> おんな).
        if text.startswith("nn") and text[2:3] not in _VOWELS | {"y"}:
            return _SYLLABIC_N, 2
        if text[0] == "n":
            return _SYLLABIC_N, 1
        if text[0] in _VOWELS:
            kana = jaconv.alphabet2kana(text[0])
            if _is_one_mora(kana, geminate=False):
                return kana, 1
        return None
