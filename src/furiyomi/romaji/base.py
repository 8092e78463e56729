from __future__ import annotations

from abc import ABC, abstractmethod
from functools import lru_cache


class Romanizer(ABC):
    @abstractmethod
    def to_romaji(self, kana: str) -> str:
        """
        Transliterate a kana string (hiragana and/or katakana) to Latin letters.

        Callers only pass runs of kana; mixed text is split upstream.
        """
        raise NotImplementedError

    @abstractmethod
    def match_kana_prefix(self, text: str) -> tuple[str, int] | None:
        """
        Match the longest prefix of lower-case Latin `text` that spells one kana mora.

        Returns:
            - (kana, consumed): the kana spelled and the number of letters used
            - None when no prefix forms a mora
        """
        raise NotImplementedError


def build_romanizer(name: str, /) -> Romanizer:
    """
    Resolve a backend name ("pykakasi", "kakasi" or "default") to a `Romanizer`.

    Backend modules subclass `Romanizer` from this module, so they are only
    imported once a name is resolved.
    """
    key = name.strip().lower()
    if key in {"kakasi", "pykakasi", "default"}:
        from furiyomi.romaji.kakasi import KakasiRomanizer

        return KakasiRomanizer()

    raise ValueError(f"Unknown romanizer: {name!r}")


@lru_cache(maxsize=1)
def get_default_romanizer() -> Romanizer:
    return build_romanizer("default")
