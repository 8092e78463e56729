from furiyomi.romaji.base import Romanizer, build_romanizer, get_default_romanizer
from furiyomi.romaji.kakasi import KakasiRomanizer

__all__ = [
    "Romanizer",
    "build_romanizer",
    "get_default_romanizer",
    "KakasiRomanizer",
]
