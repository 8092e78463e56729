from furiyomi.furigana import (
    FuriganaSegment,
    distribute_furigana,
    distribute_furigana_inflected,
    segments_to_html,
)
from furiyomi.kana import (
    convert_alphabetic_to_kana,
    convert_half_width_kana_to_full_width,
    convert_hiragana_to_katakana,
    convert_katakana_to_hiragana,
    convert_numeric_to_full_width,
    convert_to_romaji,
)
from furiyomi.pitch import (
    MoraPitch,
    get_kana_morae,
    get_pitch_category,
    get_pitch_pattern,
    is_mora_pitch_high,
)
from furiyomi.reading import ReadingMode, convert_reading
from furiyomi.script import (
    ScriptClass,
    classify_code_point,
    contains_kanji,
    is_code_point_japanese,
    is_code_point_kana,
    is_code_point_kanji,
    is_string_entirely_kana,
    is_string_partially_japanese,
)
from furiyomi.source_map import SourceMap

__all__ = [
    # Classification
    "ScriptClass",
    "classify_code_point",
    "contains_kanji",
    "is_code_point_japanese",
    "is_code_point_kana",
    "is_code_point_kanji",
    "is_string_entirely_kana",
    "is_string_partially_japanese",
    # Conversion
    "SourceMap",
    "convert_alphabetic_to_kana",
    "convert_half_width_kana_to_full_width",
    "convert_hiragana_to_katakana",
    "convert_katakana_to_hiragana",
    "convert_numeric_to_full_width",
    "convert_to_romaji",
    "ReadingMode",
    "convert_reading",
    # Furigana
    "FuriganaSegment",
    "distribute_furigana",
    "distribute_furigana_inflected",
    "segments_to_html",
    # Pitch accent
    "MoraPitch",
    "get_kana_morae",
    "get_pitch_category",
    "get_pitch_pattern",
    "is_mora_pitch_high",
]
