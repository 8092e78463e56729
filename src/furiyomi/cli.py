from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from furiyomi.furigana import (
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
from furiyomi.pitch import get_pitch_category, get_pitch_pattern
from furiyomi.reading import ReadingMode, convert_reading
from furiyomi.romaji import build_romanizer
from furiyomi.script import classify_code_point
from furiyomi.source_map import SourceMap

_CONVERSIONS = ["hiragana", "katakana", "romaji", "kana", "full-width", "digits"]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="furiyomi")
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging (romanizer backend, furigana fallbacks).",
    )
    p.add_argument(
        "--romanizer",
        default="pykakasi",
        help="Romanization backend (default: %(default)s).",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    classify = sub.add_parser("classify", help="Classify each character by script.")
    classify.add_argument("text")

    conv = sub.add_parser("convert", help="Convert text between scripts.")
    conv.add_argument("text")
    conv.add_argument(
        "--to",
        choices=_CONVERSIONS,
        required=True,
        help=(
            "Target: hiragana/katakana/romaji, 'kana' for Latin letters, "
            "'full-width' for half-width katakana, 'digits' for full-width digits."
        ),
    )
    conv.add_argument(
        "--source-map",
        action="store_true",
        help="Also print how many input characters produced each output character.",
    )

    reading = sub.add_parser("reading", help="Render a reading in a display mode.")
    reading.add_argument("expression")
    reading.add_argument(
        "reading",
        nargs="?",
        default=None,
        help="Kana reading (omit for an absent reading, pass '' for an empty one).",
    )
    reading.add_argument(
        "--mode",
        choices=[m.value for m in ReadingMode],
        default=ReadingMode.DEFAULT.value,
        help="Reading display mode (default: %(default)s).",
    )

    furi = sub.add_parser("furigana", help="Split an expression into furigana segments.")
    furi.add_argument("expression")
    furi.add_argument("reading")
    furi.add_argument(
        "--source",
        default=None,
        help="Inflected surface form of the expression (e.g. 食べた for 食べる).",
    )
    furi.add_argument("--html", action="store_true", help="Print <ruby> markup instead of JSON.")

    pitch = sub.add_parser("pitch", help="Show the pitch pattern of a kana reading.")
    pitch.add_argument("reading")
    pitch.add_argument("position", type=int, help="Accent position (0 = heiban).")

    return p


def _print_json(payload: Any) -> None:
    sys.stdout.write(json.dumps(payload, ensure_ascii=False, indent=2) + "\n")


def _convert(
    text: str, target: str, *, romanizer_name: str
) -> tuple[str, SourceMap | None]:
    source_map = SourceMap(text)
    if target == "hiragana":
        return convert_katakana_to_hiragana(text), source_map
    if target == "katakana":
        return convert_hiragana_to_katakana(text), source_map
    if target == "digits":
        return convert_numeric_to_full_width(text), source_map
    if target == "full-width":
        return convert_half_width_kana_to_full_width(text, source_map), source_map
    romanizer = build_romanizer(romanizer_name)
    if target == "kana":
        return convert_alphabetic_to_kana(text, source_map, romanizer=romanizer), source_map
    # Romaji output is not tracked per character.
    return convert_to_romaji(text, romanizer=romanizer), None


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "classify":
        _print_json(
            [{"char": ch, "class": classify_code_point(ord(ch)).value} for ch in args.text]
        )
        return 0
    if args.cmd == "convert":
        out, source_map = _convert(args.text, args.to, romanizer_name=args.romanizer)
        payload: dict[str, Any] = {"text": out}
        if args.source_map and source_map is not None:
            payload["source_map"] = source_map.mapping
        _print_json(payload)
        return 0
    if args.cmd == "reading":
        _print_json(
            {
                "reading": convert_reading(
                    args.expression,
                    args.reading,
                    args.mode,
                    romanizer=build_romanizer(args.romanizer),
                )
            }
        )
        return 0
    if args.cmd == "furigana":
        if args.source is not None:
            segments = distribute_furigana_inflected(args.expression, args.reading, args.source)
        else:
            segments = distribute_furigana(args.expression, args.reading)
        if args.html:
            sys.stdout.write(segments_to_html(segments) + "\n")
        else:
            _print_json([seg.to_dict() for seg in segments])
        return 0
    if args.cmd == "pitch":
        _print_json(
            {
                "category": get_pitch_category(args.reading, args.position),
                "morae": [
                    {"mora": m.mora, "high": m.high}
                    for m in get_pitch_pattern(args.reading, args.position)
                ],
            }
        )
        return 0

    raise AssertionError(f"unhandled cmd: {args.cmd}")


if __name__ == "__main__":
    raise SystemExit(main())
