from __future__ import annotations

from furiyomi.source_map import SourceMap


def test_untouched_map_is_identity() -> None:
    sm = SourceMap("abc")
    assert sm.mapping == [1, 1, 1]
    assert sm.get_source_length(2) == 2
    assert sm == SourceMap("abc", [1, 1, 1])


def test_combine_merges_following_entries() -> None:
    sm = SourceMap("chikara")
    sm.combine(0, 2)
    sm.combine(1, 1)
    sm.combine(2, 1)
    assert sm.mapping == [3, 2, 2]
    assert sm.get_source_length(2) == 5
    assert sum(sm.mapping) == len(sm.source)


def test_combine_with_zero_count_is_noop() -> None:
    sm = SourceMap("ab")
    sm.combine(0, 0)
    assert sm.mapping == [1, 1]


def test_insert_keeps_sum() -> None:
    sm = SourceMap("kya")
    sm.combine(0, 2)
    sm.insert(1, 0)
    assert sm.mapping == [3, 0]
    assert sum(sm.mapping) == 3


def test_equality_depends_on_source_and_mapping() -> None:
    assert SourceMap("ab") != SourceMap("ac")
    assert SourceMap("ab", [2]) != SourceMap("ab")
    assert SourceMap("ab", [2]) == SourceMap("ab", [2])
