from __future__ import annotations


class SourceMap:
    """
    Per-output-character record of how many source characters produced it.

    The mapping starts out as the identity (one entry of 1 per source character)
    and is only materialized once a converter merges or inserts entries.
    A one-to-many expansion stores the full count on the first output character
    and 0 on the rest, so `sum(mapping)` always equals the consumed source length.
    """

    def __init__(self, source: str, mapping: list[int] | None = None) -> None:
        self._source = source
        self._mapping = list(mapping) if mapping is not None else None

    @property
    def source(self) -> str:
        return self._source

    @property
    def mapping(self) -> list[int]:
        if self._mapping is None:
            return [1] * len(self._source)
        return list(self._mapping)

    def _ensure_mapping(self) -> list[int]:
        if self._mapping is None:
            self._mapping = [1] * len(self._source)
        return self._mapping

    def combine(self, index: int, count: int) -> None:
        """Merge the `count` entries following `index` into the entry at `index`."""
        if count <= 0:
            return
        mapping = self._ensure_mapping()
        parts = mapping[index + 1 : index + 1 + count]
        del mapping[index + 1 : index + 1 + count]
        mapping[index] += sum(parts)

    def insert(self, index: int, *items: int) -> None:
        mapping = self._ensure_mapping()
        mapping[index:index] = list(items)

    def get_source_length(self, final_length: int) -> int:
        """Number of source characters consumed by the first `final_length` output characters."""
        if self._mapping is None:
            return final_length
        return sum(self._mapping[:final_length])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SourceMap):
            return NotImplemented
        return self._source == other._source and self.mapping == other.mapping

    def __repr__(self) -> str:
        return f"SourceMap(source={self._source!r}, mapping={self.mapping!r})"
