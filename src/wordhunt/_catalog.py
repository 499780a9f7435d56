"""Immutable rank-ordered word catalog."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ._types import WordRecord


class Catalog:
    """Ordered word records with contiguous indices ``0..N-1``.

    Built once from upstream analysis output and never modified; it may be
    shared freely between sessions.
    """

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[WordRecord]) -> None:
        records = tuple(records)
        for pos, rec in enumerate(records):
            if not rec.text:
                raise ValueError(f"record {pos} has empty text")
            if rec.index != pos:
                raise ValueError(
                    f"record {rec.text!r} has index {rec.index}, expected {pos}"
                )
        self._records = records

    @classmethod
    def from_counts(cls, pairs: Iterable[tuple[str, int]]) -> Catalog:
        """Build a catalog from ``(text, occurrences)`` pairs in rank order."""
        records: list[WordRecord] = []
        for text, occurrences in pairs:
            if not text:
                raise ValueError("word text must not be empty")
            if occurrences < 0:
                raise ValueError(
                    f"occurrences must be >= 0, got {occurrences} for {text!r}"
                )
            records.append(WordRecord(len(records), text, occurrences))
        return cls(records)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Catalog:
        """Build a catalog where every word occurs once."""
        return cls.from_counts((w, 1) for w in words)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> WordRecord:
        return self._records[index]

    def __iter__(self) -> Iterator[WordRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"Catalog(size={len(self._records)})"

    def text(self, index: int) -> str:
        return self._records[index].text
