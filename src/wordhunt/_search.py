"""Search within the reviewable words, cycling through the matches."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from ._types import Direction, SearchStatus

if TYPE_CHECKING:
    from ._catalog import Catalog


class SearchNavigator:
    """Live match set for a query and a pointer into it.

    Matches are the accepted indices whose text contains the query,
    case-insensitively, in ascending order. An empty query means search is
    inactive and there are no matches.
    """

    __slots__ = ("_catalog", "_query", "_folded", "_matches", "_pointer")

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog
        self._query = ""
        self._folded = ""
        self._matches: list[int] = []
        self._pointer: int | None = None

    @property
    def query(self) -> str:
        return self._query

    @property
    def matches(self) -> tuple[int, ...]:
        return tuple(self._matches)

    @property
    def pointer(self) -> int | None:
        return self._pointer

    @property
    def selected(self) -> int | None:
        """Catalog index of the selected match."""
        if self._pointer is None:
            return None
        return self._matches[self._pointer]

    def status(self) -> SearchStatus:
        position = None if self._pointer is None else self._pointer + 1
        return SearchStatus(self._query, position, len(self._matches))

    def set_query(
        self, text: str, accept: Callable[[int], bool], cursor: int | None
    ) -> int | None:
        """Recompute matches for ``text`` and select the one at or after ``cursor``.

        Returns the selected catalog index, or None when nothing matches.
        """
        self._query = text
        self._folded = text.casefold()
        self._recompute(accept)
        self._pointer = self._first_from(cursor)
        return self.selected

    def refresh(
        self, accept: Callable[[int], bool], cursor: int | None
    ) -> None:
        """Recompute matches after acceptance changed, keeping the selection if possible."""
        previous = self.selected
        self._recompute(accept)
        if previous is not None and previous in self._matches:
            self._pointer = self._matches.index(previous)
        else:
            self._pointer = self._first_from(cursor)

    def advance(self, direction: Direction) -> int | None:
        """Move the pointer one match in ``direction``, wrapping at either end.

        Returns the newly selected index, or None (and changes nothing) when
        there are no matches.
        """
        if not self._matches:
            return None
        n = len(self._matches)
        if self._pointer is None:
            self._pointer = 0 if direction is Direction.NEXT else n - 1
        else:
            self._pointer = (self._pointer + direction.value) % n
        return self._matches[self._pointer]

    def _recompute(self, accept: Callable[[int], bool]) -> None:
        if not self._folded:
            self._matches = []
            return
        self._matches = [
            rec.index
            for rec in self._catalog
            if self._folded in rec.text.casefold() and accept(rec.index)
        ]

    def _first_from(self, cursor: int | None) -> int | None:
        if not self._matches:
            return None
        if cursor is not None:
            for pos, index in enumerate(self._matches):
                if index >= cursor:
                    return pos
        return 0
