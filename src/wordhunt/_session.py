"""Review session: catalog, ledger, filter, cursor and search in one place."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Iterator

from ._catalog import Catalog
from ._cursor import CursorNavigator
from ._errors import FilterError, NoCurrentWordError, NotSelectableError
from ._filter import build_predicate, evaluate, validate
from ._ledger import Ledger
from ._search import SearchNavigator
from ._types import (
    Direction,
    FilterConfig,
    Progress,
    SearchStatus,
    SessionState,
    WordRecord,
    WordState,
)

logger = logging.getLogger(__name__)


class Session:
    """A user's review of one catalog.

    Every mutating call runs to completion and leaves the cursor on an
    accepted word, or exhausted when none remains. Callers query the
    read-only views (``current_word``, ``progress()``, ``search_status``)
    afterwards to render.
    """

    __slots__ = (
        "_catalog", "_ledger", "_filter", "_cursor", "_search",
        "_accept", "name", "_dirty",
    )

    def __init__(
        self,
        catalog: Catalog,
        *,
        name: str = "",
        filter: FilterConfig | None = None,
    ) -> None:
        if filter is None:
            filter = FilterConfig()
        validate(filter, catalog)
        self._catalog = catalog
        self._ledger = Ledger(len(catalog))
        self._filter = filter
        self._cursor = CursorNavigator()
        self._search = SearchNavigator(catalog)
        self._accept = build_predicate(filter, catalog, self._ledger)
        self.name = name
        self._dirty = False
        self._cursor.settle(0, len(catalog), self._accept)

    # -- Read-only views --

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def filter(self) -> FilterConfig:
        return self._filter

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def current_index(self) -> int | None:
        return self._cursor.current

    @property
    def current_word(self) -> WordRecord | None:
        index = self._cursor.current
        return None if index is None else self._catalog[index]

    @property
    def exhausted(self) -> bool:
        return self._cursor.exhausted

    @property
    def search_status(self) -> SearchStatus:
        return self._search.status()

    @property
    def search_matches(self) -> tuple[int, ...]:
        return self._search.matches

    def state_of(self, index: int) -> WordState:
        return self._ledger.get(index)

    def is_accepted(self, index: int) -> bool:
        """True if the word at ``index`` is currently up for review."""
        return self._accept(index)

    def count_by_state(self, state: WordState) -> int:
        return self._ledger.count(state)

    def progress(self) -> Progress:
        unseen = filtered = 0
        for index, state in self._ledger.items():
            if state is not WordState.UNCLASSIFIED:
                continue
            if evaluate(self._filter, self._catalog[index]):
                unseen += 1
            else:
                filtered += 1
        return Progress(
            total=len(self._catalog),
            known=self._ledger.count(WordState.KNOWN),
            unknown=self._ledger.count(WordState.UNKNOWN),
            unseen=unseen,
            filtered=filtered,
        )

    # -- Classification --

    def classify(self, index: int, state: WordState) -> None:
        """Record ``state`` for the word at ``index``.

        Classifying the current word moves the cursor to the nearest
        accepted word from ``index + 1``. Classifying any other word leaves
        the cursor where it is.
        """
        state = WordState(state)
        self._ledger.set(index, state)
        self._dirty = True
        if index == self._cursor.current and state is not WordState.UNCLASSIFIED:
            self._cursor.settle(index + 1, len(self._catalog), self._accept)
        else:
            self._cursor.keep_or_settle(len(self._catalog), self._accept)
        self._search.refresh(self._accept, self._cursor.current)

    def mark(self, state: WordState) -> None:
        """Classify the word under review."""
        index = self._cursor.current
        if index is None:
            raise NoCurrentWordError("no word left to review")
        self.classify(index, state)

    def mark_known(self) -> None:
        self.mark(WordState.KNOWN)

    def mark_unknown(self) -> None:
        self.mark(WordState.UNKNOWN)

    def select(self, index: int) -> None:
        """Put the word at ``index`` under review."""
        if not 0 <= index < len(self._catalog):
            raise IndexError(
                f"index {index} out of range [0, {len(self._catalog) - 1}]"
            )
        if not self._accept(index):
            raise NotSelectableError(
                f"word {self._catalog.text(index)!r} is not up for review"
            )
        self._cursor.move_to(index)

    # -- Filtering --

    def apply_filter(self, config: FilterConfig) -> None:
        """Validate and commit ``config`` in one step.

        Raises:
            FilterError: If the config is rejected; the previous filter and
                cursor are left untouched.
        """
        validate(config, self._catalog)
        self._filter = config
        self._accept = build_predicate(config, self._catalog, self._ledger)
        logger.debug("filter applied: %r", config)
        self._cursor.keep_or_settle(len(self._catalog), self._accept)
        self._search.refresh(self._accept, self._cursor.current)

    def edit_filter(self, **changes) -> FilterConfig:
        """Return a scratch copy of the live filter with ``changes`` applied."""
        return dataclasses.replace(self._filter, **changes)

    def set_filters_enabled(self, enabled: bool) -> None:
        self.apply_filter(self.edit_filter(enabled=enabled))

    # -- Search --

    def set_query(self, text: str) -> None:
        """Search for ``text``; the cursor jumps to the selected match if any."""
        selected = self._search.set_query(text, self._accept, self._cursor.current)
        if selected is not None:
            self._cursor.move_to(selected)

    def clear_search(self) -> None:
        self._search.set_query("", self._accept, self._cursor.current)

    def advance(self, direction: Direction) -> None:
        """Step to the next or previous match; a no-op when nothing matches."""
        selected = self._search.advance(Direction(direction))
        if selected is not None:
            self._cursor.move_to(selected)

    def next_match(self) -> None:
        self.advance(Direction.NEXT)

    def previous_match(self) -> None:
        self.advance(Direction.PREVIOUS)

    # -- Export / persistence --

    def export(
        self, states: Iterable[WordState] = (WordState.KNOWN,)
    ) -> Iterator[tuple[str, WordState]]:
        """Yield ``(text, state)`` in catalog order for words in ``states``."""
        wanted = frozenset(WordState(s) for s in states)
        for index, state in self._ledger.items():
            if state in wanted:
                yield self._catalog.text(index), state

    def selection(self) -> list[str]:
        """Words marked unknown, in catalog order."""
        return [text for text, _ in self.export((WordState.UNKNOWN,))]

    def mark_saved(self) -> None:
        self._dirty = False

    def to_state(self) -> SessionState:
        entries = tuple(
            (index, self._catalog.text(index), state)
            for index, state in self._ledger.classified()
        )
        return SessionState(name=self.name, entries=entries, filter=self._filter)

    @classmethod
    def from_state(cls, state: SessionState, catalog: Catalog) -> Session:
        """Rebuild a session from persisted state against ``catalog``.

        Entries that no longer line up with the catalog are dropped. The
        cursor is recomputed rather than restored.
        """
        session = cls(catalog, name=state.name)
        dropped = 0
        for index, text, word_state in state.entries:
            if not 0 <= index < len(catalog):
                dropped += 1
                logger.debug("dropping entry %d (%r): out of range", index, text)
                continue
            if text and catalog.text(index) != text:
                dropped += 1
                logger.debug(
                    "dropping entry %d: expected %r, catalog has %r",
                    index, text, catalog.text(index),
                )
                continue
            session._ledger.set(index, word_state)
        if dropped:
            logger.info("restored session %r, dropped %d entries", state.name, dropped)
        session._restore_filter(state.filter)
        return session

    def _restore_filter(self, config: FilterConfig) -> None:
        # a filter that was valid when saved can still hide everything in a new catalog
        try:
            validate(config, self._catalog)
        except FilterError as exc:
            logger.warning("ignoring saved filter: %s", exc)
            config = FilterConfig()
        self._filter = config
        self._accept = build_predicate(config, self._catalog, self._ledger)
        self._cursor.settle(0, len(self._catalog), self._accept)
