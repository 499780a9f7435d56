"""Data structures for wordhunt."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class WordState(enum.Enum):
    UNCLASSIFIED = "unclassified"
    KNOWN = "known"
    UNKNOWN = "unknown"


class Direction(enum.Enum):
    NEXT = 1
    PREVIOUS = -1


@dataclass(slots=True, frozen=True)
class WordRecord:
    index: int        # catalog position, 0-based
    text: str         # original case
    occurrences: int


@dataclass(slots=True, frozen=True)
class ExclusionList:
    """Named set of words to hide from review, stored lowercased."""

    name: str
    words: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "words", frozenset(w.lower() for w in self.words)
        )

    def __contains__(self, word: str) -> bool:
        return word.lower() in self.words

    def __len__(self) -> int:
        return len(self.words)


@dataclass(slots=True, frozen=True)
class FilterConfig:
    min_letters: int = 0
    min_occurrences: int = 0
    initial_capital: bool = False
    exclusions: tuple[ExclusionList, ...] = ()
    enabled_exclusions: frozenset[str] = frozenset()  # names of active lists
    enabled: bool = True

    def exclusion(self, name: str) -> ExclusionList | None:
        for ex in self.exclusions:
            if ex.name == name:
                return ex
        return None

    def active_exclusions(self) -> list[ExclusionList]:
        return [ex for ex in self.exclusions if ex.name in self.enabled_exclusions]


@dataclass(slots=True, frozen=True)
class Progress:
    total: int
    known: int
    unknown: int
    unseen: int     # unclassified and accepted by the filter
    filtered: int   # unclassified and rejected by the filter

    @property
    def done(self) -> int:
        return self.known + self.unknown


@dataclass(slots=True, frozen=True)
class SearchStatus:
    query: str
    position: int | None  # 1-based position of the selected match
    total: int

    @property
    def active(self) -> bool:
        return bool(self.query)

    @property
    def label(self) -> str:
        if not self.query:
            return ""
        if self.total == 0 or self.position is None:
            return "No matches"
        return f"{self.position} of {self.total} matches"


@dataclass(slots=True, frozen=True)
class SessionState:
    name: str
    entries: tuple[tuple[int, str, WordState], ...]  # (index, text, state)
    filter: FilterConfig = field(default_factory=FilterConfig)
