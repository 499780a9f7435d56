"""Per-word classification ledger."""

from __future__ import annotations

from collections.abc import Iterator

from ._types import WordState


class Ledger:
    """Review state for every catalog index, defaulting to UNCLASSIFIED.

    Entries are overwritten, never removed; the last write wins.
    """

    __slots__ = ("_states",)

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}")
        self._states = [WordState.UNCLASSIFIED] * size

    def __len__(self) -> int:
        return len(self._states)

    def get(self, index: int) -> WordState:
        self._check(index)
        return self._states[index]

    def set(self, index: int, state: WordState) -> None:
        self._check(index)
        self._states[index] = WordState(state)

    def is_classified(self, index: int) -> bool:
        return self.get(index) is not WordState.UNCLASSIFIED

    def count(self, state: WordState) -> int:
        return self._states.count(WordState(state))

    def items(self) -> Iterator[tuple[int, WordState]]:
        return enumerate(self._states)

    def classified(self) -> Iterator[tuple[int, WordState]]:
        """Yield ``(index, state)`` for every word that has been reviewed."""
        for index, state in enumerate(self._states):
            if state is not WordState.UNCLASSIFIED:
                yield index, state

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._states):
            raise IndexError(
                f"index {index} out of range [0, {len(self._states) - 1}]"
            )
