"""Cursor navigation: keeps the review index on an accepted word."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ._errors import NoAcceptableIndexError

logger = logging.getLogger(__name__)


def reposition(requested: int, size: int, accept: Callable[[int], bool]) -> int:
    """Return the accepted index closest to ``requested``.

    Scans outward one step at a time, probing below before above, so a tie
    between two equidistant indices goes to the lower one. ``requested``
    need not lie in ``[0, size)``; only candidates inside that range are
    considered.

    Raises:
        NoAcceptableIndexError: If no index in ``[0, size)`` is accepted.
    """
    # first radius that can land inside the range; nonzero only for outside anchors
    start = max(0, -requested, requested - (size - 1))
    reach = max(abs(requested), abs(size - 1 - requested))
    for d in range(start, reach + 1):
        below = requested - d
        if 0 <= below < size and accept(below):
            return below
        above = requested + d
        if d and 0 <= above < size and accept(above):
            return above
    raise NoAcceptableIndexError(
        f"no acceptable index near {requested} in [0, {size})"
    )


class CursorNavigator:
    """The single active review index, or None once exhausted.

    ``anchor`` remembers the last position so that an exhausted cursor can
    resume near where review stopped when acceptance widens again.
    """

    __slots__ = ("_current", "_anchor")

    def __init__(self) -> None:
        self._current: int | None = None
        self._anchor = 0

    @property
    def current(self) -> int | None:
        return self._current

    @property
    def anchor(self) -> int:
        return self._anchor

    @property
    def exhausted(self) -> bool:
        return self._current is None

    def move_to(self, index: int) -> None:
        self._current = index
        self._anchor = index

    def settle(
        self, requested: int, size: int, accept: Callable[[int], bool]
    ) -> int | None:
        """Reposition near ``requested``, or become exhausted if nothing is accepted."""
        if not any(accept(i) for i in range(size)):
            if self._current is not None:
                logger.debug("cursor exhausted after index %d", self._current)
            self._current = None
            self._anchor = requested
            return None
        self.move_to(reposition(requested, size, accept))
        return self._current

    def keep_or_settle(
        self, size: int, accept: Callable[[int], bool]
    ) -> int | None:
        """Stay on the current word if still accepted, otherwise settle near it."""
        if self._current is not None and accept(self._current):
            return self._current
        anchor = self._anchor if self._current is None else self._current
        return self.settle(anchor, size, accept)
