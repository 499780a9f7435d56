"""Exclusion lists from word-list files and saved sessions."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from ._store import read_session_state
from ._types import ExclusionList, WordState

_WORD_RE = re.compile(r"[^\W\d_](?:[\w'-]*[^\W_])?")

# States counted as "seen" when building a list from a session file.
SEEN = (WordState.KNOWN, WordState.UNKNOWN)


def words_in_text(text: str) -> set[str]:
    """Lowercased words found in ``text``; digits and punctuation are skipped."""
    return {m.group().lower() for m in _WORD_RE.finditer(text)}


def read_word_list(path: Path | str, name: str | None = None) -> ExclusionList:
    """Build an exclusion list from a plain text file of words."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    return ExclusionList(name or path.stem, frozenset(words_in_text(text)))


def session_word_list(
    path: Path | str,
    states: Iterable[WordState] = (WordState.KNOWN,),
    name: str | None = None,
) -> ExclusionList:
    """Build an exclusion list from the words a saved session marked with ``states``.

    Pass ``SEEN`` to exclude every word already reviewed in that session.
    """
    path = Path(path)
    wanted = frozenset(WordState(s) for s in states)
    state = read_session_state(path)
    words = frozenset(
        text.lower() for _, text, word_state in state.entries if word_state in wanted
    )
    return ExclusionList(name or state.name or path.stem, words)
