"""Wordhunt: review a ranked vocabulary list, word by word."""

from __future__ import annotations

from ._catalog import Catalog
from ._cursor import CursorNavigator, reposition
from ._errors import (
    FilterError,
    NoAcceptableIndexError,
    NoCurrentWordError,
    NotSelectableError,
    SessionChecksumError,
    SessionFormatError,
    SessionVersionError,
    WordhuntError,
)
from ._filter import build_predicate, evaluate, validate
from ._ledger import Ledger
from ._search import SearchNavigator
from ._session import Session
from ._store import load_session, read_session_state, save_session
from ._types import (
    Direction,
    ExclusionList,
    FilterConfig,
    Progress,
    SearchStatus,
    SessionState,
    WordRecord,
    WordState,
)
from ._wordlist import SEEN, read_word_list, session_word_list

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Catalog",
    "CursorNavigator",
    "Direction",
    "ExclusionList",
    "FilterConfig",
    "FilterError",
    "Ledger",
    "NoAcceptableIndexError",
    "NoCurrentWordError",
    "NotSelectableError",
    "Progress",
    "SEEN",
    "SearchNavigator",
    "SearchStatus",
    "Session",
    "SessionChecksumError",
    "SessionFormatError",
    "SessionState",
    "SessionVersionError",
    "WordRecord",
    "WordState",
    "WordhuntError",
    "build_predicate",
    "evaluate",
    "load_session",
    "read_session_state",
    "read_word_list",
    "reposition",
    "save_session",
    "session_word_list",
    "validate",
]
