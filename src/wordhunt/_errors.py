"""Wordhunt error types."""


class WordhuntError(Exception):
    """Base error for all wordhunt failures."""


class FilterError(WordhuntError):
    """Filter configuration rejected; the previous filter stays active."""


class NoAcceptableIndexError(WordhuntError):
    """No index in range satisfies the acceptance predicate."""


class NoCurrentWordError(WordhuntError):
    """The session is exhausted and has no word under review."""


class NotSelectableError(WordhuntError):
    """The requested word is not accepted by the live filter."""


class SessionFormatError(WordhuntError):
    """Session file missing or malformed."""


class SessionVersionError(SessionFormatError):
    """Session file version mismatch."""


class SessionChecksumError(SessionFormatError):
    """Session file checksum verification failed."""
