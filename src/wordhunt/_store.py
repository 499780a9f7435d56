"""Session files: msgpack envelope with version and SHA-256 checksum."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import msgpack

from ._errors import SessionChecksumError, SessionFormatError, SessionVersionError
from ._session import Session
from ._types import ExclusionList, FilterConfig, SessionState, WordState

if TYPE_CHECKING:
    from ._catalog import Catalog

logger = logging.getLogger(__name__)

FORMAT_VERSION = "1.0"


def _sha256(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def _filter_to_dict(config: FilterConfig) -> dict[str, Any]:
    return {
        "min_letters": config.min_letters,
        "min_occurrences": config.min_occurrences,
        "initial_capital": config.initial_capital,
        "enabled": config.enabled,
        "exclusions": [
            {
                "name": ex.name,
                "words": sorted(ex.words),
                "enabled": ex.name in config.enabled_exclusions,
            }
            for ex in config.exclusions
        ],
    }


def _field(raw: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = raw.get(key, default)
    # bool is an int subclass; counts must not accept it
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise SessionFormatError(
            f"malformed session body: {key!r} must be {kind.__name__}, "
            f"got {type(value).__name__}"
        )
    return value


def _filter_from_dict(raw: Any) -> FilterConfig:
    if not isinstance(raw, dict):
        raise SessionFormatError("malformed session body: 'filter' must be a map")
    exclusions: list[ExclusionList] = []
    enabled_exclusions: set[str] = set()
    for ex in _field(raw, "exclusions", list, []):
        if not isinstance(ex, dict):
            raise SessionFormatError("malformed session body: exclusion must be a map")
        name = _field(ex, "name", str, None)
        words = _field(ex, "words", list, [])
        if not all(isinstance(w, str) for w in words):
            raise SessionFormatError(
                f"malformed session body: exclusion {name!r} has non-text words"
            )
        exclusions.append(ExclusionList(name, frozenset(words)))
        if _field(ex, "enabled", bool, False):
            enabled_exclusions.add(name)
    return FilterConfig(
        min_letters=_field(raw, "min_letters", int, 0),
        min_occurrences=_field(raw, "min_occurrences", int, 0),
        initial_capital=_field(raw, "initial_capital", bool, False),
        exclusions=tuple(exclusions),
        enabled_exclusions=frozenset(enabled_exclusions),
        enabled=_field(raw, "enabled", bool, True),
    )


def _entries_from_list(raw: Any) -> tuple[tuple[int, str, WordState], ...]:
    if not isinstance(raw, list):
        raise SessionFormatError("malformed session body: 'entries' must be a list")
    entries = []
    for entry in raw:
        if not isinstance(entry, list) or len(entry) != 3:
            raise SessionFormatError(f"malformed session entry: {entry!r}")
        index, text, value = entry
        if isinstance(index, bool) or not isinstance(index, int):
            raise SessionFormatError(f"malformed session entry: {entry!r}")
        if not isinstance(text, str):
            raise SessionFormatError(f"malformed session entry: {entry!r}")
        try:
            state = WordState(value)
        except (TypeError, ValueError) as exc:
            raise SessionFormatError(f"malformed session entry: {exc}") from exc
        entries.append((index, text, state))
    return tuple(entries)


def encode_state(state: SessionState) -> bytes:
    """Serialize ``state`` into the versioned, checksummed envelope."""
    body = msgpack.packb({
        "name": state.name,
        "entries": [
            [index, text, word_state.value]
            for index, text, word_state in state.entries
        ],
        "filter": _filter_to_dict(state.filter),
    }, use_bin_type=True)
    return msgpack.packb({
        "version": FORMAT_VERSION,
        "sha256": _sha256(body),
        "body": body,
    }, use_bin_type=True)


def decode_state(data: bytes) -> SessionState:
    """Parse and verify an envelope produced by ``encode_state``."""
    try:
        envelope = msgpack.unpackb(data, raw=False)
    except (msgpack.UnpackException, ValueError, TypeError) as exc:
        raise SessionFormatError(f"not a session file: {exc}") from exc
    if not isinstance(envelope, dict):
        raise SessionFormatError("not a session file: expected a map")

    version = envelope.get("version")
    if version != FORMAT_VERSION:
        raise SessionVersionError(
            f"Expected session version {FORMAT_VERSION!r}, got {version!r}"
        )
    body = envelope.get("body")
    expected = envelope.get("sha256")
    if not isinstance(body, bytes) or not isinstance(expected, str):
        raise SessionFormatError("session file has no body or checksum")
    actual = _sha256(body)
    if actual != expected:
        raise SessionChecksumError(
            f"Checksum mismatch: expected {expected[:16]}..., got {actual[:16]}..."
        )

    try:
        raw = msgpack.unpackb(body, raw=False)
    except (msgpack.UnpackException, ValueError, TypeError) as exc:
        raise SessionFormatError(f"malformed session body: {exc}") from exc
    if not isinstance(raw, dict):
        raise SessionFormatError("malformed session body: expected a map")
    if "entries" not in raw:
        raise SessionFormatError("malformed session body: no entries")
    return SessionState(
        name=_field(raw, "name", str, ""),
        entries=_entries_from_list(raw["entries"]),
        filter=_filter_from_dict(raw.get("filter", {})),
    )


def read_session_state(path: Path | str) -> SessionState:
    """Read the stored state from ``path`` without binding it to a catalog."""
    path = Path(path)
    if not path.exists():
        raise SessionFormatError(f"session file not found: {path}")
    with open(path, "rb") as f:
        return decode_state(f.read())


def save_session(session: Session, path: Path | str) -> None:
    """Write ``session`` to ``path`` and clear its dirty flag."""
    path = Path(path)
    data = encode_state(session.to_state())
    with open(path, "wb") as f:
        f.write(data)
    session.mark_saved()
    logger.info("saved session %r to %s", session.name, path)


def load_session(path: Path | str, catalog: Catalog) -> Session:
    """Restore a session from ``path`` against ``catalog``."""
    state = read_session_state(path)
    session = Session.from_state(state, catalog)
    logger.info(
        "loaded session %r from %s (%d classified)",
        state.name, path, len(state.entries),
    )
    return session
