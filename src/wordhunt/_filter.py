"""Filter evaluation: turns a FilterConfig into an acceptance predicate."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from ._errors import FilterError

if TYPE_CHECKING:
    from ._catalog import Catalog
    from ._ledger import Ledger
    from ._types import FilterConfig, WordRecord


def evaluate(config: FilterConfig, record: WordRecord) -> bool:
    """Return True if ``record`` passes every enabled filter criterion.

    Classification is not considered here; see ``build_predicate``.
    """
    if not config.enabled:
        return True
    text = record.text
    if len(text) < config.min_letters:
        return False
    if record.occurrences < config.min_occurrences:
        return False
    if config.initial_capital and not text[:1].isupper():
        return False
    lowered = text.lower()
    for ex in config.active_exclusions():
        if lowered in ex.words:
            return False
    return True


def build_predicate(
    config: FilterConfig, catalog: Catalog, ledger: Ledger
) -> Callable[[int], bool]:
    """Acceptance for review: the filter passes and the word is unclassified."""

    def accept(index: int) -> bool:
        if ledger.is_classified(index):
            return False
        return evaluate(config, catalog[index])

    return accept


def validate(config: FilterConfig, catalog: Catalog) -> None:
    """Reject a config that is malformed or would hide every word.

    Raises:
        FilterError: If a minimum is negative, an enabled exclusion list is
            unknown, or the enabled filter accepts no word in ``catalog``.
    """
    if config.min_letters < 0:
        raise FilterError(f"min_letters must be >= 0, got {config.min_letters}")
    if config.min_occurrences < 0:
        raise FilterError(
            f"min_occurrences must be >= 0, got {config.min_occurrences}"
        )
    names = [ex.name for ex in config.exclusions]
    if len(set(names)) != len(names):
        raise FilterError(f"duplicate exclusion list names: {names}")
    missing = config.enabled_exclusions.difference(names)
    if missing:
        raise FilterError(f"unknown exclusion lists enabled: {sorted(missing)}")
    if not config.enabled or len(catalog) == 0:
        return
    for rec in catalog:
        if evaluate(config, rec):
            return
    raise FilterError("filter excludes every word")
