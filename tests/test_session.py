"""Tests for the review session: classification, filtering, persistence views."""

import pytest

from wordhunt import (
    Catalog,
    ExclusionList,
    FilterConfig,
    FilterError,
    NoCurrentWordError,
    NotSelectableError,
    Session,
    SessionState,
    WordState,
)


def test_starts_on_first_word(session):
    assert session.current_index == 0
    assert session.current_word.text == "and"
    assert not session.dirty
    assert not session.exhausted


def test_walk_through(session):
    """Classifying the current word moves on to the next one."""
    session.classify(0, WordState.KNOWN)
    assert session.current_word.text == "the"
    session.classify(1, WordState.UNKNOWN)
    assert session.current_word.text == "to"
    session.classify(2, WordState.KNOWN)
    assert session.current_word.text == "me"
    assert session.progress().done == 3
    assert session.count_by_state(WordState.KNOWN) == 2
    assert session.count_by_state(WordState.UNKNOWN) == 1
    assert session.dirty


def test_mark_shortcuts(session):
    session.mark_known()
    session.mark_unknown()
    assert session.state_of(0) is WordState.KNOWN
    assert session.state_of(1) is WordState.UNKNOWN
    assert session.current_word.text == "to"


def test_reclassify_overwrites(session):
    session.classify(3, WordState.KNOWN)
    session.classify(3, WordState.UNKNOWN)
    assert session.state_of(3) is WordState.UNKNOWN
    assert [i for i, _, _ in session.to_state().entries] == [3]


def test_classify_other_word_keeps_cursor(session):
    session.classify(3, WordState.KNOWN)
    assert session.current_index == 0


def test_classify_wraps_back_to_earlier_word(session):
    session.select(4)
    session.classify(4, WordState.KNOWN)
    assert session.current_index == 3


def test_exhaustion(session):
    for _ in range(5):
        session.mark(WordState.KNOWN)
    assert session.exhausted
    assert session.current_word is None
    assert session.progress().done == 5
    with pytest.raises(NoCurrentWordError):
        session.mark(WordState.KNOWN)


def test_unclassify_resumes_review(session):
    for _ in range(5):
        session.mark(WordState.KNOWN)
    session.classify(2, WordState.UNCLASSIFIED)
    assert session.current_index == 2


def test_classify_out_of_range(session):
    with pytest.raises(IndexError):
        session.classify(5, WordState.KNOWN)


def test_select_requires_accepted_word(session):
    session.classify(2, WordState.KNOWN)
    with pytest.raises(NotSelectableError):
        session.select(2)
    with pytest.raises(IndexError):
        session.select(9)
    session.select(3)
    assert session.current_word.text == "me"


def test_empty_catalog_is_exhausted():
    session = Session(Catalog.from_counts([]))
    assert session.exhausted
    assert session.progress().total == 0


def test_impossible_filter_is_rejected(book_session):
    before = book_session.filter
    with pytest.raises(FilterError):
        book_session.apply_filter(book_session.edit_filter(min_letters=1000))
    assert book_session.filter is before
    assert book_session.current_word.text == "the"


def test_filter_walk_through(book_session):
    config = book_session.edit_filter(
        min_letters=6, min_occurrences=4, initial_capital=True,
    )
    book_session.apply_filter(config)
    assert book_session.current_word.text == "Oliver"

    names = ExclusionList("names", frozenset({"oliver"}))
    book_session.apply_filter(book_session.edit_filter(
        exclusions=(names,), enabled_exclusions=frozenset({"names"}),
    ))
    assert book_session.current_word.text == "Workhouse"

    book_session.mark(WordState.KNOWN)
    assert book_session.current_word.text == "Parish"

    book_session.set_filters_enabled(False)
    assert book_session.current_word.text == "Parish"
    assert not book_session.filter.enabled


def test_edit_filter_is_scratch_copy(book_session):
    draft = book_session.edit_filter(min_letters=5)
    assert book_session.filter.min_letters == 0
    assert draft.min_letters == 5


def test_filter_exhausts_when_all_accepted_are_classified(book_session):
    book_session.apply_filter(FilterConfig(initial_capital=True))
    for _ in range(4):
        book_session.mark(WordState.KNOWN)
    assert book_session.exhausted
    book_session.set_filters_enabled(False)
    assert not book_session.exhausted
    assert book_session.is_accepted(book_session.current_index)


def test_cursor_always_accepted(book_session):
    steps = [
        lambda s: s.apply_filter(FilterConfig(min_letters=5)),
        lambda s: s.mark(WordState.UNKNOWN),
        lambda s: s.apply_filter(FilterConfig(min_occurrences=5)),
        lambda s: s.classify(0, WordState.KNOWN),
        lambda s: s.mark(WordState.KNOWN),
        lambda s: s.set_filters_enabled(False),
        lambda s: s.mark(WordState.UNKNOWN),
    ]
    for step in steps:
        step(book_session)
        index = book_session.current_index
        assert index is not None
        assert book_session.is_accepted(index)


def test_progress_breakdown(book_session):
    book_session.classify(0, WordState.KNOWN)
    book_session.classify(1, WordState.UNKNOWN)
    book_session.apply_filter(FilterConfig(initial_capital=True))
    progress = book_session.progress()
    assert progress.total == 11
    assert progress.known == 1
    assert progress.unknown == 1
    assert progress.unseen == 4
    assert progress.filtered == 5
    assert progress.done == 2


def test_export_and_selection(session):
    session.mark(WordState.KNOWN)
    session.mark(WordState.UNKNOWN)
    session.mark(WordState.KNOWN)
    assert list(session.export()) == [
        ("and", WordState.KNOWN), ("to", WordState.KNOWN),
    ]
    assert list(session.export([WordState.KNOWN, WordState.UNKNOWN])) == [
        ("and", WordState.KNOWN), ("the", WordState.UNKNOWN), ("to", WordState.KNOWN),
    ]
    assert session.selection() == ["the"]


def test_to_state(session):
    session.mark(WordState.KNOWN)
    session.mark(WordState.UNKNOWN)
    state = session.to_state()
    assert state.name == "book1"
    assert state.entries == ((0, "and", WordState.KNOWN), (1, "the", WordState.UNKNOWN))
    assert state.filter == session.filter


def test_from_state_recomputes_cursor(small_catalog):
    state = SessionState(
        name="book1",
        entries=((0, "and", WordState.KNOWN), (1, "the", WordState.UNKNOWN)),
    )
    session = Session.from_state(state, small_catalog)
    assert session.name == "book1"
    assert session.current_word.text == "to"
    assert not session.dirty


def test_from_state_drops_drifted_entries(small_catalog):
    state = SessionState(
        name="book1",
        entries=(
            (0, "and", WordState.KNOWN),
            (2, "sea", WordState.KNOWN),
            (7, "zebra", WordState.UNKNOWN),
        ),
    )
    session = Session.from_state(state, small_catalog)
    assert session.state_of(0) is WordState.KNOWN
    assert session.state_of(2) is WordState.UNCLASSIFIED
    assert session.progress().done == 1
    assert session.current_word.text == "the"


def test_from_state_ignores_filter_that_hides_everything(small_catalog):
    state = SessionState(name="x", entries=(), filter=FilterConfig(min_letters=6))
    session = Session.from_state(state, small_catalog)
    assert session.filter == FilterConfig()
    assert session.current_index == 0


def test_mark_saved_clears_dirty(session):
    session.mark(WordState.KNOWN)
    session.mark_saved()
    assert not session.dirty


def test_count_by_state_accepts_state_values(session):
    session.classify(0, "known")
    assert session.count_by_state("known") == 1
