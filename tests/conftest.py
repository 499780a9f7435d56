"""Shared fixtures for wordhunt tests."""

import pytest

from wordhunt import Catalog, Session


@pytest.fixture
def small_catalog():
    """The five most frequent words of a short text."""
    return Catalog.from_counts([
        ("and", 50), ("the", 40), ("to", 30), ("me", 20), ("of", 10),
    ])


@pytest.fixture
def book_catalog():
    """A mixed catalog with capitals, short words and rare words."""
    return Catalog.from_counts([
        ("the", 120),
        ("a", 90),
        ("back", 40),
        ("country", 12),
        ("Oliver", 10),
        ("surgeon", 6),
        ("trying", 5),
        ("Workhouse", 5),
        ("Parish", 4),
        ("gruel", 2),
        ("Bumble", 1),
    ])


@pytest.fixture
def session(small_catalog):
    return Session(small_catalog, name="book1")


@pytest.fixture
def book_session(book_catalog):
    return Session(book_catalog, name="book2")
