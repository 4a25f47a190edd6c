"""Shared fixtures for unidecode-plus tests."""

import pytest

from unidecode_plus import Transliterator
from unidecode_plus.tables import PageCache


class RecordingStore:
    """Table store serving fixed pages and counting load calls."""

    def __init__(self, pages=None, fail=()):
        self.pages = pages or {}
        self.fail = set(fail)
        self.calls = []

    def load(self, key):
        self.calls.append(key)
        if key in self.fail:
            raise OSError(f"unreadable page {key}")
        return self.pages.get(key)


@pytest.fixture
def transliterator() -> Transliterator:
    """Return an engine with its own, empty page cache."""
    return Transliterator()


@pytest.fixture
def recording_store() -> RecordingStore:
    """Return a store with a short page 0x20 and an unreadable page 0x21."""
    return RecordingStore(pages={0x20: ["-"] * 0x20}, fail={0x21})


@pytest.fixture
def recording_cache(recording_store) -> PageCache:
    return PageCache(recording_store)


@pytest.fixture
def offline():
    """Return an engine over an empty store, together with that store."""
    store = RecordingStore()
    return Transliterator(PageCache(store)), store
