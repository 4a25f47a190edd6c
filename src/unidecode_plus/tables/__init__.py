"""
Transliteration tables submodule.

Re-exports the page registry and the load-once page cache.

Basic usage:
    >>> from unidecode_plus.tables import PageCache
    >>> cache = PageCache()
    >>> cache.get(0x20)[0x26]
    '...'
"""

from unidecode_plus.tables._store import (
    FALLBACK_PAGE,
    PAGE_SIZE,
    PLACEHOLDER,
    Page,
    PageCache,
    PageKey,
    TableStore,
    UnidecodeTableStore,
    page_name,
)

__all__ = [
    "FALLBACK_PAGE",
    "PAGE_SIZE",
    "PLACEHOLDER",
    "Page",
    "PageCache",
    "PageKey",
    "TableStore",
    "UnidecodeTableStore",
    "page_name",
]
