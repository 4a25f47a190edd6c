"""
Page registry and page cache for the transliteration tables.

A page holds the 256 ASCII replacements for one high byte of the code point
space. Base pages come from the ``Unidecode`` distribution, which ships one
``xNNN`` data module per populated page. Bundled JSON overlays under
``data/`` add pages that distribution lacks (the German low page and the
emoji pages) or patch entries into the pages it has.

Page keys are ints, except for the German low page, which lives at ``0.5``
next to page ``0``.

Loading never fails outward: anything that goes wrong while reading a page
degrades to an all-placeholder page.
"""

from __future__ import annotations

import importlib
import json
import logging
import re
import threading
from importlib import resources
from pathlib import Path
from typing import Dict, Optional, Protocol, Sequence, Tuple, Union

__all__ = [
    "PAGE_SIZE",
    "PLACEHOLDER",
    "FALLBACK_PAGE",
    "Page",
    "PageKey",
    "TableStore",
    "UnidecodeTableStore",
    "PageCache",
    "page_name",
]

logger = logging.getLogger(__name__)

PAGE_SIZE = 256

# Replacement for anything the tables cannot represent
PLACEHOLDER = "_"

PageKey = Union[int, float]
Page = Tuple[str, ...]

FALLBACK_PAGE: Page = (PLACEHOLDER,) * PAGE_SIZE

# Data modules of the Unidecode distribution: x000.py ... x1f6.py
_MODULE_RE = re.compile(r"x([0-9a-f]{3})\.py")


def page_name(key: PageKey) -> str:
    """
    Return the resource name for a page key.

    The integer part is rendered as zero-padded lowercase hex (at least two
    digits); the German half page gets a ``.5`` suffix.

    Example:
        >>> page_name(0x20)
        'x20'
        >>> page_name(0x1F4)
        'x1f4'
        >>> page_name(0.5)
        'x00.5'
    """
    whole = int(key)
    name = f"x{whole:02x}"
    if key != whole:
        name += ".5"
    return name


class TableStore(Protocol):
    """Anything that can hand out raw page data by page key."""

    def load(self, key: PageKey) -> Optional[Sequence[Optional[str]]]:
        """Return the raw entries for ``key``, or None if there is no such page."""
        ...


class UnidecodeTableStore:
    """
    Table store backed by the Unidecode data modules plus bundled overlays.

    The set of available pages is indexed once, at construction, into an
    explicit registry; ``load`` never guesses module names it has not seen.
    """

    def __init__(self, data_dir: Optional[Path] = None, package: str = "unidecode"):
        """
        Args:
            data_dir: Directory holding ``x*.json`` overlay pages.
                      Defaults to bundled package data.
            package: Distribution package providing ``xNNN`` data modules.
        """
        if data_dir is None:
            data_dir = Path(__file__).parent / "data"

        self.data_dir = Path(data_dir)
        self.package = package

        self.modules = self._index_modules()
        self.overlays = {path.stem: path for path in sorted(self.data_dir.glob("x*.json"))}

    def _index_modules(self) -> Dict[int, str]:
        """Map page numbers to the data modules shipped by ``self.package``."""
        try:
            root = resources.files(self.package)
        except ModuleNotFoundError:
            logger.warning("Table package %r is not installed; only overlay pages are available", self.package)
            return {}

        index = {}
        for entry in root.iterdir():
            match = _MODULE_RE.fullmatch(entry.name)
            if match:
                index[int(match.group(1), 16)] = f"{self.package}.{entry.name[:-3]}"
        return index

    def available(self) -> list:
        """Return the sorted page keys this store can produce data for."""
        keys = set(self.modules)
        for name in self.overlays:
            whole, _, half = name[1:].partition(".")
            keys.add(int(whole, 16) + (0.5 if half else 0))
        return sorted(keys)

    def load(self, key: PageKey) -> Optional[Sequence[Optional[str]]]:
        base = None
        module_name = self.modules.get(int(key))
        if module_name is not None:
            base = importlib.import_module(module_name).data

        overlay = self.overlays.get(page_name(key))
        if overlay is None:
            # The German half page only exists as an overlay
            return base if key == int(key) else None

        entries = self._read_overlay(overlay)
        page = list(base or ())
        page.extend([None] * (PAGE_SIZE - len(page)))
        for low, replacement in entries.items():
            page[int(low, 16)] = replacement
        return page

    def _read_overlay(self, path: Path) -> Dict[str, str]:
        """Load the sparse ``entries`` mapping (hex low byte -> text) of an overlay."""
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)["entries"]


def _to_page(data: Sequence[Optional[str]]) -> Page:
    """Shape raw table data into exactly PAGE_SIZE strings."""
    page = [PLACEHOLDER if entry is None else str(entry) for entry in data[:PAGE_SIZE]]
    # Some tables stop short of 256 entries
    if len(page) < PAGE_SIZE:
        page.extend([PLACEHOLDER] * (PAGE_SIZE - len(page)))
    return tuple(page)


class PageCache:
    """
    Load-once memo of pages keyed by page number.

    Entries are never invalidated. A page is fully built before it is
    inserted, and the first page inserted for a key is the one every caller
    sees, so concurrent loads of the same key are harmless.
    """

    def __init__(self, store: Optional[TableStore] = None):
        self.store = store if store is not None else UnidecodeTableStore()
        self._pages: Dict[PageKey, Page] = {}
        self._lock = threading.Lock()

    def __contains__(self, key: PageKey) -> bool:
        return key in self._pages

    def __len__(self) -> int:
        return len(self._pages)

    def get(self, key: PageKey) -> Page:
        """Return the page for ``key``, loading it on first access."""
        page = self._pages.get(key)
        if page is None:
            page = self._load(key)
            with self._lock:
                page = self._pages.setdefault(key, page)
        return page

    def _load(self, key: PageKey) -> Page:
        name = page_name(key)
        try:
            data = self.store.load(key)
            if data is None:
                logger.debug("No table data for page %s; using placeholders", name)
                return FALLBACK_PAGE
            page = _to_page(data)
        except Exception:
            logger.warning("Failed to load page %s; using placeholders", name, exc_info=True)
            return FALLBACK_PAGE

        logger.debug("Loaded page %s", name)
        return page
