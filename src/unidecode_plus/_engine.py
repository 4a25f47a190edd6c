"""
Table-driven Unicode to ASCII transliteration.

Every code point outside US-ASCII is replaced by an entry from the page
tables (see ``unidecode_plus.tables``). With smart spacing on, replacements
that are more than a plain word get wrapped in boundary markers, which
``resolve_spacing`` later turns into word spacing.

Example:
    >>> from unidecode_plus import Transliterator
    >>> t = Transliterator()
    >>> t.transliterate("Kno\\u0301ssos \\u00a9 2024")
    'Knossos (c) 2024'
    >>> t.transliterate("a\\u2014b", smart_spacing=True)
    'a - b'
"""

from __future__ import annotations

import re
import threading
from typing import Mapping, Optional, Union

from unidecode_plus._options import TransliterationOptions
from unidecode_plus._spacing import BOUNDARY, RESOLVED, resolve_spacing
from unidecode_plus.tables import PLACEHOLDER, PageCache

__all__ = [
    "Transliterator",
    "default_transliterator",
    "fold_german",
    "join_surrogates",
    "transliterate",
]

# Only the emoji pages with table data; other astral pages map to "_"
EMOJI_PAGES = frozenset({0x1F4, 0x1F6, 0x1F9})

EM_DASH = 0x2014

# Page key of the German variant of page 0
GERMAN_PAGE = 0.5

_NON_ASCII = re.compile(r"[^\x00-\x7f]")
_SURROGATE_PAIR = re.compile(r"[\ud800-\udbff][\udc00-\udfff]")
_GERMAN_UPPER = re.compile(r"([AOU])\u0308")
_GERMAN_LOWER = re.compile(r"([aou])\u0308")
_WORD_ONLY = re.compile(r"\w+", re.ASCII)

# Replacements emitted without boundary markers even when not word-only
_BARE_REPLACEMENTS = frozenset({PLACEHOLDER, "[?]"})


def fold_german(text: str) -> str:
    """
    Fold a combining diaeresis over A/O/U into a trailing E.

    Example:
        >>> fold_german("A\\u0308rger u\\u0308ber")
        'AErger ueber'
    """
    text = _GERMAN_UPPER.sub(r"\1E", text)
    return _GERMAN_LOWER.sub(r"\1e", text)


def _join_pair(match: re.Match) -> str:
    high, low = match.group()
    return chr(0x10000 + ((ord(high) - 0xD800) << 10) + (ord(low) - 0xDC00))


def join_surrogates(text: str) -> str:
    """
    Combine UTF-16 surrogate pairs into single code points.

    Strings decoded with ``surrogatepass`` may carry astral characters as two
    code units. Unpaired surrogates are left alone.
    """
    return _SURROGATE_PAIR.sub(_join_pair, text)


def _is_isolated_surrogate(high: int) -> bool:
    return 0x18 < high < 0x1E or 0xD7 < high < 0xF9


class Transliterator:
    """
    Unicode to ASCII transliteration engine.

    Owns a page cache, so pages load once per engine. Engines may share a
    cache; ``PageCache`` is safe to use from several threads.
    """

    def __init__(self, cache: Optional[PageCache] = None):
        self.cache = cache if cache is not None else PageCache()

    def transliterate(
        self,
        text: Optional[str],
        options: Union[TransliterationOptions, Mapping, None] = None,
        **overrides,
    ) -> str:
        """
        Transliterate ``text`` to ASCII.

        Args:
            text: Any Unicode text. Empty or None gives "".
            options: TransliterationOptions or a mapping of its fields
            **overrides: Individual option fields, e.g. ``german=True``

        Returns:
            ASCII text. With deferred smart spacing the result may still
            hold boundary markers; pass it through ``resolve_spacing``.
        """
        if not text:
            return ""

        options = TransliterationOptions.resolve(options, **overrides)

        if options.german:
            text = fold_german(text)

        text = join_surrogates(text)
        text = _NON_ASCII.sub(lambda m: self.substitute(m.group(), options), text)

        if options.uses_smart_spacing and not options.deferred_smart_spacing:
            return resolve_spacing(text)
        return text

    def substitute(self, char: str, options: TransliterationOptions) -> str:
        """Return the replacement for one non-ASCII character."""
        cp = ord(char)

        if options.skip_ranges and options.matching_skip_range(cp) is not None:
            return char

        high = cp >> 8
        low = cp & 0xFF
        key = GERMAN_PAGE if high == 0 and options.german else high
        emoji = high in EMOJI_PAGES

        if _is_isolated_surrogate(high):
            return ""
        if high > 0xFF and not emoji:
            return PLACEHOLDER

        replacement = self.cache.get(key)[low]

        if not options.uses_smart_spacing:
            return replacement
        if cp == EM_DASH:
            return BOUNDARY + "--" + BOUNDARY
        if replacement in _BARE_REPLACEMENTS or _WORD_ONLY.fullmatch(replacement):
            return replacement
        if emoji:
            return BOUNDARY + RESOLVED + replacement + RESOLVED + BOUNDARY
        return BOUNDARY + replacement.strip() + BOUNDARY

    def resolve_spacing(self, text: str) -> str:
        """Resolve boundary markers left by deferred smart spacing."""
        return resolve_spacing(text)


_default: Optional[Transliterator] = None
_default_lock = threading.Lock()


def default_transliterator() -> Transliterator:
    """Return the shared engine used by the module-level ``transliterate``."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = Transliterator()
    return _default


def transliterate(
    text: Optional[str],
    options: Union[TransliterationOptions, Mapping, None] = None,
    **overrides,
) -> str:
    """
    Transliterate Unicode text into printable US-ASCII.

    Example:
        >>> transliterate("\\u5317\\u4eb0")
        'Bei Jing '
        >>> transliterate("\\u5317\\u4eb0", smart_spacing=True)
        'Bei Jing'
        >>> transliterate("Gr\\u00fc\\u00dfe", german=True)
        'Gruesse'
    """
    return default_transliterator().transliterate(text, options, **overrides)
