"""
unidecode-plus: Unicode to ASCII transliteration with smart spacing.

Maps every non-ASCII character to a replacement from static per-page tables,
then optionally repairs the word spacing those replacements introduce.

Basic usage:
    >>> from unidecode_plus import transliterate
    >>> transliterate("caf\\u00e9 \\u00a9 2024")
    'cafe (c) 2024'
    >>> transliterate("\\u5317\\u4eb0 \\u2014 Beijing", smart_spacing=True)
    'Bei Jing -- Beijing'

Deferred spacing, resolved once over several fragments:
    >>> from unidecode_plus import resolve_spacing
    >>> parts = [transliterate(s, deferred_smart_spacing=True) for s in ("x\\u00bd", "\\u00a9 2024")]
    >>> resolve_spacing(" ".join(parts))
    'x 1/2 (c) 2024'
"""

from unidecode_plus._engine import (
    Transliterator,
    default_transliterator,
    fold_german,
    join_surrogates,
    transliterate,
)
from unidecode_plus._options import TransliterationOptions
from unidecode_plus._spacing import BOUNDARY, RESOLVED, has_sentinels, resolve_spacing
from unidecode_plus.tables import PageCache, TableStore, UnidecodeTableStore

__version__ = "0.1.0"
__all__ = [
    "transliterate",
    "resolve_spacing",
    "Transliterator",
    "TransliterationOptions",
    "default_transliterator",
    "fold_german",
    "join_surrogates",
    "has_sentinels",
    "BOUNDARY",
    "RESOLVED",
    "PageCache",
    "TableStore",
    "UnidecodeTableStore",
]


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name == "AsciiTransliteratorComponent":
        try:
            from unidecode_plus.spacy import AsciiTransliteratorComponent
            return AsciiTransliteratorComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install unidecode-plus[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
