"""
spaCy integration for unidecode-plus.

Provides a pipeline component that attaches ASCII transliterations to docs
and tokens. The original text and tokenization are left untouched.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("en")
    >>> nlp.add_pipe("ascii_transliterator")
    >>> doc = nlp("caf\\u00e9 \\u00a9 2024")
    >>> doc._.ascii
    'cafe (c) 2024'
"""

from typing import List, Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from unidecode_plus._engine import Transliterator
from unidecode_plus._options import TransliterationOptions

__all__ = [
    "AsciiTransliteratorComponent",
    "create_ascii_transliterator",
]


@Language.factory(
    "ascii_transliterator",
    default_config={"german": False, "smart_spacing": True, "skip_ranges": []},
    assigns=["doc._.ascii", "token._.ascii"],
)
def create_ascii_transliterator(
    nlp: Language,
    name: str,
    german: bool = False,
    smart_spacing: bool = True,
    skip_ranges: Optional[List[List[int]]] = None,
) -> "AsciiTransliteratorComponent":
    """Create an ASCII transliteration pipeline component."""
    return AsciiTransliteratorComponent(
        nlp, name, german=german, smart_spacing=smart_spacing, skip_ranges=skip_ranges
    )


class AsciiTransliteratorComponent:
    """
    spaCy pipeline component for Unicode to ASCII transliteration.

    Extensions:
        - Doc._.ascii: Transliterated document text.
        - Token._.ascii: Transliterated token text.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        german: bool = False,
        smart_spacing: bool = True,
        skip_ranges: Optional[List[List[int]]] = None,
        transliterator: Optional[Transliterator] = None,
    ) -> None:
        self.name = name
        self.options = TransliterationOptions(
            german=german,
            smart_spacing=smart_spacing,
            skip_ranges=tuple(skip_ranges or ()),
        )
        self._transliterator = transliterator or Transliterator()

        if not Doc.has_extension("ascii"):
            Doc.set_extension("ascii", default=None)
        if not Token.has_extension("ascii"):
            Token.set_extension("ascii", default=None)

    def __call__(self, doc: Doc) -> Doc:
        doc._.ascii = self._transliterator.transliterate(doc.text, self.options)

        for token in doc:
            token._.ascii = self._transliterator.transliterate(token.text, self.options)

        return doc

    def to_disk(self, path: str, *, exclude: tuple = ()) -> None:
        pass

    def from_disk(self, path: str, *, exclude: tuple = ()) -> "AsciiTransliteratorComponent":
        return self

    def to_bytes(self, *, exclude: tuple = ()) -> bytes:
        return b""

    def from_bytes(self, data: bytes, *, exclude: tuple = ()) -> "AsciiTransliteratorComponent":
        return self
