"""
Smart-spacing resolution.

The substitution pass marks multi-character replacements with two sentinel
characters that cannot occur in transliterated output, since that output is
ASCII:

- BOUNDARY (U+0080): edge of a multi-character substitution
- RESOLVED (U+0081): an edge that already stands for a single space

``resolve_spacing`` turns those markers into plain spacing. After it runs,
neither sentinel is left in the string.

Example:
    >>> resolve_spacing("a\\x80--\\x80b")
    'a - b'
"""

import re

__all__ = ["BOUNDARY", "RESOLVED", "has_sentinels", "resolve_spacing"]

BOUNDARY = "\x80"
RESOLVED = "\x81"

# Applied in order; each rewrite sees the previous one's output.
# \w is ASCII-only (letters, digits, underscore); \s is Unicode-aware.
_REWRITES = (
    # Em-dash flanked by word characters reads as a spaced hyphen
    (re.compile(r"(\w)\x80--\x80(\w)", re.ASCII), r"\1 - \2"),
    # Boundary with nothing to attach to on the right
    (re.compile(r"\x80(?!\w)", re.ASCII), ""),
    # Adjacent substitutions, or a word running into one
    (re.compile(r"\x80\x80|(\w)\x80", re.ASCII), "\\1" + RESOLVED),
    (re.compile(r"\x80"), ""),
    # No spacing at the string edges
    (re.compile(r"\A\x81+|\x81+\Z"), ""),
    # A real space between two resolved edges stays doubled
    (re.compile(r"\x81 \x81"), "  "),
    (re.compile(r"\s?\x81+"), " "),
)


def has_sentinels(text: str) -> bool:
    """Check whether ``text`` still carries unresolved spacing markers."""
    return BOUNDARY in text or RESOLVED in text


def resolve_spacing(text: str) -> str:
    """
    Replace spacing markers with natural word spacing.

    Safe to call on text with no markers, which comes back unchanged. Output
    from several deferred ``transliterate`` calls may be concatenated and
    resolved once.

    Args:
        text: Output of ``transliterate`` with deferred smart spacing

    Returns:
        Text with every marker removed or turned into a space
    """
    if not text:
        return ""
    if not has_sentinels(text):
        return text
    for pattern, replacement in _REWRITES:
        text = pattern.sub(replacement, text)
    return text
