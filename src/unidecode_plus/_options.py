"""
Per-call transliteration options.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple, Union

__all__ = ["TransliterationOptions"]

SkipRange = Tuple[int, int]


def _coerce_range(value) -> SkipRange:
    """Turn a ``[low, high]`` pair into an inclusive ``(low, high)`` tuple."""
    try:
        low, high = value
    except (TypeError, ValueError):
        raise ValueError(f"Skip range must be a (low, high) pair, got {value!r}") from None
    if not all(isinstance(bound, int) and not isinstance(bound, bool) for bound in (low, high)):
        raise ValueError(f"Skip range bounds must be code point integers, got {value!r}")
    return (low, high)


@dataclass(frozen=True)
class TransliterationOptions:
    """
    Immutable configuration for one transliteration call.

    Attributes:
        german: Transliterate umlauts German-style (ä -> ae, A + U+0308 -> AE).
        smart_spacing: Insert or drop spaces around multi-character
            substitutions so they read as separate tokens.
        deferred_smart_spacing: Leave the boundary markers in the output for a
            later ``resolve_spacing`` call. Turns smart spacing on whatever
            ``smart_spacing`` says; see ``uses_smart_spacing``.
        skip_ranges: Inclusive ``(low, high)`` code point ranges passed
            through untouched. Checked in order; the first match wins.
    """

    german: bool = False
    smart_spacing: bool = False
    deferred_smart_spacing: bool = False
    skip_ranges: Tuple[SkipRange, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "skip_ranges", tuple(_coerce_range(r) for r in self.skip_ranges))

    @property
    def uses_smart_spacing(self) -> bool:
        """Whether the substitution pass emits boundary markers."""
        return self.deferred_smart_spacing or self.smart_spacing

    @classmethod
    def resolve(
        cls,
        options: Union["TransliterationOptions", Mapping, None] = None,
        **overrides,
    ) -> "TransliterationOptions":
        """
        Build options from an existing instance or a mapping, plus overrides.

        Example:
            >>> TransliterationOptions.resolve(deferred_smart_spacing=True).uses_smart_spacing
            True
        """
        if options is None:
            options = cls()
        elif isinstance(options, Mapping):
            options = cls(**options)
        if overrides:
            options = dataclasses.replace(options, **overrides)
        return options

    def matching_skip_range(self, cp: int) -> Optional[SkipRange]:
        """Return the first configured range containing ``cp``, if any."""
        for low, high in self.skip_ranges:
            if low <= cp <= high:
                return (low, high)
        return None
