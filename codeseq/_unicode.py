"""Unicode classification and single code point case mapping.

These are the collaborators the tokenizer and the transform layer are built on: a whitespace
predicate and case mappings that turn one code point into exactly one code point. The data
comes from Python's own Unicode database through ``str`` methods; no tables are kept here
beyond the locale-specific overrides of `SpecialCase`.
"""

from bisect import bisect_right
from collections.abc import Iterable
from typing import NamedTuple

from codeseq._types import MAX_RUNE

__all__ = [
    "AZERI_CASE",
    "TURKISH_CASE",
    "CaseRange",
    "SpecialCase",
    "is_space",
    "simple_lower",
    "simple_title",
    "simple_upper",
]

# Whitespace within Latin-1: \t, \n, \v, \f, \r, space, NEL and NBSP
_LATIN1_SPACE = frozenset((0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0x85, 0xA0))

_UPPER = 0
_LOWER = 1
_TITLE = 2


def is_space(r: int) -> bool:
    """Reports whether r is a Unicode White_Space code point.

    Args:
        r (int): The code point to classify.

    Returns:
        bool: True for whitespace. The ASCII information separators (U+001C to U+001F), which
            ``str.isspace`` accepts, are not whitespace here.
    """
    if r <= 0xFF:
        return r in _LATIN1_SPACE
    return r <= MAX_RUNE and chr(r).isspace()


# Simple lower case mappings of code points whose full mapping expands
_LOWER_OVERRIDES = {0x0130: 0x0069}


def _single(r: int, mapped: str) -> int:
    """Return the mapped code point, or r when the full mapping is not a single code point."""
    return ord(mapped) if len(mapped) == 1 else r


def simple_upper(r: int) -> int:
    """Map r to upper case, leaving it unchanged when there is no single code point mapping."""
    if not 0 <= r <= MAX_RUNE:
        return r
    mapped = chr(r).upper()
    if len(mapped) != 1:
        # Greek letters with an iota subscript upper-case to their single titlecase form
        mapped = chr(r).title()
    return _single(r, mapped)


def simple_lower(r: int) -> int:
    """Map r to lower case, leaving it unchanged when there is no single code point mapping."""
    if not 0 <= r <= MAX_RUNE:
        return r
    if r in _LOWER_OVERRIDES:
        return _LOWER_OVERRIDES[r]
    return _single(r, chr(r).lower())


def simple_title(r: int) -> int:
    """Map r to title case, leaving it unchanged when there is no single code point mapping."""
    if not 0 <= r <= MAX_RUNE:
        return r
    return _single(r, chr(r).title())


class CaseRange(NamedTuple):
    """An inclusive range of code points sharing the same case deltas.

    Attributes:
        lo (int): First code point of the range.
        hi (int): Last code point of the range.
        delta (tuple[int, int, int]): Offsets added to a code point to obtain its upper, lower
            and title case forms, in that order.
    """

    lo: int
    hi: int
    delta: tuple[int, int, int]


class SpecialCase:
    """Language-specific case mappings that take priority over the default ones.

    Code points covered by one of the ranges are mapped with the range's delta; every other
    code point falls back to `simple_upper`, `simple_lower` or `simple_title`.

    Example:

    .. code-block:: python

        TURKISH_CASE.to_upper(ord("i"))  # 0x130, LATIN CAPITAL LETTER I WITH DOT ABOVE
    """

    def __init__(self, ranges: Iterable[CaseRange]) -> None:
        """Initialise the SpecialCase.

        Args:
            ranges (Iterable[CaseRange]): Non-overlapping ranges, in any order.

        Raises:
            ValueError: If a range is empty or two ranges overlap.
        """
        self._ranges = tuple(sorted(ranges, key=lambda cr: cr.lo))
        for cr in self._ranges:
            if cr.hi < cr.lo:
                raise ValueError(f"Empty case range {cr.lo:#x}..{cr.hi:#x}.")
        for prev, cur in zip(self._ranges, self._ranges[1:]):
            if cur.lo <= prev.hi:
                raise ValueError(f"Case ranges overlap at {cur.lo:#x}.")
        self._starts = [cr.lo for cr in self._ranges]

    def __repr__(self) -> str:
        return f"SpecialCase({len(self._ranges)} ranges)"

    def _lookup(self, case: int, r: int) -> tuple[int, bool]:
        """Map r through the range containing it.

        Returns:
            tuple[int, bool]: The mapped code point and whether a range covered r.
        """
        i = bisect_right(self._starts, r) - 1
        if i >= 0 and r <= self._ranges[i].hi:
            return r + self._ranges[i].delta[case], True
        return r, False

    def to_upper(self, r: int) -> int:
        """Map r to upper case, giving priority to the special mappings."""
        mapped, found = self._lookup(_UPPER, r)
        return mapped if found else simple_upper(r)

    def to_lower(self, r: int) -> int:
        """Map r to lower case, giving priority to the special mappings."""
        mapped, found = self._lookup(_LOWER, r)
        return mapped if found else simple_lower(r)

    def to_title(self, r: int) -> int:
        """Map r to title case, giving priority to the special mappings."""
        mapped, found = self._lookup(_TITLE, r)
        return mapped if found else simple_title(r)


TURKISH_CASE = SpecialCase(
    [
        CaseRange(0x0049, 0x0049, (0, 0x131 - 0x49, 0)),
        CaseRange(0x0069, 0x0069, (0x130 - 0x69, 0, 0x130 - 0x69)),
        CaseRange(0x0130, 0x0130, (0, 0x69 - 0x130, 0)),
        CaseRange(0x0131, 0x0131, (0x49 - 0x131, 0, 0x49 - 0x131)),
    ]
)
"""Dotted and dotless i as cased in Turkish."""

AZERI_CASE = TURKISH_CASE
"""Azeri shares the Turkish casing of i."""
