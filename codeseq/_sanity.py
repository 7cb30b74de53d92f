"""Sanity checks for user-supplied predicates and mappings.

The tokenizers and `map_runes` do not validate the callables they are given: an inconsistent
predicate or a partial mapping is a precondition violation with undefined results. The
functions here probe a callable over a sample of code points and report every problem they
find as a warning, for use in tests and during development.
"""

import warnings
from collections.abc import Iterable

from codeseq._types import MAX_RUNE, _Mapping, _Predicate

__all__ = ["check_mapping_sanity", "check_predicate_sanity"]

# Latin-1, the non-Latin-1 whitespace, and a few letters and symbols from other planes
_DEFAULT_SAMPLE: tuple[int, ...] = (
    *range(0x100),
    0x0130,
    0x0131,
    0x01C6,
    0x0391,
    0x03B1,
    0x0430,
    0x1680,
    *range(0x2000, 0x200B),
    0x2028,
    0x2029,
    0x202F,
    0x205F,
    0x3000,
    0x4E2D,
    0xFFFD,
    0x1F600,
    MAX_RUNE,
)


def check_predicate_sanity(f: _Predicate, sample: Iterable[int] | None = None) -> bool:
    """Perform basic sanity checks on a separator predicate for the field tokenizers.

    Checks performed:
        1. Totality: f must not raise for any sampled code point.
        2. Type: f should return a bool.
        3. Consistency: two calls with the same code point must agree, since the tokenizers
           classify every code point once per pass.

    Args:
        f (Callable[[int], bool]): The predicate to test.
        sample (Iterable[int], optional): Code points to probe. Defaults to Latin-1 plus a
            selection of whitespace and letters from other scripts.

    Returns:
        bool: True if all checks pass, False otherwise. Issues are reported as warnings.
    """
    passed = True
    for r in _DEFAULT_SAMPLE if sample is None else sample:
        # 1. Totality
        try:
            first = f(r)
            second = f(r)
        except Exception as e:
            warnings.warn(f"Predicate raised {type(e).__name__} for code point {r:#x}: {e}")
            passed = False
            continue

        # 2. Type
        if not isinstance(first, bool):
            warnings.warn(
                f"Predicate returned {type(first).__name__} instead of bool for code point {r:#x}."
            )
            passed = False

        # 3. Consistency
        if bool(first) != bool(second):
            warnings.warn(f"Predicate is inconsistent for code point {r:#x}.")
            passed = False
    return passed


def check_mapping_sanity(mapping: _Mapping, sample: Iterable[int] | None = None) -> bool:
    """Perform basic sanity checks on a mapping for `map_runes`.

    Checks performed:
        1. Totality: the mapping must not raise for any sampled code point.
        2. Type: the mapping should return an int or None.
        3. Range: returned code points should be Unicode scalar values. Negative values are
           flagged in particular; dropping a code point is signalled with None.

    Args:
        mapping (Callable[[int], int | None]): The mapping to test.
        sample (Iterable[int], optional): Code points to probe. Defaults to Latin-1 plus a
            selection of whitespace and letters from other scripts.

    Returns:
        bool: True if all checks pass, False otherwise. Issues are reported as warnings.
    """
    passed = True
    for r in _DEFAULT_SAMPLE if sample is None else sample:
        # 1. Totality
        try:
            mapped = mapping(r)
        except Exception as e:
            warnings.warn(f"Mapping raised {type(e).__name__} for code point {r:#x}: {e}")
            passed = False
            continue

        if mapped is None:
            continue

        # 2. Type
        if not isinstance(mapped, int) or isinstance(mapped, bool):
            warnings.warn(
                f"Mapping returned {type(mapped).__name__} instead of int or None "
                f"for code point {r:#x}."
            )
            passed = False
            continue

        # 3. Range
        if mapped < 0:
            warnings.warn(
                f"Mapping returned negative value {mapped} for code point {r:#x}; "
                "return None to drop a code point."
            )
            passed = False
        elif mapped > MAX_RUNE or 0xD800 <= mapped <= 0xDFFF:
            warnings.warn(f"Mapping returned {mapped:#x}, not a Unicode scalar value, for {r:#x}.")
            passed = False
    return passed
