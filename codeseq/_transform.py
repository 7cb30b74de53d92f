"""Element-wise transforms that rewrite a code-point buffer in place.

`map_runes` is the single primitive: it feeds every code point through a mapping and compacts
the accepted results towards the front of the same storage. The case conversions are thin
instantiations of it.
"""

from codeseq._runes import as_runes
from codeseq._types import _Mapping, _RuneSeq
from codeseq._unicode import SpecialCase, simple_lower, simple_title, simple_upper

__all__ = [
    "map_runes",
    "to_lower",
    "to_lower_special",
    "to_title",
    "to_title_special",
    "to_upper",
    "to_upper_special",
]


def _writable_runes(s: _RuneSeq) -> memoryview:
    """Return a writable view over the caller's own storage.

    Raises:
        TypeError: If s has no writable code-point buffer of its own.
    """
    if isinstance(s, (str, list, tuple)):
        raise TypeError(
            f"In-place mapping needs a writable code-point buffer, got {type(s).__name__}."
        )
    view = as_runes(s)
    if view.readonly:
        raise TypeError("In-place mapping needs a writable code-point buffer, got a read-only one.")
    return view


def map_runes(mapping: _Mapping, s: _RuneSeq) -> memoryview:
    """Apply mapping to every code point of s, compacting the results in place.

    The mapping returns either the replacement code point or None to drop the code point.
    Accepted results are written left to right into the storage of s, so the write position
    never overtakes the read position and s is only ever shortened.

    Args:
        mapping (Callable[[int], int | None]): Maps a code point to its replacement, or to None
            to drop it. Must be defined for every code point.
        s (array or memoryview or np.ndarray): Writable ``array("I")``, ``np.uint32`` array or
            memoryview over one. It is modified in place and must not be used concurrently.

    Returns:
        memoryview: A view over the first ``k`` elements of s's storage, where ``k`` is the
            number of code points that were not dropped.

    Raises:
        TypeError: If s is not a writable unsigned 32-bit buffer.
    """
    view = _writable_runes(s)
    on = 0
    for r in view:
        mapped = mapping(r)
        if mapped is not None:
            view[on] = mapped
            on += 1
    return view[:on]


def to_upper(s: _RuneSeq) -> memoryview:
    """Map every letter of s to upper case, in place."""
    return map_runes(simple_upper, s)


def to_lower(s: _RuneSeq) -> memoryview:
    """Map every letter of s to lower case, in place."""
    return map_runes(simple_lower, s)


def to_title(s: _RuneSeq) -> memoryview:
    """Map every letter of s to title case, in place."""
    return map_runes(simple_title, s)


def to_upper_special(case: SpecialCase, s: _RuneSeq) -> memoryview:
    """Map every letter of s to upper case in place, giving priority to the rules of case.

    Args:
        case (SpecialCase): Language-specific mappings, e.g. `TURKISH_CASE`.
        s (array or memoryview or np.ndarray): The writable buffer to convert.

    Returns:
        memoryview: A view over the converted storage of s.
    """
    return map_runes(case.to_upper, s)


def to_lower_special(case: SpecialCase, s: _RuneSeq) -> memoryview:
    """Map every letter of s to lower case in place, giving priority to the rules of case.

    Args:
        case (SpecialCase): Language-specific mappings, e.g. `TURKISH_CASE`.
        s (array or memoryview or np.ndarray): The writable buffer to convert.

    Returns:
        memoryview: A view over the converted storage of s.
    """
    return map_runes(case.to_lower, s)


def to_title_special(case: SpecialCase, s: _RuneSeq) -> memoryview:
    """Map every letter of s to title case in place, giving priority to the rules of case."""
    return map_runes(case.to_title, s)
