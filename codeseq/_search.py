"""Provides search primitives over code-point sequences.

Offers first and last occurrence search, equality, containment and non-overlapping
counting. Long sequences are searched with NumPy candidate filtering when NumPy is
available, with a pure Python scan as the fallback. Both paths return identical results.
"""

from codeseq._runes import as_runes
from codeseq._types import _HAS_NUMPY, _RuneSeq, np

__all__ = [
    "contains",
    "contains_rune",
    "count",
    "equal",
    "has_prefix",
    "has_suffix",
    "index",
    "index_rune",
    "last_index",
    "last_index_rune",
]

# Minimum haystack length (in code points) for which the NumPy kernels are used
_VECTORISE_THRESHOLD = 256

_UINT32_MAX = 0xFFFFFFFF


def _use_numpy(n: int) -> bool:
    """Decide whether a haystack of length ``n`` is searched with NumPy.

    Args:
        n (int): The haystack length in code points.

    Returns:
        bool: True if NumPy is available and the haystack is long enough.
    """
    return _HAS_NUMPY and n > 0 and n >= _VECTORISE_THRESHOLD


def _storable(r: int) -> bool:
    """Check that ``r`` fits in an unsigned 32-bit element and can therefore be matched."""
    return 0 <= r <= _UINT32_MAX


def _match_positions(s: memoryview, sep: memoryview) -> "np.ndarray":
    """Finds every start offset of sep in s, overlapping occurrences included.

    Candidates are the positions where the first element of sep occurs; they are narrowed
    one pattern position at a time until only full matches remain.

    Args:
        s (memoryview): The haystack.
        sep (memoryview): The non-empty needle, not longer than the haystack.

    Returns:
        np.ndarray: Sorted offsets of all matches.
    """
    haystack = np.frombuffer(s, dtype=np.uint32)
    needle = np.frombuffer(sep, dtype=np.uint32)
    candidates = np.flatnonzero(haystack[: len(haystack) - len(needle) + 1] == needle[0])
    for k in range(1, len(needle)):
        if candidates.size == 0:
            break
        candidates = candidates[haystack[candidates + k] == needle[k]]
    return candidates


def _scan_rune(s: memoryview, r: int, start: int, end: int) -> int:
    """Linear forward scan for ``r`` within ``s[start:end]``, returning an absolute offset or -1."""
    for i in range(start, end):
        if s[i] == r:
            return i
    return -1


def _rscan_rune(s: memoryview, r: int, end: int) -> int:
    """Linear backward scan for ``r`` within ``s[:end]``, returning an absolute offset or -1."""
    for i in range(end - 1, -1, -1):
        if s[i] == r:
            return i
    return -1


def _index_rune(s: memoryview, r: int) -> int:
    if not _storable(r):
        return -1
    if _use_numpy(len(s)):
        hits = np.flatnonzero(np.frombuffer(s, dtype=np.uint32) == r)
        return int(hits[0]) if hits.size else -1
    return _scan_rune(s, r, 0, len(s))


def _last_index_rune(s: memoryview, r: int) -> int:
    if not _storable(r):
        return -1
    if _use_numpy(len(s)):
        hits = np.flatnonzero(np.frombuffer(s, dtype=np.uint32) == r)
        return int(hits[-1]) if hits.size else -1
    return _rscan_rune(s, r, len(s))


def _equal(a: memoryview, b: memoryview) -> bool:
    if len(a) != len(b):
        return False
    for x, y in zip(a, b):
        if x != y:
            return False
    return True


def _index(s: memoryview, sep: memoryview) -> int:
    n = len(sep)
    if n == 0:
        return 0
    if n > len(s):
        return -1
    c = sep[0]
    if n == 1:
        return _index_rune(s, c)

    if _use_numpy(len(s)):
        positions = _match_positions(s, sep)
        return int(positions[0]) if positions.size else -1

    # Only windows starting before `limit` can hold a full match
    limit = len(s) - n + 1
    i = 0
    while i < limit:
        if s[i] != c:
            i = _scan_rune(s, c, i, limit)
            if i < 0:
                break
        if _equal(s[i : i + n], sep):
            return i
        # Resume right after the candidate so overlapping windows are still considered
        i += 1
    return -1


def _last_index(s: memoryview, sep: memoryview) -> int:
    n = len(sep)
    if n == 0:
        return len(s)
    if n > len(s):
        return -1
    c = sep[0]
    if n == 1:
        return _last_index_rune(s, c)

    if _use_numpy(len(s)):
        positions = _match_positions(s, sep)
        return int(positions[-1]) if positions.size else -1

    i = len(s) - n
    while i >= 0:
        if s[i] != c:
            i = _rscan_rune(s, c, i + 1)
            if i < 0:
                break
        if _equal(s[i : i + n], sep):
            return i
        i -= 1
    return -1


def _find_all(s: memoryview, sep: memoryview, limit: int = -1) -> list[int]:
    """Finds the offsets of non-overlapping occurrences of sep, scanning from the left.

    The haystack is searched once: with NumPy every candidate is located in a single
    vectorised pass and the non-overlapping matches are then picked greedily.

    Args:
        s (memoryview): The haystack.
        sep (memoryview): The needle.
        limit (int): Maximum number of offsets to return; negative means all of them.

    Returns:
        list[int]: Sorted start offsets. Empty if sep is empty or longer than s.
    """
    n = len(sep)
    if n == 0 or n > len(s) or limit == 0:
        return []

    offsets: list[int] = []
    if _use_numpy(len(s)):
        next_start = 0
        for p in _match_positions(s, sep).tolist():
            # A match consumes its span, so the next one must start after it
            if p >= next_start:
                offsets.append(p)
                if len(offsets) == limit:
                    break
                next_start = p + n
        return offsets

    start = 0
    while len(offsets) != limit:
        o = _index(s[start:], sep)
        if o < 0:
            break
        offsets.append(start + o)
        start += o + n
    return offsets


def _count(s: memoryview, sep: memoryview) -> int:
    n = len(sep)
    if n == 0:
        return len(s) + 1
    if n > len(s):
        return 0
    if n == 1 and _use_numpy(len(s)):
        return int(_match_positions(s, sep).size)
    return len(_find_all(s, sep))


def index_rune(s: _RuneSeq, r: int) -> int:
    """Finds the first occurrence of the code point r in s.

    Args:
        s (str or array or memoryview or list or tuple or np.ndarray): The sequence to search within.
        r (int): The code point to search for.

    Returns:
        int: The 0-based offset of the first occurrence, or -1 if not found.
    """
    return _index_rune(as_runes(s), r)


def last_index_rune(s: _RuneSeq, r: int) -> int:
    """Finds the last occurrence of the code point r in s.

    Args:
        s (str or array or memoryview or list or tuple or np.ndarray): The sequence to search within.
        r (int): The code point to search for.

    Returns:
        int: The 0-based offset of the last occurrence, or -1 if not found.
    """
    return _last_index_rune(as_runes(s), r)


def equal(a: _RuneSeq, b: _RuneSeq) -> bool:
    """Reports whether a and b have the same length and the same code points.

    Args:
        a (str or array or memoryview or list or tuple or np.ndarray): The first sequence.
        b (str or array or memoryview or list or tuple or np.ndarray): The second sequence.

    Returns:
        bool: True if both sequences are equal element by element.
    """
    return _equal(as_runes(a), as_runes(b))


def index(s: _RuneSeq, sep: _RuneSeq) -> int:
    """Finds the first occurrence of sep in s.

    Candidate windows are located by scanning for the first code point of sep and then
    verified in full. After a failed verification the scan resumes at the next offset, so
    overlapping candidates are never skipped.

    Args:
        s (str or array or memoryview or list or tuple or np.ndarray): The sequence to search within.
        sep (str or array or memoryview or list or tuple or np.ndarray): The sequence to search for.

    Returns:
        int: The 0-based offset of the first occurrence, 0 if sep is empty, or -1 if not found.
    """
    return _index(as_runes(s), as_runes(sep))


def last_index(s: _RuneSeq, sep: _RuneSeq) -> int:
    """Finds the last occurrence of sep in s.

    Args:
        s (str or array or memoryview or list or tuple or np.ndarray): The sequence to search within.
        sep (str or array or memoryview or list or tuple or np.ndarray): The sequence to search for.

    Returns:
        int: The 0-based offset of the last occurrence, ``len(s)`` if sep is empty, or -1 if not found.
    """
    return _last_index(as_runes(s), as_runes(sep))


def contains(s: _RuneSeq, sub: _RuneSeq) -> bool:
    """Reports whether sub occurs within s."""
    return index(s, sub) != -1


def contains_rune(s: _RuneSeq, r: int) -> bool:
    """Reports whether the code point r occurs within s."""
    return index_rune(s, r) != -1


def has_prefix(s: _RuneSeq, prefix: _RuneSeq) -> bool:
    """Reports whether s begins with prefix."""
    s, prefix = as_runes(s), as_runes(prefix)
    return len(s) >= len(prefix) and _equal(s[: len(prefix)], prefix)


def has_suffix(s: _RuneSeq, suffix: _RuneSeq) -> bool:
    """Reports whether s ends with suffix."""
    s, suffix = as_runes(s), as_runes(suffix)
    return len(s) >= len(suffix) and _equal(s[len(s) - len(suffix) :], suffix)


def count(s: _RuneSeq, sep: _RuneSeq) -> int:
    """Counts the non-overlapping occurrences of sep in s.

    The scan runs left to right and each match consumes its span before the scan resumes,
    so ``count("aaaa", "aa")`` is 2.

    Args:
        s (str or array or memoryview or list or tuple or np.ndarray): The sequence to search within.
        sep (str or array or memoryview or list or tuple or np.ndarray): The sequence to count.

    Returns:
        int: The number of occurrences, or ``len(s) + 1`` if sep is empty.
    """
    return _count(as_runes(s), as_runes(sep))
