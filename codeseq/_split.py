"""Implements the generic split engine and the public split operations.

Every split flavour is one call to `_gen_split`, parameterised by whether the separator is
kept at the end of each piece and by the maximum number of pieces. Pieces are memoryview
slices of the input, so splitting never copies code points.
"""

from collections.abc import Iterable

from codeseq._buffer import _Buffer
from codeseq._runes import as_runes
from codeseq._search import _find_all, _use_numpy
from codeseq._types import _RuneSeq

__all__ = ["join", "split", "split_after", "split_after_n", "split_n"]


def _explode(s: memoryview, n: int) -> list[memoryview]:
    """Split s into single code point pieces, at most n of them.

    Args:
        s (memoryview): The sequence to explode.
        n (int): Maximum number of pieces; non-positive or larger than ``len(s)`` means ``len(s)``.

    Returns:
        list[memoryview]: The pieces. When n caps the count, the last piece holds the remainder.
    """
    length = len(s)
    if n <= 0 or n > length:
        n = length
    if n == 0:
        return []
    pieces: list[memoryview] = [s] * n
    for i in range(n - 1):
        pieces[i] = s[i : i + 1]
    pieces[n - 1] = s[n - 1 :]
    return pieces


def _gen_split(s: memoryview, sep: memoryview, sep_save: int, n: int) -> list[memoryview]:
    """Split s around each non-overlapping instance of sep.

    Args:
        s (memoryview): The sequence to split.
        sep (memoryview): The separator.
        sep_save (int): Number of separator code points kept at the end of each piece
            (``len(sep)`` for the "after" flavours, 0 otherwise).
        n (int): Maximum number of pieces; negative means unbounded, 0 yields no pieces.

    Returns:
        list[memoryview]: The pieces, at most n of them and never padded.
    """
    if n == 0:
        return []
    if len(sep) == 0:
        return _explode(s, n)

    # One search over the whole input; n pieces need at most n - 1 separators
    offsets = _find_all(s, sep, n - 1 if n > 0 else -1)
    pieces: list[memoryview] = [s] * (len(offsets) + 1)
    start = 0
    for i, m in enumerate(offsets):
        pieces[i] = s[start : m + sep_save]
        start = m + len(sep)
    pieces[-1] = s[start:]
    return pieces


def split(s: _RuneSeq, sep: _RuneSeq) -> list[memoryview]:
    """Split s into all subsequences separated by sep.

    If sep is empty, s is split after each code point. The result holds
    ``count(s, sep) + 1`` pieces and is sized once, from a single search over s, before any
    piece is produced.

    Args:
        s (str or array or memoryview or list or tuple or np.ndarray): The sequence to split.
        sep (str or array or memoryview or list or tuple or np.ndarray): The separator.

    Returns:
        list[memoryview]: Views into s, in order.
    """
    return _gen_split(as_runes(s), as_runes(sep), 0, -1)


def split_after(s: _RuneSeq, sep: _RuneSeq) -> list[memoryview]:
    """Split s after each instance of sep, keeping sep at the end of each piece.

    Args:
        s (str or array or memoryview or list or tuple or np.ndarray): The sequence to split.
        sep (str or array or memoryview or list or tuple or np.ndarray): The separator.

    Returns:
        list[memoryview]: Views into s whose concatenation is s.
    """
    sep = as_runes(sep)
    return _gen_split(as_runes(s), sep, len(sep), -1)


def split_n(s: _RuneSeq, sep: _RuneSeq, n: int) -> list[memoryview]:
    """Split s into subsequences separated by sep, returning at most n of them.

    Args:
        s (str or array or memoryview or list or tuple or np.ndarray): The sequence to split.
        sep (str or array or memoryview or list or tuple or np.ndarray): The separator.
        n (int): Maximum number of pieces. With ``n > 0`` the last piece is the unsplit
            remainder; ``n == 0`` returns no pieces; ``n < 0`` returns all pieces.

    Returns:
        list[memoryview]: Views into s, in order.

    Raises:
        TypeError: If n is not an integer.
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError("n must be an integer.")
    return _gen_split(as_runes(s), as_runes(sep), 0, n)


def split_after_n(s: _RuneSeq, sep: _RuneSeq, n: int) -> list[memoryview]:
    """Split s after each instance of sep, returning at most n pieces.

    Args:
        s (str or array or memoryview or list or tuple or np.ndarray): The sequence to split.
        sep (str or array or memoryview or list or tuple or np.ndarray): The separator.
        n (int): Maximum number of pieces, with the same meaning as in `split_n`.

    Returns:
        list[memoryview]: Views into s, in order.

    Raises:
        TypeError: If n is not an integer.
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError("n must be an integer.")
    sep = as_runes(sep)
    return _gen_split(as_runes(s), sep, len(sep), n)


def join(pieces: Iterable[_RuneSeq], sep: _RuneSeq) -> memoryview:
    """Concatenate pieces with sep placed between consecutive pieces.

    Args:
        pieces (Iterable): The code-point sequences to concatenate.
        sep (str or array or memoryview or list or tuple or np.ndarray): The separator.

    Returns:
        memoryview: A view over a new buffer; ``join(split(s, sep), sep)`` equals s.
    """
    views = [as_runes(p) for p in pieces]
    sep = as_runes(sep)

    total = sum(len(v) for v in views) + len(sep) * max(len(views) - 1, 0)
    buffer = _Buffer(total, use_numpy=_use_numpy(total))
    for i, v in enumerate(views):
        if i > 0:
            buffer.extend(sep)
        buffer.extend(v)
    return buffer.data
