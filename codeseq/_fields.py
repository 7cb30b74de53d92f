"""Splits sequences into fields, the maximal runs of code points a predicate does not reject.

Both tokenizers work in two passes over the input: the first counts the fields so that the
result list is allocated once at its exact size, the second fills it. The predicate is
therefore called twice for every code point and must give the same answer both times.
Inconsistent predicates are a precondition violation, not a recoverable error; use
`check_predicate_sanity` to vet a predicate during development.
"""

from codeseq._buffer import _Buffer
from codeseq._runes import as_runes
from codeseq._search import _use_numpy
from codeseq._types import _Decoder, _Predicate, _RuneSeq
from codeseq._unicode import is_space
from codeseq._utf8 import decode_rune

__all__ = ["fields", "fields_from_bytes", "fields_func", "fields_func_from_bytes"]


def fields_func(s: _RuneSeq, f: _Predicate) -> list[memoryview]:
    """Split s at each run of code points satisfying f.

    Args:
        s (str or array or memoryview or list or tuple or np.ndarray): The sequence to split.
        f (Callable[[int], bool]): Separator predicate; must return the same result for the
            same code point on every call.

    Returns:
        list[memoryview]: Views into s, one per field. Empty if s is empty or every code point
            satisfies f.
    """
    s = as_runes(s)

    # First pass: count the fields
    n = 0
    in_field = False
    for r in s:
        was_in_field = in_field
        in_field = not f(r)
        if in_field and not was_in_field:
            n += 1

    # Second pass: record each field as it closes
    spans: list[memoryview] = [s] * n
    na = 0
    field_start = -1
    for i, r in enumerate(s):
        if f(r):
            if field_start >= 0:
                spans[na] = s[field_start:i]
                na += 1
                field_start = -1
        elif field_start == -1:
            field_start = i

    # A field still open at the end of s runs to the end
    if field_start >= 0:
        spans[na] = s[field_start:]
    return spans


def fields(s: _RuneSeq) -> list[memoryview]:
    """Split s around runs of whitespace.

    Args:
        s (str or array or memoryview or list or tuple or np.ndarray): The sequence to split.

    Returns:
        list[memoryview]: Views into s, one per whitespace-separated field.
    """
    return fields_func(s, is_space)


def _malformed(offset: int) -> ValueError:
    return ValueError(f"Malformed encoded input at byte offset {offset}.")


def fields_func_from_bytes(
    buf: bytes | bytearray | memoryview,
    f: _Predicate,
    decoder: _Decoder = decode_rune,
    strict: bool = False,
) -> list[memoryview]:
    """Decode buf and split it at each run of code points satisfying f.

    Decoding and classification happen in the same pass. If the decoder reports a zero width
    at some offset, the rest of buf is ignored; a field that was open at that point is still
    returned.

    Args:
        buf (bytes or bytearray or memoryview): The encoded input.
        f (Callable[[int], bool]): Separator predicate; must return the same result for the
            same code point on every call.
        decoder (Callable): Returns ``(code point, width)`` for the code point at a byte offset,
            with a width of 0 for undecodable input. Defaults to UTF-8 `decode_rune`.
        strict (bool): If True, undecodable input raises instead of ending the input.
            Defaults to False.

    Returns:
        list[memoryview]: One freshly decoded code-point view per field.

    Raises:
        ValueError: If `strict` is True and buf holds undecodable input.
    """
    end = len(buf)

    # First pass: count the fields and the code points they hold
    n = 0
    field_runes = 0
    in_field = False
    i = 0
    while i < end:
        r, size = decoder(buf, i)
        if size == 0:
            if strict:
                raise _malformed(i)
            break
        was_in_field = in_field
        in_field = not f(r)
        if in_field:
            field_runes += 1
            if not was_in_field:
                n += 1
        i += size

    # Second pass: decode again, accumulating field code points into a pre-sized buffer
    buffer = _Buffer(field_runes, use_numpy=_use_numpy(field_runes))
    bounds: list[tuple[int, int]] = [(0, 0)] * n
    na = 0
    field_start = -1
    i = 0
    while i < end:
        r, size = decoder(buf, i)
        if size == 0:
            break
        if f(r):
            if field_start >= 0:
                bounds[na] = (field_start, len(buffer))
                na += 1
                field_start = -1
        else:
            if field_start == -1:
                field_start = len(buffer)
            buffer.append(r)
        i += size

    if field_start >= 0:
        bounds[na] = (field_start, len(buffer))

    data = buffer.data
    return [data[start:stop] for start, stop in bounds]


def fields_from_bytes(
    buf: bytes | bytearray | memoryview, decoder: _Decoder = decode_rune, strict: bool = False
) -> list[memoryview]:
    """Decode buf and split it around runs of whitespace.

    Args:
        buf (bytes or bytearray or memoryview): The encoded input.
        decoder (Callable): The single code point decoder. Defaults to UTF-8 `decode_rune`.
        strict (bool): If True, undecodable input raises instead of ending the input.

    Returns:
        list[memoryview]: One freshly decoded code-point view per field.

    Raises:
        ValueError: If `strict` is True and buf holds undecodable input.
    """
    return fields_func_from_bytes(buf, is_space, decoder=decoder, strict=strict)
