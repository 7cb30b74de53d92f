"""Conversions between Python text, integer buffers and code-point views.

Every public operation in CodeSeq works on a one-dimensional, C-contiguous
buffer of unsigned 32-bit code points exposed as a ``memoryview`` with format
``"I"``. Slices of such a view alias the caller's storage, which is how the
search and split operations hand back subsequences without copying.
"""

from array import array

from codeseq._types import _RuneSeq

__all__ = ["as_runes", "runes", "to_str"]

# Native unsigned 32-bit formats that can be reinterpreted as "I" without copying
_UINT32_FORMATS = ("I", "L")


def runes(text: str) -> "array[int]":
    """Build a mutable code-point buffer from a string.

    Args:
        text (str): The text to convert.

    Returns:
        array[int]: An ``array("I")`` holding one element per code point of ``text``.
    """
    return array("I", map(ord, text))


def as_runes(s: _RuneSeq) -> memoryview:
    """Normalise a code-point sequence to a ``memoryview`` of format ``"I"``.

    Buffers that already hold unsigned 32-bit integers (``array("I")``, ``uint32`` NumPy arrays
    and memoryviews over them) are wrapped without copying. Strings, lists and tuples are
    materialised once into a fresh ``array("I")``.

    Args:
        s (str or array or memoryview or list or tuple or np.ndarray): The sequence to normalise.

    Returns:
        memoryview: A one-dimensional view of format ``"I"``.

    Raises:
        TypeError: If ``s`` is not a code-point sequence or its buffer format is not unsigned 32-bit.
        ValueError: If the buffer is not one-dimensional and C-contiguous.
    """
    if isinstance(s, str):
        return memoryview(runes(s))
    if isinstance(s, (list, tuple)):
        return memoryview(array("I", s))

    try:
        view = memoryview(s)
    except TypeError:
        raise TypeError(f"Expected a code-point sequence, got {type(s).__name__}.") from None

    if view.ndim != 1:
        raise ValueError("Code-point sequences must be one-dimensional.")
    if not view.c_contiguous:
        raise ValueError("Code-point sequences must be C-contiguous.")
    if view.format == "I":
        return view
    if view.itemsize == 4 and view.format in _UINT32_FORMATS:
        return view.cast("B").cast("I")
    raise TypeError(
        f"Unsupported buffer format {view.format!r}; expected unsigned 32-bit code points."
    )


def to_str(s: _RuneSeq) -> str:
    """Render a code-point sequence as a string.

    Args:
        s (str or array or memoryview or list or tuple or np.ndarray): The sequence to render.

    Returns:
        str: The text made of the code points of ``s``.

    Raises:
        ValueError: If an element is not a valid code point.
    """
    return "".join(map(chr, as_runes(s)))
