"""Type definitions and central imports for the CodeSeq project."""

from array import array
from typing import Any, Callable, Union

__all__: list[str] = []

np: Any
try:
    import numpy

    np = numpy
    _HAS_NUMPY = True
except ImportError:
    np = None
    _HAS_NUMPY = False

_RuneSeq = Union[str, "array[int]", memoryview, list[int], tuple[int, ...], "np.ndarray"]
_Predicate = Callable[[int], bool]
_Mapping = Callable[[int], Union[int, None]]
_Decoder = Callable[[Union[bytes, bytearray, memoryview], int], tuple[int, int]]

MAX_RUNE = 0x10FFFF
