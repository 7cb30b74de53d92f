"""Implements a pre-sized code-point buffer backed by an array or a NumPy array.

Provides a specialised data structure for accumulating decoded code points, sized once
from a first pass over the input and then filled without ever reallocating.
"""

from array import array

from codeseq._types import _HAS_NUMPY, np

__all__: list[str] = []


class _Buffer:
    """A fixed-capacity buffer of unsigned 32-bit code points.

    This class manages an internal ``array("I")`` or ``np.uint32`` array that can be
    pre-allocated to a certain size. Appends write in place; writing past the capacity is an
    error, since every caller knows the final size up front.
    """

    def __init__(self, size: int = 0, use_numpy: bool = False) -> None:
        """Initialise the _Buffer.

        Args:
            size (int): The initial number of code points to pre-allocate. Defaults to 0.
            use_numpy (bool): If True, a NumPy array (np.uint32) is used as the internal buffer.
                If False, an ``array("I")`` is used. Defaults to False.

        Raises:
            ValueError: If `size` is not a non-negative integer.
            TypeError: If `use_numpy` is not a boolean.
            ValueError: If `use_numpy` is True but NumPy is not installed.
        """
        if not isinstance(size, int) or size < 0:
            raise ValueError("size must be a non-negative integer.")
        if not isinstance(use_numpy, bool):
            raise TypeError("use_numpy must be a boolean.")
        if use_numpy and not _HAS_NUMPY:
            raise ValueError("NumPy is required for use_numpy=True but is not installed.")

        self._buffer = self.build_array(size, use_numpy)
        self._capacity = size
        self._current_pos = 0

    def __len__(self) -> int:
        """Returns the number of code points written to the buffer.

        Returns:
            int: The length of the used portion of the buffer.
        """
        return self._current_pos

    def __str__(self) -> str:
        """Returns a string representation of the _Buffer instance.

        Returns:
            str: A string representation of the _Buffer instance.
        """
        return (
            f"_Buffer(capacity={self._capacity}, "
            f"current_pos={self._current_pos}, "
            f"type={type(self._buffer).__name__})"
        )

    @classmethod
    def build_array(
        cls, size: int = 0, use_numpy: bool = False
    ) -> "np.ndarray[tuple[int], np.dtype[np.uint32]] | array[int]":
        """Builds a zero-filled ``array("I")`` or NumPy array of the specified size.

        Args:
            size (int): The number of code points to allocate. Defaults to 0.
            use_numpy (bool): If True, a NumPy array (np.uint32) is built. Defaults to False.

        Returns:
            np.ndarray[tuple[int], np.dtype[np.uint32]] | array[int]: The created array.
        """
        return np.zeros(size, dtype=np.uint32) if use_numpy else array("I", [0]) * size

    def _reserve(self, block_len: int) -> int:
        """Check that `block_len` more code points fit and return the position after them.

        Raises:
            ValueError: If the write would run past the pre-allocated capacity.
        """
        next_pos = self._current_pos + block_len
        if next_pos > self._capacity:
            raise ValueError("write exceeds the buffer capacity.")
        return next_pos

    def append(self, r: int) -> None:
        """Append a single code point.

        Args:
            r (int): The code point to append.

        Raises:
            ValueError: If the buffer is full.
        """
        next_pos = self._reserve(1)
        self._buffer[self._current_pos] = r
        self._current_pos = next_pos

    def extend(self, block: "memoryview | array[int] | list[int]") -> None:
        """Extend the buffer with the given code points using slice assignment.

        Args:
            block (memoryview | array[int] | list[int]): The code points to append.

        Raises:
            ValueError: If the code points do not fit in the remaining capacity.
        """
        block_len = len(block)
        if block_len == 0:
            return

        next_pos = self._reserve(block_len)
        if isinstance(self._buffer, array):
            with memoryview(self._buffer) as view:
                view[self._current_pos : next_pos] = (
                    block if isinstance(block, memoryview) else memoryview(array("I", block))
                )
        else:
            self._buffer[self._current_pos : next_pos] = block
        self._current_pos = next_pos

    @property
    def data(self) -> memoryview:
        """Returns a memoryview of the used portion of the buffer.

        Returns:
            memoryview: A memoryview of format ``"I"`` over the used portion of the buffer.
        """
        data = memoryview(self._buffer)
        if data.format != "I":
            data = data.cast("B").cast("I")
        if self._capacity == self._current_pos:
            return data
        else:
            return data[: self._current_pos]
