import unittest
from array import array
from unittest.mock import patch

from codeseq._buffer import _Buffer
from codeseq._types import _HAS_NUMPY, np


class TestBuffer(unittest.TestCase):
    """Unit tests for the _Buffer class."""

    def _run_test_for_buffer_types(self, test_func, *args, **kwargs):
        """Helper to run a test for both array and (if available) numpy buffers."""
        with self.subTest(buffer_type="array"):
            test_func(use_numpy=False, *args, **kwargs)

        if _HAS_NUMPY:
            with self.subTest(buffer_type="numpy"):
                test_func(use_numpy=True, *args, **kwargs)

    def test_initialisation(self):
        """Test buffer initialisation with various configurations."""

        def _test(use_numpy):
            # Default initialisation
            buf = _Buffer(use_numpy=use_numpy)
            self.assertEqual(len(buf), 0)
            self.assertEqual(buf._capacity, 0)
            self.assertIsInstance(buf.data, memoryview)
            self.assertEqual(len(buf.data), 0)
            if use_numpy:
                self.assertIsInstance(buf._buffer, np.ndarray)
            else:
                self.assertIsInstance(buf._buffer, array)

            # Initialisation with size
            buf = _Buffer(size=100, use_numpy=use_numpy)
            self.assertEqual(len(buf), 0)
            self.assertEqual(buf._capacity, 100)
            self.assertEqual(len(buf._buffer), 100)

        self._run_test_for_buffer_types(_test)

    def test_initialisation_invalid_args(self):
        """Test buffer initialisation with invalid arguments."""
        with self.assertRaisesRegex(ValueError, "size must be a non-negative integer."):
            _Buffer(size=-1)
        with self.assertRaisesRegex(ValueError, "size must be a non-negative integer."):
            _Buffer(size="abc")  # type: ignore
        with self.assertRaisesRegex(TypeError, "use_numpy must be a boolean."):
            _Buffer(use_numpy="True")  # type: ignore

    def test_numpy_required(self):
        """Requesting a NumPy buffer without NumPy fails."""
        with patch("codeseq._buffer._HAS_NUMPY", False):
            with self.assertRaisesRegex(ValueError, "NumPy is required"):
                _Buffer(use_numpy=True)

    def test_build_array_classmethod(self):
        """Test the build_array classmethod."""
        arr = _Buffer.build_array(size=10, use_numpy=False)
        self.assertIsInstance(arr, array)
        self.assertEqual(arr.typecode, "I")
        self.assertEqual(len(arr), 10)
        self.assertEqual(len(_Buffer.build_array(size=0, use_numpy=False)), 0)

        if _HAS_NUMPY:
            arr_np = _Buffer.build_array(size=20, use_numpy=True)
            self.assertIsInstance(arr_np, np.ndarray)
            self.assertEqual(arr_np.dtype, np.uint32)
            self.assertEqual(len(arr_np), 20)

    def test_append_within_capacity(self):
        """Appends within the pre-allocated size never regrow the storage."""

        def _test(use_numpy):
            buf = _Buffer(size=3, use_numpy=use_numpy)
            storage = buf._buffer
            for r in (0x61, 0xE9, 0x1F600):
                buf.append(r)
            self.assertIs(buf._buffer, storage)
            self.assertEqual(buf._capacity, 3)
            self.assertEqual(buf.data.tolist(), [0x61, 0xE9, 0x1F600])

        self._run_test_for_buffer_types(_test)

    def test_append_past_capacity(self):
        """Appends past the pre-allocated size are rejected."""

        def _test(use_numpy):
            buf = _Buffer(size=1, use_numpy=use_numpy)
            buf.append(0x61)
            with self.assertRaisesRegex(ValueError, "write exceeds the buffer capacity."):
                buf.append(0x62)
            self.assertEqual(len(buf), 1)
            self.assertEqual(buf.data.tolist(), [0x61])

        self._run_test_for_buffer_types(_test)

    def test_extend(self):
        """Test extending with lists, arrays and memoryviews up to the capacity."""

        def _test(use_numpy):
            buf = _Buffer(size=6, use_numpy=use_numpy)
            storage = buf._buffer
            buf.extend([1, 2])
            buf.extend(array("I", [3]))
            buf.extend(memoryview(array("I", [4, 5, 6])))
            buf.extend([])
            self.assertIs(buf._buffer, storage)
            self.assertEqual(len(buf), 6)
            self.assertEqual(buf.data.tolist(), [1, 2, 3, 4, 5, 6])

        self._run_test_for_buffer_types(_test)

    def test_extend_past_capacity(self):
        """A block that does not fit leaves the buffer untouched."""

        def _test(use_numpy):
            buf = _Buffer(size=3, use_numpy=use_numpy)
            buf.extend([1, 2])
            with self.assertRaisesRegex(ValueError, "write exceeds the buffer capacity."):
                buf.extend(memoryview(array("I", [3, 4])))
            self.assertEqual(buf.data.tolist(), [1, 2])

        self._run_test_for_buffer_types(_test)

    def test_extend_rejects_wrong_format(self):
        """A block of the wrong element size fails without leaving a view exported."""
        buf = _Buffer(size=2)
        with self.assertRaises((TypeError, ValueError)):
            buf.extend(memoryview(b"ab"))
        # Resizing the storage only succeeds when no view over it is still held
        buf._buffer.append(0)
        self.assertEqual(len(buf._buffer), 3)

    def test_data_property(self):
        """The data view covers the used portion only and has format "I"."""

        def _test(use_numpy):
            buf = _Buffer(size=10, use_numpy=use_numpy)
            buf.extend([7, 8])
            self.assertEqual(buf.data.format, "I")
            self.assertEqual(buf.data.tolist(), [7, 8])

            full = _Buffer(size=2, use_numpy=use_numpy)
            full.extend([7, 8])
            self.assertEqual(len(full.data), 2)

        self._run_test_for_buffer_types(_test)

    def test_str(self):
        """Test the string representation."""
        buf = _Buffer(size=4)
        buf.append(1)
        self.assertEqual(str(buf), "_Buffer(capacity=4, current_pos=1, type=array)")


if __name__ == "__main__":
    unittest.main()
