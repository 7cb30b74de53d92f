import unittest
from unittest.mock import patch

from codeseq._runes import runes, to_str
from codeseq._search import _find_all, _match_positions, count
from codeseq._split import join, split, split_after, split_after_n, split_n
from codeseq._types import _HAS_NUMPY


def _strs(pieces):
    """Render a list of code-point views as strings."""
    return [to_str(p) for p in pieces]


class TestSplit(unittest.TestCase):
    """Unit tests for the split operations in _split.py."""

    def test_split_scenarios(self):
        """Should split around every separator, keeping empty pieces."""
        cases = [
            ("a,b,,c", ",", ["a", "b", "", "c"]),
            ("abc", ",", ["abc"]),
            ("", ",", [""]),
            (",", ",", ["", ""]),
            ("a--b--c", "--", ["a", "b", "c"]),
            ("aaaa", "aa", ["", "", ""]),
            ("1 2 3 4", " ", ["1", "2", "3", "4"]),
        ]
        for s, sep, expected in cases:
            with self.subTest(s=s, sep=sep):
                self.assertEqual(_strs(split(s, sep)), expected)

    def test_split_empty_separator_explodes(self):
        """An empty separator yields one piece per code point."""
        self.assertEqual(_strs(split("abc", "")), ["a", "b", "c"])
        self.assertEqual(_strs(split("日本", "")), ["日", "本"])
        self.assertEqual(split("", ""), [])

    def test_split_n_scenarios(self):
        """Should cap the number of pieces, the last holding the remainder."""
        cases = [
            ("a,b,c", ",", 2, ["a", "b,c"]),
            ("a,b,c", ",", 1, ["a,b,c"]),
            ("a,b,c", ",", 3, ["a", "b", "c"]),
            ("a,b,c", ",", 10, ["a", "b", "c"]),
            ("a,b,c", ",", -1, ["a", "b", "c"]),
            ("abcd", "", 2, ["a", "bcd"]),
            ("abcd", "", 10, ["a", "b", "c", "d"]),
            ("abcd", "", -1, ["a", "b", "c", "d"]),
        ]
        for s, sep, n, expected in cases:
            with self.subTest(s=s, sep=sep, n=n):
                self.assertEqual(_strs(split_n(s, sep, n)), expected)

    def test_split_n_zero_is_empty(self):
        """A limit of zero yields no pieces at all."""
        for s, sep in [("a,b", ","), ("", ""), ("abc", ""), ("", ",")]:
            with self.subTest(s=s, sep=sep):
                self.assertEqual(split_n(s, sep, 0), [])
                self.assertEqual(split_after_n(s, sep, 0), [])

    def test_split_n_invalid_limit(self):
        """A non-integer limit is rejected."""
        with self.assertRaisesRegex(TypeError, "n must be an integer."):
            split_n("a,b", ",", 1.5)  # type: ignore
        with self.assertRaisesRegex(TypeError, "n must be an integer."):
            split_after_n("a,b", ",", "2")  # type: ignore
        with self.assertRaisesRegex(TypeError, "n must be an integer."):
            split_n("a,b", ",", True)

    def test_split_after(self):
        """Separators stay at the end of each piece."""
        self.assertEqual(_strs(split_after("a,b,,c", ",")), ["a,", "b,", ",", "c"])
        self.assertEqual(_strs(split_after("a,b,", ",")), ["a,", "b,", ""])
        self.assertEqual(_strs(split_after_n("a,b,c", ",", 2)), ["a,", "b,c"])
        self.assertEqual(_strs(split_after("abc", "")), ["a", "b", "c"])

    def test_split_after_reconstructs_input(self):
        """Concatenating the pieces of split_after gives back the input."""
        for s, sep in [("a,b,,c", ","), ("--a--", "--"), ("xyz", "q"), ("", ",")]:
            with self.subTest(s=s, sep=sep):
                self.assertEqual("".join(_strs(split_after(s, sep))), s)

    def test_count_matches_piece_count(self):
        """For a non-empty separator, split has count + 1 pieces."""
        for s, sep in [("aaaa", "aa"), ("a,b,,c", ","), ("abc", "x"), ("", "ab")]:
            with self.subTest(s=s, sep=sep):
                self.assertEqual(len(split(s, sep)), count(s, sep) + 1)

    def test_pieces_are_views(self):
        """Pieces alias the input storage instead of copying it."""
        s = runes("ab,cd")
        pieces = split(s, ",")
        self.assertTrue(all(isinstance(p, memoryview) for p in pieces))
        s[0] = ord("X")
        self.assertEqual(to_str(pieces[0]), "Xb")

    def test_unbounded_split_sizes_result_once(self):
        """The unbounded split finds every separator in one search before building its result."""
        with patch("codeseq._split._find_all", wraps=_find_all) as mocked_find_all:
            pieces = split("a,b,c", ",")
        mocked_find_all.assert_called_once()
        self.assertEqual(len(pieces), 3)

    @unittest.skipIf(not _HAS_NUMPY, "NumPy not available or not installed.")
    def test_split_runs_one_vectorised_search(self):
        """Long inputs are searched with NumPy once, whatever the number of pieces."""
        s = "a," * 2000
        for n in [-1, 2, 1500]:
            with self.subTest(n=n):
                with patch("codeseq._search._HAS_NUMPY", False):
                    expected = _strs(split_n(s, ",", n))
                with patch(
                    "codeseq._search._match_positions", wraps=_match_positions
                ) as mocked_positions:
                    pieces = split_n(s, ",", n)
                mocked_positions.assert_called_once()
                self.assertEqual(_strs(pieces), expected)

    def test_join(self):
        """join reverses split."""
        for s, sep in [("a,b,,c", ","), ("abc", ""), ("", ","), ("a--b", "--")]:
            with self.subTest(s=s, sep=sep):
                joined = join(split(s, sep), sep)
                self.assertIsInstance(joined, memoryview)
                self.assertEqual(to_str(joined), s)
        self.assertEqual(to_str(join([], ",")), "")
        self.assertEqual(to_str(join(["x"], ",")), "x")

    @unittest.skipIf(not _HAS_NUMPY, "NumPy not available or not installed.")
    def test_join_long_pieces(self):
        """Long joins are assembled in NumPy storage with the same result."""
        pieces = [str(i) for i in range(300)]
        joined = join(pieces, ", ")
        self.assertEqual(joined.format, "I")
        self.assertEqual(to_str(joined), ", ".join(pieces))

    @unittest.skipIf(not _HAS_NUMPY, "NumPy not available or not installed.")
    def test_split_long_input_with_numpy(self):
        """Splitting long inputs through the NumPy kernels gives the same pieces."""
        s = ",".join(str(i) for i in range(500))
        with patch("codeseq._search._HAS_NUMPY", False):
            expected = _strs(split(s, ","))
        self.assertEqual(_strs(split(s, ",")), expected)
        self.assertEqual(expected, s.split(","))


if __name__ == "__main__":
    unittest.main()
