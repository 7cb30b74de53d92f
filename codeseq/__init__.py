"""CodeSeq: Search and Split Primitives for Code-Point Sequences."""

from importlib.metadata import PackageNotFoundError, version

from codeseq._fields import fields, fields_from_bytes, fields_func, fields_func_from_bytes
from codeseq._runes import as_runes, runes, to_str
from codeseq._sanity import check_mapping_sanity, check_predicate_sanity
from codeseq._search import (
    contains,
    contains_rune,
    count,
    equal,
    has_prefix,
    has_suffix,
    index,
    index_rune,
    last_index,
    last_index_rune,
)
from codeseq._split import join, split, split_after, split_after_n, split_n
from codeseq._transform import (
    map_runes,
    to_lower,
    to_lower_special,
    to_title,
    to_title_special,
    to_upper,
    to_upper_special,
)
from codeseq._unicode import (
    AZERI_CASE,
    TURKISH_CASE,
    CaseRange,
    SpecialCase,
    is_space,
    simple_lower,
    simple_title,
    simple_upper,
)
from codeseq._utf8 import RUNE_ERROR, UTF_MAX, decode_rune, rune_len

__version__: str
"""The version of the library."""
try:
    __version__ = version("codeseq")
except PackageNotFoundError:
    __version__ = "unknown"

equal_sequences = equal
"""Alias of `equal`."""

contains_subsequence = contains
"""Alias of `contains`."""

__all__ = [
    "__version__",
    "AZERI_CASE",
    "RUNE_ERROR",
    "TURKISH_CASE",
    "UTF_MAX",
    "CaseRange",
    "SpecialCase",
    "as_runes",
    "check_mapping_sanity",
    "check_predicate_sanity",
    "contains",
    "contains_rune",
    "contains_subsequence",
    "count",
    "decode_rune",
    "equal",
    "equal_sequences",
    "fields",
    "fields_from_bytes",
    "fields_func",
    "fields_func_from_bytes",
    "has_prefix",
    "has_suffix",
    "index",
    "index_rune",
    "is_space",
    "join",
    "last_index",
    "last_index_rune",
    "map_runes",
    "rune_len",
    "runes",
    "simple_lower",
    "simple_title",
    "simple_upper",
    "split",
    "split_after",
    "split_after_n",
    "split_n",
    "to_lower",
    "to_lower_special",
    "to_str",
    "to_title",
    "to_title_special",
    "to_upper",
    "to_upper_special",
]
