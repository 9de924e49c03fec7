"""
Lexicographic enumeration of combinatorial arrangements.

This package enumerates arrangements of the alphabet {0, ..., n-1} by
lexicographic rank: exact counts, direct unranking, and sequential
successor generation that wraps from the last arrangement to the first.

Modules:
- counting: nPr, nCr, nCPr and their multiset variants
- params: Shape parameters (frequency vector, arrangement length)
- protocols: Enumerator and CyclicGenerator interfaces
- enumerator: Shared cursor and successor template
- permutation, combination, circular, multiset, circular_multiset: Families
"""

from collections.abc import Sequence

from .counting import (
    CountOverflow,
    InvalidRange,
    circular_multiset_permutation_count,
    circular_permutation_count,
    combination_count,
    multiset_permutation_count,
    permutation_count,
)
from .params import Params
from .protocols import Arrangement, CyclicGenerator, Enumerator
from .enumerator import InvalidRank, LexEnumerator
from .permutation import Permutation
from .combination import Combination
from .circular import CircularPermutation
from .multiset import MultisetPermutation
from .circular_multiset import CircularMultisetPermutation, is_canonical_rotation

__version__ = "0.1.0"

FAMILIES = {
    "permutation": Permutation,
    "combination": Combination,
    "circular": CircularPermutation,
    "multiset": MultisetPermutation,
    "circular-multiset": CircularMultisetPermutation,
}

MULTISET_FAMILIES = frozenset({"multiset", "circular-multiset"})


def create_enumerator(
    family: str, shape: int | Sequence[int], r: int
) -> Enumerator | CyclicGenerator:
    """
    Create an enumerator by family name.

    Args:
        family: One of the FAMILIES keys
        shape: Alphabet size n for distinct families, frequency vector for
            multiset families
        r: Arrangement length

    Returns:
        Configured enumerator
    """
    if family not in FAMILIES:
        raise ValueError(
            f"Unknown family {family!r}; expected one of {sorted(FAMILIES)}"
        )
    if family in MULTISET_FAMILIES:
        if isinstance(shape, int):
            raise ValueError(f"Family {family!r} needs a frequency vector")
    elif not isinstance(shape, int):
        raise ValueError(f"Family {family!r} needs an alphabet size")
    return FAMILIES[family](shape, r)


__all__ = [
    "Arrangement",
    "CircularMultisetPermutation",
    "CircularPermutation",
    "Combination",
    "CountOverflow",
    "CyclicGenerator",
    "Enumerator",
    "FAMILIES",
    "InvalidRange",
    "InvalidRank",
    "LexEnumerator",
    "MULTISET_FAMILIES",
    "MultisetPermutation",
    "Params",
    "Permutation",
    "circular_multiset_permutation_count",
    "circular_permutation_count",
    "combination_count",
    "create_enumerator",
    "is_canonical_rotation",
    "multiset_permutation_count",
    "permutation_count",
]
