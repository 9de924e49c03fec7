"""
Protocol interfaces for lexicographic enumerators.

This module defines:
1. Enumerator: rank-indexed generator with a sequential cursor and direct
   unranking (permutations, combinations, circular permutations, multiset
   permutations)
2. CyclicGenerator: sequential-only generator with an explicit reset
   (circular multiset permutations)

Every family enumerates arrangements of the alphabet {0, ..., n-1} in
ascending lexicographic order. Ranks are 0-based positions in that order.

Cursor model:
- next_rank is the rank the next successor() call will produce
- successor() wraps from the last arrangement back to rank 0
- was_last() reports, once, that the last arrangement was just produced
"""

from collections.abc import Iterator, Sequence
from typing import Protocol, runtime_checkable

Arrangement = tuple[int, ...]


@runtime_checkable
class Enumerator(Protocol):
    """
    Protocol for rank-indexed enumerators.

    An enumerator must support:
    1. Counting: total_count
    2. Sequential generation: successor(), with jump_to() / next_rank / was_last()
    3. Direct access: unrank() / unrank_checked() and the inverse rank_of()
    """

    @property
    def total_count(self) -> int:
        """Number of arrangements. Fixed at construction."""
        ...

    @property
    def next_rank(self) -> int:
        """Rank of the arrangement the next successor() call returns."""
        ...

    def jump_to(self, rank: int) -> None:
        """
        Move the cursor so the next successor() returns the arrangement at rank.

        Args:
            rank: Target rank. Ranks outside [0, total_count) are ignored.
        """
        ...

    def was_last(self) -> bool:
        """
        Report whether the last successor() call produced rank total_count - 1.

        Reading clears the flag: two calls in a row return True then False.
        """
        ...

    def successor(self) -> Arrangement:
        """
        Produce the arrangement at next_rank and advance the cursor.

        Returns:
            The arrangement, as an immutable copy
        """
        ...

    def unrank(self, rank: int) -> Arrangement:
        """
        Compute the arrangement at rank without touching the cursor.

        The rank is not validated; out-of-range input gives an undefined
        result. Use unrank_checked() for validated access.
        """
        ...

    def unrank_checked(self, rank: int) -> Arrangement:
        """Like unrank(), but raises InvalidRank outside [0, total_count)."""
        ...

    def rank_of(self, arrangement: Sequence[int]) -> int:
        """
        Compute the rank of an arrangement (inverse of unrank).

        Raises:
            InvalidRank: if arrangement does not belong to the family
        """
        ...

    def __iter__(self) -> Iterator[Arrangement]:
        """Yield one full cycle of successor() results."""
        ...


@runtime_checkable
class CyclicGenerator(Protocol):
    """
    Protocol for sequential-only generators.

    Used where direct unranking is not available: the generator can only be
    advanced, or reset to rank 0.
    """

    @property
    def total_count(self) -> int:
        """Number of arrangements. Fixed at construction."""
        ...

    def reset(self) -> None:
        """Point the generator back at rank 0."""
        ...

    def successor(self) -> Arrangement:
        """Produce the next arrangement, wrapping after the last one."""
        ...

    def __iter__(self) -> Iterator[Arrangement]:
        """Yield one full cycle of successor() results."""
        ...
