"""
Shared cursor and successor template for lexicographic enumerators.

A family subclasses LexEnumerator and supplies three hooks:
- _increase_at(i): release the symbol at position i and try to replace it
  with the smallest admissible larger symbol
- _refill_after(i): fill positions i+1.. with the smallest feasible
  completion; i == -1 means the previous arrangement was the maximum and
  the whole arrangement restarts at rank 0
- unrank(rank): direct computation of the arrangement at rank

The successor template scans backwards for a pivot with _increase_at and
then calls _refill_after once. Because every failed _increase_at releases
its symbol, all positions after the pivot are free when the refill runs.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .logging import get_logger
from .params import Params
from .protocols import Arrangement

logger = get_logger(__name__)


class InvalidRank(ValueError):
    """Raised by validated rank operations for ranks or arrangements outside a family."""


@dataclass
class Cursor:
    """
    Mutable generator state.

    Between calls, available[s] == frequency[s] - arrangement.count(s).
    """

    arrangement: list[int]  # Last materialized arrangement
    available: list[int]  # Remaining multiplicity per symbol
    next_index: int = 0  # Rank the next successor() produces
    just_wrapped: bool = False  # Last successor() produced rank total_count - 1


class LexEnumerator(ABC):
    """
    Base class for rank-indexed families.

    Construction computes the count, then positions the cursor at rank 0
    (which materializes the arrangement at rank total_count - 1).
    """

    def __init__(self, params: Params, total_count: int):
        self._params = params
        self._total_count = total_count
        self._cursor = Cursor(arrangement=[], available=list(params.frequency))
        self.jump_to(0)
        logger.debug(f"Created {self!r} with {total_count} arrangements")

    @property
    def params(self) -> Params:
        """Shape of this enumerator."""
        return self._params

    @property
    def length(self) -> int:
        """Arrangement length r."""
        return self._params.length

    @property
    def total_count(self) -> int:
        """Number of arrangements."""
        return self._total_count

    @property
    def next_rank(self) -> int:
        """Rank of the arrangement the next successor() returns."""
        return self._cursor.next_index

    def jump_to(self, rank: int) -> None:
        """
        Position the cursor so that successor() returns the arrangement at rank.

        Ranks outside [0, total_count) are ignored.
        """
        if rank < 0 or rank >= self._total_count:
            return
        previous = self.unrank((rank - 1) % self._total_count)
        available = list(self._params.frequency)
        for symbol in previous:
            available[symbol] -= 1
        self._cursor.arrangement = list(previous)
        self._cursor.available = available
        self._cursor.next_index = rank

    def was_last(self) -> bool:
        """Read and clear the flag set when successor() produced the last rank."""
        wrapped = self._cursor.just_wrapped
        self._cursor.just_wrapped = False
        return wrapped

    def successor(self) -> Arrangement:
        """
        Produce the arrangement at next_rank and advance the cursor.

        Returns:
            The arrangement, as a tuple
        """
        cursor = self._cursor
        cursor.next_index += 1
        if cursor.next_index == self._total_count:
            cursor.next_index = 0
        cursor.just_wrapped = cursor.next_index == 0
        if cursor.just_wrapped:
            logger.debug(f"{self!r} produced its last arrangement")

        i = self.length - 1
        while i >= 0 and not self._increase_at(i):
            i -= 1
        self._refill_after(i)
        return tuple(cursor.arrangement)

    def unrank_checked(self, rank: int) -> Arrangement:
        """
        Compute the arrangement at rank, validating the rank first.

        Raises:
            InvalidRank: if rank is outside [0, total_count)
        """
        if not 0 <= rank < self._total_count:
            raise InvalidRank(f"Rank {rank} out of range [0, {self._total_count})")
        return self.unrank(rank)

    def __iter__(self) -> Iterator[Arrangement]:
        for _ in range(self._total_count):
            yield self.successor()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._params!r})"

    # Cursor helpers for the hooks

    def _release(self, symbol: int) -> None:
        self._cursor.available[symbol] += 1

    def _take(self, position: int, symbol: int) -> None:
        self._cursor.arrangement[position] = symbol
        self._cursor.available[symbol] -= 1

    def _smallest_available(self, start: int = 0) -> int | None:
        """Smallest symbol >= start with remaining multiplicity, or None."""
        available = self._cursor.available
        for symbol in range(start, len(available)):
            if available[symbol] > 0:
                return symbol
        return None

    def _check_arrangement(self, arrangement: Sequence[int]) -> list[int]:
        """
        Validate length, alphabet and multiplicities of a candidate arrangement.

        Returns:
            The arrangement as a list

        Raises:
            InvalidRank: if the sequence cannot be an arrangement of this shape
        """
        values = list(arrangement)
        if len(values) != self.length:
            raise InvalidRank(f"Expected {self.length} symbols, got {len(values)}")
        remaining = list(self._params.frequency)
        for symbol in values:
            if not 0 <= symbol < len(remaining) or remaining[symbol] == 0:
                raise InvalidRank(f"Symbol {symbol} not available in {values}")
            remaining[symbol] -= 1
        return values

    # Family hooks

    @abstractmethod
    def _increase_at(self, i: int) -> bool:
        """Release position i and try to put a larger admissible symbol there."""

    @abstractmethod
    def _refill_after(self, i: int) -> None:
        """Fill positions after i with the smallest feasible completion."""

    @abstractmethod
    def unrank(self, rank: int) -> Arrangement:
        """Compute the arrangement at rank (unchecked)."""

    @abstractmethod
    def rank_of(self, arrangement: Sequence[int]) -> int:
        """Compute the rank of an arrangement."""
