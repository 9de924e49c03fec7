"""
r-combinations of n distinct symbols in lexicographic order.

Combinations are stored as strictly increasing sequences, so position i can
hold at most n - r + i. Unranking is the combinatorial number system: for
each position, skip whole blocks of combinations that start with a smaller
symbol, each block counted by nCr of the shrinking sub-problem.
"""

from collections.abc import Sequence

from .counting import check_range, combination_count
from .enumerator import InvalidRank, LexEnumerator
from .params import Params
from .protocols import Arrangement


class Combination(LexEnumerator):
    """
    Enumerator of r-subsets of {0, ..., n-1}, as ascending tuples.

    total_count = nCr(n, r). Example for n=4, r=2:
    (0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)
    """

    def __init__(self, n: int, r: int):
        params = Params.distinct(n, r)
        super().__init__(params, combination_count(n, r))

    @property
    def n(self) -> int:
        """Alphabet size."""
        return self._params.num_symbols

    def _increase_at(self, i: int) -> bool:
        current = self._cursor.arrangement[i]
        self._release(current)
        if current >= self.n - self.length + i:
            return False
        # current + 1 is free: a later position holding it would have
        # already been at its own upper bound, making position i fail too
        self._take(i, current + 1)
        return True

    def _refill_after(self, i: int) -> None:
        arrangement = self._cursor.arrangement
        symbol = arrangement[i] + 1 if i >= 0 else 0
        for j in range(i + 1, self.length):
            self._take(j, symbol)
            symbol += 1

    def unrank(self, rank: int) -> Arrangement:
        return self.combination_at(rank, self.n, self.length)

    def rank_of(self, arrangement: Sequence[int]) -> int:
        values = self._check_arrangement(arrangement)
        if any(a >= b for a, b in zip(values, values[1:])):
            raise InvalidRank(f"Combination must be strictly increasing: {values}")
        rank = 0
        smallest = 0
        for i, symbol in enumerate(values):
            for skipped in range(smallest, symbol):
                rank += combination_count(self.n - 1 - skipped, self.length - 1 - i)
            smallest = symbol + 1
        return rank

    @staticmethod
    def combination_at(rank: int, n: int, r: int) -> Arrangement:
        """
        Compute the r-combination of {0, ..., n-1} at rank.

        The rank is not validated.

        Args:
            rank: Lexicographic rank in [0, nCr(n, r))
            n: Alphabet size
            r: Combination size

        Returns:
            The combination at rank, in ascending order

        Raises:
            InvalidRange: if the shape (n, r) is infeasible
        """
        check_range(n, r)
        combination = []
        symbol = 0
        remaining = r
        for _ in range(r):
            remaining -= 1
            # Combinations starting with symbol: choose the rest from above it
            block = combination_count(n - 1 - symbol, remaining)
            while rank >= block:
                rank -= block
                symbol += 1
                block = combination_count(n - 1 - symbol, remaining)
            combination.append(symbol)
            symbol += 1
        return tuple(combination)
