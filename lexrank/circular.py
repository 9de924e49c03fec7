"""
Circular r-permutations of n distinct symbols in lexicographic order.

A circular arrangement is a rotation class of linear r-permutations. The
representative is the rotation whose first symbol is the class minimum, so
the first symbol lies in [0, n - r] and every later symbol is larger than it.

Unranking picks the first symbol by skipping blocks of nPr(n - 1 - f, r - 1)
arrangements, then solves a linear-permutation sub-problem on the symbols
above it and shifts the result.
"""

from collections.abc import Sequence

from .counting import circular_permutation_count, permutation_count
from .enumerator import InvalidRank, LexEnumerator
from .params import Params
from .permutation import Permutation
from .protocols import Arrangement


class CircularPermutation(LexEnumerator):
    """
    Enumerator of circular r-permutations of {0, ..., n-1}.

    total_count = nCPr(n, r). Example for n=4, r=3:
    (0, 1, 2), (0, 1, 3), (0, 2, 1), (0, 2, 3), (0, 3, 1), (0, 3, 2),
    (1, 2, 3), (1, 3, 2)
    """

    def __init__(self, n: int, r: int):
        params = Params.distinct(n, r)
        self._first_max = n - r
        super().__init__(params, circular_permutation_count(n, r))

    @property
    def n(self) -> int:
        """Alphabet size."""
        return self._params.num_symbols

    def _increase_at(self, i: int) -> bool:
        current = self._cursor.arrangement[i]
        self._release(current)
        if i == 0:
            # Every other position has been released at this point
            if current >= self._first_max:
                return False
            self._take(0, current + 1)
            return True
        symbol = self._smallest_available(current + 1)
        if symbol is None:
            return False
        self._take(i, symbol)
        return True

    def _refill_after(self, i: int) -> None:
        arrangement = self._cursor.arrangement
        for j in range(i + 1, self.length):
            start = 0 if j == 0 else arrangement[0] + 1
            self._take(j, self._smallest_available(start))

    def unrank(self, rank: int) -> Arrangement:
        r = self.length
        if r == 0:
            return ()
        first = 0
        block = permutation_count(self.n - 1, r - 1)
        while rank >= block:
            rank -= block
            first += 1
            block = permutation_count(self.n - 1 - first, r - 1)
        rest = Permutation.permutation_at(rank, self.n - 1 - first, r - 1)
        return (first,) + tuple(symbol + first + 1 for symbol in rest)

    def rank_of(self, arrangement: Sequence[int]) -> int:
        values = self._check_arrangement(arrangement)
        if not values:
            return 0
        first = values[0]
        if any(symbol <= first for symbol in values[1:]):
            raise InvalidRank(f"First symbol must be the minimum: {values}")
        r = self.length
        rank = sum(permutation_count(self.n - 1 - f, r - 1) for f in range(first))
        # Linear rank of the shifted remainder on the reduced alphabet
        pool = list(range(first + 1, self.n))
        block = permutation_count(self.n - 1 - first, r - 1)
        for symbol in values[1:]:
            block //= len(pool)
            position = pool.index(symbol)
            rank += position * block
            pool.pop(position)
        return rank
