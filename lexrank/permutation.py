"""
r-permutations of n distinct symbols in lexicographic order.

Unranking uses the factorial number system: at position i the remaining
rank space splits into n - i equal blocks of size nPr(n - i - 1, r - i - 1),
and the block index selects a symbol from the pool of unused symbols.
"""

from collections.abc import Sequence

from .counting import permutation_count
from .enumerator import LexEnumerator
from .params import Params
from .protocols import Arrangement


class Permutation(LexEnumerator):
    """
    Enumerator of r-permutations of {0, ..., n-1}.

    total_count = nPr(n, r). Example for n=3, r=2:
    (0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1)
    """

    def __init__(self, n: int, r: int):
        params = Params.distinct(n, r)
        super().__init__(params, permutation_count(n, r))

    @property
    def n(self) -> int:
        """Alphabet size."""
        return self._params.num_symbols

    def _increase_at(self, i: int) -> bool:
        current = self._cursor.arrangement[i]
        self._release(current)
        symbol = self._smallest_available(current + 1)
        if symbol is None:
            return False
        self._take(i, symbol)
        return True

    def _refill_after(self, i: int) -> None:
        for j in range(i + 1, self.length):
            self._take(j, self._smallest_available())

    def unrank(self, rank: int) -> Arrangement:
        return self.permutation_at(rank, self.n, self.length)

    def rank_of(self, arrangement: Sequence[int]) -> int:
        values = self._check_arrangement(arrangement)
        pool = list(range(self.n))
        block = self._total_count
        rank = 0
        for i, symbol in enumerate(values):
            block //= self.n - i
            position = pool.index(symbol)
            rank += position * block
            pool.pop(position)
        return rank

    @staticmethod
    def permutation_at(rank: int, n: int, r: int) -> Arrangement:
        """
        Compute the r-permutation of {0, ..., n-1} at rank.

        The rank is not validated.

        Args:
            rank: Lexicographic rank in [0, nPr(n, r))
            n: Alphabet size
            r: Arrangement length

        Returns:
            The permutation at rank
        """
        pool = list(range(n))
        block = permutation_count(n, r)
        permutation = []
        for i in range(r):
            block //= n - i
            position, rank = divmod(rank, block)
            permutation.append(pool.pop(position))
        return tuple(permutation)
