"""
r-permutations of a multiset in lexicographic order.

Each symbol s may appear at most frequency[s] times. Unranking walks the
symbols in increasing order at every position: a candidate s owns the block
of arrangements that put s there, whose size is the multiset permutation
count of the suffix once one copy of s is used. The rank either falls in
that block (commit s and descend) or skips it.
"""

from collections.abc import Sequence

from .counting import multiset_permutation_count
from .enumerator import LexEnumerator
from .params import Params
from .protocols import Arrangement


class MultisetPermutation(LexEnumerator):
    """
    Enumerator of length-r sequences with bounded repetition.

    total_count = nPr(frequency, r). Example for frequency=[2, 1], r=2:
    (0, 0), (0, 1), (1, 0)
    """

    def __init__(self, frequency: Sequence[int], r: int):
        params = Params(frequency=frequency, length=r)
        super().__init__(params, multiset_permutation_count(params.frequency, r))

    @property
    def frequency(self) -> tuple[int, ...]:
        """Maximum multiplicity per symbol (after clamping)."""
        return self._params.frequency

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

    def _block_size(self, remaining: list[int], symbol: int, suffix: int) -> int:
        """Arrangements of the suffix once one copy of symbol is used."""
        remaining[symbol] -= 1
        size = multiset_permutation_count(remaining, suffix)
        remaining[symbol] += 1
        return size

    def unrank(self, rank: int) -> Arrangement:
        remaining = list(self.frequency)
        permutation = []
        for suffix in range(self.length - 1, -1, -1):
            symbol = 0
            while True:
                if remaining[symbol] > 0:
                    block = self._block_size(remaining, symbol, suffix)
                    if rank < block:
                        break
                    rank -= block
                symbol += 1
            permutation.append(symbol)
            remaining[symbol] -= 1
        return tuple(permutation)

    def rank_of(self, arrangement: Sequence[int]) -> int:
        values = self._check_arrangement(arrangement)
        remaining = list(self.frequency)
        rank = 0
        for i, symbol in enumerate(values):
            suffix = self.length - 1 - i
            for smaller in range(symbol):
                if remaining[smaller] > 0:
                    rank += self._block_size(remaining, smaller, suffix)
            remaining[symbol] -= 1
        return rank
