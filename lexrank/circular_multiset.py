"""
Circular r-permutations of a multiset.

Linear multiset permutations are generated in ascending order and filtered:
a sequence is kept only if it is the lexicographically smallest rotation of
itself. The first sequence of every rotation class met in ascending order is
exactly that rotation, so each class is emitted once.
"""

from collections.abc import Iterator, Sequence

from .counting import circular_multiset_permutation_count
from .logging import get_logger
from .multiset import MultisetPermutation
from .params import Params
from .protocols import Arrangement

logger = get_logger(__name__)


def is_canonical_rotation(sequence: Sequence[int]) -> bool:
    """
    Check whether no rotation of sequence is lexicographically smaller.

    Only rotations starting at a symbol equal to sequence[0] can tie with the
    sequence; a rotation starting at a smaller symbol is smaller outright.

    Args:
        sequence: Candidate arrangement

    Returns:
        True if sequence is the canonical representative of its rotation class
    """
    r = len(sequence)
    for i in range(1, r):
        if sequence[i] < sequence[0]:
            return False
        if sequence[i] > sequence[0]:
            continue
        for j in range(r):
            rotated = sequence[(i + j) % r]
            if rotated < sequence[j]:
                return False
            if rotated > sequence[j]:
                break
    return True


class CircularMultisetPermutation:
    """
    Sequential generator of circular multiset permutations.

    total_count = nCPr(frequency, r). Example for frequency=[2, 1, 1], r=3:
    (0, 0, 1), (0, 0, 2), (0, 1, 2), (0, 2, 1)

    Direct unranking is not available; the generator can only advance or
    reset to rank 0.
    """

    def __init__(self, frequency: Sequence[int], r: int):
        self._linear = MultisetPermutation(frequency, r)
        self._total_count = circular_multiset_permutation_count(
            self._linear.frequency, r
        )
        logger.debug(f"Created {self!r} with {self._total_count} arrangements")

    @property
    def params(self) -> Params:
        """Shape of this generator."""
        return self._linear.params

    @property
    def length(self) -> int:
        """Arrangement length r."""
        return self._linear.length

    @property
    def total_count(self) -> int:
        """Number of rotation classes."""
        return self._total_count

    def reset(self) -> None:
        """Point the generator back at the first arrangement."""
        self._linear.jump_to(0)

    def successor(self) -> Arrangement:
        """
        Produce the next canonical arrangement, wrapping after the last one.

        Returns:
            The arrangement, as a tuple
        """
        while True:
            candidate = self._linear.successor()
            if is_canonical_rotation(candidate):
                return candidate

    def __iter__(self) -> Iterator[Arrangement]:
        for _ in range(self._total_count):
            yield self.successor()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.params!r})"
