"""
Counting functions for lexicographic enumeration.

Provides closed-form and table-based counts for:
- nPr: r-permutations of n distinct symbols (falling factorial)
- nCr: r-combinations of n distinct symbols (binomial coefficient)
- nCPr: circular r-permutations of n distinct symbols
- Multiset variants of nPr and nCPr, taking a per-symbol frequency
  vector instead of n

All public counts are checked against the signed 64-bit range. Ranks are
meant to fit in an i64, so a count that does not raises CountOverflow
instead of silently wrapping.
"""

import math
from collections.abc import Sequence

INT64_MAX = 2**63 - 1


class InvalidRange(ValueError):
    """Raised when a shape is infeasible: r > n, r < 0 or n < 0."""


class CountOverflow(OverflowError):
    """Raised when a count does not fit in a signed 64-bit integer."""


def check_range(n: int, r: int) -> None:
    """
    Validate the shape (n, r).

    Raises:
        InvalidRange: if r > n, r < 0 or n < 0
    """
    if n < 0 or r < 0 or r > n:
        raise InvalidRange(f"Invalid range: n={n}, r={r}")


def clamp_frequency(frequency: Sequence[int]) -> tuple[int, ...]:
    """
    Return a copy of frequency with negative entries replaced by 0.

    Clamping is a policy, not a validation failure: a negative multiplicity
    simply excludes the symbol.
    """
    return tuple(max(0, int(f)) for f in frequency)


def _checked(count: int) -> int:
    if count > INT64_MAX:
        raise CountOverflow(f"Count {count} exceeds the signed 64-bit range")
    return count


def permutation_count(n: int, r: int) -> int:
    """Number of r-permutations of n distinct symbols (nPr)."""
    check_range(n, r)
    return _checked(math.perm(n, r))


def combination_count(n: int, r: int) -> int:
    """Number of r-combinations of n distinct symbols (nCr)."""
    check_range(n, r)
    return _checked(math.comb(n, r))


def circular_permutation_count(n: int, r: int) -> int:
    """
    Number of circular r-permutations of n distinct symbols (nCPr).

    Every rotation class of a linear r-permutation has exactly r members,
    so nCPr = nPr / r. The empty arrangement counts once.
    """
    check_range(n, r)
    if r == 0:
        return 1
    return _checked(math.perm(n, r) // r)


def _multiset_permutations(frequency: tuple[int, ...], r: int) -> int:
    """
    Exact count of length-r sequences respecting frequency.

    ways[j] counts the length-j sequences over the symbols seen so far.
    Adding a symbol with multiplicity f places a <= f copies of it among j
    positions in C(j, a) ways, the rest filled by ways[j - a].
    """
    if r == 0:
        return 1
    ways = [1] + [0] * r
    for f in frequency:
        if f == 0:
            continue
        ways = [
            sum(math.comb(j, a) * ways[j - a] for a in range(min(f, j) + 1))
            for j in range(r + 1)
        ]
    return ways[r]


def multiset_permutation_count(frequency: Sequence[int], r: int) -> int:
    """
    Number of length-r sequences where symbol s appears at most frequency[s] times.

    Args:
        frequency: Maximum multiplicity per symbol (negatives clamped to 0)
        r: Sequence length

    Returns:
        nPr(frequency, r)
    """
    freq = clamp_frequency(frequency)
    check_range(sum(freq), r)
    return _checked(_multiset_permutations(freq, r))


def divisors(n: int) -> list[int]:
    """Return the divisors of a positive integer in ascending order."""
    if n < 1:
        raise ValueError(f"Integer < 1: {n}")
    low: list[int] = []
    high: list[int] = []
    d = 1
    while d * d <= n:
        if n % d == 0:
            low.append(d)
            if d != n // d:
                high.append(n // d)
        d += 1
    return low + high[::-1]


def circular_multiset_permutation_count(frequency: Sequence[int], r: int) -> int:
    """
    Number of rotation classes of length-r sequences respecting frequency.

    For each divisor d of r, block[d] counts the sequences of length d with
    primitive period d whose (r/d)-fold repetition is a valid sequence of
    length r. Each such class has exactly d rotations, so the number of
    classes is the sum of block[d] / d.

    Args:
        frequency: Maximum multiplicity per symbol (negatives clamped to 0)
        r: Sequence length

    Returns:
        nCPr(frequency, r)
    """
    freq = clamp_frequency(frequency)
    check_range(sum(freq), r)
    if r == 0:
        return 1

    blocks: dict[int, int] = {}
    total = 0
    for d in divisors(r):
        sub = tuple(f * d // r for f in freq)
        if d > sum(sub):
            blocks[d] = 0
            continue
        block = _multiset_permutations(sub, d)
        for e in divisors(d)[:-1]:
            block -= blocks[e]
        blocks[d] = block
        total += block // d
    return _checked(total)
