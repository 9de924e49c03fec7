"""Tests for counting functions."""

import itertools

import pytest
from lexrank.counting import (
    INT64_MAX,
    CountOverflow,
    InvalidRange,
    circular_multiset_permutation_count,
    circular_permutation_count,
    clamp_frequency,
    combination_count,
    divisors,
    multiset_permutation_count,
    permutation_count,
)


def brute_multiset_sequences(frequency, r):
    """All distinct length-r sequences respecting frequency."""
    pool = [s for s, f in enumerate(frequency) for _ in range(max(0, f))]
    return set(itertools.permutations(pool, r))


def min_rotation(sequence):
    return min(sequence[i:] + sequence[:i] for i in range(len(sequence))) if sequence else ()


class TestDistinctCounts:
    """Tests for nPr, nCr and nCPr."""

    def test_known_values(self):
        assert permutation_count(5, 3) == 60
        assert combination_count(7, 3) == 35
        assert circular_permutation_count(6, 4) == 90

    def test_against_brute_force(self):
        """Counts agree with itertools for n <= 7."""
        for n in range(8):
            for r in range(n + 1):
                perms = list(itertools.permutations(range(n), r))
                assert permutation_count(n, r) == len(perms)
                assert combination_count(n, r) == len(list(itertools.combinations(range(n), r)))
                classes = {min_rotation(p) for p in perms}
                assert circular_permutation_count(n, r) == len(classes)

    def test_empty_arrangement(self):
        """r = 0 has exactly one arrangement."""
        assert permutation_count(0, 0) == 1
        assert combination_count(4, 0) == 1
        assert circular_permutation_count(4, 0) == 1


class TestMultisetCounts:
    """Tests for the frequency-vector variants."""

    def test_known_values(self):
        assert multiset_permutation_count([3, 2, 1], 4) == 38
        assert circular_multiset_permutation_count([3, 3, 1], 3) == 8
        assert circular_multiset_permutation_count([2, 1, 1], 3) == 4

    def test_distinct_frequency_matches_distinct_counts(self):
        """All-ones frequency reduces to nPr and nCPr."""
        for n in range(1, 7):
            for r in range(n + 1):
                assert multiset_permutation_count([1] * n, r) == permutation_count(n, r)
                assert circular_multiset_permutation_count([1] * n, r) == (
                    circular_permutation_count(n, r)
                )

    @pytest.mark.parametrize(
        "frequency",
        [[3, 2, 1], [3, 3, 1], [2, 2, 2], [4, 0, 2], [1, 3], [6], [2, 1, 1, 2]],
    )
    def test_against_brute_force(self, frequency):
        for r in range(sum(frequency) + 1):
            sequences = brute_multiset_sequences(frequency, r)
            assert multiset_permutation_count(frequency, r) == len(sequences)
            classes = {min_rotation(s) for s in sequences}
            assert circular_multiset_permutation_count(frequency, r) == len(classes)

    def test_wide_alphabet(self):
        """Thousands of symbols count without deep recursion."""
        assert multiset_permutation_count([1] * 1500, 1) == 1500
        assert multiset_permutation_count([1] * 1500, 2) == 1500 * 1499
        assert circular_multiset_permutation_count([1] * 1500, 2) == 1500 * 1499 // 2
        assert multiset_permutation_count([0] * 1200 + [2, 1], 3) == 3

    def test_negative_entries_clamped(self):
        """Negative multiplicities count as 0 rather than failing."""
        assert multiset_permutation_count([3, -2, 1], 2) == multiset_permutation_count([3, 0, 1], 2)
        assert circular_multiset_permutation_count([-1, 2, 2], 4) == (
            circular_multiset_permutation_count([0, 2, 2], 4)
        )

    def test_input_not_mutated(self):
        frequency = [2, -3, 1]
        multiset_permutation_count(frequency, 2)
        circular_multiset_permutation_count(frequency, 2)
        assert frequency == [2, -3, 1]

    def test_clamp_frequency(self):
        assert clamp_frequency([1, -1, 0, 4]) == (1, 0, 0, 4)
        assert clamp_frequency([]) == ()


class TestDivisors:
    """Tests for divisors."""

    def test_divisors(self):
        assert divisors(1) == [1]
        assert divisors(12) == [1, 2, 3, 4, 6, 12]
        assert divisors(16) == [1, 2, 4, 8, 16]
        assert divisors(13) == [1, 13]

    def test_non_positive(self):
        with pytest.raises(ValueError):
            divisors(0)


class TestCountingErrors:
    """Test error handling."""

    @pytest.mark.parametrize("n, r", [(3, 5), (3, -1), (-1, 0), (-2, -3)])
    def test_invalid_range(self, n, r):
        with pytest.raises(InvalidRange):
            permutation_count(n, r)
        with pytest.raises(InvalidRange):
            combination_count(n, r)
        with pytest.raises(InvalidRange):
            circular_permutation_count(n, r)

    def test_invalid_range_multiset(self):
        with pytest.raises(InvalidRange):
            multiset_permutation_count([1, 1], 3)
        with pytest.raises(InvalidRange):
            multiset_permutation_count([2, -5], 3)
        with pytest.raises(InvalidRange):
            circular_multiset_permutation_count([1, 1], -1)

    def test_invalid_range_is_value_error(self):
        with pytest.raises(ValueError):
            combination_count(3, 5)

    def test_overflow(self):
        """Counts beyond the signed 64-bit range raise instead of wrapping."""
        assert permutation_count(20, 20) <= INT64_MAX
        with pytest.raises(CountOverflow):
            permutation_count(21, 21)
        with pytest.raises(CountOverflow):
            combination_count(100, 50)
        with pytest.raises(CountOverflow):
            multiset_permutation_count([2] * 15, 30)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
