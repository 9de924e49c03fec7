"""Tests for circular permutations of distinct symbols."""

import itertools

import pytest
from lexrank import CircularPermutation, InvalidRange, InvalidRank
from lexrank.counting import circular_permutation_count


def rotation_classes(n, r):
    """Canonical representatives of the rotation classes of nPr, in order."""
    classes = set()
    for p in itertools.permutations(range(n), r):
        start = p.index(min(p)) if p else 0
        classes.add(p[start:] + p[:start])
    return sorted(classes)


class TestCircularPermutation:
    """Tests for CircularPermutation."""

    def test_six_pick_four(self):
        circular = CircularPermutation(6, 4)
        assert circular.total_count == circular_permutation_count(6, 4) == 90
        arrangements = [circular.unrank(k) for k in range(circular.total_count)]
        assert len(set(arrangements)) == 90
        assert arrangements == rotation_classes(6, 4)

    def test_matches_brute_force(self):
        for n in range(7):
            for r in range(n + 1):
                circular = CircularPermutation(n, r)
                expected = rotation_classes(n, r)
                assert circular.total_count == len(expected)
                assert list(circular) == expected

    def test_first_symbol_is_minimum(self):
        circular = CircularPermutation(6, 4)
        for arrangement in circular:
            assert arrangement[0] == min(arrangement)
            assert arrangement[0] <= 6 - 4

    def test_known_order(self):
        circular = CircularPermutation(4, 3)
        assert list(circular) == [
            (0, 1, 2), (0, 1, 3), (0, 2, 1), (0, 2, 3),
            (0, 3, 1), (0, 3, 2), (1, 2, 3), (1, 3, 2),
        ]

    def test_sequence_after_jump_keeps_first_minimal(self):
        """Refilling after a jump never reuses symbols below the first one."""
        circular = CircularPermutation(6, 4)
        circular.jump_to(61)
        for step in range(circular.total_count):
            arrangement = circular.successor()
            assert arrangement[0] == min(arrangement)
            assert arrangement == circular.unrank((61 + step) % circular.total_count)

    def test_rank_of(self):
        circular = CircularPermutation(5, 3)
        for k in range(circular.total_count):
            assert circular.rank_of(circular.unrank(k)) == k


class TestCircularPermutationErrors:
    """Test error handling."""

    def test_invalid_range(self):
        with pytest.raises(InvalidRange):
            CircularPermutation(3, 4)
        with pytest.raises(InvalidRange):
            CircularPermutation(3, -1)

    def test_rank_of_non_canonical(self):
        """A rotation not starting at its minimum has no rank."""
        with pytest.raises(InvalidRank):
            CircularPermutation(4, 3).rank_of((1, 0, 2))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
