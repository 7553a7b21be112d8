"""
Tests for sequences/permutation.py

Verifies:
- Lexicographic order matches itertools.permutations
- Identity start, descending end, n! elements
- Degenerate n = 0 and n = 1
"""

import math
from itertools import permutations

import numpy as np
import pytest

from sequences import PermutationGenerator, InvalidParameter


class TestPermutationOrder:
    """Next-permutation successor."""

    def test_n3(self):
        """n=3 yields the six permutations in lexicographic order."""
        assert list(PermutationGenerator(3)) == [
            (0, 1, 2), (0, 2, 1), (1, 0, 2), (1, 2, 0), (2, 0, 1), (2, 1, 0)
        ]

    @pytest.mark.parametrize("n", range(0, 7))
    def test_matches_itertools(self, n):
        """Matches itertools.permutations, which is lexicographic for sorted input."""
        gen = PermutationGenerator(n)
        result = list(gen)
        assert result == list(permutations(range(n)))
        assert len(result) == math.factorial(n) == gen.count()

    def test_first_and_last(self):
        """Starts at the identity, ends fully descending."""
        result = list(PermutationGenerator(5))
        assert result[0] == (0, 1, 2, 3, 4)
        assert result[-1] == (4, 3, 2, 1, 0)
        assert all(a < b for a, b in zip(result, result[1:]))

    def test_n0_yields_empty_permutation(self):
        """n=0 yields one empty permutation."""
        assert list(PermutationGenerator(0)) == [()]

    def test_small_dtype(self):
        """Elements are stored in the requested dtype."""
        gen = PermutationGenerator(4, dtype=np.int8)
        assert gen.current().dtype == np.int8
        assert len(list(gen)) == 24


class TestPermutationValidation:
    """Construction preconditions."""

    def test_negative_raises(self):
        """n must be non-negative."""
        with pytest.raises(InvalidParameter, match="n must be >= 0"):
            PermutationGenerator(-2)

    def test_universe_must_fit_dtype(self):
        """n - 1 must be representable."""
        PermutationGenerator(128, dtype=np.int8)
        with pytest.raises(InvalidParameter):
            PermutationGenerator(129, dtype=np.int8)


class TestPermutationState:
    """In-place successor."""

    def test_view_updated_in_place(self):
        """current() is the same read-only view across advances."""
        gen = PermutationGenerator(3)
        view = gen.current()
        gen.advance()
        assert gen.current() is view
        assert view.tolist() == [0, 2, 1]

    def test_suffix_reversed_after_swap(self):
        """(0,3,2,1) is followed by (1,0,2,3)."""
        gen = PermutationGenerator(4)
        while gen.current().tolist() != [0, 3, 2, 1]:
            gen.advance()
        state = gen.current()
        gen.advance()
        assert state.tolist() == [1, 0, 2, 3]
