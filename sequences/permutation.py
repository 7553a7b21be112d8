"""
Permutations in lexicographic order (sequences/permutation.py).

Standard next-permutation successor: find the rightmost ascent, swap its
head with the rightmost larger element, reverse the suffix. Starts at the
identity, ends at the fully descending arrangement.
"""

import logging
import math
from typing import Any, ClassVar, Dict, Optional, Tuple

import numpy as np

from .base import ArrayGenerator, register_generator
from .dtypes import check_fits, require_int

logger = logging.getLogger(__name__)


@register_generator
class PermutationGenerator(ArrayGenerator):
    """
    Lexicographic permutations of {0, ..., n-1}.

    Params:
        n: universe size, n >= 0 (n = 0 yields the empty permutation once)
    """

    KEY: ClassVar[str] = 'permutation'
    DESCRIPTION: ClassVar[str] = 'permutations of {0..n-1} in lexicographic order'
    PARAMS: ClassVar[Tuple[str, ...]] = ('n',)

    def __init__(self, n: int, dtype: Optional[Any] = None):
        super().__init__(dtype)
        self._size = require_int(n, 'n')
        check_fits(self._size - 1, self._dtype, "n - 1")
        self._bind_state(np.arange(self._size, dtype=self._dtype))
        logger.debug(f"Created {self!r}")

    @property
    def n(self) -> int:
        return self._size

    def count(self) -> int:
        return math.factorial(self._size)

    def params(self) -> Dict[str, Any]:
        return {'n': self._size}

    def _step(self) -> bool:
        perm = self._state
        n = self._size

        # Rightmost ascent perm[i] < perm[i + 1]
        i = n - 2
        while i >= 0 and perm[i] >= perm[i + 1]:
            i -= 1

        if i < 0:
            return False

        # Rightmost element of the suffix larger than perm[i]
        k = n - 1
        while perm[k] <= perm[i]:
            k -= 1

        perm[i], perm[k] = perm[k], perm[i]

        # The suffix is descending, reverse it in place
        lo, hi = i + 1, n - 1
        while lo < hi:
            perm[lo], perm[hi] = perm[hi], perm[lo]
            lo += 1
            hi -= 1
        return True
