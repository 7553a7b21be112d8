"""
k-combinations in lexicographic order (sequences/combination.py).

Produces every k-subset of {0,...,n-1} as a strictly increasing vector,
following Algorithm T from Knuth, The Art of Computer Programming,
Vol. 4A, Combinatorial Algorithms, Part 1 (2011).

Invariant: comb[i] < comb[i+1] and comb[i] <= n - k + i.
The last combination is (n-k, ..., n-1).
"""

import logging
import math
from typing import Any, ClassVar, Dict, Optional, Tuple

import numpy as np

from .base import ArrayGenerator, register_generator
from .dtypes import check_fits, require_int
from .errors import InvalidParameter

logger = logging.getLogger(__name__)


@register_generator
class CombinationGenerator(ArrayGenerator):
    """
    Lexicographic k-subsets of an n-element universe.

    Params:
        n: universe size
        k: subset size, 1 <= k < n
    """

    KEY: ClassVar[str] = 'combination'
    DESCRIPTION: ClassVar[str] = 'k-subsets of {0..n-1} in lexicographic order'
    PARAMS: ClassVar[Tuple[str, ...]] = ('n', 'k')

    def __init__(self, n: int, k: int, dtype: Optional[Any] = None):
        super().__init__(dtype)
        self._n = require_int(n, 'n')
        self._k = require_int(k, 'k')
        if not 1 <= self._k < self._n:
            raise InvalidParameter(
                f"combination requires 1 <= k < n, got n={self._n}, k={self._k}"
            )
        check_fits(self._n - 1, self._dtype, "n - 1")

        self._bind_state(np.arange(self._k, dtype=self._dtype))
        logger.debug(f"Created {self!r}")

    @property
    def n(self) -> int:
        return self._n

    @property
    def k(self) -> int:
        return self._k

    def count(self) -> int:
        return math.comb(self._n, self._k)

    def params(self) -> Dict[str, Any]:
        return {'n': self._n, 'k': self._k}

    def _step(self) -> bool:
        comb = self._state
        offset = self._n - self._k

        # Rightmost position still below its limit n - k + j
        j = self._k - 1
        while j >= 0 and comb[j] >= offset + j:
            j -= 1

        if j < 0:
            return False

        # Increment comb[j], then refill the tail with consecutive values
        comb[j] += 1
        for i in range(j + 1, self._k):
            comb[i] = comb[i - 1] + 1
        return True
