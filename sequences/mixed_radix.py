"""
Mixed radix tuples in odometer order (sequences/mixed_radix.py).

Produces every digit vector t with 0 <= t[i] <= r[i], rightmost digit
fastest, carrying leftward on overflow. Starts at all zeros, ends at r.
"""

import logging
from functools import reduce
from operator import mul
from typing import Any, ClassVar, Dict, Optional, Sequence, Tuple

import numpy as np

from .base import ArrayGenerator, register_generator
from .dtypes import check_fits, require_int
from .errors import InvalidParameter

logger = logging.getLogger(__name__)


@register_generator
class MixedRadixGenerator(ArrayGenerator):
    """
    Odometer over per-position bounds.

    Params:
        radices: inclusive upper bound of each digit, all >= 0, length >= 1
    """

    KEY: ClassVar[str] = 'mixed_radix'
    DESCRIPTION: ClassVar[str] = 'digit vectors bounded by a radix vector, odometer order'
    PARAMS: ClassVar[Tuple[str, ...]] = ('radices',)

    def __init__(self, radices: Sequence[int], dtype: Optional[Any] = None):
        super().__init__(dtype)
        if isinstance(radices, (str, bytes)) or not hasattr(radices, '__iter__'):
            raise InvalidParameter(
                f"radices must be a sequence of integers, got {type(radices).__name__}"
            )
        radii = tuple(require_int(r, f"radices[{i}]") for i, r in enumerate(radices))
        if not radii:
            raise InvalidParameter("radices must contain at least one entry")
        check_fits(max(radii), self._dtype, "max(radices)")

        self._bounds = np.array(radii, dtype=self._dtype)
        self._bounds.flags.writeable = False
        self._bind_state(np.zeros(len(radii), dtype=self._dtype))
        logger.debug(f"Created {self!r}")

    @property
    def radices(self) -> Tuple[int, ...]:
        return tuple(self._bounds.tolist())

    def count(self) -> int:
        return reduce(mul, (r + 1 for r in self._bounds.tolist()), 1)

    def params(self) -> Dict[str, Any]:
        return {'radices': self._bounds.tolist()}

    def _step(self) -> bool:
        t, r = self._state, self._bounds
        last = len(t) - 1

        # Fast path: no carry
        if t[last] < r[last]:
            t[last] += 1
            return True

        j = last - 1
        while j >= 0:
            t[j + 1] = 0
            if t[j] < r[j]:
                break
            j -= 1

        if j < 0:
            return False

        t[j] += 1
        return True
