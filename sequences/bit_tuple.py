"""
Bit tuples in binary counting order (sequences/bit_tuple.py).

All p-tuples over {0, 1}, encoded as the integers 0..2^p-1 and produced by
incrementing a binary counter. Bit i of the value is tuple element i.
Unlike the Gray code, consecutive values may differ in many bits.
"""

import logging
from typing import Any, ClassVar, Dict, Optional, Tuple

from .base import ScalarGenerator, register_generator
from .dtypes import check_fits, require_int

logger = logging.getLogger(__name__)


@register_generator
class BitTupleGenerator(ScalarGenerator):
    """
    Binary counter over p-bit tuples.

    Params:
        p: tuple width, 2^p - 1 must fit the dtype
    """

    KEY: ClassVar[str] = 'bit_tuple'
    DESCRIPTION: ClassVar[str] = 'p-bit tuples in binary counting order'
    PARAMS: ClassVar[Tuple[str, ...]] = ('p',)

    def __init__(self, p: int, dtype: Optional[Any] = None):
        super().__init__(dtype)
        self._p = require_int(p, 'p')
        self._last = (1 << self._p) - 1
        check_fits(self._last, self._dtype, f"2^{self._p} - 1")
        logger.debug(f"Created {self!r}")

    @property
    def p(self) -> int:
        return self._p

    def count(self) -> int:
        return 1 << self._p

    def params(self) -> Dict[str, Any]:
        return {'p': self._p}

    def bits(self) -> Tuple[int, ...]:
        """Current value as a p-tuple, element i = bit i."""
        self._require_live('bits')
        return tuple((self._n >> i) & 1 for i in range(self._p))

    def _step(self) -> bool:
        if self._n == self._last:
            return False
        self._n += 1
        return True
