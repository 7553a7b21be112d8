"""
Binary reflected Gray code (sequences/gray_code.py).

Produces all n-bit values so that consecutive values differ in exactly
one bit. Uses the loopless focus pointer method from:

    Bitner, Ehrlich and Reingold. "Efficient generation of the binary
    reflected Gray code and its applications."
    Communications of the ACM 19.9 (1976): 517-521.

Each advance does a constant amount of work regardless of n.
"""

import logging
from typing import Any, ClassVar, Dict, Optional, Tuple

import numpy as np

from .base import ScalarGenerator, register_generator
from .dtypes import check_fits, require_int

logger = logging.getLogger(__name__)


@register_generator
class GrayCodeGenerator(ScalarGenerator):
    """
    Minimal change order over n-bit values.

    Params:
        n: tuple width, 2^n - 1 must fit the dtype
    """

    KEY: ClassVar[str] = 'gray_code'
    DESCRIPTION: ClassVar[str] = 'n-bit values in binary reflected Gray code order'
    PARAMS: ClassVar[Tuple[str, ...]] = ('n',)

    def __init__(self, n: int, dtype: Optional[Any] = None):
        super().__init__(dtype)
        self._width = require_int(n, 'n')
        check_fits((1 << self._width) - 1, self._dtype, f"2^{self._width} - 1")

        # Focus pointers, fixed length n + 1
        self._focus = np.arange(self._width + 1, dtype=np.intp)
        self._flipped: Optional[int] = None
        logger.debug(f"Created {self!r}")

    @property
    def n(self) -> int:
        return self._width

    def count(self) -> int:
        return 1 << self._width

    def params(self) -> Dict[str, Any]:
        return {'n': self._width}

    def last_flipped(self) -> Optional[int]:
        """Bit index flipped by the most recent advance, None before the first."""
        return self._flipped

    def _step(self) -> bool:
        f = self._focus
        j = int(f[0])
        if j == self._width:
            return False

        f[0] = 0
        f[j] = f[j + 1]
        f[j + 1] = j + 1

        self._n ^= 1 << j
        self._flipped = j
        return True
