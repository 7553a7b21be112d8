"""
Integer dtype handling.

Generators are generic over a numpy integer dtype. The dtype bounds every
value a generator may produce; checks happen once, at construction.
"""

from typing import Any, Optional

import numpy as np

from utils.reason_codes import E_DTYPE, E_WIDTH_OVERFLOW
from . import config
from .errors import InvalidParameter


def resolve_dtype(dtype: Optional[Any] = None) -> np.dtype:
    """
    Normalize a dtype argument.

    Args:
        dtype: Anything np.dtype() accepts, or None for the configured default.

    Returns:
        numpy integer dtype

    Raises:
        InvalidParameter: If the dtype is unknown or not integral.
    """
    if dtype is None:
        dtype = config.get('dtype', 'default', 'int64')
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise InvalidParameter(f"Unknown dtype: {dtype!r}", E_DTYPE) from e
    if not np.issubdtype(resolved, np.integer):
        raise InvalidParameter(
            f"dtype must be integral, got {resolved}", E_DTYPE
        )
    return resolved


def bit_width(dtype: np.dtype) -> int:
    """Number of bits in the dtype, sign bit included."""
    return np.iinfo(dtype).bits


def max_value(dtype: np.dtype) -> int:
    """Largest value representable in the dtype."""
    return int(np.iinfo(dtype).max)


def check_fits(value: int, dtype: np.dtype, what: str) -> None:
    """
    Raise InvalidParameter if value is not representable in dtype.

    Args:
        value: Largest value the generator will ever store
        dtype: Target dtype
        what: Human readable description of the value for the message
    """
    limit = max_value(dtype)
    if value > limit:
        raise InvalidParameter(
            f"{what} = {value} does not fit {dtype} (max {limit}, "
            f"{bit_width(dtype)} bits)",
            E_WIDTH_OVERFLOW,
        )


def require_int(value: Any, name: str, minimum: int = 0) -> int:
    """
    Validate an integer construction parameter.

    Accepts Python and numpy integers, rejects bool.

    Returns:
        value as a Python int

    Raises:
        InvalidParameter: If value is not an integer or is below minimum.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise InvalidParameter(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    value = int(value)
    if value < minimum:
        raise InvalidParameter(f"{name} must be >= {minimum}, got {value}")
    return value
