"""Utility modules for the sequence generators."""

from .reason_codes import (
    E_INVALID_PARAMS, E_WIDTH_OVERFLOW, E_DTYPE, E_EXHAUSTED,
    REASON_CODES, validate_reason_code
)

__all__ = [
    'E_INVALID_PARAMS', 'E_WIDTH_OVERFLOW', 'E_DTYPE', 'E_EXHAUSTED',
    'REASON_CODES', 'validate_reason_code'
]
