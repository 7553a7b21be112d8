"""
Generator error taxonomy.

InvalidParameter is raised at construction only. ExhaustedSequence is a
contract violation: reading or advancing a generator past its last element.
"""

from utils.reason_codes import E_EXHAUSTED, E_INVALID_PARAMS


class SequenceError(Exception):
    """Base class for all generator errors."""

    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.code = code


class InvalidParameter(SequenceError, ValueError):
    """Construction parameters violate a generator precondition."""

    def __init__(self, message: str, code: str = E_INVALID_PARAMS):
        super().__init__(message, code)


class ExhaustedSequence(SequenceError, RuntimeError):
    """advance() or current() called after has_next() became False."""

    def __init__(self, message: str):
        super().__init__(message, E_EXHAUSTED)
