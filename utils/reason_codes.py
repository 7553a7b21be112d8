"""
Standardized reason codes for generator errors.

Every SequenceError carries one of these constants in its ``code``
attribute so callers can branch on the failure without parsing messages.
"""

# Construction errors
E_INVALID_PARAMS = "E_INVALID_PARAMS"
E_WIDTH_OVERFLOW = "E_WIDTH_OVERFLOW"
E_DTYPE = "E_DTYPE"

# Traversal errors
E_EXHAUSTED = "E_EXHAUSTED"

# All valid reason codes
REASON_CODES = {
    E_INVALID_PARAMS,
    E_WIDTH_OVERFLOW,
    E_DTYPE,
    E_EXHAUSTED,
}


def validate_reason_code(code: str) -> bool:
    """
    Check if a reason code is valid.

    Valid codes are either in REASON_CODES or prefixed with E_.
    """
    if code in REASON_CODES:
        return True
    if code.startswith("E_"):
        return True
    return False
