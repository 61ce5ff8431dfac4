"""Caesar and Bellaso codec over a fixed character window."""

from cryptomanager.services.codec.alphabet import (
    DEFAULT_WINDOW,
    LOWER_BOUND,
    RANGE,
    UPPER_BOUND,
    AlphabetWindow,
    find_out_of_bounds,
    is_in_bounds,
    normalize_case,
)
from cryptomanager.services.codec.operations import (
    decrypt_bellaso,
    decrypt_caesar,
    encrypt_bellaso,
    encrypt_caesar,
    repeat_to_length,
)

__all__ = [
    "DEFAULT_WINDOW",
    "LOWER_BOUND",
    "RANGE",
    "UPPER_BOUND",
    "AlphabetWindow",
    "find_out_of_bounds",
    "is_in_bounds",
    "normalize_case",
    "decrypt_bellaso",
    "decrypt_caesar",
    "encrypt_bellaso",
    "encrypt_caesar",
    "repeat_to_length",
]
