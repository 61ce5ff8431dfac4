"""
Caesar and Bellaso transforms over an alphabet window.

Every function is pure: input is validated before any output is built and
the result always has the same length as the input text.
"""
from itertools import cycle, islice

from cryptomanager.core.exceptions import EmptyKeyError, InvalidArgumentError
from cryptomanager.services.codec.alphabet import (
    DEFAULT_WINDOW,
    AlphabetWindow,
    normalize_case,
    require_in_bounds,
)


def repeat_to_length(key: str, length: int) -> str:
    """
    Repeat key until it covers length characters, truncating the last copy.

    Args:
        key: Key string to repeat
        length: Number of characters to produce

    Returns:
        Key stream of exactly length characters

    Raises:
        EmptyKeyError: If key is empty
        InvalidArgumentError: If length is negative
    """
    if not key:
        raise EmptyKeyError()
    if length < 0:
        raise InvalidArgumentError(
            f"Length must not be negative, got {length}",
            {"length": length},
        )
    return "".join(islice(cycle(key), length))


def encrypt_caesar(
    plaintext: str,
    key: int,
    window: AlphabetWindow = DEFAULT_WINDOW,
) -> str:
    """
    Shift every character of plaintext forward by key positions.

    The key may be negative or larger than the window range.

    Raises:
        OutOfBoundsError: If the uppercased plaintext leaves the window
    """
    plaintext = normalize_case(plaintext)
    require_in_bounds(plaintext, window)

    shift = key % window.range
    return "".join(window.wrap(ord(char) + shift) for char in plaintext)


def decrypt_caesar(
    ciphertext: str,
    key: int,
    window: AlphabetWindow = DEFAULT_WINDOW,
) -> str:
    """
    Inverse of encrypt_caesar.

    Ciphertext is uppercased but not bounds-checked; characters outside the
    window are wrapped back into it.
    """
    ciphertext = normalize_case(ciphertext)

    shift = key % window.range
    return "".join(
        chr((ord(char) - window.lower_code - shift + window.range) % window.range + window.lower_code)
        for char in ciphertext
    )


def encrypt_bellaso(
    plaintext: str,
    key: str,
    window: AlphabetWindow = DEFAULT_WINDOW,
) -> str:
    """
    Offset each plaintext character by the code of the matching key character.

    The key is repeated to the plaintext length. Sums above the window are
    reduced modulo the window range.

    Raises:
        OutOfBoundsError: If the uppercased plaintext leaves the window
        EmptyKeyError: If key is empty
    """
    plaintext = normalize_case(plaintext)
    require_in_bounds(plaintext, window)
    key_stream = repeat_to_length(key, len(plaintext))

    return "".join(
        window.wrap(ord(plain_char) + ord(key_char))
        for plain_char, key_char in zip(plaintext, key_stream)
    )


def decrypt_bellaso(
    ciphertext: str,
    key: str,
    window: AlphabetWindow = DEFAULT_WINDOW,
) -> str:
    """
    Inverse of encrypt_bellaso.

    Raises:
        OutOfBoundsError: If the uppercased ciphertext leaves the window
        EmptyKeyError: If key is empty
    """
    ciphertext = normalize_case(ciphertext)
    require_in_bounds(ciphertext, window)
    key_stream = repeat_to_length(key, len(ciphertext))

    return "".join(
        window.wrap(ord(cipher_char) - ord(key_char))
        for cipher_char, key_char in zip(ciphertext, key_stream)
    )
