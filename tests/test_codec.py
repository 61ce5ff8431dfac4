"""Tests for the Caesar and Bellaso codec functions."""

import pytest

from cryptomanager.core.exceptions import (
    EmptyKeyError,
    InvalidArgumentError,
    OutOfBoundsError,
)
from cryptomanager.services.codec import (
    DEFAULT_WINDOW,
    LOWER_BOUND,
    RANGE,
    UPPER_BOUND,
    AlphabetWindow,
    decrypt_bellaso,
    decrypt_caesar,
    encrypt_bellaso,
    encrypt_caesar,
    find_out_of_bounds,
    is_in_bounds,
    normalize_case,
    repeat_to_length,
)


@pytest.fixture
def sample_texts():
    return [
        "",
        "HELLO",
        "hello world",
        "The quick brown fox: 1, 2, 3!",
        " ",
        "___",
        DEFAULT_WINDOW.characters,
    ]


class TestAlphabetWindow:
    """Test the alphabet window constants."""

    def test_default_bounds(self):
        assert LOWER_BOUND == 0x20
        assert UPPER_BOUND == 0x5F
        assert RANGE == 64

    def test_characters_cover_window(self):
        chars = DEFAULT_WINDOW.characters
        assert len(chars) == RANGE
        assert chars[0] == " "
        assert chars[-1] == "_"

    def test_window_is_immutable(self):
        with pytest.raises(AttributeError):
            DEFAULT_WINDOW.lower = "A"

    def test_invalid_window(self):
        with pytest.raises(ValueError):
            AlphabetWindow(lower="Z", upper="A")
        with pytest.raises(ValueError):
            AlphabetWindow(lower="AB", upper="Z")

    def test_wrap(self):
        assert DEFAULT_WINDOW.wrap(ord("_") + 1) == " "
        assert DEFAULT_WINDOW.wrap(ord(" ") - 1) == "_"
        assert DEFAULT_WINDOW.wrap(ord("A") + 10 * RANGE) == "A"


class TestBounds:
    """Test bounds validation."""

    def test_in_bounds(self):
        assert is_in_bounds("HELLO WORLD!")
        assert is_in_bounds(" _")
        assert is_in_bounds("")

    def test_out_of_bounds(self):
        assert not is_in_bounds("hello")  # lowercase is above '_'
        assert not is_in_bounds("HELLO\x01")
        assert not is_in_bounds("{")
        assert not is_in_bounds("\x1f")
        assert not is_in_bounds("`")

    def test_find_out_of_bounds(self):
        assert find_out_of_bounds("AB\x01C~") == [2, 4]
        assert find_out_of_bounds("ABC") == []

    def test_custom_window(self):
        digits = AlphabetWindow(lower="0", upper="9")
        assert is_in_bounds("0123456789", digits)
        assert not is_in_bounds("12A", digits)

    def test_normalize_case(self):
        assert normalize_case("hello, World") == "HELLO, WORLD"

    def test_normalize_case_keeps_length(self):
        # 'ß'.upper() is 'SS'; it is kept so the length does not change
        assert normalize_case("straße") == "STRAßE"
        assert len(normalize_case("straße")) == len("straße")


class TestRepeatToLength:
    """Test key stream expansion."""

    def test_wraps_key(self):
        assert repeat_to_length("AB", 5) == "ABABA"

    def test_truncates_key(self):
        assert repeat_to_length("LONGKEY", 3) == "LON"

    def test_zero_length(self):
        assert repeat_to_length("KEY", 0) == ""

    @pytest.mark.parametrize("key", ["A", "AB", "KEY", "LEMON_ 42"])
    def test_idempotent_at_own_length(self, key):
        assert repeat_to_length(key, len(key)) == key

    def test_empty_key_fails(self):
        with pytest.raises(EmptyKeyError):
            repeat_to_length("", 5)

    def test_empty_key_fails_for_zero_length(self):
        with pytest.raises(InvalidArgumentError):
            repeat_to_length("", 0)

    def test_negative_length_fails(self):
        with pytest.raises(InvalidArgumentError):
            repeat_to_length("KEY", -1)


class TestCaesar:
    """Test Caesar encryption and decryption."""

    def test_golden_vector(self):
        assert encrypt_caesar("HELLO", 3) == "KHOOR"
        assert decrypt_caesar("KHOOR", 3) == "HELLO"

    def test_wraps_past_upper_bound(self):
        # '_' is the last character of the window, so a shift of 1 wraps to ' '
        assert encrypt_caesar("_", 1) == " "
        assert decrypt_caesar(" ", 1) == "_"

    def test_lowercase_is_normalized(self):
        assert encrypt_caesar("hello", 3) == "KHOOR"

    def test_negative_key(self):
        assert encrypt_caesar("KHOOR", -3) == "HELLO"
        assert encrypt_caesar(" ", -1) == "_"

    def test_large_key_is_reduced(self):
        assert encrypt_caesar("HELLO", 3 + 5 * RANGE) == "KHOOR"
        assert encrypt_caesar("HELLO", 3 - 7 * RANGE) == "KHOOR"

    def test_zero_key_is_identity(self):
        assert encrypt_caesar("HELLO WORLD", 0) == "HELLO WORLD"

    @pytest.mark.parametrize("key", [0, 1, 3, 31, 63, 64, 65, 1000, -1, -64, -1000])
    def test_roundtrip(self, sample_texts, key):
        for text in sample_texts:
            ciphertext = encrypt_caesar(text, key)
            assert len(ciphertext) == len(text)
            assert is_in_bounds(ciphertext)
            assert decrypt_caesar(ciphertext, key) == normalize_case(text)

    def test_encrypt_rejects_out_of_bounds(self):
        with pytest.raises(InvalidArgumentError):
            encrypt_caesar("hello\x01", 3)

    def test_encrypt_rejection_details(self):
        with pytest.raises(OutOfBoundsError) as exc_info:
            encrypt_caesar("AB{C", 1)

        assert exc_info.value.details["position"] == 2
        assert exc_info.value.details["character"] == "{"

    def test_rejection_is_a_value_error(self):
        with pytest.raises(ValueError):
            encrypt_caesar("~", 1)

    def test_decrypt_does_not_check_bounds(self):
        # Characters outside the window are wrapped instead of rejected
        result = decrypt_caesar("A\x01{", 3)

        assert len(result) == 3
        assert result[0] == ">"
        assert is_in_bounds(result)

    def test_decrypt_length_preserved(self):
        assert len(decrypt_caesar("\x00\x7f~", 5)) == 3

    def test_custom_window(self):
        digits = AlphabetWindow(lower="0", upper="9")
        assert encrypt_caesar("789", 3, digits) == "012"
        assert decrypt_caesar("012", 3, digits) == "789"


class TestBellaso:
    """Test Bellaso encryption and decryption."""

    def test_golden_vector(self):
        assert encrypt_bellaso("HELLO", "KEY") == "SJ%WT"
        assert decrypt_bellaso("SJ%WT", "KEY") == "HELLO"

    def test_single_step_matches_repeated_subtraction(self):
        plaintext = "ATTACK AT DAWN!"
        key = "LEMON"
        stream = repeat_to_length(key, len(plaintext))

        expected = []
        for plain_char, key_char in zip(plaintext, stream):
            shifted = ord(plain_char) + ord(key_char)
            while shifted > UPPER_BOUND:
                shifted -= RANGE
            expected.append(chr(shifted))

        assert encrypt_bellaso(plaintext, key) == "".join(expected)

    def test_decrypt_matches_repeated_addition(self):
        ciphertext = "SJ%WT"
        stream = repeat_to_length("KEY", len(ciphertext))

        expected = []
        for cipher_char, key_char in zip(ciphertext, stream):
            shifted = ord(cipher_char) - ord(key_char)
            while shifted < LOWER_BOUND:
                shifted += RANGE
            expected.append(chr(shifted))

        assert decrypt_bellaso(ciphertext, "KEY") == "".join(expected)

    @pytest.mark.parametrize("key", ["A", "KEY", "LEMON", " ", "_", "CMSC203", "SECRET KEY_"])
    def test_roundtrip(self, sample_texts, key):
        for text in sample_texts:
            ciphertext = encrypt_bellaso(text, key)
            assert len(ciphertext) == len(text)
            assert is_in_bounds(ciphertext)
            assert decrypt_bellaso(ciphertext, key) == normalize_case(text)

    def test_key_used_as_given(self):
        # 'a' and 'A' differ by 32, which is not a multiple of the range
        assert encrypt_bellaso("HELLO", "a") != encrypt_bellaso("HELLO", "A")
        assert decrypt_bellaso(encrypt_bellaso("HELLO", "key"), "key") == "HELLO"

    def test_key_longer_than_text(self):
        ciphertext = encrypt_bellaso("HI", "LONGER KEY")
        assert len(ciphertext) == 2
        assert decrypt_bellaso(ciphertext, "LONGER KEY") == "HI"

    def test_encrypt_empty_key_fails(self):
        with pytest.raises(InvalidArgumentError):
            encrypt_bellaso("HELLO", "")

    def test_decrypt_empty_key_fails(self):
        with pytest.raises(EmptyKeyError):
            decrypt_bellaso("HELLO", "")

    def test_encrypt_rejects_out_of_bounds(self):
        with pytest.raises(OutOfBoundsError):
            encrypt_bellaso("HELLO\x01", "KEY")

    def test_decrypt_rejects_out_of_bounds(self):
        with pytest.raises(OutOfBoundsError):
            decrypt_bellaso("SJ%WT\x7f", "KEY")

    def test_decrypt_uppercases_ciphertext(self):
        assert decrypt_bellaso("sj%wt", "KEY") == "HELLO"

    def test_empty_text(self):
        assert encrypt_bellaso("", "KEY") == ""
        assert decrypt_bellaso("", "KEY") == ""
