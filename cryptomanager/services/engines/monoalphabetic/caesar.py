import random
from typing import Any

from cryptomanager.core.exceptions import InvalidArgumentError
from cryptomanager.models.schemas import CipherFamily, CipherType
from cryptomanager.services.codec import DEFAULT_WINDOW, decrypt_caesar, encrypt_caesar
from cryptomanager.services.engines.base import CipherEngine, DecryptionResult
from cryptomanager.services.engines.registry import EngineRegistry


@EngineRegistry.register
class CaesarEngine(CipherEngine):
    """
    Caesar cipher engine.

    Shifts every character by the same offset inside the alphabet window
    (space through underscore, 64 characters). Any integer is a usable key;
    keys that differ by a multiple of 64 produce the same ciphertext.
    """

    name = "Caesar Cipher"
    cipher_type = CipherType.CAESAR
    cipher_family = CipherFamily.MONOALPHABETIC
    description = (
        "A substitution cipher where each character is shifted by a fixed amount "
        "within the printable range from space to underscore."
    )

    window = DEFAULT_WINDOW

    def encrypt(self, plaintext: str, key: int | str | dict[str, Any]) -> str:
        """Encrypt plaintext with the given shift."""
        return encrypt_caesar(plaintext, self._parse_key(key), self.window)

    def decrypt_with_key(
        self,
        ciphertext: str,
        key: int | str | dict[str, Any],
    ) -> DecryptionResult:
        """Decrypt with a known shift value."""
        shift = self._parse_key(key)
        plaintext = decrypt_caesar(ciphertext, shift, self.window)

        return DecryptionResult(
            plaintext=plaintext,
            key=shift,
            explanation=self.explain(ciphertext, plaintext, shift),
        )

    def generate_random_key(self) -> int:
        """Generate a random shift that changes every character."""
        return random.randint(1, self.window.range - 1)

    def validate_key(self, key: int | str | dict[str, Any]) -> bool:
        """Any integer, or anything that parses to one, is a valid shift."""
        try:
            self._parse_key(key)
            return True
        except InvalidArgumentError:
            return False

    def explain(
        self,
        ciphertext: str,
        plaintext: str,
        key: int | str | dict[str, Any],
    ) -> str:
        """Generate human-readable explanation."""
        shift = self._parse_key(key)
        effective = shift % self.window.range

        explanation = (
            f"Caesar cipher with shift of {shift} "
            f"(effective shift {effective} over {self.window.range} characters). "
            f"Each character was shifted back {effective} positions, wrapping "
            f"from {self.window.lower!r} around to {self.window.upper!r}."
        )
        if ciphertext and plaintext:
            explanation += (
                f" For example, the first ciphertext character {ciphertext[0]!r} "
                f"becomes {plaintext[0]!r}."
            )
        return explanation

    def _parse_key(self, key: int | str | dict[str, Any]) -> int:
        """Parse key to integer shift value."""
        if isinstance(key, dict):
            key = key.get("shift", key.get("key"))
        if isinstance(key, bool) or key is None:
            raise InvalidArgumentError(f"Invalid Caesar key: {key!r}", {"key": key})
        if isinstance(key, float) and not key.is_integer():
            raise InvalidArgumentError(
                f"Invalid Caesar key: {key!r} is not a whole number",
                {"key": key},
            )
        try:
            return int(key)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(
                f"Invalid Caesar key: {key!r} is not an integer",
                {"key": key},
            ) from e
