import random
from typing import Any

from cryptomanager.core.exceptions import EmptyKeyError, InvalidArgumentError
from cryptomanager.models.schemas import CipherFamily, CipherType
from cryptomanager.services.codec import (
    DEFAULT_WINDOW,
    decrypt_bellaso,
    encrypt_bellaso,
)
from cryptomanager.services.engines.base import CipherEngine, DecryptionResult
from cryptomanager.services.engines.registry import EngineRegistry


@EngineRegistry.register
class BellasoEngine(CipherEngine):
    """
    Bellaso cipher engine.

    A polyalphabetic substitution cipher, the precursor of Vigenère. The key
    string is repeated to the length of the text and each character is
    offset by the character code of the key character at the same position.
    Key characters are used exactly as given.
    """

    name = "Bellaso Cipher"
    cipher_type = CipherType.BELLASO
    cipher_family = CipherFamily.POLYALPHABETIC
    description = (
        "A polyalphabetic cipher where each character is offset by the code of "
        "the matching character of a repeating key string."
    )

    window = DEFAULT_WINDOW

    def encrypt(self, plaintext: str, key: int | str | dict[str, Any]) -> str:
        """Encrypt using the key string."""
        return encrypt_bellaso(plaintext, self._parse_key(key), self.window)

    def decrypt_with_key(
        self,
        ciphertext: str,
        key: int | str | dict[str, Any],
    ) -> DecryptionResult:
        """Decrypt with a known key string."""
        key_str = self._parse_key(key)
        plaintext = decrypt_bellaso(ciphertext, key_str, self.window)

        return DecryptionResult(
            plaintext=plaintext,
            key=key_str,
            explanation=self.explain(ciphertext, plaintext, key_str),
        )

    def generate_random_key(self) -> str:
        """Generate a random key of 4 to 10 window characters."""
        length = random.randint(4, 10)
        return "".join(random.choice(self.window.characters) for _ in range(length))

    def validate_key(self, key: int | str | dict[str, Any]) -> bool:
        """Validate that key is a non-empty string."""
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
        key_str = self._parse_key(key)

        offsets = ", ".join(
            f"{char!r}={(ord(char) % self.window.range)}" for char in key_str[:10]
        )
        if len(key_str) > 10:
            offsets += ", ..."

        explanation = (
            f"Bellaso cipher with key {key_str!r} (length {len(key_str)}). "
            f"Effective offsets: {offsets}. "
            f"Each ciphertext character is shifted back by the code of the key "
            f"character at the same position, wrapping within "
            f"{self.window.lower!r} to {self.window.upper!r}."
        )
        if ciphertext and plaintext:
            explanation += (
                f" For example, {ciphertext[0]!r} with key character {key_str[0]!r} "
                f"becomes {plaintext[0]!r}."
            )
        return explanation

    def _parse_key(self, key: int | str | dict[str, Any]) -> str:
        """Parse key to a non-empty string."""
        if isinstance(key, dict):
            key = key.get("key", key.get("keyword", ""))
        if not isinstance(key, str):
            raise InvalidArgumentError(
                f"Invalid Bellaso key: expected a string, got {type(key).__name__}",
                {"key": key},
            )
        if not key:
            raise EmptyKeyError()
        return key
