from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from cryptomanager.models.schemas import CipherFamily, CipherType

KeyType = int | str | dict[str, Any]


@dataclass
class DecryptionResult:
    """Result of a decryption operation."""

    plaintext: str
    key: KeyType
    explanation: str


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    Each cipher implementation must provide:
    - encrypt(): Encrypt plaintext
    - decrypt_with_key(): Decrypt with a known key
    - generate_random_key(): Produce a usable (not secure) key
    - validate_key(): Check a key before use
    - explain(): Generate human-readable explanation
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str

    @abstractmethod
    def encrypt(self, plaintext: str, key: KeyType) -> str:
        """
        Encrypt plaintext with the given key.

        Args:
            plaintext: The plaintext to encrypt
            key: The encryption key

        Returns:
            Ciphertext

        Raises:
            InvalidArgumentError: If the plaintext or key cannot be used
        """
        pass

    @abstractmethod
    def decrypt_with_key(self, ciphertext: str, key: KeyType) -> DecryptionResult:
        """
        Decrypt with a known key.

        Args:
            ciphertext: The ciphertext to decrypt
            key: The decryption key

        Returns:
            DecryptionResult with plaintext and metadata
        """
        pass

    @abstractmethod
    def generate_random_key(self) -> KeyType:
        """
        Generate a random valid key for this cipher.

        Uses the non-cryptographic ``random`` module.

        Returns:
            A randomly generated key
        """
        pass

    @abstractmethod
    def validate_key(self, key: KeyType) -> bool:
        """
        Validate that a key is valid for this cipher.

        Args:
            key: The key to validate

        Returns:
            True if key is valid
        """
        pass

    @abstractmethod
    def explain(self, ciphertext: str, plaintext: str, key: KeyType) -> str:
        """
        Generate human-readable explanation of the transformation.

        Args:
            ciphertext: The ciphertext
            plaintext: The plaintext
            key: The key used

        Returns:
            Explanation string
        """
        pass
