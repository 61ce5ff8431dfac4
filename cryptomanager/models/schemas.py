from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    MONOALPHABETIC = "monoalphabetic"
    POLYALPHABETIC = "polyalphabetic"


class CipherType(str, Enum):
    """Specific cipher types."""

    CAESAR = "caesar"
    BELLASO = "bellaso"


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    plaintext: str
    cipher_type: CipherType
    key: int | str | dict[str, Any] | None = None


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    key: int | str | dict[str, Any]


class BoundsRequest(BaseModel):
    """Request schema for /bounds endpoint."""

    text: str


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    key_used: int | str | dict[str, Any]


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    cipher_type: CipherType
    key_used: int | str | dict[str, Any]
    explanation: str


class BoundsResponse(BaseModel):
    """Response schema for /bounds endpoint."""

    text: str
    normalized: str
    in_bounds: bool
    invalid_positions: list[int] = Field(default_factory=list)


class AlphabetInfo(BaseModel):
    """Description of the alphabet window."""

    lower: str
    upper: str
    lower_code: int
    upper_code: int
    range: int
    characters: str


class EngineInfo(BaseModel):
    """Metadata of a registered cipher engine."""

    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str


class CiphersResponse(BaseModel):
    """Response schema for /ciphers endpoint."""

    alphabet: AlphabetInfo
    engines: list[EngineInfo]


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Error body returned by HTTPException."""

    detail: str
