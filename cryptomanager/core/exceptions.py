from typing import Any


class CodecError(Exception):
    """Base exception for all cipher codec errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CodecError):
    """Raised when input validation fails."""

    pass


class InvalidArgumentError(ValidationError, ValueError):
    """Raised when a codec operation receives input it cannot transform."""

    pass


class OutOfBoundsError(InvalidArgumentError):
    """Raised when text contains a character outside the alphabet window."""

    def __init__(self, position: int, character: str, lower: str, upper: str):
        super().__init__(
            f"Input string contains invalid character {character!r} at position {position}; "
            f"allowed range is {lower!r} to {upper!r}",
            {
                "position": position,
                "character": character,
                "lower": lower,
                "upper": upper,
            },
        )


class EmptyKeyError(InvalidArgumentError):
    """Raised when a key string is empty."""

    def __init__(self) -> None:
        super().__init__("Key must not be empty")


class EngineNotFoundError(CodecError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )
