from typing import Type

from cryptomanager.core.exceptions import EngineNotFoundError
from cryptomanager.models.schemas import CipherFamily, CipherType
from cryptomanager.services.engines.base import CipherEngine


class EngineRegistry:
    """
    Registry for cipher engines.

    Engine classes register themselves at import time; instances are
    created lazily and shared, since engines keep no per-call state.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}
    _instances: dict[CipherType, CipherEngine] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class CaesarEngine(CipherEngine):
                ...

        Args:
            engine_class: The engine class to register

        Returns:
            The engine class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    def get_engine(self, cipher_type: CipherType) -> CipherEngine | None:
        """
        Get an engine instance for the specified cipher type.

        Args:
            cipher_type: The type of cipher

        Returns:
            Engine instance or None if not found
        """
        if cipher_type not in self._engines:
            return None

        if cipher_type not in self._instances:
            self._instances[cipher_type] = self._engines[cipher_type]()

        return self._instances[cipher_type]

    def require_engine(self, cipher_type: CipherType) -> CipherEngine:
        """
        Get an engine instance, failing loudly when none is registered.

        Raises:
            EngineNotFoundError: If cipher_type has no registered engine
        """
        engine = self.get_engine(cipher_type)
        if engine is None:
            raise EngineNotFoundError(str(getattr(cipher_type, "value", cipher_type)))
        return engine

    def get_engines_by_family(self, family: CipherFamily) -> list[CipherEngine]:
        """Get all engines belonging to a cipher family."""
        return [
            self.require_engine(cipher_type)
            for cipher_type, engine_class in self._engines.items()
            if engine_class.cipher_family == family
        ]

    def get_all_engines(self) -> list[CipherEngine]:
        """Get all registered engines."""
        return [self.require_engine(cipher_type) for cipher_type in self._engines]

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """List all registered cipher types."""
        return list(cls._engines.keys())

    @classmethod
    def is_registered(cls, cipher_type: CipherType) -> bool:
        """Check if a cipher type is registered."""
        return cipher_type in cls._engines


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from cryptomanager.services.engines.monoalphabetic import caesar  # noqa: F401
    from cryptomanager.services.engines.polyalphabetic import bellaso  # noqa: F401


# Load engines when module is imported
_load_engines()
