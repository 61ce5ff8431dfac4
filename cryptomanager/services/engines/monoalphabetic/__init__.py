"""Monoalphabetic cipher engines."""

from cryptomanager.services.engines.monoalphabetic.caesar import CaesarEngine

__all__ = [
    "CaesarEngine",
]
