"""Polyalphabetic cipher engines."""

from cryptomanager.services.engines.polyalphabetic.bellaso import BellasoEngine

__all__ = [
    "BellasoEngine",
]
