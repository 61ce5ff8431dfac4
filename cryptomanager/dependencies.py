from typing import Annotated

from fastapi import Depends

from cryptomanager.core.config import Settings, get_settings
from cryptomanager.services.engines.registry import EngineRegistry


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_registry() -> EngineRegistry:
    """Get the engine registry."""
    return EngineRegistry()


RegistryDep = Annotated[EngineRegistry, Depends(get_registry)]
