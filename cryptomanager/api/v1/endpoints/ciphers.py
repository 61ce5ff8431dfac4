from fastapi import APIRouter

from cryptomanager.dependencies import RegistryDep
from cryptomanager.models.schemas import AlphabetInfo, CiphersResponse, EngineInfo
from cryptomanager.services.codec import DEFAULT_WINDOW

router = APIRouter()


@router.get(
    "",
    response_model=CiphersResponse,
    summary="List supported ciphers",
    description="Describe the alphabet window and every registered cipher engine.",
)
async def list_ciphers(registry: RegistryDep) -> CiphersResponse:
    alphabet = AlphabetInfo(
        lower=DEFAULT_WINDOW.lower,
        upper=DEFAULT_WINDOW.upper,
        lower_code=DEFAULT_WINDOW.lower_code,
        upper_code=DEFAULT_WINDOW.upper_code,
        range=DEFAULT_WINDOW.range,
        characters=DEFAULT_WINDOW.characters,
    )

    engines = [
        EngineInfo(
            name=engine.name,
            cipher_type=engine.cipher_type,
            cipher_family=engine.cipher_family,
            description=engine.description,
        )
        for engine in registry.get_all_engines()
    ]

    return CiphersResponse(alphabet=alphabet, engines=engines)
