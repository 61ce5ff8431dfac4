import logging

from fastapi import APIRouter, HTTPException, status

from cryptomanager.dependencies import RegistryDep, SettingsDep
from cryptomanager.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        500: {"model": ErrorResponse, "description": "Decryption failed"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext using a specified cipher type and key.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> DecryptResponse:
    """
    Decrypt ciphertext with a known key.

    Bellaso ciphertext must lie within the alphabet window. Caesar
    ciphertext is not checked; stray characters are wrapped into the window.
    """
    if len(request.ciphertext) > settings.max_text_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Ciphertext exceeds maximum length of {settings.max_text_length}",
        )

    engine = registry.get_engine(request.cipher_type)

    if engine is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Cipher type '{request.cipher_type.value}' is not supported",
        )

    try:
        result = engine.decrypt_with_key(request.ciphertext, request.key)

        logger.info(
            "Decrypted %d characters with %s",
            len(request.ciphertext),
            request.cipher_type.value,
        )
        return DecryptResponse(
            plaintext=result.plaintext,
            cipher_type=request.cipher_type,
            key_used=result.key,
            explanation=result.explanation,
        )

    except ValueError as e:
        logger.info("Rejected %s decryption: %s", request.cipher_type.value, e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.exception("%s decryption failed", request.cipher_type.value)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Decryption failed: {str(e)}",
        )
