import logging

from fastapi import APIRouter, HTTPException, status

from cryptomanager.dependencies import RegistryDep, SettingsDep
from cryptomanager.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext with the Caesar or Bellaso cipher. A random key is generated when none is given.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a specified cipher type.

    Plaintext is uppercased and must stay within the alphabet window.
    """
    if len(request.plaintext) > settings.max_text_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Plaintext exceeds maximum length of {settings.max_text_length}",
        )

    engine = registry.get_engine(request.cipher_type)

    if engine is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Cipher type '{request.cipher_type.value}' is not supported",
        )

    try:
        key = request.key
        if key is None:
            key = engine.generate_random_key()
            logger.debug("Generated random %s key", request.cipher_type.value)

        ciphertext = engine.encrypt(request.plaintext, key)

        logger.info(
            "Encrypted %d characters with %s",
            len(request.plaintext),
            request.cipher_type.value,
        )
        return EncryptResponse(
            ciphertext=ciphertext,
            cipher_type=request.cipher_type,
            key_used=key,
        )

    except ValueError as e:
        logger.info("Rejected %s encryption: %s", request.cipher_type.value, e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.exception("%s encryption failed", request.cipher_type.value)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Encryption failed: {str(e)}",
        )
