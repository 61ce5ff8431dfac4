from fastapi import APIRouter, HTTPException, status

from cryptomanager.dependencies import SettingsDep
from cryptomanager.models.schemas import BoundsRequest, BoundsResponse, ErrorResponse
from cryptomanager.services.codec import find_out_of_bounds, is_in_bounds, normalize_case

router = APIRouter()


@router.post(
    "",
    response_model=BoundsResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Check text against the alphabet window",
    description="Report whether text, once uppercased, can be encrypted, and which positions cannot.",
)
async def check_bounds(
    request: BoundsRequest,
    settings: SettingsDep,
) -> BoundsResponse:
    """Validate text without transforming it."""
    if len(request.text) > settings.max_text_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Text exceeds maximum length of {settings.max_text_length}",
        )

    normalized = normalize_case(request.text)

    return BoundsResponse(
        text=request.text,
        normalized=normalized,
        in_bounds=is_in_bounds(normalized),
        invalid_positions=find_out_of_bounds(normalized),
    )
