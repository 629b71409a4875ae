"""AI description enhancer endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from showroom.api.errors import to_http_exception
from showroom.api.schemas import (
    EnhanceDescriptionRequest,
    EnhanceDescriptionResponse,
    ErrorResponse,
)
from showroom.domain.exceptions import TextGenerationError
from showroom.infrastructure.text_generator import (
    DescriptionGenerator,
    get_description_generator,
)

router = APIRouter(prefix="/api", tags=["Descriptions"])


@router.post(
    "/enhance-description",
    response_model=EnhanceDescriptionResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Enhance product description",
    description="Rewrite rough notes as a two-sentence showroom description using Gemini.",
)
async def enhance_description(
    request: EnhanceDescriptionRequest,
    generator: Annotated[DescriptionGenerator, Depends(get_description_generator)],
) -> EnhanceDescriptionResponse:
    """Generate a polished product description."""
    try:
        text = await generator.enhance(
            name=request.name,
            category=request.category,
            current_text=request.current_text,
        )
    except TextGenerationError as e:
        raise to_http_exception(e) from e
    return EnhanceDescriptionResponse(text=text)
