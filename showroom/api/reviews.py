"""Review link API endpoints.

- POST /api/products/{id}/generate-token - issue a single-use review token
- GET /api/products/{id}/tokens/{token} - check whether a review link is live
- POST /api/products/{id}/reviews - submit a review with a token
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from showroom.api.errors import to_http_exception
from showroom.api.schemas import (
    ErrorResponse,
    ReviewCreateRequest,
    SuccessResponse,
    TokenResponse,
)
from showroom.application.review_token_service import (
    ReviewTokenService,
    get_review_token_service,
)
from showroom.domain.exceptions import DomainError

router = APIRouter(prefix="/api/products", tags=["Reviews"])


@router.post(
    "/{product_id}/generate-token",
    response_model=TokenResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Issue review token",
    description="Generate a single-use token that authorizes one review of this product.",
)
async def generate_token(
    product_id: int,
    service: Annotated[ReviewTokenService, Depends(get_review_token_service)],
) -> TokenResponse:
    """Issue a review token for a product."""
    try:
        token = await service.issue_token(product_id)
    except DomainError as e:
        raise to_http_exception(e) from e
    return TokenResponse(token=token)


@router.get(
    "/{product_id}/tokens/{token}",
    summary="Check review token",
)
async def check_token(
    product_id: int,
    token: str,
    service: Annotated[ReviewTokenService, Depends(get_review_token_service)],
) -> dict[str, bool]:
    """Report whether a review link can still be used. Nothing is consumed."""
    try:
        valid = await service.validate_token(product_id, token)
    except DomainError as e:
        raise to_http_exception(e) from e
    return {"success": True, "valid": valid}


@router.post(
    "/{product_id}/reviews",
    response_model=SuccessResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Submit review",
    description="Record a review and consume its token. Each token works once.",
)
async def submit_review(
    product_id: int,
    request: ReviewCreateRequest,
    service: Annotated[ReviewTokenService, Depends(get_review_token_service)],
) -> SuccessResponse:
    """Submit a review through a review link."""
    try:
        await service.redeem_token(
            product_id=product_id,
            token=request.token,
            user=request.user,
            rating=request.rating,
            text=request.text,
            images=request.images,
        )
    except DomainError as e:
        raise to_http_exception(e) from e
    return SuccessResponse()
