"""Admin login endpoint."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from showroom.api.schemas import LoginRequest, LoginResponse
from showroom.application.auth_service import check_credentials
from showroom.infrastructure.config import settings

router = APIRouter(prefix="/api", tags=["Auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": LoginResponse}},
    summary="Admin login",
)
async def login(request: LoginRequest) -> LoginResponse | JSONResponse:
    """Check the shared admin credentials."""
    if check_credentials(request.username, request.password):
        return LoginResponse(success=True, token=settings.admin_token)
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"success": False},
    )
