"""API schemas for the showroom API.

Pydantic models for request/response validation and serialization.
Request models accept missing fields; presence is checked by the
services so that a missing field is reported as a validation failure
(400) rather than a schema error.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Human-readable error message")
    error_code: str = Field(..., description="Machine-readable error code")
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class SuccessResponse(BaseModel):
    """Plain acknowledgment."""

    success: bool = True


# ============================================================================
# Product Schemas
# ============================================================================


class ReviewSchema(BaseModel):
    """A product review."""

    user: str
    rating: int
    text: str
    images: list[str] = Field(default_factory=list)
    date: datetime


class ProductResponse(BaseModel):
    """Public product representation (review tokens are never exposed)."""

    id: int = Field(..., description="Numeric product id")
    name: str
    category: str | None = None
    price: float | None = None
    stock: str | None = Field(default=None, description="Stock status text")
    description: str | None = None
    origin: str | None = None
    finish: str | None = None
    images: list[str] = Field(default_factory=list)
    reviews: list[ReviewSchema] = Field(default_factory=list)


class ProductCreateRequest(BaseModel):
    """Request to add a product."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    category: str | None = None
    price: float | None = None
    stock: str | None = None
    description: str | None = None
    origin: str | None = None
    finish: str | None = None
    images: list[str] | None = None


class ProductUpdateRequest(ProductCreateRequest):
    """Full or partial replacement of catalog fields.

    Only fields present in the body are replaced.
    """


class DeleteResponse(BaseModel):
    """Deletion confirmation."""

    msg: str = "Deleted"


# ============================================================================
# Review Token Schemas
# ============================================================================


class TokenResponse(BaseModel):
    """Newly issued review token."""

    success: bool = True
    token: str = Field(..., description="Single-use review token")


class ReviewCreateRequest(BaseModel):
    """Review submission through a review link."""

    model_config = ConfigDict(extra="ignore")

    user: str | None = None
    rating: int | None = None
    text: str | None = None
    images: list[str] | None = None
    token: str | None = Field(default=None, description="Token from the review link")


# ============================================================================
# Login Schemas
# ============================================================================


class LoginRequest(BaseModel):
    """Admin login."""

    username: str | None = None
    password: str | None = None


class LoginResponse(BaseModel):
    """Admin login result."""

    success: bool
    token: str | None = None


# ============================================================================
# Description Enhancer Schemas
# ============================================================================


class EnhanceDescriptionRequest(BaseModel):
    """Rough notes to turn into a product description."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    category: str | None = None
    current_text: str | None = Field(default=None, alias="currentText")


class EnhanceDescriptionResponse(BaseModel):
    """Generated product description."""

    success: bool = True
    text: str
