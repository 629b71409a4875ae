"""Application layer module.

Contains application services (use cases) that orchestrate
domain logic and infrastructure.
"""

from showroom.application.auth_service import check_credentials
from showroom.application.catalog_service import CatalogService, get_catalog_service
from showroom.application.review_token_service import (
    ReviewTokenService,
    get_review_token_service,
)

__all__ = [
    "CatalogService",
    "get_catalog_service",
    "ReviewTokenService",
    "get_review_token_service",
    "check_credentials",
]
