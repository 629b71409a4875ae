"""API layer module.

Contains FastAPI routers and request/response schemas.
"""

from showroom.api.auth import router as auth_router
from showroom.api.descriptions import router as descriptions_router
from showroom.api.health import router as health_router
from showroom.api.products import router as products_router
from showroom.api.reviews import router as reviews_router

__all__ = [
    "auth_router",
    "descriptions_router",
    "health_router",
    "products_router",
    "reviews_router",
]
