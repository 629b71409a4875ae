"""Domain layer - Entities, state machines, exceptions.

Example usage:
    from showroom.domain import Product, Review

    product = Product.create({"name": "Black Galaxy Granite"})
    product.issue_token("abc123")
    product.redeem_token("abc123", Review(user="A", rating=5, text="Great"))
"""

from showroom.domain.entities import (
    CATALOG_FIELDS,
    Product,
    Review,
    generate_review_token,
    next_product_id,
)
from showroom.domain.exceptions import (
    DomainError,
    DuplicateProductError,
    InvalidOrExpiredTokenError,
    InvalidStateTransitionError,
    ProductNotFoundError,
    StoreUnavailableError,
    TextGenerationError,
    ValidationFailedError,
)
from showroom.domain.state_machines import ReviewTokenState

__all__ = [
    # Entities
    "CATALOG_FIELDS",
    "Product",
    "Review",
    "generate_review_token",
    "next_product_id",
    # State machines
    "ReviewTokenState",
    # Exceptions
    "DomainError",
    "DuplicateProductError",
    "InvalidOrExpiredTokenError",
    "InvalidStateTransitionError",
    "ProductNotFoundError",
    "StoreUnavailableError",
    "TextGenerationError",
    "ValidationFailedError",
]
