"""Review token application service.

Issues single-use review links and redeems them:
- issue_token: generate a token and store it on the product
- validate_token: read-only check that a token is live for a product
- redeem_token: consume the token and record the review in one store call

Tokens are scoped to one product. A token that was never issued, was
already used, or belongs to another product is rejected the same way.
"""

from typing import Any

import structlog

from showroom.application.store_calls import call_store
from showroom.domain.entities import Product, Review, generate_review_token, token_ref
from showroom.domain.exceptions import (
    InvalidOrExpiredTokenError,
    ProductNotFoundError,
    ValidationFailedError,
)
from showroom.infrastructure.product_store import ProductStore, get_product_store

logger = structlog.get_logger()


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class ReviewTokenService:
    """Service for review token issuance and redemption.

    Example usage:
        service = ReviewTokenService(store)
        token = await service.issue_token(1)
        product = await service.redeem_token(
            product_id=1, token=token, user="A", rating=5, text="Great",
        )
    """

    def __init__(self, store: ProductStore) -> None:
        """Initialize service.

        Args:
            store: Product store holding tokens and reviews.
        """
        self.store = store

    async def issue_token(self, product_id: int) -> str:
        """Generate a review token for a product.

        Args:
            product_id: Numeric product id.

        Returns:
            The new token.

        Raises:
            ProductNotFoundError: If the product does not exist.
            StoreUnavailableError: On store failure.
        """
        token = generate_review_token()
        added = await call_store(
            "append_token",
            self.store.append_token(product_id, token),
        )
        if not added:
            logger.warning("Token requested for unknown product", product_id=product_id)
            raise ProductNotFoundError(product_id)

        logger.info(
            "Review token issued",
            product_id=product_id,
            token=token_ref(token),
        )
        return token

    async def validate_token(self, product_id: int, token: str | None) -> bool:
        """Check whether a token is currently live for a product."""
        if _is_missing(token):
            return False
        product = await call_store(
            "find_by_id_and_token",
            self.store.find_by_id_and_token(product_id, token),
        )
        return product is not None

    async def redeem_token(
        self,
        product_id: int,
        token: str | None,
        user: str | None,
        rating: int | None,
        text: str | None,
        images: list[str] | None = None,
    ) -> Product:
        """Submit a review using a single-use token.

        Args:
            product_id: Numeric product id.
            token: Token from the review link.
            user: Reviewer name.
            rating: Star rating.
            text: Review text.
            images: Optional image references.

        Returns:
            The product with the new review appended.

        Raises:
            ValidationFailedError: If the token or a review field is missing.
            InvalidOrExpiredTokenError: If the token is not live for the product.
            StoreUnavailableError: On store failure.
        """
        if _is_missing(token):
            logger.info("Review rejected: missing token", product_id=product_id)
            raise ValidationFailedError("Missing Token", fields=["token"])

        missing = [
            name
            for name, value in (("user", user), ("rating", rating), ("text", text))
            if _is_missing(value)
        ]
        if missing:
            logger.info(
                "Review rejected: missing fields",
                product_id=product_id,
                fields=missing,
            )
            raise ValidationFailedError(
                f"Missing required fields: {', '.join(missing)}",
                fields=missing,
            )

        review = Review(
            user=user,
            rating=int(rating),
            text=text,
            images=list(images or []),
        )
        product = await call_store(
            "append_review_and_remove_token",
            self.store.append_review_and_remove_token(product_id, token, review),
        )
        if product is None:
            logger.warning(
                "Invalid or expired review token",
                product_id=product_id,
                token=token_ref(token),
            )
            raise InvalidOrExpiredTokenError(product_id)

        logger.info(
            "Review saved",
            product_id=product_id,
            token=token_ref(token),
            review_count=len(product.reviews),
        )
        return product


def get_review_token_service() -> ReviewTokenService:
    """Get review token service bound to the current product store."""
    return ReviewTokenService(get_product_store())
