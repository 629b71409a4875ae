"""Domain entities for the showroom catalog.

Product is the aggregate root. It owns its reviews and the set of
review tokens that are currently live for it.
"""

import secrets
import threading
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from showroom.domain.state_machines import (
    ReviewTokenState,
    token_state,
    validate_token_transition,
)

# Bytes of randomness per review token (hex-encoded to twice this length).
TOKEN_BYTES = 16

# Catalog fields an update may replace. Identity, reviews and tokens are
# managed by their own operations.
CATALOG_FIELDS = (
    "name",
    "category",
    "price",
    "stock",
    "description",
    "origin",
    "finish",
    "images",
)


def generate_review_token() -> str:
    """Generate an unguessable single-use review token."""
    return secrets.token_hex(TOKEN_BYTES)


def token_ref(token: str) -> str:
    """Short, log-safe prefix of a token."""
    return f"{token[:6]}..." if token else ""


_id_lock = threading.Lock()
_last_product_id = 0


def next_product_id() -> int:
    """Allocate a numeric product id from a creation-time counter.

    Ids are epoch milliseconds, bumped by one when two products are
    created within the same millisecond so they never repeat in-process.
    """
    global _last_product_id
    with _id_lock:
        candidate = int(time.time() * 1000)
        if candidate <= _last_product_id:
            candidate = _last_product_id + 1
        _last_product_id = candidate
        return candidate


# ============================================================================
# Review Entity
# ============================================================================


@dataclass
class Review:
    """A customer review attached to a product.

    Attributes:
        user: Display name of the reviewer.
        rating: Integer star rating.
        text: Review body.
        images: Ordered image references.
        date: Server-assigned creation timestamp (UTC).
    """

    user: str
    rating: int
    text: str
    images: list[str] = field(default_factory=list)
    date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        return {
            "user": self.user,
            "rating": self.rating,
            "text": self.text,
            "images": list(self.images),
            "date": self.date,
        }


# ============================================================================
# Product Aggregate Root
# ============================================================================


@dataclass
class Product:
    """Product aggregate root.

    Attributes:
        id: Numeric product identifier (not a storage row key).
        name: Product name.
        category: Category slug, e.g. "marble".
        price: Price per sq.ft.
        stock: Stock status text.
        description: Marketing description.
        origin: Quarry or source region.
        finish: Surface finish.
        images: Ordered image references.
        review_tokens: Live single-use review tokens for this product.
        reviews: Reviews in submission order.
    """

    id: int
    name: str
    category: str | None = None
    price: float | None = None
    stock: str | None = None
    description: str | None = None
    origin: str | None = None
    finish: str | None = None
    images: list[str] = field(default_factory=list)
    review_tokens: set[str] = field(default_factory=set)
    reviews: list[Review] = field(default_factory=list)

    @classmethod
    def create(cls, fields: dict[str, Any], product_id: int | None = None) -> "Product":
        """Create a new product with empty reviews and tokens.

        Args:
            fields: Catalog field values. Unknown keys are ignored.
            product_id: Explicit id (seeding); allocated when omitted.

        Returns:
            New Product instance.
        """
        values = {k: v for k, v in fields.items() if k in CATALOG_FIELDS}
        if values.get("images") is None:
            values["images"] = []
        return cls(
            id=product_id if product_id is not None else next_product_id(),
            name=fields.get("name") or "",
            **{k: v for k, v in values.items() if k != "name"},
        )

    def apply_update(self, fields: dict[str, Any]) -> None:
        """Replace the given catalog fields in place."""
        for key, value in fields.items():
            if key not in CATALOG_FIELDS:
                continue
            if key == "images" and value is None:
                value = []
            setattr(self, key, value)

    def token_state(self, token: str) -> ReviewTokenState:
        """Get the state of a token with respect to this product."""
        return token_state(token, self.review_tokens)

    def issue_token(self, token: str) -> None:
        """Add a freshly generated token to the live set."""
        self.review_tokens.add(token)

    def redeem_token(self, token: str, review: Review) -> None:
        """Consume a token and record its review as one step.

        Raises:
            InvalidStateTransitionError: If the token is not live here.
        """
        validate_token_transition(
            token_ref(token),
            self.token_state(token),
            ReviewTokenState.CONSUMED,
        )
        self.review_tokens.discard(token)
        self.reviews.append(review)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a public dictionary (tokens are not exposed)."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "price": self.price,
            "stock": self.stock,
            "description": self.description,
            "origin": self.origin,
            "finish": self.finish,
            "images": list(self.images),
            "reviews": [r.to_dict() for r in self.reviews],
        }
