"""Product store implementations.

The product store persists products together with their reviews and live
review tokens. Two implementations share one async interface:

- SqlProductStore: SQLAlchemy async ORM (PostgreSQL in production).
- InMemoryProductStore: dict-backed store for local development and tests.

Every method is a single unit of work. In particular
``append_review_and_remove_token`` consumes the token and records the
review together or not at all, so two concurrent redemptions of the same
token cannot both succeed.
"""

import copy
import threading
from collections.abc import Sequence
from typing import Any, Protocol

import structlog
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from showroom.domain.entities import CATALOG_FIELDS, Product, Review, token_ref
from showroom.domain.exceptions import DuplicateProductError
from showroom.infrastructure.config import settings
from showroom.infrastructure.database import get_session_factory
from showroom.infrastructure.models import ProductModel, ReviewModel, ReviewTokenModel

logger = structlog.get_logger()


class ProductStore(Protocol):
    """Persistence contract for products, reviews and review tokens."""

    async def list_products(self) -> list[Product]: ...

    async def find_by_numeric_id(self, product_id: int) -> Product | None: ...

    async def create_product(self, product: Product) -> Product: ...

    async def update_product(
        self, product_id: int, fields: dict[str, Any]
    ) -> Product | None: ...

    async def delete_product(self, product_id: int) -> bool: ...

    async def append_token(self, product_id: int, token: str) -> bool: ...

    async def find_by_id_and_token(
        self, product_id: int, token: str
    ) -> Product | None: ...

    async def append_review_and_remove_token(
        self, product_id: int, token: str, review: Review
    ) -> Product | None: ...

    async def ping(self) -> None: ...


# ============================================================================
# SQL Store
# ============================================================================


def _with_children(query):
    return query.options(
        selectinload(ProductModel.review_tokens),
        selectinload(ProductModel.reviews),
    )


def _column_value(key: str, value: Any) -> Any:
    if key == "images":
        return list(value or [])
    return value


class SqlProductStore:
    """Product store backed by SQLAlchemy async sessions.

    Each call opens its own session and runs in one transaction.

    Example usage:
        store = SqlProductStore(get_session_factory())
        token_added = await store.append_token(1, "abc123")
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize store with a session factory.

        Args:
            session_factory: Factory producing AsyncSession objects.
        """
        self._session_factory = session_factory

    async def _load(self, session: AsyncSession, product_id: int) -> ProductModel | None:
        query = _with_children(select(ProductModel).where(ProductModel.id == product_id))
        result = await session.execute(query.execution_options(populate_existing=True))
        return result.scalar_one_or_none()

    async def list_products(self) -> list[Product]:
        """List all products in creation order."""
        async with self._session_factory() as session:
            query = _with_children(select(ProductModel).order_by(ProductModel.pk))
            result = await session.execute(query)
            return [row.to_domain() for row in result.scalars().all()]

    async def find_by_numeric_id(self, product_id: int) -> Product | None:
        """Get product by its numeric id."""
        async with self._session_factory() as session:
            row = await self._load(session, product_id)
            return row.to_domain() if row else None

    async def create_product(self, product: Product) -> Product:
        """Insert a new product with its children.

        Raises:
            DuplicateProductError: If the numeric id is taken.
        """
        async with self._session_factory() as session:
            try:
                async with session.begin():
                    session.add(ProductModel.from_domain(product))
            except IntegrityError as e:
                raise DuplicateProductError(product.id) from e
            row = await self._load(session, product.id)
            assert row is not None
            return row.to_domain()

    async def update_product(
        self, product_id: int, fields: dict[str, Any]
    ) -> Product | None:
        """Replace catalog fields of a product.

        Args:
            product_id: Numeric product id.
            fields: Field values to replace. Non-catalog keys are ignored.

        Returns:
            Updated product, or None if it does not exist.
        """
        async with self._session_factory() as session:
            async with session.begin():
                row = await self._load(session, product_id)
                if row is None:
                    return None
                for key, value in fields.items():
                    if key in CATALOG_FIELDS:
                        setattr(row, key, _column_value(key, value))
                await session.flush()
                return row.to_domain()

    async def delete_product(self, product_id: int) -> bool:
        """Delete a product with its tokens and reviews."""
        async with self._session_factory() as session:
            async with session.begin():
                row = await self._load(session, product_id)
                if row is None:
                    return False
                await session.delete(row)
            return True

    async def append_token(self, product_id: int, token: str) -> bool:
        """Add a live token to a product.

        A missing product, including one deleted concurrently, fails the
        foreign key check and yields False.

        Returns:
            True if the product exists and now holds the token.
        """
        async with self._session_factory() as session:
            try:
                async with session.begin():
                    session.add(ReviewTokenModel(product_id=product_id, token=token))
            except IntegrityError:
                logger.debug("Token rejected, no such product", product_id=product_id)
                return False
            return True

    async def find_by_id_and_token(
        self, product_id: int, token: str
    ) -> Product | None:
        """Get a product only if it currently holds the token."""
        async with self._session_factory() as session:
            query = _with_children(
                select(ProductModel)
                .join(ReviewTokenModel, ReviewTokenModel.product_id == ProductModel.id)
                .where(
                    ProductModel.id == product_id,
                    ReviewTokenModel.token == token,
                )
            )
            result = await session.execute(query)
            row = result.scalars().first()
            return row.to_domain() if row else None

    async def append_review_and_remove_token(
        self, product_id: int, token: str, review: Review
    ) -> Product | None:
        """Consume a token and record its review in one transaction.

        The conditional DELETE is the gate: only the caller whose DELETE
        removes the token row goes on to insert the review. A concurrent
        caller deletes nothing and gets None.

        Returns:
            Updated product, or None if the token was not live for it.
        """
        async with self._session_factory() as session:
            async with session.begin():
                result = await session.execute(
                    delete(ReviewTokenModel)
                    .where(
                        ReviewTokenModel.product_id == product_id,
                        ReviewTokenModel.token == token,
                    )
                    .execution_options(synchronize_session=False)
                )
                if result.rowcount != 1:
                    logger.debug(
                        "Token not live, nothing consumed",
                        product_id=product_id,
                        token=token_ref(token),
                    )
                    return None

                session.add(
                    ReviewModel(
                        product_id=product_id,
                        user=review.user,
                        rating=review.rating,
                        text=review.text,
                        images=list(review.images),
                        date=review.date,
                    )
                )
                await session.flush()
                row = await self._load(session, product_id)
                return row.to_domain() if row else None

    async def ping(self) -> None:
        """Run a trivial query to check connectivity."""
        async with self._session_factory() as session:
            await session.execute(select(1))


# ============================================================================
# In-Memory Store
# ============================================================================


class InMemoryProductStore:
    """In-memory product store.

    Mutations run under a lock with no await inside the critical section,
    so check-and-mutate is atomic across threads and tasks alike.
    Returned products are copies.
    """

    def __init__(self, products: Sequence[Product] = ()) -> None:
        self._products: dict[int, Product] = {}
        self._lock = threading.Lock()
        for product in products:
            self._products[product.id] = copy.deepcopy(product)

    async def list_products(self) -> list[Product]:
        with self._lock:
            return [copy.deepcopy(p) for p in self._products.values()]

    async def find_by_numeric_id(self, product_id: int) -> Product | None:
        with self._lock:
            product = self._products.get(product_id)
            return copy.deepcopy(product) if product else None

    async def create_product(self, product: Product) -> Product:
        with self._lock:
            if product.id in self._products:
                raise DuplicateProductError(product.id)
            self._products[product.id] = copy.deepcopy(product)
            return copy.deepcopy(product)

    async def update_product(
        self, product_id: int, fields: dict[str, Any]
    ) -> Product | None:
        with self._lock:
            product = self._products.get(product_id)
            if product is None:
                return None
            product.apply_update(fields)
            return copy.deepcopy(product)

    async def delete_product(self, product_id: int) -> bool:
        with self._lock:
            return self._products.pop(product_id, None) is not None

    async def append_token(self, product_id: int, token: str) -> bool:
        with self._lock:
            product = self._products.get(product_id)
            if product is None:
                return False
            product.issue_token(token)
            return True

    async def find_by_id_and_token(
        self, product_id: int, token: str
    ) -> Product | None:
        with self._lock:
            product = self._products.get(product_id)
            if product is None or not product.token_state(token).is_redeemable():
                return None
            return copy.deepcopy(product)

    async def append_review_and_remove_token(
        self, product_id: int, token: str, review: Review
    ) -> Product | None:
        with self._lock:
            product = self._products.get(product_id)
            if product is None or not product.token_state(token).is_redeemable():
                return None
            product.redeem_token(token, copy.deepcopy(review))
            return copy.deepcopy(product)

    async def ping(self) -> None:
        return None


# ============================================================================
# Store Singleton
# ============================================================================


_product_store: ProductStore | None = None


def get_product_store() -> ProductStore:
    """Get product store singleton for the configured backend."""
    global _product_store
    if _product_store is None:
        if settings.store_backend == "memory":
            _product_store = InMemoryProductStore()
        else:
            _product_store = SqlProductStore(get_session_factory())
    return _product_store


def set_product_store(store: ProductStore) -> None:
    """Install a specific product store (seeding, tests)."""
    global _product_store
    _product_store = store


def reset_product_store() -> None:
    """Forget the current product store."""
    global _product_store
    _product_store = None
