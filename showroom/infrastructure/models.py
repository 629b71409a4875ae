"""SQLAlchemy models for the product catalog.

Products own two child tables: the live review tokens and the reviews.
Token membership is a row in ``review_tokens``, so consuming a token is a
single conditional DELETE.
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import (
    JSON,
    BigInteger,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from showroom.domain.entities import Product, Review
from showroom.infrastructure.database import Base


class ProductModel(Base):
    """Product row.

    Attributes:
        pk: Storage row key.
        id: Public numeric product id.
        name: Product name.
        category: Category slug.
        price: Price per sq.ft.
        stock: Stock status text.
        description: Marketing description.
        origin: Source region.
        finish: Surface finish.
        images: Ordered image references.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    __tablename__ = "products"

    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[int] = mapped_column(BigInteger, nullable=False, unique=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    stock: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    origin: Mapped[str | None] = mapped_column(String(255), nullable=True)
    finish: Mapped[str | None] = mapped_column(String(255), nullable=True)
    images: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    review_tokens: Mapped[list["ReviewTokenModel"]] = relationship(
        "ReviewTokenModel",
        back_populates="product",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    reviews: Mapped[list["ReviewModel"]] = relationship(
        "ReviewModel",
        back_populates="product",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ReviewModel.pk",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductModel(id={self.id}, name={self.name[:30]})>"

    @classmethod
    def from_domain(cls, product: Product) -> "ProductModel":
        """Build a row (with children) from a domain product."""
        return cls(
            id=product.id,
            name=product.name,
            category=product.category,
            price=Decimal(str(product.price)) if product.price is not None else None,
            stock=product.stock,
            description=product.description,
            origin=product.origin,
            finish=product.finish,
            images=list(product.images),
            review_tokens=[ReviewTokenModel(token=t) for t in product.review_tokens],
            reviews=[ReviewModel.from_domain(r) for r in product.reviews],
        )

    def to_domain(self) -> Product:
        """Convert to domain product. Children must be loaded."""
        return Product(
            id=self.id,
            name=self.name,
            category=self.category,
            price=float(self.price) if self.price is not None else None,
            stock=self.stock,
            description=self.description,
            origin=self.origin,
            finish=self.finish,
            images=list(self.images or []),
            review_tokens={t.token for t in self.review_tokens},
            reviews=[r.to_domain() for r in self.reviews],
        )


class ReviewTokenModel(Base):
    """A live single-use review token for one product."""

    __tablename__ = "review_tokens"

    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    token: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    product: Mapped["ProductModel"] = relationship(
        "ProductModel",
        back_populates="review_tokens",
    )

    __table_args__ = (
        UniqueConstraint("product_id", "token", name="uq_review_tokens_product_token"),
    )


class ReviewModel(Base):
    """A customer review."""

    __tablename__ = "reviews"

    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user: Mapped[str] = mapped_column(String(255), nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    images: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    product: Mapped["ProductModel"] = relationship(
        "ProductModel",
        back_populates="reviews",
    )

    @classmethod
    def from_domain(cls, review: Review) -> "ReviewModel":
        return cls(
            user=review.user,
            rating=review.rating,
            text=review.text,
            images=list(review.images),
            date=review.date,
        )

    def to_domain(self) -> Review:
        date = self.date
        if date.tzinfo is None:
            # SQLite drops tzinfo; stored values are UTC.
            date = date.replace(tzinfo=timezone.utc)
        return Review(
            user=self.user,
            rating=self.rating,
            text=self.text,
            images=list(self.images or []),
            date=date,
        )
