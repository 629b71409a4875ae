"""Shared pytest fixtures.

Tests run against the in-memory product store unless a test builds its
own store.
"""

import os

os.environ["STORE_BACKEND"] = "memory"
os.environ["ADMIN_USER"] = "owner"
os.environ["ADMIN_PASS"] = "s3cret-pass"
os.environ.pop("GEMINI_API_KEY", None)

import pytest
from fastapi.testclient import TestClient

from showroom.domain.entities import Product, Review
from showroom.infrastructure.product_store import (
    InMemoryProductStore,
    reset_product_store,
    set_product_store,
)
from showroom.infrastructure.text_generator import reset_description_generator


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset process-wide singletons before and after each test."""
    reset_product_store()
    reset_description_generator()
    yield
    reset_product_store()
    reset_description_generator()


@pytest.fixture
def sample_products() -> list[Product]:
    """Two showroom products; product 1 holds token "abc123"."""
    return [
        Product(
            id=1,
            name="Italian Carrara White",
            category="marble",
            price=12.5,
            stock="In Stock",
            description="Classic white marble with soft grey veins.",
            origin="Carrara, Italy",
            finish="High Gloss Polish",
            images=["https://example.com/carrara.jpg"],
            review_tokens={"abc123"},
        ),
        Product(
            id=2,
            name="Black Galaxy Granite",
            category="granite",
            price=18.0,
            stock="In Stock",
            origin="Andhra Pradesh, India",
            finish="Mirror Polish",
            reviews=[Review(user="Sarah J.", rating=5, text="Stunning slab.")],
        ),
    ]


@pytest.fixture
def product_store(sample_products: list[Product]) -> InMemoryProductStore:
    """In-memory store seeded with sample products and installed globally."""
    store = InMemoryProductStore(sample_products)
    set_product_store(store)
    return store


@pytest.fixture
def client(product_store: InMemoryProductStore):
    """Create test client backed by the sample product store."""
    from showroom.main import app

    with TestClient(app) as client:
        yield client
