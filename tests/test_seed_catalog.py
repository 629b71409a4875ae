"""Tests for the catalog seeding script."""

import importlib.util
from pathlib import Path

import pytest

from showroom.domain.entities import Product
from showroom.infrastructure.product_store import InMemoryProductStore

SCRIPT = Path(__file__).parent.parent / "scripts" / "seed_catalog.py"


@pytest.fixture(scope="module")
def seed_module():
    spec = importlib.util.spec_from_file_location("seed_catalog", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.asyncio
async def test_seed_replaces_existing(seed_module) -> None:
    store = InMemoryProductStore([Product(id=99, name="Old Slab")])

    result = await seed_module.seed_catalog(store)

    assert result == {"deleted": 1, "created": 4}
    products = await store.list_products()
    assert sorted(p.id for p in products) == [1, 2, 3, 4]
    carrara = await store.find_by_numeric_id(1)
    assert carrara.reviews[0].user == "Sarah J."
    assert carrara.review_tokens == set()


@pytest.mark.asyncio
async def test_seed_without_clear_keeps_existing(seed_module) -> None:
    store = InMemoryProductStore([Product(id=1, name="Custom Carrara")])

    result = await seed_module.seed_catalog(store, clear=False)

    assert result == {"deleted": 0, "created": 3}
    assert (await store.find_by_numeric_id(1)).name == "Custom Carrara"
    assert (await store.find_by_numeric_id(99)) is None
