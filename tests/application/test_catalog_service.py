"""Tests for the catalog service and admin credential check."""

import pytest

from showroom.application.auth_service import check_credentials
from showroom.application.catalog_service import CatalogService
from showroom.domain.entities import Product
from showroom.domain.exceptions import (
    DuplicateProductError,
    ProductNotFoundError,
    ValidationFailedError,
)
from showroom.infrastructure.config import Settings
from showroom.infrastructure.product_store import InMemoryProductStore


@pytest.fixture
def service() -> CatalogService:
    return CatalogService(
        InMemoryProductStore([Product(id=1, name="Italian Carrara White", price=12.5)])
    )


class TestCatalogService:
    """Tests for CatalogService."""

    @pytest.mark.asyncio
    async def test_add_then_get(self, service) -> None:
        created = await service.add_product({"name": "Kashmir White", "price": 15.0})
        fetched = await service.get_product(created.id)
        assert fetched.name == "Kashmir White"
        assert fetched.reviews == []
        assert fetched.review_tokens == set()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("fields", [{}, {"name": ""}, {"name": "  "}])
    async def test_add_requires_name(self, service, fields) -> None:
        with pytest.raises(ValidationFailedError):
            await service.add_product(fields)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", [None, "", "  "])
    async def test_update_rejects_blank_name(self, service, name) -> None:
        with pytest.raises(ValidationFailedError):
            await service.update_product(1, {"name": name})
        product = await service.get_product(1)
        assert product.name == "Italian Carrara White"

    @pytest.mark.asyncio
    async def test_update_without_name_keeps_it(self, service) -> None:
        updated = await service.update_product(1, {"price": 9.0})
        assert updated.name == "Italian Carrara White"
        assert updated.price == 9.0

    @pytest.mark.asyncio
    async def test_update_missing(self, service) -> None:
        with pytest.raises(ProductNotFoundError):
            await service.update_product(99, {"name": "x"})

    @pytest.mark.asyncio
    async def test_delete_then_get(self, service) -> None:
        await service.delete_product(1)
        with pytest.raises(ProductNotFoundError):
            await service.get_product(1)

    @pytest.mark.asyncio
    async def test_delete_missing(self, service) -> None:
        with pytest.raises(ProductNotFoundError):
            await service.delete_product(1234)


class TestCheckCredentials:
    """Tests for check_credentials."""

    def test_matching_credentials(self) -> None:
        config = Settings(admin_user="owner", admin_pass="pw")
        assert check_credentials("owner", "pw", config)

    def test_wrong_user(self) -> None:
        config = Settings(admin_user="owner", admin_pass="pw")
        assert not check_credentials("guest", "pw", config)

    def test_unset_credentials_never_match(self) -> None:
        config = Settings(admin_user=None, admin_pass=None)
        assert not check_credentials(None, None, config)
        assert not check_credentials("", "", config)


class TestInMemoryStore:
    """Tests for InMemoryProductStore insertion."""

    @pytest.mark.asyncio
    async def test_duplicate_id(self) -> None:
        store = InMemoryProductStore([Product(id=1, name="Italian Carrara White")])
        with pytest.raises(DuplicateProductError) as exc_info:
            await store.create_product(Product(id=1, name="Another Carrara"))
        assert exc_info.value.status_code == 409
        assert (await store.find_by_numeric_id(1)).name == "Italian Carrara White"
