"""Tests for product catalog API endpoints."""

import pytest
from fastapi.testclient import TestClient

from showroom.infrastructure.product_store import InMemoryProductStore


class TestListProducts:
    """Tests for GET /api/products."""

    def test_list_products(self, client: TestClient) -> None:
        response = client.get("/api/products")
        assert response.status_code == 200

        data = response.json()
        assert isinstance(data, list)
        assert [p["id"] for p in data] == [1, 2]
        assert data[0]["name"] == "Italian Carrara White"
        assert data[0]["price"] == 12.5
        assert data[0]["images"] == ["https://example.com/carrara.jpg"]
        assert data[1]["reviews"][0]["user"] == "Sarah J."

    def test_review_tokens_are_not_listed(self, client: TestClient) -> None:
        """Live tokens must never leak through the public listing."""
        response = client.get("/api/products")
        for product in response.json():
            assert "reviewTokens" not in product
            assert "review_tokens" not in product
        assert "abc123" not in response.text

    def test_list_empty_catalog(self, client: TestClient, product_store) -> None:
        for product_id in (1, 2):
            client.delete(f"/api/products/{product_id}")
        response = client.get("/api/products")
        assert response.status_code == 200
        assert response.json() == []


class TestAddProduct:
    """Tests for POST /api/products."""

    @pytest.mark.asyncio
    async def test_add_product(
        self, client: TestClient, product_store: InMemoryProductStore
    ) -> None:
        """Should assign an id and start with empty reviews and tokens."""
        response = client.post(
            "/api/products",
            json={
                "name": "Kashmir White",
                "category": "granite",
                "price": 15.75,
                "stock": "In Stock",
                "images": ["https://example.com/kashmir.jpg"],
            },
        )
        assert response.status_code == 200

        data = response.json()
        assert isinstance(data["id"], int)
        assert data["id"] not in (1, 2)
        assert data["name"] == "Kashmir White"
        assert data["reviews"] == []

        product = await product_store.find_by_numeric_id(data["id"])
        assert product.review_tokens == set()

    def test_client_cannot_choose_id_or_reviews(self, client: TestClient) -> None:
        response = client.post(
            "/api/products",
            json={
                "id": 1,
                "name": "Nero Marquina",
                "reviews": [{"user": "x", "rating": 1, "text": "fake"}],
                "reviewTokens": ["forged"],
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["id"] != 1
        assert data["reviews"] == []

    def test_add_product_without_images(self, client: TestClient) -> None:
        response = client.post("/api/products", json={"name": "Absolute Black"})
        assert response.status_code == 200
        assert response.json()["images"] == []

    def test_ids_are_unique(self, client: TestClient) -> None:
        ids = {
            client.post("/api/products", json={"name": f"Slab {i}"}).json()["id"]
            for i in range(5)
        }
        assert len(ids) == 5

    def test_add_product_missing_name(self, client: TestClient) -> None:
        response = client.post("/api/products", json={"category": "marble"})
        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_FAILED"

    def test_new_product_accepts_tokens(self, client: TestClient) -> None:
        product_id = client.post("/api/products", json={"name": "Onyx"}).json()["id"]
        response = client.post(f"/api/products/{product_id}/generate-token")
        assert response.status_code == 200


class TestUpdateProduct:
    """Tests for PUT /api/products/{id}."""

    @pytest.mark.asyncio
    async def test_partial_update(
        self, client: TestClient, product_store: InMemoryProductStore
    ) -> None:
        """Only fields present in the body change."""
        response = client.put("/api/products/1", json={"price": 14.0, "stock": "Low Stock"})
        assert response.status_code == 200

        data = response.json()
        assert data["price"] == 14.0
        assert data["stock"] == "Low Stock"
        assert data["name"] == "Italian Carrara White"

        product = await product_store.find_by_numeric_id(1)
        assert "abc123" in product.review_tokens

    def test_update_cannot_touch_reviews(self, client: TestClient) -> None:
        response = client.put("/api/products/2", json={"reviews": [], "name": "Galaxy"})
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Galaxy"
        assert len(data["reviews"]) == 1

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_update_cannot_clear_name(self, client: TestClient, name) -> None:
        response = client.put("/api/products/1", json={"name": name, "price": 1.0})
        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_FAILED"

        listing = client.get("/api/products")
        assert listing.status_code == 200
        carrara = listing.json()[0]
        assert carrara["name"] == "Italian Carrara White"
        assert carrara["price"] == 12.5

    def test_update_unknown_product(self, client: TestClient) -> None:
        response = client.put("/api/products/999", json={"name": "Ghost"})
        assert response.status_code == 404
        assert response.json()["error_code"] == "PRODUCT_NOT_FOUND"


class TestDeleteProduct:
    """Tests for DELETE /api/products/{id}."""

    def test_delete_product(self, client: TestClient) -> None:
        response = client.delete("/api/products/1")
        assert response.status_code == 200
        assert response.json() == {"msg": "Deleted"}

        ids = [p["id"] for p in client.get("/api/products").json()]
        assert ids == [2]

    def test_deleted_product_tokens_are_gone(self, client: TestClient) -> None:
        client.delete("/api/products/1")
        response = client.post(
            "/api/products/1/reviews",
            json={"user": "A", "rating": 5, "text": "Great", "token": "abc123"},
        )
        assert response.status_code == 403

    def test_delete_unknown_product(self, client: TestClient) -> None:
        response = client.delete("/api/products/999")
        assert response.status_code == 404
