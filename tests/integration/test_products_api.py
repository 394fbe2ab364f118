"""Integration tests for the product catalog endpoints."""

import json

import pytest
from fastapi.testclient import TestClient

from src.storefront.core.services import BlobStore
from tests.utils import image_part, stored_files


def _create(client: TestClient, headers: dict[str, str], fields: dict, images: int = 0) -> int:
    files = [image_part(f"{i}.png") for i in range(images)] or None
    response = client.post("/products", data=fields, files=files, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()["id"]


class TestProductReads:
    def test_empty_catalog(self, client: TestClient):
        response = client.get("/products")

        assert response.status_code == 200
        assert response.json() == []

    def test_missing_product(self, client: TestClient):
        response = client.get("/products/42")

        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}

    def test_non_numeric_id(self, client: TestClient):
        response = client.get("/products/abc")

        assert response.status_code == 400
        assert "error" in response.json()


class TestProductWrites:
    def test_create_requires_token(self, client: TestClient):
        response = client.post("/products", data={"name": "Shirt", "price": "100"})

        assert response.status_code == 401
        assert response.json() == {"error": "No token provided"}

    def test_create_rejects_bad_token(self, client: TestClient):
        response = client.post(
            "/products",
            data={"name": "Shirt", "price": "100"},
            headers={"Authorization": "Bearer not.a.token"},
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid token"}

    def test_create_and_read_back(self, client: TestClient, auth_headers: dict[str, str]):
        response = client.post(
            "/products",
            data={"name": "Shirt", "price": "100", "discount_price": "80"},
            files=[image_part("front.png"), image_part("back.png")],
            headers=auth_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Product created successfully"

        product = client.get(f"/products/{body['id']}").json()
        assert product["name"] == "Shirt"
        assert product["name_ar"] == "Shirt"
        assert product["price"] == 100
        assert product["discount_price"] == 80
        assert [image["display_order"] for image in product["images"]] == [0, 1]
        assert product["image"] == product["images"][0]["image_path"]
        assert product["image"].startswith("/uploads/product-")

    def test_create_rejects_non_images(
        self, client: TestClient, auth_headers: dict[str, str], blob_store: BlobStore
    ):
        response = client.post(
            "/products",
            data={"name": "Shirt", "price": "100"},
            files=[image_part("notes.txt", "text/plain")],
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Only image files are allowed!"}
        assert stored_files(blob_store) == []

    @pytest.mark.parametrize(
        "fields",
        [{"price": "100"}, {"name": "Shirt"}, {"name": "Shirt", "price": "abc"}, {"name": "Shirt", "price": "0"}],
    )
    def test_create_validates_fields(self, client: TestClient, auth_headers: dict[str, str], fields):
        response = client.post("/products", data=fields, headers=auth_headers)

        assert response.status_code == 400
        assert "error" in response.json()

    def test_list_is_newest_first(self, client: TestClient, auth_headers: dict[str, str]):
        first = _create(client, auth_headers, {"name": "First", "price": "1"})
        second = _create(client, auth_headers, {"name": "Second", "price": "2"})

        assert [p["id"] for p in client.get("/products").json()] == [second, first]

    def test_update_with_deleted_and_new_images(
        self, client: TestClient, auth_headers: dict[str, str], blob_store: BlobStore
    ):
        product_id = _create(client, auth_headers, {"name": "Shirt", "price": "100"}, images=2)
        first, second = client.get(f"/products/{product_id}").json()["images"]

        response = client.put(
            f"/products/{product_id}",
            data={
                "name": "Shirt",
                "price": "90",
                "deleted_images": json.dumps([first["id"]]),
            },
            files=[image_part("new.png")],
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Product updated successfully"}
        product = client.get(f"/products/{product_id}").json()
        assert product["price"] == 90
        assert [image["id"] for image in product["images"]][0] == second["id"]
        assert [image["display_order"] for image in product["images"]] == [1, 1]
        assert len(stored_files(blob_store)) == 2

    def test_update_missing_product(self, client: TestClient, auth_headers: dict[str, str]):
        response = client.put(
            "/products/999", data={"name": "Shirt", "price": "1"}, headers=auth_headers
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}

    def test_update_rejects_malformed_deleted_images(
        self, client: TestClient, auth_headers: dict[str, str]
    ):
        product_id = _create(client, auth_headers, {"name": "Shirt", "price": "100"})

        response = client.put(
            f"/products/{product_id}",
            data={"name": "Shirt", "price": "100", "deleted_images": "first one"},
            headers=auth_headers,
        )

        assert response.status_code == 400

    def test_delete_image(self, client: TestClient, auth_headers: dict[str, str]):
        product_id = _create(client, auth_headers, {"name": "Shirt", "price": "100"}, images=2)
        image_id = client.get(f"/products/{product_id}").json()["images"][0]["id"]

        first = client.delete(f"/products/{product_id}/images/{image_id}", headers=auth_headers)
        again = client.delete(f"/products/{product_id}/images/{image_id}", headers=auth_headers)

        assert first.status_code == 200
        assert again.status_code == 404
        assert again.json() == {"error": "Image not found"}
        assert len(client.get(f"/products/{product_id}").json()["images"]) == 1

    def test_delete_product(
        self, client: TestClient, auth_headers: dict[str, str], blob_store: BlobStore
    ):
        product_id = _create(client, auth_headers, {"name": "Shirt", "price": "100"}, images=3)

        response = client.delete(f"/products/{product_id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Product deleted successfully"}
        assert client.get(f"/products/{product_id}").status_code == 404
        assert client.delete(f"/products/{product_id}", headers=auth_headers).status_code == 404
        assert stored_files(blob_store) == []

    def test_api_prefix_serves_same_routes(self, client: TestClient, auth_headers: dict[str, str]):
        product_id = _create(client, auth_headers, {"name": "Shirt", "price": "100"})

        response = client.get(f"/api/products/{product_id}")

        assert response.status_code == 200
        assert response.json()["id"] == product_id
