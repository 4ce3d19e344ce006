"""
Fashion Catalog API — Product Endpoint Tests
=============================================

What we test:
    ✅ Create assigns sequential ids and timestamps
    ✅ Validation messages for missing fields, bad category, bad images
    ✅ Category filter and newest-first ordering
    ✅ PUT replaces fields but keeps images when none are supplied
    ✅ Delete returns the removed product; later reads are 404
    ✅ init-data seeds only an empty catalog
"""

import pytest

from catalog_api.constants import PRODUCT_CATEGORIES


class TestCreateProduct:
    @pytest.mark.asyncio
    async def test_create_assigns_ids(self, client, auth_headers, product_payload):
        first = await client.post("/api/products", json=product_payload, headers=auth_headers)
        second = await client.post("/api/products", json=product_payload, headers=auth_headers)

        assert first.status_code == 201
        body = first.json()
        assert body["id"] == 1
        assert body["category"] == "Robes"
        assert body["images"] == product_payload["images"]
        assert "createdAt" in body and "updatedAt" in body
        assert "pk" not in body
        assert second.json()["id"] == 2

    @pytest.mark.asyncio
    async def test_zero_price_is_accepted(self, client, auth_headers, product_payload):
        product_payload["price"] = 0
        response = await client.post("/api/products", json=product_payload, headers=auth_headers)
        assert response.status_code == 201
        assert response.json()["price"] == 0

    @pytest.mark.asyncio
    async def test_missing_fields(self, client, auth_headers, product_payload):
        del product_payload["title"]
        del product_payload["price"]

        response = await client.post("/api/products", json=product_payload, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing or invalid required fields: title, price"}

    @pytest.mark.asyncio
    async def test_empty_images_rejected(self, client, auth_headers, product_payload):
        product_payload["images"] = []
        response = await client.post("/api/products", json=product_payload, headers=auth_headers)

        assert response.status_code == 400
        assert "images" in response.json()["error"]

    @pytest.mark.asyncio
    async def test_unknown_category(self, client, auth_headers, product_payload):
        product_payload["category"] = "Chaussures"
        response = await client.post("/api/products", json=product_payload, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {
            "error": "Invalid category. Must be one of: " + ", ".join(PRODUCT_CATEGORIES)
        }

    @pytest.mark.asyncio
    async def test_non_string_image(self, client, auth_headers, product_payload):
        product_payload["images"] = ["https://example.com/a.jpg", 42]
        response = await client.post("/api/products", json=product_payload, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Each image must be a string (URL)"}

    @pytest.mark.asyncio
    async def test_body_must_be_object(self, client, auth_headers):
        response = await client.post("/api/products", json=["not", "an", "object"], headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "A JSON object body is required"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw_price", ["Infinity", "-Infinity", "NaN"])
    async def test_non_finite_price_rejected(self, client, auth_headers, raw_price):
        body = (
            '{"images": ["https://example.com/a.jpg"], "category": "Robes", '
            '"title": "Robe", "price": %s, "description": "Dress"}' % raw_price
        )
        response = await client.post(
            "/api/products",
            content=body,
            headers={**auth_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Missing or invalid required fields: price"}

        # Nothing was stored, so statistics still compute
        stats = await client.get("/api/stats", headers=auth_headers)
        assert stats.status_code == 200
        assert stats.json()["totalProducts"] == 0


class TestReadProducts:
    @pytest.mark.asyncio
    async def test_list_newest_first_with_filter(self, client, auth_headers, product_payload):
        await client.post("/api/products", json=product_payload, headers=auth_headers)
        await client.post(
            "/api/products",
            json={**product_payload, "category": "Hauts", "title": "Top"},
            headers=auth_headers,
        )

        everything = (await client.get("/api/products", headers=auth_headers)).json()["products"]
        assert [p["id"] for p in everything] == [2, 1]

        tops = await client.get("/api/products", params={"category": "Hauts"}, headers=auth_headers)
        assert [p["title"] for p in tops.json()["products"]] == ["Top"]

        unknown = await client.get("/api/products", params={"category": "Nope"}, headers=auth_headers)
        assert unknown.json() == {"products": []}

    @pytest.mark.asyncio
    async def test_get_unknown_id(self, client, auth_headers):
        response = await client.get("/api/products/999", headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}

    @pytest.mark.asyncio
    async def test_non_integer_id(self, client, auth_headers):
        response = await client.get("/api/products/abc", headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid id parameter: expected an integer"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    async def test_id_beyond_integer_range_is_not_found(self, client, auth_headers, product_payload, method):
        response = await client.request(
            method,
            "/api/products/99999999999999999999",
            json=product_payload if method == "PUT" else None,
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}


class TestUpdateProduct:
    @pytest.mark.asyncio
    async def test_update_keeps_images_when_omitted(self, client, auth_headers, product_payload):
        created = (await client.post("/api/products", json=product_payload, headers=auth_headers)).json()

        response = await client.put(
            f"/api/products/{created['id']}",
            json={"category": "Jupes", "title": "Jupe", "price": 35.5, "description": "Pleated skirt"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "Jupe"
        assert body["category"] == "Jupes"
        assert body["images"] == product_payload["images"]
        assert body["createdAt"] == created["createdAt"]

    @pytest.mark.asyncio
    async def test_update_replaces_non_empty_images(self, client, auth_headers, product_payload):
        await client.post("/api/products", json=product_payload, headers=auth_headers)

        response = await client.put(
            "/api/products/1",
            json={**product_payload, "images": ["https://example.com/new.jpg"]},
            headers=auth_headers,
        )
        assert response.json()["images"] == ["https://example.com/new.jpg"]

    @pytest.mark.asyncio
    async def test_update_unknown_id(self, client, auth_headers, product_payload):
        response = await client.put("/api/products/7", json=product_payload, headers=auth_headers)
        assert response.status_code == 404


class TestDeleteProduct:
    @pytest.mark.asyncio
    async def test_delete_then_404(self, client, auth_headers, product_payload):
        await client.post("/api/products", json=product_payload, headers=auth_headers)

        response = await client.delete("/api/products/1", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Product deleted successfully"
        assert body["product"]["id"] == 1

        assert (await client.get("/api/products/1", headers=auth_headers)).status_code == 404
        assert (await client.delete("/api/products/1", headers=auth_headers)).status_code == 404


class TestInitData:
    @pytest.mark.asyncio
    async def test_seeds_empty_catalog_once(self, client, auth_headers):
        first = await client.post("/api/products/init-data", headers=auth_headers)
        assert first.status_code == 200
        assert first.json() == {"message": "Sample data added successfully", "count": 1}

        sample = (await client.get("/api/products/1", headers=auth_headers)).json()
        assert sample["category"] == "Robes"
        assert sample["price"] == 79.99
        assert len(sample["images"]) == 4

        second = await client.post("/api/products/init-data", headers=auth_headers)
        assert second.json() == {"message": "The database already contains products"}

    @pytest.mark.asyncio
    async def test_non_empty_catalog_untouched(self, client, auth_headers, product_payload):
        await client.post("/api/products", json=product_payload, headers=auth_headers)

        response = await client.post("/api/products/init-data", headers=auth_headers)

        assert response.json() == {"message": "The database already contains products"}
        listed = (await client.get("/api/products", headers=auth_headers)).json()["products"]
        assert len(listed) == 1
