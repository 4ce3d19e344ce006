"""
Fashion Catalog API — Service Endpoint Tests
=============================================

Services share the product lifecycle minus the category field.
"""

import pytest


class TestServiceEndpoints:
    @pytest.mark.asyncio
    async def test_crud_lifecycle(self, client, auth_headers, service_payload):
        created = await client.post("/api/services", json=service_payload, headers=auth_headers)
        assert created.status_code == 201
        body = created.json()
        assert body["id"] == 1
        assert "category" not in body

        listed = await client.get("/api/services", headers=auth_headers)
        assert [s["title"] for s in listed.json()["services"]] == ["Retouche"]

        updated = await client.put(
            "/api/services/1",
            json={"title": "Retouche express", "price": 25, "description": "Same-day alterations"},
            headers=auth_headers,
        )
        assert updated.status_code == 200
        assert updated.json()["title"] == "Retouche express"
        assert updated.json()["images"] == service_payload["images"]

        deleted = await client.delete("/api/services/1", headers=auth_headers)
        assert deleted.json()["message"] == "Service deleted successfully"
        assert deleted.json()["service"]["title"] == "Retouche express"

        missing = await client.get("/api/services/1", headers=auth_headers)
        assert missing.status_code == 404
        assert missing.json() == {"error": "Service not found"}

    @pytest.mark.asyncio
    async def test_ids_are_independent_of_products(self, client, auth_headers, service_payload, product_payload):
        await client.post("/api/products", json=product_payload, headers=auth_headers)
        await client.post("/api/products", json=product_payload, headers=auth_headers)

        response = await client.post("/api/services", json=service_payload, headers=auth_headers)
        assert response.json()["id"] == 1

    @pytest.mark.asyncio
    async def test_category_field_is_ignored(self, client, auth_headers, service_payload):
        response = await client.post(
            "/api/services",
            json={**service_payload, "category": "Anything"},
            headers=auth_headers,
        )
        assert response.status_code == 201
        assert "category" not in response.json()

    @pytest.mark.asyncio
    async def test_missing_description(self, client, auth_headers, service_payload):
        del service_payload["description"]
        response = await client.post("/api/services", json=service_payload, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing or invalid required fields: description"}

    @pytest.mark.asyncio
    async def test_negative_price(self, client, auth_headers, service_payload):
        service_payload["price"] = -1
        response = await client.post("/api/services", json=service_payload, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing or invalid required fields: price"}

    @pytest.mark.asyncio
    async def test_non_string_image(self, client, auth_headers, service_payload):
        service_payload["images"] = ["https://example.com/ok.jpg", 1]
        response = await client.post("/api/services", json=service_payload, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Each image must be a string (URL)"}

    @pytest.mark.asyncio
    async def test_infinite_price_rejected(self, client, auth_headers):
        body = (
            '{"images": ["https://example.com/s.jpg"], "title": "Retouche", '
            '"price": Infinity, "description": "Alterations"}'
        )
        response = await client.post(
            "/api/services",
            content=body,
            headers={**auth_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Missing or invalid required fields: price"}


class TestServiceUpdateImages:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("images", ["omitted", None, []])
    async def test_stored_images_kept(self, client, auth_headers, service_payload, images):
        await client.post("/api/services", json=service_payload, headers=auth_headers)

        body = {"title": "Retouche", "price": 18, "description": "Alterations"}
        if images != "omitted":
            body["images"] = images
        response = await client.put("/api/services/1", json=body, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["images"] == service_payload["images"]
        stored = await client.get("/api/services/1", headers=auth_headers)
        assert stored.json()["images"] == service_payload["images"]
        assert stored.json()["price"] == 18

    @pytest.mark.asyncio
    async def test_non_empty_images_replace(self, client, auth_headers, service_payload):
        await client.post("/api/services", json=service_payload, headers=auth_headers)

        response = await client.put(
            "/api/services/1",
            json={**service_payload, "images": ["https://example.com/new.jpg"]},
            headers=auth_headers,
        )
        assert response.json()["images"] == ["https://example.com/new.jpg"]

    @pytest.mark.asyncio
    async def test_id_beyond_integer_range_is_not_found(self, client, auth_headers, service_payload):
        response = await client.put(
            "/api/services/99999999999999999999", json=service_payload, headers=auth_headers
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Service not found"}
