"""End-to-end CRUD flow through the HTTP API, using categories."""

import pytest


class TestCategoryLifecycle:
    @pytest.mark.asyncio
    async def test_create_conflict_read_delete(self, admin_client):
        payload = {"name": "Engineering", "slug": "engineering"}

        created = await admin_client.post("/api/categories/", json=payload)
        assert created.status_code == 201
        body = created.json()
        assert body["success"] is True
        category_id = body["data"]["id"]

        duplicate = await admin_client.post("/api/categories/", json=payload)
        assert duplicate.status_code == 409
        assert duplicate.json()["success"] is False
        assert "already exists" in duplicate.json()["message"]

        by_slug = await admin_client.get("/api/categories/slug/engineering")
        assert by_slug.status_code == 200
        assert by_slug.json()["data"]["id"] == category_id

        deleted = await admin_client.delete(f"/api/categories/{category_id}")
        assert deleted.status_code == 200

        gone = await admin_client.get(f"/api/categories/{category_id}")
        assert gone.status_code == 404
        assert gone.json()["success"] is False

    @pytest.mark.asyncio
    async def test_put_and_patch_are_partial(self, admin_client):
        created = await admin_client.post(
            "/api/categories/",
            json={"name": "Arts", "slug": "arts", "description": "Fine arts"},
        )
        category_id = created.json()["data"]["id"]

        patched = await admin_client.patch(f"/api/categories/{category_id}", json={"name": "Art"})
        assert patched.status_code == 200
        assert patched.json()["data"]["description"] == "Fine arts"

        put = await admin_client.put(f"/api/categories/{category_id}", json={"slug": "art"})
        assert put.status_code == 200
        data = put.json()["data"]
        assert (data["name"], data["slug"]) == ("Art", "art")

    @pytest.mark.asyncio
    async def test_list(self, admin_client):
        for slug in ("a", "b"):
            await admin_client.post("/api/categories/", json={"name": slug, "slug": slug})
        response = await admin_client.get("/api/categories/")
        assert response.status_code == 200
        assert [c["slug"] for c in response.json()["data"]] == ["a", "b"]


class TestErrors:
    @pytest.mark.asyncio
    async def test_non_numeric_id_is_bad_request(self, client):
        response = await client.get("/api/categories/abc")
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["errors"][0]["field"] == "path.id"

    @pytest.mark.asyncio
    async def test_missing_slug_is_not_found(self, client):
        response = await client.get("/api/categories/slug/nothing-here")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_invalid_body_is_bad_request(self, admin_client):
        response = await admin_client.post("/api/categories/", json={"name": "No slug"})
        assert response.status_code == 400
        assert any(e["field"] == "body.slug" for e in response.json()["errors"])

    @pytest.mark.asyncio
    async def test_write_requires_login(self, client):
        response = await client.post("/api/categories/", json={"name": "X", "slug": "x"})
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_public_read(self, client):
        response = await client.get("/api/categories/")
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": None, "data": []}
