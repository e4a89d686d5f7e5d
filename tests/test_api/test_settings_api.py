import pytest


class TestSiteSettings:
    @pytest.mark.asyncio
    async def test_missing_row_is_404(self, client):
        response = await client.get("/api/site-settings/")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_first_save_needs_site_name(self, admin_client):
        response = await admin_client.put("/api/site-settings/", json={"hero_title": "Hi"})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_upsert_creates_then_patches(self, admin_client):
        created = await admin_client.put(
            "/api/site-settings/",
            json={"site_name": "FULLSCO", "primary_color": "#123456", "show_hero_section": "true"},
        )
        assert created.status_code == 200
        assert created.json()["data"]["show_hero_section"] is True

        patched = await admin_client.patch("/api/site-settings/", json={"hero_title": "Find your scholarship"})
        assert patched.status_code == 200
        data = patched.json()["data"]
        assert data["id"] == created.json()["data"]["id"]
        assert data["site_name"] == "FULLSCO"
        assert data["primary_color"] == "#123456"
        assert data["hero_title"] == "Find your scholarship"

        public = await admin_client.get("/api/site-settings/")
        assert public.json()["data"]["hero_title"] == "Find your scholarship"

    @pytest.mark.asyncio
    async def test_update_requires_admin(self, client):
        response = await client.put("/api/site-settings/", json={"site_name": "X"})
        assert response.status_code == 401


class TestSeoSettings:
    @pytest.mark.asyncio
    async def test_lookup_by_path(self, admin_client):
        created = await admin_client.post(
            "/api/seo-settings/", json={"page_path": "/about", "meta_title": "About us"}
        )
        assert created.status_code == 201

        found = await admin_client.get("/api/seo-settings/path", params={"path": "/about"})
        assert found.status_code == 200
        assert found.json()["data"]["meta_title"] == "About us"

        missing = await admin_client.get("/api/seo-settings/path", params={"path": "/contact"})
        assert missing.status_code == 404

    @pytest.mark.asyncio
    async def test_duplicate_path(self, admin_client):
        await admin_client.post("/api/seo-settings/", json={"page_path": "/about"})
        response = await admin_client.post("/api/seo-settings/", json={"page_path": "/about"})
        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_path_must_be_absolute(self, admin_client):
        response = await admin_client.post("/api/seo-settings/", json={"page_path": "about"})
        assert response.status_code == 400
