"""Posts, scholarships, statistics and subscribers over HTTP."""

import pytest


@pytest.fixture
async def post(admin_client, admin_user):
    response = await admin_client.post(
        "/api/posts/",
        json={
            "title": "Top 10 Scholarships",
            "content": "...",
            "author_id": admin_user.id,
            "status": "published",
            "is_featured": True,
        },
    )
    assert response.status_code == 201
    return response.json()["data"]


class TestPostsApi:
    @pytest.mark.asyncio
    async def test_generated_slug_and_lookup(self, admin_client, post):
        assert post["slug"] == "top-10-scholarships"
        response = await admin_client.get("/api/posts/slug/top-10-scholarships")
        assert response.json()["data"]["id"] == post["id"]

    @pytest.mark.asyncio
    async def test_featured_route_is_not_an_id(self, client, post):
        response = await client.get("/api/posts/featured")
        assert response.status_code == 200
        assert [p["id"] for p in response.json()["data"]] == [post["id"]]

    @pytest.mark.asyncio
    async def test_view_counter(self, client, post):
        await client.post(f"/api/posts/{post['id']}/view")
        response = await client.post(f"/api/posts/{post['id']}/view")
        assert response.json()["data"]["views"] == 2

    @pytest.mark.asyncio
    async def test_tags_round_trip(self, admin_client, post):
        tag = (await admin_client.post("/api/tags/", json={"name": "UK", "slug": "uk"})).json()["data"]

        added = await admin_client.post(f"/api/posts/{post['id']}/tags/{tag['id']}")
        assert added.status_code == 201

        tags = await admin_client.get(f"/api/posts/{post['id']}/tags")
        assert [t["slug"] for t in tags.json()["data"]] == ["uk"]

        by_tag = await admin_client.get("/api/posts/tag/uk")
        assert [p["id"] for p in by_tag.json()["data"]] == [post["id"]]

        removed = await admin_client.delete(f"/api/posts/{post['id']}/tags/{tag['id']}")
        assert removed.status_code == 200
        assert (await admin_client.get(f"/api/posts/{post['id']}/tags")).json()["data"] == []

    @pytest.mark.asyncio
    async def test_filter_by_status(self, admin_client, admin_user, post):
        await admin_client.post(
            "/api/posts/", json={"title": "Draft", "content": "x", "author_id": admin_user.id}
        )
        drafts = await admin_client.get("/api/posts/", params={"status": "draft"})
        assert [p["title"] for p in drafts.json()["data"]] == ["Draft"]

    @pytest.mark.asyncio
    async def test_filter_by_tag(self, admin_client, admin_user, post):
        await admin_client.post(
            "/api/posts/", json={"title": "Untagged", "content": "x", "author_id": admin_user.id}
        )
        tag = (await admin_client.post("/api/tags/", json={"name": "UK", "slug": "uk"})).json()["data"]
        await admin_client.post(f"/api/posts/{post['id']}/tags/{tag['id']}")

        tagged = await admin_client.get("/api/posts/", params={"tag": "uk"})
        everything = await admin_client.get("/api/posts/")

        assert [p["id"] for p in tagged.json()["data"]] == [post["id"]]
        assert len(everything.json()["data"]) == 2


class TestScholarshipsApi:
    @pytest.mark.asyncio
    async def test_filter_by_category(self, admin_client):
        category = (
            await admin_client.post("/api/categories/", json={"name": "Masters", "slug": "masters"})
        ).json()["data"]
        await admin_client.post(
            "/api/scholarships/",
            json={"title": "Chevening", "description": "UK", "category_id": category["id"]},
        )
        await admin_client.post("/api/scholarships/", json={"title": "Other", "description": "x"})

        response = await admin_client.get("/api/scholarships/", params={"category_id": category["id"]})

        assert [s["slug"] for s in response.json()["data"]] == ["chevening"]

    @pytest.mark.asyncio
    async def test_featured(self, admin_client):
        await admin_client.post(
            "/api/scholarships/",
            json={"title": "DAAD", "description": "Germany", "is_featured": True},
        )
        await admin_client.post("/api/scholarships/", json={"title": "Plain", "description": "x"})
        response = await admin_client.get("/api/scholarships/featured")
        assert [s["slug"] for s in response.json()["data"]] == ["daad"]


class TestStatisticsApi:
    @pytest.mark.asyncio
    async def test_reorder(self, admin_client):
        ids = []
        for title in ("Students", "Countries", "Universities"):
            response = await admin_client.post(
                "/api/statistics/", json={"title": title, "value": "+100", "icon": "star"}
            )
            ids.append(response.json()["data"]["id"])

        response = await admin_client.post("/api/statistics/reorder", json={"ids": ids[::-1]})

        assert response.status_code == 200
        data = response.json()["data"]
        assert [s["id"] for s in data] == ids[::-1]
        assert [s["order"] for s in data] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_reorder_empty_list(self, admin_client):
        response = await admin_client.post("/api/statistics/reorder", json={"ids": []})
        assert response.status_code == 400


class TestSubscribersApi:
    @pytest.mark.asyncio
    async def test_public_subscribe_admin_list(self, client, admin_user):
        response = await client.post("/api/subscribers/", json={"email": "Reader@FullSco.com"})
        assert response.status_code == 201

        assert (await client.get("/api/subscribers/")).status_code == 401

        await client.post("/api/auth/login", json={"username": "admin", "password": "admin-secret"})
        listed = await client.get("/api/subscribers/")
        assert [s["email"] for s in listed.json()["data"]] == ["reader@fullsco.com"]

    @pytest.mark.asyncio
    async def test_invalid_email(self, client):
        response = await client.post("/api/subscribers/", json={"email": "not-an-email"})
        assert response.status_code == 400
