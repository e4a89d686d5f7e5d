import pytest


async def create_menu(client, slug="main-menu", location="header"):
    response = await client.post(
        "/api/menus/", json={"name": "Main", "slug": slug, "location": location}
    )
    assert response.status_code == 201
    return response.json()["data"]


async def create_item(client, menu_id, title, parent_id=None, order=0):
    response = await client.post(
        "/api/menu-items/",
        json={
            "menu_id": menu_id,
            "parent_id": parent_id,
            "title": title,
            "type": "link",
            "url": "/" + title.lower(),
            "order": order,
        },
    )
    assert response.status_code == 201, response.json()
    return response.json()["data"]


class TestMenuStructureApi:
    @pytest.mark.asyncio
    async def test_public_structure(self, admin_client):
        menu = await create_menu(admin_client)
        scholarships = await create_item(admin_client, menu["id"], "Scholarships", order=1)
        await create_item(admin_client, menu["id"], "Masters", parent_id=scholarships["id"])
        await create_item(admin_client, menu["id"], "Blog", order=2)
        await admin_client.post("/api/auth/logout")

        response = await admin_client.get("/api/menu-structure/header")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["menu"]["slug"] == "main-menu"
        assert [i["title"] for i in data["items"]] == ["Scholarships", "Blog"]
        assert [c["title"] for c in data["items"][0]["children"]] == ["Masters"]
        assert data["detached_ids"] == []

    @pytest.mark.asyncio
    async def test_unknown_location_value(self, client):
        response = await client.get("/api/menu-structure/basement")
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_no_menu_for_location(self, client):
        response = await client.get("/api/menu-structure/footer")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_menu_items_filtered_by_parent(self, admin_client):
        menu = await create_menu(admin_client)
        top = await create_item(admin_client, menu["id"], "Top")
        child = await create_item(admin_client, menu["id"], "Child", parent_id=top["id"])

        everything = await admin_client.get(f"/api/menus/{menu['id']}/items")
        roots = await admin_client.get(f"/api/menus/{menu['id']}/items", params={"root_only": True})
        children = await admin_client.get(
            f"/api/menus/{menu['id']}/items", params={"parent_id": top["id"]}
        )

        assert len(everything.json()["data"]) == 2
        assert [i["id"] for i in roots.json()["data"]] == [top["id"]]
        assert [i["id"] for i in children.json()["data"]] == [child["id"]]

    @pytest.mark.asyncio
    async def test_cycle_rejected(self, admin_client):
        menu = await create_menu(admin_client)
        top = await create_item(admin_client, menu["id"], "Top")
        child = await create_item(admin_client, menu["id"], "Child", parent_id=top["id"])

        response = await admin_client.patch(
            f"/api/menu-items/{top['id']}", json={"parent_id": child["id"]}
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "parent_id"

    @pytest.mark.asyncio
    async def test_menu_by_location_and_slug(self, admin_client):
        menu = await create_menu(admin_client, location="footer")
        by_location = await admin_client.get("/api/menus/location/footer")
        by_slug = await admin_client.get("/api/menus/slug/main-menu")
        assert by_location.json()["data"]["id"] == menu["id"]
        assert by_slug.json()["data"]["id"] == menu["id"]

    @pytest.mark.asyncio
    async def test_slug_and_location_lookups_are_public(self, admin_client):
        menu = await create_menu(admin_client, location="footer")
        await admin_client.post("/api/auth/logout")

        by_location = await admin_client.get("/api/menus/location/footer")
        by_slug = await admin_client.get("/api/menus/slug/main-menu")
        missing = await admin_client.get("/api/menus/slug/no-such-menu")

        assert by_location.status_code == 200
        assert by_slug.json()["data"]["id"] == menu["id"]
        assert missing.status_code == 404


class TestMenuAdminReads:
    @pytest.mark.asyncio
    async def test_anonymous_gets_401(self, admin_client):
        menu = await create_menu(admin_client)
        item = await create_item(admin_client, menu["id"], "Home")
        await admin_client.post("/api/auth/logout")

        for path in (
            "/api/menus/",
            f"/api/menus/{menu['id']}",
            f"/api/menus/{menu['id']}/items",
            f"/api/menus/{menu['id']}/structure",
            f"/api/menu-items/{item['id']}",
        ):
            response = await admin_client.get(path)
            assert response.status_code == 401, path

    @pytest.mark.asyncio
    async def test_plain_user_gets_403(self, admin_client):
        menu = await create_menu(admin_client)
        await admin_client.post("/api/auth/logout")
        await admin_client.post(
            "/api/auth/register",
            json={
                "username": "student",
                "password": "student-pass",
                "email": "student@fullsco.com",
                "full_name": "A Student",
            },
        )

        response = await admin_client.get(f"/api/menus/{menu['id']}/structure")

        assert response.status_code == 403
