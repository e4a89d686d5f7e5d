import pytest

from fullsco.db.models import UserRole
from fullsco.errors import ValidationFailedError
from fullsco.services.users import UsersService, hash_password, verify_password

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin-secret"


class TestPasswords:
    def test_hash_round_trip(self):
        hashed = hash_password("s3cret!")
        assert hashed != "s3cret!"
        assert verify_password("s3cret!", hashed)
        assert not verify_password("wrong", hashed)

    def test_non_bcrypt_hash_does_not_match(self):
        assert not verify_password("anything", "plain-text")


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_and_current_user(self, client, admin_user):
        response = await client.post(
            "/api/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
        )
        assert response.status_code == 200
        assert "password" not in response.json()["data"]

        me = await client.get("/api/auth/user")
        assert me.status_code == 200
        assert me.json()["data"]["username"] == ADMIN_USERNAME

    @pytest.mark.asyncio
    async def test_wrong_password(self, client, admin_user):
        response = await client.post(
            "/api/auth/login", json={"username": ADMIN_USERNAME, "password": "nope-nope"}
        )
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_logout_clears_session(self, admin_client):
        await admin_client.post("/api/auth/logout")
        response = await admin_client.get("/api/auth/user")
        assert response.status_code == 401


class TestRegister:
    @pytest.mark.asyncio
    async def test_register_creates_plain_user(self, client):
        response = await client.post(
            "/api/auth/register",
            json={
                "username": "student",
                "password": "student-pass",
                "email": "student@fullsco.com",
                "full_name": "A Student",
            },
        )
        assert response.status_code == 201
        assert response.json()["data"]["role"] == "user"

        # Logged in, but not an admin
        users = await client.get("/api/users/")
        assert users.status_code == 403

    @pytest.mark.asyncio
    async def test_duplicate_username(self, client, admin_user):
        response = await client.post(
            "/api/auth/register",
            json={
                "username": ADMIN_USERNAME,
                "password": "another-pass",
                "email": "other@fullsco.com",
                "full_name": "Other",
            },
        )
        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_password_longer_than_bcrypt_limit(self, client):
        response = await client.post(
            "/api/auth/register",
            json={
                "username": "student",
                "password": "x" * 100,
                "email": "student@fullsco.com",
                "full_name": "A Student",
            },
        )
        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "body.password"

    @pytest.mark.asyncio
    async def test_multibyte_password_counts_bytes(self, client):
        # 40 characters, 80 bytes
        response = await client.post(
            "/api/auth/register",
            json={
                "username": "student",
                "password": "\u00e9" * 40,
                "email": "student@fullsco.com",
                "full_name": "A Student",
            },
        )
        assert response.status_code == 400


class TestUsersAdmin:
    @pytest.mark.asyncio
    async def test_anonymous_gets_401(self, client):
        response = await client.get("/api/users/")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_admin_lists_users_without_passwords(self, admin_client):
        response = await admin_client.get("/api/users/")
        assert response.status_code == 200
        users = response.json()["data"]
        assert [u["username"] for u in users] == [ADMIN_USERNAME]
        assert all("password" not in u for u in users)


class TestAdminSeed:
    @pytest.mark.asyncio
    async def test_seed_once(self, db):
        service = UsersService(db)
        first = await service.ensure_admin("root", "root-pass", "root@fullsco.com", "Root")
        again = await service.ensure_admin("root", "other-pass", "root@fullsco.com", "Root")
        assert first.id == again.id
        assert first.role == UserRole.ADMIN

    @pytest.mark.asyncio
    async def test_no_password_skips_seed(self, db):
        assert await UsersService(db).ensure_admin("root", "", "root@fullsco.com", "Root") is None

    @pytest.mark.asyncio
    async def test_seed_rejects_overlong_password(self, db):
        with pytest.raises(ValidationFailedError):
            await UsersService(db).ensure_admin("root", "p" * 100, "root@fullsco.com", "Root")
