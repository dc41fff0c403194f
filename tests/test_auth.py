"""Testes de registro, login e /me"""
from sqlalchemy import func, select

from clubsite.core.database import SessionLocal
from clubsite.models.user import User


def count_users(email):
    with SessionLocal() as db:
        return db.execute(select(func.count(User.id)).filter(User.email == email)).scalar()


class TestRegister:

    def test_register_returns_user_and_token(self, client):
        response = client.post(
            "/api/auth/register",
            json={"name": "Alice", "email": "a@x.com", "password": "secret1"},
        )
        assert response.status_code == 201
        data = response.json()
        assert set(data) == {"id", "name", "email", "role", "token"}
        assert data["name"] == "Alice"
        assert data["email"] == "a@x.com"
        assert data["role"] == "user"
        assert data["token"]

    def test_password_is_stored_hashed(self, client, register):
        register("Alice", "a@x.com", "secret1")
        with SessionLocal() as db:
            user = db.execute(select(User).filter(User.email == "a@x.com")).scalar_one()
        assert user.password != "secret1"
        assert user.password.startswith("$2")

    def test_duplicate_email_is_conflict(self, client, register):
        register("Alice", "a@x.com", "secret1")
        response = client.post(
            "/api/auth/register",
            json={"name": "Other", "email": "a@x.com", "password": "another1"},
        )
        assert response.status_code == 400
        assert response.json()["message"] == "User already exists"
        assert count_users("a@x.com") == 1

    def test_email_is_case_insensitive(self, client, register):
        register("Alice", "a@x.com", "secret1")
        response = client.post(
            "/api/auth/register",
            json={"name": "Alice", "email": "A@X.com", "password": "secret1"},
        )
        assert response.status_code == 400
        assert count_users("a@x.com") == 1

    def test_validation_errors_list_fields(self, client):
        response = client.post(
            "/api/auth/register",
            json={"name": "  ", "email": "not-an-email", "password": "123"},
        )
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation failed"
        fields = {error["field"] for error in body["errors"]}
        assert fields == {"name", "email", "password"}

    def test_missing_body_fields(self, client):
        response = client.post("/api/auth/register", json={"email": "a@x.com"})
        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert {"name", "password"} <= fields


class TestLogin:

    def test_alice_scenario(self, client, register):
        registered = register("Alice", "a@x.com", "secret1")

        response = client.post("/api/auth/login", json={"email": "a@x.com", "password": "secret1"})
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == registered["id"]
        assert data["token"]

        response = client.post("/api/auth/login", json={"email": "a@x.com", "password": "wrong"})
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    def test_unknown_email_and_wrong_password_look_the_same(self, client, register):
        register("Alice", "a@x.com", "secret1")
        wrong_password = client.post("/api/auth/login", json={"email": "a@x.com", "password": "nope123"})
        unknown_email = client.post("/api/auth/login", json={"email": "b@x.com", "password": "nope123"})
        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()

    def test_login_validates_payload(self, client):
        response = client.post("/api/auth/login", json={"email": "bad", "password": ""})
        assert response.status_code == 400


class TestMe:

    def test_me_returns_current_user_without_password(self, client, register):
        token = register("Alice", "a@x.com", "secret1")["token"]
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        data = response.json()
        assert data["email"] == "a@x.com"
        assert data["role"] == "user"
        assert "createdAt" in data
        assert "password" not in data

    def test_me_without_token(self, client):
        response = client.get("/api/auth/me")
        assert response.status_code == 401
        assert response.json()["message"] == "Not authorized, no token"

    def test_me_with_invalid_token(self, client):
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.json()["message"] == "Not authorized, token failed"

    def test_me_with_non_bearer_scheme(self, client, register):
        token = register()["token"]
        response = client.get("/api/auth/me", headers={"Authorization": f"Basic {token}"})
        assert response.status_code == 401

    def test_token_for_deleted_user_fails(self, client, register):
        data = register("Alice", "a@x.com", "secret1")
        with SessionLocal() as db:
            db.delete(db.get(User, data["id"]))
            db.commit()
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {data['token']}"})
        assert response.status_code == 401
