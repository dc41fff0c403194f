"""Fixtures compartilhadas: banco SQLite descartável e usuários de teste"""
import os
import tempfile
from pathlib import Path

# Configuração antes de importar a aplicação (settings é lido no import)
_TEST_DIR = Path(tempfile.mkdtemp(prefix="clubsite-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR / 'test.db'}"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["LOG_FILE"] = str(_TEST_DIR / "app.log")

import pytest
from fastapi.testclient import TestClient

import clubsite.models  # noqa: F401
from clubsite.core.database import Base, sync_engine
from clubsite.core.security import Role
from clubsite.main import app
from clubsite.manage import set_role


@pytest.fixture
def client():
    """App com banco limpo a cada teste"""
    Base.metadata.drop_all(bind=sync_engine)
    Base.metadata.create_all(bind=sync_engine)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Registra um usuário e devolve o JSON da resposta"""
    def _register(name="User", email="user@club.com", password="secret1"):
        response = client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _register


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(register):
    return bearer(register("Fan", "fan@club.com")["token"])


@pytest.fixture
def admin_headers(register):
    data = register("Coach", "coach@club.com")
    assert set_role("coach@club.com", Role.ADMIN)
    return bearer(data["token"])


@pytest.fixture
def admin_id(admin_headers, client):
    return client.get("/api/auth/me", headers=admin_headers).json()["id"]
