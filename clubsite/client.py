"""
Cliente HTTP da API do clube.

As credenciais ficam num `ClientSession` explícito e são anexadas a cada
requisição por `build_headers()`; nada é guardado em headers globais.

Uso:
    client = ClubSiteClient("http://localhost:8000")
    client.login("admin@club.com", "secret1")
    client.post("/api/players", json={...})
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests


@dataclass
class ClientSession:
    """Token e projeção do usuário logado"""
    token: Optional[str] = None
    user: Optional[Dict[str, Any]] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    @property
    def is_admin(self) -> bool:
        return bool(self.user) and self.user.get("role") == "admin"


def build_headers(session: Optional[ClientSession], extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Headers de uma requisição a partir da sessão atual"""
    headers = {"Accept": "application/json"}
    if session is not None and session.token:
        headers["Authorization"] = f"Bearer {session.token}"
    if extra:
        headers.update(extra)
    return headers


class ClubSiteClient:
    """
    `http` pode ser qualquer objeto com `request(method, url, json=, headers=)`:
    um `requests.Session` em produção ou o `TestClient` do FastAPI nos testes.
    """

    def __init__(self, base_url: str = "", http=None, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.http = http if http is not None else requests.Session()
        self.timeout = timeout
        self.session = ClientSession()

    def request(self, method: str, path: str, json: Optional[dict] = None, headers: Optional[Dict[str, str]] = None):
        kwargs = {"json": json, "headers": build_headers(self.session, headers)}
        if isinstance(self.http, requests.Session):
            kwargs["timeout"] = self.timeout
        return self.http.request(method, f"{self.base_url}{path}", **kwargs)

    def get(self, path: str, **kwargs):
        return self.request("GET", path, **kwargs)

    def post(self, path: str, json: Optional[dict] = None, **kwargs):
        return self.request("POST", path, json=json, **kwargs)

    def put(self, path: str, json: Optional[dict] = None, **kwargs):
        return self.request("PUT", path, json=json, **kwargs)

    def delete(self, path: str, **kwargs):
        return self.request("DELETE", path, **kwargs)

    def _start_session(self, response) -> Dict[str, Any]:
        response.raise_for_status()
        data = dict(response.json())
        token = data.pop("token")
        self.session = ClientSession(token=token, user=data)
        return data

    def register(self, name: str, email: str, password: str) -> Dict[str, Any]:
        response = self.post("/api/auth/register", json={"name": name, "email": email, "password": password})
        return self._start_session(response)

    def login(self, email: str, password: str) -> Dict[str, Any]:
        response = self.post("/api/auth/login", json={"email": email, "password": password})
        return self._start_session(response)

    def logout(self):
        self.session = ClientSession()
