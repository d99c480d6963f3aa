import httpx
import pytest
from fastapi.testclient import TestClient

from orchid.api.deps import get_data_loader
from orchid.config import Settings
from orchid.main import create_app


@pytest.fixture
def client(settings, make_loader):
    app = create_app(settings)
    loader = make_loader()
    app.dependency_overrides[get_data_loader] = lambda: loader
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "orchid"}


def test_get_products_returns_fixture(client, products_fixture):
    response = client.get("/api/products")
    assert response.status_code == 200
    assert response.json() == products_fixture


def test_get_users_falls_back_to_fixture(client, users_fixture):
    response = client.get("/api/users")
    assert response.status_code == 200
    assert response.json() == users_fixture


@pytest.mark.parametrize("method", ["get", "post", "put", "delete"])
def test_unknown_entity_is_404(client, method):
    response = client.request(method.upper(), "/api/orders")
    assert response.status_code == 404
    assert response.json()["detail"] == "Unknown entity type: orders"


def test_post_with_invalid_json_is_400(client):
    response = client.post("/api/products", content=b"{not json", headers={"content-type": "application/json"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON"}


def test_post_echoes_collection(client, products_fixture):
    response = client.post("/api/products", json={"name": "New"})
    assert response.status_code == 200
    assert response.json() == {"success": True, "data": products_fixture}


def test_put_echoes_collection(client, users_fixture):
    response = client.put("/api/users", json={"id": 1, "status": "inactive"})
    assert response.status_code == 200
    assert response.json()["data"] == users_fixture


def test_delete_acknowledges(client):
    response = client.delete("/api/users")
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Resource deleted"}


def test_get_by_id(client, products_fixture):
    response = client.get("/api/products/2")
    assert response.status_code == 200
    assert response.json() == products_fixture[1]


def test_get_by_missing_id_is_404(client):
    assert client.get("/api/products/999").status_code == 404


def test_default_upstream_is_not_the_served_port(monkeypatch):
    monkeypatch.delenv("API_URL", raising=False)
    upstream = httpx.URL(Settings(_env_file=None).API_URL)
    assert upstream.port == 8080
