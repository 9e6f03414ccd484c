"""Tests del endpoint Flask /api/admin/delete-user."""
from __future__ import annotations

import pytest
from kink import di

from conftest import FakeDirectory, FakeIdentity, make_user
from gmexpress.api.app import app
from gmexpress.ports.interfaces import IdentityPort, UserDirectoryPort


@pytest.fixture
def client():
    di[IdentityPort] = FakeIdentity(tokens={"tok-admin": "admin-1"}, users=[make_user("victim")])
    di[UserDirectoryPort] = FakeDirectory({"admin-1": {"role": "admin"}, "victim": {}})
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def test_healthz(client):
    assert client.get("/healthz").get_json() == {"ok": True}


def test_success(client):
    r = client.post("/api/admin/delete-user", json={"userId": "victim", "adminToken": "tok-admin"})
    assert r.status_code == 200
    assert r.get_json() == {
        "success": True,
        "message": "Usuario eliminado completamente de Authentication y Firestore",
    }


@pytest.mark.parametrize("body,status", [
    ({"adminToken": "tok-admin"}, 400),
    ({"userId": "victim"}, 401),
    ({"userId": "victim", "adminToken": "otro"}, 401),
    ({"userId": "admin-1", "adminToken": "tok-admin"}, 400),
])
def test_rejections(client, body, status):
    r = client.post("/api/admin/delete-user", json=body)
    assert r.status_code == status
    data = r.get_json()
    assert data["success"] is False
    assert data["error"]
    assert "message" not in data


def test_forbidden(client):
    di[UserDirectoryPort] = FakeDirectory({"admin-1": {"role": "cliente"}})
    r = client.post("/api/admin/delete-user", json={"userId": "victim", "adminToken": "tok-admin"})
    assert r.status_code == 403
    assert r.get_json()["error"] == "No tienes permisos de administrador"


def test_malformed_body_is_internal_error(client):
    r = client.post("/api/admin/delete-user", data="{no json", content_type="application/json")
    assert r.status_code == 500
    assert r.get_json()["success"] is False
