"""Fixtures compartidos: carrito sobre storage en memoria y fakes de Firebase."""
from __future__ import annotations

import os

os.environ.setdefault("GMX_STORAGE_BACKEND", "memory")

import pytest

from gmexpress.connectors.storage.memory_storage import MemoryStorage
from gmexpress.core.errors import UserNotFoundError
from gmexpress.core.settings import Settings
from gmexpress.domain.events import CartEvents
from gmexpress.domain.services.cart_service import CartStore
from gmexpress.ports.interfaces import IdentityPage, IdentityRecord


class FakeIdentity:
    """Identidad en memoria: tokens -> uid, usuarios paginados."""

    def __init__(self, tokens=None, users=None, page_size=2):
        self.tokens = dict(tokens or {})
        self.users = list(users or [])
        self.page_size = page_size
        self.deleted: list[str] = []
        self.fail_delete: dict[str, Exception] = {}
        self.pages_requested = 0

    def verify_id_token(self, token: str) -> str:
        if token not in self.tokens:
            raise ValueError("token inválido")
        return self.tokens[token]

    def delete_user(self, uid: str) -> None:
        if uid in self.fail_delete:
            raise self.fail_delete[uid]
        if uid not in [u.uid for u in self.users]:
            raise UserNotFoundError(uid)
        self.users = [u for u in self.users if u.uid != uid]
        self.deleted.append(uid)

    def list_users(self, max_results: int = 1000, page_token: str | None = None) -> IdentityPage:
        self.pages_requested += 1
        start = int(page_token or 0)
        size = min(max_results, self.page_size)
        chunk = self.users[start:start + size]
        nxt = start + size
        return IdentityPage(users=chunk, next_page_token=str(nxt) if nxt < len(self.users) else None)


class FakeDirectory:
    """Documentos users/{uid} en un dict."""

    def __init__(self, docs=None):
        self.docs = dict(docs or {})
        self.fail_delete: Exception | None = None
        self.fail_read: Exception | None = None

    def exists(self, uid: str) -> bool:
        return uid in self.docs

    def get_role(self, uid: str) -> str | None:
        if self.fail_read:
            raise self.fail_read
        doc = self.docs.get(uid)
        return doc.get("role") if doc is not None else None

    def delete(self, uid: str) -> None:
        if self.fail_delete:
            raise self.fail_delete
        self.docs.pop(uid, None)


class FakeCategories:
    def __init__(self, names=None):
        self.docs = [{"name": n, "createdBy": "manual"} for n in (names or [])]
        self.fail_on: set[str] = set()

    def exists_by_name(self, name: str) -> bool:
        return any(d["name"] == name for d in self.docs)

    def add(self, name: str, created_by: str) -> str:
        if name in self.fail_on:
            raise RuntimeError("firestore no disponible")
        self.docs.append({"name": name, "createdBy": created_by})
        return f"cat-{len(self.docs)}"


def make_user(uid: str, email: str | None = None, name: str | None = None) -> IdentityRecord:
    return IdentityRecord(uid=uid, email=email, display_name=name)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, storage_backend="memory")


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def events() -> CartEvents:
    return CartEvents()


@pytest.fixture
def store(storage, events, settings) -> CartStore:
    return CartStore(storage, events, settings)


@pytest.fixture
def received(events) -> list:
    """Eventos cart-updated recibidos durante el test."""
    got: list = []
    events.subscribe(got.append)
    return got


@pytest.fixture
def pizza() -> dict:
    return {"id": "p1", "name": "Pizza Napolitana", "price": "$16.990", "type": "producto"}
