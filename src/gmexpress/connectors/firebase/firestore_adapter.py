"""Adapters de Firestore: directorio de usuarios y categorías."""
from __future__ import annotations
import firebase_admin
from firebase_admin import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

USERS_COLLECTION = "users"
CATEGORIES_COLLECTION = "categories"

def firestore_client(app: firebase_admin.App):
    return firestore.client(app)

class FirestoreUserDirectory:
    """Documentos users/{uid}."""
    def __init__(self, client):
        self.users = client.collection(USERS_COLLECTION)

    def exists(self, uid: str) -> bool:
        return self.users.document(uid).get().exists

    def get_role(self, uid: str) -> str | None:
        """Rol del documento, o None si el documento no existe."""
        snap = self.users.document(uid).get()
        if not snap.exists:
            return None
        return (snap.to_dict() or {}).get("role")

    def delete(self, uid: str) -> None:
        self.users.document(uid).delete()

class FirestoreCategories:
    """Colección categories."""
    def __init__(self, client):
        self.categories = client.collection(CATEGORIES_COLLECTION)

    def exists_by_name(self, name: str) -> bool:
        docs = self.categories.where(filter=FieldFilter("name", "==", name)).limit(1).get()
        return len(docs) > 0

    def add(self, name: str, created_by: str) -> str:
        _, ref = self.categories.add({
            "name": name,
            "createdAt": firestore.SERVER_TIMESTAMP,
            "createdBy": created_by,
        })
        return ref.id
