"""Adapter de Firebase Authentication para el puerto de identidad."""
from __future__ import annotations
import firebase_admin
from firebase_admin import auth
from ...core.errors import UserNotFoundError
from ...ports.interfaces import IdentityPage, IdentityRecord

class FirebaseIdentityAdapter:
    """Verificación de tokens, borrado y listado paginado de usuarios."""
    def __init__(self, app: firebase_admin.App):
        self.app = app

    def verify_id_token(self, token: str) -> str:
        """Valida el ID token y retorna el uid del emisor."""
        decoded = auth.verify_id_token(token, app=self.app)
        return decoded["uid"]

    def delete_user(self, uid: str) -> None:
        try:
            auth.delete_user(uid, app=self.app)
        except auth.UserNotFoundError as e:
            raise UserNotFoundError(uid) from e

    def list_users(self, max_results: int = 1000, page_token: str | None = None) -> IdentityPage:
        page = auth.list_users(page_token=page_token, max_results=max_results, app=self.app)
        return IdentityPage(
            users=[IdentityRecord(uid=u.uid, email=u.email, display_name=u.display_name) for u in page.users],
            next_page_token=page.next_page_token or None,
        )
