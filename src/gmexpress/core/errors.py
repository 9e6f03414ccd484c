"""Errores de dominio compartidos por servicios y adapters."""
from __future__ import annotations


class UserNotFoundError(Exception):
    """El registro de identidad no existe (ya fue eliminado)."""

    def __init__(self, uid: str):
        super().__init__(f"usuario no encontrado: {uid}")
        self.uid = uid


class AdminApiError(Exception):
    """Falla del endpoint de administración, con su status HTTP."""

    def __init__(self, status: int, error: str):
        super().__init__(error)
        self.status = status
        self.error = error


class MissingCredentialsError(RuntimeError):
    """Faltan credenciales del Firebase Admin SDK."""
