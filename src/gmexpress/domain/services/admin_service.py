"""Servicio de administración: eliminación completa de un usuario (Auth + Firestore)."""
from __future__ import annotations
from kink import di
from ...core.errors import AdminApiError, UserNotFoundError
from ...core.logging import get_logger
from ...ports.interfaces import IdentityPort, UserDirectoryPort

log = get_logger()

ADMIN_ROLE = "admin"

def delete_user(user_id: str | None, admin_token: str | None,
                identity: IdentityPort | None = None, directory: UserDirectoryPort | None = None) -> str:
    """Elimina user_id de Authentication y su documento en Firestore.

    Solo un admin autenticado puede hacerlo y nunca sobre sí mismo.
    Retorna el mensaje de éxito; cualquier rechazo se lanza como AdminApiError.
    """
    if not user_id:
        raise AdminApiError(400, "Se requiere el ID del usuario")
    if not admin_token:
        raise AdminApiError(401, "Se requiere token de autenticación")

    identity = identity or di[IdentityPort]
    directory = directory or di[UserDirectoryPort]

    try:
        admin_uid = identity.verify_id_token(admin_token)
        role = directory.get_role(admin_uid)
    except Exception as e:
        log.warning("admin_token_rejected", error=str(e))
        raise AdminApiError(401, "Token inválido o expirado") from e

    if role != ADMIN_ROLE:
        log.warning("admin_forbidden", uid=admin_uid, role=role)
        raise AdminApiError(403, "No tienes permisos de administrador")
    if user_id == admin_uid:
        raise AdminApiError(400, "No puedes eliminarte a ti mismo")

    try:
        identity.delete_user(user_id)
    except UserNotFoundError:
        # Ya no existe en Auth; se sigue con Firestore.
        log.info("admin_auth_user_absent", user_id=user_id)
    except Exception as e:
        log.error("admin_auth_delete_failed", user_id=user_id, error=str(e))
        raise AdminApiError(500, f"Error al eliminar de Authentication: {str(e) or 'Error desconocido'}") from e

    try:
        directory.delete(user_id)
    except Exception as e:
        log.error("admin_firestore_delete_failed", user_id=user_id, error=str(e))
        raise AdminApiError(500, f"Usuario eliminado de Auth pero error en Firestore: {str(e) or 'Error desconocido'}") from e

    log.info("admin_delete_user_ok", user_id=user_id, admin_uid=admin_uid)
    return "Usuario eliminado completamente de Authentication y Firestore"
