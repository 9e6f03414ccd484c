"""Inicialización del Firebase Admin SDK (una app por proceso)."""
from __future__ import annotations
import firebase_admin
from firebase_admin import credentials
from .settings import Settings
from .errors import MissingCredentialsError
from .logging import get_logger

log = get_logger()

TOKEN_URI = "https://oauth2.googleapis.com/token"

def service_account_info(settings: Settings) -> dict:
    """Arma el dict de service account; la private key viene con \\n escapados."""
    return {
        "type": "service_account",
        "project_id": settings.firebase_project_id,
        "client_email": settings.firebase_client_email,
        "private_key": settings.firebase_private_key.replace("\\n", "\n"),
        "token_uri": TOKEN_URI,
    }

def get_admin_app(settings: Settings, require_credentials: bool = False) -> firebase_admin.App:
    """Retorna la app ya inicializada o la crea.

    Sin credenciales completas se usa inicialización por defecto (solo projectId),
    salvo que require_credentials=True, en cuyo caso se lanza MissingCredentialsError.
    """
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    options = {"projectId": settings.firebase_project_id}
    if not settings.has_firebase_credentials:
        if require_credentials:
            raise MissingCredentialsError(
                "Faltan las variables de entorno GMX_FIREBASE_CLIENT_EMAIL y/o GMX_FIREBASE_PRIVATE_KEY"
            )
        log.warning("firebase_default_init", project_id=settings.firebase_project_id)
        return firebase_admin.initialize_app(options=options)

    cred = credentials.Certificate(service_account_info(settings))
    app = firebase_admin.initialize_app(cred, options=options)
    log.info("firebase_initialized", project_id=settings.firebase_project_id)
    return app
