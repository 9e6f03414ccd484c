"""API Flask: endpoint de administración para eliminar usuarios y health check."""
from __future__ import annotations
from flask import Flask, request, jsonify
from kink import di
from ..core.di import bootstrap_di
from ..core.errors import AdminApiError
from ..core.settings import Settings
from ..core.logging import set_trace_id, get_logger
from ..domain.services import admin_service
from ..ports.interfaces import ApiResponse, DeleteUserRequest

app = Flask(__name__)
bootstrap_di()
log = get_logger()

def _reply(status: int, **body):
    return jsonify(ApiResponse(**body).model_dump(exclude_none=True)), status

@app.get("/healthz")
def healthz():
    """Health check básico."""
    return {"ok": True}

@app.post("/api/admin/delete-user")
def delete_user():
    """Elimina un usuario de Authentication y Firestore.

    Cuerpo esperado:
    { "userId": "uid-a-eliminar", "adminToken": "<ID token del admin>" }
    """
    set_trace_id(request.headers.get("X-Trace-Id"))
    try:
        body = DeleteUserRequest.model_validate(request.get_json(force=True) or {})
        message = admin_service.delete_user(body.user_id, body.admin_token)
    except AdminApiError as e:
        return _reply(e.status, success=False, error=e.error)
    except Exception as e:
        log.exception("delete_user_api_error")
        return _reply(500, success=False, error=str(e) or "Error interno del servidor")
    return _reply(200, success=True, message=message)

def main() -> None:
    """Servidor de desarrollo."""
    s = di[Settings]
    app.run(host=s.host, port=s.port, debug=s.flask_debug)
