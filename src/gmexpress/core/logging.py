"""Logging JSON con structlog y trace_id contextual."""
from __future__ import annotations
import structlog
import sys
from uuid import uuid4
from contextvars import ContextVar

trace_id_ctx: ContextVar[str] = ContextVar("trace_id", default="-")

_configured = False

def set_trace_id(value: str | None = None) -> str:
    """Define trace_id en el contexto actual y retorna el valor usado."""
    tid = value or uuid4().hex
    trace_id_ctx.set(tid)
    return tid

def _inject_trace_id(_, __, event_dict: dict) -> dict:
    return {**event_dict, "trace_id": trace_id_ctx.get()}

def configure_logging(level: int = 20) -> None:
    """Configura structlog una sola vez por proceso."""
    global _configured
    if _configured:
        return
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            _inject_trace_id,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
    )
    _configured = True

def get_logger() -> structlog.stdlib.BoundLogger:
    """Crea logger JSON con trace_id inyectado automáticamente."""
    configure_logging()
    return structlog.get_logger()
