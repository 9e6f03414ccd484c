"""Repositorio de slots: lectura y upsert (gana la última escritura)."""
from __future__ import annotations
from kink import di
from ..repo.models import StorageSlot
from ..core.logging import get_logger

log = get_logger()

def read_slot(key: str) -> str | None:
    """Obtiene el valor serializado del slot, o None si no existe."""
    Session = di["session_factory"]
    with Session() as s:
        row = s.get(StorageSlot, key)
        return row.value if row else None

def write_slot(key: str, value: str) -> None:
    """Sobrescribe el slot completo."""
    Session = di["session_factory"]
    with Session() as s, s.begin():
        row = s.get(StorageSlot, key)
        if row:
            row.value = value
        else:
            s.add(StorageSlot(key=key, value=value))
    log.debug("slot_written", key=key, size=len(value))
