"""Selección del storage del carrito según configuración."""
from __future__ import annotations
from ...core.settings import Settings
from ...ports.interfaces import CartStoragePort
from .memory_storage import MemoryStorage
from .null_storage import NullStorage
from .sql_storage import SqlSlotStorage

def build_cart_storage(settings: Settings) -> CartStoragePort:
    """Crea el storage indicado por settings.storage_backend (sql|memory|none)."""
    if settings.storage_backend == "sql":
        return SqlSlotStorage(settings.cart_storage_key)
    if settings.storage_backend == "memory":
        return MemoryStorage(settings.cart_storage_key)
    return NullStorage()
