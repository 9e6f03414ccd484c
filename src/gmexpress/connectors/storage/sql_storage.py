"""Storage durable: slot en la tabla storage_slots vía SQLAlchemy."""
from __future__ import annotations
from ...repo import slots

class SqlSlotStorage:
    """Adapter del puerto de storage sobre el repositorio de slots."""
    available = True

    def __init__(self, key: str = "gmexpress-cart"):
        self.key = key

    def read(self) -> str | None:
        return slots.read_slot(self.key)

    def write(self, value: str) -> None:
        slots.write_slot(self.key, value)
