"""Storage en memoria del proceso, compartido por clave de slot."""
from __future__ import annotations
from typing import Dict

class MemoryStorage:
    """Slot clave/valor en un dict; útil en desarrollo y tests."""
    available = True

    def __init__(self, key: str = "gmexpress-cart", backend: Dict[str, str] | None = None):
        self.key = key
        self.backend: Dict[str, str] = backend if backend is not None else {}

    def read(self) -> str | None:
        return self.backend.get(self.key)

    def write(self, value: str) -> None:
        self.backend[self.key] = value
