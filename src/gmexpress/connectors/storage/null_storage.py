"""Storage nulo: contextos sin medio de persistencia."""
from __future__ import annotations

class NullStorage:
    """Lecturas vacías y escrituras ignoradas."""
    available = False

    def read(self) -> str | None:
        return None

    def write(self, value: str) -> None:
        return None
