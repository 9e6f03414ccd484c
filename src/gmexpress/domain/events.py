"""Bus de notificaciones del carrito (patrón observer)."""
from __future__ import annotations
from typing import Callable, List
from ..core.logging import get_logger
from ..ports.interfaces import CartListener, CartUpdatedEvent

log = get_logger()

class CartEvents:
    """Lista de suscriptores invocados en orden después de cada guardado."""

    def __init__(self) -> None:
        self._listeners: List[CartListener] = []

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Registra un listener y retorna la función para desuscribirlo."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, event: CartUpdatedEvent) -> None:
        # Un listener que falla no corta al resto ni llega al que escribió el carrito.
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                log.exception("cart_listener_failed", event_name=event.name)

    def __len__(self) -> int:
        return len(self._listeners)
