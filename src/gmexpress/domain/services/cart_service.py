"""Servicio de carrito: estado de la compra pendiente sobre un slot persistido.

- Cada lectura rehidrata desde el storage (no hay copia en memoria entre llamadas).
- Cada escritura exitosa emite "cart-updated" con la lista nueva.
- Sin storage disponible todo es no-op / lectura vacía.
- Concurrencia entre contextos: gana la última escritura.
"""
from __future__ import annotations
import json
from typing import Any, Iterable, Mapping
from kink import di
from pydantic import TypeAdapter, ValidationError
from ...core.settings import Settings
from ...core.logging import get_logger
from ...ports.interfaces import (
    CartItem, CartStoragePort, CartTotals, CartUpdatedEvent, NewCartItem,
)
from ..events import CartEvents
from ..pricing import calc_tax, format_price, price_to_number

log = get_logger()

_items_adapter = TypeAdapter(list[CartItem])

class CartStore:
    """Carrito de compras persistido en un slot clave/valor."""

    def __init__(self, storage: CartStoragePort | None = None, events: CartEvents | None = None,
                 settings: Settings | None = None):
        self.storage = storage if storage is not None else di[CartStoragePort]
        self.events = events if events is not None else di[CartEvents]
        self.settings = settings or di[Settings]

    # --- lectura / escritura ---
    def get(self) -> list[CartItem]:
        """Retorna los items actuales; lista vacía si no hay datos o están corruptos."""
        if not self.storage.available:
            return []
        try:
            stored = self.storage.read()
            if not stored:
                return []
            return _items_adapter.validate_python(json.loads(stored))
        except Exception as e:
            log.error("cart_read_failed", error=str(e))
            return []

    def save(self, items: Iterable[CartItem]) -> None:
        """Valida, sobrescribe el slot y notifica.

        Items inválidos o errores de escritura se registran y se descartan sin tocar el slot.
        """
        if not self.storage.available:
            return
        try:
            items = _items_adapter.validate_python(list(items))
        except ValidationError as e:
            log.error("cart_save_rejected", error=str(e))
            return
        try:
            self.storage.write(_items_adapter.dump_json(items, by_alias=True, exclude_none=True).decode())
        except Exception:
            log.exception("cart_write_failed", items_count=len(items))
            return
        log.info("cart_saved", items_count=len(items))
        self.events.publish(CartUpdatedEvent(items=items))

    # --- mutaciones ---
    def add(self, item: NewCartItem | Mapping[str, Any], quantity: int | None = None) -> None:
        """Agrega un item o incrementa su cantidad si (id, type) ya existe.

        Sin quantity explícita se usa la clave "quantity" del item, o 1.
        """
        if quantity is None and isinstance(item, Mapping):
            quantity = item.get("quantity")
        qty = quantity or 1
        if qty < 0:
            raise ValueError(f"cantidad inválida: {quantity}")
        new = item if isinstance(item, NewCartItem) else NewCartItem.model_validate(item)
        cart = self.get()
        existing = next((c for c in cart if c.key == (new.id, new.type)), None)
        if existing:
            existing.quantity += qty
        else:
            cart.append(CartItem(
                **new.model_dump(exclude={"price_number"}),
                price_number=new.price_number or price_to_number(new.price),
                quantity=qty,
            ))
        self.save(cart)

    def remove(self, index: int) -> None:
        """Elimina la línea en index; índices fuera de rango no hacen nada."""
        cart = self.get()
        if 0 <= index < len(cart):
            del cart[index]
            self.save(cart)

    def update(self, index: int, quantity: int) -> None:
        """Fija la cantidad de una línea; quantity <= 0 la elimina."""
        cart = self.get()
        if 0 <= index < len(cart):
            if quantity <= 0:
                del cart[index]
            else:
                cart[index].quantity = quantity
            self.save(cart)

    def clear(self) -> None:
        """Vacía el carrito."""
        self.save([])

    # --- totales ---
    def subtotal(self, items: Iterable[CartItem] | None = None) -> int:
        cart = self.get() if items is None else items
        return sum(i.price_number * i.quantity for i in cart)

    def tax(self, subtotal: int | None = None) -> int:
        sub = self.subtotal() if subtotal is None else subtotal
        return calc_tax(sub, self.settings.tax_rate)

    def total(self, items: Iterable[CartItem] | None = None) -> int:
        sub = self.subtotal(items)
        return sub + self.tax(sub)

    def totals(self) -> CartTotals:
        """Resumen con subtotal, IVA y total formateados más la cantidad de unidades."""
        cart = self.get()
        sub = self.subtotal(cart)
        iva = self.tax(sub)
        return CartTotals(
            subtotal=self.format(sub),
            tax=self.format(iva),
            total=self.format(sub + iva),
            item_count=sum(i.quantity for i in cart),
        )

    def format(self, value: int) -> str:
        return format_price(value, self.settings.currency_symbol, self.settings.thousands_separator)
