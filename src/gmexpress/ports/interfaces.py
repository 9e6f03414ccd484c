"""Puertos hexagonales (interfaces) y DTOs."""
from __future__ import annotations
from enum import Enum
from typing import Callable, Literal, Protocol
from pydantic import BaseModel, ConfigDict, Field, PositiveInt

class ItemType(str, Enum):
    PRODUCT = "producto"
    SERVICE = "servicio"

class CartItem(BaseModel):
    """Línea del carrito. Identidad = (id, type)."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    price: str = Field(description="Precio formateado, ej: $16.990")
    price_number: int = Field(alias="priceNumber")
    quantity: PositiveInt
    type: ItemType
    image: str | None = None
    stock: int | None = None

    @property
    def key(self) -> tuple[str, ItemType]:
        return (self.id, self.type)

class NewCartItem(BaseModel):
    """Item a agregar: sin cantidad y con priceNumber opcional."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    price: str
    price_number: int = Field(default=0, alias="priceNumber")
    type: ItemType
    image: str | None = None
    stock: int | None = None

class CartTotals(BaseModel):
    """Resumen formateado de totales."""
    model_config = ConfigDict(populate_by_name=True)

    subtotal: str
    tax: str
    total: str
    item_count: int = Field(alias="itemCount")

class CartUpdatedEvent(BaseModel):
    """Notificación emitida después de cada escritura exitosa."""
    name: Literal["cart-updated"] = "cart-updated"
    items: list[CartItem]

class DeleteUserRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    user_id: str | None = Field(default=None, alias="userId")
    admin_token: str | None = Field(default=None, alias="adminToken")

class ApiResponse(BaseModel):
    """Cuerpo estándar de respuesta: {success, error?, message?}."""
    success: bool
    error: str | None = None
    message: str | None = None

class IdentityRecord(BaseModel):
    uid: str
    email: str | None = None
    display_name: str | None = None

class IdentityPage(BaseModel):
    users: list[IdentityRecord]
    next_page_token: str | None = None

CartListener = Callable[[CartUpdatedEvent], None]

class CartStoragePort(Protocol):
    available: bool
    def read(self) -> str | None: ...
    def write(self, value: str) -> None: ...

class IdentityPort(Protocol):
    def verify_id_token(self, token: str) -> str: ...
    def delete_user(self, uid: str) -> None: ...
    def list_users(self, max_results: int = 1000, page_token: str | None = None) -> IdentityPage: ...

class UserDirectoryPort(Protocol):
    def exists(self, uid: str) -> bool: ...
    def get_role(self, uid: str) -> str | None: ...
    def delete(self, uid: str) -> None: ...

class CategoryPort(Protocol):
    def exists_by_name(self, name: str) -> bool: ...
    def add(self, name: str, created_by: str) -> str: ...
