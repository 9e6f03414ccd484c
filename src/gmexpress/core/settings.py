"""Configuraciones Pydantic Settings para la tienda."""
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    """Configuración de la aplicación. Se carga desde env y .env.

    Las credenciales de Firebase deben venir siempre por env. Nunca hardcode.
    """
    model_config = SettingsConfigDict(env_file=".env", env_prefix="GMX_", case_sensitive=False)

    # Flask
    flask_debug: bool = Field(default=False)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # DB (slot persistido del carrito)
    database_url: str = Field(default="sqlite:///gmexpress.db", description="URL SQLAlchemy, ej: postgresql+psycopg://user:pass@db:5432/app")

    # Carrito
    storage_backend: Literal["sql", "memory", "none"] = Field(default="sql")
    cart_storage_key: str = Field(default="gmexpress-cart")
    tax_rate: float = Field(default=0.19, ge=0, description="IVA chileno")
    currency_symbol: str = Field(default="$")
    thousands_separator: str = Field(default=".")

    # Firebase Admin
    firebase_project_id: str = Field(default="gmexpress-estesi")
    firebase_client_email: str = Field(default="")
    firebase_private_key: str = Field(default="", description="Private key con \\n escapados")

    @property
    def has_firebase_credentials(self) -> bool:
        return bool(self.firebase_client_email and self.firebase_private_key)
