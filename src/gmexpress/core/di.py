"""Bootstrap del contenedor de DI (kink): settings, storage del carrito y puertos Firebase."""
from kink import di
from .settings import Settings
from .db import create_session_factory
from .firebase import get_admin_app
from ..connectors.firebase.auth_adapter import FirebaseIdentityAdapter
from ..connectors.firebase.firestore_adapter import FirestoreUserDirectory, FirestoreCategories, firestore_client
from ..connectors.storage.factory import build_cart_storage
from ..domain.events import CartEvents
from ..domain.services.cart_service import CartStore
from ..ports.interfaces import CartStoragePort, IdentityPort, UserDirectoryPort, CategoryPort

def bootstrap_di(settings: Settings | None = None) -> None:
    settings = settings or Settings()
    di[Settings] = settings
    if settings.storage_backend == "sql":
        di["session_factory"] = lambda c: create_session_factory(
            settings.database_url, create_tables=settings.database_url.startswith("sqlite"),
        )
    di[CartStoragePort] = build_cart_storage(settings)
    di[CartEvents] = CartEvents()
    di[CartStore] = CartStore(di[CartStoragePort], di[CartEvents], settings)
    # Firebase: perezoso, solo se inicializa al primer uso
    di["firebase_app"] = lambda c: get_admin_app(c[Settings])
    di["firestore"] = lambda c: firestore_client(c["firebase_app"])
    di[IdentityPort] = lambda c: FirebaseIdentityAdapter(c["firebase_app"])
    di[UserDirectoryPort] = lambda c: FirestoreUserDirectory(c["firestore"])
    di[CategoryPort] = lambda c: FirestoreCategories(c["firestore"])
