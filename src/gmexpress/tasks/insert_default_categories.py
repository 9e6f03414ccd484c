"""Inserta las categorías por defecto en Firestore (idempotente por nombre)."""
from __future__ import annotations
import argparse
import sys
from dataclasses import dataclass
from typing import Iterable
from kink import di
from ..core.di import bootstrap_di
from ..core.errors import MissingCredentialsError
from ..core.firebase import get_admin_app
from ..core.logging import get_logger
from ..core.settings import Settings
from ..ports.interfaces import CategoryPort

log = get_logger()

DEFAULT_CATEGORIES = ["Pizza", "Ensalada", "Bebidas", "Desayuno", "Carnes"]
CREATED_BY = "system-migration"

@dataclass
class InsertResult:
    inserted: int = 0
    skipped: int = 0
    errors: int = 0

def insert_categories(categories: CategoryPort, names: Iterable[str] = DEFAULT_CATEGORIES) -> InsertResult:
    """Agrega cada categoría que no exista todavía."""
    result = InsertResult()
    for name in names:
        try:
            if categories.exists_by_name(name):
                print(f'Categoría "{name}" ya existe, saltando...')
                result.skipped += 1
                continue
            doc_id = categories.add(name, created_by=CREATED_BY)
            log.info("category_inserted", name=name, doc_id=doc_id)
            print(f'Categoría "{name}" insertada correctamente')
            result.inserted += 1
        except Exception as e:
            log.error("category_insert_failed", name=name, error=str(e))
            print(f'Error al insertar categoría "{name}": {e}')
            result.errors += 1
    return result

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Inserta las categorías por defecto en Firestore")
    parser.add_argument("--category", action="append", dest="categories",
                        help="Categoría a insertar (repetible); por defecto la lista estándar")
    args = parser.parse_args(argv)

    bootstrap_di()
    try:
        get_admin_app(di[Settings], require_credentials=True)
        result = insert_categories(di[CategoryPort], args.categories or DEFAULT_CATEGORIES)
    except MissingCredentialsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        log.exception("category_migration_failed")
        print(f"Error fatal: {e}", file=sys.stderr)
        return 1
    print(f"Resultado: {result.inserted} insertadas, {result.skipped} ya existían")
    return 0

if __name__ == "__main__":
    sys.exit(main())
