"""Limpieza de usuarios huérfanos: registros de Firebase Auth sin documento en users.

Script destructivo. Uso:
  gmexpress-cleanup-orphans           # pide confirmación
  gmexpress-cleanup-orphans --yes     # elimina sin preguntar
  gmexpress-cleanup-orphans --dry-run # solo lista
"""
from __future__ import annotations
import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Iterator, List
from kink import di
from ..core.di import bootstrap_di
from ..core.errors import MissingCredentialsError
from ..core.firebase import get_admin_app
from ..core.logging import get_logger
from ..core.settings import Settings
from ..ports.interfaces import IdentityPort, IdentityRecord, UserDirectoryPort

log = get_logger()

PAGE_SIZE = 1000
CONFIRM_ANSWERS = {"s", "si"}

@dataclass
class CleanupResult:
    deleted: int = 0
    errors: int = 0

def iter_identities(identity: IdentityPort, page_size: int = PAGE_SIZE) -> Iterator[IdentityRecord]:
    """Recorre todas las páginas de usuarios siguiendo el page token."""
    token: str | None = None
    while True:
        page = identity.list_users(max_results=page_size, page_token=token)
        yield from page.users
        token = page.next_page_token
        if not token:
            break

def find_orphans(identity: IdentityPort, directory: UserDirectoryPort) -> List[IdentityRecord]:
    """Usuarios de Auth cuyo documento users/{uid} no existe."""
    return [u for u in iter_identities(identity) if not directory.exists(u.uid)]

def delete_orphans(identity: IdentityPort, orphans: List[IdentityRecord]) -> CleanupResult:
    """Elimina cada huérfano de Auth; los fallos se cuentan y no detienen el resto."""
    result = CleanupResult()
    for user in orphans:
        try:
            identity.delete_user(user.uid)
            print(f"  Eliminado: {user.email or user.uid}")
            result.deleted += 1
        except Exception as e:
            log.error("orphan_delete_failed", uid=user.uid, error=str(e))
            print(f"  Error eliminando {user.email or user.uid}: {e}")
            result.errors += 1
    log.info("orphan_cleanup_done", deleted=result.deleted, errors=result.errors)
    return result

def run(identity: IdentityPort, directory: UserDirectoryPort, *, assume_yes: bool = False,
        dry_run: bool = False, ask: Callable[[str], str] = input) -> int:
    """Busca huérfanos, pide confirmación y elimina. Retorna el exit code."""
    print("Buscando usuarios huérfanos...")
    orphans = find_orphans(identity, directory)
    if not orphans:
        print("No se encontraron usuarios huérfanos. Todo está sincronizado.")
        return 0

    print(f"Se encontraron {len(orphans)} usuarios huérfanos:")
    for i, user in enumerate(orphans, start=1):
        print(f"  {i}. {user.email or 'Sin email'} ({user.display_name or 'Sin nombre'}) - UID: {user.uid}")
    if dry_run:
        return 0

    if not assume_yes:
        print("ADVERTENCIA: Esta acción es irreversible.")
        answer = ask("¿Deseas eliminar estos usuarios? (s/n): ")
        if answer.strip().lower() not in CONFIRM_ANSWERS:
            print("Operación cancelada.")
            return 0

    result = delete_orphans(identity, orphans)
    print(f"Resultado: {result.deleted} eliminados, {result.errors} errores")
    return 0

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Elimina de Firebase Auth los usuarios sin documento en Firestore")
    parser.add_argument("--yes", action="store_true", help="No pedir confirmación")
    parser.add_argument("--dry-run", action="store_true", help="Solo listar huérfanos")
    args = parser.parse_args(argv)

    bootstrap_di()
    try:
        get_admin_app(di[Settings], require_credentials=True)
        return run(di[IdentityPort], di[UserDirectoryPort], assume_yes=args.yes, dry_run=args.dry_run)
    except MissingCredentialsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        log.exception("orphan_cleanup_failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1

if __name__ == "__main__":
    sys.exit(main())
