"""Factory de sesión de SQLAlchemy 2."""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from ..repo.models import Base

def create_session_factory(database_url: str, create_tables: bool = False):
    """Crea SessionFactory síncrona para SQLAlchemy 2.

    :param database_url: URL completa del banco.
    :param create_tables: crea el esquema sin Alembic (sqlite local / tests).
    :return: sessionmaker configurado.
    """
    engine = create_engine(database_url, pool_pre_ping=True, future=True)
    if create_tables:
        Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True)
