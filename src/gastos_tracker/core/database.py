"""
Configuración de SQLAlchemy y manejo de sesiones de base de datos.

La base de datos guarda la taxonomía (categorías, subcategorías con sus
keywords) y los medios de pago. El pipeline de clasificación solo la lee.
"""

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from gastos_tracker.config.settings import settings
from gastos_tracker.core.logging import get_logger


logger = get_logger(__name__)

# Base para modelos SQLAlchemy
Base = declarative_base()


def _create_engine(database_url: str | None = None) -> Engine:
    """
    Crea el engine de SQLAlchemy.

    Args:
        database_url: URL de conexión opcional (por defecto la de settings)

    Returns:
        Engine de SQLAlchemy configurado
    """
    url = database_url or settings.get_database_url()

    if url.startswith("sqlite"):
        logger.info("Conectando a SQLite...")
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    logger.info("🐘 Conectando a PostgreSQL...")
    return create_engine(
        url,
        echo=settings.is_development(),
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
    )


# Engine de SQLAlchemy
engine = _create_engine()

# SessionLocal para crear sesiones de base de datos
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """
    Context manager para obtener una sesión de base de datos.

    Yields:
        Session: Sesión de SQLAlchemy

    Example:
        >>> from gastos_tracker.core.database import get_session
        >>> with get_session() as session:
        ...     methods = PaymentMethodRepository(session).list_active()
    """
    session = SessionLocal()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(bind: Any = None) -> None:
    """
    Inicializa la base de datos creando todas las tablas.

    Args:
        bind: Engine o conexión alternativa (por defecto el engine global)
    """
    logger.info("Inicializando base de datos...")

    # Importar los modelos para que SQLAlchemy los registre
    from gastos_tracker import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.success("Base de datos inicializada correctamente")


__all__ = ["Base", "engine", "SessionLocal", "get_session", "init_db"]
