"""
Configuración de fixtures para pytest.

Las variables de entorno se definen antes de cualquier import de la app:
la configuración y el engine se crean al importar.

Estrategia de Testing:
- Tests unitarios sin base de datos (catálogos en memoria, fakes)
- Tests de repositorios y API sobre SQLite en memoria, una BD nueva por test
"""

import os
from pathlib import Path
import tempfile

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


# Setup de variables de entorno ANTES de cualquier import de la app
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault(
    "LOGS_DIRECTORY", str(Path(tempfile.gettempdir()) / "gastos_tracker_tests" / "logs")
)


@pytest.fixture
def session() -> Session:
    """Sesión sobre una base SQLite en memoria con todas las tablas creadas."""
    from gastos_tracker import models  # noqa: F401
    from gastos_tracker.core.database import Base

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    db = TestSession()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def seeded_session(session: Session) -> Session:
    """Sesión con la taxonomía y los medios de pago iniciales cargados."""
    from gastos_tracker.utils.seed_categories import seed_catalog

    seed_catalog(session)
    return session
