"""Dependencias compartidas para FastAPI."""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from gastos_tracker.core.database import get_session
from gastos_tracker.repositories.category_repository import SubcategoryRepository
from gastos_tracker.repositories.payment_method_repository import PaymentMethodRepository
from gastos_tracker.services.expense_message_service import ExpenseMessageService


# =============================================================================
# DATABASE
# =============================================================================


def get_db() -> Generator[Session, None, None]:
    """Dependency para obtener sesión de base de datos."""
    with get_session() as session:
        yield session


DBSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# SERVICIOS
# =============================================================================


def get_expense_service(db: DBSession) -> ExpenseMessageService:
    """
    Servicio de mensajes de gasto respaldado por la base de datos.

    Las subcategorías de la BD son el fallback remoto del clasificador y los
    medios de pago activos son el catálogo del parser.
    """
    return ExpenseMessageService.from_sources(
        subcategory_lookup=SubcategoryRepository(db),
        payment_source=PaymentMethodRepository(db),
    )


ExpenseService = Annotated[ExpenseMessageService, Depends(get_expense_service)]
