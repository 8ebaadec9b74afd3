"""Tests para la carga inicial del catálogo."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from gastos_tracker.models.category import Category, Subcategory
from gastos_tracker.models.payment_method import PaymentMethod
from gastos_tracker.repositories.category_repository import SubcategoryRepository
from gastos_tracker.services.synonym_catalog import get_synonym_catalog
from gastos_tracker.utils.seed_categories import seed_catalog


def test_seed_creates_catalog(session: Session) -> None:
    assert seed_catalog(session) == (44, 5)

    assert session.scalar(select(func.count()).select_from(Category)) == 13
    assert session.scalar(select(func.count()).select_from(Subcategory)) == 44
    assert session.scalar(select(func.count()).select_from(PaymentMethod)) == 5


def test_seed_is_idempotent(session: Session) -> None:
    seed_catalog(session)

    assert seed_catalog(session) == (0, 0)
    assert session.scalar(select(func.count()).select_from(Subcategory)) == 44


def test_seeded_keywords_match_synonym_catalog(seeded_session: Session) -> None:
    restaurantes = SubcategoryRepository(seeded_session).find_by_name("Restaurantes")

    assert restaurantes is not None
    assert restaurantes.category.nombre == "Comida"
    assert tuple(restaurantes.keyword_list) == get_synonym_catalog()["Restaurantes"]


def test_seeded_payment_methods(seeded_session: Session) -> None:
    tarjeta = seeded_session.execute(
        select(PaymentMethod).where(PaymentMethod.nombre == "Tarjeta de crédito")
    ).scalar_one()

    assert tarjeta.tipo == "credito"
    assert tarjeta.activo is True
    assert "visa" in tarjeta.keyword_list
