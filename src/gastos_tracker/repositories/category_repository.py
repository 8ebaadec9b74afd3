"""Repositories para Categorías y Subcategorías."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from gastos_tracker.core.logging import get_logger
from gastos_tracker.models.category import Category, Subcategory
from gastos_tracker.repositories.base import BaseRepository
from gastos_tracker.schemas.expense import SubcategoryMatch
from gastos_tracker.utils.text import normalize_text


logger = get_logger(__name__)


class CategoryRepository(BaseRepository[Category]):
    """Repositorio de categorías con sus subcategorías."""

    def __init__(self, db: Session) -> None:
        super().__init__(Category, db)

    def list_with_subcategories(self) -> list[Category]:
        """Lista las categorías ordenadas por nombre, con subcategorías cargadas."""
        stmt = (
            select(self.model)
            .options(selectinload(self.model.subcategories))
            .order_by(self.model.nombre)
        )
        return list(self.db.execute(stmt).scalars().all())


class SubcategoryRepository(BaseRepository[Subcategory]):
    """
    Repositorio de subcategorías.

    Implementa la búsqueda remota de keywords que usa el orquestador de
    clasificación cuando el catálogo local no encuentra match.
    """

    def __init__(self, db: Session) -> None:
        super().__init__(Subcategory, db)

    def find_by_substring_match(self, description: str) -> SubcategoryMatch | None:
        """
        Busca la primera subcategoría con alguna keyword contenida en la descripción.

        La comparación ignora mayúsculas y acentos. Las subcategorías se
        recorren por nombre, así el resultado es reproducible.

        Args:
            description: Descripción del gasto

        Returns:
            SubcategoryMatch o None si ninguna keyword aparece
        """
        text = normalize_text(description)
        if not text:
            return None

        stmt = (
            select(self.model)
            .where(self.model.keywords.is_not(None))
            .order_by(self.model.nombre)
        )
        for subcategory in self.db.execute(stmt).scalars():
            for keyword in subcategory.keyword_list:
                normalized = normalize_text(keyword)
                if normalized and normalized in text:
                    logger.debug(
                        f"Keyword '{keyword}' encontrada en BD → {subcategory.nombre}"
                    )
                    return SubcategoryMatch(id=subcategory.id, name=subcategory.nombre)

        return None

    def find_by_name(self, nombre: str) -> Subcategory | None:
        """
        Busca una subcategoría por nombre, sin distinguir mayúsculas.

        Args:
            nombre: Nombre de la subcategoría

        Returns:
            Subcategoría encontrada o None
        """
        stmt = select(self.model).where(func.lower(self.model.nombre) == nombre.lower())
        return self.db.execute(stmt).scalars().first()

    def list_all(self) -> list[Subcategory]:
        """Lista todas las subcategorías ordenadas por nombre."""
        stmt = select(self.model).order_by(self.model.nombre)
        return list(self.db.execute(stmt).scalars().all())
