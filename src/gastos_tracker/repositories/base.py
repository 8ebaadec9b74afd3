"""Base Repository Pattern.

Proporciona las operaciones de lectura comunes siguiendo el Repository Pattern.
Cada entidad tiene su propio repository que hereda de BaseRepository.
"""

from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from gastos_tracker.core.database import Base


# Tipo genérico para modelos SQLAlchemy
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Repositorio base de solo lectura.

    Attributes:
        model: Clase del modelo SQLAlchemy
        db: Sesión de base de datos

    Example:
        ```python
        class PaymentMethodRepository(BaseRepository[PaymentMethod]):
            def __init__(self, db: Session) -> None:
                super().__init__(PaymentMethod, db)
        ```
    """

    def __init__(self, model: type[ModelType], db: Session) -> None:
        """
        Inicializa el repositorio.

        Args:
            model: Clase del modelo SQLAlchemy
            db: Sesión de base de datos activa
        """
        self.model = model
        self.db = db

    def get(self, entity_id: str) -> ModelType | None:
        """
        Obtiene una entidad por ID.

        Args:
            entity_id: ID de la entidad

        Returns:
            Entidad encontrada o None
        """
        stmt = select(self.model).where(self.model.id == entity_id)
        return self.db.execute(stmt).scalar_one_or_none()
