"""Repository para Medios de Pago."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from gastos_tracker.models.payment_method import PaymentMethod
from gastos_tracker.repositories.base import BaseRepository
from gastos_tracker.schemas.expense import KeywordEntry


class PaymentMethodRepository(BaseRepository[PaymentMethod]):
    """
    Repositorio de medios de pago.

    Es la fuente del catálogo de medios de pago para el matcher del parser.
    """

    def __init__(self, db: Session) -> None:
        super().__init__(PaymentMethod, db)

    def list_active(self) -> list[PaymentMethod]:
        """
        Lista los medios de pago activos ordenados por nombre.

        Returns:
            Lista de medios de pago activos
        """
        stmt = (
            select(self.model)
            .where(self.model.activo.is_(True))
            .order_by(self.model.nombre)
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_active_payment_methods(self) -> list[KeywordEntry]:
        """
        Catálogo de medios de pago activos con sus keywords.

        Returns:
            Entradas (nombre, keywords) en orden de nombre
        """
        return [
            KeywordEntry(name=method.nombre, keywords=tuple(method.keyword_list))
            for method in self.list_active()
        ]
