"""Modelo de medios de pago."""

__all__ = ["PaymentMethod"]

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gastos_tracker.core.database import Base
from gastos_tracker.models.category import split_keywords
from gastos_tracker.models.enums import PaymentMethodType


class PaymentMethod(Base):
    """
    Modelo para medios de pago (efectivo, tarjetas, transferencias).

    El usuario indica el medio de pago al final del mensaje, después de un
    punto: "50 almuerzo. Tarjeta". Las keywords permiten reconocerlo.
    """

    __tablename__ = "payment_methods"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
        comment="UUID único del medio de pago",
    )

    nombre: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        index=True,
        comment="Nombre del medio de pago (ej: Efectivo, Tarjeta de crédito)",
    )
    tipo: Mapped[str] = mapped_column(
        String(30),
        default=PaymentMethodType.CASH.value,
        comment="Tipo: efectivo, debito, credito, transferencia, billetera_virtual",
    )
    icono: Mapped[str] = mapped_column(
        String(10),
        default="💳",
        comment="Emoji o icono del medio de pago",
    )
    keywords: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Palabras clave separadas por coma para reconocer el medio de pago",
    )
    activo: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        index=True,
        comment="Solo los medios activos participan del matching",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        comment="Fecha de creación",
    )

    def __repr__(self) -> str:
        """Representación en string del modelo."""
        return f"<PaymentMethod(nombre={self.nombre}, tipo={self.tipo})>"

    @property
    def keyword_list(self) -> list[str]:
        """Keywords como lista."""
        return split_keywords(self.keywords)
