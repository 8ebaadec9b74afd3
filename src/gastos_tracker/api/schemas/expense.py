"""Schemas para el parsing de mensajes de gasto."""

from decimal import Decimal

from pydantic import BaseModel, Field

from gastos_tracker.models.enums import ClassificationTier
from gastos_tracker.schemas.expense import ProcessedExpense


class ExpenseParseRequest(BaseModel):
    """Mensaje de gasto en lenguaje natural."""

    mensaje: str = Field(
        ...,
        max_length=1000,
        description="Ej: '25,50 uber a casa. Tarjeta'",
        examples=["50 almuerzo en restaurante", "1500 supermercado. Tarjeta de credito"],
    )


class ExpenseParseResponse(BaseModel):
    """Gasto parseado y clasificado."""

    monto: Decimal = Field(..., gt=0)
    descripcion: str
    medio_pago: str
    subcategoria: str | None
    subcategory_id: str | None = Field(None, description="Solo si la resolvió la búsqueda en BD")
    nivel_clasificacion: ClassificationTier
    score: int
    respuesta: str = Field(..., description="Texto de confirmación para el usuario")

    @classmethod
    def from_processed(cls, result: ProcessedExpense, respuesta: str) -> "ExpenseParseResponse":
        """Arma la respuesta a partir de un mensaje procesado con monto."""
        if result.parsed.amount is None or result.classification is None:
            raise ValueError("El mensaje procesado no tiene monto")

        return cls(
            monto=result.parsed.amount,
            descripcion=result.parsed.description,
            medio_pago=result.parsed.payment_method_name,
            subcategoria=result.classification.subcategory_name,
            subcategory_id=result.classification.subcategory_id,
            nivel_clasificacion=result.classification.tier,
            score=result.classification.score,
            respuesta=respuesta,
        )
