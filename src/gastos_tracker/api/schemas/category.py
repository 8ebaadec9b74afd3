"""Schemas para Categorías y Medios de Pago."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SubcategoryResponse(BaseModel):
    """Schema de respuesta de subcategoría."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    category_id: str
    nombre: str
    icono: str
    keywords: str | None = Field(None, description="Palabras clave separadas por coma")


class CategoryResponse(BaseModel):
    """Schema de respuesta de categoría."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    nombre: str
    icono: str
    created_at: datetime
    subcategories: list[SubcategoryResponse] = Field(default_factory=list)


class CategoryListResponse(BaseModel):
    """Schema de respuesta de lista de categorías."""

    items: list[CategoryResponse]
    total: int


class PaymentMethodResponse(BaseModel):
    """Schema de respuesta de medio de pago."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    nombre: str
    tipo: str = Field(..., description="efectivo, debito, credito, transferencia, billetera_virtual")
    icono: str


class PaymentMethodListResponse(BaseModel):
    """Schema de respuesta de lista de medios de pago."""

    items: list[PaymentMethodResponse]
    total: int
