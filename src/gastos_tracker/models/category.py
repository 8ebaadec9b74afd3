"""Modelos de categorías y subcategorías."""

__all__ = ["Category", "Subcategory", "split_keywords"]

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gastos_tracker.core.database import Base


def split_keywords(raw: str | None) -> list[str]:
    """Convierte keywords separadas por coma en lista, sin vacíos."""
    if not raw:
        return []
    return [k.strip() for k in raw.split(",") if k.strip()]


class Category(Base):
    """
    Modelo para categorías principales de gastos.

    Ejemplos: Comida, Transporte, Servicios, Salud, Hogar.
    """

    __tablename__ = "categories"

    # Identificadores
    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
        comment="UUID único de la categoría",
    )

    # Información
    nombre: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        index=True,
        comment="Nombre de la categoría",
    )
    icono: Mapped[str] = mapped_column(
        String(10),
        default="📦",
        comment="Emoji o icono para la categoría",
    )

    # Metadatos
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        comment="Fecha de creación",
    )

    # Relaciones
    subcategories: Mapped[list["Subcategory"]] = relationship(
        "Subcategory",
        back_populates="category",
        cascade="all, delete-orphan",
        order_by="Subcategory.nombre",
    )

    def __repr__(self) -> str:
        """Representación en string del modelo."""
        return f"<Category(nombre={self.nombre})>"


class Subcategory(Base):
    """
    Modelo para subcategorías granulares.

    Ejemplos:
    - Comida/Restaurantes: almuerzo, cena, parrilla
    - Transporte/Taxi y apps de viaje: uber, taxi, cabify
    """

    __tablename__ = "subcategories"

    # Identificadores
    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid4()),
        comment="UUID único de la subcategoría",
    )
    category_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("categories.id", ondelete="CASCADE"),
        index=True,
        comment="ID de la categoría padre",
    )

    # Información
    nombre: Mapped[str] = mapped_column(
        String(100),
        comment="Nombre de la subcategoría (ej: Restaurantes, Farmacia)",
    )
    icono: Mapped[str] = mapped_column(
        String(10),
        default="🔹",
        comment="Emoji o icono para la subcategoría",
    )

    # Palabras clave para categorización automática
    keywords: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Palabras clave separadas por coma para auto-categorización",
    )

    # Metadatos
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        comment="Fecha de creación",
    )

    # Relaciones
    category: Mapped["Category"] = relationship(
        "Category",
        back_populates="subcategories",
    )

    # Índices
    __table_args__ = (Index("ix_subcategories_category_nombre", "category_id", "nombre"),)

    def __repr__(self) -> str:
        """Representación en string del modelo."""
        return f"<Subcategory(nombre={self.nombre}, category={self.category_id})>"

    @property
    def keyword_list(self) -> list[str]:
        """Keywords como lista."""
        return split_keywords(self.keywords)

    @property
    def nombre_completo(self) -> str:
        """Retorna el nombre completo (Categoría/Subcategoría)."""
        if self.category:
            return f"{self.category.nombre}/{self.nombre}"
        return self.nombre
