"""
Configuración centralizada del proyecto usando Pydantic Settings.

Este módulo maneja las variables de entorno necesarias para el funcionamiento
del clasificador de gastos, con validación automática.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuración principal de la aplicación."""

    # === Base de datos (PostgreSQL) ===
    postgres_host: str = Field(
        default="localhost",
        description="Host del servidor PostgreSQL",
    )
    postgres_port: int = Field(
        default=5432,
        description="Puerto del servidor PostgreSQL",
    )
    postgres_user: str = Field(
        default="gastos",
        description="Usuario de PostgreSQL",
    )
    postgres_password: str = Field(
        default="gastos_dev_2025",
        description="Contraseña de PostgreSQL",
    )
    postgres_db: str = Field(
        default="gastos_tracker",
        description="Nombre de la base de datos PostgreSQL",
    )
    database_url: str | None = Field(
        default=None,
        description="URL completa de conexión (sobrescribe los campos postgres_*)",
    )

    # === Configuración de la aplicación ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Nivel de logging",
    )
    environment: Literal["development", "production", "testing"] = Field(
        default="development",
        description="Entorno de ejecución",
    )

    # === Configuración de logging ===
    log_rotation: str = Field(
        default="10 MB",
        description="Tamaño máximo de los archivos de log antes de rotar",
    )
    log_retention: str = Field(
        default="1 month",
        description="Tiempo de retención de logs antiguos",
    )
    logs_directory: Path = Field(
        default=Path("logs"),
        description="Directorio donde se guardan los logs",
    )

    # === Clasificación de gastos ===
    default_payment_method: str = Field(
        default="Efectivo",
        description="Medio de pago asignado cuando el mensaje no indica uno reconocible",
    )
    default_subcategory: str = Field(
        default="Otros no clasificados",
        description="Subcategoría asignada cuando ningún nivel de clasificación encuentra match",
    )
    remote_fallback_enabled: bool = Field(
        default=True,
        description="Consultar keywords en base de datos si la clasificación local falla",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("default_payment_method", "default_subcategory")
    @classmethod
    def validate_defaults(cls, value: str) -> str:
        """Valida que los valores por defecto no estén vacíos."""
        if not value or value.strip() == "":
            raise ValueError("Los valores por defecto no pueden estar vacíos")
        return value.strip()

    def get_database_url(self) -> str:
        """
        Obtiene la URL de conexión a la base de datos.

        Returns:
            str: `database_url` si está definida, si no la URL de PostgreSQL
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    def is_development(self) -> bool:
        """
        Verifica si el entorno es de desarrollo.

        Returns:
            bool: True si es desarrollo
        """
        return self.environment == "development"

    def is_production(self) -> bool:
        """
        Verifica si el entorno es de producción.

        Returns:
            bool: True si es producción
        """
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Obtiene una instancia singleton de Settings.

    Esta función está decorada con lru_cache para asegurar que solo
    se cree una instancia de Settings durante la vida de la aplicación.

    Returns:
        Settings: Instancia singleton de configuración
    """
    return Settings()


# Instancia global de configuración
settings = get_settings()
