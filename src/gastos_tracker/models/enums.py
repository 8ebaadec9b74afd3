"""
Enums centralizados del sistema de gastos.

Este módulo define los enums usados en modelos y resultados para garantizar
consistencia y type-safety.
"""

from enum import Enum


class ClassificationTier(str, Enum):
    """Nivel del pipeline que resolvió la clasificación."""

    LOCAL = "local"  # Catálogo de sinónimos en memoria
    REMOTE_FALLBACK = "remote_fallback"  # Búsqueda de keywords en base de datos
    DEFAULT = "default"  # Ningún nivel encontró match

    def __str__(self) -> str:
        """Retorna el valor del enum como string."""
        return self.value


class PaymentMethodType(str, Enum):
    """Tipos de medio de pago."""

    CASH = "efectivo"
    DEBIT = "debito"
    CREDIT = "credito"
    TRANSFER = "transferencia"
    WALLET = "billetera_virtual"

    def __str__(self) -> str:
        """Retorna el valor del enum como string."""
        return self.value
