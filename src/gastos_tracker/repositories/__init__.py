"""Repositorios para acceso a datos.

Implementan el Repository Pattern para separar el acceso a datos de la
lógica de clasificación. Son de solo lectura: la taxonomía se carga con
`seed_catalog`.

Uso:
    ```python
    from gastos_tracker.repositories import SubcategoryRepository

    repo = SubcategoryRepository(db)
    match = repo.find_by_substring_match("pago de luz")
    ```
"""

from gastos_tracker.repositories.base import BaseRepository
from gastos_tracker.repositories.category_repository import (
    CategoryRepository,
    SubcategoryRepository,
)
from gastos_tracker.repositories.payment_method_repository import PaymentMethodRepository


__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "PaymentMethodRepository",
    "SubcategoryRepository",
]
