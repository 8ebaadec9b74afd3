#!/usr/bin/env python3
"""Crea las tablas y carga el catálogo inicial.

Carga las categorías, subcategorías (con las keywords del catálogo de
sinónimos) y medios de pago. Si las tablas ya tienen datos no hace nada.

Uso:
    python scripts/seed_catalog.py
"""

from pathlib import Path
import sys

# Agregar src al path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from gastos_tracker.core.database import init_db
from gastos_tracker.core.logging import get_logger
from gastos_tracker.utils.seed_categories import seed_catalog


logger = get_logger(__name__)


def main() -> None:
    """Inicializa la BD y carga el catálogo."""
    init_db()
    subcategories, payment_methods = seed_catalog()
    logger.info(
        f"Seed terminado: {subcategories} subcategorías y {payment_methods} medios de pago nuevos"
    )


if __name__ == "__main__":
    main()
