"""Clasificación local de gastos por keywords, sin I/O."""

from gastos_tracker.core.constants import CATCH_ALL_SUBCATEGORIES, MIN_SCORE
from gastos_tracker.core.logging import get_logger
from gastos_tracker.services.keyword_scorer import best_match
from gastos_tracker.services.synonym_catalog import SynonymCatalog, get_synonym_catalog
from gastos_tracker.utils.text import extract_words


logger = get_logger(__name__)


class LocalClassifier:
    """
    Clasifica una descripción contra el catálogo de sinónimos.

    Determinístico y sin efectos secundarios: para el mismo catálogo y la
    misma descripción siempre devuelve lo mismo. Las subcategorías genéricas
    ("Otros no clasificados", "Gastos imprevistos") no participan.

    Con MIN_SCORE = 4 un único match fuzzy alcanza para clasificar si es
    la mejor señal: se privilegia recall sobre precisión.
    """

    def __init__(self, catalog: SynonymCatalog | None = None) -> None:
        self.catalog = catalog if catalog is not None else get_synonym_catalog()

    def best_match(self, description: str | None) -> tuple[str | None, int]:
        """
        Subcategoría con mayor puntaje y su puntaje.

        Returns:
            (nombre, puntaje) si el puntaje alcanza MIN_SCORE, si no (None, puntaje)
        """
        words = extract_words(description)
        if not words:
            return None, 0

        name, score = best_match(
            words,
            self.catalog.items(),
            excluded=CATCH_ALL_SUBCATEGORIES,
        )

        if name is not None and score >= MIN_SCORE:
            logger.debug(f"Clasificación local: '{description}' → {name} ({score})")
            return name, score

        logger.debug(f"Sin match local para '{description}' (mejor puntaje: {score})")
        return None, score

    def classify_local(self, description: str | None) -> str | None:
        """
        Clasifica un gasto por su descripción.

        Args:
            description: Texto libre del gasto

        Returns:
            Nombre de la subcategoría o None si no hay match suficiente

        Examples:
            >>> LocalClassifier().classify_local("almuerzo en restaurante")
            'Restaurantes'
        """
        name, _ = self.best_match(description)
        return name
