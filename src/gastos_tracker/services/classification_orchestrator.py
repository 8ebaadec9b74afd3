"""
Orquestador de clasificación en tres niveles.

LOCAL → REMOTE_FALLBACK → DEFAULT. Cada nivel se consulta una sola vez y
solo si el anterior no encontró subcategoría. Un fallo del nivel remoto
cuenta como "sin match": la clasificación nunca falla hacia arriba.
"""

from typing import Protocol

from gastos_tracker.config.settings import settings
from gastos_tracker.core.logging import get_logger, log_classification
from gastos_tracker.models.enums import ClassificationTier
from gastos_tracker.schemas.expense import ClassificationResult, SubcategoryMatch
from gastos_tracker.services.local_classifier import LocalClassifier


logger = get_logger(__name__)


def _is_filled(value: object) -> bool:
    """True si es un string con contenido."""
    return isinstance(value, str) and bool(value.strip())


class SubcategoryLookup(Protocol):
    """Búsqueda externa de subcategorías por keyword (ej: SubcategoryRepository)."""

    def find_by_substring_match(self, description: str) -> SubcategoryMatch | None: ...


class ClassificationOrchestrator:
    """
    Clasifica descripciones de gastos combinando los tres niveles.

    Example:
        >>> orchestrator = ClassificationOrchestrator(remote=SubcategoryRepository(db))
        >>> orchestrator.classify("almuerzo en restaurante")
        ClassificationResult(subcategory_name='Restaurantes', score=20, tier=<...LOCAL...>)
    """

    def __init__(
        self,
        local: LocalClassifier | None = None,
        remote: SubcategoryLookup | None = None,
        default_subcategory: str | None = None,
    ) -> None:
        self.local = local or LocalClassifier()
        self.remote = remote
        self.default_subcategory = default_subcategory or settings.default_subcategory

    def classify(self, description: str) -> ClassificationResult:
        """
        Clasifica una descripción.

        Args:
            description: Descripción del gasto (ya separada del monto)

        Returns:
            ClassificationResult etiquetado con el nivel que lo resolvió
        """
        result = (
            self._classify_local(description)
            or self._classify_remote(description)
            or self._default_result()
        )

        log_classification(description, result.subcategory_name, str(result.tier), result.score)
        return result

    def _classify_local(self, description: str) -> ClassificationResult | None:
        name, score = self.local.best_match(description)
        if name is None:
            return None
        return ClassificationResult(
            subcategory_name=name,
            score=score,
            tier=ClassificationTier.LOCAL,
        )

    def _classify_remote(self, description: str) -> ClassificationResult | None:
        if self.remote is None:
            return None

        try:
            match = self.remote.find_by_substring_match(description)
        except Exception as e:
            logger.warning(
                f"Búsqueda remota de keywords falló ({type(e).__name__}: {e}), "
                f"se usa la subcategoría por defecto"
            )
            return None

        if match is None:
            return None

        subcategory_id = getattr(match, "id", None)
        name = getattr(match, "name", None)
        if not _is_filled(subcategory_id) or not _is_filled(name):
            logger.warning(
                f"Respuesta remota inválida para '{description}' "
                f"(id={subcategory_id!r}, name={name!r}), se usa la subcategoría por defecto"
            )
            return None

        logger.info(f"Clasificación remota: '{description}' → {name}")
        return ClassificationResult(
            subcategory_name=name,
            score=0,
            tier=ClassificationTier.REMOTE_FALLBACK,
            subcategory_id=subcategory_id,
        )

    def _default_result(self) -> ClassificationResult:
        return ClassificationResult(
            subcategory_name=self.default_subcategory,
            score=0,
            tier=ClassificationTier.DEFAULT,
        )
