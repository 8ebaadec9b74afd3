"""Tests para el orquestador de clasificación en tres niveles."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from gastos_tracker.models.enums import ClassificationTier
from gastos_tracker.schemas.expense import ClassificationResult, SubcategoryMatch
from gastos_tracker.services.classification_orchestrator import ClassificationOrchestrator
from gastos_tracker.services.local_classifier import LocalClassifier
from gastos_tracker.services.synonym_catalog import SynonymCatalog


class FakeSubcategoryLookup:
    """Búsqueda remota en memoria que registra las consultas."""

    def __init__(self, result: SubcategoryMatch | None = None) -> None:
        self.result = result
        self.calls: list[str] = []

    def find_by_substring_match(self, description: str) -> SubcategoryMatch | None:
        self.calls.append(description)
        return self.result


@pytest.fixture
def local() -> LocalClassifier:
    return LocalClassifier(SynonymCatalog({"Restaurantes": ["restaurante", "almuerzo"]}))


class TestLocalTier:
    """Nivel LOCAL."""

    def test_local_hit(self, local: LocalClassifier) -> None:
        remote = FakeSubcategoryLookup(SubcategoryMatch(id="sub-1", name="Regalos"))
        orchestrator = ClassificationOrchestrator(local=local, remote=remote)

        result = orchestrator.classify("almuerzo en restaurante")

        assert result == ClassificationResult(
            subcategory_name="Restaurantes",
            score=20,
            tier=ClassificationTier.LOCAL,
        )
        assert remote.calls == []

    def test_default_catalog(self) -> None:
        result = ClassificationOrchestrator().classify("almuerzo en restaurante")

        assert result.tier == ClassificationTier.LOCAL
        assert result.subcategory_name == "Restaurantes"


class TestRemoteTier:
    """Nivel REMOTE_FALLBACK."""

    def test_remote_hit(self, local: LocalClassifier) -> None:
        remote = FakeSubcategoryLookup(SubcategoryMatch(id="sub-1", name="Regalos"))
        orchestrator = ClassificationOrchestrator(local=local, remote=remote)

        result = orchestrator.classify("cumple de sofi")

        assert result == ClassificationResult(
            subcategory_name="Regalos",
            score=0,
            tier=ClassificationTier.REMOTE_FALLBACK,
            subcategory_id="sub-1",
        )
        assert remote.calls == ["cumple de sofi"]

    def test_remote_miss_uses_default(self, local: LocalClassifier) -> None:
        remote = FakeSubcategoryLookup(None)
        result = ClassificationOrchestrator(local=local, remote=remote).classify("xyz abc")

        assert result.tier == ClassificationTier.DEFAULT
        assert result.subcategory_name == "Otros no clasificados"
        assert remote.calls == ["xyz abc"]

    def test_remote_error_is_a_miss(self, local: LocalClassifier) -> None:
        """Un fallo del nivel remoto no se propaga."""
        remote = MagicMock()
        remote.find_by_substring_match.side_effect = ConnectionError("timeout")

        result = ClassificationOrchestrator(local=local, remote=remote).classify("xyz abc")

        assert result.tier == ClassificationTier.DEFAULT
        assert result.subcategory_name == "Otros no clasificados"
        remote.find_by_substring_match.assert_called_once_with("xyz abc")

    @pytest.mark.parametrize(
        "response",
        [
            SimpleNamespace(id=None, name=None),
            SimpleNamespace(id="sub-1", name=None),
            SimpleNamespace(id=None, name="Regalos"),
            SimpleNamespace(id="sub-1", name="  "),
            SimpleNamespace(name="Regalos"),
            "Regalos",
        ],
    )
    def test_malformed_remote_response_is_a_miss(
        self, local: LocalClassifier, response: object
    ) -> None:
        remote = MagicMock()
        remote.find_by_substring_match.return_value = response

        result = ClassificationOrchestrator(local=local, remote=remote).classify("xyz abc")

        assert result == ClassificationResult(
            subcategory_name="Otros no clasificados",
            score=0,
            tier=ClassificationTier.DEFAULT,
        )

    def test_remote_called_once(self, local: LocalClassifier) -> None:
        """Sin reintentos dentro de un nivel."""
        remote = MagicMock()
        remote.find_by_substring_match.side_effect = TimeoutError()

        ClassificationOrchestrator(local=local, remote=remote).classify("xyz abc")

        assert remote.find_by_substring_match.call_count == 1


class TestDefaultTier:
    """Nivel DEFAULT."""

    def test_no_remote_configured(self, local: LocalClassifier) -> None:
        result = ClassificationOrchestrator(local=local).classify("xyz abc")

        assert result == ClassificationResult(
            subcategory_name="Otros no clasificados",
            score=0,
            tier=ClassificationTier.DEFAULT,
        )

    def test_custom_default(self, local: LocalClassifier) -> None:
        orchestrator = ClassificationOrchestrator(local=local, default_subcategory="Varios")
        assert orchestrator.classify("").subcategory_name == "Varios"

    @pytest.mark.parametrize("description", ["", "   ", "de la"])
    def test_empty_description(self, local: LocalClassifier, description: str) -> None:
        result = ClassificationOrchestrator(local=local).classify(description)
        assert result.tier == ClassificationTier.DEFAULT


def test_tier_str_is_value() -> None:
    assert str(ClassificationTier.REMOTE_FALLBACK) == "remote_fallback"
