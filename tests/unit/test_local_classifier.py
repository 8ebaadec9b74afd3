"""Tests para el clasificador local."""

import pytest

from gastos_tracker.services.local_classifier import LocalClassifier
from gastos_tracker.services.synonym_catalog import SynonymCatalog


@pytest.fixture
def classifier() -> LocalClassifier:
    """Clasificador con el catálogo por defecto."""
    return LocalClassifier()


class TestClassifyLocalDefaultCatalog:
    """Clasificación con el catálogo incluido."""

    @pytest.mark.parametrize(
        ("description", "expected"),
        [
            ("almuerzo en restaurante", "Restaurantes"),
            ("uber a casa", "Taxi y apps de viaje"),
            ("farmacia", "Farmacia"),
            ("Carga de NAFTA", "Combustible"),
            ("netflix", "Streaming"),
            ("pago del alquiler", "Alquiler"),
        ],
    )
    def test_known_descriptions(
        self, classifier: LocalClassifier, description: str, expected: str
    ) -> None:
        assert classifier.classify_local(description) == expected

    def test_exact_score(self, classifier: LocalClassifier) -> None:
        assert classifier.best_match("almuerzo en restaurante") == ("Restaurantes", 20)

    @pytest.mark.parametrize("description", ["", "   ", "de la con", None])
    def test_no_words(self, classifier: LocalClassifier, description: str | None) -> None:
        """Sin palabras significativas no hay clasificación."""
        assert classifier.best_match(description) == (None, 0)
        assert classifier.classify_local(description) is None

    def test_catch_all_never_returned(self, classifier: LocalClassifier) -> None:
        """Las subcategorías genéricas no participan del matching local."""
        assert classifier.classify_local("otros varios") is None

    def test_deterministic(self, classifier: LocalClassifier) -> None:
        results = {classifier.classify_local("cena con amigos en la parrilla") for _ in range(5)}
        assert results == {"Restaurantes"}


class TestClassifyLocalCustomCatalog:
    """Reglas de decisión sobre catálogos controlados."""

    def test_end_to_end_example(self) -> None:
        classifier = LocalClassifier(SynonymCatalog({"Comida": ["almuerzo", "restaurante"]}))
        assert classifier.best_match("almuerzo en restaurante") == ("Comida", 20)

    def test_single_fuzzy_hit_is_enough(self) -> None:
        """Un único match fuzzy (4 puntos) alcanza el mínimo."""
        classifier = LocalClassifier(SynonymCatalog({"Comida": ["almuerzo"]}))
        assert classifier.best_match("almuerso") == ("Comida", 4)

    def test_below_min_score(self) -> None:
        classifier = LocalClassifier(SynonymCatalog({"Comida": ["almuerzo"]}))
        assert classifier.best_match("zzzz") == (None, 0)

    def test_tie_keeps_catalog_order(self) -> None:
        first = LocalClassifier(SynonymCatalog({"A": ["cena"], "B": ["cena"]}))
        second = LocalClassifier(SynonymCatalog({"B": ["cena"], "A": ["cena"]}))

        assert first.classify_local("cena") == "A"
        assert second.classify_local("cena") == "B"

    def test_catch_all_excluded_even_if_only_match(self) -> None:
        classifier = LocalClassifier(
            SynonymCatalog({"Otros no clasificados": ["almuerzo"], "Gastos imprevistos": ["cena"]})
        )
        assert classifier.classify_local("almuerzo cena") is None

    def test_malformed_entry_never_matches(self) -> None:
        classifier = LocalClassifier(SynonymCatalog({"Rota": "almuerzo", "Sana": ["cena"]}))
        assert classifier.classify_local("almuerzo") is None
        assert classifier.classify_local("cena") == "Sana"

    def test_result_is_catalog_key(self) -> None:
        catalog = SynonymCatalog({"Comida": ["almuerzo"], "Taxi": ["uber"]})
        name = LocalClassifier(catalog).classify_local("uber almuerzo uber")
        assert name in catalog
        assert name == "Taxi"
