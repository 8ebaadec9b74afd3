"""
Tests de API para los endpoints de gastos, categorías y medios de pago.

La API usa una base SQLite en memoria con el catálogo inicial cargado.
"""

from collections.abc import Iterator
from decimal import Decimal
import warnings

from fastapi.testclient import TestClient
import pytest
from sqlalchemy.orm import Session

from gastos_tracker.api.main import app
from gastos_tracker.models.category import Category, Subcategory
from gastos_tracker.services.expense_message_service import AMOUNT_NOT_FOUND_MESSAGE


@pytest.fixture
def client(seeded_session: Session) -> Iterator[TestClient]:
    """Cliente de tests con sesión de DB de tests."""
    from gastos_tracker.api.dependencies import get_db

    def override_get_db():
        yield seeded_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


class TestParseExpense:
    """Tests para POST /api/v1/expenses/parse."""

    def test_local_classification(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/expenses/parse", json={"mensaje": "50 almuerzo en restaurante"}
        )

        assert response.status_code == 200
        data = response.json()
        assert Decimal(str(data["monto"])) == Decimal("50")
        assert data["descripcion"] == "almuerzo en restaurante"
        assert data["medio_pago"] == "Efectivo"
        assert data["subcategoria"] == "Restaurantes"
        assert data["subcategory_id"] is None
        assert data["nivel_clasificacion"] == "local"
        assert data["score"] == 20
        assert data["respuesta"].startswith("✅ *Gasto registrado*")

    def test_payment_method_from_database(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/expenses/parse", json={"mensaje": "25,50 uber a casa. Tarjeta de credito"}
        )

        assert response.status_code == 200
        data = response.json()
        assert Decimal(str(data["monto"])) == Decimal("25.50")
        assert data["subcategoria"] == "Taxi y apps de viaje"
        assert data["medio_pago"] == "Tarjeta de crédito"

    def test_remote_fallback(self, client: TestClient, seeded_session: Session) -> None:
        """Keywords que solo existen en la BD resuelven por el nivel remoto."""
        category = Category(nombre="Solidaridad", icono="🤝")
        seeded_session.add(category)
        seeded_session.flush()
        subcategory = Subcategory(
            category_id=category.id, nombre="Donaciones", keywords="unicef"
        )
        seeded_session.add(subcategory)
        seeded_session.commit()

        response = client.post("/api/v1/expenses/parse", json={"mensaje": "300 unicef"})

        assert response.status_code == 200
        data = response.json()
        assert data["subcategoria"] == "Donaciones"
        assert data["subcategory_id"] == subcategory.id
        assert data["nivel_clasificacion"] == "remote_fallback"
        assert data["score"] == 0

    def test_default_classification(self, client: TestClient) -> None:
        response = client.post("/api/v1/expenses/parse", json={"mensaje": "80 xyzxyz qwqwqw"})

        assert response.status_code == 200
        data = response.json()
        assert data["subcategoria"] == "Otros no clasificados"
        assert data["nivel_clasificacion"] == "default"
        assert "(sin clasificar)" in data["respuesta"]

    def test_amount_not_found(self, client: TestClient) -> None:
        response = client.post("/api/v1/expenses/parse", json={"mensaje": "almuerzo sin monto"})

        assert response.status_code == 422
        data = response.json()
        assert data["code"] == "AMOUNT_NOT_FOUND"
        assert data["error"] == AMOUNT_NOT_FOUND_MESSAGE
        assert data["path"] == "/api/v1/expenses/parse"

    def test_missing_body_field(self, client: TestClient) -> None:
        response = client.post("/api/v1/expenses/parse", json={})

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_422_responses_use_current_status_constant(self, client: TestClient) -> None:
        """Los 422 no usan constantes de status deprecadas."""
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            client.post("/api/v1/expenses/parse", json={"mensaje": "sin monto"})
            client.post("/api/v1/expenses/parse", json={})

        assert not [w for w in caught if "HTTP_422" in str(w.message)]


class TestCatalogEndpoints:
    """Tests para los listados de solo lectura."""

    def test_list_categories(self, client: TestClient) -> None:
        response = client.get("/api/v1/categories")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 13
        comida = next(c for c in data["items"] if c["nombre"] == "Comida")
        assert "Restaurantes" in [s["nombre"] for s in comida["subcategories"]]

    def test_get_category(self, client: TestClient) -> None:
        items = client.get("/api/v1/categories").json()["items"]

        response = client.get(f"/api/v1/categories/{items[0]['id']}")

        assert response.status_code == 200
        assert response.json()["nombre"] == items[0]["nombre"]

    def test_get_category_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/categories/no-existe")

        assert response.status_code == 404
        assert response.json()["code"] == "CATEGORY_NOT_FOUND"

    def test_list_all_subcategories(self, client: TestClient) -> None:
        response = client.get("/api/v1/categories/subcategories/all")

        assert response.status_code == 200
        assert len(response.json()) == 44

    def test_list_payment_methods(self, client: TestClient) -> None:
        response = client.get("/api/v1/payment-methods")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 5
        assert {m["nombre"] for m in data["items"]} >= {"Efectivo", "Mercado Pago"}


class TestRootEndpoints:
    """Tests para root y health."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "environment": "testing"}

    def test_root(self, client: TestClient) -> None:
        assert client.get("/").json()["status"] == "running"

    def test_correlation_id_propagated(self, client: TestClient) -> None:
        response = client.get("/health", headers={"X-Correlation-ID": "abc123"})
        assert response.headers["X-Correlation-ID"] == "abc123"

    def test_correlation_id_generated(self, client: TestClient) -> None:
        response = client.get("/api/v1/payment-methods")
        assert len(response.headers["X-Correlation-ID"]) == 8
