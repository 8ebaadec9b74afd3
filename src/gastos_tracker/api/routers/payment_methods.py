"""Router de Medios de Pago - Solo lectura."""

from fastapi import APIRouter

from gastos_tracker.api.dependencies import DBSession
from gastos_tracker.api.schemas.category import PaymentMethodListResponse, PaymentMethodResponse
from gastos_tracker.repositories.payment_method_repository import PaymentMethodRepository


router = APIRouter(prefix="/payment-methods")


@router.get("", response_model=PaymentMethodListResponse)
def list_payment_methods(db: DBSession) -> PaymentMethodListResponse:
    """Lista los medios de pago activos que reconoce el parser."""
    methods = PaymentMethodRepository(db).list_active()

    return PaymentMethodListResponse(
        items=[PaymentMethodResponse.model_validate(m) for m in methods],
        total=len(methods),
    )
