"""Router de Gastos - parsing y clasificación de mensajes."""

from fastapi import APIRouter

from gastos_tracker.api.dependencies import ExpenseService
from gastos_tracker.api.errors import AmountNotFoundError
from gastos_tracker.api.schemas.expense import ExpenseParseRequest, ExpenseParseResponse


router = APIRouter(prefix="/expenses")


@router.post("/parse", response_model=ExpenseParseResponse)
def parse_expense(payload: ExpenseParseRequest, service: ExpenseService) -> ExpenseParseResponse:
    """
    Parsea y clasifica un mensaje de gasto.

    Formato: `<monto> <descripción>[. <medio de pago>]`

    - `50 almuerzo en restaurante` → Restaurantes, Efectivo
    - `25,50 uber a casa. Tarjeta de credito` → Taxi y apps de viaje

    No guarda el gasto. Si el mensaje no tiene monto devuelve 422
    `AMOUNT_NOT_FOUND`.
    """
    result = service.process(payload.mensaje)
    if not result.has_amount:
        raise AmountNotFoundError(payload.mensaje)

    return ExpenseParseResponse.from_processed(result, service.build_reply(result))
