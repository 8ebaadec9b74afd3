#!/usr/bin/env python3
"""Parsea y clasifica mensajes de gasto desde la terminal.

Usa los catálogos incluidos con la aplicación, sin base de datos.

Uso:
    python scripts/classify_message.py "50 almuerzo en restaurante"
    python scripts/classify_message.py "25,50 uber a casa. Tarjeta" "1500 super"
    python scripts/classify_message.py --reply "300 farmacia. debito"
"""

import argparse
from pathlib import Path
import sys

# Agregar src al path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from gastos_tracker.schemas.expense import ProcessedExpense
from gastos_tracker.services.expense_message_service import ExpenseMessageService


def print_result(message: str, result: ProcessedExpense) -> None:
    """Muestra el resultado del pipeline para un mensaje."""
    parsed = result.parsed
    print(f"📨 {message!r}")
    print(f"   Monto:        {parsed.amount if parsed.amount is not None else '-'}")
    print(f"   Descripción:  {parsed.description}")
    print(f"   Medio de pago: {parsed.payment_method_name}")

    if result.classification is None:
        print("   ⚠️  Sin monto, no se clasifica")
        return

    classification = result.classification
    print(
        f"   Subcategoría: {classification.subcategory_name} "
        f"[{classification.tier}, score={classification.score}]"
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Parsea y clasifica mensajes de gasto")
    parser.add_argument("messages", nargs="+", help="Mensajes a procesar")
    parser.add_argument(
        "--reply",
        action="store_true",
        help="Mostrar también el texto de confirmación para el usuario",
    )
    args = parser.parse_args()

    service = ExpenseMessageService.from_sources()
    for message in args.messages:
        result = service.process(message)
        print_result(message, result)
        if args.reply:
            print()
            print(service.build_reply(result))
        print()


if __name__ == "__main__":
    main()
