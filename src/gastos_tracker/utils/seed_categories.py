"""Utilidad para crear la taxonomía y los medios de pago iniciales."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from gastos_tracker.core.database import get_session
from gastos_tracker.core.logging import get_logger
from gastos_tracker.models.category import Category, Subcategory
from gastos_tracker.models.enums import PaymentMethodType
from gastos_tracker.models.payment_method import PaymentMethod
from gastos_tracker.services.payment_method_matcher import DEFAULT_PAYMENT_METHODS
from gastos_tracker.utils.spanish_synonyms import TAXONOMY


logger = get_logger(__name__)


PAYMENT_METHOD_DETAILS: dict[str, tuple[PaymentMethodType, str]] = {
    "Efectivo": (PaymentMethodType.CASH, "💵"),
    "Tarjeta de débito": (PaymentMethodType.DEBIT, "💳"),
    "Tarjeta de crédito": (PaymentMethodType.CREDIT, "💳"),
    "Transferencia": (PaymentMethodType.TRANSFER, "🏦"),
    "Mercado Pago": (PaymentMethodType.WALLET, "📱"),
}


def _seed_taxonomy(session: Session) -> int:
    existing = session.scalar(select(func.count()).select_from(Category))
    if existing:
        logger.info(f"Ya existen {existing} categorías, omitiendo seed de taxonomía")
        return 0

    total_subcats = 0
    for nombre, icono, subcategories in TAXONOMY:
        category = Category(nombre=nombre, icono=icono)
        session.add(category)
        session.flush()  # Para obtener el ID

        session.add_all(
            Subcategory(
                category_id=category.id,
                nombre=sub_nombre,
                icono=sub_icono,
                keywords=",".join(keywords),
            )
            for sub_nombre, sub_icono, keywords in subcategories
        )
        total_subcats += len(subcategories)

    logger.success(f"✅ Creadas {len(TAXONOMY)} categorías y {total_subcats} subcategorías")
    return total_subcats


def _seed_payment_methods(session: Session) -> int:
    existing = session.scalar(select(func.count()).select_from(PaymentMethod))
    if existing:
        logger.info(f"Ya existen {existing} medios de pago, omitiendo seed")
        return 0

    for entry in DEFAULT_PAYMENT_METHODS:
        tipo, icono = PAYMENT_METHOD_DETAILS[entry.name]
        session.add(
            PaymentMethod(
                nombre=entry.name,
                tipo=tipo.value,
                icono=icono,
                keywords=",".join(entry.keywords),
                activo=True,
            )
        )

    logger.success(f"✅ Creados {len(DEFAULT_PAYMENT_METHODS)} medios de pago")
    return len(DEFAULT_PAYMENT_METHODS)


def seed_catalog(session: Session | None = None) -> tuple[int, int]:
    """
    Carga categorías, subcategorías y medios de pago si las tablas están vacías.

    Args:
        session: Sesión a usar; si no se pasa se abre una nueva

    Returns:
        (subcategorías creadas, medios de pago creados)
    """
    if session is None:
        with get_session() as own_session:
            return seed_catalog(own_session)

    logger.info("Cargando catálogo inicial...")
    created = (_seed_taxonomy(session), _seed_payment_methods(session))
    session.commit()
    return created


if __name__ == "__main__":
    seed_catalog()
