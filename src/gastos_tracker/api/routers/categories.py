"""Router de Categorías - Solo lectura."""

from fastapi import APIRouter

from gastos_tracker.api.dependencies import DBSession
from gastos_tracker.api.errors import NotFoundError
from gastos_tracker.api.schemas.category import (
    CategoryListResponse,
    CategoryResponse,
    SubcategoryResponse,
)
from gastos_tracker.repositories.category_repository import (
    CategoryRepository,
    SubcategoryRepository,
)


router = APIRouter(prefix="/categories")


@router.get("", response_model=CategoryListResponse)
def list_categories(db: DBSession) -> CategoryListResponse:
    """Lista todas las categorías con sus subcategorías y keywords."""
    categories = CategoryRepository(db).list_with_subcategories()

    return CategoryListResponse(
        items=[CategoryResponse.model_validate(c) for c in categories],
        total=len(categories),
    )


@router.get("/subcategories/all", response_model=list[SubcategoryResponse])
def list_all_subcategories(db: DBSession) -> list[SubcategoryResponse]:
    """Lista todas las subcategorías ordenadas por nombre."""
    subcategories = SubcategoryRepository(db).list_all()
    return [SubcategoryResponse.model_validate(s) for s in subcategories]


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: str, db: DBSession) -> CategoryResponse:
    """Obtiene una categoría por ID con sus subcategorías."""
    category = CategoryRepository(db).get(category_id)
    if not category:
        raise NotFoundError("Categoría", category_id, code="CATEGORY_NOT_FOUND")

    return CategoryResponse.model_validate(category)
