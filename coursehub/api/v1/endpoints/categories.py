from fastapi import APIRouter, HTTPException, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

# Импортируем Pydantic-схемы
from coursehub.schemas.category import (
    Category,
    CategoryCreate,
    CategoryListResponse,
    CategoryResponse,
)
from coursehub.dependencies import get_db

# Импортируем CRUD
from coursehub.crud import category as crud_category
from coursehub.navbar.routing import catalog_slug

router = APIRouter(
    prefix="/course",
    tags=["Categories"],
)

@router.get("/showAllCategories", response_model=CategoryListResponse)
async def show_all_categories(db: Session = Depends(get_db)):
    """
    Возвращает все категории каталога в конверте { success, data }.
    Пустой список - нормальный ответ: навбар сам покажет "No Courses Found".
    """
    categories = crud_category.get_categories(db)
    return CategoryListResponse(
        data=[Category.model_validate(c) for c in categories],
    )

@router.post(
    "/createCategory",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_category(category: CategoryCreate, db: Session = Depends(get_db)):
    """Создание новой категории (для админа)."""

    # 💡 Два имени с одинаковым slug дали бы две категории на одном URL каталога
    conflict = HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=f"Category '{category.name}' already exists",
    )
    if crud_category.get_category_by_slug(db, catalog_slug(category.name)):
        raise conflict

    try:
        db_category = crud_category.create_category(db=db, category=category)
    except IntegrityError:
        # Параллельный запрос успел создать ту же категорию между проверкой и вставкой
        db.rollback()
        raise conflict
    return CategoryResponse(
        message="Category Created Successfully",
        data=Category.model_validate(db_category),
    )

@router.get("/catalog/{catalog_name}", response_model=CategoryResponse)
async def category_page(catalog_name: str, db: Session = Depends(get_db)):
    """Страница каталога: категория по slug из ссылки навбара."""
    category = crud_category.get_category_by_slug(db, catalog_name)

    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")

    return CategoryResponse(data=Category.model_validate(category))
