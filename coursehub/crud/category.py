from sqlalchemy.orm import Session
from sqlalchemy import asc
from typing import List, Optional

from coursehub.models.category import Category as CategoryModel
from coursehub.schemas.category import CategoryCreate
from coursehub.navbar.routing import catalog_slug

def get_categories(db: Session) -> List[CategoryModel]:
    """Получить все категории в порядке создания."""
    return db.query(CategoryModel).order_by(asc(CategoryModel.id)).all()

def get_category_by_slug(db: Session, slug: str) -> Optional[CategoryModel]:
    """Получить категорию по slug (сегмент из /catalog/<slug>)."""
    return db.query(CategoryModel).filter(CategoryModel.slug == slug.lower()).first()

def create_category(db: Session, category: CategoryCreate) -> CategoryModel:
    """Создать новую категорию."""
    db_category = CategoryModel(
        name=category.name.strip(),
        slug=catalog_slug(category.name),
        description=category.description,
    )
    db.add(db_category)
    db.commit()
    db.refresh(db_category)
    return db_category
