from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

# --- Pydantic Схемы Категории ---

class CategoryBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None

    # 💡 Обрезаем пробелы ДО проверки длины: имя из одних пробелов должно дать 422
    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

class CategoryCreate(CategoryBase):
    pass

class Category(CategoryBase):
    id: int
    slug: str

    class Config:
        from_attributes = True

# --- Ответы API в конверте { success, data } ---

class CategoryListResponse(BaseModel):
    success: bool = True
    data: List[Category]

class CategoryResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: Category
