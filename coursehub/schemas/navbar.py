from pydantic import BaseModel
from typing import List, Optional

# =========================================================
# Ответ эндпоинта категорий, как его видит навбар
# =========================================================

class NavCategory(BaseModel):
    """Категория для выпадающего меню: навбару нужно только имя."""
    name: str

class CategoriesEnvelope(BaseModel):
    """Тело ответа: { success, data: [...] }. Лишние поля игнорируются."""
    success: bool = True
    data: List[NavCategory]

# =========================================================
# Отрисованное дерево навбара
# =========================================================

class LinkView(BaseModel):
    title: str
    path: str
    active: bool = False

class DropdownView(BaseModel):
    """Содержимое каталога. items=None, пока меню закрыто."""
    open: bool
    items: Optional[List[LinkView]] = None
    message: Optional[str] = None

class NavEntryView(BaseModel):
    """Пункт меню: обычная ссылка (path) или Catalog с выпадающим списком (dropdown)."""
    title: str
    path: Optional[str] = None
    active: bool = False
    dropdown: Optional[DropdownView] = None

class CartBadgeView(BaseModel):
    path: str
    # None - бейдж с числом не рисуется
    count: Optional[int] = None

class ActionClusterView(BaseModel):
    cart: Optional[CartBadgeView] = None
    login: Optional[LinkView] = None
    signup: Optional[LinkView] = None
    profile_menu: bool = False

class MobileOverlayView(BaseModel):
    entries: List[NavEntryView]
    actions: ActionClusterView

class NavbarView(BaseModel):
    brand: LinkView
    menu_toggle: bool = True
    links: List[NavEntryView]
    actions: ActionClusterView
    mobile_overlay: Optional[MobileOverlayView] = None
