from typing import List, Optional
from pydantic import BaseModel

class NavLink(BaseModel):
    """Статическая ссылка навбара. path=None - у пункта нет своей страницы (Catalog)."""
    title: str
    path: Optional[str] = None

    class Config:
        frozen = True

CATALOG_TITLE = "Catalog"

NAVBAR_LINKS: List[NavLink] = [
    NavLink(title="Home", path="/"),
    NavLink(title=CATALOG_TITLE),
    NavLink(title="About Us", path="/about"),
    NavLink(title="Contact Us", path="/contact"),
]

# Фиксированные адреса кнопок
HOME_PATH = "/"
LOGIN_PATH = "/login"
SIGNUP_PATH = "/signup"
CART_PATH = "/dashboard/cart"
