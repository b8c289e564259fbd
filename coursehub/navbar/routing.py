import re
from typing import Optional

CATALOG_ROUTE = "/catalog/:catalogName"

_WHITESPACE = re.compile(r"\s+")


def _segments(path: str) -> list:
    return [segment for segment in path.strip().split("/") if segment]


def match_route(pattern: Optional[str], pathname: str) -> bool:
    """
    Совпадает ли текущий путь с шаблоном маршрута.

    Сегмент шаблона с префиксом ":" - параметр, он совпадает с любым непустым сегментом.
    Число сегментов должно совпадать, завершающий "/" не важен, регистр литералов тоже.
    Используется только для подсветки активной ссылки.
    """
    if not pattern:
        return False

    expected = _segments(pattern)
    actual = _segments(pathname or "")

    if len(expected) != len(actual):
        return False

    for want, got in zip(expected, actual):
        if want.startswith(":"):
            continue
        if want.lower() != got.lower():
            return False
    return True


def catalog_slug(name: str) -> str:
    """"Web  Development" -> "web-development"."""
    return _WHITESPACE.sub("-", name.strip()).lower()


def catalog_path(name: str) -> str:
    return f"/catalog/{catalog_slug(name)}"
