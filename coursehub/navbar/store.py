from typing import Any, Callable, Dict, List, Optional

from coursehub.schemas.user import UserProfile

Listener = Callable[[Any], None]

STORE_KEYS = ("token", "user", "total_items")


class NavStore:
    """
    Общее состояние приложения, которое навбар только читает: токен, профиль, число товаров в корзине.

    Владелец стора (приложение) меняет значения через update(); подписчики узнают
    только об изменившихся ключах.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        user: Optional[UserProfile] = None,
        total_items: int = 0,
    ):
        self._values: Dict[str, Any] = {}
        self._listeners: Dict[str, List[Listener]] = {key: [] for key in STORE_KEYS}
        self._apply(token=token, user=user, total_items=total_items)

    @staticmethod
    def _check(key: str, value: Any) -> Any:
        if key not in STORE_KEYS:
            raise KeyError(f"Неизвестный ключ стора: {key}")
        if key == "total_items":
            value = int(value)
            if value < 0:
                raise ValueError("total_items не может быть отрицательным")
        if key == "user" and isinstance(value, dict):
            value = UserProfile.model_validate(value)
        return value

    def _apply(self, **values: Any) -> List[str]:
        # Сначала проверяем все значения: при ошибке стор остаётся нетронутым
        checked = {key: self._check(key, value) for key, value in values.items()}
        changed = []
        for key, value in checked.items():
            if key in self._values and self._values[key] == value:
                continue
            self._values[key] = value
            changed.append(key)
        return changed

    def get(self, key: str) -> Any:
        if key not in STORE_KEYS:
            raise KeyError(f"Неизвестный ключ стора: {key}")
        return self._values[key]

    @property
    def token(self) -> Optional[str]:
        return self._values["token"]

    @property
    def user(self) -> Optional[UserProfile]:
        return self._values["user"]

    @property
    def total_items(self) -> int:
        return self._values["total_items"]

    def subscribe(self, key: str, listener: Listener) -> Callable[[], None]:
        """Регистрирует наблюдателя ключа. Возвращает функцию отписки."""
        if key not in STORE_KEYS:
            raise KeyError(f"Неизвестный ключ стора: {key}")
        self._listeners[key].append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners[key]:
                self._listeners[key].remove(listener)

        return unsubscribe

    def update(self, **values: Any) -> None:
        for key in self._apply(**values):
            # Копия списка: слушатель может отписаться прямо в колбэке
            for listener in list(self._listeners[key]):
                listener(self._values[key])
