from dataclasses import dataclass

MOUSE = "mouse"
TOUCH = "touch"
PEN = "pen"


@dataclass
class UIEvent:
    """Событие указателя. stop_propagation() не даёт событию всплыть к родителям."""
    pointer_type: str = MOUSE
    propagation_stopped: bool = False

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


class DropdownController:
    """
    Видимость выпадающего меню Catalog.

    Наведение открывает/закрывает меню только для мыши: эмулированный hover
    на тач-экранах игнорируется, там работает только toggle() по клику.
    Все методы возвращают True, если состояние изменилось.
    """

    def __init__(self):
        self.is_open = False

    def _set(self, value: bool) -> bool:
        changed = self.is_open != value
        self.is_open = value
        return changed

    def pointer_enter(self, event: UIEvent) -> bool:
        if event.pointer_type != MOUSE:
            return False
        return self._set(True)

    def pointer_leave(self, event: UIEvent) -> bool:
        if event.pointer_type != MOUSE:
            return False
        return self._set(False)

    def toggle(self, event: UIEvent) -> bool:
        # Клик по Catalog внутри мобильного меню не должен закрыть само меню
        event.stop_propagation()
        return self._set(not self.is_open)


class MobileMenuController:
    """Полноэкранное мобильное меню."""

    def __init__(self):
        self.is_open = False

    def toggle(self) -> bool:
        self.is_open = not self.is_open
        return True

    def close(self) -> bool:
        changed = self.is_open
        self.is_open = False
        return changed
