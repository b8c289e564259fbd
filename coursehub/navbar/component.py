import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence

from coursehub.navbar.controllers import DropdownController, MobileMenuController, UIEvent
from coursehub.navbar.fetcher import CategoryFetcher, CategoryFetchError
from coursehub.navbar.links import (
    CART_PATH,
    CATALOG_TITLE,
    HOME_PATH,
    LOGIN_PATH,
    NAVBAR_LINKS,
    SIGNUP_PATH,
    NavLink,
)
from coursehub.navbar.routing import CATALOG_ROUTE, catalog_path, match_route
from coursehub.navbar.store import STORE_KEYS, NavStore
from coursehub.schemas.navbar import (
    ActionClusterView,
    CartBadgeView,
    DropdownView,
    LinkView,
    MobileOverlayView,
    NavbarView,
    NavCategory,
    NavEntryView,
)
from coursehub.schemas.user import AccountType

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Loading..."
EMPTY_MESSAGE = "No Courses Found"

# Кликабельные элементы и их предки: событие всплывает слева направо
MENU_TOGGLE = "menu-toggle"
MOBILE_OVERLAY = "mobile-overlay"
MOBILE_CATALOG_TOGGLE = "mobile-catalog-toggle"
MOBILE_PROFILE = "mobile-profile"

_BUBBLE_PATHS = {
    MENU_TOGGLE: (MENU_TOGGLE,),
    MOBILE_OVERLAY: (MOBILE_OVERLAY,),
    MOBILE_CATALOG_TOGGLE: (MOBILE_CATALOG_TOGGLE, MOBILE_OVERLAY),
    MOBILE_PROFILE: (MOBILE_PROFILE, MOBILE_OVERLAY),
}

# Эти элементы существуют только внутри открытого мобильного меню
_OVERLAY_TARGETS = {MOBILE_OVERLAY, MOBILE_CATALOG_TOGGLE, MOBILE_PROFILE}


@dataclass
class NavState:
    sub_links: List[NavCategory] = field(default_factory=list)
    # Пока идёт загрузка, sub_links может содержать результат прошлого запроса
    loading: bool = False
    mobile_menu_open: bool = False
    catalog_open: bool = False


class Navbar:
    """
    Навбар: логотип, ссылки, каталог категорий, корзина и кнопки входа.

    Состояние живёт от mount() до unmount(). Авторизация и корзина приходят из NavStore
    (только чтение), категории - один запрос через CategoryFetcher на каждый mount().
    После каждого изменения вызывается on_render(NavbarView).
    """

    def __init__(
        self,
        store: NavStore,
        fetcher: CategoryFetcher,
        pathname: str = HOME_PATH,
        links: Sequence[NavLink] = NAVBAR_LINKS,
        on_render: Optional[Callable[[NavbarView], Any]] = None,
        on_navigate: Optional[Callable[[str], Any]] = None,
    ):
        self.store = store
        self.fetcher = fetcher
        self.pathname = pathname
        self.links = tuple(links)
        self.on_render = on_render
        self.on_navigate = on_navigate

        self._mounted = False
        # Номер текущего mount(): ответ от старого mount() не должен попасть в новое состояние
        self._generation = 0
        self._unsubscribers: List[Callable[[], None]] = []
        self._reset_state()

    def _reset_state(self) -> None:
        self._sub_links: List[NavCategory] = []
        self._loading = False
        self._dropdown = DropdownController()
        self._mobile = MobileMenuController()

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def state(self) -> NavState:
        return NavState(
            sub_links=list(self._sub_links),
            loading=self._loading,
            mobile_menu_open=self._mobile.is_open,
            catalog_open=self._dropdown.is_open,
        )

    # ------------------------------------------------------------------
    # Жизненный цикл
    # ------------------------------------------------------------------

    async def mount(self) -> None:
        if self._mounted:
            raise RuntimeError("Navbar уже смонтирован")

        self._generation += 1
        generation = self._generation
        self._mounted = True
        self._reset_state()
        self._unsubscribers = [
            self.store.subscribe(key, self._on_store_change) for key in STORE_KEYS
        ]
        await self._fetch_sub_links(generation)

    def unmount(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        self._mounted = False

    def _is_live(self, generation: int) -> bool:
        return self._mounted and generation == self._generation

    async def _fetch_sub_links(self, generation: int) -> None:
        self._loading = True
        self._rerender()

        sub_links = None
        try:
            sub_links = await self.fetcher.fetch()
        except CategoryFetchError as e:
            logger.error(f"Could not fetch Categories. {e}")

        if not self._is_live(generation):
            logger.debug("Навбар размонтирован до ответа, результат загрузки категорий отброшен")
            return

        if sub_links is not None:
            self._sub_links = list(sub_links)
        self._loading = False
        self._rerender()

    def _on_store_change(self, _value: Any) -> None:
        if self._mounted:
            self._rerender()

    def _rerender(self) -> None:
        if self.on_render is not None:
            self.on_render(self.render())

    # ------------------------------------------------------------------
    # Взаимодействие
    # ------------------------------------------------------------------

    def set_location(self, pathname: str) -> None:
        if pathname != self.pathname:
            self.pathname = pathname
            self._rerender()

    def catalog_pointer_enter(self, event: Optional[UIEvent] = None) -> None:
        if self._dropdown.pointer_enter(event or UIEvent()):
            self._rerender()

    def catalog_pointer_leave(self, event: Optional[UIEvent] = None) -> None:
        if self._dropdown.pointer_leave(event or UIEvent()):
            self._rerender()

    def close_mobile_menu(self) -> None:
        """Передаётся меню профиля внутри мобильного меню (closeNavbar)."""
        if self._mobile.close():
            self._rerender()

    def click(self, target: str, event: Optional[UIEvent] = None) -> UIEvent:
        """
        Клик по элементу навбара с всплытием к предкам.
        Возвращает событие, чтобы вызывающий видел, остановлено ли всплытие.
        """
        if target not in _BUBBLE_PATHS:
            raise ValueError(f"Неизвестный элемент навбара: {target}")

        event = event or UIEvent()
        if target in _OVERLAY_TARGETS and not self._mobile.is_open:
            # Элемента нет на экране: кликать не по чему
            return event

        changed = False
        for node in _BUBBLE_PATHS[target]:
            if event.propagation_stopped:
                break
            changed = self._handle_click(node, event) or changed

        if changed:
            self._rerender()
        return event

    def _handle_click(self, node: str, event: UIEvent) -> bool:
        if node == MENU_TOGGLE:
            return self._mobile.toggle()
        if node == MOBILE_OVERLAY:
            return self._mobile.close()
        if node == MOBILE_CATALOG_TOGGLE:
            return self._dropdown.toggle(event)
        if node == MOBILE_PROFILE:
            event.stop_propagation()
        return False

    def navigate(self, path: str, from_overlay: bool = False) -> None:
        """Переход по ссылке: сообщаем роутеру, из мобильного меню - ещё и закрываем его."""
        if self.on_navigate is not None:
            self.on_navigate(path)

        changed = path != self.pathname
        self.pathname = path
        if from_overlay:
            changed = self._mobile.close() or changed
        if changed:
            self._rerender()

    # ------------------------------------------------------------------
    # Отрисовка
    # ------------------------------------------------------------------

    def _link(self, title: str, path: str) -> LinkView:
        return LinkView(title=title, path=path, active=match_route(path, self.pathname))

    def _render_dropdown(self) -> DropdownView:
        if not self._dropdown.is_open:
            return DropdownView(open=False)
        if self._loading:
            return DropdownView(open=True, message=LOADING_MESSAGE)
        if self._sub_links:
            return DropdownView(
                open=True,
                items=[self._link(c.name, catalog_path(c.name)) for c in self._sub_links],
            )
        return DropdownView(open=True, message=EMPTY_MESSAGE)

    def _render_entries(self) -> List[NavEntryView]:
        entries = []
        for link in self.links:
            if link.title == CATALOG_TITLE:
                entries.append(NavEntryView(
                    title=link.title,
                    active=match_route(CATALOG_ROUTE, self.pathname),
                    dropdown=self._render_dropdown(),
                ))
            else:
                entries.append(NavEntryView(
                    title=link.title,
                    path=link.path,
                    active=match_route(link.path, self.pathname),
                ))
        return entries

    def _render_actions(self) -> ActionClusterView:
        token = self.store.token
        user = self.store.user

        cart = None
        if user is not None and user.account_type != AccountType.INSTRUCTOR:
            total_items = self.store.total_items
            cart = CartBadgeView(path=CART_PATH, count=total_items if total_items > 0 else None)

        if token is None:
            return ActionClusterView(
                cart=cart,
                login=self._link("Log in", LOGIN_PATH),
                signup=self._link("Sign up", SIGNUP_PATH),
            )
        return ActionClusterView(cart=cart, profile_menu=True)

    def render(self) -> NavbarView:
        entries = self._render_entries()
        actions = self._render_actions()

        overlay = None
        if self._mobile.is_open:
            overlay = MobileOverlayView(entries=entries, actions=actions)

        return NavbarView(
            brand=self._link("CourseHub", HOME_PATH),
            links=entries,
            actions=actions,
            mobile_overlay=overlay,
        )
