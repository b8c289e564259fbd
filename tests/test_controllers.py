from coursehub.navbar.controllers import (
    TOUCH,
    DropdownController,
    MobileMenuController,
    UIEvent,
)


def test_dropdown_hover_opens_and_closes() -> None:
    dropdown = DropdownController()
    assert not dropdown.is_open
    assert dropdown.pointer_enter(UIEvent())
    assert dropdown.is_open
    assert not dropdown.pointer_enter(UIEvent())
    assert dropdown.pointer_leave(UIEvent())
    assert not dropdown.is_open


def test_dropdown_ignores_touch_hover() -> None:
    dropdown = DropdownController()
    assert not dropdown.pointer_enter(UIEvent(pointer_type=TOUCH))
    assert not dropdown.is_open


def test_dropdown_toggle_stops_propagation() -> None:
    dropdown = DropdownController()
    event = UIEvent(pointer_type=TOUCH)
    assert dropdown.toggle(event)
    assert dropdown.is_open
    assert event.propagation_stopped
    dropdown.toggle(UIEvent())
    assert not dropdown.is_open


def test_mobile_menu_toggle_and_close() -> None:
    menu = MobileMenuController()
    menu.toggle()
    assert menu.is_open
    assert menu.close()
    assert not menu.is_open
    assert not menu.close()
