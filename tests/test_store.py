import pytest

from coursehub.navbar.store import NavStore
from coursehub.schemas.user import AccountType, UserProfile


def test_update_notifies_only_changed_keys() -> None:
    store = NavStore()
    seen = []
    store.subscribe("token", lambda value: seen.append(("token", value)))
    store.subscribe("total_items", lambda value: seen.append(("total_items", value)))

    store.update(token="abc", total_items=0)

    assert seen == [("token", "abc")]
    assert store.get("token") == "abc"


def test_unsubscribe_stops_notifications() -> None:
    store = NavStore()
    seen = []
    unsubscribe = store.subscribe("total_items", seen.append)
    store.update(total_items=2)
    unsubscribe()
    store.update(total_items=3)
    assert seen == [2]


def test_user_dict_is_validated_into_profile() -> None:
    store = NavStore()
    store.update(user={"first_name": "Ada", "account_type": "Instructor"})
    assert isinstance(store.user, UserProfile)
    assert store.user.account_type == AccountType.INSTRUCTOR


def test_failed_update_leaves_store_untouched() -> None:
    store = NavStore()
    seen = []
    store.subscribe("token", seen.append)

    with pytest.raises(ValueError):
        store.update(token="jwt", total_items=-1)

    assert store.token is None
    assert store.total_items == 0
    assert seen == []


def test_rejects_negative_cart_count_and_unknown_keys() -> None:
    store = NavStore()
    with pytest.raises(ValueError):
        store.update(total_items=-1)
    with pytest.raises(KeyError):
        store.get("theme")
    with pytest.raises(KeyError):
        store.subscribe("theme", print)
