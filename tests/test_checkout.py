from types import SimpleNamespace

import pytest

from storefront.core.errors import MenuItemNotFoundError, MenuItemUnavailableError, StorePolicyError
from storefront.schemas.orders import CheckoutLine, CheckoutRequest
from storefront.services.checkout import place_order, price_cart
from storefront.store.entity_store import EntityStore
from tests.fixtures_data import BRUSCHETTA, CARBONARA, DELIVERY_CHECKOUT_PAYLOAD, PICKUP_CHECKOUT_PAYLOAD


def _build_store() -> EntityStore:
    store = EntityStore("sqlite+pysqlite:///:memory:")
    store.create_menu_item(BRUSCHETTA)
    store.create_menu_item(CARBONARA)
    return store


def _checkout(payload: dict, **overrides):
    return CheckoutRequest.model_validate({**payload, **overrides}).root


def test_price_cart_uses_menu_prices_and_skips_fee_for_pickup():
    menu = {1: SimpleNamespace(id=1, price_cents=1890, available=1)}
    lines = [CheckoutLine(menu_item_id=1, quantity=2)]

    cart = price_cart(lines, menu.get, "pickup", 500)

    assert cart.subtotal_cents == 3780
    assert cart.delivery_fee_cents == 0
    assert cart.total_cents == 3780
    assert cart.lines[0].unit_price_cents == 1890


def test_price_cart_adds_fee_for_delivery():
    menu = {
        1: SimpleNamespace(id=1, price_cents=1890, available=1),
        2: SimpleNamespace(id=2, price_cents=2890, available=1),
    }
    lines = [CheckoutLine(menu_item_id=1, quantity=1), CheckoutLine(menu_item_id=2, quantity=3)]

    cart = price_cart(lines, menu.get, "delivery", 500)

    assert cart.subtotal_cents == 1890 + 3 * 2890
    assert cart.total_cents == 1890 + 3 * 2890 + 500


def test_price_cart_rejects_unknown_and_unavailable_items():
    menu = {1: SimpleNamespace(id=1, price_cents=1890, available=0)}

    with pytest.raises(MenuItemNotFoundError) as not_found:
        price_cart([CheckoutLine(menu_item_id=99, quantity=1)], menu.get, "pickup", 500)
    with pytest.raises(MenuItemUnavailableError):
        price_cart([CheckoutLine(menu_item_id=1, quantity=1)], menu.get, "pickup", 500)

    assert "99" in str(not_found.value)


def test_pickup_order_totals_37_80():
    store = _build_store()

    confirmation = place_order(store, _checkout(PICKUP_CHECKOUT_PAYLOAD))

    assert confirmation.total == "37.80"
    assert confirmation.estimated_time == "15-20 min"
    assert confirmation.status == "preparing"

    order = store.get_order(confirmation.order_number)
    assert order.delivery_type == "pickup"
    assert order.address is None
    assert order.delivery_fee_cents == 0
    items = store.get_order_items(order.id)
    assert [(item.menu_item_id, item.quantity, item.unit_price_cents) for item in items] == [(1, 2, 1890)]


def test_delivery_order_adds_store_fee():
    store = _build_store()

    confirmation = place_order(store, _checkout(DELIVERY_CHECKOUT_PAYLOAD))

    assert confirmation.total == "42.80"
    assert confirmation.estimated_time == "30-45 min"
    order = store.get_order(confirmation.order_number)
    assert order.subtotal_cents == 3780
    assert order.delivery_fee_cents == 500
    assert order.address == "Rua das Flores"
    assert order.address_number == "123"


def test_delivery_fee_follows_store_settings():
    store = _build_store()
    store.update_store_settings({"delivery_fee_cents": 800})

    confirmation = place_order(store, _checkout(DELIVERY_CHECKOUT_PAYLOAD))

    assert confirmation.total == "45.80"


def test_unknown_item_writes_nothing():
    store = _build_store()
    checkout = _checkout(
        PICKUP_CHECKOUT_PAYLOAD,
        items=[{"menuItemId": 1, "quantity": 1}, {"menuItemId": 999, "quantity": 1}],
    )

    with pytest.raises(MenuItemNotFoundError):
        place_order(store, checkout)

    assert store.get_orders() == []
    assert store.get_order_items(1) == []


def test_order_numbers_strictly_increase():
    store = _build_store()

    numbers = [place_order(store, _checkout(PICKUP_CHECKOUT_PAYLOAD)).order_number for _ in range(3)]

    ids = [store.get_order(number).id for number in numbers]
    assert ids == sorted(ids)
    assert len(set(numbers)) == 3
    assert all(number.startswith("SD") for number in numbers)
    assert numbers == sorted(numbers)


def test_checkout_disabled_is_a_conflict():
    store = _build_store()
    store.update_store_settings({"allow_checkout": 0})

    with pytest.raises(StorePolicyError) as exc_info:
        place_order(store, _checkout(PICKUP_CHECKOUT_PAYLOAD))

    assert exc_info.value.status_code == 409
    assert store.get_orders() == []


def test_pickup_disabled_rejects_pickup_only():
    store = _build_store()
    store.update_store_settings({"allow_pickup": 0})

    with pytest.raises(StorePolicyError) as exc_info:
        place_order(store, _checkout(PICKUP_CHECKOUT_PAYLOAD))

    assert exc_info.value.status_code == 400
    assert place_order(store, _checkout(DELIVERY_CHECKOUT_PAYLOAD)).total == "42.80"


def test_payment_method_must_be_accepted_by_store():
    store = _build_store()
    store.update_store_settings({"payment_methods": "card,cash"})

    with pytest.raises(StorePolicyError):
        place_order(store, _checkout(PICKUP_CHECKOUT_PAYLOAD, paymentMethod="pix"))

    assert place_order(store, _checkout(PICKUP_CHECKOUT_PAYLOAD, paymentMethod="cash")).total == "37.80"


def test_repeated_menu_item_keeps_one_row_per_line():
    store = _build_store()
    checkout = _checkout(
        PICKUP_CHECKOUT_PAYLOAD,
        items=[{"menuItemId": 1, "quantity": 1}, {"menuItemId": 2, "quantity": 1}, {"menuItemId": 1, "quantity": 2}],
    )

    confirmation = place_order(store, checkout)

    order = store.get_order(confirmation.order_number)
    items = store.get_order_items(order.id)
    assert [(item.menu_item_id, item.quantity) for item in items] == [(1, 1), (2, 1), (1, 2)]
    assert order.subtotal_cents == 3 * 1890 + 2890
