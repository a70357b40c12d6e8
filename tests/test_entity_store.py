from datetime import datetime, timedelta, timezone

import pytest

from storefront.core.timeutils import utcnow
from storefront.store.entity_store import EntityStore, format_order_number
from tests.fixtures_data import BRUSCHETTA, CARBONARA, TIRAMISU


def _build_store() -> EntityStore:
    return EntityStore("sqlite+pysqlite:///:memory:")


def test_ids_are_monotonic_and_never_reused():
    store = _build_store()
    first = store.create_menu_item(BRUSCHETTA)
    second = store.create_menu_item(CARBONARA)

    assert store.delete_menu_item(second.id) is True
    third = store.create_menu_item(TIRAMISU)

    assert (first.id, second.id, third.id) == (1, 2, 3)


def test_absent_ids_return_none_and_delete_reports_false():
    store = _build_store()
    store.create_menu_item(BRUSCHETTA)

    assert store.get_menu_item(999) is None
    assert store.update_menu_item(999, {"name": "Nada"}) is None
    assert store.delete_menu_item(999) is False
    assert len(store.get_menu_items()) == 1


def test_partial_update_keeps_absent_fields():
    store = _build_store()
    item = store.create_menu_item(BRUSCHETTA)

    updated = store.update_menu_item(item.id, {"price_cents": 2100})

    assert updated.price_cents == 2100
    assert updated.name == BRUSCHETTA["name"]
    assert updated.category == "entradas"
    assert store.get_menu_item(item.id).price_cents == 2100


def test_unknown_column_is_rejected():
    store = _build_store()
    item = store.create_menu_item(BRUSCHETTA)

    with pytest.raises(ValueError):
        store.update_menu_item(item.id, {"colour": "red"})


def test_menu_items_by_category():
    store = _build_store()
    store.create_menu_item(BRUSCHETTA)
    store.create_menu_item(CARBONARA)

    massas = store.get_menu_items_by_category("massas")

    assert [item.name for item in massas] == ["Spaghetti Carbonara"]
    assert store.get_menu_items_by_category("bebidas") == []


def test_categories_sorted_by_display_order():
    store = _build_store()
    store.create_category({"name": "Bebidas", "display_order": 4})
    store.create_category({"name": "Entradas", "display_order": 1})
    store.create_category({"name": "Sobremesas", "display_order": 3})

    assert [category.name for category in store.get_categories()] == ["Entradas", "Sobremesas", "Bebidas"]


def test_create_order_assigns_number_and_persists_items():
    store = _build_store()
    item = store.create_menu_item(BRUSCHETTA)

    order, items = store.create_order(
        {
            "customer_name": "Maria",
            "customer_email": "maria@example.com",
            "customer_phone": "1199999",
            "delivery_type": "pickup",
            "payment_method": "pix",
            "subtotal_cents": 3780,
            "delivery_fee_cents": 0,
            "total_cents": 3780,
        },
        [{"menu_item_id": item.id, "quantity": 2, "unit_price_cents": 1890}],
    )

    assert order.status == "preparing"
    assert order.order_number == f"SD{order.created_at.year}001"
    assert store.get_order(order.order_number).id == order.id
    assert [(entry.menu_item_id, entry.quantity) for entry in items] == [(item.id, 2)]
    assert len(store.get_order_items(order.id)) == 1
    assert store.get_order("SD0000000") is None


def test_format_order_number_pads_id():
    assert format_order_number("SD", 2024, 7) == "SD2024007"
    assert format_order_number("SD", 2024, 1234) == "SD20241234"


def test_store_settings_merge_refreshes_updated_at():
    store = _build_store()
    before = store.get_store_settings()

    after = store.update_store_settings({"delivery_fee_cents": 850})

    assert after.delivery_fee_cents == 850
    assert after.store_name == before.store_name
    assert after.allow_pickup == before.allow_pickup
    assert after.updated_at > before.updated_at


def test_active_promotions_respect_flag_and_period():
    store = _build_store()
    item = store.create_menu_item(BRUSCHETTA)
    now = utcnow()
    base = {"menu_item_id": item.id, "original_price_cents": 1890, "promotional_price_cents": 1500}

    current = store.create_promotion(
        {**base, "start_date": now - timedelta(days=1), "end_date": now + timedelta(days=1), "is_active": 1}
    )
    store.create_promotion(
        {**base, "start_date": now - timedelta(days=10), "end_date": now - timedelta(days=5), "is_active": 1}
    )
    store.create_promotion(
        {**base, "start_date": now - timedelta(days=1), "end_date": now + timedelta(days=1), "is_active": 0}
    )

    assert [promotion.id for promotion in store.get_active_promotions()] == [current.id]
    assert len(store.get_promotions()) == 3
    assert store.get_active_promotions(now=now - timedelta(days=7))[0].id == 2


def test_active_promotions_accept_aware_datetimes():
    store = _build_store()
    item = store.create_menu_item(BRUSCHETTA)
    store.create_promotion(
        {
            "menu_item_id": item.id,
            "original_price_cents": 1890,
            "promotional_price_cents": 1500,
            "start_date": datetime(2024, 1, 1),
            "end_date": datetime(2024, 1, 31),
            "is_active": 1,
        }
    )

    assert len(store.get_active_promotions(now=datetime(2024, 1, 15, tzinfo=timezone.utc))) == 1


def test_reviews_are_listed_per_item():
    store = _build_store()
    item = store.create_menu_item(BRUSCHETTA)
    other = store.create_menu_item(CARBONARA)
    review = {"customer_name": "Ana", "customer_email": "ana@example.com", "comment": None}
    store.create_item_review({**review, "menu_item_id": item.id, "rating": 5})
    store.create_item_review({**review, "menu_item_id": other.id, "rating": 2})

    assert [r.rating for r in store.get_item_reviews(item.id)] == [5]
    assert len(store.get_reviews()) == 2

    ranked = store.get_top_rated_items()
    assert [entry.menu_item.id for entry in ranked] == [item.id, other.id]


def test_order_items_can_be_added_to_existing_order():
    store = _build_store()
    item = store.create_menu_item(TIRAMISU)
    order, _items = store.create_order(
        {
            "customer_name": "Carla",
            "customer_email": "carla@example.com",
            "customer_phone": "1190000",
            "delivery_type": "pickup",
            "payment_method": "cash",
        },
    )

    extra = store.create_order_item({"order_id": order.id, "menu_item_id": item.id, "quantity": 3, "unit_price_cents": 1490})

    assert extra.id == 1
    assert [entry.quantity for entry in store.get_order_items(order.id)] == [3]
    assert store.get_order_items(999) == []
