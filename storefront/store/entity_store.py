from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timedelta
from typing import Any, Iterator, Mapping, Sequence

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from storefront.core.config import DATABASE_URL, ORDER_NUMBER_PREFIX, SEED_SAMPLE_DATA, TOP_RATED_LIMIT
from storefront.core.database import Base, build_engine, build_session_factory
from storefront.core.timeutils import as_utc_naive, utcnow
from storefront.models import (
    Category,
    ItemReview,
    MenuItem,
    Order,
    OrderItem,
    Promotion,
    ScheduledOrder,
    StoreSettings,
)
from storefront.services.ratings import RatedMenuItem, rank_top_rated

logger = logging.getLogger(__name__)
STORE_PREFIX = "[STORE]"
SETTINGS_ID = 1


def format_order_number(prefix: str, year: int, order_id: int) -> str:
    return f"{prefix}{year}{order_id:03d}"


def _apply_changes(record: Any, changes: Mapping[str, Any]) -> None:
    """Present keys replace the stored value; absent keys keep it."""
    columns = set(record.__table__.columns.keys())
    unknown = set(changes) - columns
    if unknown:
        raise ValueError(f"Campos desconhecidos: {', '.join(sorted(unknown))}")
    for key, value in changes.items():
        if key == "id":
            continue
        setattr(record, key, value)


class EntityStore:
    """
    Data access for every storefront entity.

    Reads return ``None`` when an id is absent and deletes report whether a
    record was removed. Every call runs in its own transaction while holding
    the store lock; ``critical_section()`` lets callers extend that lock
    over several calls (checkout prices and persists inside one).
    """

    def __init__(
        self,
        database_url: str = DATABASE_URL,
        *,
        engine: Engine | None = None,
        order_number_prefix: str = ORDER_NUMBER_PREFIX,
    ) -> None:
        self._engine = engine or build_engine(database_url)
        Base.metadata.create_all(bind=self._engine)
        self._session_factory = build_session_factory(self._engine)
        self._lock = threading.RLock()
        self.order_number_prefix = order_number_prefix
        self._ensure_store_settings()

    @contextmanager
    def critical_section(self) -> Iterator[None]:
        with self._lock:
            yield

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        with self._lock:
            db = self._session_factory()
            try:
                yield db
                db.commit()
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

    def _insert(self, record: Any) -> Any:
        with self.transaction() as db:
            db.add(record)
            db.flush()
        return record

    def _update(self, model: type, record_id: int, changes: Mapping[str, Any]) -> Any | None:
        with self.transaction() as db:
            record = db.get(model, record_id)
            if record is None:
                return None
            _apply_changes(record, changes)
        return record

    def _delete(self, model: type, record_id: int) -> bool:
        with self.transaction() as db:
            record = db.get(model, record_id)
            if record is None:
                return False
            db.delete(record)
        return True

    # Menu items

    def get_menu_items(self) -> list[MenuItem]:
        with self.transaction() as db:
            return db.query(MenuItem).order_by(MenuItem.id.asc()).all()

    def get_menu_items_by_category(self, category: str) -> list[MenuItem]:
        with self.transaction() as db:
            return (
                db.query(MenuItem)
                .filter(MenuItem.category == category)
                .order_by(MenuItem.id.asc())
                .all()
            )

    def get_menu_item(self, menu_item_id: int) -> MenuItem | None:
        with self.transaction() as db:
            return db.get(MenuItem, menu_item_id)

    def create_menu_item(self, fields: Mapping[str, Any]) -> MenuItem:
        item = MenuItem()
        _apply_changes(item, fields)
        if item.available is None:
            item.available = 1
        self._insert(item)
        logger.info("%s menu item created id=%s", STORE_PREFIX, item.id)
        return item

    def update_menu_item(self, menu_item_id: int, changes: Mapping[str, Any]) -> MenuItem | None:
        return self._update(MenuItem, menu_item_id, changes)

    def delete_menu_item(self, menu_item_id: int) -> bool:
        return self._delete(MenuItem, menu_item_id)

    # Orders

    def create_order(
        self,
        fields: Mapping[str, Any],
        lines: Sequence[Mapping[str, Any]] = (),
    ) -> tuple[Order, list[OrderItem]]:
        """Persists an order and its items in a single transaction."""
        with self.transaction() as db:
            order = Order()
            _apply_changes(order, fields)
            if not order.status:
                order.status = "preparing"
            if order.created_at is None:
                order.created_at = utcnow()
            db.add(order)
            db.flush()
            order.order_number = format_order_number(
                self.order_number_prefix,
                order.created_at.year,
                order.id,
            )

            order_items: list[OrderItem] = []
            for line in lines:
                order_item = OrderItem(order_id=order.id)
                _apply_changes(order_item, line)
                db.add(order_item)
                order_items.append(order_item)
            db.flush()

        logger.info(
            "%s order created id=%s order_number=%s items=%s",
            STORE_PREFIX,
            order.id,
            order.order_number,
            len(order_items),
        )
        return order, order_items

    def get_order(self, order_number: str) -> Order | None:
        with self.transaction() as db:
            return db.query(Order).filter(Order.order_number == order_number).first()

    def get_order_by_id(self, order_id: int) -> Order | None:
        with self.transaction() as db:
            return db.get(Order, order_id)

    def get_orders(self) -> list[Order]:
        with self.transaction() as db:
            return db.query(Order).order_by(Order.id.asc()).all()

    # Order items

    def create_order_item(self, fields: Mapping[str, Any]) -> OrderItem:
        order_item = OrderItem()
        _apply_changes(order_item, fields)
        return self._insert(order_item)

    def get_order_items(self, order_id: int) -> list[OrderItem]:
        with self.transaction() as db:
            return (
                db.query(OrderItem)
                .filter(OrderItem.order_id == order_id)
                .order_by(OrderItem.id.asc())
                .all()
            )

    # Store settings

    def _ensure_store_settings(self) -> None:
        with self.transaction() as db:
            if db.get(StoreSettings, SETTINGS_ID) is None:
                db.add(StoreSettings(id=SETTINGS_ID))
                logger.info("%s default store settings created", STORE_PREFIX)

    def get_store_settings(self) -> StoreSettings:
        with self.transaction() as db:
            return db.get(StoreSettings, SETTINGS_ID)

    def update_store_settings(self, changes: Mapping[str, Any]) -> StoreSettings:
        with self.transaction() as db:
            settings = db.get(StoreSettings, SETTINGS_ID)
            previous_update = settings.updated_at
            _apply_changes(settings, changes)
            now = utcnow()
            if previous_update is not None and now <= previous_update:
                now = previous_update + timedelta(microseconds=1)
            settings.updated_at = now
        logger.info("%s store settings updated fields=%s", STORE_PREFIX, ",".join(sorted(changes)))
        return settings

    # Categories

    def get_categories(self) -> list[Category]:
        with self.transaction() as db:
            return (
                db.query(Category)
                .order_by(Category.display_order.asc(), Category.id.asc())
                .all()
            )

    def get_category(self, category_id: int) -> Category | None:
        with self.transaction() as db:
            return db.get(Category, category_id)

    def create_category(self, fields: Mapping[str, Any]) -> Category:
        category = Category()
        _apply_changes(category, fields)
        return self._insert(category)

    def update_category(self, category_id: int, changes: Mapping[str, Any]) -> Category | None:
        return self._update(Category, category_id, changes)

    def delete_category(self, category_id: int) -> bool:
        return self._delete(Category, category_id)

    # Promotions

    def get_promotions(self) -> list[Promotion]:
        with self.transaction() as db:
            return db.query(Promotion).order_by(Promotion.id.asc()).all()

    def get_promotion(self, promotion_id: int) -> Promotion | None:
        with self.transaction() as db:
            return db.get(Promotion, promotion_id)

    def get_active_promotions(self, now: datetime | None = None) -> list[Promotion]:
        moment = as_utc_naive(now) if now is not None else utcnow()
        with self.transaction() as db:
            return (
                db.query(Promotion)
                .filter(
                    Promotion.is_active == 1,
                    Promotion.start_date <= moment,
                    Promotion.end_date >= moment,
                )
                .order_by(Promotion.id.asc())
                .all()
            )

    def create_promotion(self, fields: Mapping[str, Any]) -> Promotion:
        promotion = Promotion()
        _apply_changes(promotion, fields)
        return self._insert(promotion)

    def update_promotion(self, promotion_id: int, changes: Mapping[str, Any]) -> Promotion | None:
        return self._update(Promotion, promotion_id, changes)

    def delete_promotion(self, promotion_id: int) -> bool:
        return self._delete(Promotion, promotion_id)

    # Scheduled orders

    def create_scheduled_order(self, fields: Mapping[str, Any]) -> ScheduledOrder:
        scheduled_order = ScheduledOrder()
        _apply_changes(scheduled_order, fields)
        return self._insert(scheduled_order)

    def get_scheduled_orders(self) -> list[ScheduledOrder]:
        with self.transaction() as db:
            return db.query(ScheduledOrder).order_by(ScheduledOrder.id.asc()).all()

    # Reviews

    def create_item_review(self, fields: Mapping[str, Any]) -> ItemReview:
        review = ItemReview()
        _apply_changes(review, fields)
        return self._insert(review)

    def get_item_reviews(self, menu_item_id: int) -> list[ItemReview]:
        with self.transaction() as db:
            return (
                db.query(ItemReview)
                .filter(ItemReview.menu_item_id == menu_item_id)
                .order_by(ItemReview.id.asc())
                .all()
            )

    def get_reviews(self) -> list[ItemReview]:
        with self.transaction() as db:
            return db.query(ItemReview).order_by(ItemReview.id.asc()).all()

    def get_top_rated_items(self, limit: int = TOP_RATED_LIMIT) -> list[RatedMenuItem]:
        with self.critical_section():
            return rank_top_rated(self.get_menu_items(), self.get_reviews(), limit=limit)


def build_store(database_url: str = DATABASE_URL, *, seed: bool = SEED_SAMPLE_DATA) -> EntityStore:
    from storefront.services.seed import seed_sample_data

    store = EntityStore(database_url)
    if seed:
        seed_sample_data(store)
    return store
