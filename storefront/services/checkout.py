from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Iterable, Optional

from storefront.core.catalog import ORDER_STATUS_PREPARING, parse_payment_methods
from storefront.core.config import DELIVERY_ESTIMATED_TIME, PICKUP_ESTIMATED_TIME
from storefront.core.errors import MenuItemNotFoundError, MenuItemUnavailableError, StorePolicyError
from storefront.core.money import format_cents
from storefront.core.request_context import set_request_context
from storefront.models.menu_item import MenuItem
from storefront.models.store_settings import StoreSettings
from storefront.schemas.orders import Checkout, CheckoutLine, DeliveryCheckout, OrderConfirmation

if TYPE_CHECKING:
    from storefront.store.entity_store import EntityStore

logger = logging.getLogger(__name__)
CHECKOUT_PREFIX = "[CHECKOUT]"


@dataclass(frozen=True)
class PricedLine:
    menu_item_id: int
    quantity: int
    unit_price_cents: int

    @property
    def line_total_cents(self) -> int:
        return self.unit_price_cents * self.quantity


@dataclass(frozen=True)
class PricedCart:
    lines: list[PricedLine] = field(default_factory=list)
    subtotal_cents: int = 0
    delivery_fee_cents: int = 0

    @property
    def total_cents(self) -> int:
        return self.subtotal_cents + self.delivery_fee_cents


def price_cart(
    lines: Iterable[CheckoutLine],
    lookup: Callable[[int], Optional[MenuItem]],
    delivery_type: str,
    delivery_fee_cents: int,
) -> PricedCart:
    """
    Prices every line from the current menu; client-sent prices are never used.

    The delivery fee applies only to delivery orders. Raises
    ``MenuItemNotFoundError`` for unknown ids and ``MenuItemUnavailableError``
    for items switched off in the menu.
    """
    priced: list[PricedLine] = []
    subtotal_cents = 0
    for line in lines:
        menu_item = lookup(line.menu_item_id)
        if menu_item is None:
            raise MenuItemNotFoundError(line.menu_item_id)
        if not menu_item.available:
            raise MenuItemUnavailableError(line.menu_item_id)
        priced_line = PricedLine(
            menu_item_id=menu_item.id,
            quantity=line.quantity,
            unit_price_cents=menu_item.price_cents,
        )
        priced.append(priced_line)
        subtotal_cents += priced_line.line_total_cents

    fee = delivery_fee_cents if delivery_type == "delivery" else 0
    return PricedCart(lines=priced, subtotal_cents=subtotal_cents, delivery_fee_cents=fee)


def estimated_time_for(delivery_type: str) -> str:
    return DELIVERY_ESTIMATED_TIME if delivery_type == "delivery" else PICKUP_ESTIMATED_TIME


def _check_store_policy(settings: StoreSettings, checkout: Checkout) -> None:
    if not settings.allow_checkout:
        raise StorePolicyError("Checkout desabilitado pela loja", status_code=409)
    if checkout.delivery_type == "pickup" and not settings.allow_pickup:
        raise StorePolicyError("Retirada no local não disponível")
    accepted = parse_payment_methods(settings.payment_methods)
    if checkout.payment_method not in accepted:
        raise StorePolicyError("Forma de pagamento não aceita pela loja")


def _order_fields(checkout: Checkout, cart: PricedCart) -> dict:
    fields = {
        "customer_name": checkout.customer_name,
        "customer_email": str(checkout.customer_email),
        "customer_phone": checkout.customer_phone,
        "delivery_type": checkout.delivery_type,
        "payment_method": checkout.payment_method,
        "subtotal_cents": cart.subtotal_cents,
        "delivery_fee_cents": cart.delivery_fee_cents,
        "total_cents": cart.total_cents,
        "status": ORDER_STATUS_PREPARING,
    }
    # retirada não guarda endereço
    if isinstance(checkout, DeliveryCheckout):
        fields.update(
            {
                "address": checkout.address,
                "address_number": checkout.address_number,
                "complement": checkout.complement,
            }
        )
    return fields


def place_order(store: "EntityStore", checkout: Checkout) -> OrderConfirmation:
    """
    Prices the cart and persists the order with its items.

    Pricing and persistence run inside the store's critical section, so a
    menu change cannot land between them and a failed lookup writes nothing.
    """
    with store.critical_section():
        settings = store.get_store_settings()
        _check_store_policy(settings, checkout)
        cart = price_cart(
            checkout.items,
            store.get_menu_item,
            checkout.delivery_type,
            settings.delivery_fee_cents,
        )
        order, _items = store.create_order(
            _order_fields(checkout, cart),
            [
                {
                    "menu_item_id": line.menu_item_id,
                    "quantity": line.quantity,
                    "unit_price_cents": line.unit_price_cents,
                }
                for line in cart.lines
            ],
        )

    set_request_context(order_number=order.order_number)
    logger.info(
        "%s order placed order_number=%s delivery_type=%s total_cents=%s",
        CHECKOUT_PREFIX,
        order.order_number,
        order.delivery_type,
        order.total_cents,
    )
    return OrderConfirmation(
        order_number=order.order_number,
        total=format_cents(order.total_cents),
        estimated_time=estimated_time_for(order.delivery_type),
        status=order.status,
    )
