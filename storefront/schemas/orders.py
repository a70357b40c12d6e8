from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import ConfigDict, EmailStr, Field, RootModel
from pydantic.alias_generators import to_camel

from storefront.core.money import format_cents
from storefront.models.order import Order
from storefront.models.order_item import OrderItem
from storefront.schemas.base import CamelModel, RecordId

PaymentMethod = Literal["card", "pix", "cash"]
MAX_LINE_QUANTITY = 999


class CheckoutLine(CamelModel):
    menu_item_id: RecordId
    quantity: int = Field(..., ge=1, le=MAX_LINE_QUANTITY)


class _CheckoutBase(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)

    customer_name: str = Field(..., min_length=1)
    customer_email: EmailStr
    customer_phone: str = Field(..., min_length=1)
    payment_method: PaymentMethod
    items: list[CheckoutLine] = Field(..., min_length=1)


class DeliveryCheckout(_CheckoutBase):
    delivery_type: Literal["delivery"]
    address: str = Field(..., min_length=1)
    address_number: Optional[str] = None
    complement: Optional[str] = None


class PickupCheckout(_CheckoutBase):
    delivery_type: Literal["pickup"]


Checkout = Annotated[Union[DeliveryCheckout, PickupCheckout], Field(discriminator="delivery_type")]


class CheckoutRequest(RootModel[Checkout]):
    """Checkout body; ``deliveryType`` selects which address fields apply."""


class OrderConfirmation(CamelModel):
    order_number: str
    total: str
    estimated_time: str
    status: str


class OrderItemOut(CamelModel):
    id: int
    order_id: int
    menu_item_id: int
    quantity: int
    price: str

    @classmethod
    def from_record(cls, item: OrderItem) -> "OrderItemOut":
        return cls(
            id=item.id,
            order_id=item.order_id,
            menu_item_id=item.menu_item_id,
            quantity=item.quantity,
            price=format_cents(item.unit_price_cents),
        )


class OrderOut(CamelModel):
    id: int
    order_number: str
    customer_name: str
    customer_email: str
    customer_phone: str
    delivery_type: str
    address: Optional[str] = None
    address_number: Optional[str] = None
    complement: Optional[str] = None
    payment_method: str
    subtotal: str
    delivery_fee: str
    total: str
    status: str
    created_at: datetime
    items: list[OrderItemOut] = Field(default_factory=list)

    @classmethod
    def from_record(cls, order: Order, items: list[OrderItem]) -> "OrderOut":
        return cls(
            id=order.id,
            order_number=order.order_number,
            customer_name=order.customer_name,
            customer_email=order.customer_email,
            customer_phone=order.customer_phone,
            delivery_type=order.delivery_type,
            address=order.address,
            address_number=order.address_number,
            complement=order.complement,
            payment_method=order.payment_method,
            subtotal=format_cents(order.subtotal_cents),
            delivery_fee=format_cents(order.delivery_fee_cents),
            total=format_cents(order.total_cents),
            status=order.status,
            created_at=order.created_at,
            items=[OrderItemOut.from_record(item) for item in items],
        )
