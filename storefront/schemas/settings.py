from __future__ import annotations

from datetime import datetime
from typing import Annotated, ClassVar, Optional

from pydantic import Field, field_validator

from storefront.core.catalog import PAYMENT_METHODS, parse_payment_methods
from storefront.core.money import format_cents
from storefront.models.store_settings import StoreSettings
from storefront.schemas.base import CamelModel, Flag, Money, PatchModel

ClockTime = Annotated[str, Field(pattern=r"^([01]\d|2[0-3]):[0-5]\d$")]


class StoreSettingsOut(CamelModel):
    id: int
    store_name: str
    store_phone: str
    store_email: str
    store_address: str
    is_open: int
    opening_time: str
    closing_time: str
    allow_pickup: int
    allow_checkout: int
    allow_scheduling: int
    allow_reviews: int
    allow_order_history: int
    delivery_time: str
    pickup_time: str
    delivery_fee: str
    payment_methods: str
    updated_at: datetime

    @classmethod
    def from_record(cls, settings: StoreSettings) -> "StoreSettingsOut":
        return cls(
            id=settings.id,
            store_name=settings.store_name,
            store_phone=settings.store_phone,
            store_email=settings.store_email,
            store_address=settings.store_address,
            is_open=settings.is_open,
            opening_time=settings.opening_time,
            closing_time=settings.closing_time,
            allow_pickup=settings.allow_pickup,
            allow_checkout=settings.allow_checkout,
            allow_scheduling=settings.allow_scheduling,
            allow_reviews=settings.allow_reviews,
            allow_order_history=settings.allow_order_history,
            delivery_time=settings.delivery_time,
            pickup_time=settings.pickup_time,
            delivery_fee=format_cents(settings.delivery_fee_cents),
            payment_methods=settings.payment_methods,
            updated_at=settings.updated_at,
        )


class StoreSettingsUpdate(PatchModel):
    money_fields: ClassVar[frozenset[str]] = frozenset({"delivery_fee"})

    store_name: Optional[str] = Field(None, min_length=1)
    store_phone: Optional[str] = None
    store_email: Optional[str] = None
    store_address: Optional[str] = None
    is_open: Optional[Flag] = None
    opening_time: Optional[ClockTime] = None
    closing_time: Optional[ClockTime] = None
    allow_pickup: Optional[Flag] = None
    allow_checkout: Optional[Flag] = None
    allow_scheduling: Optional[Flag] = None
    allow_reviews: Optional[Flag] = None
    allow_order_history: Optional[Flag] = None
    delivery_time: Optional[str] = None
    pickup_time: Optional[str] = None
    delivery_fee: Optional[Money] = None
    payment_methods: Optional[str] = None

    @field_validator("payment_methods")
    @classmethod
    def _validate_payment_methods(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        methods = parse_payment_methods(value)
        if not methods:
            raise ValueError("Informe ao menos uma forma de pagamento")
        invalid = [method for method in methods if method not in PAYMENT_METHODS]
        if invalid:
            raise ValueError(f"Forma de pagamento inválida: {', '.join(invalid)}")
        return ",".join(methods)
