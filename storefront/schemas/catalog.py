from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field, model_validator

from storefront.core.money import format_cents, to_cents
from storefront.models.category import Category
from storefront.models.promotion import Promotion
from storefront.schemas.base import CamelModel, DbInt, Flag, Money, PatchModel, RecordId, UtcDateTime


class CategoryCreate(CamelModel):
    name: str = Field(..., min_length=1)
    icon: str = "Utensils"
    min_items: DbInt = Field(0, ge=0)
    max_items: DbInt = Field(100, ge=0)
    display_order: DbInt = 0
    is_active: Flag = 1
    default_printer: Optional[str] = "none"

    @model_validator(mode="after")
    def _check_item_bounds(self) -> "CategoryCreate":
        if self.max_items < self.min_items:
            raise ValueError("maxItems deve ser maior ou igual a minItems")
        return self


class CategoryUpdate(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"default_printer"})

    name: Optional[str] = Field(None, min_length=1)
    icon: Optional[str] = None
    min_items: Optional[DbInt] = Field(None, ge=0)
    max_items: Optional[DbInt] = Field(None, ge=0)
    display_order: Optional[DbInt] = None
    is_active: Optional[Flag] = None
    default_printer: Optional[str] = None


class CategoryOut(CamelModel):
    id: int
    name: str
    icon: str
    min_items: int
    max_items: int
    display_order: int
    is_active: int
    default_printer: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_record(cls, category: Category) -> "CategoryOut":
        return cls(
            id=category.id,
            name=category.name,
            icon=category.icon,
            min_items=category.min_items,
            max_items=category.max_items,
            display_order=category.display_order,
            is_active=category.is_active,
            default_printer=category.default_printer,
            created_at=category.created_at,
        )


class PromotionCreate(CamelModel):
    menu_item_id: RecordId
    original_price: Money
    promotional_price: Money
    start_date: UtcDateTime
    end_date: UtcDateTime
    is_active: Flag = 1

    @model_validator(mode="after")
    def _check_period(self) -> "PromotionCreate":
        if self.end_date < self.start_date:
            raise ValueError("endDate deve ser posterior a startDate")
        return self

    def to_fields(self) -> dict:
        return {
            "menu_item_id": self.menu_item_id,
            "original_price_cents": to_cents(self.original_price),
            "promotional_price_cents": to_cents(self.promotional_price),
            "start_date": self.start_date,
            "end_date": self.end_date,
            "is_active": self.is_active,
        }


class PromotionUpdate(PatchModel):
    money_fields: ClassVar[frozenset[str]] = frozenset({"original_price", "promotional_price"})

    menu_item_id: Optional[RecordId] = None
    original_price: Optional[Money] = None
    promotional_price: Optional[Money] = None
    start_date: Optional[UtcDateTime] = None
    end_date: Optional[UtcDateTime] = None
    is_active: Optional[Flag] = None

    @model_validator(mode="after")
    def _check_period(self) -> "PromotionUpdate":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("endDate deve ser posterior a startDate")
        return self


class PromotionOut(CamelModel):
    id: int
    menu_item_id: int
    original_price: str
    promotional_price: str
    start_date: datetime
    end_date: datetime
    is_active: int
    created_at: datetime

    @classmethod
    def from_record(cls, promotion: Promotion) -> "PromotionOut":
        return cls(
            id=promotion.id,
            menu_item_id=promotion.menu_item_id,
            original_price=format_cents(promotion.original_price_cents),
            promotional_price=format_cents(promotion.promotional_price_cents),
            start_date=promotion.start_date,
            end_date=promotion.end_date,
            is_active=promotion.is_active,
            created_at=promotion.created_at,
        )
