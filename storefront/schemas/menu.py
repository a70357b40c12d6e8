from __future__ import annotations

from typing import ClassVar, Literal, Optional

from pydantic import Field

from storefront.core.money import format_cents, to_cents
from storefront.models.menu_item import MenuItem
from storefront.schemas.base import CamelModel, Flag, Money, PatchModel

MenuCategoryTag = Literal["entradas", "principais", "massas", "sobremesas", "bebidas"]


class MenuItemCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    price: Money
    category: MenuCategoryTag
    image_url: str = ""
    available: Flag = 1
    production_printer: Optional[str] = None

    def to_fields(self) -> dict:
        data = self.model_dump(exclude={"price"})
        data["price_cents"] = to_cents(self.price)
        return data


class MenuItemUpdate(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"production_printer"})
    money_fields: ClassVar[frozenset[str]] = frozenset({"price"})

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[Money] = None
    category: Optional[MenuCategoryTag] = None
    image_url: Optional[str] = None
    available: Optional[Flag] = None
    production_printer: Optional[str] = None


class MenuItemOut(CamelModel):
    id: int
    name: str
    description: str
    price: str
    category: str
    image_url: str
    available: int
    production_printer: Optional[str] = None

    @classmethod
    def from_record(cls, item: MenuItem) -> "MenuItemOut":
        return cls(
            id=item.id,
            name=item.name,
            description=item.description or "",
            price=format_cents(item.price_cents),
            category=item.category,
            image_url=item.image_url or "",
            available=item.available,
            production_printer=item.production_printer,
        )
