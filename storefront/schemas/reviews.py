from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from storefront.models.item_review import ItemReview
from storefront.schemas.base import CamelModel, RecordId
from storefront.schemas.menu import MenuItemOut
from storefront.services.ratings import RatedMenuItem


class ItemReviewCreate(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)

    menu_item_id: RecordId
    customer_name: str = Field(..., min_length=1)
    customer_email: EmailStr
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None


class ItemReviewOut(CamelModel):
    id: int
    menu_item_id: int
    customer_name: str
    customer_email: str
    rating: int
    comment: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_record(cls, review: ItemReview) -> "ItemReviewOut":
        return cls(
            id=review.id,
            menu_item_id=review.menu_item_id,
            customer_name=review.customer_name,
            customer_email=review.customer_email,
            rating=review.rating,
            comment=review.comment,
            created_at=review.created_at,
        )


class TopRatedItemOut(MenuItemOut):
    average_rating: float
    review_count: int

    @classmethod
    def from_rated(cls, rated: RatedMenuItem) -> "TopRatedItemOut":
        base = MenuItemOut.from_record(rated.menu_item)
        return cls(
            **base.model_dump(),
            average_rating=rated.average_rating,
            review_count=rated.review_count,
        )
